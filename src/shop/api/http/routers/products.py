"""Product API router with CRUD operations."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.shop.api.http.deps import auth, get_product_service
from src.shop.core.models.pagination import PaginationDto
from src.shop.core.models.product import CreateProductDto, UpdateProductDto
from src.shop.core.services import ProductService
from src.shop.entities.core.user import User, ValidRoles
from src.shop.entities.service.product import PlainProduct, Product

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=PlainProduct, status_code=201)
def create_product(
    dto: CreateProductDto,
    user: User = Depends(auth()),
    service: ProductService = Depends(get_product_service),
) -> PlainProduct:
    """Create a product owned by the caller."""
    return service.create(dto, user)


@router.get("", response_model=list[PlainProduct])
def list_products(
    pagination: Annotated[PaginationDto, Query()],
    service: ProductService = Depends(get_product_service),
) -> list[PlainProduct]:
    """List products, `limit` defaults to 10 and `offset` to 0."""
    return service.find_all(pagination)


@router.get("/{term}", response_model=PlainProduct)
def get_product(
    term: str,
    service: ProductService = Depends(get_product_service),
) -> PlainProduct:
    """Get a product by id, title or slug."""
    return service.find_one_plain(term)


@router.patch("/{id}", response_model=PlainProduct)
def update_product(
    id: uuid.UUID,
    dto: UpdateProductDto,
    user: User = Depends(auth(ValidRoles.admin)),
    service: ProductService = Depends(get_product_service),
) -> PlainProduct:
    return service.update(str(id), dto, user)


@router.delete("/{id}", response_model=Product)
def delete_product(
    id: uuid.UUID,
    user: User = Depends(auth(ValidRoles.admin)),
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Delete a product with its images and return what was removed."""
    return service.remove(str(id))
