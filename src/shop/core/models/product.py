"""Request models for product endpoints."""

from pydantic import BaseModel, Field

from src.shop.entities.service.product.entity import Gender


class CreateProductDto(BaseModel):
    title: str = Field(min_length=1)
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    slug: str | None = Field(default=None, min_length=1)
    stock: int | None = Field(default=None, ge=0)
    sizes: list[str]
    gender: Gender
    tags: list[str] | None = None
    images: list[str] | None = None


class UpdateProductDto(BaseModel):
    """Partial update. Only fields present in the request are applied.

    `images`, when present, replaces the whole image set; `[]` clears it.
    """

    title: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    slug: str | None = Field(default=None, min_length=1)
    stock: int | None = Field(default=None, ge=0)
    sizes: list[str] | None = None
    gender: Gender | None = None
    tags: list[str] | None = None
    images: list[str] | None = None
