"""Product catalog operations.

Coordinates writes of a product together with its ordered image set. Reads
run on short-lived sessions; the update runs its image replacement and
parent save inside one unit of work so a failure leaves the stored image set
untouched.
"""

from typing import Any

from loguru import logger

from src.shop.core.errors import InvalidArgument, NotFound
from src.shop.core.models.pagination import PaginationDto
from src.shop.core.models.product import CreateProductDto, UpdateProductDto
from src.shop.core.services.database.db_session import DbSessionService
from src.shop.core.services.database.errors import translate_db_error
from src.shop.core.services.product.term_resolver import is_uuid, resolve
from src.shop.entities.core.user import User
from src.shop.entities.service.product import (
    PlainProduct,
    Product,
    ProductImage,
    ProductRepository,
)


class ProductService:
    def __init__(self, db_service: DbSessionService, log: Any = None) -> None:
        self._db = db_service
        self._log = log or logger.bind(service="ProductsService")

    def create(self, dto: CreateProductDto, owner: User) -> PlainProduct:
        """Create a product and its images in a single write."""
        data = dto.model_dump(exclude_none=True)
        images = data.pop("images", [])

        product = Product(
            **data,
            images=[ProductImage(url=url) for url in images],
            user_id=owner.id,
        )

        try:
            with self._db.session_scope() as session:
                created = ProductRepository(session).create(product)
        except Exception as error:
            translate_db_error(error, self._log)

        self._log.info("Product {} created by {}", created.id, owner.id)
        return created.to_plain()

    def find_all(self, pagination: PaginationDto) -> list[PlainProduct]:
        page = pagination.normalize()
        with self._db.get_session() as session:
            products = ProductRepository(session).list(limit=page.limit, offset=page.offset)
        return [product.to_plain() for product in products]

    def find_one(self, term: str) -> Product:
        with self._db.get_session() as session:
            return resolve(ProductRepository(session), term, self._log)

    def find_one_plain(self, term: str) -> PlainProduct:
        return self.find_one(term).to_plain()

    def update(self, product_id: str, dto: UpdateProductDto, owner: User) -> PlainProduct:
        """Apply a partial update, replacing the image set when one is supplied.

        `images` present (even empty) deletes the existing image rows and
        inserts the new ones; `images` absent leaves them untouched. The owner
        is always refreshed. Everything after the preload runs in one unit of
        work and the result is a fresh read of what was committed.
        """
        _require_uuid(product_id)
        patch = dto.model_dump(exclude_unset=True)
        images = patch.pop("images", None)
        # null fields are treated as absent
        patch = {field: value for field, value in patch.items() if value is not None}

        candidate = self._preload(product_id, patch)

        try:
            with self._db.unit_of_work(log=self._log) as session:
                repository = ProductRepository(session)

                if images is not None:
                    repository.delete_images(product_id)
                    candidate.images = [ProductImage(url=url) for url in images]

                candidate.user_id = owner.id
                repository.save(candidate, replace_images=images is not None)
        except Exception as error:
            translate_db_error(error, self._log)

        self._log.info("Product {} updated by {}", product_id, owner.id)
        return self.find_one_plain(product_id)

    def remove(self, product_id: str) -> Product:
        """Delete a product and its images, returning its last known state."""
        _require_uuid(product_id)
        product = self.find_one(product_id)

        try:
            with self._db.session_scope() as session:
                ProductRepository(session).delete(product.id)
        except Exception as error:
            translate_db_error(error, self._log)

        self._log.info("Product {} removed", product.id)
        return product

    def delete_all(self) -> int:
        """Delete every product. Maintenance and seeding only."""
        try:
            with self._db.session_scope() as session:
                deleted = ProductRepository(session).delete_all()
        except Exception as error:
            translate_db_error(error, self._log)

        self._log.warning("Deleted all products ({})", deleted)
        return deleted

    def _preload(self, product_id: str, patch: dict[str, Any]) -> Product:
        """Merge `patch` onto the stored product without writing it."""
        with self._db.get_session() as session:
            existing = ProductRepository(session).get(product_id)

        if existing is None:
            raise NotFound(product_id)

        return Product.model_validate({**existing.model_dump(), **patch})


def _require_uuid(product_id: str) -> None:
    if not is_uuid(product_id):
        raise InvalidArgument("Validation failed (uuid is expected)")
