"""Product repository for database operations."""

from sqlalchemy import delete, func, literal, or_
from sqlmodel import Session, select

from src.shop.core.errors import NotFound

from .entity import SCALAR_FIELDS, Product
from .table import ProductImageTable, ProductTable


class ProductRepository:
    """Data-access layer for products and their images."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, product_id: str) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return self._to_entity(row)

    def find_by_title_or_slug(self, term: str) -> list[Product]:
        """Return every product whose title or slug matches `term`, case-insensitively.

        The database folds both sides (UPPER for the title, LOWER for the
        slug). Images are loaded eagerly. Rows come back in creation order.
        """
        statement = (
            select(ProductTable)
            .where(
                or_(
                    func.upper(ProductTable.title) == func.upper(literal(term)),
                    func.lower(ProductTable.slug) == func.lower(literal(term)),
                )
            )
            .order_by(ProductTable.created_at, ProductTable.id)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def list(self, limit: int, offset: int) -> list[Product]:
        statement = (
            select(ProductTable)
            .order_by(ProductTable.created_at, ProductTable.id)
            .offset(offset)
            .limit(limit)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def create(self, product: Product) -> Product:
        """Persist a product together with its images in one flush."""
        row = ProductTable(
            id=product.id,
            created_at=product.created_at,
            updated_at=product.updated_at,
            user_id=product.user_id,
            **{field: getattr(product, field) for field in SCALAR_FIELDS},
        )
        row.images = [ProductImageTable(url=image.url) for image in product.images]
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def save(self, product: Product, replace_images: bool = False) -> None:
        """Write the scalar fields and owner of `product` onto its stored row.

        With `replace_images` the row's image collection is swapped for new
        records built from `product.images`. The row is re-read so a preceding
        `delete_images` in the same session is observed.
        """
        row = self._session.get(ProductTable, product.id, populate_existing=True)
        if row is None:
            raise NotFound(product.id)

        for field in SCALAR_FIELDS:
            setattr(row, field, getattr(product, field))
        row.user_id = product.user_id

        if replace_images:
            row.images = [ProductImageTable(url=image.url) for image in product.images]

        self._session.add(row)
        self._session.flush()

    def delete_images(self, product_id: str) -> int:
        """Delete every image row belonging to the product."""
        statement = delete(ProductImageTable).where(
            ProductImageTable.product_id == product_id  # type: ignore[arg-type]
        )
        result = self._session.exec(statement)  # type: ignore[call-overload]
        return result.rowcount

    def delete(self, product_id: str) -> bool:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False
        # cascades to the image rows
        self._session.delete(row)
        self._session.flush()
        return True

    def delete_all(self) -> int:
        """Delete every product and image. Returns the number of products removed."""
        self._session.exec(delete(ProductImageTable))  # type: ignore[call-overload]
        result = self._session.exec(delete(ProductTable))  # type: ignore[call-overload]
        return result.rowcount

    def _to_entity(self, row: ProductTable) -> Product:
        return Product.model_validate(row, from_attributes=True)
