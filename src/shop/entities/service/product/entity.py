"""Entity: Product."""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from src.shop.entities.core._base import Entity

Gender = Literal["men", "women", "kid", "unisex"]

# Scalar columns copied between entity and table on save
SCALAR_FIELDS = (
    "title",
    "price",
    "description",
    "slug",
    "stock",
    "sizes",
    "gender",
    "tags",
)


def normalize_slug(value: str) -> str:
    """Lower-case, spaces to underscores, apostrophes dropped."""
    return value.lower().replace(" ", "_").replace("'", "")


class ProductImage(BaseModel):
    """An image URL owned by exactly one product."""

    id: int | None = None
    url: str


class ProductOwner(BaseModel):
    """Summary of the user that created or last modified a product."""

    id: str
    email: str
    full_name: str


class ProductFields(BaseModel):
    title: str = Field(min_length=1, description="Unique product title")
    price: float = Field(default=0, ge=0)
    description: str | None = None
    slug: str | None = Field(default=None, description="URL-safe unique identifier")
    stock: int = Field(default=0, ge=0)
    sizes: list[str] = Field(default_factory=list)
    gender: Gender
    tags: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _derive_slug(self) -> "ProductFields":
        # A missing slug falls back to the title; every slug is normalized
        self.slug = normalize_slug(self.slug or self.title)
        return self


class Product(Entity, ProductFields):
    """Product entity with its image records.

    Images are ordered by insertion. `user_id` points at the owner, `user`
    carries the owner summary when the product was read from storage.
    """

    images: list[ProductImage] = Field(default_factory=list)
    user_id: str | None = None
    user: ProductOwner | None = None

    def to_plain(self) -> "PlainProduct":
        """Flatten the image records to their URLs."""
        data = self.model_dump(exclude={"images"})
        return PlainProduct(**data, images=[image.url for image in self.images])

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.model_dump(include=set(SCALAR_FIELDS)) == other.model_dump(include=set(SCALAR_FIELDS))
            and [image.url for image in self.images] == [image.url for image in other.images]
        )

    def __hash__(self) -> int:
        return hash((self.id, self.slug))


class PlainProduct(Entity, ProductFields):
    """Product as returned to clients: images are a flat URL list."""

    images: list[str] = Field(default_factory=list)
    user_id: str | None = None
    user: ProductOwner | None = None
