"""Product database table models."""

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, Relationship, SQLModel

from src.shop.entities.core._base import EntityTable
from src.shop.entities.core.user.table import UserTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    Images are owned by the product: replacing the collection deletes the
    orphans and deleting the product deletes its images.
    """

    title: str = Field(unique=True, index=True)
    price: float = Field(default=0)
    description: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    slug: str = Field(unique=True, index=True)
    stock: int = Field(default=0)
    sizes: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    gender: str
    tags: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    user_id: str | None = Field(default=None, foreign_key="usertable.id", index=True)

    images: list["ProductImageTable"] = Relationship(
        back_populates="product",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "lazy": "selectin",
            "order_by": "ProductImageTable.id",
        },
    )
    user: UserTable | None = Relationship(sa_relationship_kwargs={"lazy": "selectin"})


class ProductImageTable(SQLModel, table=True):
    """Database persistence model for product images."""

    id: int | None = Field(default=None, primary_key=True)
    url: str
    product_id: str = Field(foreign_key="producttable.id", ondelete="CASCADE", index=True)

    product: ProductTable | None = Relationship(back_populates="images")
