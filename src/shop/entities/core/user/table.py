"""User database table model."""

from sqlalchemy import JSON, Column
from sqlmodel import Field

from src.shop.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    email: str = Field(unique=True, index=True)
    password: str
    full_name: str
    is_active: bool = True
    roles: list[str] = Field(default_factory=lambda: ["user"], sa_column=Column(JSON, nullable=False))
