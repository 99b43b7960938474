"""Entities module with hybrid entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with business logic
- table.py: Database persistence model
- repository.py: Data access layer

Importing this package registers every table with the SQLModel metadata.
"""

from .core.user import User, UserRepository, UserTable
from .service.product import (
    PlainProduct,
    Product,
    ProductImageTable,
    ProductRepository,
    ProductTable,
)

__all__ = [
    "User",
    "UserTable",
    "UserRepository",
    "PlainProduct",
    "Product",
    "ProductTable",
    "ProductImageTable",
    "ProductRepository",
]
