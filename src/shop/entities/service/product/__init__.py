"""Entity package: Product."""

from .entity import PlainProduct, Product, ProductImage, ProductOwner, normalize_slug
from .repository import ProductRepository
from .table import ProductImageTable, ProductTable

__all__ = [
    "PlainProduct",
    "Product",
    "ProductImage",
    "ProductImageTable",
    "ProductOwner",
    "ProductRepository",
    "ProductTable",
    "normalize_slug",
]
