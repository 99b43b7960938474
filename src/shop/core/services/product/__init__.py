from .product_service import ProductService
from .term_resolver import is_uuid, resolve

__all__ = ["ProductService", "is_uuid", "resolve"]
