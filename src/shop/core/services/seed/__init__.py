from .seed_data import SEED_PRODUCTS, SEED_USERS
from .seed_service import SeedService

__all__ = ["SEED_PRODUCTS", "SEED_USERS", "SeedService"]
