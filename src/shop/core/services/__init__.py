"""Core services exports."""

# Database Service
from .database.db_session import DbSessionService
from .database.unit_of_work import UnitOfWork

# JWT Services
from .jwt.jwt_gen import JwtGeneratorService
from .jwt.jwt_verify import JwtVerificationService
from .password import PasswordService

# Catalog Services
from .product.product_service import ProductService
from .seed.seed_service import SeedService

# User Services
from .user.auth_service import AuthService

__all__ = [
    # Database Service
    "DbSessionService",
    "UnitOfWork",
    # JWT Services
    "JwtGeneratorService",
    "JwtVerificationService",
    "PasswordService",
    # Catalog Services
    "ProductService",
    "SeedService",
    # User Services
    "AuthService",
]
