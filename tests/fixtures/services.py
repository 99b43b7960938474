"""Service fixtures for testing."""

from collections.abc import Callable

import pytest

from src.shop.core.services import (
    AuthService,
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
    PasswordService,
    ProductService,
    SeedService,
)
from src.shop.entities.core.user import User, UserRepository

TEST_PASSWORD = "Abc123"


@pytest.fixture
def password_service() -> PasswordService:
    # Lowest bcrypt work factor keeps hashing fast
    return PasswordService(rounds=4)


@pytest.fixture
def jwt_generate_service() -> JwtGeneratorService:
    return JwtGeneratorService()


@pytest.fixture
def jwt_verify_service() -> JwtVerificationService:
    return JwtVerificationService()


@pytest.fixture
def product_service(db_service: DbSessionService) -> ProductService:
    return ProductService(db_service)


@pytest.fixture
def auth_service(
    db_service: DbSessionService,
    jwt_generate_service: JwtGeneratorService,
    password_service: PasswordService,
) -> AuthService:
    return AuthService(db_service, jwt_generate_service, password_service)


@pytest.fixture
def seed_service(
    db_service: DbSessionService,
    product_service: ProductService,
    password_service: PasswordService,
) -> SeedService:
    return SeedService(db_service, product_service, password_service)


@pytest.fixture
def user_factory(
    db_service: DbSessionService, password_service: PasswordService
) -> Callable[..., User]:
    """Insert a user with the shared test password."""
    counter = {"n": 0}

    def _create(
        email: str | None = None,
        full_name: str = "Test User",
        roles: list[str] | None = None,
        is_active: bool = True,
    ) -> User:
        counter["n"] += 1
        user = User(
            email=email or f"user{counter['n']}@example.com",
            full_name=full_name,
            roles=roles or ["user"],
            is_active=is_active,
        )
        with db_service.session_scope() as session:
            return UserRepository(session).create(
                user, password_service.hash(TEST_PASSWORD)
            )

    return _create


@pytest.fixture
def owner(user_factory: Callable[..., User]) -> User:
    return user_factory(email="owner@example.com", full_name="Owner")


@pytest.fixture
def admin(user_factory: Callable[..., User]) -> User:
    return user_factory(email="admin@example.com", full_name="Admin", roles=["admin"])
