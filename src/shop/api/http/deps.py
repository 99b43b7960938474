"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import Depends, HTTPException, Request

from src.shop.api.http.app_data import ApplicationDependencies
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
from src.shop.runtime.context import get_config


def get_db_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_jwt_verify_service(request: Request) -> JwtVerificationService:
    """Get the JWT verification service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.jwt_verify_service


def get_jwt_generation_service(request: Request) -> JwtGeneratorService:
    """Get the JWT generation service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.jwt_generation_service


def get_password_service(request: Request) -> PasswordService:
    """Get the password hashing service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.password_service


def get_product_service(
    db_service: DbSessionService = Depends(get_db_service),
) -> ProductService:
    return ProductService(db_service)


def get_auth_service(
    db_service: DbSessionService = Depends(get_db_service),
    jwt_generator: JwtGeneratorService = Depends(get_jwt_generation_service),
    password_service: PasswordService = Depends(get_password_service),
) -> AuthService:
    return AuthService(db_service, jwt_generator, password_service)


def get_seed_service(
    db_service: DbSessionService = Depends(get_db_service),
    product_service: ProductService = Depends(get_product_service),
    password_service: PasswordService = Depends(get_password_service),
) -> SeedService:
    return SeedService(db_service, product_service, password_service)


def require_seed_enabled() -> None:
    """Refuse seeding in production or when it is switched off."""
    cfg = get_config()
    if cfg.app.environment == "production" or not cfg.seed.enabled:
        raise HTTPException(status_code=403, detail="Seeding is disabled")


async def get_current_user(
    request: Request,
    db_service: DbSessionService = Depends(get_db_service),
    jwt_verify: JwtVerificationService = Depends(get_jwt_verify_service),
) -> User:
    """Authenticate the request using a Bearer token issued by this service."""

    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing Bearer token")

    token = auth_header.split(" ", 1)[1]
    claims = await jwt_verify.verify_jwt(token)

    with db_service.get_session() as session:
        user = UserRepository(session).get(claims.subject)

    if user is None:
        raise HTTPException(status_code=401, detail="Token not valid")
    if not user.is_active:
        raise HTTPException(status_code=401, detail="User is inactive, talk with an admin")

    request.state.claims = claims
    request.state.roles = set(claims.roles)
    return user


def auth(*roles: str) -> Callable[..., Any]:
    """Create a dependency returning the authenticated user.

    With roles given the user must hold at least one of them. Roles are read
    from the stored user, not from the token.
    """
    required = list(roles)

    async def dep(user: User = Depends(get_current_user)) -> User:
        if required and not user.has_any_role(required):
            raise HTTPException(
                status_code=403,
                detail=f"User {user.full_name} need a valid role: [{', '.join(required)}]",
            )
        return user

    return dep


def get_user_attribute(name: str) -> Callable[..., Any]:
    """Create a dependency returning one attribute of the authenticated user."""

    async def dep(user: User = Depends(get_current_user)) -> Any:
        if not hasattr(user, name):
            raise HTTPException(status_code=500, detail=f"User has no attribute {name}")
        return getattr(user, name)

    return dep


def get_raw_headers(request: Request) -> list[str]:
    """Return the request headers as a flat `[name, value, ...]` list."""
    raw = request.headers.raw
    if not raw:
        raise HTTPException(status_code=500, detail="Headers not found (request)")
    return [part.decode("latin-1") for pair in raw for part in pair]
