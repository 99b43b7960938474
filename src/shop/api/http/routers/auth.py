"""Account endpoints: registration, login and token refresh."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from src.shop.api.http.deps import (
    auth,
    get_auth_service,
    get_current_user,
    get_raw_headers,
    get_user_attribute,
)
from src.shop.core.models.auth import AuthResponse, CreateUserDto, LoginUserDto
from src.shop.core.services import AuthService
from src.shop.entities.core.user import User, ValidRoles

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(
    dto: CreateUserDto,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Create an account and return it with an access token."""
    return service.register(dto)


@router.post("/login", response_model=AuthResponse)
def login(
    dto: LoginUserDto,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    return service.login(dto)


@router.get("/check-status", response_model=AuthResponse)
def check_status(
    user: User = Depends(auth()),
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Re-issue a token for the caller."""
    return service.check_status(user)


@router.get("/private")
async def private_route(
    request: Request,
    user: User = Depends(get_current_user),
    user_email: str = Depends(get_user_attribute("email")),
    raw_headers: list[str] = Depends(get_raw_headers),
) -> dict[str, Any]:
    """Echo the authenticated caller and the request headers."""
    return {
        "ok": True,
        "user": user,
        "user_email": user_email,
        "raw_headers": raw_headers,
        "headers": dict(request.headers),
    }


@router.get("/private2")
async def private_route2(
    user: User = Depends(auth(ValidRoles.super_user, ValidRoles.user)),
) -> dict[str, Any]:
    return {"ok": True, "user": user}


@router.get("/private3")
async def private_route3(
    user: User = Depends(auth(ValidRoles.user)),
) -> dict[str, Any]:
    return {"ok": True, "user": user}
