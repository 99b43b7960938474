"""Request and response models for authentication endpoints."""

import re

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.shop.entities.core.user import User

# Upper-case letter, lower-case letter, and a digit or symbol
_PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Z])(?=.*[a-z])(?=.*(\d|\W)).*$")


class CreateUserDto(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=50)
    full_name: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def _check_password_strength(cls, value: str) -> str:
        if not _PASSWORD_PATTERN.match(value):
            raise ValueError(
                "The password must have a Uppercase, lowercase letter and a number"
            )
        return value


class LoginUserDto(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=50)


class AuthResponse(BaseModel):
    """Authenticated user together with a freshly issued access token."""

    id: str
    email: str
    full_name: str
    is_active: bool
    roles: list[str]
    token: str

    @classmethod
    def from_user(cls, user: User, token: str) -> "AuthResponse":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            is_active=user.is_active,
            roles=list(user.roles),
            token=token,
        )
