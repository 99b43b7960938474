"""User domain entity."""

from enum import StrEnum
from typing import Any

from pydantic import Field, field_validator

from src.shop.entities.core._base import Entity


class ValidRoles(StrEnum):
    admin = "admin"
    super_user = "super-user"
    user = "user"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class User(Entity):
    """User entity representing an account in the system.

    The password hash is deliberately not part of the entity; it only exists
    on the table model and is read through `UserRepository.get_credentials`.
    """

    email: str = Field(description="Unique, lower-cased email address")
    full_name: str = Field(description="User's full name")
    is_active: bool = Field(default=True, description="Inactive users cannot authenticate")
    roles: list[str] = Field(
        default_factory=lambda: [ValidRoles.user.value],
        description="Role tags granted to the user",
    )

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return normalize_email(value)

    def has_any_role(self, roles: set[str] | list[str] | tuple[str, ...]) -> bool:
        return any(role in self.roles for role in roles)

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.email == other.email
            and self.full_name == other.full_name
            and self.is_active == other.is_active
            and self.roles == other.roles
        )

    def __hash__(self) -> int:
        return hash((self.id, self.email))
