"""Verified access token claims."""

from typing import Any

from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """Claims of an access token issued by this service."""

    subject: str = Field(description="Subject (sub), the user id")
    issuer: str = Field(default="", description="Issuer (iss)")
    audience: str | list[str] = Field(default_factory=list, description="Audience (aud)")
    expires_at: int = Field(description="Expiration time (exp)")
    issued_at: int = Field(description="Issued at (iat)")
    not_before: int | None = Field(default=None, description="Not before (nbf)")
    jti: str | None = Field(default=None, description="JWT ID")
    email: str | None = Field(default=None, description="Email address")
    roles: list[str] = Field(default_factory=list, description="User roles")
    raw_token: str = Field(default="", description="Original JWT token")
    custom_claims: dict[str, Any] = Field(
        default_factory=dict, description="Claims without a dedicated field"
    )

    @classmethod
    def from_jwt_payload(cls, token: str, claims: dict[str, Any]) -> "TokenClaims":
        remaining = dict(claims)
        roles = remaining.pop("roles", [])
        if isinstance(roles, str):
            roles = roles.split()
        return cls(
            raw_token=token,
            subject=str(remaining.pop("sub", "")),
            issuer=remaining.pop("iss", "") or "",
            audience=remaining.pop("aud", []),
            expires_at=remaining.pop("exp"),
            issued_at=remaining.pop("iat"),
            not_before=remaining.pop("nbf", None),
            jti=remaining.pop("jti", None),
            email=remaining.pop("email", None),
            roles=list(roles),
            custom_claims=remaining,
        )
