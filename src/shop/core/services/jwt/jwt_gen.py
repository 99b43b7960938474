"""Access token issuing."""

import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import JoseError, jwt
from fastapi import HTTPException
from loguru import logger

from src.shop.runtime.context import get_config

# Claims owned by the issuer; callers cannot override them
_REGISTERED_CLAIMS = frozenset({"iss", "sub", "aud", "exp", "iat", "nbf", "jti"})


class JwtGeneratorService:
    """Sign JWTs for users of this API.

    Tokens are HS256 by default, signed with `app.jwt_signing_secret` and
    stamped with the issuer, audiences and lifetime from the `jwt` config.
    """

    def generate_jwt(
        self,
        subject: str,
        claims: dict[str, Any] | None = None,
        expires_in_seconds: int | None = None,
        issuer: str | None = None,
        audience: str | list[str] | None = None,
        algorithm: str = "HS256",
        secret: str | None = None,
    ) -> str:
        """Return a signed compact JWT for `subject`.

        Unset arguments fall back to configuration. Every token carries a
        random `jti`.

        Raises:
            HTTPException: 500 when no secret is configured, the algorithm
                is not allowed, or signing fails.
        """
        config = get_config()

        secret = secret or config.app.jwt_signing_secret
        if not secret:
            raise HTTPException(status_code=500, detail="JWT signing secret not configured")

        if algorithm not in config.jwt.allowed_algorithms:
            logger.debug(
                "Rejected signing algorithm {} (allowed: {})",
                algorithm,
                config.jwt.allowed_algorithms,
            )
            raise HTTPException(status_code=500, detail=f"Algorithm {algorithm} not allowed")

        issued_at = int(time.time())
        payload: dict[str, Any] = {
            key: value
            for key, value in (claims or {}).items()
            if key not in _REGISTERED_CLAIMS
        }
        payload.update(
            iss=issuer or config.jwt.gen_issuer,
            sub=subject,
            aud=audience or config.jwt.audiences,
            iat=issued_at,
            nbf=issued_at,
            exp=issued_at + (expires_in_seconds or config.jwt.expires_in_seconds),
            jti=generate_token(16),
        )

        try:
            token = jwt.encode({"alg": algorithm, "typ": "JWT"}, payload, secret)
        except JoseError as e:
            raise HTTPException(status_code=500, detail=f"JWT encoding failed: {e}") from e
        return token.decode() if isinstance(token, bytes) else token

    def generate_access_token(
        self,
        user_id: str,
        roles: list[str] | None = None,
        expires_in_seconds: int | None = None,
        **extra_claims: Any,
    ) -> str:
        """Issue the access token returned by register, login and check-status.

        Example:
            token = generate_access_token(user.id, roles=["admin"], email=user.email)
        """
        claims: dict[str, Any] = dict(extra_claims)
        if roles:
            claims["roles"] = list(roles)

        return self.generate_jwt(
            subject=user_id,
            claims=claims,
            expires_in_seconds=expires_in_seconds,
        )
