"""JWT verification service."""

from authlib.jose import JoseError, jwt
from fastapi import HTTPException
from loguru import logger

from src.shop.core.models.claims import TokenClaims
from src.shop.runtime.context import get_config


class JwtVerificationService:
    """Verify access tokens issued by JwtGeneratorService."""

    async def verify_jwt(self, token: str, *, key: str | None = None) -> TokenClaims:
        cfg = get_config()

        verification_key = key or cfg.app.jwt_signing_secret
        if not verification_key:
            raise HTTPException(status_code=500, detail="JWT signing secret not configured")

        claims_options = {
            "iss": {"essential": True, "values": [cfg.jwt.gen_issuer]},
            "aud": {"essential": True, "values": list(cfg.jwt.audiences)},
            "sub": {"essential": True},
            "exp": {"essential": True},
        }

        try:
            claims = jwt.decode(token, verification_key, claims_options=claims_options)
            # alg allowlist, checked against the verified header
            if claims.header.get("alg") not in cfg.jwt.allowed_algorithms:
                raise HTTPException(status_code=401, detail="Disallowed JWT algorithm")
            claims.validate(leeway=cfg.jwt.clock_skew)
        except (JoseError, ValueError) as exc:
            logger.debug("JWT rejected: {}", exc)
            raise HTTPException(status_code=401, detail=f"JWT error: {exc}") from exc

        return TokenClaims.from_jwt_payload(token, dict(claims))
