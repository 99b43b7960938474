"""Unit tests for access token issue and verification."""

import pytest
from authlib.jose import jwt
from fastapi import HTTPException

from src.shop.runtime.config.config_data import ConfigData, JWTConfig
from src.shop.runtime.context import get_config, with_context


class TestJwtGeneration:
    def test_disallowed_algorithm(self, jwt_generate_service):
        with pytest.raises(HTTPException) as exc_info:
            jwt_generate_service.generate_jwt(subject="user-1", algorithm="HS512")
        assert exc_info.value.status_code == 500

    def test_registered_claims_cannot_be_overridden(self, jwt_generate_service):
        token = jwt_generate_service.generate_access_token(
            "user-1", roles=["user"], sub="someone-else"
        )
        claims = jwt.decode(token, get_config().app.jwt_signing_secret)
        assert claims["sub"] == "user-1"

    def test_each_token_has_unique_jti(self, jwt_generate_service):
        first = jwt_generate_service.generate_access_token("user-1")
        second = jwt_generate_service.generate_access_token("user-1")
        assert first != second


class TestJwtVerification:
    async def test_roundtrip(self, jwt_generate_service, jwt_verify_service):
        token = jwt_generate_service.generate_access_token(
            "user-123", roles=["admin", "user"], email="user@example.com"
        )

        claims = await jwt_verify_service.verify_jwt(token)

        assert claims.subject == "user-123"
        assert claims.email == "user@example.com"
        assert claims.roles == ["admin", "user"]
        assert claims.issuer == "shop-api"
        assert claims.jti is not None
        assert claims.raw_token == token

    async def test_custom_claims_are_kept(self, jwt_generate_service, jwt_verify_service):
        token = jwt_generate_service.generate_access_token("user-1", tenant="acme")
        claims = await jwt_verify_service.verify_jwt(token)
        assert claims.custom_claims == {"tenant": "acme"}

    async def test_rejects_foreign_signature(self, jwt_generate_service, jwt_verify_service):
        token = jwt_generate_service.generate_jwt(subject="user-1", secret="another-secret")

        with pytest.raises(HTTPException) as exc_info:
            await jwt_verify_service.verify_jwt(token)
        assert exc_info.value.status_code == 401

    async def test_rejects_expired_token(self, jwt_generate_service, jwt_verify_service):
        token = jwt_generate_service.generate_jwt(subject="user-1", expires_in_seconds=-3600)

        with pytest.raises(HTTPException) as exc_info:
            await jwt_verify_service.verify_jwt(token)
        assert exc_info.value.status_code == 401

    async def test_rejects_wrong_audience(self, jwt_generate_service, jwt_verify_service):
        token = jwt_generate_service.generate_jwt(subject="user-1", audience="other-api")

        with pytest.raises(HTTPException) as exc_info:
            await jwt_verify_service.verify_jwt(token)
        assert exc_info.value.status_code == 401

    async def test_rejects_wrong_issuer(self, jwt_generate_service, jwt_verify_service):
        token = jwt_generate_service.generate_jwt(subject="user-1", issuer="someone-else")

        with pytest.raises(HTTPException):
            await jwt_verify_service.verify_jwt(token)

    async def test_clock_skew_is_tolerated(self, jwt_generate_service, jwt_verify_service):
        token = jwt_generate_service.generate_jwt(subject="user-1", expires_in_seconds=-10)

        with with_context(ConfigData(jwt=JWTConfig(clock_skew=60))):
            claims = await jwt_verify_service.verify_jwt(token)
        assert claims.subject == "user-1"

    async def test_rejects_garbage(self, jwt_verify_service):
        with pytest.raises(HTTPException) as exc_info:
            await jwt_verify_service.verify_jwt("not.a.token")
        assert exc_info.value.status_code == 401
