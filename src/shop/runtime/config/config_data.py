"""Typed view of the `config:` section of config.yaml."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field
from sqlalchemy.engine import make_url

Environment = Literal["development", "production", "test"]


class CORSConfig(BaseModel):
    origins: list[str] = ["http://localhost:3000", "http://localhost:4200"]
    allow_credentials: bool = True
    allow_methods: list[str] = ["GET", "POST", "PATCH", "DELETE", "OPTIONS"]
    allow_headers: list[str] = ["*"]


class AppConfig(BaseModel):
    environment: Environment = "development"
    host: str = "localhost"
    port: int = 8000
    jwt_signing_secret: str | None = Field(
        default=None, description="HMAC secret for access tokens; required in production"
    )
    cors: CORSConfig = Field(default_factory=CORSConfig)


class JWTConfig(BaseModel):
    """Access token issue and validation settings."""

    allowed_algorithms: list[str] = ["HS256"]
    gen_issuer: str = Field(default="shop-api", description="`iss` of issued tokens")
    audiences: list[str] = Field(
        default_factory=lambda: ["shop-api"],
        description="Accepted `aud` values; the first is used when issuing",
    )
    expires_in_seconds: int = 2 * 3600
    clock_skew: int = Field(default=60, description="Leeway in seconds for exp/nbf/iat")


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///./database.db"
    pool_size: int = 20
    max_overflow: int = 10
    pool_timeout: int = 30
    pool_recycle: int = 1800
    echo: bool = False
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable holding the password; overrides the URL's",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def connection_string(self) -> str:
        """The URL with the password from `password_env_var` applied, if any."""
        if self.is_sqlite:
            return self.url

        url = make_url(self.url)
        password = os.getenv(self.password_env_var) if self.password_env_var else None
        if password:
            url = url.set(password=password)
        return url.render_as_string(hide_password=False)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "plain"] = Field(
        default="json", description="Format of the file sink"
    )
    file: str | None = Field(default=None, description="Log file path; empty disables")
    max_size_mb: int = 10
    backup_count: int = 5


class SecurityConfig(BaseModel):
    bcrypt_rounds: int = Field(default=10, ge=4, le=31, description="bcrypt work factor")


class SeedConfig(BaseModel):
    enabled: bool = Field(
        default=True, description="Expose /seed (never served in production)"
    )


class ConfigData(BaseModel):
    """Root of the configuration tree."""

    app: AppConfig = Field(default_factory=AppConfig)
    jwt: JWTConfig = Field(default_factory=JWTConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
