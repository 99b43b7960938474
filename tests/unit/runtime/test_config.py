"""Unit tests for configuration loading and the context override."""

from pathlib import Path

import pytest

from src.shop.runtime.config.config_data import (
    ConfigData,
    DatabaseConfig,
    JWTConfig,
    SecurityConfig,
)
from src.shop.runtime.config.config_template import (
    load_config,
    load_templated_yaml,
    substitute_env_vars,
)
from src.shop.runtime.context import get_config, with_context


class TestSubstituteEnvVars:
    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("SHOP_TEST_VAR", raising=False)
        assert substitute_env_vars("x: ${SHOP_TEST_VAR:-fallback}") == "x: fallback"

    def test_environment_value_wins(self, monkeypatch):
        monkeypatch.setenv("SHOP_TEST_VAR", "real")
        assert substitute_env_vars("x: ${SHOP_TEST_VAR:-fallback}") == "x: real"

    def test_required_variable_missing(self, monkeypatch):
        monkeypatch.delenv("SHOP_TEST_VAR", raising=False)
        with pytest.raises(ValueError):
            substitute_env_vars("x: ${SHOP_TEST_VAR}")


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "absent.yaml")
        assert config == ConfigData()

    def test_loads_config_section(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("APP_ENVIRONMENT", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(
            "config:\n"
            "  app:\n"
            "    jwt_signing_secret: s3cret\n"
            "  security:\n"
            "    bcrypt_rounds: 5\n"
        )

        config = load_templated_yaml(path)

        assert config.app.jwt_signing_secret == "s3cret"
        assert config.security.bcrypt_rounds == 5
        assert config.jwt.expires_in_seconds == JWTConfig().expires_in_seconds

    def test_production_requires_signing_secret(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("APP_ENVIRONMENT", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  app:\n    environment: production\n")

        with pytest.raises(ValueError):
            load_templated_yaml(path)


class TestDatabaseConfig:
    def test_sqlite_connection_string_is_unchanged(self):
        config = DatabaseConfig(url="sqlite:///./test.db")
        assert config.is_sqlite
        assert config.connection_string == "sqlite:///./test.db"

    def test_password_from_environment_overrides_url(self, monkeypatch):
        monkeypatch.setenv("SHOP_TEST_DB_PASSWORD", "from-env")
        config = DatabaseConfig(
            url="postgresql://shop:inline@db:5432/shop",
            password_env_var="SHOP_TEST_DB_PASSWORD",
        )
        assert config.connection_string == "postgresql://shop:from-env@db:5432/shop"

    def test_url_password_kept_without_environment_value(self, monkeypatch):
        monkeypatch.delenv("SHOP_TEST_DB_PASSWORD", raising=False)
        config = DatabaseConfig(
            url="postgresql://shop:inline@db:5432/shop",
            password_env_var="SHOP_TEST_DB_PASSWORD",
        )
        assert config.connection_string == "postgresql://shop:inline@db:5432/shop"


class TestWithContext:
    def test_partial_override_inherits_rest(self):
        before = get_config()

        with with_context(ConfigData(security=SecurityConfig(bcrypt_rounds=4))):
            inside = get_config()
            assert inside.security.bcrypt_rounds == 4
            assert inside.jwt == before.jwt
            assert inside.app.jwt_signing_secret == before.app.jwt_signing_secret

        assert get_config() == before

    def test_rejects_non_config(self):
        with pytest.raises(ValueError):
            with with_context({"app": {}}):  # type: ignore[arg-type]
                pass
