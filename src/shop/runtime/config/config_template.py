"""Load `config.yaml` with environment placeholders into ConfigData.

Placeholders:
    ${NAME}            required, fails when NAME is unset
    ${NAME:-default}   optional, `default` when NAME is unset
    ${NAME:?message}   required, fails with `message`

Before substitution, every `<ENV>_NAME` variable of the active environment
(`APP_ENVIRONMENT`, default development) is copied onto `NAME`, so
`PRODUCTION_DATABASE_URL` wins over `DATABASE_URL` in production.
"""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.shop.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _resolve_placeholder(match: re.Match[str]) -> str:
    expression = match.group(1)

    if ":-" in expression:
        name, default = expression.split(":-", 1)
        return os.getenv(name, default)

    if ":?" in expression:
        name, message = expression.split(":?", 1)
    else:
        name, message = expression, "not set"

    value = os.getenv(name)
    if value is None:
        raise ValueError(f"Required environment variable {name}: {message}")
    return value


def substitute_env_vars(text: str) -> str:
    """Replace every placeholder in `text` with its environment value."""
    return _PLACEHOLDER.sub(_resolve_placeholder, text)


def _apply_environment_overrides(env_mode: str) -> None:
    prefix = f"{env_mode.upper()}_"
    overrides = {
        name[len(prefix):]: value
        for name, value in os.environ.items()
        if name.startswith(prefix)
    }
    if overrides:
        logger.info("Applying {} overrides: {}", env_mode, sorted(overrides))
    os.environ.update(overrides)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """Parse the `config:` section of a templated YAML file.

    Raises:
        ValueError: Missing required variables, malformed YAML, invalid values,
            or a production config without a token signing secret.
    """
    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.info("Loading configuration for environment: {}", env_mode)
    _apply_environment_overrides(env_mode)

    content = substitute_env_vars(file_path.read_text())

    try:
        loaded = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not isinstance(loaded, dict):
        raise ValueError(f"{file_path} does not contain a mapping")

    try:
        config = ConfigData.model_validate(loaded.get("config") or {})
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    if config.app.environment == "production" and not config.app.jwt_signing_secret:
        raise ValueError("app.jwt_signing_secret must be set in production")

    return config


def load_config(file_path: Path) -> ConfigData:
    """Load `file_path` when present, falling back to built-in defaults."""
    if not file_path.exists():
        logger.warning("{} not found; using default configuration", file_path)
        return ConfigData()
    return load_templated_yaml(file_path)
