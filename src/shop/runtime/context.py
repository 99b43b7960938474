"""Process-wide application context.

Configuration is loaded once from `config.yaml` (or the file named by
`SHOP_CONFIG_FILE`) and exposed through a ContextVar, so tests and tasks can
swap in a partial override without touching global state.
"""

import os
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from src.shop.runtime.config.config_data import ConfigData
from src.shop.runtime.config.config_template import load_config


@dataclass(frozen=True)
class AppContext:
    """Application-wide state carried by the context variable."""

    config: ConfigData


def _config_path() -> Path:
    return Path(os.getenv("SHOP_CONFIG_FILE", "config.yaml"))


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=load_config(_config_path()))
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    return _app_context.set(context)


def _explicit_fields(model: BaseModel) -> dict[str, Any]:
    """Dump only the fields that were set explicitly, at any depth.

    A nested model is included when it was assigned explicitly or when any of
    its own fields were.
    """
    result: dict[str, Any] = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            nested = _explicit_fields(value)
            if nested:
                result[name] = nested
            elif name in model.model_fields_set:
                result[name] = value.model_dump()
        elif name in model.model_fields_set:
            result[name] = value
    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(base: ConfigData, override: ConfigData) -> ConfigData:
    """Return `base` with the explicitly set fields of `override` applied."""
    return ConfigData.model_validate(
        _deep_merge(base.model_dump(), _explicit_fields(override))
    )


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily apply a partial configuration override.

    Example:
        with with_context(ConfigData(jwt=JWTConfig(expires_in_seconds=60))):
            assert get_config().jwt.expires_in_seconds == 60
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    current = get_context()
    token = set_context(replace(current, config=merge_config(current.config, config_override)))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the configuration for the current context."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    return get_context().config
