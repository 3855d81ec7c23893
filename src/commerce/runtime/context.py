"""Process-wide configuration holder.

The loaded ``ConfigData`` lives in a context variable so tests and background
tasks can swap in a partial override with ``with_context`` without touching
the global instance.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from typing import Any

from loguru import logger

from src.commerce.runtime.config.config_data import ConfigData
from src.commerce.runtime.config.config_template import load_templated_yaml
from src.commerce.runtime.settings import EnvironmentVariables


@dataclass
class AppContext:
    config: ConfigData


def _load_default_config() -> ConfigData:
    env_vars = EnvironmentVariables()
    if not env_vars.config_file.exists():
        logger.warning("Configuration file {} not found; using defaults", env_vars.config_file)
        return ConfigData()
    return load_templated_yaml(env_vars.config_file, env_vars.environment)


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=_load_default_config())
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    return _app_context.set(context)


def get_config() -> ConfigData:
    """Return the configuration active in the current context."""
    return get_context().config


def set_config(config: ConfigData) -> None:
    """Replace the whole configuration of the current context."""
    set_context(replace(get_context(), config=config))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily layer ``config_override`` over the current configuration.

    Only fields explicitly set on the override (at any depth) take effect;
    everything else is inherited from the enclosing context.

        override = ConfigData(image_search=ImageSearchConfig(unsplash_access_key="k"))
        with with_context(override):
            assert get_config().image_search.unsplash_access_key == "k"
    """
    if config_override is None:
        yield
        return
    if not isinstance(config_override, ConfigData):
        raise ValueError(f"config_override must be ConfigData or None, got {type(config_override)}")

    current = get_context()
    base = current.config.model_dump(exclude={"database": {"connection_string"}})
    merged = _deep_merge(base, config_override.model_dump(exclude_unset=True))
    token = set_context(replace(current, config=ConfigData.model_validate(merged)))
    try:
        yield
    finally:
        _app_context.reset(token)
