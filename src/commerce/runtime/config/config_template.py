"""Loading ``config.yaml`` with ``${VAR}`` placeholders resolved from the environment."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.commerce.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _resolve(expression: str) -> str:
    if ":-" in expression:
        name, default = expression.split(":-", 1)
        return os.getenv(name) or default

    name, _, message = expression.partition(":?")
    value = os.getenv(name)
    if value is None:
        raise ValueError(
            f"Required environment variable {name}: {message}"
            if message
            else f"Required environment variable {name} not set"
        )
    return value


def substitute_env_vars(text: str) -> str:
    """Expand environment placeholders in ``text``.

    ``${NAME}`` must be set, ``${NAME:-fallback}`` falls back when the
    variable is unset or empty, and ``${NAME:?hint}`` fails with ``hint`` in the error message.
    """
    return _PLACEHOLDER.sub(lambda match: _resolve(match.group(1)), text)


def apply_environment_overrides(env_mode: str) -> list[str]:
    """Promote ``<ENV>_NAME`` variables to ``NAME`` and return the promoted names."""
    prefix = f"{env_mode.upper()}_"
    promoted = []
    for name, value in list(os.environ.items()):
        if name.startswith(prefix):
            target = name.removeprefix(prefix)
            os.environ[target] = value
            promoted.append(target)
    return promoted


def load_templated_yaml(file_path: Path, env_mode: str | None = None) -> ConfigData:
    """Read the ``config:`` section of ``file_path`` into ``ConfigData``.

    Raises:
        ValueError: a placeholder cannot be resolved, the YAML is empty or
            malformed, or the values fail validation.
        FileNotFoundError: ``file_path`` does not exist.
    """
    raw = Path(file_path).read_text()
    env_mode = env_mode or os.getenv("APP_ENVIRONMENT", "development")

    promoted = apply_environment_overrides(env_mode)
    logger.info("Loading {} for environment {} (overrides: {})", file_path, env_mode, promoted or "none")

    try:
        document = yaml.safe_load(substitute_env_vars(raw))
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not document:
        raise ValueError(f"Configuration file {file_path} is empty")

    try:
        config = ConfigData(**document.get("config", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    if config.app.environment == "production" and config.auth.signing_secret == "dev-secret-key":
        logger.warning("Production environment is using the development signing secret")
    return config
