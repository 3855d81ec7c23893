"""Bootstrap settings read from the process environment and ``.env``.

They only decide which ``config.yaml`` is loaded and for which environment;
everything structured lives in that file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    config_file: Path = Field(default=Path("config.yaml"), validation_alias="APP_CONFIG_FILE")
