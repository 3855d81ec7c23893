"""Typed view of ``config.yaml``.

Each section of the ``config:`` mapping has a model here; anything missing
from the file falls back to the defaults below.
"""

from __future__ import annotations

import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field

DEFAULT_GOOGLE_CX_ID = "764d2a65825484865"


class CORSConfig(BaseModel):
    origins: list[str] = Field(default=["http://localhost:3000", "http://localhost:5173"])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(default=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
    allow_headers: list[str] = Field(default=["*"])


class RateLimiterConfig(BaseModel):
    """Default quota applied by ``rate_limit()`` when a route does not set its own."""

    enabled: bool = True
    requests: int = 100
    window_ms: int = 60_000
    # Narrow the counter key by route template and HTTP method
    per_endpoint: bool = True
    per_method: bool = True


class AuthConfig(BaseModel):
    """Bearer token validation for the admin, seller, delivery and customer roles."""

    signing_secret: str = Field(
        default="dev-secret-key", description="HMAC secret used to sign and verify tokens"
    )
    issuer: str = "geeta-commerce"
    audiences: list[str] = Field(default_factory=lambda: ["geeta-api"])
    allowed_algorithms: list[str] = Field(default_factory=lambda: ["HS256"])
    clock_skew: int = Field(default=60, description="Leeway in seconds for exp/nbf checks")
    roles_claim: str = "roles"
    token_ttl_seconds: int = Field(default=3600, description="Lifetime of tokens minted by the CLI")


class ImageSearchConfig(BaseModel):
    """Product image lookup providers used by the seller tools."""

    google_api_key: str | None = Field(default=None, description="Google Custom Search API key")
    google_cx_id: str = Field(
        default=DEFAULT_GOOGLE_CX_ID,
        description="Programmable Search Engine id used for image lookups",
    )
    google_query_suffix: str = Field(
        default=" product india",
        description="Appended to Google queries to bias results towards product shots",
    )
    unsplash_access_key: str | None = Field(default=None, description="Fallback provider key")
    timeout_seconds: float = 10.0


class DealsConfig(BaseModel):
    flash_deal_default_hours: int = Field(
        default=24, description="Hours until the flash deal ends when none is stored"
    )


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "plain"] = "json"
    # Empty disables the file sink
    file: str = "logs/app.log"
    max_size_mb: int = 10
    backup_count: int = 5


class DatabaseConfig(BaseModel):
    url: str = "sqlite:///./commerce.db"
    echo: bool = False
    pool_size: int = 20
    max_overflow: int = 10
    pool_timeout: int = 30
    pool_recycle: int = 1800
    password_env_var: str | None = Field(
        default=None, description="Environment variable holding the database password"
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def connection_string(self) -> str:
        """The URL handed to SQLAlchemy, with the password injected from the environment."""
        from sqlalchemy.engine import make_url

        if self.is_sqlite or not self.password_env_var:
            return self.url

        password = os.getenv(self.password_env_var)
        if not password:
            raise ValueError(f"Environment variable {self.password_env_var} not set")
        url = make_url(self.url)
        if url.password:
            logger.warning(
                "Database URL already contains a password; using the one from {}",
                self.password_env_var,
            )
        return url.set(password=password).render_as_string(hide_password=False)


class AppConfig(BaseModel):
    name: str = "geeta-commerce"
    environment: Literal["development", "production", "test"] = "development"
    host: str = "localhost"
    port: int = 8000
    cors: CORSConfig = Field(default_factory=CORSConfig)


class ConfigData(BaseModel):
    """Root of the ``config:`` mapping."""

    app: AppConfig = Field(default_factory=AppConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    rate_limiter: RateLimiterConfig = Field(default_factory=RateLimiterConfig)
    image_search: ImageSearchConfig = Field(default_factory=ImageSearchConfig)
    deals: DealsConfig = Field(default_factory=DealsConfig)
