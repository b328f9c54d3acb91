# symphony/portal/core/config.py
"""
Central configuration for the Symphony portal.

Environment variables override defaults. The registry base URL has no
default: ``registry_config()`` refuses to build a config without it so the
application fails at startup instead of on the first page render.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from symphony.portal.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryConfig:
    """Validated connection settings for the federation registry.

    Attributes:
        base_url: Symphony API root, joined to endpoint paths by plain
            concatenation (so it normally ends with ``/``).
        timeout: Per-request timeout in seconds, ``None`` for no limit.
    """

    base_url: str
    timeout: float | None = 30.0


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_json: bool = Field(
        default=True,
        description="Emit JSON log lines (False = plain text)",
    )

    # Symphony API
    symphony_api: str | None = Field(
        default=None,
        description="Symphony API base URL, e.g. http://localhost:8082/v1alpha2/",
    )
    symphony_registry_timeout: float | None = Field(
        default=30.0,
        description="Timeout in seconds for registry calls",
    )

    # Service account used when the incoming request carries no token
    symphony_username: str | None = Field(default=None, description="Symphony user")
    symphony_password: str = Field(default="", description="Symphony password")
    symphony_token_ttl: float = Field(
        default=3000.0,
        description="Seconds before a service-account token is renewed",
    )
    symphony_anonymous_as_service: bool = Field(
        default=False,
        description="Use the service account for requests that carry no user token",
    )

    def registry_config(self) -> RegistryConfig:
        """Validate registry settings once and freeze them."""
        base_url = (self.symphony_api or "").strip()
        if not base_url:
            raise ConfigurationError(
                "SYMPHONY_API is not set; cannot build the federation registry URL"
            )
        if not base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"SYMPHONY_API must be an http(s) URL, got '{base_url}'"
            )
        if not base_url.endswith("/"):
            logger.warning(
                "SYMPHONY_API has no trailing slash; endpoint paths are appended as-is (%s)",
                base_url,
            )
        return RegistryConfig(
            base_url=base_url,
            timeout=self.symphony_registry_timeout,
        )


settings = Settings()
