"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the engine's
configuration: site identity used by canonical URLs and generated
copy, the fallback cache, the local upstream fixtures and logging.

Configuration can be overridden via environment variables:
- RCE_SITE_DOMAIN=https://staging.airlinesmap.com
- RCE_SITE_BRAND_NAME=AirlinesMap
- RCE_CACHE_MAX_SIZE=5000
- RCE_UPSTREAM_DATA_DIR=/path/to/fixtures
- RCE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class SiteConfig(BaseSettings):
    """Public site identity.

    Environment variables prefixed with RCE_SITE_.
    """

    model_config = SettingsConfigDict(env_prefix="RCE_SITE_")

    domain: str = "https://airlinesmap.com"
    brand_name: str = "AirlinesMap"
    meta_description_length: int = 158

    @field_validator("domain")
    @classmethod
    def _absolute_domain(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Site domain must be an absolute URL, got {value!r}",
                setting_name="domain",
                expected_type="http(s) URL",
            )
        return value.rstrip("/")

    @field_validator("meta_description_length")
    @classmethod
    def _room_for_ellipsis(cls, value: int) -> int:
        # truncate() keeps at least one character before the ellipsis
        if value < 2:
            raise ConfigurationError(
                f"meta_description_length must be at least 2, got {value}",
                setting_name="meta_description_length",
                expected_type="int >= 2",
            )
        return value


class CacheConfig(BaseSettings):
    """Fallback content cache configuration.

    Environment variables prefixed with RCE_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="RCE_CACHE_")

    enabled: bool = True
    max_size: Optional[int] = 10_000
    ttl_seconds: Optional[float] = None


class UpstreamConfig(BaseSettings):
    """Local upstream fixtures for the JSON-file content source.

    Environment variables prefixed with RCE_UPSTREAM_.
    """

    model_config = SettingsConfigDict(env_prefix="RCE_UPSTREAM_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    content_dir: str = "content"
    flights_dir: str = "flights"

    @property
    def content_path(self) -> Path:
        """Directory holding one JSON content payload per route."""
        return self.data_dir / self.content_dir

    @property
    def flights_path(self) -> Path:
        """Directory holding one JSON flight batch per route."""
        return self.data_dir / self.flights_dir


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with RCE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RCE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.site.domain)
        print(config.upstream.content_path)

    Environment variables prefixed with RCE_.
    """

    model_config = SettingsConfigDict(env_prefix="RCE_")

    site: SiteConfig = Field(default_factory=SiteConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
