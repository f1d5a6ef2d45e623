"""Library configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class AzquerySettings(BaseSettings):
    """Library configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="AZQUERY_",
    )

    # Search service
    service_name: str | None = Field(
        default=None,
        description="Search service name (<name>.search.windows.net)",
    )
    api_key: str | None = Field(
        default=None,
        description="Query or admin API key",
    )
    endpoint: str | None = Field(
        default=None,
        description="Explicit service URL, overrides service_name",
    )
    api_version: str = Field(
        default="2020-06-30",
        description="Search REST API version",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )

    # Redis
    redis_url: RedisDsn | None = Field(
        default=None,
        description="Redis connection URL for result caching (optional)",
    )
    cache_ttl: int = Field(
        default=300,
        ge=1,
        description="Search result cache TTL in seconds",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> AzquerySettings:
    """Get cached settings instance."""
    return AzquerySettings()
