"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration for the cache store loaded from
``CACHE_*`` environment variables (or an optional ``.env`` file).

Architecture:
- Flat settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Settings are handed to ``create_cache()`` explicitly; adapters never read
  them on their own

Usage:
    from redis_cache_store.core.config import CacheSettings, get_settings

    settings = CacheSettings(redis_url="redis://localhost:6379/0", default_ttl=60)
    cache = create_cache(settings)

    # Environment-driven (CACHE_REDIS_URL, CACHE_DEFAULT_TTL, ...)
    settings = get_settings()
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from redis_cache_store.core.enums import Environment


class CacheSettings(BaseSettings):
    """
    Cache store settings (flat structure).

    Configuration precedence:
        1. Explicit keyword arguments
        2. Environment variables (``CACHE_`` prefix)
        3. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Connection target
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL (e.g., redis://host:port/db). "
        "Takes precedence over host/port/db when set.",
    )
    host: str = Field(default="localhost", description="Redis host")
    port: int = Field(default=6379, description="Redis port")
    db: int = Field(default=0, description="Redis logical database (namespace)")
    password: str | None = Field(default=None, description="Redis password")

    # Cache behavior
    default_ttl: int = Field(
        default=0,
        description="Default TTL in seconds applied by the cache facade (0 = no expiration)",
    )
    key_prefix: str = Field(
        default="",
        description="Optional key prefix isolating this cache inside the database",
    )

    # Pool and socket bounds
    max_connections: int = Field(
        default=10,
        description="Maximum pooled connections",
    )
    pool_timeout: float = Field(
        default=5.0,
        description="Seconds to wait for a free pooled connection before failing",
    )
    socket_timeout: float = Field(
        default=5.0,
        description="Seconds to wait on a socket read/write",
    )
    socket_connect_timeout: float = Field(
        default=5.0,
        description="Seconds to wait while establishing a connection",
    )

    model_config = SettingsConfigDict(
        env_prefix="CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalize log level name.

        Raises:
            ValueError: If the level is not one of the five standard names.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log_level: {v}")
        return level

    @field_validator("default_ttl", "db")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Reject negative TTLs and database indexes."""
        if v < 0:
            raise ValueError("value must be >= 0")
        return v

    @field_validator("max_connections")
    @classmethod
    def validate_max_connections(cls, v: int) -> int:
        """Pool must hold at least one connection."""
        if v <= 0:
            raise ValueError("max_connections must be positive")
        return v

    @field_validator("pool_timeout", "socket_timeout", "socket_connect_timeout")
    @classmethod
    def validate_timeouts(cls, v: float) -> float:
        """Timeouts must be positive so nothing waits indefinitely."""
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @property
    def connection_url(self) -> str:
        """Resolved Redis URL (explicit URL or one built from host/port/db)."""
        if self.redis_url:
            return self.redis_url
        return f"redis://{self.host}:{self.port}/{self.db}"

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for structlog filtering."""
        return logging.getLevelName(self.log_level)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT


@lru_cache()
def get_settings() -> CacheSettings:
    """
    Get cached settings instance.

    Returns:
        CacheSettings: Settings loaded from the environment.
    """
    return CacheSettings()
