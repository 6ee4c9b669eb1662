"""Composition root.

Builds the object graph: settings → logger → connection handle → store →
facade. Each ``create_cache()`` call returns a new, independent instance;
callers hold their reference explicitly and there is no process-wide cache
object.

Usage:
    from redis_cache_store.core.container import create_cache

    cache = create_cache(CacheSettings(redis_url="redis://localhost:6379/1"))
    try:
        await cache.set("foo", "bar")
    finally:
        await cache.close()
"""

from collections.abc import Callable
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from redis_cache_store.core.config import CacheSettings, get_settings
from redis_cache_store.core.enums import Environment

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from redis_cache_store.application.cache import Cache
    from redis_cache_store.domain.protocols.cacheability_protocol import (
        CacheabilityPolicy,
    )
    from redis_cache_store.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from redis_cache_store.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.environment is not Environment.DEVELOPMENT,
        level=settings.log_level_number,
    )


def create_cache(
    settings: CacheSettings | None = None,
    *,
    cacheability_policy: "CacheabilityPolicy | Callable[[Any], bool] | None" = None,
    logger: "LoggerProtocol | None" = None,
    client: "Redis | None" = None,
) -> "Cache":
    """Create a cache facade backed by Redis.

    Args:
        settings: Cache settings (environment-loaded settings when None).
        cacheability_policy: Replacement cacheability policy or predicate.
        logger: Logger (application logger when None).
        client: Pre-built async Redis client; when given, settings' connection
            fields are ignored and the handle takes ownership of the client.

    Returns:
        Cache facade with its own connection handle and store.
    """
    from redis_cache_store.application.cache import Cache
    from redis_cache_store.infrastructure.cache.connection import (
        RedisConnectionHandle,
    )
    from redis_cache_store.infrastructure.cache.redis_store import RedisStore

    settings = settings or get_settings()
    logger = logger or get_logger()

    if client is not None:
        connection = RedisConnectionHandle(client, logger=logger)
    else:
        connection = RedisConnectionHandle.from_settings(settings, logger=logger)

    store = RedisStore(
        connection,
        logger=logger.bind(component="redis_store"),
        cacheability_policy=cacheability_policy,
        key_prefix=settings.key_prefix,
    )
    return Cache(store, default_ttl=settings.default_ttl)
