"""Redis-backed cache store with a uniform, Result-returning contract.

Usage:
    from redis_cache_store import CacheSettings, Success, create_cache

    cache = create_cache(CacheSettings(redis_url="redis://localhost:6379/0"))
    await cache.set("foo", "bar")
    match await cache.get("foo"):
        case Success(value=value):
            ...
"""

from redis_cache_store.application.cache import Cache
from redis_cache_store.core.config import CacheSettings, get_settings
from redis_cache_store.core.container import create_cache
from redis_cache_store.core.errors import DomainError
from redis_cache_store.core.result import Failure, Result, Success
from redis_cache_store.domain.enums import ConnectionState
from redis_cache_store.domain.errors import NotCacheableError
from redis_cache_store.domain.policies import (
    DEFAULT_CACHEABILITY_POLICY,
    DefaultCacheabilityPolicy,
    PredicatePolicy,
)
from redis_cache_store.domain.value_objects import Absent, WriteOptions
from redis_cache_store.infrastructure.cache import (
    JsonCodec,
    RedisConnectionHandle,
    RedisStore,
)
from redis_cache_store.infrastructure.errors import (
    CacheConnectionError,
    CacheError,
    StoreError,
)

ABSENT = Absent.ABSENT

__all__ = [
    "ABSENT",
    "Absent",
    "Cache",
    "CacheConnectionError",
    "CacheError",
    "CacheSettings",
    "ConnectionState",
    "DEFAULT_CACHEABILITY_POLICY",
    "DefaultCacheabilityPolicy",
    "DomainError",
    "Failure",
    "JsonCodec",
    "NotCacheableError",
    "PredicatePolicy",
    "RedisConnectionHandle",
    "RedisStore",
    "Result",
    "StoreError",
    "Success",
    "WriteOptions",
    "create_cache",
    "get_settings",
]
