"""Cache infrastructure package.

Architecture:
- RedisConnectionHandle: pooled link to Redis, owns connection state
- RedisStore: CacheStoreProtocol implementation over the handle
- JsonCodec: stored value encoding
- Use redis_cache_store.core.container.create_cache() to wire them
"""

from redis_cache_store.infrastructure.cache.codec import ABSENT_WIRE_VALUE, JsonCodec
from redis_cache_store.infrastructure.cache.connection import RedisConnectionHandle
from redis_cache_store.infrastructure.cache.redis_store import RedisStore

__all__ = [
    "ABSENT_WIRE_VALUE",
    "JsonCodec",
    "RedisConnectionHandle",
    "RedisStore",
]
