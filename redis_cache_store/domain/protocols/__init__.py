"""Domain protocols (ports) package.

Protocol definitions for what the cache contract needs. Implementations
satisfy them structurally, without inheritance.

Usage:
    from redis_cache_store.domain.protocols import CacheStoreProtocol
"""

from redis_cache_store.domain.protocols.cache_store_protocol import CacheStoreProtocol
from redis_cache_store.domain.protocols.cacheability_protocol import (
    CacheabilityPolicy,
)
from redis_cache_store.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["CacheStoreProtocol", "CacheabilityPolicy", "LoggerProtocol"]
