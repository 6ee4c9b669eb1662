"""Domain errors package.

Usage:
    from redis_cache_store.domain.errors import NotCacheableError
"""

from redis_cache_store.domain.errors.cacheability_error import (
    NotCacheableError,
    describe_value,
)

__all__ = ["NotCacheableError", "describe_value"]
