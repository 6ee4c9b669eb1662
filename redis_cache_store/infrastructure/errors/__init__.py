"""Infrastructure errors package.

Usage:
    from redis_cache_store.infrastructure.errors import (
        CacheConnectionError,
        CacheError,
        StoreError,
    )
"""

from redis_cache_store.infrastructure.errors.infrastructure_error import (
    CacheConnectionError,
    CacheError,
    InfrastructureError,
    StoreError,
)

__all__ = [
    "InfrastructureError",
    "CacheError",
    "CacheConnectionError",
    "StoreError",
]
