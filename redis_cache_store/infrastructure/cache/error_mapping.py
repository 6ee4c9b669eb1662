"""Mapping of redis exceptions onto the cache error taxonomy.

Single place where redis-py exceptions become CacheError values. Both the
connection handle and the store use it, so the same failure always maps to
the same error.
"""

from typing import Any

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from redis_cache_store.core.enums import ErrorCode
from redis_cache_store.infrastructure.enums import InfrastructureErrorCode
from redis_cache_store.infrastructure.errors import (
    CacheConnectionError,
    CacheError,
    StoreError,
)

# Network-level failures (redis wraps most socket errors, OSError covers the rest)
CONNECTION_EXCEPTIONS: tuple[type[BaseException], ...] = (
    RedisConnectionError,
    RedisTimeoutError,
    OSError,
)

# redis-py BlockingConnectionPool message when the pool wait times out
_POOL_EXHAUSTED_MESSAGE = "No connection available"


def is_connection_failure(error: BaseException) -> bool:
    """True when the failure concerns the link rather than the command."""
    return isinstance(error, CONNECTION_EXCEPTIONS)


def map_redis_error(
    operation: str,
    error: Exception,
    *,
    infrastructure_code: InfrastructureErrorCode,
    **details: Any,
) -> CacheError:
    """Translate an exception raised while talking to Redis.

    Args:
        operation: Store operation name (get, mset, ...).
        error: Exception raised by redis-py (or anything unexpected).
        infrastructure_code: Code used for command-level failures.
        **details: Extra context (key, keys, ttl).

    Returns:
        CacheConnectionError for link failures, StoreError otherwise.
    """
    context: dict[str, Any] = {
        "operation": operation,
        "error": str(error),
        "type": type(error).__name__,
        **details,
    }

    if isinstance(error, RedisTimeoutError):
        return CacheConnectionError(
            code=ErrorCode.CACHE_UNAVAILABLE,
            infrastructure_code=InfrastructureErrorCode.CACHE_TIMEOUT,
            message=f"Timed out during cache {operation}",
            details=context,
        )
    if is_connection_failure(error):
        if _POOL_EXHAUSTED_MESSAGE in str(error):
            code = InfrastructureErrorCode.CACHE_POOL_EXHAUSTED
            message = f"No pooled connection available for cache {operation}"
        else:
            code = InfrastructureErrorCode.CACHE_CONNECTION_ERROR
            message = f"Cache connection failed during {operation}"
        return CacheConnectionError(
            code=ErrorCode.CACHE_UNAVAILABLE,
            infrastructure_code=code,
            message=message,
            details=context,
        )
    if isinstance(error, RedisError):
        return StoreError(
            code=ErrorCode.CACHE_OPERATION_FAILED,
            infrastructure_code=infrastructure_code,
            message=f"Cache {operation} failed",
            details=context,
        )
    return StoreError(
        code=ErrorCode.CACHE_OPERATION_FAILED,
        infrastructure_code=infrastructure_code,
        message=f"Unexpected error during cache {operation}",
        details=context,
    )
