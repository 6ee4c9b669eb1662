"""Infrastructure-specific error codes.

Internal codes for tracking which cache interaction failed. They ride along
with the domain ErrorCode on every CacheError.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Connection-level
    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_TIMEOUT = "cache_timeout"
    CACHE_POOL_EXHAUSTED = "cache_pool_exhausted"

    # Command-level
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
    CACHE_SCAN_ERROR = "cache_scan_error"
    CACHE_FLUSH_ERROR = "cache_flush_error"
    CACHE_DECODE_ERROR = "cache_decode_error"
