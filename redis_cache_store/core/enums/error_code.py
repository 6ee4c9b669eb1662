"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (VALUE_*, VALIDATION_*)
- Cache availability errors (CACHE_UNAVAILABLE)
- Cache command errors (CACHE_OPERATION_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALUE_NOT_CACHEABLE = "value_not_cacheable"
    VALIDATION_FAILED = "validation_failed"

    # Cache errors
    CACHE_UNAVAILABLE = "cache_unavailable"
    CACHE_OPERATION_FAILED = "cache_operation_failed"
