"""Infrastructure enums package.

Usage:
    from redis_cache_store.infrastructure.enums import InfrastructureErrorCode
"""

from redis_cache_store.infrastructure.enums.infrastructure_error_code import (
    InfrastructureErrorCode,
)

__all__ = ["InfrastructureErrorCode"]
