"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from redis_cache_store.core.enums import ErrorCode, Environment
"""

from redis_cache_store.core.enums.environment import Environment
from redis_cache_store.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
