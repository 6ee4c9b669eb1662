"""Core errors package.

Usage:
    from redis_cache_store.core.errors import DomainError
"""

from redis_cache_store.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
