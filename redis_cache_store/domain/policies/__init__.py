"""Cacheability policies.

Usage:
    from redis_cache_store.domain.policies import (
        DEFAULT_CACHEABILITY_POLICY,
        PredicatePolicy,
    )
"""

from redis_cache_store.domain.policies.cacheability import (
    DEFAULT_CACHEABILITY_POLICY,
    DefaultCacheabilityPolicy,
    PredicatePolicy,
    as_policy,
)

__all__ = [
    "DEFAULT_CACHEABILITY_POLICY",
    "DefaultCacheabilityPolicy",
    "PredicatePolicy",
    "as_policy",
]
