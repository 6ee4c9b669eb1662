"""Cacheability policies.

The default policy refuses exactly the two "no value" markers: ``None`` and
``Absent.ABSENT``. Everything else is accepted, including ``""``, ``0``,
``False`` and empty containers.

Callers wanting different rules inject their own policy. Predicates given as
plain callables are wrapped by ``PredicatePolicy`` so the store always holds a
strategy object.
"""

from collections.abc import Callable
from typing import Any

from redis_cache_store.domain.protocols.cacheability_protocol import (
    CacheabilityPolicy,
)
from redis_cache_store.domain.value_objects.absence import Absent


class DefaultCacheabilityPolicy:
    """Reject None and the absence marker, accept everything else."""

    def is_cacheable(self, value: Any) -> bool:
        return value is not None and value is not Absent.ABSENT

    def __repr__(self) -> str:
        return "DefaultCacheabilityPolicy()"


DEFAULT_CACHEABILITY_POLICY = DefaultCacheabilityPolicy()


class PredicatePolicy:
    """Adapt a plain ``value -> bool`` callable to CacheabilityPolicy.

    Args:
        predicate: Callable returning a truthy verdict for storable values.
    """

    __slots__ = ("_predicate",)

    def __init__(self, predicate: Callable[[Any], bool]) -> None:
        self._predicate = predicate

    def is_cacheable(self, value: Any) -> bool:
        return bool(self._predicate(value))

    def __repr__(self) -> str:
        return f"PredicatePolicy({self._predicate!r})"


def as_policy(
    policy: CacheabilityPolicy | Callable[[Any], bool] | None,
) -> CacheabilityPolicy:
    """Resolve a policy argument to a strategy object.

    Args:
        policy: Policy object, bare predicate, or None for the default.

    Returns:
        CacheabilityPolicy instance.

    Raises:
        TypeError: If the argument is neither a policy nor callable.
    """
    if policy is None:
        return DEFAULT_CACHEABILITY_POLICY
    if hasattr(policy, "is_cacheable"):
        return policy  # type: ignore[return-value]
    if callable(policy):
        return PredicatePolicy(policy)
    raise TypeError(
        f"cacheability policy must define is_cacheable() or be callable, "
        f"got {type(policy).__name__}"
    )
