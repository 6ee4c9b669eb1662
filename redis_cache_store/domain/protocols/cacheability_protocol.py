"""Cacheability policy protocol.

A policy is a strategy object with one question to answer: may this value be
stored? It is injected into the store at construction and never changes
afterwards. A replacement policy fully replaces the default one; to extend the
default, delegate to ``DEFAULT_CACHEABILITY_POLICY`` explicitly.

Usage:
    class AllowAbsent:
        def is_cacheable(self, value: Any) -> bool:
            if value is Absent.ABSENT:
                return True
            return DEFAULT_CACHEABILITY_POLICY.is_cacheable(value)
"""

from typing import Any, Protocol


class CacheabilityPolicy(Protocol):
    """Decides, per value, whether it may be stored."""

    def is_cacheable(self, value: Any) -> bool:
        """Return True when the value may be written to the store.

        Args:
            value: Candidate value (any application value).

        Returns:
            Verdict for this single value.
        """
        ...
