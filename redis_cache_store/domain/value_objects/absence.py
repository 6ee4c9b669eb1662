"""Absence marker.

``Absent.ABSENT`` means "no value". It is what reads return for keys that do
not exist, and it is distinct from every present value, including ``None``,
``0``, ``""`` and ``False``.

The default cacheability policy refuses to store it. A policy that allows it
makes it round-trip: ``get`` returns ``Absent.ABSENT`` again.

Usage:
    from redis_cache_store.domain.value_objects import Absent

    match await cache.get("user:123"):
        case Success(value=Absent.ABSENT):
            # Miss
            ...
"""

from enum import Enum


class Absent(Enum):
    """Single-member enum used as a typed sentinel."""

    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Absent.ABSENT"
