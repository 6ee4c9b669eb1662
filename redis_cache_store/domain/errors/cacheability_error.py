"""Cacheability errors.

A value refused by the cacheability policy (or one that cannot be serialized)
never reaches the store. The refusal is reported synchronously, before any
I/O, so no partial remote effect is possible.
"""

from dataclasses import dataclass
from typing import Any

from redis_cache_store.core.enums import ErrorCode
from redis_cache_store.core.errors import DomainError
from redis_cache_store.domain.value_objects.absence import Absent


def describe_value(value: Any) -> str:
    """Render a value the way refusal messages quote it.

    ``None`` renders as ``null`` and the absence marker as ``undefined``,
    so messages read the same across clients sharing a keyspace.
    """
    if value is Absent.ABSENT:
        return "undefined"
    if value is None:
        return "null"
    return str(value)


@dataclass(frozen=True, slots=True, kw_only=True)
class NotCacheableError(DomainError):
    """Value rejected before any store I/O.

    Attributes:
        code: Always ErrorCode.VALUE_NOT_CACHEABLE.
        message: '"<value>" is not a cacheable value'.
        key: Key the value was meant for (None when unknown).
        details: Additional context (reason, batch position).
    """

    key: str | None = None

    @classmethod
    def for_value(
        cls,
        value: Any,
        *,
        key: str | None = None,
        reason: str | None = None,
    ) -> "NotCacheableError":
        """Build the refusal for a value.

        Args:
            value: The rejected value.
            key: Target key, if known.
            reason: Extra explanation (e.g. serialization failure).

        Returns:
            NotCacheableError with the standard message.
        """
        details: dict[str, Any] = {"value_type": type(value).__name__}
        if reason is not None:
            details["reason"] = reason
        return cls(
            code=ErrorCode.VALUE_NOT_CACHEABLE,
            message=f'"{describe_value(value)}" is not a cacheable value',
            key=key,
            details=details,
        )
