"""Result types for railway-oriented programming.

Every store operation reports its outcome as data instead of raising. A
failed cache call is a ``Failure`` carrying an inspectable error, a completed
one is a ``Success`` carrying the value. Nothing in between.

Usage:
    result = await cache.get("user:123")
    match result:
        case Success(value=Absent.ABSENT):
            # Cache miss
            ...
        case Success(value=profile):
            render(profile)
        case Failure(error=err):
            logger.warning("Cache read failed", error_code=err.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred (never None).
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
