"""Infrastructure layer error types.

Infrastructure errors represent failures talking to the remote store.

Architecture:
- The store catches redis exceptions and maps them to these dataclasses
- Errors inherit from DomainError (not Exception)
- Used with Result types for error propagation

Taxonomy:
- CacheConnectionError: link unusable (disconnected, network, timeouts,
  pool exhaustion)
- StoreError: link worked but the store (or payload) reported a failure
"""

from dataclasses import dataclass
from typing import Any

from redis_cache_store.core.errors import DomainError
from redis_cache_store.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Cache-specific errors.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Cache-specific error code.
        details: Additional context (operation, key(s), original error).
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheConnectionError(CacheError):
    """Connection could not be acquired or used."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class StoreError(CacheError):
    """Store reported a command-level failure, or stored data is unreadable."""

    pass
