"""Cache store protocol.

The uniform key/value caching contract. The facade (``Cache``) talks to any
object that satisfies this protocol; ``RedisStore`` is the implementation
backed by a pooled Redis connection.

Architecture:
- Protocol-based - uses structural typing
- All operations are async and return Result types, never raise
- The store holds no entry state; everything lives in the remote keyspace

Contract:
- Reads of missing keys produce ``Absent.ABSENT``
- ``mget`` returns one value per requested key, in request order
- ``mset`` is all-or-nothing (policy refusal or store failure writes nothing)
- ``ttl`` returns -1 for keys without expiration, -2 for missing keys
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from redis_cache_store.core.errors import DomainError
from redis_cache_store.core.result import Result
from redis_cache_store.domain.value_objects.write_options import WriteOptions


class CacheStoreProtocol(Protocol):
    """Cache store protocol - what the facade needs from a store."""

    name: str

    def is_cacheable_value(self, value: Any) -> bool:
        """Apply the store's cacheability policy to a value."""
        ...

    async def get(self, key: str) -> Result[Any, DomainError]:
        """Get value for key.

        Returns:
            Result with decoded value, ``Absent.ABSENT`` on a miss, or error.

        Example:
            match await store.get("user:123"):
                case Success(value=Absent.ABSENT):
                    # Cache miss
                    pass
                case Success(value=user):
                    ...
                case Failure(error=err):
                    logger.warning("Cache get failed", error_code=err.code.value)
        """
        ...

    async def set(
        self,
        key: str,
        value: Any,
        options: WriteOptions | int | None = None,
    ) -> Result[Any, DomainError]:
        """Store value under key.

        Args:
            key: Cache key.
            value: Any value accepted by the cacheability policy.
            options: WriteOptions or bare TTL seconds (None/0 = no expiration).

        Returns:
            Result with the original value on success, NotCacheableError when
            refused by policy, or a CacheError.
        """
        ...

    async def mget(self, *keys: str) -> Result[list[Any], DomainError]:
        """Get values for several keys.

        Returns:
            Result with one entry per key in request order (``Absent.ABSENT``
            for misses), or error.
        """
        ...

    async def mset(
        self,
        entries: Sequence[tuple[str, Any]] | Mapping[str, Any],
        options: WriteOptions | int | None = None,
    ) -> Result[None, DomainError]:
        """Store several entries atomically with one uniform TTL.

        Returns:
            Result with None on success. On any failure nothing was written.
        """
        ...

    async def delete(self, keys: str | Sequence[str]) -> Result[int, DomainError]:
        """Delete one key or several keys.

        Returns:
            Result with the number of keys removed (missing keys count 0).
        """
        ...

    async def exists(self, key: str) -> Result[bool, DomainError]:
        """Check whether key exists (tells a miss from a stored absence)."""
        ...

    async def ttl(self, key: str) -> Result[int, DomainError]:
        """Remaining lifetime in seconds (-1 no expiration, -2 missing key)."""
        ...

    async def keys(self, pattern: str | None = None) -> Result[list[str], DomainError]:
        """List key names matching a glob pattern (all keys when None)."""
        ...

    async def reset(self) -> Result[None, DomainError]:
        """Remove every entry of this cache's namespace. Irreversible."""
        ...

    async def close(self) -> None:
        """Release the underlying connection."""
        ...
