"""Cache facade.

The caller-facing object. Pairs a store with caller-level defaults and
forwards every call. The only thing it adds is default substitution: a write
without options gets the configured default TTL.

Usage:
    cache = create_cache(CacheSettings(default_ttl=300))

    await cache.set("user:123", profile)             # expires in 300s
    await cache.set("config", flags, 0)               # never expires
    await cache.mset([("a", 1), ("b", 2)], WriteOptions(ttl_seconds=60))

    result = await cache.wrap("report:42", build_report)
"""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from redis_cache_store.core.errors import DomainError
from redis_cache_store.core.result import Failure, Result, Success
from redis_cache_store.domain.protocols.cache_store_protocol import (
    CacheStoreProtocol,
)
from redis_cache_store.domain.value_objects.absence import Absent
from redis_cache_store.domain.value_objects.write_options import WriteOptions


class Cache:
    """Facade over a cache store with a default TTL.

    Attributes:
        _store: Store receiving every call.
        _default_options: WriteOptions used when a write has none.
    """

    def __init__(self, store: CacheStoreProtocol, *, default_ttl: int = 0) -> None:
        """Initialize facade.

        Args:
            store: Store implementing CacheStoreProtocol.
            default_ttl: TTL seconds for writes without options (0 = none).

        Raises:
            ValueError: If default_ttl is negative.
        """
        self._store = store
        self._default_options = WriteOptions(ttl_seconds=default_ttl)

    @property
    def store(self) -> CacheStoreProtocol:
        """Underlying store."""
        return self._store

    @property
    def default_ttl(self) -> int:
        return self._default_options.ttl_seconds or 0

    def _resolve(self, options: WriteOptions | int | None) -> WriteOptions:
        """Substitute the default TTL when the caller left it unset."""
        resolved = WriteOptions.coerce(options)
        if resolved.ttl_seconds is None:
            return self._default_options
        return resolved

    async def get(self, key: str) -> Result[Any, DomainError]:
        return await self._store.get(key)

    async def set(
        self,
        key: str,
        value: Any,
        options: WriteOptions | int | None = None,
    ) -> Result[Any, DomainError]:
        return await self._store.set(key, value, self._resolve(options))

    async def mget(self, *keys: str) -> Result[list[Any], DomainError]:
        return await self._store.mget(*keys)

    async def mset(
        self,
        entries: Sequence[tuple[str, Any]] | Mapping[str, Any],
        options: WriteOptions | int | None = None,
    ) -> Result[None, DomainError]:
        return await self._store.mset(entries, self._resolve(options))

    async def delete(self, keys: str | Sequence[str]) -> Result[int, DomainError]:
        return await self._store.delete(keys)

    async def exists(self, key: str) -> Result[bool, DomainError]:
        return await self._store.exists(key)

    async def ttl(self, key: str) -> Result[int, DomainError]:
        return await self._store.ttl(key)

    async def keys(self, pattern: str | None = None) -> Result[list[str], DomainError]:
        return await self._store.keys(pattern)

    async def reset(self) -> Result[None, DomainError]:
        return await self._store.reset()

    async def wrap(
        self,
        key: str,
        factory: Callable[[], Awaitable[Any]],
        options: WriteOptions | int | None = None,
    ) -> Result[Any, DomainError]:
        """Read-through helper.

        Returns the cached value when present. On a miss, awaits ``factory``,
        stores its result and returns it. A result the policy refuses is
        returned without being stored. Exceptions raised by ``factory``
        propagate to the caller unchanged.

        When the policy permits storing ``Absent.ABSENT``, a read of the
        marker is told apart from a miss with ``exists``, so a stored absence
        counts as a hit.

        Args:
            key: Cache key.
            factory: Zero-argument coroutine function producing the value.
            options: Write options for the stored result.

        Returns:
            Result with the cached or freshly produced value, or the cache
            error that prevented reading or writing it.
        """
        match await self._store.get(key):
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=cached) if cached is not Absent.ABSENT:
                return Success(value=cached)

        if self._store.is_cacheable_value(Absent.ABSENT):
            match await self._store.exists(key):
                case Failure(error=err):
                    return Failure(error=err)
                case Success(value=True):
                    return Success(value=Absent.ABSENT)

        value = await factory()
        if not self._store.is_cacheable_value(value):
            return Success(value=value)
        return await self.set(key, value, options)

    async def close(self) -> None:
        """Release the store's connection."""
        await self._store.close()
