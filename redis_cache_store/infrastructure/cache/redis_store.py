"""Redis store implementing CacheStoreProtocol.

The store applies the cacheability policy and the codec, normalizes TTL
arguments, and runs each operation on a connection leased from the handle.
Every redis exception is mapped to a CacheError and returned as a Failure.

Architecture:
- Implements CacheStoreProtocol without inheritance (structural typing)
- Stateless: all entry state lives in Redis, instances are safe to share
  between concurrent callers
- No automatic retries; callers own their retry policy
- Batch writes run inside MULTI/EXEC, so a failed batch writes nothing

Usage:
    store = RedisStore(handle, logger=logger)

    match await store.set("foo", {"bar": 1}, WriteOptions(ttl_seconds=60)):
        case Success(value=stored):
            ...
        case Failure(error=NotCacheableError() as err):
            ...
        case Failure(error=err):
            logger.warning("Cache write failed", error=str(err))
"""

import dataclasses
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, TypeVar

from redis.asyncio import Redis

from redis_cache_store.core.enums import ErrorCode
from redis_cache_store.core.errors import DomainError
from redis_cache_store.core.result import Failure, Result, Success
from redis_cache_store.domain.errors import NotCacheableError
from redis_cache_store.domain.policies import as_policy
from redis_cache_store.domain.protocols.cacheability_protocol import (
    CacheabilityPolicy,
)
from redis_cache_store.domain.protocols.logger_protocol import LoggerProtocol
from redis_cache_store.domain.value_objects.write_options import WriteOptions
from redis_cache_store.infrastructure.cache.codec import JsonCodec
from redis_cache_store.infrastructure.cache.connection import RedisConnectionHandle
from redis_cache_store.infrastructure.cache.error_mapping import map_redis_error
from redis_cache_store.infrastructure.enums import InfrastructureErrorCode
from redis_cache_store.infrastructure.errors import CacheError, StoreError

T = TypeVar("T")

# Keys deleted per DEL round-trip when resetting a prefixed namespace
_RESET_BATCH_SIZE = 500

_GLOB_SPECIAL = str.maketrans({c: f"\\{c}" for c in "\\*?[]"})


class RedisStore:
    """Redis implementation of CacheStoreProtocol.

    Attributes:
        name: Store identity ("redis").
        _connection: Connection handle operations are run through.
        _policy: Cacheability policy (immutable after construction).
        _codec: Value codec.
        _key_prefix: Namespace prefix applied to every key.
    """

    name = "redis"

    def __init__(
        self,
        connection: RedisConnectionHandle,
        *,
        logger: LoggerProtocol,
        cacheability_policy: CacheabilityPolicy | Callable[[Any], bool] | None = None,
        codec: JsonCodec | None = None,
        key_prefix: str = "",
    ) -> None:
        """Initialize Redis store.

        Args:
            connection: Pooled connection handle.
            logger: Structured logger.
            cacheability_policy: Replacement policy (object or predicate).
                Replaces the default entirely.
            codec: Value codec (JSON by default).
            key_prefix: Optional namespace prefix.
        """
        self._connection = connection
        self._logger = logger
        self._policy = as_policy(cacheability_policy)
        self._codec = codec or JsonCodec()
        self._key_prefix = key_prefix

    @property
    def connection(self) -> RedisConnectionHandle:
        """Connection handle backing this store."""
        return self._connection

    @property
    def client(self) -> Redis:
        """Underlying redis client."""
        return self._connection.client

    @property
    def policy(self) -> CacheabilityPolicy:
        """Cacheability policy in effect."""
        return self._policy

    @property
    def key_prefix(self) -> str:
        """Namespace prefix ("" when the whole database is the namespace)."""
        return self._key_prefix

    def is_cacheable_value(self, value: Any) -> bool:
        """Apply this store's cacheability policy to a value."""
        return self._policy.is_cacheable(value)

    # =========================================================================
    # Single-key operations
    # =========================================================================

    async def get(self, key: str) -> Result[Any, DomainError]:
        """Get value from Redis.

        Args:
            key: Cache key.

        Returns:
            Result with decoded value, Absent.ABSENT if not found, or CacheError.
        """
        full_key = self._full_key(key)
        result = await self._execute(
            "get",
            lambda client: client.get(full_key),
            infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
            key=key,
        )
        match result:
            case Success(value=raw):
                return self._decode("get", raw, key=key)
            case Failure(error=err):
                return Failure(error=err)

    async def set(
        self,
        key: str,
        value: Any,
        options: WriteOptions | int | None = None,
    ) -> Result[Any, DomainError]:
        """Set value in Redis.

        Args:
            key: Cache key.
            value: Value to cache.
            options: WriteOptions or TTL seconds (None/0 = no expiration).

        Returns:
            Result with the original value, NotCacheableError, or CacheError.

        Raises:
            ValueError: If options has an unsupported shape or a negative TTL.
        """
        write_options = WriteOptions.coerce(options)

        match self._encode(key, value):
            case Failure(error=refusal):
                return Failure(error=refusal)
            case Success(value=encoded):
                pass

        full_key = self._full_key(key)
        ttl = write_options.expire_seconds
        result = await self._execute(
            "set",
            lambda client: client.set(full_key, encoded, ex=ttl),
            infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
            key=key,
            ttl=ttl,
        )
        match result:
            case Success():
                return Success(value=value)
            case Failure(error=err):
                return Failure(error=err)

    async def exists(self, key: str) -> Result[bool, DomainError]:
        """Check if key exists in Redis.

        Returns:
            Result with True if exists, False if not, or CacheError.
        """
        full_key = self._full_key(key)
        result = await self._execute(
            "exists",
            lambda client: client.exists(full_key),
            infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
            key=key,
        )
        match result:
            case Success(value=count):
                return Success(value=count > 0)
            case Failure(error=err):
                return Failure(error=err)

    async def ttl(self, key: str) -> Result[int, DomainError]:
        """Get time to live for key.

        Redis returns -1 for keys without expiration and -2 for missing keys;
        both are passed through unchanged.

        Returns:
            Result with remaining seconds (or -1/-2), or CacheError.
        """
        full_key = self._full_key(key)
        return await self._execute(
            "ttl",
            lambda client: client.ttl(full_key),
            infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
            key=key,
        )

    # =========================================================================
    # Multi-key operations
    # =========================================================================

    async def mget(self, *keys: str) -> Result[list[Any], DomainError]:
        """Get values for several keys, one result per key in request order.

        Accepts keys as separate arguments or as one list/tuple.

        Returns:
            Result with decoded values (Absent.ABSENT for misses), or error.
        """
        names = self._key_list(keys)
        if not names:
            return Success(value=[])

        full_keys = [self._full_key(name) for name in names]
        result = await self._execute(
            "mget",
            lambda client: client.mget(full_keys),
            infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
            keys=names,
        )
        match result:
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=raw_values):
                pass

        if len(raw_values) != len(names):
            return Failure(
                error=StoreError(
                    code=ErrorCode.CACHE_OPERATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
                    message="Cache mget returned a mismatched number of values",
                    details={
                        "operation": "mget",
                        "keys": names,
                        "returned": len(raw_values),
                    },
                )
            )

        values: list[Any] = []
        for name, raw in zip(names, raw_values):
            match self._decode("mget", raw, key=name):
                case Success(value=decoded):
                    values.append(decoded)
                case Failure(error=err):
                    return Failure(error=err)
        return Success(value=values)

    async def mset(
        self,
        entries: Sequence[tuple[str, Any]] | Mapping[str, Any],
        options: WriteOptions | int | None = None,
    ) -> Result[None, DomainError]:
        """Store several entries with one uniform TTL, all or nothing.

        Every value is checked against the policy first; one refusal rejects
        the whole batch before any I/O. The MSET and its EXPIREs run in one
        MULTI/EXEC transaction.

        Args:
            entries: Ordered (key, value) pairs or a mapping.
            options: WriteOptions or TTL seconds applied to every key.

        Returns:
            Result with None on success, NotCacheableError, or CacheError.

        Raises:
            ValueError: If options has an unsupported shape or a negative TTL.
        """
        write_options = WriteOptions.coerce(options)
        pairs = list(entries.items()) if isinstance(entries, Mapping) else list(entries)

        encoded: dict[str, str] = {}
        for position, (key, value) in enumerate(pairs):
            match self._encode(key, value):
                case Failure(error=refusal):
                    self._logger.warning(
                        "Cache batch rejected",
                        operation="mset",
                        key=key,
                        position=position,
                        batch_size=len(pairs),
                    )
                    return Failure(
                        error=dataclasses.replace(
                            refusal,
                            details={**(refusal.details or {}), "position": position},
                        )
                    )
                case Success(value=text):
                    # Duplicate keys: last one wins, as with MSET itself
                    encoded[self._full_key(key)] = text

        if not encoded:
            return Success(value=None)

        ttl = write_options.expire_seconds

        async def write(client: Redis) -> list[Any]:
            async with client.pipeline(transaction=True) as pipe:
                pipe.mset(encoded)
                if ttl is not None:
                    for full_key in encoded:
                        pipe.expire(full_key, ttl)
                return await pipe.execute()

        result = await self._execute(
            "mset",
            write,
            infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
            keys=[key for key, _ in pairs],
            ttl=ttl,
        )
        match result:
            case Success():
                return Success(value=None)
            case Failure(error=err):
                return Failure(error=err)

    async def delete(self, keys: str | Sequence[str]) -> Result[int, DomainError]:
        """Delete one key or several keys.

        Args:
            keys: Single key or ordered collection of keys.

        Returns:
            Result with number of keys removed, or CacheError.
        """
        names = [keys] if isinstance(keys, str) else list(keys)
        if not names:
            return Success(value=0)

        full_keys = [self._full_key(name) for name in names]
        return await self._execute(
            "delete",
            lambda client: client.delete(*full_keys),
            infrastructure_code=InfrastructureErrorCode.CACHE_DELETE_ERROR,
            keys=names,
        )

    # =========================================================================
    # Keyspace operations
    # =========================================================================

    async def keys(self, pattern: str | None = None) -> Result[list[str], DomainError]:
        """List key names matching a glob pattern.

        Uses cursor-based SCAN, so large keyspaces are walked in batches
        without blocking the server. Prefixes are stripped from results.

        Args:
            pattern: Glob-style pattern (None = every key in the namespace).

        Returns:
            Result with key names (store order, no duplicates), or CacheError.
        """
        match_pattern = self._escaped_prefix() + (pattern or "*")

        async def scan(client: Redis) -> list[str]:
            found: dict[str, None] = {}
            async for raw in client.scan_iter(match=match_pattern):
                found[self._strip_prefix(self._codec.decode_key(raw))] = None
            return list(found)

        return await self._execute(
            "keys",
            scan,
            infrastructure_code=InfrastructureErrorCode.CACHE_SCAN_ERROR,
            pattern=pattern,
        )

    async def reset(self) -> Result[None, DomainError]:
        """Remove every entry in this cache's namespace.

        Without a prefix the selected database is flushed (FLUSHDB). With a
        prefix only the prefixed keys are deleted.

        Returns:
            Result with None on success, or CacheError.
        """
        if self._key_prefix:
            match_pattern = self._escaped_prefix() + "*"

            async def flush(client: Redis) -> None:
                batch: list[Any] = []
                async for raw in client.scan_iter(match=match_pattern):
                    batch.append(raw)
                    if len(batch) >= _RESET_BATCH_SIZE:
                        await client.delete(*batch)
                        batch.clear()
                if batch:
                    await client.delete(*batch)

        else:

            async def flush(client: Redis) -> None:
                await client.flushdb()

        result = await self._execute(
            "reset",
            flush,
            infrastructure_code=InfrastructureErrorCode.CACHE_FLUSH_ERROR,
            key_prefix=self._key_prefix or None,
        )
        match result:
            case Success():
                self._logger.info("Cache reset", key_prefix=self._key_prefix or None)
                return Success(value=None)
            case Failure(error=err):
                return Failure(error=err)

    async def close(self) -> None:
        """Disconnect the underlying connection handle."""
        await self._connection.disconnect()

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _execute(
        self,
        operation: str,
        command: Callable[[Redis], Awaitable[T]],
        *,
        infrastructure_code: InfrastructureErrorCode,
        **details: Any,
    ) -> Result[T, CacheError]:
        """Run one command on a leased connection and map failures."""
        try:
            async with self._connection.acquire() as client:
                value = await command(client)
        except Exception as e:
            error = map_redis_error(
                operation,
                e,
                infrastructure_code=infrastructure_code,
                **details,
            )
            self._logger.warning(
                "Cache operation failed",
                operation=operation,
                error_code=error.code.value,
                infrastructure_code=(
                    error.infrastructure_code.value
                    if error.infrastructure_code
                    else None
                ),
                error_type=type(e).__name__,
                error_message=str(e),
                **details,
            )
            return Failure(error=error)

        self._logger.debug("Cache operation completed", operation=operation, **details)
        return Success(value=value)

    def _encode(self, key: str, value: Any) -> Result[str, NotCacheableError]:
        """Check policy and encode, before any I/O."""
        if not self._policy.is_cacheable(value):
            self._logger.debug(
                "Cache value rejected by policy",
                key=key,
                value_type=type(value).__name__,
            )
            return Failure(error=NotCacheableError.for_value(value, key=key))
        try:
            return Success(value=self._codec.encode(value))
        except (TypeError, ValueError) as e:
            return Failure(
                error=NotCacheableError.for_value(
                    value,
                    key=key,
                    reason=f"not serializable: {e}",
                )
            )

    def _decode(self, operation: str, raw: Any, *, key: str) -> Result[Any, CacheError]:
        """Decode a stored payload; unreadable payloads become StoreError."""
        try:
            return Success(value=self._codec.decode(raw))
        except ValueError as e:
            self._logger.warning(
                "Cached value could not be decoded",
                operation=operation,
                key=key,
                error_message=str(e),
            )
            return Failure(
                error=StoreError(
                    code=ErrorCode.CACHE_OPERATION_FAILED,
                    infrastructure_code=InfrastructureErrorCode.CACHE_DECODE_ERROR,
                    message=f"Failed to decode cached value for key '{key}'",
                    details={"operation": operation, "key": key, "error": str(e)},
                )
            )

    @staticmethod
    def _key_list(keys: tuple[Any, ...]) -> list[str]:
        if len(keys) == 1 and isinstance(keys[0], (list, tuple)):
            return list(keys[0])
        return list(keys)

    def _full_key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    def _strip_prefix(self, full_key: str) -> str:
        if self._key_prefix and full_key.startswith(self._key_prefix):
            return full_key[len(self._key_prefix) :]
        return full_key

    def _escaped_prefix(self) -> str:
        return self._key_prefix.translate(_GLOB_SPECIAL)
