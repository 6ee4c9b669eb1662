"""Pooled connection handle to the remote store.

The handle owns the redis client and its connection pool, and it owns the
connection state. Store operations lease the client through ``acquire()`` for
the duration of one call.

Architecture:
- BlockingConnectionPool: exhausted pool waits at most ``pool_timeout`` and
  then fails with a connection error instead of hanging
- State is mutated here only (CONNECTED/ERRORING/DISCONNECTED); callers
  observe it through ``state``
- After ``disconnect()`` every ``acquire()`` fails fast

Usage:
    handle = RedisConnectionHandle.from_settings(settings, logger=logger)

    async with handle.acquire() as client:
        await client.get("foo")

    await handle.disconnect()
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from urllib.parse import urlsplit

from redis.asyncio import BlockingConnectionPool, Redis
from redis.exceptions import ConnectionError as RedisConnectionError

from redis_cache_store.core.config import CacheSettings
from redis_cache_store.core.result import Failure, Result, Success
from redis_cache_store.domain.enums import ConnectionState
from redis_cache_store.domain.protocols.logger_protocol import LoggerProtocol
from redis_cache_store.infrastructure.cache.error_mapping import (
    CONNECTION_EXCEPTIONS,
    map_redis_error,
)
from redis_cache_store.infrastructure.enums import InfrastructureErrorCode
from redis_cache_store.infrastructure.errors import CacheError


def _redact_url(url: str) -> str:
    """Drop credentials from a redis URL before logging it."""
    parts = urlsplit(url)
    host = parts.hostname or ""
    if parts.port:
        host = f"{host}:{parts.port}"
    return f"{parts.scheme}://{host}{parts.path}"


class RedisConnectionHandle:
    """Logical link to Redis, backed by a connection pool.

    Attributes:
        _client: Async Redis client (shares one connection pool).
        _state: Current ConnectionState.
        _logger: Structured logger.
    """

    def __init__(self, client: Redis, *, logger: LoggerProtocol) -> None:
        """Wrap an existing client.

        Args:
            client: Async Redis client instance (owned by the handle from now on).
            logger: Structured logger.
        """
        self._client = client
        self._logger = logger
        self._state = ConnectionState.CONNECTED

    @classmethod
    def from_settings(
        cls,
        settings: CacheSettings,
        *,
        logger: LoggerProtocol,
    ) -> "RedisConnectionHandle":
        """Build a handle with a bounded, blocking connection pool.

        The pool connects lazily; nothing touches the network here.

        Args:
            settings: Cache settings (target, pool size, timeouts).
            logger: Structured logger.

        Returns:
            RedisConnectionHandle instance.
        """
        pool_kwargs: dict[str, object] = {
            "max_connections": settings.max_connections,
            "timeout": settings.pool_timeout,
            "socket_timeout": settings.socket_timeout,
            "socket_connect_timeout": settings.socket_connect_timeout,
            "decode_responses": False,
        }
        if settings.password is not None:
            pool_kwargs["password"] = settings.password

        pool = BlockingConnectionPool.from_url(settings.connection_url, **pool_kwargs)
        logger.info(
            "Cache connection pool created",
            url=_redact_url(settings.connection_url),
            max_connections=settings.max_connections,
            pool_timeout=settings.pool_timeout,
        )
        return cls(Redis(connection_pool=pool), logger=logger)

    @property
    def state(self) -> ConnectionState:
        """Current connection state."""
        return self._state

    @property
    def is_connected(self) -> bool:
        """True unless the handle is disconnected or its last use failed."""
        return self._state is ConnectionState.CONNECTED

    @property
    def client(self) -> Redis:
        """Underlying redis client (for callers needing raw commands)."""
        return self._client

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[Redis]:
        """Lease the client for one store operation.

        Yields:
            Redis client; each command (or pipeline) borrows a pooled
            connection and returns it on every exit path.

        Raises:
            redis.exceptions.ConnectionError: If the handle is disconnected.
                Any exception raised inside the block propagates unchanged.
        """
        if self._state is ConnectionState.DISCONNECTED:
            raise RedisConnectionError("Connection handle is disconnected")
        try:
            yield self._client
        except CONNECTION_EXCEPTIONS as e:
            self._transition(ConnectionState.ERRORING, error=e)
            raise
        if self._state is ConnectionState.ERRORING:
            self._transition(ConnectionState.CONNECTED)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check).

        Returns:
            Result with True if Redis is reachable, or CacheError.
        """
        try:
            async with self.acquire() as client:
                await client.ping()  # type: ignore[misc]
            return Success(value=True)
        except Exception as e:
            return Failure(
                error=map_redis_error(
                    "ping",
                    e,
                    infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                )
            )

    async def disconnect(self) -> None:
        """Close the client and its pool. Idempotent and terminal."""
        if self._state is ConnectionState.DISCONNECTED:
            return
        self._transition(ConnectionState.DISCONNECTED)
        await self._client.aclose(close_connection_pool=True)

    def _transition(
        self,
        new_state: ConnectionState,
        *,
        error: BaseException | None = None,
    ) -> None:
        """Move to a new state; DISCONNECTED is never left."""
        old_state = self._state
        if old_state is ConnectionState.DISCONNECTED or old_state is new_state:
            return
        self._state = new_state

        if new_state is ConnectionState.ERRORING:
            self._logger.warning(
                "Cache connection erroring",
                previous_state=old_state.value,
                error_type=type(error).__name__ if error else None,
                error_message=str(error) if error else None,
            )
        else:
            self._logger.info(
                "Cache connection state changed",
                previous_state=old_state.value,
                state=new_state.value,
            )
