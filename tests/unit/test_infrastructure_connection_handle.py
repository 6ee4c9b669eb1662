"""Unit tests for RedisConnectionHandle.

Tests cover:
- Pool construction from settings (no network)
- State transitions (CONNECTED ↔ ERRORING → DISCONNECTED)
- Fail-fast acquire after disconnect
- ping() health check Result mapping
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.asyncio import BlockingConnectionPool
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError
from redis.exceptions import TimeoutError as RedisTimeoutError

from redis_cache_store.core.config import CacheSettings
from redis_cache_store.core.result import Failure, Success
from redis_cache_store.domain.enums import ConnectionState
from redis_cache_store.infrastructure.cache.connection import RedisConnectionHandle
from redis_cache_store.infrastructure.enums import InfrastructureErrorCode
from redis_cache_store.infrastructure.errors import CacheConnectionError


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.aclose = AsyncMock()
    client.ping = AsyncMock(return_value=True)
    return client


@pytest.fixture
def handle(mock_client, mock_logger):
    return RedisConnectionHandle(mock_client, logger=mock_logger)


@pytest.mark.unit
class TestFromSettings:
    """Pool construction."""

    @pytest.mark.asyncio
    async def test_builds_bounded_blocking_pool(self, mock_logger):
        settings = CacheSettings(
            _env_file=None,
            redis_url="redis://:secret@cache.local:6380/4",
            max_connections=3,
            pool_timeout=0.5,
            socket_timeout=2.0,
        )

        handle = RedisConnectionHandle.from_settings(settings, logger=mock_logger)
        pool = handle.client.connection_pool

        assert isinstance(pool, BlockingConnectionPool)
        assert pool.max_connections == 3
        assert pool.timeout == 0.5
        assert pool.connection_kwargs["socket_timeout"] == 2.0
        assert pool.connection_kwargs["host"] == "cache.local"
        assert pool.connection_kwargs["db"] == 4
        assert handle.state is ConnectionState.CONNECTED

        # Credentials never reach the logs
        logged_url = mock_logger.info.call_args.kwargs["url"]
        assert "secret" not in logged_url
        assert logged_url == "redis://cache.local:6380/4"

        await handle.disconnect()


@pytest.mark.unit
class TestAcquire:
    """acquire() lease and state transitions."""

    @pytest.mark.asyncio
    async def test_yields_client(self, handle, mock_client):
        async with handle.acquire() as client:
            assert client is mock_client

        assert handle.state is ConnectionState.CONNECTED

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [RedisConnectionError("reset by peer"), RedisTimeoutError("timed out"), OSError("io")],
    )
    async def test_network_failure_marks_erroring(self, handle, mock_logger, error):
        with pytest.raises(type(error)):
            async with handle.acquire():
                raise error

        assert handle.state is ConnectionState.ERRORING
        assert handle.is_connected is False
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_command_failure_keeps_state(self, handle):
        with pytest.raises(ResponseError):
            async with handle.acquire():
                raise ResponseError("WRONGTYPE")

        assert handle.state is ConnectionState.CONNECTED

    @pytest.mark.asyncio
    async def test_recovers_after_successful_use(self, handle):
        with pytest.raises(RedisConnectionError):
            async with handle.acquire():
                raise RedisConnectionError("blip")

        async with handle.acquire():
            pass

        assert handle.state is ConnectionState.CONNECTED

    @pytest.mark.asyncio
    async def test_fails_fast_after_disconnect(self, handle):
        await handle.disconnect()

        with pytest.raises(RedisConnectionError, match="disconnected"):
            async with handle.acquire():
                pytest.fail("block must not run")


@pytest.mark.unit
class TestDisconnect:
    """disconnect() lifecycle."""

    @pytest.mark.asyncio
    async def test_closes_client_and_pool_once(self, handle, mock_client):
        await handle.disconnect()
        await handle.disconnect()

        mock_client.aclose.assert_awaited_once_with(close_connection_pool=True)
        assert handle.state is ConnectionState.DISCONNECTED

    @pytest.mark.asyncio
    async def test_disconnected_is_terminal(self, handle):
        await handle.disconnect()
        handle._transition(ConnectionState.ERRORING)
        handle._transition(ConnectionState.CONNECTED)

        assert handle.state is ConnectionState.DISCONNECTED


@pytest.mark.unit
class TestPing:
    """ping() health check."""

    @pytest.mark.asyncio
    async def test_ping_success(self, handle):
        assert await handle.ping() == Success(value=True)

    @pytest.mark.asyncio
    async def test_ping_failure_is_connection_error(self, handle, mock_client):
        mock_client.ping = AsyncMock(side_effect=RedisConnectionError("refused"))

        result = await handle.ping()

        assert isinstance(result, Failure)
        assert isinstance(result.error, CacheConnectionError)
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_CONNECTION_ERROR
        assert handle.state is ConnectionState.ERRORING

    @pytest.mark.asyncio
    async def test_ping_after_disconnect(self, handle):
        await handle.disconnect()

        result = await handle.ping()

        assert isinstance(result, Failure)
        assert isinstance(result.error, CacheConnectionError)
