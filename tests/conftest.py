"""Shared pytest fixtures.

This configuration ensures:
1. Every test gets its own in-memory Redis server (fakeredis)
2. Stores and handles are built fresh per test (no shared instances)
3. Loggers are mocks, so tests can assert on structured log calls
"""

from typing import Any
from unittest.mock import MagicMock

import fakeredis
import fakeredis.aioredis
import pytest
import pytest_asyncio

from redis_cache_store.application.cache import Cache
from redis_cache_store.domain.policies import DEFAULT_CACHEABILITY_POLICY
from redis_cache_store.domain.value_objects import Absent
from redis_cache_store.infrastructure.cache.connection import RedisConnectionHandle
from redis_cache_store.infrastructure.cache.redis_store import RedisStore

pytest_plugins = ("pytest_asyncio",)


def allow_absent_policy(value: Any) -> bool:
    """Custom cacheability predicate used across tests.

    Allows the absence marker, refuses "FooBarString", and defers to the
    default policy for everything else.
    """
    if value is Absent.ABSENT:
        return True
    if value == "FooBarString":
        return False
    return DEFAULT_CACHEABILITY_POLICY.is_cacheable(value)


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest_asyncio.fixture
async def fake_redis():
    """Fresh in-memory Redis per test.

    Returns:
        fakeredis.aioredis.FakeRedis bound to a private FakeServer.
    """
    client = fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer())
    yield client
    await client.aclose()


@pytest.fixture
def connection(fake_redis, mock_logger):
    """Connection handle over the fake client."""
    return RedisConnectionHandle(fake_redis, logger=mock_logger)


@pytest.fixture
def store(connection, mock_logger):
    """Store with the default cacheability policy."""
    return RedisStore(connection, logger=mock_logger)


@pytest.fixture
def custom_store(fake_redis, mock_logger):
    """Store sharing the same keyspace with a custom cacheability policy."""
    handle = RedisConnectionHandle(fake_redis, logger=mock_logger)
    return RedisStore(
        handle,
        logger=mock_logger,
        cacheability_policy=allow_absent_policy,
    )


@pytest.fixture
def cache(store):
    """Facade with infinite default TTL."""
    return Cache(store, default_ttl=0)


@pytest.fixture
def custom_cache(custom_store):
    """Facade over the custom-policy store."""
    return Cache(custom_store, default_ttl=0)
