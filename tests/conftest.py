"""Pytest configuration and shared fixtures."""

import os
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest

from cache_pool.application.cache_item_pool import CacheItemPool
from cache_pool.domain.value_objects import ExpirationPolicy, ExpirationUnit
from cache_pool.infrastructure.config import CachePoolConfig
from cache_pool.infrastructure.in_memory_store import InMemoryKeyValueStore
from cache_pool.ports.clock import ClockPort
from cache_pool.ports.key_value_store import KeyValueStorePort

FROZEN_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


class FakeClock(ClockPort):
    """Manually driven clock for deterministic expiration tests."""

    def __init__(self, start: datetime = FROZEN_NOW):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current = self.current + timedelta(seconds=seconds)


@pytest.fixture
def clock():
    """Create a clock frozen at FROZEN_NOW."""
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    """Create an in-memory store sharing the test clock."""
    return InMemoryKeyValueStore(clock=clock)


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    mock = MagicMock()
    mock.info = MagicMock()
    mock.warning = MagicMock()
    mock.error = MagicMock()
    mock.debug = MagicMock()
    mock.exception = MagicMock()
    return mock


@pytest.fixture
def mock_store():
    """Create a mock key-value store that reports every key as absent."""
    mock = MagicMock(spec=KeyValueStorePort)
    mock.exists.return_value = False
    mock.get.return_value = None
    mock.ttl.return_value = None
    mock.set.return_value = True
    mock.delete.return_value = 0
    mock.flush_namespace.return_value = True
    mock.namespace_size.return_value = 0
    return mock


@pytest.fixture
def seconds_policy():
    """Expiration policy counting integers in seconds."""
    return ExpirationPolicy(integer_unit=ExpirationUnit.SECONDS)


@pytest.fixture
def pool(memory_store, mock_logger, clock):
    """Create a pool over the in-memory store with the default policy."""
    return CacheItemPool(memory_store, logger=mock_logger, clock=clock)


@pytest.fixture
def seconds_pool(memory_store, mock_logger, clock, seconds_policy):
    """Create a pool over the in-memory store counting integers in seconds."""
    config = CachePoolConfig(expiration_policy=seconds_policy)
    return CacheItemPool(memory_store, config=config, logger=mock_logger, clock=clock)


@pytest.fixture
def mocked_pool(mock_store, mock_logger, clock):
    """Create a pool over a mock store for call assertions."""
    return CacheItemPool(mock_store, logger=mock_logger, clock=clock)


@pytest.fixture(scope="session")
def redis_url():
    """Provide a Redis URL for integration tests.

    Uses REDIS_URL when set, otherwise starts a throwaway container.
    """
    if os.getenv("SKIP_INTEGRATION_TESTS", "").lower() == "true":
        pytest.skip("Integration tests disabled")

    if os.getenv("REDIS_URL"):
        yield os.getenv("REDIS_URL")
        return

    try:
        from testcontainers.redis import RedisContainer

        container = RedisContainer("redis:7-alpine")
        container.start()
    except Exception as e:
        pytest.skip(f"Redis container unavailable: {e}")

    host = container.get_container_host_ip()
    port = container.get_exposed_port(6379)
    yield f"redis://{host}:{port}/15"

    container.stop()
