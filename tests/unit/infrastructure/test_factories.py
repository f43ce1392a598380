"""Unit tests for the cache pool factory."""

from unittest.mock import MagicMock, patch

from redis import Redis

from cache_pool.application.cache_item_pool import CacheItemPool
from cache_pool.domain.value_objects import ExpirationPolicy, ExpirationUnit
from cache_pool.infrastructure.config import CachePoolConfig, RedisConnectionConfig
from cache_pool.infrastructure.factories import CachePoolFactory
from cache_pool.infrastructure.in_memory_store import InMemoryKeyValueStore
from cache_pool.infrastructure.redis_store import RedisKeyValueStore


class TestCreateRedisClient:
    """Tests for redis client creation."""

    def test_default_connection(self):
        """Test the default URL and parameters are used."""
        with patch.object(Redis, "from_url") as mock_from_url:
            client = CachePoolFactory.create_redis_client()

        mock_from_url.assert_called_once_with("redis://localhost:6379/0", decode_responses=True)
        assert client is mock_from_url.return_value

    def test_custom_connection(self):
        """Test connection settings are forwarded."""
        connection = RedisConnectionConfig(url="redis://cache:6379/3", socket_timeout=2.0)

        with patch.object(Redis, "from_url") as mock_from_url:
            CachePoolFactory.create_redis_client(connection)

        mock_from_url.assert_called_once_with(
            "redis://cache:6379/3", decode_responses=True, socket_timeout=2.0
        )


class TestCreateRedisPool:
    """Tests for Redis-backed pool creation."""

    def test_wires_store_and_pool(self, mock_logger):
        """Test the pool wraps a Redis store around the new client."""
        client = MagicMock(spec=Redis)
        config = CachePoolConfig(honor_item_expiration=False)

        with patch.object(Redis, "from_url", return_value=client):
            pool = CachePoolFactory.create_redis_pool(config=config, logger=mock_logger)

        assert isinstance(pool, CacheItemPool)
        assert isinstance(pool.store, RedisKeyValueStore)
        assert pool.store.client is client
        assert pool.config is config

    def test_store_calls_reach_client(self, mock_logger):
        """Test pool operations are issued on the created client."""
        client = MagicMock(spec=Redis)
        client.exists.return_value = 0

        with patch.object(Redis, "from_url", return_value=client):
            pool = CachePoolFactory.create_redis_pool(logger=mock_logger)

        assert pool.get_item("test").is_hit() is False
        client.exists.assert_called_once_with("test")


class TestCreateInMemoryPool:
    """Tests for in-memory pool creation."""

    def test_defaults(self):
        """Test an in-memory pool with default settings."""
        pool = CachePoolFactory.create_in_memory_pool()

        assert isinstance(pool, CacheItemPool)
        assert isinstance(pool.store, InMemoryKeyValueStore)
        assert pool.config == CachePoolConfig()

    def test_store_shares_pool_clock(self, clock, mock_logger):
        """Test expirations are evaluated against the given clock."""
        config = CachePoolConfig(
            expiration_policy=ExpirationPolicy(integer_unit=ExpirationUnit.SECONDS)
        )
        pool = CachePoolFactory.create_in_memory_pool(
            config=config, logger=mock_logger, clock=clock
        )

        pool.save(pool.get_item("test").set("v").expires_after(5))
        assert pool.has_item("test") is True

        clock.advance(5)

        assert pool.has_item("test") is False
