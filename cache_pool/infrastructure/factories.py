"""Factory for wiring cache pools to their backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

from redis import Redis

from ..ports.clock import ClockPort
from ..ports.logger import LoggerPort
from .config import CachePoolConfig, RedisConnectionConfig
from .in_memory_store import InMemoryKeyValueStore
from .redis_store import RedisKeyValueStore
from .simple_logger import SimpleLogger
from .system_clock import SystemClock

if TYPE_CHECKING:
    from ..application.cache_item_pool import CacheItemPool


class CachePoolFactory:
    """Factory for creating cache pools with consistent configuration."""

    @staticmethod
    def create_redis_client(connection: RedisConnectionConfig | None = None) -> Redis:
        """Create a redis-py client from connection settings."""
        connection = connection or RedisConnectionConfig()
        return Redis.from_url(connection.url, **connection.to_connection_params())

    @classmethod
    def create_redis_pool(
        cls,
        connection: RedisConnectionConfig | None = None,
        config: CachePoolConfig | None = None,
        logger: LoggerPort | None = None,
        clock: ClockPort | None = None,
    ) -> CacheItemPool:
        """Create a pool backed by Redis.

        The client belongs to the caller afterwards and stays reachable as
        ``pool.store.client`` for closing.
        """
        from ..application.cache_item_pool import CacheItemPool

        config = config or CachePoolConfig()
        logger = logger or SimpleLogger(config.logger_name)
        store = RedisKeyValueStore(cls.create_redis_client(connection), logger=logger)
        return CacheItemPool(store, config=config, logger=logger, clock=clock)

    @staticmethod
    def create_in_memory_pool(
        config: CachePoolConfig | None = None,
        logger: LoggerPort | None = None,
        clock: ClockPort | None = None,
    ) -> CacheItemPool:
        """Create a pool backed by an in-memory store sharing the pool clock."""
        from ..application.cache_item_pool import CacheItemPool

        clock = clock or SystemClock()
        store = InMemoryKeyValueStore(clock=clock)
        return CacheItemPool(store, config=config, logger=logger, clock=clock)
