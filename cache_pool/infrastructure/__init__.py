"""Infrastructure layer - Concrete implementations of ports."""

from .config import CachePoolConfig, LogContext, RedisConnectionConfig
from .factories import CachePoolFactory
from .in_memory_store import InMemoryKeyValueStore
from .redis_store import RedisKeyValueStore
from .simple_logger import SimpleLogger
from .system_clock import SystemClock

__all__ = [
    "CachePoolConfig",
    "CachePoolFactory",
    "InMemoryKeyValueStore",
    "LogContext",
    "RedisConnectionConfig",
    "RedisKeyValueStore",
    "SimpleLogger",
    "SystemClock",
]
