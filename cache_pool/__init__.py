"""cache-pool - PSR-6 style cache item pool over Redis."""

from .application.cache_item_pool import CacheItemPool
from .domain.cache_item import CacheItem
from .domain.exceptions import CachePoolError, InvalidArgumentError
from .domain.value_objects import ExpirationPolicy, ExpirationUnit
from .infrastructure.factories import CachePoolFactory
from .infrastructure.redis_store import RedisKeyValueStore

__all__ = [
    "CacheItem",
    "CacheItemPool",
    "CachePoolError",
    "CachePoolFactory",
    "ExpirationPolicy",
    "ExpirationUnit",
    "InvalidArgumentError",
    "RedisKeyValueStore",
]
__version__ = "0.1.0"
