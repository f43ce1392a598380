"""Domain layer - Cache items, value objects and errors."""

from .cache_item import CacheItem
from .exceptions import CachePoolError, InvalidArgumentError
from .types import CacheValue
from .value_objects import ExpirationPolicy, ExpirationUnit

__all__ = [
    "CacheItem",
    "CachePoolError",
    "CacheValue",
    "ExpirationPolicy",
    "ExpirationUnit",
    "InvalidArgumentError",
]
