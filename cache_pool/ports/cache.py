"""Caller-facing cache contract - Port definitions for items and pools.

These interfaces mirror the PSR-6 cache item and item pool shapes so that
pool implementations stay substitutable behind them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime, timedelta

from ..domain.types import CacheValue


class CacheItemPort(ABC):
    """Abstract interface for a single cache entry."""

    @abstractmethod
    def get_key(self) -> str:
        """Return the key of this item."""
        ...

    @abstractmethod
    def get(self) -> CacheValue:
        """Return the value of this item.

        Must return None whenever is_hit() is False. None is also a
        legitimate cached value, so callers use is_hit() to tell a cached
        None from a miss.
        """
        ...

    @abstractmethod
    def is_hit(self) -> bool:
        """Return True if the item was produced by a successful lookup."""
        ...

    @abstractmethod
    def set(self, value: CacheValue) -> CacheItemPort:
        """Set the value of this item and return the item."""
        ...

    @abstractmethod
    def expires_at(self, expiration: datetime | None) -> CacheItemPort:
        """Set an absolute expiration and return the item."""
        ...

    @abstractmethod
    def expires_after(self, time: timedelta | int | None) -> CacheItemPort:
        """Set an expiration relative to now and return the item."""
        ...


class CacheItemPoolPort(ABC):
    """Abstract interface for a pool of cache items."""

    @abstractmethod
    def get_item(self, key: str) -> CacheItemPort:
        """Return the item for a key, as a hit or a miss."""
        ...

    @abstractmethod
    def get_items(self, keys: Iterable[str] = ()) -> list[CacheItemPort]:
        """Return items for several keys, in the order given."""
        ...

    @abstractmethod
    def has_item(self, key: str) -> bool:
        """Check whether the backend holds an entry for a key."""
        ...

    @abstractmethod
    def clear(self) -> bool:
        """Remove every entry from the pool's namespace."""
        ...

    @abstractmethod
    def delete_item(self, key: str) -> bool:
        """Remove one entry."""
        ...

    @abstractmethod
    def delete_items(self, keys: Iterable[str]) -> bool:
        """Remove several entries."""
        ...

    @abstractmethod
    def save(self, item: CacheItemPort) -> bool:
        """Persist an item immediately."""
        ...

    @abstractmethod
    def save_deferred(self, item: CacheItemPort) -> bool:
        """Queue an item for a later commit."""
        ...

    @abstractmethod
    def commit(self) -> bool:
        """Persist every queued item."""
        ...
