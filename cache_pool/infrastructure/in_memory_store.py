"""In-memory implementation of the KeyValueStorePort.

This adapter keeps entries in a dictionary and expires them against a
clock, which makes it suitable for tests and local development.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..domain.types import CacheValue
from ..ports.clock import ClockPort
from ..ports.key_value_store import KeyValueStorePort
from .system_clock import SystemClock


@dataclass
class _StoredEntry:
    value: CacheValue
    expires_at: datetime | None = None


class InMemoryKeyValueStore(KeyValueStorePort):
    """Dictionary-backed key-value store with TTL support."""

    def __init__(self, clock: ClockPort | None = None) -> None:
        """Initialize the in-memory storage.

        Args:
            clock: Clock used to evaluate expirations (default: SystemClock)
        """
        self._clock = clock or SystemClock()
        self._storage: dict[str, _StoredEntry] = {}

    def _live_entry(self, key: str) -> _StoredEntry | None:
        """Return the entry for a key, purging it first if it has expired."""
        entry = self._storage.get(key)
        if entry is None:
            return None
        if entry.expires_at is not None and entry.expires_at <= self._clock.now():
            del self._storage[key]
            return None
        return entry

    def _purge_expired(self) -> None:
        for key in list(self._storage):
            self._live_entry(key)

    def exists(self, key: str) -> bool:
        """Check if a key exists."""
        return self._live_entry(key) is not None

    def get(self, key: str) -> CacheValue:
        """Get the value stored under a key."""
        entry = self._live_entry(key)
        return entry.value if entry else None

    def ttl(self, key: str) -> int | None:
        """Get remaining whole seconds before a key expires."""
        entry = self._live_entry(key)
        if entry is None or entry.expires_at is None:
            return None
        remaining = (entry.expires_at - self._clock.now()).total_seconds()
        return int(remaining)

    def set(self, key: str, value: CacheValue, ttl: int | None = None) -> bool:
        """Store a value, expiring it after ttl seconds when given."""
        if ttl is not None and ttl <= 0:
            self._storage.pop(key, None)
            return True

        expires_at = None
        if ttl is not None:
            try:
                expires_at = self._clock.now() + timedelta(seconds=ttl)
            except OverflowError:
                # deadline beyond the datetime range: keep without expiry
                expires_at = None
        self._storage[key] = _StoredEntry(value=value, expires_at=expires_at)
        return True

    def delete(self, *keys: str) -> int:
        """Delete keys, returning how many live keys were removed."""
        removed = 0
        for key in keys:
            if self._live_entry(key) is not None:
                del self._storage[key]
                removed += 1
        return removed

    def flush_namespace(self) -> bool:
        """Remove every stored entry."""
        self._storage.clear()
        return True

    def namespace_size(self) -> int:
        """Count live entries."""
        self._purge_expired()
        return len(self._storage)

    def keys(self) -> list[str]:
        """List live keys (useful for testing)."""
        self._purge_expired()
        return list(self._storage)
