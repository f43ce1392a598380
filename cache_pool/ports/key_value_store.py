"""Key-value store port - the backend collaborator of the cache pool."""

from abc import ABC, abstractmethod

from ..domain.types import CacheValue


class KeyValueStorePort(ABC):
    """Abstract interface for the backend store behind a cache pool.

    The pool issues exactly these calls. Connection management, pooling and
    retries belong to the implementation, and its failures propagate to the
    caller unchanged.
    """

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if a key exists.

        Args:
            key: The key to check

        Returns:
            True if the key exists and has not expired
        """
        ...

    @abstractmethod
    def get(self, key: str) -> CacheValue:
        """Get the value stored under a key.

        Args:
            key: The key to read

        Returns:
            The stored value, or None if the key is absent
        """
        ...

    @abstractmethod
    def ttl(self, key: str) -> int | None:
        """Get the remaining time-to-live of a key.

        Args:
            key: The key to inspect

        Returns:
            Remaining seconds, or None if the key has no expiry or is absent
        """
        ...

    @abstractmethod
    def set(self, key: str, value: CacheValue, ttl: int | None = None) -> bool:
        """Store a value with an optional time-to-live.

        Args:
            key: The key to write
            value: The value to store
            ttl: Seconds until expiry; None persists without expiry and a
                value <= 0 stores an already-expired entry

        Returns:
            True if the store acknowledged the write
        """
        ...

    @abstractmethod
    def delete(self, *keys: str) -> int:
        """Delete one or more keys.

        Returns:
            Number of keys actually removed
        """
        ...

    @abstractmethod
    def flush_namespace(self) -> bool:
        """Remove every key in the namespace used by this store.

        Returns:
            True if the store acknowledged the flush
        """
        ...

    @abstractmethod
    def namespace_size(self) -> int:
        """Count the keys currently held in the namespace."""
        ...
