"""Redis adapter - Concrete implementation of KeyValueStorePort."""

from redis import Redis

from ..domain.types import CacheValue
from ..ports.key_value_store import KeyValueStorePort
from ..ports.logger import LoggerPort
from .simple_logger import SimpleLogger


class RedisKeyValueStore(KeyValueStorePort):
    """Redis implementation of the key-value store port.

    The namespace is the logical database selected by the client connection.
    The client is shared, not owned: the caller creates and closes it. Client
    errors (``redis.exceptions.RedisError``) propagate unchanged.
    """

    def __init__(self, client: Redis, logger: LoggerPort | None = None):
        """Initialize the Redis adapter.

        Args:
            client: A connected redis-py client
            logger: Optional logger port. If not provided, uses simple logger.
        """
        self._client = client
        self._logger = logger or SimpleLogger("cache_pool.redis_store")

    @property
    def client(self) -> Redis:
        """The wrapped redis-py client."""
        return self._client

    def exists(self, key: str) -> bool:
        """Check if a key exists."""
        return self._client.exists(key) > 0

    def get(self, key: str) -> CacheValue:
        """Get the value stored under a key.

        Replies from a client created without ``decode_responses`` arrive as
        bytes and are decoded as UTF-8, which is how redis-py encodes str.
        """
        value = self._client.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def ttl(self, key: str) -> int | None:
        """Get the remaining time-to-live of a key.

        Redis answers -1 for keys without expiry and -2 for missing keys;
        both map to None.
        """
        remaining = self._client.ttl(key)
        if remaining is None or remaining < 0:
            return None
        return int(remaining)

    def set(self, key: str, value: CacheValue, ttl: int | None = None) -> bool:
        """Store a value with an optional time-to-live."""
        # Redis has no null value
        payload = "" if value is None else value

        if ttl is None:
            return bool(self._client.set(key, payload))

        if ttl <= 0:
            # SET rejects non-positive EX; an already-expired entry is just gone
            self._logger.debug(f"Dropping already-expired entry for key={key}", ttl=ttl)
            self._client.delete(key)
            return True

        return bool(self._client.set(key, payload, ex=ttl))

    def delete(self, *keys: str) -> int:
        """Delete one or more keys."""
        if not keys:
            return 0
        return int(self._client.delete(*keys))

    def flush_namespace(self) -> bool:
        """Flush the selected logical database."""
        return bool(self._client.flushdb())

    def namespace_size(self) -> int:
        """Count keys in the selected logical database."""
        return int(self._client.dbsize())
