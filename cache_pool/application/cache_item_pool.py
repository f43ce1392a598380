"""Cache item pool - maps cache operations onto a key-value store."""

from __future__ import annotations

import math
from collections.abc import Iterable

from ..domain.cache_item import MAX_EXPIRATION, CacheItem
from ..domain.exceptions import InvalidArgumentError
from ..infrastructure.config import CachePoolConfig, LogContext
from ..infrastructure.simple_logger import SimpleLogger
from ..infrastructure.system_clock import SystemClock
from ..ports.cache import CacheItemPoolPort, CacheItemPort
from ..ports.clock import ClockPort
from ..ports.key_value_store import KeyValueStorePort
from ..ports.logger import LoggerPort


class CacheItemPool(CacheItemPoolPort):
    """Synchronous cache item pool over a key-value store.

    Every public call performs blocking round-trips to the store and returns
    once they complete. Lookups always produce a CacheItem, with hit or miss
    encoded in ``is_hit()``. Partial failures of writes are reported through
    boolean results, while store errors propagate unchanged.

    The deferred queue is private to the pool instance and is not safe to
    share between threads without external locking.
    """

    def __init__(
        self,
        store: KeyValueStorePort,
        config: CachePoolConfig | None = None,
        logger: LoggerPort | None = None,
        clock: ClockPort | None = None,
    ):
        """Initialize the pool.

        Args:
            store: Backend store. Shared, its lifetime belongs to the caller.
            config: Optional pool configuration. If not provided, uses defaults.
            logger: Optional logger port. If not provided, uses simple logger.
            clock: Optional clock. If not provided, uses the system clock.
        """
        self._store = store
        self._config = config or CachePoolConfig()
        self._logger = logger or SimpleLogger(self._config.logger_name)
        self._clock = clock or SystemClock()
        self._deferred: dict[str, CacheItem] = {}
        self._log_ctx = LogContext(component="CacheItemPool")

    @property
    def config(self) -> CachePoolConfig:
        """Pool configuration."""
        return self._config

    @property
    def store(self) -> KeyValueStorePort:
        """Backend store the pool writes to."""
        return self._store

    # Lookups
    def get_item(self, key: str) -> CacheItem:
        """Return the item stored under a key.

        A missing key yields an empty miss item. A present key yields a hit
        item whose expiration is derived from the remaining TTL reported by
        the store, applied through ``expires_after``.

        Raises:
            InvalidArgumentError: If key is not a non-empty string
        """
        self._validate_key(key)

        if not self._store.exists(key):
            self._logger.debug(f"Cache miss for key={key}", **self._context("get_item", key))
            return self._new_empty_item(key)

        value = self._store.get(key)
        ttl = self._store.ttl(key)
        self._logger.debug(f"Cache hit for key={key}", **self._context("get_item", key))

        item = CacheItem.create(
            key, value, policy=self._config.expiration_policy, clock=self._clock
        )
        return item.expires_after(ttl)

    def get_items(self, keys: Iterable[str] = ()) -> list[CacheItem]:
        """Return items for several keys, aligned with the input order.

        Every key is validated before the store is contacted.
        """
        keys = list(keys)
        for key in keys:
            self._validate_key(key)
        return [self.get_item(key) for key in keys]

    def has_item(self, key: str) -> bool:
        """Check whether the store holds an entry for a key.

        The answer may be stale by the time a subsequent ``get_item`` runs;
        rely on ``is_hit()`` of a single lookup when that matters.
        """
        self._validate_key(key)
        return bool(self._store.exists(key))

    # Removal
    def clear(self) -> bool:
        """Flush the whole store namespace, not only keys of this pool.

        Returns:
            True if the namespace is empty afterwards
        """
        self._store.flush_namespace()
        cleared = self._store.namespace_size() == 0
        self._logger.info("Cache namespace cleared", cleared=cleared, **self._context("clear"))
        return cleared

    def delete_item(self, key: str) -> bool:
        """Remove one entry.

        Deleting an absent key succeeds: the result reports whether the key
        is gone afterwards, not whether this call removed it.
        """
        self._validate_key(key)
        self._store.delete(key)

        deleted = not self._store.exists(key)
        if not deleted:
            self._logger.warning(
                f"Key still present after delete: {key}", **self._context("delete_item", key)
            )
        return deleted

    def delete_items(self, keys: Iterable[str]) -> bool:
        """Remove several entries, attempting every key.

        Returns:
            True only if every deletion succeeded. Earlier deletions are not
            rolled back when a later one fails.
        """
        keys = list(keys)
        for key in keys:
            self._validate_key(key)

        all_deleted = True
        for key in keys:
            if not self.delete_item(key):
                all_deleted = False
        return all_deleted

    # Persistence
    def save(self, item: CacheItemPort) -> bool:
        """Persist an item immediately.

        Items without an expiration, or with one saturated at
        ``MAX_EXPIRATION``, are stored without TTL. Otherwise the TTL is the
        number of seconds left until the expiration at write time, which is
        zero or negative if that instant has already passed.

        Returns:
            True if the store acknowledged the write
        """
        item = self._require_item(item)
        key = item.get_key()
        ttl = self._ttl_for(item)

        saved = bool(self._store.set(key, item.get(), ttl))
        if saved:
            self._logger.debug(f"Saved key={key}", ttl=ttl, **self._context("save", key))
        else:
            self._logger.warning(
                f"Store rejected write for key={key}", **self._context("save", key)
            )
        return saved

    def save_deferred(self, item: CacheItemPort) -> bool:
        """Queue an item for the next commit.

        Returns:
            False if the key is already queued (the queued item is kept),
            True otherwise
        """
        item = self._require_item(item)
        key = item.get_key()

        if key in self._deferred:
            self._logger.debug(
                f"Key already queued, rejecting: {key}", **self._context("save_deferred", key)
            )
            return False

        self._deferred[key] = item
        return True

    def commit(self) -> bool:
        """Save every queued item.

        Each item leaves the queue when its save is attempted, whatever the
        outcome, and a failure does not stop the remaining saves.

        Returns:
            True if every queued item was saved
        """
        failed: list[str] = []
        while self._deferred:
            key = next(iter(self._deferred))
            item = self._deferred.pop(key)
            try:
                saved = self.save(item)
            except Exception as e:
                error_ctx = self._log_ctx.with_operation("commit", key).with_error(e)
                self._logger.exception(
                    f"Store error while committing key={key}", exc_info=e, **error_ctx.to_dict()
                )
                raise
            if not saved:
                failed.append(key)

        if failed:
            self._logger.warning(
                f"Commit partially failed for {len(failed)} item(s)",
                failed_keys=failed,
                **self._context("commit"),
            )
            return False
        return True

    def deferred_count(self) -> int:
        """Number of items waiting for commit."""
        return len(self._deferred)

    # Helpers
    def _new_empty_item(self, key: str) -> CacheItem:
        return CacheItem.create_empty(
            key, policy=self._config.expiration_policy, clock=self._clock
        )

    def _ttl_for(self, item: CacheItem) -> int | None:
        expiration = item.get_expiration()
        if expiration is None or not self._config.honor_item_expiration:
            return None
        # a saturated expiration never comes due
        if expiration >= MAX_EXPIRATION:
            return None
        return math.ceil((expiration - self._clock.now()).total_seconds())

    @staticmethod
    def _validate_key(key: object) -> None:
        if not isinstance(key, str):
            raise InvalidArgumentError(type(key).__name__, ["str"])
        if not key:
            raise InvalidArgumentError("empty str", ["non-empty str"])

    @staticmethod
    def _require_item(item: object) -> CacheItem:
        if not isinstance(item, CacheItem):
            raise InvalidArgumentError(type(item).__name__, ["CacheItem"])
        return item

    def _context(self, operation: str, key: str | None = None) -> dict:
        return self._log_ctx.with_operation(operation, key).to_dict()
