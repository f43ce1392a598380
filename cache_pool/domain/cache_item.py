"""Cache item entity - one named entry with its value and expiration."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from ..ports.cache import CacheItemPort
from ..ports.clock import ClockPort
from .exceptions import InvalidArgumentError
from .types import CacheValue
from .value_objects import ExpirationPolicy

_DEFAULT_POLICY = ExpirationPolicy()

# Bounds of representable expirations; relative expirations saturate here
MAX_EXPIRATION = datetime.max.replace(tzinfo=UTC)
MIN_EXPIRATION = datetime.min.replace(tzinfo=UTC)


def _type_name(value: object) -> str:
    return type(value).__name__


def _require_value(value: object) -> CacheValue:
    if value is not None and not isinstance(value, str):
        raise InvalidArgumentError(_type_name(value), ["str", "None"])
    return value


class CacheItem(CacheItemPort):
    """A cache entry: key, value, hit status and optional expiration.

    Items are built through ``create`` or ``create_empty``. The key never
    changes; value and expiration are mutated in place by fluent setters
    that return the same item.
    """

    def __init__(
        self,
        key: str,
        is_hit: bool = False,
        value: CacheValue = None,
        *,
        policy: ExpirationPolicy | None = None,
        clock: ClockPort | None = None,
    ):
        self._key = key
        self._value = _require_value(value)
        self._is_hit = is_hit
        self._expiration: datetime | None = None
        self._policy = policy or _DEFAULT_POLICY
        self._clock = clock

    @classmethod
    def create_empty(
        cls,
        key: str,
        *,
        policy: ExpirationPolicy | None = None,
        clock: ClockPort | None = None,
    ) -> CacheItem:
        """Create a miss item for a key."""
        return cls(key, policy=policy, clock=clock)

    @classmethod
    def create(
        cls,
        key: str,
        value: CacheValue,
        *,
        policy: ExpirationPolicy | None = None,
        clock: ClockPort | None = None,
    ) -> CacheItem:
        """Create a hit item holding a value."""
        return cls(key, True, value, policy=policy, clock=clock)

    @property
    def policy(self) -> ExpirationPolicy:
        """Expiration policy used for relative expirations."""
        return self._policy

    def get_key(self) -> str:
        """Return the key for this item."""
        return self._key

    def get(self) -> CacheValue:
        """Return the value for this item.

        None is a legitimate cached value; check ``is_hit()`` to tell a
        cached None from a miss.
        """
        return self._value

    def is_hit(self) -> bool:
        """Return True if this item came from a successful lookup."""
        return self._is_hit

    def get_expiration(self) -> datetime | None:
        """Return the absolute expiration, or None if none was set."""
        return self._expiration

    def set(self, value: CacheValue) -> CacheItem:
        """Replace the value of this item.

        Raises:
            InvalidArgumentError: If value is neither a str nor None
        """
        self._value = _require_value(value)
        return self

    def expires_at(self, expiration: datetime | None) -> CacheItem:
        """Set the absolute expiration of this item.

        Args:
            expiration: The instant after which the item is stale. Naive
                datetimes are read as UTC. None applies the default window
                of the expiration policy rather than "never expire".

        Raises:
            InvalidArgumentError: If expiration is neither a datetime nor None
        """
        if expiration is None:
            self._set_default_expiration()
            return self

        if isinstance(expiration, datetime):
            if expiration.tzinfo is None:
                expiration = expiration.replace(tzinfo=UTC)
            self._expiration = expiration
            return self

        raise InvalidArgumentError(_type_name(expiration), ["datetime", "None"])

    def expires_after(self, time: timedelta | int | None) -> CacheItem:
        """Set the expiration of this item relative to now.

        Args:
            time: A timedelta, an integer counted in the policy unit (days by
                default), or None for the default window. Results beyond the
                datetime range saturate at MAX_EXPIRATION or MIN_EXPIRATION.

        Raises:
            InvalidArgumentError: If time is not a timedelta, int or None
        """
        if time is None:
            self._set_default_expiration()
            return self

        # bool is an int subclass but never a count
        if isinstance(time, int) and not isinstance(time, bool):
            self._expiration = self._after_now(self._policy.to_timedelta(time))
            return self

        if isinstance(time, timedelta):
            self._expiration = self._after_now(time)
            return self

        raise InvalidArgumentError(_type_name(time), ["timedelta", "int", "None"])

    def _set_default_expiration(self) -> None:
        self._expiration = self._after_now(self._policy.default_timedelta())

    def _after_now(self, delta: timedelta) -> datetime:
        try:
            return self._now() + delta
        except OverflowError:
            return MAX_EXPIRATION if delta > timedelta(0) else MIN_EXPIRATION

    def _now(self) -> datetime:
        if self._clock is not None:
            return self._clock.now()
        return datetime.now(UTC)

    def __repr__(self) -> str:
        expiration = self._expiration.isoformat() if self._expiration else None
        return (
            f"CacheItem(key={self._key!r}, is_hit={self._is_hit}, "
            f"value={self._value!r}, expiration={expiration})"
        )
