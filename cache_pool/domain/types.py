"""Type aliases shared across the cache pool layers."""

from typing import TypeAlias

# Opaque string payload: the pool never looks inside a value.
# Structured or binary data must be encoded by the caller.
CacheValue: TypeAlias = str | None
