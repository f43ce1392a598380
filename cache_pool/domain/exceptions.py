"""Domain-specific exceptions for the cache pool."""


class CachePoolError(Exception):
    """Base exception for all cache pool errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(CachePoolError, ValueError):
    """Raised when a key or expiration argument has the wrong type or shape.

    Always raised before any backend call is made.
    """

    def __init__(self, provided: str, expected: list[str]):
        joined = '" or "'.join(expected)
        super().__init__(
            f'Invalid type "{provided}", expected "{joined}".',
            details={"provided": provided, "expected": list(expected)},
        )
        self.provided = provided
        self.expected = list(expected)
