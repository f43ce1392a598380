"""Logger adapter backed by Python's standard logging."""

import logging
from typing import Any

from ..ports.logger import LoggerPort

# Attributes set by logging.LogRecord itself; passing them in extra raises KeyError
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

_CONTEXT_FIELDS = ("component", "operation", "key")


class CacheContextFormatter(logging.Formatter):
    """Formatter appending the cache context of a record when present."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and append its component, operation and key."""
        line = super().format(record)
        context = " ".join(
            f"{field}={getattr(record, field)}"
            for field in _CONTEXT_FIELDS
            if getattr(record, field, None) is not None
        )
        return f"{line} [{context}]" if context else line


class SimpleLogger(LoggerPort):
    """LoggerPort implementation on top of the ``logging`` module.

    Keyword arguments are forwarded as ``extra`` so handlers and formatters
    can pick up structured context such as the cache key or operation.
    Keys clashing with LogRecord attributes are prefixed with ``ctx_``.
    """

    def __init__(self, name: str = "cache_pool", level: int = logging.INFO):
        """Initialize the logger.

        Args:
            name: Logger name (default: "cache_pool")
            level: Logging level (default: INFO)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                CacheContextFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            self._logger.addHandler(handler)

    @property
    def name(self) -> str:
        """Name of the underlying logger."""
        return self._logger.name

    @staticmethod
    def _extra(context: dict[str, Any]) -> dict[str, Any]:
        return {
            (f"ctx_{key}" if key in _RESERVED_ATTRS else key): value
            for key, value in context.items()
        }

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._logger.debug(message, extra=self._extra(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._logger.info(message, extra=self._extra(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._logger.warning(message, extra=self._extra(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._logger.error(message, extra=self._extra(kwargs))

    def exception(self, message: str, exc_info: Exception | None = None, **kwargs: Any) -> None:
        """Log at error level with the traceback of exc_info or the active exception."""
        self._logger.exception(message, exc_info=exc_info or True, extra=self._extra(kwargs))
