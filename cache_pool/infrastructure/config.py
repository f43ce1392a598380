"""Configuration objects for the infrastructure layer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.value_objects import ExpirationPolicy


class RedisConnectionConfig(BaseModel):
    """Strongly-typed configuration for the Redis connection.

    The logical database selected by the URL path is the namespace a pool
    flushes on ``clear()``; pools sharing a database share that flush.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        strict=True,
        validate_assignment=True,
    )

    url: str = Field(
        default="redis://localhost:6379/0",
        min_length=1,
        description="Redis connection URL",
    )
    socket_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Timeout for socket reads and writes in seconds",
    )
    socket_connect_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Timeout for establishing the connection in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate Redis URL scheme."""
        if not v.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError(
                f"Invalid Redis URL: {v}. Must start with redis://, rediss://, or unix://"
            )
        return v

    def to_connection_params(self) -> dict[str, Any]:
        """Convert to keyword arguments for ``redis.Redis.from_url``."""
        # cache values are str, so replies are always decoded
        params: dict[str, Any] = {"decode_responses": True}
        if self.socket_timeout is not None:
            params["socket_timeout"] = self.socket_timeout
        if self.socket_connect_timeout is not None:
            params["socket_connect_timeout"] = self.socket_connect_timeout
        return params


class CachePoolConfig(BaseModel):
    """Behavioral settings of a cache item pool."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        strict=True,
        validate_assignment=True,
    )

    expiration_policy: ExpirationPolicy = Field(
        default_factory=ExpirationPolicy,
        description="Policy handed to every item the pool creates",
    )
    honor_item_expiration: bool = Field(
        default=True,
        description="Write a TTL computed from the item expiration on save",
    )
    logger_name: str = Field(
        default="cache_pool",
        min_length=1,
        description="Name of the default logger",
    )


class LogContext(BaseModel):
    """Structured context attached to cache pool log records."""

    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
        strict=False,
        validate_assignment=True,
    )

    component: str | None = Field(
        default=None,
        description="Component generating the log",
    )
    operation: str | None = Field(
        default=None,
        description="Pool operation being performed",
    )
    key: str | None = Field(
        default=None,
        description="Cache key involved in the operation",
    )
    error_code: str | None = Field(
        default=None,
        description="Structured error code",
    )
    error_type: str | None = Field(
        default=None,
        description="Fully qualified type of the error encountered",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging frameworks."""
        return {k: v for k, v in self.model_dump().items() if v is not None}

    def with_error(self, error: Exception) -> LogContext:
        """Create a new context with error information."""
        return LogContext(
            **{
                **self.model_dump(),
                "error_code": error.__class__.__name__,
                "error_type": type(error).__module__ + "." + type(error).__name__,
            }
        )

    def with_operation(self, operation: str, key: str | None = None) -> LogContext:
        """Create a new context for another operation."""
        return LogContext(
            **{
                **self.model_dump(),
                "operation": operation,
                "key": key,
            }
        )
