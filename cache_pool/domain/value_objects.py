"""Value objects for cache expiration handling."""

from datetime import timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ExpirationUnit(str, Enum):
    """Unit applied to integer arguments of relative expirations."""

    DAYS = "days"
    SECONDS = "seconds"


class ExpirationPolicy(BaseModel):
    """Value object describing how relative expirations are resolved.

    The default policy counts integers in days, so ``expires_after(2)`` means
    two days and the default window is sixty days. Use
    ``ExpirationPolicy(integer_unit=ExpirationUnit.SECONDS)`` for second-based
    arithmetic.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    integer_unit: ExpirationUnit = Field(
        default=ExpirationUnit.DAYS,
        description="Unit used for integer relative expirations",
    )
    default_window: int = Field(
        default=60,
        ge=1,
        description="Expiration window applied when no explicit value is given",
    )

    def to_timedelta(self, amount: int) -> timedelta:
        """Convert an integer amount into a timedelta using the policy unit.

        Amounts beyond the timedelta range saturate at ``timedelta.max`` or
        ``timedelta.min``.
        """
        try:
            if self.integer_unit is ExpirationUnit.SECONDS:
                return timedelta(seconds=amount)
            return timedelta(days=amount)
        except OverflowError:
            return timedelta.max if amount > 0 else timedelta.min

    def default_timedelta(self) -> timedelta:
        """Get the default expiration window as a timedelta."""
        return self.to_timedelta(self.default_window)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.default_window} {self.integer_unit.value}"
