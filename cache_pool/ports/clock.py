"""Clock port used to resolve "now" for expirations and TTLs."""

from abc import ABC, abstractmethod
from datetime import datetime


class ClockPort(ABC):
    """Abstract clock interface.

    Cache items compute absolute expirations from it and the pool computes
    remaining TTLs from it at write time, so tests can freeze or advance time.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Get the current time.

        Implementations MUST return timezone-aware datetimes.
        """
        ...
