"""Tests for the SystemClock implementation."""

from datetime import UTC, datetime

from cache_pool.infrastructure.system_clock import SystemClock
from cache_pool.ports.clock import ClockPort


class TestSystemClock:
    """Test the SystemClock implementation."""

    def test_implements_clock_port(self):
        """Test that SystemClock implements ClockPort interface."""
        assert isinstance(SystemClock(), ClockPort)

    def test_returns_current_time(self):
        """Test that now() returns current time."""
        clock = SystemClock()

        before = datetime.now(UTC)
        clock_time = clock.now()
        after = datetime.now(UTC)

        assert before <= clock_time <= after

    def test_returns_utc(self):
        """Test that now() returns a UTC-aware datetime."""
        assert SystemClock().now().tzinfo == UTC
