"""Tests for the clock protocol and adapters."""

import datetime

import pytest

from chronospan.clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock, read_clock
from chronospan.errors import ClockError


class TestClocks:
    """Tests for SystemClock and FixedClock."""

    def test_system_clock_satisfies_protocol(self) -> None:
        """SystemClock is a Clock."""
        assert isinstance(SystemClock(), Clock)
        assert isinstance(SYSTEM_CLOCK.now(), datetime.datetime)

    def test_fixed_clock(self, fixed_now) -> None:
        """FixedClock always returns its instant."""
        clock = FixedClock(fixed_now)
        assert isinstance(clock, Clock)
        assert clock.now() is fixed_now
        assert clock.now() is fixed_now


class TestReadClock:
    """Tests for read_clock."""

    def test_default_is_system_clock(self) -> None:
        """None reads the system clock."""
        assert isinstance(read_clock(None, "Time"), datetime.datetime)

    def test_wraps_failures(self) -> None:
        """OSError from the clock becomes ClockError."""

        class BrokenClock:
            def now(self) -> datetime.datetime:
                raise OSError("no clock")

        with pytest.raises(ClockError, match="DateTime ➤ cannot read the current time") as exc_info:
            read_clock(BrokenClock(), "DateTime")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_wraps_any_exception(self) -> None:
        """Any exception from an injected clock becomes ClockError."""

        class GoneClock:
            def now(self) -> datetime.datetime:
                raise RuntimeError("clock gone")

        with pytest.raises(ClockError, match="clock gone") as exc_info:
            read_clock(GoneClock(), "Time")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_rejects_non_datetime(self) -> None:
        """A date is not enough."""

        class DateClock:
            def now(self):
                return datetime.date(2024, 1, 1)

        with pytest.raises(ClockError, match="clock returned date"):
            read_clock(DateClock(), "Date")
