"""Clock protocol and system adapter.

Provides the Clock protocol and SystemClock, the source of "now" for
Time.now, Date.today, DateTime.now and every is_in_future check. The
default reads the local wall clock through the standard library. Tests
inject a fixed clock for reproducible results.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Protocol, runtime_checkable

from chronospan.errors import ClockError


@runtime_checkable
class Clock(Protocol):
    """Source of the current local date and time."""

    def now(self) -> _datetime.datetime:
        """Return the current local datetime."""
        ...


class SystemClock:
    """Production clock wrapping ``datetime.datetime.now()``.

    Satisfies :class:`Clock` via structural subtyping.
    """

    def now(self) -> _datetime.datetime:
        """Return the current local datetime."""
        return _datetime.datetime.now()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock that always returns the same instant.

    Examples:
        >>> clock = FixedClock(_datetime.datetime(2024, 1, 1, 12, 0, 0))
        >>> clock.now().year
        2024
    """

    def __init__(self, instant: _datetime.datetime) -> None:
        self.instant = instant

    def now(self) -> _datetime.datetime:
        return self.instant

    def __repr__(self) -> str:
        return f"FixedClock({self.instant!r})"


SYSTEM_CLOCK = SystemClock()


def read_clock(clock: Clock | None, kind: str) -> _datetime.datetime:
    """Read the current datetime from a clock.

    Args:
        clock: The clock to read, or None for the system clock.
        kind: Value kind name for error messages.

    Returns:
        The current local datetime.

    Raises:
        ClockError: If the clock raises or returns something that is not a
            datetime.
    """
    source = clock if clock is not None else SYSTEM_CLOCK
    try:
        now = source.now()
    except Exception as e:
        raise ClockError(f"cannot read the current time: {e}", kind=kind) from e

    if not isinstance(now, _datetime.datetime):
        raise ClockError(
            f"clock returned {type(now).__name__}, expected datetime",
            kind=kind,
            expected="datetime.datetime",
        )
    return now


__all__ = ["Clock", "SystemClock", "FixedClock", "SYSTEM_CLOCK", "read_clock"]
