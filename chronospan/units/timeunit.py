"""TimeUnit enumeration for the fields of a Time."""

from __future__ import annotations

from enum import Enum

from chronospan._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE


class TimeUnit(Enum):
    """Addressable fields of a Time.

    Examples:
        >>> TimeUnit.HOUR.to_seconds()
        3600
        >>> TimeUnit("minute")
        <TimeUnit.MINUTE: 'minute'>
    """

    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    def to_seconds(self) -> int:
        """Return the number of seconds in one unit."""
        conversions: dict[TimeUnit, int] = {
            TimeUnit.HOUR: SECONDS_PER_HOUR,
            TimeUnit.MINUTE: SECONDS_PER_MINUTE,
            TimeUnit.SECOND: 1,
        }
        return conversions[self]


__all__ = ["TimeUnit"]
