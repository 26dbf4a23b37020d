"""DateTimeUnit enumeration for the fields of a DateTime."""

from __future__ import annotations

from enum import Enum

from chronospan._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


class DateTimeUnit(Enum):
    """Addressable fields of a DateTime.

    The six units are the union of DateUnit and TimeUnit. YEAR and MONTH
    are calendar units of variable length; the others have a fixed length
    in seconds and carry across the whole field tuple.

    Examples:
        >>> DateTimeUnit.DAY.to_seconds()
        86400
        >>> DateTimeUnit.MONTH.to_seconds() is None
        True
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    def to_seconds(self) -> int | None:
        """Return the seconds in one unit, or None for YEAR and MONTH."""
        conversions: dict[DateTimeUnit, int | None] = {
            DateTimeUnit.YEAR: None,  # Variable length (leap years)
            DateTimeUnit.MONTH: None,  # Variable length
            DateTimeUnit.DAY: SECONDS_PER_DAY,
            DateTimeUnit.HOUR: SECONDS_PER_HOUR,
            DateTimeUnit.MINUTE: SECONDS_PER_MINUTE,
            DateTimeUnit.SECOND: 1,
        }
        return conversions[self]


__all__ = ["DateTimeUnit"]
