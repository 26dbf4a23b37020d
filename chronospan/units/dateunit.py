"""DateUnit enumeration for the fields of a Date."""

from __future__ import annotations

from enum import Enum


class DateUnit(Enum):
    """Addressable fields of a Date.

    YEAR and MONTH have no fixed length in days; updates along them clamp
    the day to the end of the target month instead.
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"


__all__ = ["DateUnit"]
