"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates in the
proleptic Gregorian calendar, together with the pattern used to render
them.
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import TYPE_CHECKING, Any

from chronospan._internal.calendar import (
    days_in_month,
    is_leap_year,
    ordinal_to_ymd,
    shift_months,
    truncate_div,
    whole_months_between,
    ymd_to_ordinal,
)
from chronospan._internal.constants import EPOCH_YEAR, MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from chronospan._internal.validation import validate_date
from chronospan.clock import Clock, read_clock
from chronospan.errors import ChronospanError, OverflowError, ParseError
from chronospan.format.config import get_default_config
from chronospan.format.strftime import strftime, strptime
from chronospan.units.dateunit import DateUnit

if TYPE_CHECKING:
    from chronospan.core.datetime import DateTime
    from chronospan.core.time import Time

logger = logging.getLogger(__name__)

_KIND = "Date"
_FIELDS = ("year", "month", "day")


def _check_unit(unit: object) -> DateUnit:
    if not isinstance(unit, DateUnit):
        raise TypeError(f"expected DateUnit, got {type(unit).__name__}")
    return unit


def shift_date(
    year: int, month: int, day: int, unit: DateUnit, delta: int, kind: str = _KIND
) -> tuple[int, int, int]:
    """Apply a date update to a (year, month, day) triple.

    Day changes carry through months and years using true month lengths.
    Month and year changes clamp the day to the last day of the target
    month.

    Returns:
        The new (year, month, day).

    Raises:
        OverflowError: If the resulting year is outside the supported range.
    """
    if unit is DateUnit.DAY:
        new_year, new_month, new_day = ordinal_to_ymd(ymd_to_ordinal(year, month, day) + delta)
    else:
        months = delta * MONTHS_PER_YEAR if unit is DateUnit.YEAR else delta
        new_year, new_month, new_day = shift_months(year, month, day, months)
        if new_day != day:
            logger.debug(
                "clamped day %d to %d for %d-%02d", day, new_day, new_year, new_month
            )

    if new_year < MIN_YEAR or new_year > MAX_YEAR:
        raise OverflowError(
            f"cannot add {delta} {unit.value} to {year}-{month:02d}-{day:02d}: "
            f"year {new_year} is outside {MIN_YEAR}..{MAX_YEAR}",
            kind=kind,
            field="year",
            expected=f"{MIN_YEAR}..{MAX_YEAR}",
        )
    return new_year, new_month, new_day


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. Years use astronomical numbering, where year 0 exists.
    The pattern the value was built with is kept alongside and used by
    to_string(); it does not take part in comparisons.

    Date is mutable: update(), next() and clear_unit() change the value in
    place and return it. A failed update leaves the value untouched.

    Attributes:
        year: The year (MIN_YEAR..MAX_YEAR).
        month: The month (1-12).
        day: The day of the month (1-31).
        fmt: The pattern used to render this value.

    Examples:
        >>> d = Date.build("2024-01-31")
        >>> d.update(DateUnit.MONTH, 1)
        Date(2024, 2, 29)
        >>> d.update(DateUnit.MONTH, -1)  # The clamp is not undone
        Date(2024, 1, 29)
    """

    __slots__ = ("_year", "_month", "_day", "_fmt")

    def __init__(self, year: int, month: int, day: int, *, fmt: str | None = None) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (can be 0 or negative).
            month: The month (1-12).
            day: The day of the month.
            fmt: Pattern used by to_string(). Defaults to the configured
                date pattern.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Date(2024, 2, 30)  # February doesn't have 30 days
            Traceback (most recent call last):
            ...
            chronospan.errors.ValidationError: Date ➤ day must be between 1 and 29 for 2024-02, got 30
        """
        try:
            validate_date(year, month, day)
        except ChronospanError as e:
            e.with_kind(_KIND)
            raise

        self._year: int = year
        self._month: int = month
        self._day: int = day
        self._fmt: str = fmt if fmt is not None else get_default_config().date_format

    @classmethod
    def build(cls, text: str, fmt: str | None = None) -> Date:
        """Parse a Date from text.

        Args:
            text: The text to parse.
            fmt: Pattern to parse with. Defaults to the configured date
                pattern. The pattern is kept for to_string().

        Returns:
            The parsed Date.

        Raises:
            ParseError: If text does not match the pattern, a field is out
                of range (including a day the month does not have), or the
                pattern lacks a year, month or day.
            FormatError: If the pattern is invalid or uses time directives.

        Examples:
            >>> Date.build("2023-10-09")
            Date(2023, 10, 9)

            >>> Date.build("09/10/2023", "%d/%m/%Y")
            Date(2023, 10, 9)
        """
        pattern = fmt if fmt is not None else get_default_config().date_format
        try:
            fields = strptime(text, pattern, kind=_KIND, allowed=_FIELDS, required=_FIELDS)
            validate_date(fields["year"], fields["month"], fields["day"], ParseError)
        except ChronospanError as e:
            e.with_kind(_KIND)
            raise

        return cls(fields["year"], fields["month"], fields["day"], fmt=pattern)

    @classmethod
    def today(cls, clock: Clock | None = None) -> Date:
        """Return today's local date.

        Raises:
            ClockError: If the clock cannot supply the current time.
        """
        now = read_clock(clock, _KIND)
        return cls(now.year, now.month, now.day)

    @classmethod
    def from_ordinal(cls, ordinal: int, fmt: str | None = None) -> Date:
        """Create a Date from an ordinal day number (0001-01-01 is 1).

        Examples:
            >>> Date.from_ordinal(719163)
            Date(1970, 1, 1)
        """
        year, month, day = ordinal_to_ymd(ordinal)
        return cls(year, month, day, fmt=fmt)

    @classmethod
    def from_py(cls, value: _datetime.date, fmt: str | None = None) -> Date:
        """Create a Date from a ``datetime.date`` (or ``datetime.datetime``)."""
        return cls(value.year, value.month, value.day, fmt=fmt)

    @classmethod
    def _from_fields(cls, year: int, month: int, day: int, fmt: str) -> Date:
        """Create a Date from known-valid fields, bypassing validation."""
        instance = object.__new__(cls)
        instance._year = year
        instance._month = month
        instance._day = day
        instance._fmt = fmt
        return instance

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day component (1-31)."""
        return self._day

    @property
    def fmt(self) -> str:
        """Return the pattern used by to_string()."""
        return self._fmt

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date's year is a leap year."""
        return is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        return days_in_month(self._year, self._month)

    def to_ordinal(self) -> int:
        """Return the ordinal day number (0001-01-01 is 1)."""
        return ymd_to_ordinal(self._year, self._month, self._day)

    def update(self, unit: DateUnit, delta: int) -> Date:
        """Add delta units to the date, in place.

        Day overflow and underflow carry into the month and year using
        true month lengths. Month changes carry into the year. After a
        month or year change the day is clamped to the last day of the new
        month, and a later opposite change does not restore it.

        Args:
            unit: The field to change.
            delta: Amount to add (can be negative).

        Returns:
            This Date, updated.

        Raises:
            OverflowError: If the year would leave the supported range. The
                date is left unchanged.

        Examples:
            >>> Date(2023, 1, 31).update(DateUnit.MONTH, 1)
            Date(2023, 2, 28)

            >>> Date(2024, 2, 28).update(DateUnit.DAY, 1)
            Date(2024, 2, 29)
        """
        unit = _check_unit(unit)
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise TypeError(f"delta must be an int, got {type(delta).__name__}")

        self._year, self._month, self._day = shift_date(
            self._year, self._month, self._day, unit, delta
        )
        return self

    def next(self, unit: DateUnit) -> Date:
        """Advance the date by one unit, in place."""
        return self.update(unit, 1)

    def matches(self, unit: DateUnit, value: int) -> bool:
        """Return True if the given field currently equals value.

        Examples:
            >>> Date(2023, 10, 9).matches(DateUnit.YEAR, 2023)
            True
        """
        unit = _check_unit(unit)
        return getattr(self, unit.value) == value

    def clear_unit(self, unit: DateUnit) -> Date:
        """Reset a field in place: year to 1970, month or day to 1.

        Clearing the year clamps Feb 29 to Feb 28.

        Examples:
            >>> Date(2023, 10, 9).clear_unit(DateUnit.YEAR)
            Date(1970, 10, 9)
        """
        unit = _check_unit(unit)
        if unit is DateUnit.YEAR:
            self._year = EPOCH_YEAR
            self._day = min(self._day, days_in_month(self._year, self._month))
        elif unit is DateUnit.MONTH:
            self._month = 1
        else:
            self._day = 1
        return self

    def is_in_future(self, clock: Clock | None = None) -> bool:
        """Return True if this date is after today.

        Only the date is compared; the time of day is ignored.

        Raises:
            ClockError: If the clock cannot supply the current time.
        """
        return self > Date.today(clock)

    def elapsed(self, other: Date) -> _datetime.timedelta:
        """Return the signed difference self - other in whole days.

        Examples:
            >>> Date(2023, 10, 20).elapsed(Date(2023, 10, 9))
            datetime.timedelta(days=11)
        """
        if not isinstance(other, Date):
            raise TypeError(f"expected Date, got {type(other).__name__}")
        return _datetime.timedelta(days=self.to_ordinal() - other.to_ordinal())

    def unit_elapsed(self, unit: DateUnit, other: Date) -> int:
        """Return the number of complete units between other and self.

        The count is signed (positive when self is later). Years and months
        are counted on the calendar: a month is complete once the day of
        month has caught up, so 2024-02-29 is 0 months after 2024-01-31.

        Examples:
            >>> Date(2024, 3, 12).unit_elapsed(DateUnit.DAY, Date(2024, 1, 12))
            60
            >>> Date(2024, 3, 12).unit_elapsed(DateUnit.MONTH, Date(2024, 1, 12))
            2
        """
        unit = _check_unit(unit)
        if not isinstance(other, Date):
            raise TypeError(f"expected Date, got {type(other).__name__}")

        if unit is DateUnit.DAY:
            return self.to_ordinal() - other.to_ordinal()
        months = whole_months_between(self._key(), other._key())
        if unit is DateUnit.MONTH:
            return months
        return truncate_div(months, MONTHS_PER_YEAR)

    def to_datetime(self, time: Time | None = None) -> DateTime:
        """Return a DateTime on this date, at midnight unless a time is given.

        The result uses the configured datetime pattern.
        """
        from chronospan.core.datetime import DateTime

        if time is None:
            return DateTime(self._year, self._month, self._day)
        return DateTime.combine(self, time)

    def copy(self) -> Date:
        """Return an independent copy of this Date."""
        return Date._from_fields(self._year, self._month, self._day, self._fmt)

    __copy__ = copy

    def with_format(self, fmt: str) -> Date:
        """Return a copy of this Date that renders with another pattern."""
        return Date._from_fields(self._year, self._month, self._day, fmt)

    def default_format(self) -> Date:
        """Return a copy of this Date that renders with the configured pattern."""
        return self.with_format(get_default_config().date_format)

    def to_string(self) -> str:
        """Render the date with its pattern.

        Raises:
            FormatError: If the pattern is invalid or uses time directives.

        Examples:
            >>> Date(-44, 3, 15).to_string()
            '-0044-03-15'
        """
        return strftime(
            {"year": self._year, "month": self._month, "day": self._day},
            self._fmt,
            kind=_KIND,
        )

    def to_py(self) -> _datetime.date:
        """Return the equivalent ``datetime.date``.

        Raises:
            ValueError: If the year is outside 1..9999.
        """
        return _datetime.date(self._year, self._month, self._day)

    def to_json(self) -> dict[str, Any]:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> Date(2024, 1, 15).to_json()
            {'_type': 'Date', 'value': '2024-01-15', 'format': '%Y-%m-%d'}
        """
        return {"_type": _KIND, "value": self.to_string(), "format": self._fmt}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Date:
        """Create a Date from a dictionary produced by to_json().

        Raises:
            ParseError: If the data is invalid.
        """
        from chronospan.convert.json import read_payload

        text, fmt = read_payload(data, _KIND)
        return cls.build(text, fmt)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        from chronospan.convert.pydantic_schema import text_core_schema

        return text_core_schema(cls)

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    # Mutable values are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["Date"]
