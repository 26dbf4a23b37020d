"""DateTime class combining a calendar date and a time of day.

This module provides the DateTime class. Unlike Time, hour, minute and
second changes carry into the day, and from there into month and year.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any

from chronospan._internal.calendar import (
    ordinal_to_ymd,
    truncate_div,
    whole_months_between,
    ymd_to_ordinal,
)
from chronospan._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_ORDINAL,
)
from chronospan._internal.validation import validate_date, validate_time
from chronospan.clock import Clock, read_clock
from chronospan.core.date import Date, shift_date
from chronospan.core.time import Time
from chronospan.errors import ChronospanError, OverflowError, ParseError
from chronospan.format.config import get_default_config
from chronospan.format.strftime import strftime, strptime
from chronospan.units.dateunit import DateUnit
from chronospan.units.datetimeunit import DateTimeUnit

_KIND = "DateTime"
_FIELDS = ("year", "month", "day", "hour", "minute", "second")


def _check_unit(unit: object) -> DateTimeUnit:
    if not isinstance(unit, DateTimeUnit):
        raise TypeError(f"expected DateTimeUnit, got {type(unit).__name__}")
    return unit


def _split_ordinal_seconds(total: int, context: str) -> tuple[int, int, int, int]:
    ordinal, seconds = divmod(total, SECONDS_PER_DAY)
    year, month, day = ordinal_to_ymd(ordinal)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OverflowError(
            f"{context}: year {year} is outside {MIN_YEAR}..{MAX_YEAR}",
            kind=_KIND,
            field="year",
            expected=f"{MIN_YEAR}..{MAX_YEAR}",
        )
    return year, month, day, seconds


class DateTime:
    """A calendar date combined with a time of day, second precision.

    DateTime holds a date field set (year, month, day) and a time field
    set (seconds since midnight) side by side. It has no timezone; "now"
    is the local wall clock, and timestamps treat the value as UTC.

    DateTime is mutable: update(), next() and clear_time() change the value
    in place and return it. A failed update leaves the value untouched.

    Examples:
        >>> dt = DateTime.build("2024-10-31 06:32:28")
        >>> dt.update(DateTimeUnit.MONTH, 1).to_string()
        '2024-11-30 06:32:28'
        >>> DateTime(2023, 12, 31, 23, 59, 59).next(DateTimeUnit.SECOND)
        DateTime(2024, 1, 1, 0, 0, 0)
    """

    __slots__ = ("_year", "_month", "_day", "_seconds", "_fmt")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        fmt: str | None = None,
    ) -> None:
        """Create a DateTime from component parts.

        Args:
            year: The year (can be 0 or negative).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            fmt: Pattern used by to_string(). Defaults to the configured
                datetime pattern.

        Raises:
            ValidationError: If any component is out of range.
        """
        try:
            validate_date(year, month, day)
            validate_time(hour, minute, second)
        except ChronospanError as e:
            e.with_kind(_KIND)
            raise

        self._year: int = year
        self._month: int = month
        self._day: int = day
        self._seconds: int = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
        self._fmt: str = fmt if fmt is not None else get_default_config().datetime_format

    @classmethod
    def _from_fields(
        cls, year: int, month: int, day: int, seconds: int, fmt: str
    ) -> DateTime:
        """Create a DateTime from known-valid fields, bypassing validation."""
        instance = object.__new__(cls)
        instance._year = year
        instance._month = month
        instance._day = day
        instance._seconds = seconds
        instance._fmt = fmt
        return instance

    @classmethod
    def build(cls, text: str, fmt: str | None = None) -> DateTime:
        """Parse a DateTime from text.

        The pattern must provide year, month, day, hour and minute; second
        defaults to 0.

        Raises:
            ParseError: If text does not match the pattern, a field is out
                of range, or a required field is missing.
            FormatError: If the pattern is invalid.

        Examples:
            >>> DateTime.build("2023-10-09T12:21", "%FT%R")
            DateTime(2023, 10, 9, 12, 21, 0)
        """
        pattern = fmt if fmt is not None else get_default_config().datetime_format
        try:
            fields = strptime(
                text,
                pattern,
                kind=_KIND,
                allowed=_FIELDS,
                required=("year", "month", "day", "hour", "minute"),
                defaults={"second": 0},
            )
            validate_date(fields["year"], fields["month"], fields["day"], ParseError)
            validate_time(fields["hour"], fields["minute"], fields["second"], ParseError)
        except ChronospanError as e:
            e.with_kind(_KIND)
            raise

        return cls(*(fields[name] for name in _FIELDS), fmt=pattern)

    @classmethod
    def now(cls, clock: Clock | None = None) -> DateTime:
        """Return the current local date and time, truncated to the second.

        Raises:
            ClockError: If the clock cannot supply the current time.
        """
        return cls.from_py(read_clock(clock, _KIND))

    @classmethod
    def combine(cls, date: Date, time: Time, fmt: str | None = None) -> DateTime:
        """Create a DateTime from a Date and a Time.

        Examples:
            >>> DateTime.combine(Date(2024, 1, 15), Time(9, 30))
            DateTime(2024, 1, 15, 9, 30, 0)
        """
        if not isinstance(date, Date):
            raise TypeError(f"expected Date, got {type(date).__name__}")
        if not isinstance(time, Time):
            raise TypeError(f"expected Time, got {type(time).__name__}")
        pattern = fmt if fmt is not None else get_default_config().datetime_format
        return cls._from_fields(
            date.year, date.month, date.day, time.seconds_since_midnight, pattern
        )

    @classmethod
    def from_timestamp(cls, seconds: int, fmt: str | None = None) -> DateTime:
        """Create a DateTime from Unix epoch seconds (UTC).

        Raises:
            OverflowError: If the result is outside the supported years.

        Examples:
            >>> DateTime.from_timestamp(0)
            DateTime(1970, 1, 1, 0, 0, 0)
            >>> DateTime.from_timestamp(-1)
            DateTime(1969, 12, 31, 23, 59, 59)
        """
        if not isinstance(seconds, int) or isinstance(seconds, bool):
            raise TypeError(f"timestamp must be an int, got {type(seconds).__name__}")
        total = UNIX_EPOCH_ORDINAL * SECONDS_PER_DAY + seconds
        year, month, day, secs = _split_ordinal_seconds(
            total, f"timestamp {seconds} is out of range"
        )
        pattern = fmt if fmt is not None else get_default_config().datetime_format
        return cls._from_fields(year, month, day, secs, pattern)

    @classmethod
    def from_timestamp_millis(cls, millis: int, fmt: str | None = None) -> DateTime:
        """Create a DateTime from Unix epoch milliseconds, dropping the fraction."""
        return cls.from_timestamp(millis // 1_000, fmt)

    @classmethod
    def from_timestamp_micros(cls, micros: int, fmt: str | None = None) -> DateTime:
        """Create a DateTime from Unix epoch microseconds, dropping the fraction."""
        return cls.from_timestamp(micros // 1_000_000, fmt)

    @classmethod
    def from_timestamp_nanos(cls, nanos: int, fmt: str | None = None) -> DateTime:
        """Create a DateTime from Unix epoch nanoseconds, dropping the fraction."""
        return cls.from_timestamp(nanos // 1_000_000_000, fmt)

    @classmethod
    def from_py(cls, value: _datetime.datetime, fmt: str | None = None) -> DateTime:
        """Create a DateTime from a ``datetime.datetime``.

        Microseconds and tzinfo are dropped.
        """
        return cls(
            value.year, value.month, value.day, value.hour, value.minute, value.second, fmt=fmt
        )

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
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._seconds // SECONDS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return self._seconds % SECONDS_PER_MINUTE

    @property
    def fmt(self) -> str:
        """Return the pattern used by to_string()."""
        return self._fmt

    def date(self) -> Date:
        """Return the date part, with the configured date pattern."""
        return Date._from_fields(
            self._year, self._month, self._day, get_default_config().date_format
        )

    def time(self) -> Time:
        """Return the time part, with the configured time pattern."""
        return Time._from_seconds(self._seconds, get_default_config().time_format)

    def _total_seconds(self) -> int:
        return ymd_to_ordinal(self._year, self._month, self._day) * SECONDS_PER_DAY + self._seconds

    def timestamp(self) -> int:
        """Return Unix epoch seconds, treating this value as UTC.

        Examples:
            >>> DateTime(1970, 1, 2).timestamp()
            86400
        """
        return self._total_seconds() - UNIX_EPOCH_ORDINAL * SECONDS_PER_DAY

    def update(self, unit: DateTimeUnit, delta: int) -> DateTime:
        """Add delta units to the date and time, in place.

        Year and month changes follow the date rules, clamping the day to
        the end of the target month and leaving the time untouched. Day,
        hour, minute and second changes carry across the whole field tuple,
        so 23:59:59 plus one second is midnight of the next day.

        Args:
            unit: The field to change.
            delta: Amount to add (can be negative).

        Returns:
            This DateTime, updated.

        Raises:
            OverflowError: If the year would leave the supported range. The
                value is left unchanged.

        Examples:
            >>> DateTime(2024, 1, 31, 8, 0, 0).update(DateTimeUnit.MONTH, 1)
            DateTime(2024, 2, 29, 8, 0, 0)
            >>> DateTime(2024, 3, 1, 0, 30, 0).update(DateTimeUnit.HOUR, -1)
            DateTime(2024, 2, 29, 23, 30, 0)
        """
        unit = _check_unit(unit)
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise TypeError(f"delta must be an int, got {type(delta).__name__}")

        if unit is DateTimeUnit.YEAR or unit is DateTimeUnit.MONTH:
            self._year, self._month, self._day = shift_date(
                self._year, self._month, self._day, DateUnit(unit.value), delta, _KIND
            )
            return self

        total = self._total_seconds() + delta * unit.to_seconds()
        self._year, self._month, self._day, self._seconds = _split_ordinal_seconds(
            total, f"cannot add {delta} {unit.value} to {self!r}"
        )
        return self

    def next(self, unit: DateTimeUnit) -> DateTime:
        """Advance by one unit, in place."""
        return self.update(unit, 1)

    def matches(self, unit: DateTimeUnit, value: int) -> bool:
        """Return True if the given field currently equals value."""
        unit = _check_unit(unit)
        return getattr(self, unit.value) == value

    def clear_time(self) -> DateTime:
        """Set the time to midnight, in place.

        Examples:
            >>> DateTime(2024, 1, 15, 9, 30, 5).clear_time()
            DateTime(2024, 1, 15, 0, 0, 0)
        """
        self._seconds = 0
        return self

    def is_in_future(self, clock: Clock | None = None) -> bool:
        """Return True if this value is later than the current local time.

        Raises:
            ClockError: If the clock cannot supply the current time.
        """
        return self > DateTime.now(clock)

    def elapsed(self, other: DateTime) -> _datetime.timedelta:
        """Return the exact signed difference self - other.

        Examples:
            >>> DateTime(2024, 1, 2, 6, 0, 0).elapsed(DateTime(2024, 1, 1, 18, 0, 0))
            datetime.timedelta(seconds=43200)
        """
        if not isinstance(other, DateTime):
            raise TypeError(f"expected DateTime, got {type(other).__name__}")
        return _datetime.timedelta(seconds=self._total_seconds() - other._total_seconds())

    def unit_elapsed(self, unit: DateTimeUnit, other: DateTime) -> int:
        """Return the number of complete units between other and self.

        The count is signed (positive when self is later). Years and months
        are counted on the calendar and only complete once every finer
        field has caught up; the fixed-length units are truncated toward
        zero.

        Examples:
            >>> a = DateTime(2024, 3, 12, 8, 0, 0)
            >>> a.unit_elapsed(DateTimeUnit.MONTH, DateTime(2024, 1, 12, 9, 0, 0))
            1
            >>> a.unit_elapsed(DateTimeUnit.DAY, DateTime(2024, 3, 10, 9, 0, 0))
            1
        """
        unit = _check_unit(unit)
        if not isinstance(other, DateTime):
            raise TypeError(f"expected DateTime, got {type(other).__name__}")

        unit_seconds = unit.to_seconds()
        if unit_seconds is not None:
            return truncate_div(self._total_seconds() - other._total_seconds(), unit_seconds)

        months = whole_months_between(self._key(), other._key())
        if unit is DateTimeUnit.MONTH:
            return months
        return truncate_div(months, MONTHS_PER_YEAR)

    def copy(self) -> DateTime:
        """Return an independent copy of this DateTime."""
        return DateTime._from_fields(
            self._year, self._month, self._day, self._seconds, self._fmt
        )

    __copy__ = copy

    def with_format(self, fmt: str) -> DateTime:
        """Return a copy of this DateTime that renders with another pattern."""
        return DateTime._from_fields(self._year, self._month, self._day, self._seconds, fmt)

    def default_format(self) -> DateTime:
        """Return a copy that renders with the configured pattern."""
        return self.with_format(get_default_config().datetime_format)

    def to_string(self) -> str:
        """Render the value with its pattern.

        Raises:
            FormatError: If the pattern is invalid.
        """
        return strftime(
            {
                "year": self._year,
                "month": self._month,
                "day": self._day,
                "hour": self.hour,
                "minute": self.minute,
                "second": self.second,
            },
            self._fmt,
            kind=_KIND,
        )

    def to_py(self) -> _datetime.datetime:
        """Return the equivalent naive ``datetime.datetime``.

        Raises:
            ValueError: If the year is outside 1..9999.
        """
        return _datetime.datetime(
            self._year, self._month, self._day, self.hour, self.minute, self.second
        )

    def to_json(self) -> dict[str, Any]:
        """Return the value as a JSON-serializable dictionary."""
        return {"_type": _KIND, "value": self.to_string(), "format": self._fmt}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> DateTime:
        """Create a DateTime from a dictionary produced by to_json().

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

    def _key(self) -> tuple[int, int, int, int]:
        return (self._year, self._month, self._day, self._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    # Mutable values are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"DateTime({self._year}, {self._month}, {self._day}, "
            f"{self.hour}, {self.minute}, {self.second})"
        )

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["DateTime"]
