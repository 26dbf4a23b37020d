"""Time class representing a time of day.

This module provides the Time class: hour, minute and second of a day
together with the pattern used to render it. Time has no day concept;
arithmetic wraps around midnight without carrying anywhere.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any

from chronospan._internal.calendar import truncate_div
from chronospan._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from chronospan._internal.validation import validate_time
from chronospan.clock import Clock, read_clock
from chronospan.errors import ChronospanError, ParseError
from chronospan.format.config import get_default_config
from chronospan.format.strftime import strftime, strptime
from chronospan.units.timeunit import TimeUnit

_KIND = "Time"
_FIELDS = ("hour", "minute", "second")


def _check_unit(unit: object) -> TimeUnit:
    if not isinstance(unit, TimeUnit):
        raise TypeError(f"expected TimeUnit, got {type(unit).__name__}")
    return unit


class Time:
    """A time of day with second precision.

    Time represents the time portion of a day, from midnight (00:00:00)
    to 23:59:59. It does not include any date or timezone information.

    The fields are stored as seconds since midnight in a single slot. The
    pattern the value was built with is kept alongside and used by
    to_string(); it does not take part in comparisons.

    Time is mutable: update(), next() and clear_unit() change the value in
    place and return it. Times are therefore not hashable.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        fmt: The pattern used to render this value.

    Examples:
        >>> t = Time.build("T23:17:12Z.000", "T%H:%M:%SZ.000")
        >>> t.update(TimeUnit.HOUR, 1).to_string()
        'T00:17:12Z.000'
        >>> t.matches(TimeUnit.HOUR, 0)
        True
    """

    __slots__ = ("_seconds", "_fmt")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        fmt: str | None = None,
    ) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            fmt: Pattern used by to_string(). Defaults to the configured
                time pattern.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Time(14, 30, 45)
            Time(14, 30, 45)
        """
        try:
            validate_time(hour, minute, second)
        except ChronospanError as e:
            e.with_kind(_KIND)
            raise

        self._seconds: int = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
        self._fmt: str = fmt if fmt is not None else get_default_config().time_format

    @classmethod
    def _from_seconds(cls, seconds: int, fmt: str) -> Time:
        """Create a Time from seconds since midnight, bypassing validation."""
        instance = object.__new__(cls)
        instance._seconds = seconds
        instance._fmt = fmt
        return instance

    @classmethod
    def build(cls, text: str, fmt: str | None = None) -> Time:
        """Parse a Time from text.

        Args:
            text: The text to parse.
            fmt: Pattern to parse with. Defaults to the configured time
                pattern. The pattern is kept for to_string().

        Returns:
            The parsed Time.

        Raises:
            ParseError: If text does not match the pattern, a field is out
                of range, or the pattern has no hour or minute.
            FormatError: If the pattern is invalid or uses date directives.

        Examples:
            >>> Time.build("12:21:46")
            Time(12, 21, 46)

            >>> Time.build("24:00:00")
            Traceback (most recent call last):
            ...
            chronospan.errors.ParseError: Time ➤ hour must be between 0 and 23, got 24
        """
        pattern = fmt if fmt is not None else get_default_config().time_format
        try:
            fields = strptime(
                text,
                pattern,
                kind=_KIND,
                allowed=_FIELDS,
                required=("hour", "minute"),
                defaults={"second": 0},
            )
            validate_time(fields["hour"], fields["minute"], fields["second"], ParseError)
        except ChronospanError as e:
            e.with_kind(_KIND)
            raise

        return cls(fields["hour"], fields["minute"], fields["second"], fmt=pattern)

    @classmethod
    def now(cls, clock: Clock | None = None) -> Time:
        """Return the current local time of day.

        Raises:
            ClockError: If the clock cannot supply the current time.
        """
        now = read_clock(clock, _KIND)
        return cls(now.hour, now.minute, now.second)

    @classmethod
    def midnight(cls, fmt: str | None = None) -> Time:
        """Return a Time representing midnight (00:00:00).

        Examples:
            >>> Time.midnight()
            Time(0, 0, 0)
        """
        return cls(0, 0, 0, fmt=fmt)

    @classmethod
    def from_py(cls, value: _datetime.time, fmt: str | None = None) -> Time:
        """Create a Time from a ``datetime.time``, dropping subseconds and tzinfo."""
        return cls(value.hour, value.minute, value.second, fmt=fmt)

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

    @property
    def seconds_since_midnight(self) -> int:
        """Return the total seconds since midnight [0, 86400)."""
        return self._seconds

    def update(self, unit: TimeUnit, delta: int) -> Time:
        """Add delta units to the time, in place.

        Seconds carry into minutes and minutes into hours; hours wrap
        modulo 24 with no carry out. Any integer delta is accepted.

        Args:
            unit: The field to change.
            delta: Amount to add (can be negative).

        Returns:
            This Time, updated.

        Examples:
            >>> Time(23, 59, 59).update(TimeUnit.SECOND, 1)
            Time(0, 0, 0)

            >>> Time(0, 0, 0).update(TimeUnit.MINUTE, -1)
            Time(23, 59, 0)
        """
        unit = _check_unit(unit)
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise TypeError(f"delta must be an int, got {type(delta).__name__}")

        self._seconds = (self._seconds + delta * unit.to_seconds()) % SECONDS_PER_DAY
        return self

    def next(self, unit: TimeUnit) -> Time:
        """Advance the time by one unit, in place."""
        return self.update(unit, 1)

    def matches(self, unit: TimeUnit, value: int) -> bool:
        """Return True if the given field currently equals value.

        Examples:
            >>> Time(6, 32, 5).matches(TimeUnit.MINUTE, 32)
            True
        """
        unit = _check_unit(unit)
        return getattr(self, unit.value) == value

    def clear_unit(self, unit: TimeUnit) -> Time:
        """Set the given field to zero, in place.

        Examples:
            >>> Time(12, 21, 46).clear_unit(TimeUnit.HOUR)
            Time(0, 21, 46)
        """
        unit = _check_unit(unit)
        self._seconds -= getattr(self, unit.value) * unit.to_seconds()
        return self

    def is_in_future(self, clock: Clock | None = None) -> bool:
        """Return True if this time of day is later than the current one.

        Raises:
            ClockError: If the clock cannot supply the current time.
        """
        return self > Time.now(clock)

    def elapsed(self, other: Time) -> _datetime.timedelta:
        """Return the signed difference self - other within the day.

        Examples:
            >>> Time(1, 21, 0).elapsed(Time(0, 0, 0))
            datetime.timedelta(seconds=4860)
        """
        if not isinstance(other, Time):
            raise TypeError(f"expected Time, got {type(other).__name__}")
        return _datetime.timedelta(seconds=self._seconds - other._seconds)

    def unit_elapsed(self, unit: TimeUnit, other: Time) -> int:
        """Return the number of whole units between other and self.

        The count is signed (positive when self is later) and truncated
        toward zero.

        Examples:
            >>> Time(1, 34, 45).unit_elapsed(TimeUnit.MINUTE, Time(0, 0, 0))
            94
        """
        unit = _check_unit(unit)
        seconds = int(self.elapsed(other).total_seconds())
        return truncate_div(seconds, unit.to_seconds())

    def copy(self) -> Time:
        """Return an independent copy of this Time."""
        return Time._from_seconds(self._seconds, self._fmt)

    __copy__ = copy

    def with_format(self, fmt: str) -> Time:
        """Return a copy of this Time that renders with another pattern."""
        return Time._from_seconds(self._seconds, fmt)

    def default_format(self) -> Time:
        """Return a copy of this Time that renders with the configured pattern."""
        return self.with_format(get_default_config().time_format)

    def to_string(self) -> str:
        """Render the time with its pattern.

        Raises:
            FormatError: If the pattern is invalid or uses date directives.
        """
        return strftime(
            {"hour": self.hour, "minute": self.minute, "second": self.second},
            self._fmt,
            kind=_KIND,
        )

    def to_py(self) -> _datetime.time:
        """Return the equivalent ``datetime.time``."""
        return _datetime.time(self.hour, self.minute, self.second)

    def to_json(self) -> dict[str, Any]:
        """Return the time as a JSON-serializable dictionary.

        Examples:
            >>> Time(12, 21, 46).to_json()
            {'_type': 'Time', 'value': '12:21:46', 'format': '%H:%M:%S'}
        """
        return {"_type": _KIND, "value": self.to_string(), "format": self._fmt}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Time:
        """Create a Time from a dictionary produced by to_json().

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

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._seconds >= other._seconds

    # Mutable values are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Time({self.hour}, {self.minute}, {self.second})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["Time"]
