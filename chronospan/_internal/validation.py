"""Validation utilities for Chronospan.

Range checks shared by constructors and parsers. Each check raises the
error class it is given, so the same bounds produce a ValidationError
from a constructor and a ParseError from a parser.

This module is not part of the public API.
"""

from __future__ import annotations

from chronospan._internal.calendar import days_in_month
from chronospan._internal.constants import MAX_YEAR, MIN_YEAR
from chronospan.errors import ChronospanError, ValidationError


def _check(
    name: str,
    value: int,
    low: int,
    high: int,
    error: type[ChronospanError],
    suffix: str = "",
) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise error(
            f"{name} must be an integer, got {type(value).__name__}",
            field=name,
            expected="int",
        )
    if value < low or value > high:
        raise error(
            f"{name} must be between {low} and {high}{suffix}, got {value}",
            field=name,
            expected=f"{low}..{high}",
        )


def validate_year(year: int, error: type[ChronospanError] = ValidationError) -> None:
    """Validate that a year is within MIN_YEAR to MAX_YEAR."""
    _check("year", year, MIN_YEAR, MAX_YEAR, error)


def validate_month(month: int, error: type[ChronospanError] = ValidationError) -> None:
    """Validate that a month is within 1-12."""
    _check("month", month, 1, 12, error)


def validate_day(
    year: int, month: int, day: int, error: type[ChronospanError] = ValidationError
) -> None:
    """Validate that a day exists in the given year and month.

    Raises:
        error: If day is invalid for the month.

    Examples:
        >>> validate_day(2024, 2, 30)
        Traceback (most recent call last):
        ...
        chronospan.errors.ValidationError: day must be between 1 and 29 for 2024-02, got 30
    """
    _check("day", day, 1, days_in_month(year, month), error, f" for {year}-{month:02d}")


def validate_date(
    year: int, month: int, day: int, error: type[ChronospanError] = ValidationError
) -> None:
    """Validate a full (year, month, day) triple."""
    validate_year(year, error)
    validate_month(month, error)
    validate_day(year, month, day, error)


def validate_time(
    hour: int, minute: int, second: int, error: type[ChronospanError] = ValidationError
) -> None:
    """Validate a full (hour, minute, second) triple."""
    _check("hour", hour, 0, 23, error)
    _check("minute", minute, 0, 59, error)
    _check("second", second, 0, 59, error)


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
    "validate_time",
]
