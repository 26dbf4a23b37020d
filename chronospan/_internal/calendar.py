"""Calendar utilities for Chronospan.

This module provides internal functions for calendar calculations in the
proleptic Gregorian calendar: leap years, month lengths, ordinal day
numbers and month shifting with end-of-month clamping.

Ordinal 1 = 0001-01-01. Ordinals below 1 address year 0 and negative
(astronomical) years.

This module is not part of the public API.
"""

from __future__ import annotations

from chronospan._internal.constants import DAYS_IN_MONTH, MONTHS_PER_YEAR

# Days in a full Gregorian cycle of 400 years
DAYS_PER_400_YEARS = 146_097
_DAYS_PER_100_YEARS = 36_524
_DAYS_PER_4_YEARS = 1_461


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal day number.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(1970, 1, 1)
        719163
    """
    # Floor division keeps the formula valid for year <= 0
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number to year, month, day.

    Ordinals below 1 are shifted forward by whole 400-year cycles, which
    repeat exactly in the Gregorian calendar, and the year shifted back.

    Args:
        ordinal: The ordinal day number.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> ordinal_to_ymd(719163)
        (1970, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    year_shift = 0
    if ordinal < 1:
        cycles = -ordinal // DAYS_PER_400_YEARS + 1
        ordinal += cycles * DAYS_PER_400_YEARS
        year_shift = cycles * 400

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1
    n400, n = divmod(n, DAYS_PER_400_YEARS)
    n100, n = divmod(n, _DAYS_PER_100_YEARS)
    n4, n = divmod(n, _DAYS_PER_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1 - year_shift, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year - year_shift, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def shift_months(year: int, month: int, day: int, months: int) -> tuple[int, int, int]:
    """Move a date by a number of months, clamping the day.

    If the day does not exist in the target month it becomes the last day
    of that month. The clamp is lossy: shifting back does not restore it.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month.
        months: Number of months to move (can be negative).

    Returns:
        Tuple of (year, month, day) after the shift.

    Examples:
        >>> shift_months(2024, 1, 31, 1)
        (2024, 2, 29)
        >>> shift_months(2024, 1, 15, -1)
        (2023, 12, 15)
    """
    total_months = year * MONTHS_PER_YEAR + (month - 1) + months
    new_year, new_month_index = divmod(total_months, MONTHS_PER_YEAR)
    new_month = new_month_index + 1
    return (new_year, new_month, min(day, days_in_month(new_year, new_month)))


def truncate_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def months_between(
    year: int, month: int, other_year: int, other_month: int
) -> int:
    """Return the raw month-field difference (year, month) - (other_year, other_month)."""
    return (year * MONTHS_PER_YEAR + month) - (
        other_year * MONTHS_PER_YEAR + other_month
    )


def whole_months_between(fields: tuple[int, ...], other_fields: tuple[int, ...]) -> int:
    """Return the number of complete months from other_fields to fields.

    Both tuples start with (year, month) followed by the finer fields in
    decreasing order of size. A month only counts once the finer fields
    have caught up, so 2024-03-01 is 11 complete months after 2023-03-02.

    Examples:
        >>> whole_months_between((2024, 3, 12), (2024, 1, 12))
        2
        >>> whole_months_between((2024, 3, 11), (2024, 1, 12))
        1
        >>> whole_months_between((2024, 1, 12), (2024, 3, 11))
        -1
    """
    months = months_between(fields[0], fields[1], other_fields[0], other_fields[1])
    if months > 0 and fields[2:] < other_fields[2:]:
        months -= 1
    elif months < 0 and fields[2:] > other_fields[2:]:
        months += 1
    return months


__all__ = [
    "DAYS_PER_400_YEARS",
    "is_leap_year",
    "days_in_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "shift_months",
    "months_between",
    "truncate_div",
    "whole_months_between",
]
