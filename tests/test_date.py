"""Tests for the Date class."""

import datetime
import logging

import pytest

from chronospan.core.date import Date
from chronospan.core.datetime import DateTime
from chronospan.core.time import Time
from chronospan.errors import ClockError, FormatError, OverflowError, ParseError, ValidationError
from chronospan.units.dateunit import DateUnit


class TestDateConstruction:
    """Tests for Date construction and validation."""

    def test_basic_construction(self) -> None:
        """Create Date with year, month, day."""
        d = Date(2024, 1, 15)
        assert (d.year, d.month, d.day) == (2024, 1, 15)
        assert d.fmt == "%Y-%m-%d"

    def test_leap_day(self) -> None:
        """Feb 29 is valid in a leap year."""
        d = Date(2024, 2, 29)
        assert d.is_leap_year
        assert d.days_in_month == 29

    def test_leap_day_in_common_year(self) -> None:
        """Feb 29 is invalid in a common year."""
        with pytest.raises(ValidationError, match="day must be between 1 and 28 for 2023-02"):
            Date(2023, 2, 29)

    def test_invalid_month(self) -> None:
        """Month 13 raises ValidationError."""
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            Date(2024, 13, 1)

    def test_year_range(self) -> None:
        """Years outside -9999..9999 are rejected."""
        with pytest.raises(ValidationError, match="year must be between -9999 and 9999"):
            Date(10000, 1, 1)

    def test_year_zero_and_negative(self) -> None:
        """Astronomical year numbering allows 0 and negative years."""
        assert Date(0, 2, 29).is_leap_year
        assert Date(-44, 3, 15).year == -44

    def test_ordinal_roundtrip(self) -> None:
        """to_ordinal and from_ordinal agree."""
        d = Date(2024, 1, 15)
        assert Date.from_ordinal(d.to_ordinal()) == d
        assert Date.from_ordinal(719163) == Date(1970, 1, 1)


class TestDateBuild:
    """Tests for parsing a Date from text."""

    def test_build_default_pattern(self) -> None:
        """Parse with the default %Y-%m-%d pattern."""
        assert Date.build("2023-10-09") == Date(2023, 10, 9)

    def test_build_custom_pattern(self) -> None:
        """Parse with an explicit pattern and keep it."""
        d = Date.build("09/10/2023", "%d/%m/%Y")
        assert d == Date(2023, 10, 9)
        assert d.to_string() == "09/10/2023"

    def test_build_shorthand(self) -> None:
        """%F expands to %Y-%m-%d."""
        assert Date.build("2023-10-09", "%F") == Date(2023, 10, 9)

    def test_build_negative_year(self) -> None:
        """Signed years parse and render."""
        d = Date.build("-0044-03-15")
        assert d == Date(-44, 3, 15)
        assert d.to_string() == "-0044-03-15"

    def test_build_invalid_day_for_month(self) -> None:
        """Feb 30 is a ParseError naming the month."""
        with pytest.raises(ParseError, match="day must be between 1 and 29 for 2024-02"):
            Date.build("2024-02-30")

    @pytest.mark.parametrize("text", ["+2024-01-15", "02024-01-15", "-0000-01-01"])
    def test_build_non_canonical_year(self, text: str) -> None:
        """Year text that would not render back identically is rejected."""
        with pytest.raises(ParseError):
            Date.build(text)

    def test_build_five_digit_year_range(self) -> None:
        """Five-digit years are canonical but still range checked."""
        with pytest.raises(ParseError, match="year must be between"):
            Date.build("10000-01-01")

    def test_build_year_too_large(self) -> None:
        """Five-digit years beyond the range are a ParseError."""
        with pytest.raises(ParseError, match="year must be between"):
            Date.build("12345-01-01")

    def test_build_missing_day(self) -> None:
        """A Date pattern must provide the day."""
        with pytest.raises(ParseError, match="does not provide day"):
            Date.build("2024-01", "%Y-%m")

    def test_build_time_directive(self) -> None:
        """Time directives are not valid in a Date pattern."""
        with pytest.raises(FormatError, match="Date has no hour"):
            Date.build("2024-01-15 10", "%Y-%m-%d %H")

    def test_build_repeated_field(self) -> None:
        """A field may appear twice if both occurrences agree."""
        assert Date.build("2024-01-15/2024", "%Y-%m-%d/%Y") == Date(2024, 1, 15)

    def test_build_conflicting_field(self) -> None:
        """Disagreeing occurrences of a field are a ParseError."""
        with pytest.raises(ParseError, match="conflicting values for year"):
            Date.build("2024-01-15/2023", "%Y-%m-%d/%Y")

    def test_parse_error_kind(self) -> None:
        """Parse errors are tagged with the Date kind."""
        with pytest.raises(ParseError) as exc_info:
            Date.build("not a date")
        assert exc_info.value.kind == "Date"
        assert exc_info.value.expected == "%Y-%m-%d"


class TestDateUpdate:
    """Tests for Date.update with carrying and clamping."""

    def test_month_clamps_in_leap_year(self) -> None:
        """Jan 31 + 1 month is Feb 29 in a leap year."""
        assert Date.build("2024-01-31").update(DateUnit.MONTH, 1) == Date(2024, 2, 29)

    def test_month_clamps_in_common_year(self) -> None:
        """Jan 31 + 1 month is Feb 28 in a common year."""
        assert Date.build("2023-01-31").update(DateUnit.MONTH, 1) == Date(2023, 2, 28)

    def test_clamp_is_not_reversed(self) -> None:
        """Going back a month does not restore the clamped day."""
        d = Date(2024, 1, 31)
        d.update(DateUnit.MONTH, 1)
        d.update(DateUnit.MONTH, -1)
        assert d == Date(2024, 1, 29)

    def test_month_carries_into_year(self) -> None:
        """Months wrap within 1-12 and carry into the year."""
        assert Date(2023, 11, 15).update(DateUnit.MONTH, 3) == Date(2024, 2, 15)
        assert Date(2024, 1, 15).update(DateUnit.MONTH, -13) == Date(2022, 12, 15)

    def test_year_clamps_leap_day(self) -> None:
        """Feb 29 + 1 year is Feb 28."""
        assert Date(2024, 2, 29).update(DateUnit.YEAR, 1) == Date(2025, 2, 28)

    def test_day_carries_into_year(self) -> None:
        """Dec 31 + 1 day is Jan 1 of the next year."""
        assert Date(2023, 12, 31).update(DateUnit.DAY, 1) == Date(2024, 1, 1)

    def test_day_underflow_into_leap_day(self) -> None:
        """Mar 1 - 1 day is Feb 29 in a leap year."""
        assert Date(2024, 3, 1).update(DateUnit.DAY, -1) == Date(2024, 2, 29)

    def test_many_days(self) -> None:
        """Large day deltas use true month lengths."""
        assert Date(2022, 1, 22).update(DateUnit.DAY, 1043) == Date(2024, 11, 30)

    def test_update_in_place(self) -> None:
        """update mutates and returns the same object."""
        d = Date(2024, 1, 1)
        assert d.update(DateUnit.DAY, 1) is d

    def test_next(self) -> None:
        """next(unit) adds one unit."""
        assert Date(2024, 12, 31).next(DateUnit.DAY) == Date(2025, 1, 1)

    def test_overflow_leaves_value_unchanged(self) -> None:
        """Leaving the year range raises OverflowError and changes nothing."""
        d = Date(9999, 12, 31)
        with pytest.raises(OverflowError, match="outside -9999..9999"):
            d.update(DateUnit.DAY, 1)
        assert d == Date(9999, 12, 31)

    def test_overflow_on_year(self) -> None:
        """Year updates past the range raise OverflowError."""
        with pytest.raises(OverflowError) as exc_info:
            Date(-9999, 6, 1).update(DateUnit.YEAR, -1)
        assert exc_info.value.kind == "Date"
        assert exc_info.value.field == "year"

    def test_underflow_on_day(self) -> None:
        """Stepping before -9999-01-01 raises OverflowError."""
        with pytest.raises(OverflowError):
            Date(-9999, 1, 1).update(DateUnit.DAY, -1)

    def test_clamp_is_logged(self, caplog) -> None:
        """Clamping the day emits a debug record."""
        caplog.set_level(logging.DEBUG, logger="chronospan")
        Date(2024, 1, 31).update(DateUnit.MONTH, 1)
        assert "clamped day 31 to 29" in caplog.text

    def test_matches(self) -> None:
        """matches compares a single field."""
        d = Date(2023, 10, 9)
        assert d.matches(DateUnit.YEAR, 2023)
        assert d.matches(DateUnit.MONTH, 10)
        assert not d.matches(DateUnit.DAY, 10)


class TestDateClearUnit:
    """Tests for Date.clear_unit."""

    def test_clear_year(self) -> None:
        """Clearing the year sets it to 1970."""
        assert Date(2023, 10, 9).clear_unit(DateUnit.YEAR) == Date(1970, 10, 9)

    def test_clear_year_clamps(self) -> None:
        """Clearing the year of a leap day clamps to Feb 28."""
        assert Date(2024, 2, 29).clear_unit(DateUnit.YEAR) == Date(1970, 2, 28)

    def test_clear_month_and_day(self) -> None:
        """Month and day reset to 1."""
        assert Date(2023, 10, 9).clear_unit(DateUnit.MONTH) == Date(2023, 1, 9)
        assert Date(2023, 10, 9).clear_unit(DateUnit.DAY) == Date(2023, 10, 1)


class TestDateElapsed:
    """Tests for elapsed and unit_elapsed."""

    def test_elapsed_days(self) -> None:
        """elapsed returns whole days."""
        assert Date(2024, 11, 30).elapsed(Date(2022, 1, 22)) == datetime.timedelta(days=1043)

    def test_elapsed_antisymmetric(self) -> None:
        """a.elapsed(b) == -b.elapsed(a)."""
        a, b = Date(2024, 3, 1), Date(1999, 7, 14)
        assert a.elapsed(b) == -b.elapsed(a)

    def test_unit_elapsed_days(self) -> None:
        """Day counts follow real month lengths."""
        assert Date(2024, 3, 12).unit_elapsed(DateUnit.DAY, Date(2024, 1, 12)) == 60

    def test_unit_elapsed_months(self) -> None:
        """A month counts once the day has caught up."""
        assert Date(2024, 3, 12).unit_elapsed(DateUnit.MONTH, Date(2024, 1, 12)) == 2
        assert Date(2024, 3, 11).unit_elapsed(DateUnit.MONTH, Date(2024, 1, 12)) == 1
        assert Date(2024, 2, 29).unit_elapsed(DateUnit.MONTH, Date(2024, 1, 31)) == 0

    def test_unit_elapsed_years(self) -> None:
        """A year counts once month and day have caught up."""
        assert Date(2024, 3, 2).unit_elapsed(DateUnit.YEAR, Date(2023, 3, 2)) == 1
        assert Date(2024, 3, 1).unit_elapsed(DateUnit.YEAR, Date(2023, 3, 2)) == 0

    def test_unit_elapsed_negative(self) -> None:
        """Counts are signed."""
        assert Date(2024, 1, 12).unit_elapsed(DateUnit.MONTH, Date(2024, 3, 11)) == -1
        assert Date(2023, 3, 2).unit_elapsed(DateUnit.YEAR, Date(2024, 3, 1)) == 0
        assert Date(2020, 1, 1).unit_elapsed(DateUnit.YEAR, Date(2024, 1, 1)) == -4


class TestDateClock:
    """Tests for today() and is_in_future()."""

    def test_today(self, clock) -> None:
        """today() reads the date from the clock."""
        assert Date.today(clock) == Date(2024, 6, 15)

    def test_is_in_future(self, clock) -> None:
        """Only dates after today are in the future."""
        assert Date(2024, 6, 16).is_in_future(clock)
        assert not Date(2024, 6, 15).is_in_future(clock)
        assert not Date(2020, 1, 1).is_in_future(clock)

    def test_bad_clock_result(self) -> None:
        """A clock that returns something other than a datetime fails."""

        class StringClock:
            def now(self):
                return "2024-01-01"

        with pytest.raises(ClockError, match="expected datetime"):
            Date(2024, 1, 1).is_in_future(StringClock())


class TestDateConversion:
    """Tests for conversions and copies."""

    def test_to_datetime_midnight(self) -> None:
        """to_datetime() is midnight on the date."""
        assert Date(2024, 1, 15).to_datetime() == DateTime(2024, 1, 15, 0, 0, 0)

    def test_to_datetime_with_time(self) -> None:
        """to_datetime(time) combines both parts."""
        assert Date(2024, 1, 15).to_datetime(Time(9, 30)) == DateTime(2024, 1, 15, 9, 30, 0)

    def test_py_roundtrip(self) -> None:
        """Conversion to and from datetime.date."""
        assert Date(2024, 1, 15).to_py() == datetime.date(2024, 1, 15)
        assert Date.from_py(datetime.date(2024, 1, 15)) == Date(2024, 1, 15)

    def test_with_format(self) -> None:
        """with_format returns a copy with another pattern."""
        d = Date(2024, 1, 15)
        assert d.with_format("%d.%m.%Y").to_string() == "15.01.2024"
        assert d.to_string() == "2024-01-15"

    def test_copy_is_independent(self) -> None:
        """Updating a copy leaves the original alone."""
        d = Date(2024, 1, 15)
        c = d.copy()
        c.update(DateUnit.DAY, 1)
        assert d == Date(2024, 1, 15)

    def test_repr(self) -> None:
        """repr shows the fields."""
        assert repr(Date(2024, 1, 15)) == "Date(2024, 1, 15)"

    def test_ordering_ignores_pattern(self) -> None:
        """Dates compare by fields only."""
        assert Date(2024, 1, 15) == Date(2024, 1, 15, fmt="%d/%m/%Y")
        assert Date(2023, 12, 31) < Date(2024, 1, 1)
        assert Date(-1, 1, 1) < Date(0, 1, 1)

    def test_roundtrip(self) -> None:
        """build(to_string()) gives back an equal value."""
        for fmt in ("%Y-%m-%d", "%d/%m/%Y", "%Y%m%d", "%F"):
            d = Date(2024, 2, 29, fmt=fmt)
            assert Date.build(d.to_string(), fmt) == d
