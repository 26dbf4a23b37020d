"""Tests for the unit enumerations."""

from chronospan.units import DateTimeUnit, DateUnit, TimeUnit


class TestTimeUnit:
    """Tests for TimeUnit."""

    def test_to_seconds(self) -> None:
        """Each unit knows its length."""
        assert [u.to_seconds() for u in TimeUnit] == [3600, 60, 1]

    def test_lookup_by_value(self) -> None:
        """Units can be looked up by name."""
        assert TimeUnit("minute") is TimeUnit.MINUTE


class TestDateUnit:
    """Tests for DateUnit."""

    def test_members(self) -> None:
        """Year, month and day."""
        assert [u.value for u in DateUnit] == ["year", "month", "day"]


class TestDateTimeUnit:
    """Tests for DateTimeUnit."""

    def test_to_seconds(self) -> None:
        """Calendar units have no fixed length."""
        assert DateTimeUnit.YEAR.to_seconds() is None
        assert DateTimeUnit.MONTH.to_seconds() is None
        assert DateTimeUnit.DAY.to_seconds() == 86_400
        assert DateTimeUnit.SECOND.to_seconds() == 1

    def test_values_match_narrower_units(self) -> None:
        """DateTimeUnit values line up with DateUnit and TimeUnit."""
        assert {u.value for u in DateTimeUnit} == {u.value for u in DateUnit} | {u.value for u in TimeUnit}
