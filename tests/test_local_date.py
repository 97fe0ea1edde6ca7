"""Tests for LocalDate."""

from __future__ import annotations

import pytest

from isochron import ChronoField, ChronoUnit, DayOfWeek, IsoEra, LocalDate, Month, Period
from isochron.errors import FieldOutOfRangeError, InvalidDateError, OverflowError, ParseError


class TestLocalDateConstruction:
    """Tests for creating dates."""

    def test_components(self) -> None:
        """Test the date components and derived values."""
        d = LocalDate(2024, 1, 15)
        assert (d.year, d.month, d.day) == (2024, 1, 15)
        assert d.month_of_year is Month.JANUARY
        assert d.day_of_week is DayOfWeek.MONDAY
        assert d.day_of_year == 15

    def test_leap_day(self) -> None:
        """Test the day of year of a leap day."""
        assert LocalDate(2024, 2, 29).day_of_year == 60

    def test_february_30_is_invalid(self) -> None:
        """Test that February 30 raises InvalidDateError."""
        with pytest.raises(InvalidDateError, match="February 30"):
            LocalDate(2024, 2, 30)

    def test_february_29_in_common_year(self) -> None:
        """Test that February 29 in a common year raises InvalidDateError."""
        with pytest.raises(InvalidDateError, match="'2023' is not a leap year"):
            LocalDate(2023, 2, 29)

    def test_month_out_of_range(self) -> None:
        """Test that month 13 raises FieldOutOfRangeError."""
        with pytest.raises(FieldOutOfRangeError):
            LocalDate(2024, 13, 1)

    def test_year_out_of_range(self) -> None:
        """Test that a huge year raises FieldOutOfRangeError."""
        with pytest.raises(FieldOutOfRangeError):
            LocalDate(1_000_000_000, 1, 1)

    def test_of_epoch_day(self) -> None:
        """Test conversion to and from epoch days."""
        assert LocalDate.of_epoch_day(0) == LocalDate(1970, 1, 1)
        assert LocalDate.of_epoch_day(-1) == LocalDate(1969, 12, 31)
        assert LocalDate(2024, 1, 15).to_epoch_day() == 19737

    def test_of_year_day(self) -> None:
        """Test creation from a day of year."""
        assert LocalDate.of_year_day(2024, 366) == LocalDate(2024, 12, 31)
        with pytest.raises(InvalidDateError):
            LocalDate.of_year_day(2023, 366)

    def test_min_max(self) -> None:
        """Test the MIN and MAX constants."""
        assert LocalDate.MIN == LocalDate(-999_999_999, 1, 1)
        assert LocalDate.MAX == LocalDate(999_999_999, 12, 31)

    def test_now(self, fixed_clock) -> None:
        """Test the current date from a fixed clock."""
        assert LocalDate.now(fixed_clock) == LocalDate(2024, 1, 15)


class TestLocalDateCalendar:
    """Tests for leap years, eras and lengths."""

    @pytest.mark.parametrize(
        "year,expected", [(2000, True), (1900, False), (2024, True), (2023, False), (0, True)]
    )
    def test_leap_years(self, year, expected) -> None:
        """Test the Gregorian leap year rule."""
        assert LocalDate(year, 1, 1).is_leap_year is expected

    def test_lengths(self) -> None:
        """Test month and year lengths."""
        assert LocalDate(2024, 2, 1).length_of_month() == 29
        assert LocalDate(2023, 2, 1).length_of_month() == 28
        assert LocalDate(2024, 4, 1).length_of_month() == 30
        assert LocalDate(2024, 1, 1).length_of_year() == 366

    def test_era(self) -> None:
        """Test eras and year of era around year zero."""
        assert LocalDate(1, 1, 1).era is IsoEra.CE
        assert LocalDate(0, 1, 1).era is IsoEra.BCE
        assert LocalDate(0, 1, 1).get(ChronoField.YEAR_OF_ERA) == 1
        assert LocalDate(-1, 1, 1).get(ChronoField.YEAR_OF_ERA) == 2


class TestLocalDateFields:
    """Tests for get, range and with_field."""

    def test_get(self) -> None:
        """Test derived fields."""
        d = LocalDate(2024, 3, 10)
        assert d.get(ChronoField.ALIGNED_WEEK_OF_MONTH) == 2
        assert d.get(ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH) == 3
        assert d.get(ChronoField.PROLEPTIC_MONTH) == 2024 * 12 + 2
        assert d.get(ChronoField.ERA) == 1
        assert d.get(ChronoField.EPOCH_DAY) == d.to_epoch_day()

    def test_range(self) -> None:
        """Test the aligned week range depends on the month."""
        assert str(LocalDate(2023, 2, 1).range(ChronoField.ALIGNED_WEEK_OF_MONTH)) == "1 - 4"
        assert str(LocalDate(2024, 2, 1).range(ChronoField.ALIGNED_WEEK_OF_MONTH)) == "1 - 5"

    def test_with_field(self) -> None:
        """Test with_field() for several fields."""
        d = LocalDate(2024, 1, 31)
        assert d.with_field(ChronoField.MONTH_OF_YEAR, 2) == LocalDate(2024, 2, 29)
        assert d.with_field(ChronoField.DAY_OF_WEEK, 1) == LocalDate(2024, 1, 29)
        assert d.with_field(ChronoField.YEAR, 2023) == LocalDate(2023, 1, 31)
        assert d.with_field(ChronoField.ERA, 0) == LocalDate(-2023, 1, 31)

    def test_with_field_validates(self) -> None:
        """Test that invalid values are rejected."""
        with pytest.raises(FieldOutOfRangeError):
            LocalDate(2024, 1, 1).with_field(ChronoField.MONTH_OF_YEAR, 13)
        with pytest.raises(InvalidDateError):
            LocalDate(2024, 2, 1).with_field(ChronoField.DAY_OF_MONTH, 30)

    def test_with_year_clamps_leap_day(self) -> None:
        """Test with_year() clamps February 29."""
        assert LocalDate(2024, 2, 29).with_year(2023) == LocalDate(2023, 2, 28)

    def test_replace_does_not_clamp(self) -> None:
        """Test replace() rejects invalid dates."""
        with pytest.raises(InvalidDateError):
            LocalDate(2024, 1, 31).replace(month=2)


class TestLocalDateArithmetic:
    """Tests for plus, minus and until."""

    def test_plus_minus_days_round_trip(self) -> None:
        """Test adding then subtracting days."""
        d = LocalDate(2024, 1, 15)
        for n in (0, 1, 31, 365, -400, 100_000):
            assert d.plus_days(n).minus_days(n) == d

    def test_plus_months_clamps(self) -> None:
        """Test adding months clamps the day."""
        assert LocalDate(2024, 1, 31).plus_months(1) == LocalDate(2024, 2, 29)
        assert LocalDate(2024, 3, 31).minus_months(1) == LocalDate(2024, 2, 29)
        assert LocalDate(2024, 12, 15).plus_months(1) == LocalDate(2025, 1, 15)

    def test_plus_period(self) -> None:
        """Test adding a period."""
        assert LocalDate(2024, 1, 31) + Period.of_months(1) == LocalDate(2024, 2, 29)
        assert LocalDate(2023, 1, 31).plus(Period(1, 1, 1)) == LocalDate(2024, 3, 1)

    def test_plus_unit(self) -> None:
        """Test adding weeks, decades and centuries."""
        d = LocalDate(2024, 1, 15)
        assert d.plus(2, ChronoUnit.WEEKS) == LocalDate(2024, 1, 29)
        assert d.plus(1, ChronoUnit.DECADES) == LocalDate(2034, 1, 15)
        assert d.minus(1, ChronoUnit.CENTURIES) == LocalDate(1924, 1, 15)

    def test_overflow(self) -> None:
        """Test that leaving the year range raises OverflowError."""
        with pytest.raises(OverflowError):
            LocalDate.MAX.plus_days(1)
        with pytest.raises(OverflowError):
            LocalDate.MIN.minus_years(1)

    def test_until_period(self) -> None:
        """Test the period between two dates."""
        assert LocalDate(2024, 1, 31).until(LocalDate(2024, 3, 1)) == Period(0, 1, 1)
        assert LocalDate(2024, 3, 1).until(LocalDate(2024, 1, 31)) == Period(0, -1, -1)

    def test_until_units(self) -> None:
        """Test whole units between two dates."""
        start = LocalDate(2024, 1, 31)
        assert start.until(LocalDate(2024, 2, 29), ChronoUnit.MONTHS) == 0
        assert start.until(LocalDate(2024, 3, 31), ChronoUnit.MONTHS) == 2
        assert start.until(LocalDate(2025, 1, 30), ChronoUnit.YEARS) == 0
        assert start.until(LocalDate(2024, 2, 14), ChronoUnit.WEEKS) == 2
        assert start.until(LocalDate(2024, 1, 1), ChronoUnit.DAYS) == -30

    def test_subtract_dates(self) -> None:
        """Test subtracting dates gives a period."""
        assert LocalDate(2025, 3, 20) - LocalDate(2024, 1, 15) == Period(1, 2, 5)

    def test_dates_until(self) -> None:
        """Test iterating over days."""
        dates = list(LocalDate(2024, 1, 30).dates_until(LocalDate(2024, 2, 2)))
        assert [str(d) for d in dates] == ["2024-01-30", "2024-01-31", "2024-02-01"]

    def test_dates_until_with_step(self) -> None:
        """Test iterating by months from a month end."""
        dates = list(LocalDate(2024, 1, 31).dates_until(LocalDate(2024, 5, 1), Period.of_months(1)))
        assert dates == [
            LocalDate(2024, 1, 31),
            LocalDate(2024, 2, 29),
            LocalDate(2024, 3, 31),
            LocalDate(2024, 4, 30),
        ]

    def test_dates_until_rejects_bad_step(self) -> None:
        """Test that a negative step raises ValueError."""
        with pytest.raises(ValueError):
            list(LocalDate(2024, 1, 1).dates_until(LocalDate(2024, 2, 1), Period.of_days(-1)))


class TestLocalDateComparison:
    """Tests for ordering and equality."""

    def test_ordering(self) -> None:
        """Test ordering and sorting."""
        assert LocalDate(2024, 1, 1) < LocalDate(2024, 1, 2)
        assert LocalDate(2024, 1, 2) >= LocalDate(2024, 1, 2)
        assert sorted([LocalDate(2024, 3, 1), LocalDate(2023, 1, 1)])[0] == LocalDate(2023, 1, 1)

    def test_hash(self) -> None:
        """Test equal dates hash alike."""
        assert len({LocalDate(2024, 1, 1), LocalDate(2024, 1, 1)}) == 1

    def test_foreign_comparison(self) -> None:
        """Test comparison with a string."""
        assert LocalDate(2024, 1, 1) != "2024-01-01"
        with pytest.raises(TypeError):
            LocalDate(2024, 1, 1) < "2024-01-02"


class TestLocalDateFormat:
    """Tests for ISO text."""

    @pytest.mark.parametrize(
        "text", ["2024-01-15", "0000-01-01", "-0044-03-15", "+10000-01-01", "9999-12-31"]
    )
    def test_round_trip(self, text) -> None:
        """Test ISO text survives parsing and formatting."""
        assert str(LocalDate.from_iso_format(text)) == text

    def test_repr(self) -> None:
        """Test repr()."""
        assert repr(LocalDate(2024, 1, 15)) == "LocalDate(2024, 1, 15)"

    @pytest.mark.parametrize("text", ["2024-1-15", "2024/01/15", "20240115", "10000-01-01", ""])
    def test_invalid(self, text) -> None:
        """Test that malformed text raises ParseError."""
        with pytest.raises(ParseError):
            LocalDate.from_iso_format(text)
