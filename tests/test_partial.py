"""Tests for Year, YearMonth and MonthDay."""

from __future__ import annotations

import pytest

from isochron import ChronoField, ChronoUnit, LocalDate, Month, MonthDay, Year, YearMonth
from isochron.errors import FieldOutOfRangeError, InvalidDateError, ParseError, UnsupportedFieldError


class TestYear:
    """Tests for Year."""

    def test_leap(self) -> None:
        """Test leap years and year length."""
        assert Year(2024).is_leap
        assert not Year(1900).is_leap
        assert Year(2000).length() == 366
        assert Year.is_leap_year(-4)

    def test_fields(self) -> None:
        """Test era fields for a year before year one."""
        year = Year(-2023)
        assert year.get(ChronoField.YEAR_OF_ERA) == 2024
        assert year.get(ChronoField.ERA) == 0
        assert Year(2024).with_field(ChronoField.ERA, 0) == year
        assert year.range(ChronoField.YEAR_OF_ERA).maximum == Year.MAX_VALUE + 1
        with pytest.raises(UnsupportedFieldError):
            year.get(ChronoField.MONTH_OF_YEAR)

    def test_arithmetic(self) -> None:
        """Test adding and counting year based units."""
        assert Year(2024).plus(2, ChronoUnit.DECADES) == Year(2044)
        assert Year(2024).minus_years(2025) == Year(-1)
        assert Year(2024).until(Year(2124), ChronoUnit.CENTURIES) == 1
        assert Year(2024).until(Year(2015), ChronoUnit.DECADES) == 0
        with pytest.raises(UnsupportedFieldError):
            Year(2024).plus(1, ChronoUnit.MONTHS)

    def test_combine(self) -> None:
        """Test combining with a day, month or month-day."""
        assert Year(2023).at_day(60) == LocalDate(2023, 3, 1)
        assert Year(2024).at_month(2) == YearMonth(2024, 2)
        assert Year(2023).at_month_day(MonthDay(2, 29)) == LocalDate(2023, 2, 28)
        assert Year(2024).is_valid_month_day(MonthDay(2, 29))
        with pytest.raises(InvalidDateError):
            Year(2023).at_day(366)

    @pytest.mark.parametrize("year,text", [(2024, "2024"), (-44, "-0044"), (12345, "+12345"), (7, "0007")])
    def test_iso_format(self, year, text) -> None:
        """Test ISO text for years of several sizes."""
        assert str(Year(year)) == text
        assert Year.from_iso_format(text) == Year(year)

    def test_plus_sign_needs_five_digits(self) -> None:
        """Test that a plus sign on four digits raises ParseError."""
        with pytest.raises(ParseError):
            Year.from_iso_format("+2024")

    def test_ordering(self) -> None:
        """Test ordering."""
        assert sorted([Year(2024), Year(-1), Year(2000)]) == [Year(-1), Year(2000), Year(2024)]

    def test_now(self, fixed_clock) -> None:
        """Test the current year from a fixed clock."""
        assert Year.now(fixed_clock) == Year(2024)


class TestYearMonth:
    """Tests for YearMonth."""

    def test_lengths(self) -> None:
        """Test month and year lengths."""
        assert YearMonth(2024, 2).length_of_month() == 29
        assert YearMonth(2023, Month.FEBRUARY).length_of_month() == 28
        assert YearMonth(2023, 4).length_of_year() == 365
        assert YearMonth(2024, 4).is_valid_day(30)
        assert not YearMonth(2024, 4).is_valid_day(31)

    def test_invalid(self) -> None:
        """Test that month 13 raises FieldOutOfRangeError."""
        with pytest.raises(FieldOutOfRangeError):
            YearMonth(2024, 13)

    def test_plus_months(self) -> None:
        """Test adding months across year ends."""
        assert YearMonth(2024, 11).plus_months(3) == YearMonth(2025, 2)
        assert YearMonth(2024, 1).minus_months(1) == YearMonth(2023, 12)
        assert YearMonth(0, 1).minus_months(1) == YearMonth(-1, 12)
        assert YearMonth(2024, 1).plus(1, ChronoUnit.DECADES) == YearMonth(2034, 1)

    def test_until(self) -> None:
        """Test counting months and years."""
        start = YearMonth(2024, 1)
        assert start.until(YearMonth(2025, 3), ChronoUnit.MONTHS) == 14
        assert start.until(YearMonth(2023, 2), ChronoUnit.YEARS) == 0
        assert start.until(LocalDate(2026, 1, 31), ChronoUnit.YEARS) == 2

    def test_fields(self) -> None:
        """Test the proleptic month field."""
        ym = YearMonth(2024, 3)
        assert ym.get(ChronoField.PROLEPTIC_MONTH) == 2024 * 12 + 2
        assert ym.with_field(ChronoField.PROLEPTIC_MONTH, 0) == YearMonth(0, 1)
        assert ym.with_field(ChronoField.MONTH_OF_YEAR, 12) == YearMonth(2024, 12)
        assert not ym.is_supported(ChronoField.DAY_OF_MONTH)

    def test_combine(self) -> None:
        """Test combining with a day."""
        assert YearMonth(2024, 2).at_end_of_month() == LocalDate(2024, 2, 29)
        assert YearMonth(2024, 2).at_day(15) == LocalDate(2024, 2, 15)
        with pytest.raises(InvalidDateError):
            YearMonth(2023, 2).at_day(29)

    def test_iso_format(self) -> None:
        """Test ISO text."""
        assert str(YearMonth(2024, 2)) == "2024-02"
        assert YearMonth.from_iso_format("-0001-12") == YearMonth(-1, 12)
        with pytest.raises(ParseError):
            YearMonth.from_iso_format("2024-2")

    def test_ordering(self) -> None:
        """Test ordering."""
        assert YearMonth(2023, 12) < YearMonth(2024, 1)
        assert max(YearMonth(2024, 5), YearMonth(2024, 3)) == YearMonth(2024, 5)


class TestMonthDay:
    """Tests for MonthDay."""

    def test_february_29(self) -> None:
        """Test February 29 in common and leap years."""
        leap_day = MonthDay(2, 29)
        assert not leap_day.is_valid_year(2023)
        assert leap_day.at_year(2023) == LocalDate(2023, 2, 28)
        assert leap_day.at_year(2024) == LocalDate(2024, 2, 29)

    @pytest.mark.parametrize("month,day", [(2, 30), (4, 31), (11, 31)])
    def test_day_never_valid(self, month, day) -> None:
        """Test that impossible days raise InvalidDateError."""
        with pytest.raises(InvalidDateError):
            MonthDay(month, day)

    def test_out_of_range(self) -> None:
        """Test that out of range values raise FieldOutOfRangeError."""
        with pytest.raises(FieldOutOfRangeError):
            MonthDay(13, 1)
        with pytest.raises(FieldOutOfRangeError):
            MonthDay(1, 32)

    def test_with_month_clamps(self) -> None:
        """Test changing the month clamps the day."""
        assert MonthDay(3, 31).with_month(4) == MonthDay(4, 30)
        assert MonthDay(1, 31).with_month(2) == MonthDay(2, 29)

    def test_day_range(self) -> None:
        """Test the day range for February."""
        day_range = MonthDay(2, 1).range(ChronoField.DAY_OF_MONTH)
        assert (day_range.smallest_maximum, day_range.maximum) == (28, 29)

    def test_iso_format(self) -> None:
        """Test ISO text with the leading dashes."""
        assert str(MonthDay(12, 3)) == "--12-03"
        assert MonthDay.from_iso_format("--02-29") == MonthDay(2, 29)
        with pytest.raises(InvalidDateError):
            MonthDay.from_iso_format("--02-30")
        with pytest.raises(ParseError):
            MonthDay.from_iso_format("12-03")

    def test_from_temporal(self) -> None:
        """Test extraction from a date."""
        assert MonthDay.from_temporal(LocalDate(2024, 7, 4)) == MonthDay(7, 4)

    def test_ordering(self) -> None:
        """Test ordering."""
        assert MonthDay(1, 31) < MonthDay(2, 1)
