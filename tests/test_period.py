"""Tests for Period."""

from __future__ import annotations

import pytest

from isochron import ChronoUnit, Duration, LocalDate, Period, Year, YearMonth
from isochron.errors import ParseError, UnsupportedFieldError


class TestPeriodConstruction:
    """Tests for creating periods."""

    def test_components(self) -> None:
        """Test the components and units of a period."""
        p = Period(1, 2, 3)
        assert (p.years, p.months, p.days) == (1, 2, 3)
        assert p.units == [ChronoUnit.YEARS, ChronoUnit.MONTHS, ChronoUnit.DAYS]
        assert p.get(ChronoUnit.MONTHS) == 2

    def test_get_unsupported_unit(self) -> None:
        """Test that weeks raise UnsupportedFieldError."""
        with pytest.raises(UnsupportedFieldError):
            Period(1, 2, 3).get(ChronoUnit.WEEKS)

    def test_factories(self) -> None:
        """Test the of_* factory methods."""
        assert Period.of_years(2) == Period(2, 0, 0)
        assert Period.of_months(-3) == Period(0, -3, 0)
        assert Period.of_weeks(2) == Period(0, 0, 14)
        assert Period.of_days(5) == Period(days=5)
        assert Period.of(1, 2, 3) == Period(1, 2, 3)

    def test_zero_and_negative(self) -> None:
        """Test is_zero and is_negative."""
        assert Period.ZERO.is_zero
        assert not Period(0, 0, 1).is_zero
        assert Period(1, -1, 0).is_negative
        assert not Period(1, 1, 1).is_negative

    def test_between(self) -> None:
        """Test the period between two dates."""
        assert Period.between(LocalDate(2024, 1, 15), LocalDate(2025, 3, 20)) == Period(1, 2, 5)
        assert Period.between(LocalDate(2024, 1, 31), LocalDate(2024, 3, 1)) == Period(0, 1, 1)

    def test_equality_is_component_wise(self) -> None:
        """Test one year does not equal twelve months."""
        assert Period.of_years(1) != Period.of_months(12)
        assert Period.of_years(1).to_total_months() == Period.of_months(12).to_total_months()


class TestPeriodArithmetic:
    """Tests for combining and normalizing periods."""

    def test_plus_minus(self) -> None:
        """Test adding and subtracting periods."""
        assert Period(1, 2, 3) + Period(0, 11, -3) == Period(1, 13, 0)
        assert Period(1, 2, 3) - Period(1, 2, 3) == Period.ZERO
        assert Period(1, 2, 3).plus_days(1).minus_months(2) == Period(1, 0, 4)

    def test_plus_requires_period(self) -> None:
        """Test that adding a duration raises TypeError."""
        with pytest.raises(TypeError):
            Period.of_days(1).plus(Duration.of_days(1))

    def test_multiplied_by(self) -> None:
        """Test multiplication and negation."""
        assert Period(1, 2, 3) * 2 == Period(2, 4, 6)
        assert -Period(1, 2, 3) == Period(-1, -2, -3)

    @pytest.mark.parametrize(
        "period,expected",
        [
            (Period(1, 15, 0), Period(2, 3, 0)),
            (Period(1, -25, 0), Period(-1, -1, 0)),
            (Period(0, 12, 40), Period(1, 0, 40)),
            (Period(-1, 2, 0), Period(0, -10, 0)),
        ],
    )
    def test_normalized(self, period, expected) -> None:
        """Test months are folded into years."""
        assert period.normalized() == expected

    def test_add_to_date_clamps_once(self) -> None:
        """Test years and months are added before clamping."""
        assert LocalDate(2024, 1, 31) + Period(1, 1, 0) == LocalDate(2025, 2, 28)
        assert LocalDate(2024, 1, 31).plus(Period(0, 1, 1)) == LocalDate(2024, 3, 1)

    def test_subtract_from_date(self) -> None:
        """Test subtracting from a date clamps the day."""
        assert LocalDate(2024, 3, 31) - Period.of_months(1) == LocalDate(2024, 2, 29)

    def test_years_only_on_year(self) -> None:
        """Test adding to partial dates."""
        assert Year(2024).plus(Period.of_years(3)) == Year(2027)
        assert YearMonth(2024, 11).plus(Period.of_months(3)) == YearMonth(2025, 2)


class TestPeriodFormat:
    """Tests for ISO text."""

    @pytest.mark.parametrize(
        "period,text",
        [
            (Period.ZERO, "P0D"),
            (Period(1, 2, 3), "P1Y2M3D"),
            (Period(0, 0, 14), "P14D"),
            (Period(-1, -2, 0), "P-1Y-2M"),
        ],
    )
    def test_to_iso_format(self, period, text) -> None:
        """Test ISO text output."""
        assert period.to_iso_format() == text
        assert str(period) == text

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("P1Y2M3D", Period(1, 2, 3)),
            ("P2W", Period(0, 0, 14)),
            ("P1W3D", Period(0, 0, 10)),
            ("-P1Y2M", Period(-1, -2, 0)),
            ("P-1Y+2M", Period(-1, 2, 0)),
            ("p3m", Period(0, 3, 0)),
        ],
    )
    def test_from_iso_format(self, text, expected) -> None:
        """Test parsing weeks, signs and lower case text."""
        assert Period.from_iso_format(text) == expected

    @pytest.mark.parametrize("text", ["", "P", "P1H", "PT1S", "1Y"])
    def test_invalid(self, text) -> None:
        """Test that malformed text raises ParseError."""
        with pytest.raises(ParseError):
            Period.from_iso_format(text)

    def test_repr(self) -> None:
        """Test repr()."""
        assert repr(Period(1, 2, 3)) == "Period(years=1, months=2, days=3)"
