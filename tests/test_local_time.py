"""Tests for LocalTime."""

from __future__ import annotations

import pytest

from isochron import ChronoField, ChronoUnit, Duration, LocalTime, ZoneOffset
from isochron.errors import FieldOutOfRangeError, ParseError, UnsupportedFieldError


class TestLocalTimeConstruction:
    """Tests for creating times."""

    def test_components(self) -> None:
        """Test the time components."""
        t = LocalTime(14, 30, 45, 123_456_789)
        assert (t.hour, t.minute, t.second, t.nanosecond) == (14, 30, 45, 123_456_789)

    @pytest.mark.parametrize(
        "args", [(24, 0), (0, 60), (0, 0, 60), (0, 0, 0, 1_000_000_000), (-1, 0)]
    )
    def test_out_of_range(self, args) -> None:
        """Test that out of range values raise FieldOutOfRangeError."""
        with pytest.raises(FieldOutOfRangeError):
            LocalTime(*args)

    def test_error_message(self) -> None:
        """Test the error message names the field."""
        with pytest.raises(FieldOutOfRangeError) as exc_info:
            LocalTime(24, 0)
        assert str(exc_info.value) == "Invalid value for HourOfDay (valid values 0 - 23): 24"

    def test_of_second_of_day(self) -> None:
        """Test creation from second and nano of day."""
        assert LocalTime.of_second_of_day(3661) == LocalTime(1, 1, 1)
        assert LocalTime.of_nano_of_day(1) == LocalTime(0, 0, 0, 1)

    def test_constants(self) -> None:
        """Test the MIDNIGHT, NOON and MAX constants."""
        assert LocalTime.MIDNIGHT == LocalTime(0, 0)
        assert LocalTime.NOON == LocalTime(12, 0)
        assert LocalTime.MAX == LocalTime(23, 59, 59, 999_999_999)

    def test_now(self, fixed_clock) -> None:
        """Test the current time from a fixed clock."""
        assert LocalTime.now(fixed_clock) == LocalTime(10, 30)


class TestLocalTimeFields:
    """Tests for time fields."""

    def test_clock_hours(self) -> None:
        """Test clock hour and AM/PM fields."""
        assert LocalTime(0, 0).get(ChronoField.CLOCK_HOUR_OF_DAY) == 24
        assert LocalTime(0, 0).get(ChronoField.CLOCK_HOUR_OF_AMPM) == 12
        assert LocalTime(13, 0).get(ChronoField.HOUR_OF_AMPM) == 1
        assert LocalTime(13, 0).get(ChronoField.AMPM_OF_DAY) == 1

    def test_fractions(self) -> None:
        """Test milli and micro fields."""
        t = LocalTime(0, 0, 1, 123_456_789)
        assert t.get(ChronoField.MILLI_OF_SECOND) == 123
        assert t.get(ChronoField.MICRO_OF_SECOND) == 123_456
        assert t.get(ChronoField.MILLI_OF_DAY) == 1123

    def test_with_field(self) -> None:
        """Test replacing time fields."""
        t = LocalTime(10, 15)
        assert t.with_field(ChronoField.AMPM_OF_DAY, 1) == LocalTime(22, 15)
        assert t.with_field(ChronoField.CLOCK_HOUR_OF_DAY, 24) == LocalTime(0, 15)
        assert t.with_field(ChronoField.MINUTE_OF_DAY, 61) == LocalTime(1, 1)
        assert t.with_field(ChronoField.MILLI_OF_SECOND, 5) == LocalTime(10, 15, 0, 5_000_000)

    def test_date_fields_unsupported(self) -> None:
        """Test that date fields raise UnsupportedFieldError."""
        assert not LocalTime(10, 0).is_supported(ChronoField.DAY_OF_MONTH)
        with pytest.raises(UnsupportedFieldError):
            LocalTime(10, 0).get(ChronoField.EPOCH_DAY)


class TestLocalTimeArithmetic:
    """Tests for wrap-around arithmetic."""

    def test_wraps_around_midnight(self) -> None:
        """Test arithmetic wraps around midnight."""
        assert LocalTime(23, 0).plus_hours(2) == LocalTime(1, 0)
        assert LocalTime(0, 30).minus_minutes(45) == LocalTime(23, 45)

    def test_plus_duration(self) -> None:
        """Test + and - with durations."""
        assert LocalTime(10, 0) + Duration.of_minutes(90) == LocalTime(11, 30)
        assert LocalTime(10, 0) - Duration.of_hours(11) == LocalTime(23, 0)

    def test_half_days(self) -> None:
        """Test adding half days."""
        assert LocalTime(10, 0).plus(3, ChronoUnit.HALF_DAYS) == LocalTime(22, 0)
        assert LocalTime(10, 0).plus(2, ChronoUnit.HALF_DAYS) == LocalTime(10, 0)

    def test_days_unsupported(self) -> None:
        """Test that adding days raises UnsupportedFieldError."""
        with pytest.raises(UnsupportedFieldError):
            LocalTime(10, 0).plus(1, ChronoUnit.DAYS)

    def test_until(self) -> None:
        """Test whole units between two times."""
        assert LocalTime(10, 0).until(LocalTime(12, 30), ChronoUnit.HOURS) == 2
        assert LocalTime(12, 30).until(LocalTime(10, 0), ChronoUnit.MINUTES) == -150

    def test_truncated_to(self) -> None:
        """Test truncation to time units."""
        t = LocalTime(10, 15, 30, 123_456_789)
        assert t.truncated_to(ChronoUnit.MINUTES) == LocalTime(10, 15)
        assert t.truncated_to(ChronoUnit.MILLIS) == LocalTime(10, 15, 30, 123_000_000)
        assert t.truncated_to(ChronoUnit.HALF_DAYS) == LocalTime(0, 0)
        with pytest.raises(UnsupportedFieldError):
            t.truncated_to(ChronoUnit.WEEKS)

    def test_at_offset(self) -> None:
        """Test combining with an offset."""
        ot = LocalTime(10, 15).at_offset(ZoneOffset.of_hours(1))
        assert str(ot) == "10:15+01:00"


class TestLocalTimeFormat:
    """Tests for ISO text."""

    @pytest.mark.parametrize(
        "time,text",
        [
            (LocalTime(10, 15), "10:15"),
            (LocalTime(10, 15, 30), "10:15:30"),
            (LocalTime(10, 15, 0, 120_000_000), "10:15:00.120"),
            (LocalTime(10, 15, 30, 1_000), "10:15:30.000001"),
            (LocalTime(10, 15, 30, 1), "10:15:30.000000001"),
        ],
    )
    def test_format(self, time, text) -> None:
        """Test ISO text output and parsing it back."""
        assert time.to_iso_format() == text
        assert LocalTime.from_iso_format(text) == time

    def test_parse_short_fraction(self) -> None:
        """Test a one digit fraction."""
        assert LocalTime.from_iso_format("10:15:30.5") == LocalTime(10, 15, 30, 500_000_000)

    @pytest.mark.parametrize("text", ["10", "10:15:", "1:15", "10:15:30.", "10:15:30.1234567890"])
    def test_invalid(self, text) -> None:
        """Test that malformed text raises ParseError."""
        with pytest.raises(ParseError):
            LocalTime.from_iso_format(text)

    def test_repr(self) -> None:
        """Test repr() drops trailing zero components."""
        assert repr(LocalTime(10, 15)) == "LocalTime(10, 15)"
        assert repr(LocalTime(10, 15, 0, 5)) == "LocalTime(10, 15, 0, 5)"
