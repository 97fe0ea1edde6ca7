"""Tests for JSON serialization and deserialization."""

from __future__ import annotations

import json

import pytest

from isochron import (
    Duration,
    Instant,
    LocalDate,
    LocalDateTime,
    MinguoChronology,
    MonthDay,
    OffsetTime,
    Period,
    ZonedDateTime,
    ZoneId,
    ZoneOffset,
)
from isochron.convert import from_json, to_json
from isochron.errors import ParseError, ValidationError


class TestToJson:
    """Tests for to_json()."""

    @pytest.mark.parametrize(
        "value,type_name,text",
        [
            (LocalDate(2024, 1, 15), "LocalDate", "2024-01-15"),
            (LocalDateTime(2024, 1, 15, 14, 30, 45, 123_456_789), "LocalDateTime", "2024-01-15T14:30:45.123456789"),
            (Instant.of_epoch_second(1_705_314_600), "Instant", "2024-01-15T10:30:00Z"),
            (OffsetTime.from_iso_format("10:15+05:30"), "OffsetTime", "10:15+05:30"),
            (Period(1, 2, 3), "Period", "P1Y2M3D"),
            (MonthDay(2, 29), "MonthDay", "--02-29"),
        ],
    )
    def test_tagged_text(self, value, type_name, text) -> None:
        """Test values are tagged with their type name."""
        assert to_json(value) == {"_type": type_name, "value": text}

    def test_duration_carries_total_nanos(self) -> None:
        """Test a duration carries its exact nanosecond count."""
        assert to_json(Duration.of_minutes(90)) == {
            "_type": "Duration",
            "value": "PT1H30M",
            "total_nanos": 5_400_000_000_000,
        }

    def test_zoned_date_time(self, paris) -> None:
        """Test a zoned date-time keeps its zone."""
        zdt = ZonedDateTime(LocalDateTime(2024, 3, 31, 2, 30), paris)
        assert to_json(zdt)["value"] == "2024-03-31T03:30+02:00[Europe/Paris]"

    def test_zones(self) -> None:
        """Test zone regions and offsets."""
        assert to_json(ZoneOffset.UTC) == {"_type": "ZoneOffset", "value": "Z"}
        assert to_json(ZoneId.of("UTC")) == {"_type": "ZoneId", "value": "UTC"}

    def test_chrono_date(self) -> None:
        """Test a ChronoDate stores the ISO date and its chronology id."""
        date = MinguoChronology.INSTANCE.date(113, 1, 15)
        assert to_json(date) == {
            "_type": "ChronoDate",
            "chronology": "Minguo",
            "value": "2024-01-15",
        }

    @pytest.mark.parametrize("value", [42, "2024-01-15", None])
    def test_unsupported_value(self, value) -> None:
        """Test that unsupported values raise TypeError."""
        with pytest.raises(TypeError):
            to_json(value)


class TestFromJson:
    """Tests for from_json()."""

    def test_local_date(self) -> None:
        """Test decoding a date."""
        assert from_json({"_type": "LocalDate", "value": "2024-01-15"}) == LocalDate(2024, 1, 15)

    def test_duration_prefers_total_nanos(self) -> None:
        """Test total nanos win over the text."""
        data = {"_type": "Duration", "value": "PT1S", "total_nanos": 5}
        assert from_json(data) == Duration.of_nanos(5)
        assert from_json({"_type": "Duration", "value": "PT1S"}) == Duration.of_seconds(1)

    def test_zoned_date_time(self, paris) -> None:
        """Test decoding a zoned date-time."""
        data = {"_type": "ZonedDateTime", "value": "2024-10-27T02:30+01:00[Europe/Paris]"}
        zdt = from_json(data)
        assert zdt.offset == ZoneOffset.of_hours(1)
        assert zdt.zone == paris

    def test_chrono_date(self) -> None:
        """Test decoding a date in another calendar."""
        data = {"_type": "ChronoDate", "chronology": "roc", "value": "2024-01-15"}
        assert from_json(data) == MinguoChronology.INSTANCE.date(113, 1, 15)

    def test_zone_offset(self) -> None:
        """Test decoding an offset."""
        assert from_json({"_type": "ZoneOffset", "value": "+05:30"}) == ZoneOffset.of_hours_minutes(5, 30)

    def test_through_json_text(self) -> None:
        """Test the dicts survive json.dumps and json.loads."""
        value = LocalDateTime(2024, 1, 15, 14, 30, 45, 1)
        assert from_json(json.loads(json.dumps(to_json(value)))) == value


class TestFromJsonErrors:
    """Tests for malformed JSON dicts."""

    def test_not_a_dict(self) -> None:
        """Test that a non-dict raises ParseError."""
        with pytest.raises(ParseError):
            from_json(["LocalDate", "2024-01-15"])

    def test_missing_type(self) -> None:
        """Test that a missing type raises ParseError."""
        with pytest.raises(ParseError, match="_type"):
            from_json({"value": "2024-01-15"})

    def test_missing_value(self) -> None:
        """Test that a missing value raises ParseError."""
        with pytest.raises(ParseError, match="value"):
            from_json({"_type": "LocalDate"})

    def test_unknown_type(self) -> None:
        """Test that an unknown type raises TypeError."""
        with pytest.raises(TypeError):
            from_json({"_type": "DateTime", "value": "2024-01-15T10:00"})

    def test_malformed_text(self) -> None:
        """Test that bad ISO text raises ParseError."""
        with pytest.raises(ParseError):
            from_json({"_type": "LocalDate", "value": "2024/01/15"})

    def test_chrono_date_without_chronology(self) -> None:
        """Test that a calendar date needs a chronology."""
        with pytest.raises(ParseError, match="chronology"):
            from_json({"_type": "ChronoDate", "value": "2024-01-15"})

    def test_unknown_chronology(self) -> None:
        """Test that an unknown chronology is rejected."""
        with pytest.raises(ValidationError):
            from_json({"_type": "ChronoDate", "chronology": "Hijrah", "value": "2024-01-15"})
