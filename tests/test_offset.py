"""Tests for ZoneId, ZoneOffset, OffsetDateTime and OffsetTime."""

from __future__ import annotations

import pytest

from isochron import (
    ChronoField,
    ChronoUnit,
    Duration,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    OffsetDateTime,
    OffsetTime,
    Period,
    ZoneId,
    ZoneOffset,
)
from isochron.errors import FieldOutOfRangeError, ParseError
from isochron.zone import ZoneRegion


class TestZoneOffset:
    """Tests for fixed offsets."""

    @pytest.mark.parametrize(
        "text,seconds",
        [
            ("Z", 0),
            ("+5", 18_000),
            ("-08", -28_800),
            ("+05:30", 19_800),
            ("-0830", -30_600),
            ("+01:02:03", 3_723),
            ("-010203", -3_723),
        ],
    )
    def test_of(self, text, seconds) -> None:
        """Test the accepted offset id forms."""
        assert ZoneOffset.of(text).total_seconds == seconds

    @pytest.mark.parametrize("text", ["", "5", "+1:00", "+05:3", "05:00", "+ab:cd"])
    def test_of_invalid(self, text) -> None:
        """Test that malformed ids raise ParseError."""
        with pytest.raises(ParseError):
            ZoneOffset.of(text)

    def test_range(self) -> None:
        """Test the offset is limited to 18 hours."""
        assert ZoneOffset.of_hours(18) == ZoneOffset.MAX
        with pytest.raises(FieldOutOfRangeError):
            ZoneOffset.of_hours_minutes(18, 1)
        with pytest.raises(FieldOutOfRangeError):
            ZoneOffset.of("+19:00")

    def test_mixed_signs(self) -> None:
        """Test that hours and minutes must share a sign."""
        with pytest.raises(FieldOutOfRangeError):
            ZoneOffset.of_hours_minutes(1, -30)
        assert ZoneOffset.of_hours_minutes(0, -30).id == "-00:30"

    def test_ids(self) -> None:
        """Test normalized ids and repr()."""
        assert ZoneOffset.UTC.id == "Z"
        assert ZoneOffset.of_total_seconds(3_723).id == "+01:02:03"
        assert repr(ZoneOffset.of_hours(3)) == "ZoneOffset('+03:00')"

    def test_cached(self) -> None:
        """Test whole quarter hour offsets are cached."""
        assert ZoneOffset.of_hours(0) is ZoneOffset.UTC
        assert ZoneOffset.of("+02:00") is ZoneOffset.of_hours(2)

    def test_ordering_is_descending(self) -> None:
        """Test offsets sort from east to west."""
        offsets = sorted([ZoneOffset.of_hours(-5), ZoneOffset.of_hours(2), ZoneOffset.UTC])
        assert [o.id for o in offsets] == ["+02:00", "Z", "-05:00"]

    def test_rules_are_fixed(self) -> None:
        """Test an offset has fixed rules."""
        rules = ZoneOffset.of_hours(3).rules
        assert rules.is_fixed_offset()
        assert rules.get_offset(Instant.EPOCH) == ZoneOffset.of_hours(3)

    def test_offset_seconds_field(self) -> None:
        """Test the OFFSET_SECONDS field."""
        assert ZoneOffset.of_hours(-2).get(ChronoField.OFFSET_SECONDS) == -7_200


class TestZoneIdInterface:
    """Tests for the abstract ZoneId base class."""

    def test_cannot_instantiate(self) -> None:
        """Test ZoneId itself cannot be instantiated."""
        with pytest.raises(TypeError):
            ZoneId()

    def test_subclass_needs_rules(self) -> None:
        """Test a subclass that only provides an id cannot be instantiated."""

        class NamedOnly(ZoneId):
            @property
            def id(self) -> str:
                return "Test/Named"

        with pytest.raises(TypeError, match="rules"):
            NamedOnly()

    def test_concrete_kinds(self) -> None:
        """Test offsets and regions are both ZoneIds."""
        assert isinstance(ZoneOffset.of_hours(1), ZoneId)
        region = ZoneRegion("Test/Fixed", ZoneOffset.of_hours(1).rules)
        assert isinstance(region, ZoneId)
        assert region.normalized() == ZoneOffset.of_hours(1)


class TestOffsetDateTime:
    """Tests for date-times with a fixed offset."""

    def test_to_instant(self) -> None:
        """Test conversion to an instant."""
        odt = OffsetDateTime.from_iso_format("2024-01-15T10:00+01:00")
        assert odt.to_instant() == Instant.from_iso_format("2024-01-15T09:00:00Z")
        assert odt.get(ChronoField.INSTANT_SECONDS) == odt.to_epoch_second()

    def test_of(self) -> None:
        """Test creation from components."""
        odt = OffsetDateTime.of(2024, 1, 15, 10, 0, 0, 0, ZoneOffset.of_hours(-5))
        assert odt.to_local_date_time() == LocalDateTime(2024, 1, 15, 10, 0)
        assert odt.to_local_date() == LocalDate(2024, 1, 15)
        assert odt.offset == ZoneOffset.of_hours(-5)

    def test_of_instant(self) -> None:
        """Test creation from an instant."""
        odt = OffsetDateTime.of_instant(Instant.EPOCH, ZoneOffset.of_hours(1))
        assert str(odt) == "1970-01-01T01:00+01:00"

    def test_with_offset(self) -> None:
        """Test changing the offset by instant and by local time."""
        odt = OffsetDateTime.from_iso_format("2024-01-15T23:30Z")
        assert str(odt.with_offset_same_instant(ZoneOffset.of_hours(2))) == "2024-01-16T01:30+02:00"
        assert str(odt.with_offset_same_local(ZoneOffset.of_hours(2))) == "2024-01-15T23:30+02:00"

    def test_arithmetic_keeps_offset(self) -> None:
        """Test arithmetic keeps the offset."""
        odt = OffsetDateTime.from_iso_format("2024-01-31T10:00+01:00")
        assert str(odt.plus_months(1)) == "2024-02-29T10:00+01:00"
        assert str(odt + Duration.of_hours(15)) == "2024-02-01T01:00+01:00"
        assert str(odt - Period.of_days(31)) == "2023-12-31T10:00+01:00"

    def test_until_aligns_offsets(self) -> None:
        """Test until() converts the end to the start offset."""
        start = OffsetDateTime.from_iso_format("2024-01-15T10:00+01:00")
        end = OffsetDateTime.from_iso_format("2024-01-15T10:00Z")
        assert start.until(end, ChronoUnit.HOURS) == 1

    def test_equality_and_ordering(self) -> None:
        """Test equality needs the same offset but ordering uses the instant."""
        a = OffsetDateTime.from_iso_format("2024-01-15T10:00+01:00")
        b = OffsetDateTime.from_iso_format("2024-01-15T09:00Z")
        assert a != b
        assert a.is_equal(b)
        assert a > b
        assert not a.is_before(b)

    def test_with_field_instant_seconds(self) -> None:
        """Test setting INSTANT_SECONDS keeps the offset."""
        odt = OffsetDateTime.from_iso_format("2024-01-15T10:00+01:00")
        moved = odt.with_field(ChronoField.INSTANT_SECONDS, 0)
        assert str(moved) == "1970-01-01T01:00+01:00"

    def test_rejects_zone_id(self) -> None:
        """Test that a zone id raises ParseError."""
        with pytest.raises(ParseError):
            OffsetDateTime.from_iso_format("2024-01-15T10:00+01:00[Europe/Paris]")

    def test_to_offset_time(self) -> None:
        """Test conversion to an offset time."""
        odt = OffsetDateTime.from_iso_format("2024-01-15T10:00:30+01:00")
        assert odt.to_offset_time() == OffsetTime(LocalTime(10, 0, 30), ZoneOffset.of_hours(1))


class TestOffsetTime:
    """Tests for times with a fixed offset."""

    def test_round_trip(self) -> None:
        """Test ISO text survives parsing and formatting."""
        for text in ("10:15+01:00", "10:15:30Z", "23:59:59.999-05:30"):
            assert OffsetTime.from_iso_format(text).to_iso_format() == text

    def test_invalid(self) -> None:
        """Test that a missing offset raises ParseError."""
        with pytest.raises(ParseError):
            OffsetTime.from_iso_format("10:15")

    def test_with_offset_same_instant(self) -> None:
        """Test changing the offset keeps the instant."""
        t = OffsetTime.from_iso_format("23:00+01:00")
        assert str(t.with_offset_same_instant(ZoneOffset.of_hours(3))) == "01:00+03:00"

    def test_compare_by_instant(self) -> None:
        """Test ordering and until() use the instant."""
        a = OffsetTime.from_iso_format("10:00+01:00")
        b = OffsetTime.from_iso_format("09:30Z")
        assert a < b
        assert a.is_before(b)
        assert a.until(b, ChronoUnit.MINUTES) == 30

    def test_same_instant_not_equal(self) -> None:
        """Test the same instant with different offsets is not equal."""
        a = OffsetTime.from_iso_format("10:00+01:00")
        b = OffsetTime.from_iso_format("09:00Z")
        assert a.is_equal(b)
        assert a != b

    def test_fields(self) -> None:
        """Test time and offset fields."""
        t = OffsetTime.from_iso_format("10:15-02:00")
        assert t.get(ChronoField.HOUR_OF_DAY) == 10
        assert t.get(ChronoField.OFFSET_SECONDS) == -7_200
        assert not t.is_supported(ChronoField.DAY_OF_MONTH)

    def test_of_instant(self) -> None:
        """Test creation from an instant."""
        t = OffsetTime.of_instant(Instant.of_epoch_second(-1), ZoneOffset.of_hours(2))
        assert t == OffsetTime(LocalTime(1, 59, 59), ZoneOffset.of_hours(2))

    def test_at_date(self) -> None:
        """Test combining with a date."""
        odt = OffsetTime.from_iso_format("10:15+01:00").at_date(LocalDate(2024, 1, 15))
        assert str(odt) == "2024-01-15T10:15+01:00"

    def test_wraps(self) -> None:
        """Test arithmetic wraps around midnight."""
        t = OffsetTime.from_iso_format("23:30Z")
        assert t.plus_hours(1) == OffsetTime.from_iso_format("00:30Z")

    def test_now(self, fixed_clock) -> None:
        """Test the current time from a fixed clock."""
        assert OffsetTime.now(fixed_clock) == OffsetTime.from_iso_format("10:30Z")
