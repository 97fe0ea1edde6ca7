"""Tests for ZonedDateTime and resolving local times in zones."""

from __future__ import annotations

import pytest

from isochron import (
    ChronoField,
    ChronoUnit,
    Duration,
    GapPolicy,
    Instant,
    LocalDate,
    LocalDateTime,
    OverlapPolicy,
    Period,
    ZonedDateTime,
    ZoneId,
    ZoneOffset,
    ZoneOffsetTransition,
    ZoneRules,
)
from isochron.errors import UnresolvedLocalTimeError, ZoneRulesError
from isochron.zone import ZoneRegion, resolve_local

CET = ZoneOffset.of_hours(1)
CEST = ZoneOffset.of_hours(2)


class TestResolveGap:
    """Tests for local times that do not exist."""

    def test_shift_forward(self, paris) -> None:
        """Test a time in the gap moves forward by the gap length."""
        zdt = ZonedDateTime(LocalDateTime(2024, 3, 31, 2, 30), paris)
        assert str(zdt) == "2024-03-31T03:30+02:00[Europe/Paris]"
        assert zdt.offset == CEST

    def test_start_of_gap(self, paris) -> None:
        """Test the start of the gap moves to its end."""
        zdt = ZonedDateTime.of_local(LocalDateTime(2024, 3, 31, 2, 0), paris)
        assert zdt.to_local_date_time() == LocalDateTime(2024, 3, 31, 3, 0)

    def test_raise(self, paris) -> None:
        """Test that the raise policy raises UnresolvedLocalTimeError."""
        with pytest.raises(UnresolvedLocalTimeError) as exc_info:
            ZonedDateTime(LocalDateTime(2024, 3, 31, 2, 30), paris, gap=GapPolicy.RAISE)
        assert exc_info.value.transition.is_gap

    def test_at_zone_passes_policies(self, paris) -> None:
        """Test at_zone() forwards the policies."""
        with pytest.raises(UnresolvedLocalTimeError):
            LocalDateTime(2024, 3, 31, 2, 30).at_zone(paris, gap=GapPolicy.RAISE)

    def test_resolve_local(self, paris) -> None:
        """Test resolve_local() returns the shifted time and offset."""
        local, offset = resolve_local(LocalDateTime(2024, 3, 31, 2, 15), paris)
        assert (local, offset) == (LocalDateTime(2024, 3, 31, 3, 15), CEST)


class TestResolveOverlap:
    """Tests for local times that occur twice."""

    def test_earlier_by_default(self, paris) -> None:
        """Test the earlier offset is used by default."""
        zdt = ZonedDateTime(LocalDateTime(2024, 10, 27, 2, 30), paris)
        assert str(zdt) == "2024-10-27T02:30+02:00[Europe/Paris]"

    def test_later(self, paris) -> None:
        """Test the later policy."""
        zdt = ZonedDateTime(LocalDateTime(2024, 10, 27, 2, 30), paris, overlap=OverlapPolicy.LATER)
        assert zdt.offset == CET

    def test_raise(self, paris) -> None:
        """Test that the raise policy raises UnresolvedLocalTimeError."""
        with pytest.raises(UnresolvedLocalTimeError) as exc_info:
            ZonedDateTime(LocalDateTime(2024, 10, 27, 2, 30), paris, overlap=OverlapPolicy.RAISE)
        assert exc_info.value.transition.is_overlap

    def test_preferred_offset_wins(self, paris) -> None:
        """Test a valid preferred offset is used."""
        zdt = ZonedDateTime(LocalDateTime(2024, 10, 27, 2, 30), paris, preferred_offset=CET)
        assert zdt.offset == CET

    def test_invalid_preferred_offset_is_ignored(self, paris) -> None:
        """Test an invalid preferred offset falls back to the policy."""
        zdt = ZonedDateTime(
            LocalDateTime(2024, 10, 27, 2, 30), paris, preferred_offset=ZoneOffset.UTC
        )
        assert zdt.offset == CEST

    def test_switch_offset(self, paris) -> None:
        """Test switching between the two offsets."""
        earlier = ZonedDateTime(LocalDateTime(2024, 10, 27, 2, 30), paris)
        later = earlier.with_later_offset_at_overlap()
        assert later.offset == CET
        assert later.to_instant().epoch_second - earlier.to_instant().epoch_second == 3600
        assert later.with_earlier_offset_at_overlap() == earlier

    def test_switch_outside_overlap_is_noop(self, paris) -> None:
        """Test switching outside an overlap returns the same value."""
        zdt = ZonedDateTime(LocalDateTime(2024, 6, 1, 12, 0), paris)
        assert zdt.with_later_offset_at_overlap() is zdt


class TestZonedArithmetic:
    """Tests for arithmetic across transitions."""

    def test_time_units_follow_the_instant(self, paris) -> None:
        """Test time units are added on the time-line."""
        zdt = ZonedDateTime(LocalDateTime(2024, 3, 31, 1, 30), paris)
        assert str(zdt.plus_hours(1)) == "2024-03-31T03:30+02:00[Europe/Paris]"
        assert str(zdt + Duration.of_minutes(30)) == "2024-03-31T03:00+02:00[Europe/Paris]"

    def test_date_units_follow_the_local_time(self, paris) -> None:
        """Test date units keep the local time."""
        zdt = ZonedDateTime(LocalDateTime(2024, 3, 30, 12, 0), paris)
        assert str(zdt.plus_days(1)) == "2024-03-31T12:00+02:00[Europe/Paris]"
        assert str(zdt + Period.of_days(1)) == "2024-03-31T12:00+02:00[Europe/Paris]"

    def test_date_units_into_gap(self, paris) -> None:
        """Test date units landing in a gap are shifted."""
        zdt = ZonedDateTime(LocalDateTime(2024, 3, 30, 2, 30), paris)
        assert str(zdt.plus_days(1)) == "2024-03-31T03:30+02:00[Europe/Paris]"

    def test_date_units_keep_offset_in_overlap(self, paris) -> None:
        """Test date units landing in an overlap keep the old offset."""
        zdt = ZonedDateTime(LocalDateTime(2024, 10, 28, 2, 30), paris)
        assert zdt.minus_days(1).offset == CET
        zdt = ZonedDateTime(LocalDateTime(2024, 10, 26, 2, 30), paris)
        assert zdt.plus_days(1).offset == CEST

    def test_until(self, paris) -> None:
        """Test a day with a gap has 23 hours."""
        start = ZonedDateTime(LocalDateTime(2024, 3, 31, 0, 0), paris)
        end = ZonedDateTime(LocalDateTime(2024, 4, 1, 0, 0), paris)
        assert start.until(end, ChronoUnit.HOURS) == 23
        assert start.until(end, ChronoUnit.DAYS) == 1
        assert Duration.between(start, end) == Duration.of_hours(23)

    def test_until_moves_end_into_zone(self, paris) -> None:
        """Test until() converts the end to the start zone."""
        start = ZonedDateTime(LocalDateTime(2024, 6, 1, 12, 0), paris)
        end = start.with_zone_same_instant(ZoneOffset.UTC).plus_hours(2)
        assert start.until(end, ChronoUnit.MINUTES) == 120

    def test_truncated_to(self, paris) -> None:
        """Test truncation to hours."""
        zdt = ZonedDateTime(LocalDateTime(2024, 6, 1, 12, 34, 56), paris)
        assert zdt.truncated_to(ChronoUnit.HOURS).to_local_date_time() == LocalDateTime(2024, 6, 1, 12, 0)


class TestZonedConversion:
    """Tests for instants, zones and offsets."""

    def test_of_instant(self, paris) -> None:
        """Test creation from an instant."""
        zdt = ZonedDateTime.of_instant(Instant.from_iso_format("2024-03-31T01:00:00Z"), paris)
        assert str(zdt) == "2024-03-31T03:00+02:00[Europe/Paris]"
        assert Instant.from_iso_format("2024-03-31T01:00:00Z").at_zone(paris) == zdt

    def test_of_strict(self, paris) -> None:
        """Test strict creation checks the offset."""
        local = LocalDateTime(2024, 10, 27, 2, 30)
        assert ZonedDateTime.of_strict(local, CET, paris).offset == CET
        with pytest.raises(ZoneRulesError):
            ZonedDateTime.of_strict(LocalDateTime(2024, 6, 1, 12, 0), CET, paris)
        with pytest.raises(UnresolvedLocalTimeError):
            ZonedDateTime.of_strict(LocalDateTime(2024, 3, 31, 2, 30), CET, paris)

    def test_with_zone(self, paris) -> None:
        """Test changing the zone by instant and by local time."""
        zdt = ZonedDateTime(LocalDateTime(2024, 6, 1, 12, 0), paris)
        assert str(zdt.with_zone_same_instant(ZoneOffset.UTC)) == "2024-06-01T10:00Z"
        assert str(zdt.with_zone_same_local(ZoneOffset.UTC)) == "2024-06-01T12:00Z"
        assert str(zdt.with_fixed_offset_zone()) == "2024-06-01T12:00+02:00"

    def test_fields(self, paris) -> None:
        """Test offset and instant fields."""
        zdt = ZonedDateTime(LocalDateTime(2024, 6, 1, 12, 0), paris)
        assert zdt.get(ChronoField.OFFSET_SECONDS) == 7200
        assert zdt.get(ChronoField.INSTANT_SECONDS) == zdt.to_epoch_second()
        assert zdt.with_field(ChronoField.HOUR_OF_DAY, 2).hour == 2

    def test_with_offset_seconds_only_when_valid(self, paris) -> None:
        """Test OFFSET_SECONDS only changes a valid offset."""
        zdt = ZonedDateTime(LocalDateTime(2024, 10, 27, 2, 30), paris)
        assert zdt.with_field(ChronoField.OFFSET_SECONDS, 3600).offset == CET
        assert zdt.with_field(ChronoField.OFFSET_SECONDS, 0) is zdt

    def test_equality(self, paris) -> None:
        """Test equality needs the same zone."""
        a = ZonedDateTime(LocalDateTime(2024, 6, 1, 12, 0), paris)
        b = a.with_zone_same_instant(ZoneOffset.UTC)
        assert a != b
        assert a.is_equal(b)
        assert not a.is_before(b)

    def test_now(self, fixed_clock) -> None:
        """Test the current date-time from a fixed clock."""
        assert str(ZonedDateTime.now(fixed_clock)) == "2024-01-15T10:30Z"


class TestZonedFormat:
    """Tests for ISO text."""

    def test_round_trip(self, paris) -> None:
        """Test ISO text survives parsing and formatting."""
        text = "2024-03-31T03:30+02:00[Europe/Paris]"
        assert ZonedDateTime.from_iso_format(text).to_iso_format() == text

    def test_offset_recomputed_for_zone(self, paris) -> None:
        """Test the offset is taken from the zone."""
        zdt = ZonedDateTime.from_iso_format("2024-06-01T10:00Z[Europe/Paris]")
        assert str(zdt) == "2024-06-01T12:00+02:00[Europe/Paris]"

    def test_offset_only(self) -> None:
        """Test text without a zone id uses the offset."""
        zdt = ZonedDateTime.from_iso_format("2024-01-15T10:00+01:00")
        assert zdt.zone == CET
        assert str(zdt) == "2024-01-15T10:00+01:00"

    def test_utc_region(self) -> None:
        """Test the UTC region keeps its id."""
        zdt = ZonedDateTime.of_local(LocalDateTime(2024, 1, 1, 9, 0), ZoneId.of("UTC"))
        assert str(zdt) == "2024-01-01T09:00Z[UTC]"

    def test_unknown_zone(self, static_provider) -> None:
        """Test that an unknown zone raises ZoneRulesError."""
        with pytest.raises(ZoneRulesError):
            ZonedDateTime.from_iso_format("2024-01-15T10:00Z[Mars/Olympus]")


class TestStartOfDay:
    """Tests for LocalDate.at_start_of_day."""

    def test_without_zone(self) -> None:
        """Test the start of day without a zone."""
        assert LocalDate(2024, 1, 15).at_start_of_day() == LocalDateTime(2024, 1, 15, 0, 0)

    def test_normal_day(self, paris) -> None:
        """Test the start of day in Paris."""
        assert str(LocalDate(2024, 3, 31).at_start_of_day(paris)) == "2024-03-31T00:00+01:00[Europe/Paris]"

    def test_midnight_in_gap(self) -> None:
        """Test the start of day when midnight is in a gap."""
        rules = ZoneRules(
            CET,
            CET,
            transitions=[ZoneOffsetTransition(LocalDateTime(2024, 4, 1, 0, 0), CET, CEST)],
        )
        zone = ZoneRegion("Test/MidnightGap", rules)
        start = LocalDate(2024, 4, 1).at_start_of_day(zone)
        assert start.to_local_date_time() == LocalDateTime(2024, 4, 1, 1, 0)
        assert start.offset == CEST
