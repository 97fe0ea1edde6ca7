"""Tests for ZoneRules, transitions and transition rules."""

from __future__ import annotations

import pytest

from isochron import Duration, Instant, LocalDateTime, ZoneOffset, ZoneOffsetTransition, ZoneRules
from isochron.errors import ValidationError
from isochron.units import DayOfWeek, Month
from isochron.zone import TimeDefinition, ZoneOffsetTransitionRule

CET = ZoneOffset.of_hours(1)
CEST = ZoneOffset.of_hours(2)
SPRING_2024 = Instant.from_iso_format("2024-03-31T01:00:00Z")
AUTUMN_2024 = Instant.from_iso_format("2024-10-27T01:00:00Z")


@pytest.fixture
def historic_rules() -> ZoneRules:
    """Rules for a single year of summer time with no annual rules."""
    return ZoneRules(
        CET,
        CET,
        transitions=[
            ZoneOffsetTransition(LocalDateTime(2000, 3, 26, 2, 0), CET, CEST),
            ZoneOffsetTransition(LocalDateTime(2000, 10, 29, 3, 0), CEST, CET),
        ],
    )


class TestZoneOffsetTransition:
    """Tests for a single transition."""

    def test_gap(self) -> None:
        """Test a transition that skips local time."""
        gap = ZoneOffsetTransition(LocalDateTime(2024, 3, 31, 2, 0), CET, CEST)
        assert gap.is_gap
        assert not gap.is_overlap
        assert gap.date_time_before == LocalDateTime(2024, 3, 31, 2, 0)
        assert gap.date_time_after == LocalDateTime(2024, 3, 31, 3, 0)
        assert gap.duration == Duration.of_hours(1)
        assert gap.valid_offsets == []
        assert gap.instant == SPRING_2024

    def test_overlap(self) -> None:
        """Test a transition that repeats local time."""
        overlap = ZoneOffsetTransition(LocalDateTime(2024, 10, 27, 3, 0), CEST, CET)
        assert overlap.is_overlap
        assert overlap.date_time_after == LocalDateTime(2024, 10, 27, 2, 0)
        assert overlap.duration == Duration.of_hours(-1)
        assert overlap.valid_offsets == [CEST, CET]
        assert overlap.is_valid_offset(CET)
        assert not overlap.is_valid_offset(ZoneOffset.UTC)

    def test_of_epoch_second(self) -> None:
        """Test creation from epoch seconds."""
        transition = ZoneOffsetTransition.of_epoch_second(SPRING_2024.epoch_second, CET, CEST)
        assert transition.date_time_before == LocalDateTime(2024, 3, 31, 2, 0)

    def test_equal_offsets_rejected(self) -> None:
        """Test that equal offsets raise ValidationError."""
        with pytest.raises(ValidationError):
            ZoneOffsetTransition(LocalDateTime(2024, 3, 31, 2, 0), CET, CET)

    def test_fractional_second_rejected(self) -> None:
        """Test that a fractional second raises ValidationError."""
        with pytest.raises(ValidationError):
            ZoneOffsetTransition(LocalDateTime(2024, 3, 31, 2, 0, 0, 1), CET, CEST)

    def test_ordering(self) -> None:
        """Test transitions sort by instant."""
        first = ZoneOffsetTransition(LocalDateTime(2024, 3, 31, 2, 0), CET, CEST)
        second = ZoneOffsetTransition(LocalDateTime(2024, 10, 27, 3, 0), CEST, CET)
        assert sorted([second, first]) == [first, second]


class TestZoneOffsetTransitionRule:
    """Tests for annual rules."""

    def test_last_sunday(self) -> None:
        """Test a last Sunday of the month rule."""
        rule = ZoneOffsetTransitionRule(
            Month.MARCH, -1, DayOfWeek.SUNDAY, 3600, TimeDefinition.UTC, CET, CET, CEST
        )
        assert rule.create_transition(2024).date_time_before == LocalDateTime(2024, 3, 31, 2, 0)
        assert rule.create_transition(2025).date_time_before == LocalDateTime(2025, 3, 30, 2, 0)

    def test_first_sunday_on_or_after(self) -> None:
        """Test a Sunday on or after the 8th rule."""
        eastern = ZoneOffset.of_hours(-5)
        rule = ZoneOffsetTransitionRule(
            Month.MARCH, 8, DayOfWeek.SUNDAY, 7200, TimeDefinition.WALL,
            eastern, eastern, ZoneOffset.of_hours(-4),
        )
        assert rule.create_transition(2024).date_time_before == LocalDateTime(2024, 3, 10, 2, 0)

    def test_fixed_day(self) -> None:
        """Test a rule on a fixed day of month."""
        rule = ZoneOffsetTransitionRule(
            Month.APRIL, 1, None, 0, TimeDefinition.STANDARD, CET, CET, CEST
        )
        assert rule.create_transition(2024).date_time_before == LocalDateTime(2024, 4, 1, 0, 0)

    def test_standard_time_definition(self) -> None:
        """Test standard and UTC time definitions."""
        assert TimeDefinition.STANDARD.create_date_time(
            LocalDateTime(2024, 10, 27, 2, 0), CET, CEST
        ) == LocalDateTime(2024, 10, 27, 3, 0)
        assert TimeDefinition.UTC.create_date_time(
            LocalDateTime(2024, 10, 27, 1, 0), CET, CEST
        ) == LocalDateTime(2024, 10, 27, 3, 0)

    @pytest.mark.parametrize("indicator", [0, -29, 32])
    def test_invalid_indicator(self, indicator) -> None:
        """Test that bad day indicators raise ValidationError."""
        with pytest.raises(ValidationError):
            ZoneOffsetTransitionRule(
                Month.MARCH, indicator, None, 0, TimeDefinition.WALL, CET, CET, CEST
            )


class TestAnnualRules:
    """Tests for rules driven entirely by annual transition rules."""

    def test_get_offset(self, cet_rules) -> None:
        """Test winter and summer offsets."""
        assert cet_rules.get_offset(Instant.from_iso_format("2024-01-15T12:00:00Z")) == CET
        assert cet_rules.get_offset(Instant.from_iso_format("2024-07-01T12:00:00Z")) == CEST

    def test_offset_at_transition_instant(self, cet_rules) -> None:
        """Test the new offset applies from the transition instant."""
        assert cet_rules.get_offset(SPRING_2024) == CEST
        assert cet_rules.get_offset(SPRING_2024.minus_seconds(1)) == CET
        assert cet_rules.get_offset(AUTUMN_2024) == CET
        assert cet_rules.get_offset(AUTUMN_2024.minus_seconds(1)) == CEST

    @pytest.mark.parametrize(
        "local,expected",
        [
            (LocalDateTime(2024, 3, 31, 1, 59, 59), [CET]),
            (LocalDateTime(2024, 3, 31, 2, 0), []),
            (LocalDateTime(2024, 3, 31, 2, 30), []),
            (LocalDateTime(2024, 3, 31, 3, 0), [CEST]),
            (LocalDateTime(2024, 10, 27, 1, 59), [CEST]),
            (LocalDateTime(2024, 10, 27, 2, 0), [CEST, CET]),
            (LocalDateTime(2024, 10, 27, 2, 59, 59), [CEST, CET]),
            (LocalDateTime(2024, 10, 27, 3, 0), [CET]),
        ],
    )
    def test_valid_offsets(self, cet_rules, local, expected) -> None:
        """Test valid offsets around the gap and the overlap."""
        assert cet_rules.get_valid_offsets(local) == expected

    def test_get_transition(self, cet_rules) -> None:
        """Test the transition at a local date-time."""
        gap = cet_rules.get_transition(LocalDateTime(2024, 3, 31, 2, 30))
        assert gap.is_gap
        assert gap.instant == SPRING_2024
        assert cet_rules.get_transition(LocalDateTime(2024, 6, 1, 12, 0)) is None

    def test_is_valid_offset(self, cet_rules) -> None:
        """Test is_valid_offset() in an overlap."""
        local = LocalDateTime(2024, 10, 27, 2, 30)
        assert cet_rules.is_valid_offset(local, CET)
        assert cet_rules.is_valid_offset(local, CEST)
        assert not cet_rules.is_valid_offset(LocalDateTime(2024, 1, 1, 0, 0), CEST)

    def test_daylight_savings(self, cet_rules) -> None:
        """Test the standard offset and daylight saving amount."""
        summer = Instant.from_iso_format("2024-07-01T12:00:00Z")
        winter = Instant.from_iso_format("2024-12-01T12:00:00Z")
        assert cet_rules.get_standard_offset(summer) == CET
        assert cet_rules.is_daylight_savings(summer)
        assert cet_rules.get_daylight_savings(summer) == Duration.of_hours(1)
        assert not cet_rules.is_daylight_savings(winter)
        assert cet_rules.get_daylight_savings(winter) == Duration.ZERO

    def test_next_transition(self, cet_rules) -> None:
        """Test next transitions across a year end."""
        assert cet_rules.next_transition(Instant.from_iso_format("2024-01-15T00:00:00Z")).instant == SPRING_2024
        assert cet_rules.next_transition(SPRING_2024).instant == AUTUMN_2024
        following = cet_rules.next_transition(AUTUMN_2024)
        assert following.date_time_before == LocalDateTime(2025, 3, 30, 2, 0)

    def test_previous_transition(self, cet_rules) -> None:
        """Test previous transitions across a year end."""
        assert cet_rules.previous_transition(Instant.from_iso_format("2024-07-01T00:00:00Z")).instant == SPRING_2024
        previous = cet_rules.previous_transition(Instant.from_iso_format("2024-01-15T00:00:00Z"))
        assert previous.date_time_before == LocalDateTime(2023, 10, 29, 3, 0)

    def test_not_fixed(self, cet_rules) -> None:
        """Test the rules are not a fixed offset."""
        assert not cet_rules.is_fixed_offset()
        assert len(cet_rules.transition_rules) == 2
        assert cet_rules.transitions == []


class TestHistoricRules:
    """Tests for rules built from a list of historic transitions."""

    def test_get_offset(self, historic_rules) -> None:
        """Test offsets before, during and after summer time."""
        assert historic_rules.get_offset(Instant.from_iso_format("1999-06-01T00:00:00Z")) == CET
        assert historic_rules.get_offset(Instant.from_iso_format("2000-06-01T00:00:00Z")) == CEST
        assert historic_rules.get_offset(Instant.from_iso_format("2001-06-01T00:00:00Z")) == CET

    @pytest.mark.parametrize(
        "local,expected",
        [
            (LocalDateTime(2000, 1, 1, 0, 0), [CET]),
            (LocalDateTime(2000, 3, 26, 2, 30), []),
            (LocalDateTime(2000, 6, 1, 0, 0), [CEST]),
            (LocalDateTime(2000, 10, 29, 2, 30), [CEST, CET]),
            (LocalDateTime(2001, 1, 1, 0, 0), [CET]),
        ],
    )
    def test_valid_offsets(self, historic_rules, local, expected) -> None:
        """Test valid offsets from the transition list."""
        assert historic_rules.get_valid_offsets(local) == expected

    def test_transitions(self, historic_rules) -> None:
        """Test next and previous transitions at the ends of the list."""
        transitions = historic_rules.transitions
        assert [t.is_gap for t in transitions] == [True, False]
        first = historic_rules.next_transition(Instant.from_iso_format("1999-01-01T00:00:00Z"))
        assert first == transitions[0]
        assert historic_rules.next_transition(Instant.from_iso_format("2001-01-01T00:00:00Z")) is None
        assert historic_rules.previous_transition(Instant.from_iso_format("1999-01-01T00:00:00Z")) is None
        assert historic_rules.previous_transition(
            Instant.from_iso_format("2001-01-01T00:00:00Z")
        ) == transitions[1]

    def test_equality(self, historic_rules) -> None:
        """Test equality and hashing."""
        rebuilt = ZoneRules(CET, CET, transitions=historic_rules.transitions)
        assert rebuilt == historic_rules
        assert hash(rebuilt) == hash(historic_rules)
        assert rebuilt != ZoneOffset.of_hours(1).rules


class TestFixedRules:
    """Tests for rules of a fixed offset."""

    def test_fixed(self) -> None:
        """Test rules of a fixed offset."""
        rules = ZoneRules.of(ZoneOffset.of_hours(5))
        local = LocalDateTime(2024, 3, 31, 2, 30)
        assert rules.is_fixed_offset()
        assert rules.get_valid_offsets(local) == [ZoneOffset.of_hours(5)]
        assert rules.get_transition(local) is None
        assert rules.next_transition(Instant.EPOCH) is None
        assert rules.previous_transition(Instant.EPOCH) is None
        assert not rules.is_daylight_savings(Instant.EPOCH)
