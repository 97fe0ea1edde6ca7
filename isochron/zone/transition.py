"""Offset transitions and the annual rules that generate them.

A ZoneOffsetTransition is a single change of offset, such as the start
of summer time in a given year. A ZoneOffsetTransitionRule describes a
recurring change ("last Sunday of March at 01:00 UTC") and produces a
transition for any year.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from isochron._internal.calendar import is_leap_year
from isochron.errors import ValidationError
from isochron.units.day_of_week import DayOfWeek
from isochron.units.month import Month

if TYPE_CHECKING:
    from isochron.core.duration import Duration
    from isochron.core.instant import Instant
    from isochron.core.local_date_time import LocalDateTime
    from isochron.zone.offset import ZoneOffset


class ZoneOffsetTransition:
    """A transition between two offsets caused by a discontinuity in the local time-line.

    A gap occurs when clocks jump forward: local times between
    ``date_time_before`` and ``date_time_after`` do not exist. An overlap
    occurs when clocks move back: local times between
    ``date_time_after`` and ``date_time_before`` occur twice.

    Examples:
        >>> from isochron import LocalDateTime, ZoneOffset
        >>> gap = ZoneOffsetTransition(
        ...     LocalDateTime(2024, 3, 31, 2, 0),
        ...     ZoneOffset.of_hours(1),
        ...     ZoneOffset.of_hours(2),
        ... )
        >>> gap.is_gap, str(gap.date_time_after)
        (True, '2024-03-31T03:00')
    """

    __slots__ = ("_epoch_second", "_transition", "_offset_before", "_offset_after")

    def __init__(
        self,
        transition: LocalDateTime,
        offset_before: ZoneOffset,
        offset_after: ZoneOffset,
    ) -> None:
        """Create a transition at a local date-time expressed in the before offset.

        Raises:
            ValidationError: If the two offsets are equal or the transition
                local time has a fractional second.
        """
        if offset_before == offset_after:
            raise ValidationError("Offsets must not be equal")
        if transition.nanosecond != 0:
            raise ValidationError("Nano-of-second must be zero")
        self._transition = transition
        self._offset_before = offset_before
        self._offset_after = offset_after
        self._epoch_second = transition.to_epoch_second(offset_before)

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, offset_before: ZoneOffset, offset_after: ZoneOffset
    ) -> ZoneOffsetTransition:
        """Create a transition from the instant it occurs."""
        # Import here to avoid circular imports
        from isochron.core.local_date_time import LocalDateTime

        local = LocalDateTime.of_epoch_second(epoch_second, 0, offset_before)
        return cls(local, offset_before, offset_after)

    @property
    def instant(self) -> Instant:
        from isochron.core.instant import Instant

        return Instant.of_epoch_second(self._epoch_second)

    @property
    def epoch_second(self) -> int:
        return self._epoch_second

    @property
    def date_time_before(self) -> LocalDateTime:
        """The local transition date-time in the offset before the change."""
        return self._transition

    @property
    def date_time_after(self) -> LocalDateTime:
        """The local transition date-time in the offset after the change."""
        return self._transition.plus_seconds(self.duration_seconds)

    @property
    def offset_before(self) -> ZoneOffset:
        return self._offset_before

    @property
    def offset_after(self) -> ZoneOffset:
        return self._offset_after

    @property
    def duration_seconds(self) -> int:
        return self._offset_after.total_seconds - self._offset_before.total_seconds

    @property
    def duration(self) -> Duration:
        """The size of the transition, positive for a gap."""
        from isochron.core.duration import Duration

        return Duration.of_seconds(self.duration_seconds)

    @property
    def is_gap(self) -> bool:
        return self._offset_after.total_seconds > self._offset_before.total_seconds

    @property
    def is_overlap(self) -> bool:
        return self._offset_after.total_seconds < self._offset_before.total_seconds

    def is_valid_offset(self, offset: ZoneOffset) -> bool:
        """Return True if offset is valid for a local time inside this transition."""
        if self.is_gap:
            return False
        return offset == self._offset_before or offset == self._offset_after

    @property
    def valid_offsets(self) -> list[ZoneOffset]:
        """Offsets valid during the transition: none for a gap, both for an overlap."""
        if self.is_gap:
            return []
        return [self._offset_before, self._offset_after]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffsetTransition):
            return NotImplemented
        return (
            self._transition == other._transition
            and self._offset_before == other._offset_before
            and self._offset_after == other._offset_after
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffsetTransition):
            return NotImplemented
        return self._epoch_second < other._epoch_second

    def __hash__(self) -> int:
        return hash((self._transition, self._offset_before, self._offset_after))

    def __repr__(self) -> str:
        kind = "Gap" if self.is_gap else "Overlap"
        return (
            f"Transition[{kind} at {self._transition}{self._offset_before} "
            f"to {self._offset_after}]"
        )


class TimeDefinition(Enum):
    """How the local time of a transition rule is to be interpreted.

    UTC: the time is in UTC.
    STANDARD: the time is in the standard offset of the zone.
    WALL: the time is in the offset in force before the transition.
    """

    UTC = "UTC"
    WALL = "WALL"
    STANDARD = "STANDARD"

    def create_date_time(
        self,
        date_time: LocalDateTime,
        standard_offset: ZoneOffset,
        wall_offset: ZoneOffset,
    ) -> LocalDateTime:
        """Convert date_time from this definition to wall time."""
        if self is TimeDefinition.UTC:
            return date_time.plus_seconds(wall_offset.total_seconds)
        if self is TimeDefinition.STANDARD:
            return date_time.plus_seconds(
                wall_offset.total_seconds - standard_offset.total_seconds
            )
        return date_time


class ZoneOffsetTransitionRule:
    """A rule producing one transition per year.

    The date is given by a month, a day-of-month indicator and an
    optional day-of-week:

        ``day_of_month_indicator > 0``: that day, or with a day-of-week
            the first such weekday on or after it.
        ``day_of_month_indicator < 0``: counted from the end of the month
            (-1 is the last day), or with a day-of-week the last such
            weekday on or before it.

    The time is a number of seconds after midnight of that date, which
    may be negative or exceed one day.

    Examples:
        >>> from isochron import ZoneOffset
        >>> cet, cest = ZoneOffset.of_hours(1), ZoneOffset.of_hours(2)
        >>> rule = ZoneOffsetTransitionRule(
        ...     Month.MARCH, -1, DayOfWeek.SUNDAY, 3600,
        ...     TimeDefinition.UTC, cet, cet, cest,
        ... )
        >>> str(rule.create_transition(2024).date_time_before)
        '2024-03-31T02:00'
    """

    __slots__ = (
        "_month",
        "_dom",
        "_dow",
        "_transition_seconds",
        "_time_definition",
        "_standard_offset",
        "_offset_before",
        "_offset_after",
    )

    def __init__(
        self,
        month: Month,
        day_of_month_indicator: int,
        day_of_week: DayOfWeek | None,
        transition_seconds: int,
        time_definition: TimeDefinition,
        standard_offset: ZoneOffset,
        offset_before: ZoneOffset,
        offset_after: ZoneOffset,
    ) -> None:
        if day_of_month_indicator < -28 or day_of_month_indicator > 31 or day_of_month_indicator == 0:
            raise ValidationError(
                "Day of month indicator must be between -28 and 31 inclusive excluding zero"
            )
        self._month = month
        self._dom = day_of_month_indicator
        self._dow = day_of_week
        self._transition_seconds = transition_seconds
        self._time_definition = time_definition
        self._standard_offset = standard_offset
        self._offset_before = offset_before
        self._offset_after = offset_after

    @property
    def month(self) -> Month:
        return self._month

    @property
    def day_of_month_indicator(self) -> int:
        return self._dom

    @property
    def day_of_week(self) -> DayOfWeek | None:
        return self._dow

    @property
    def transition_seconds(self) -> int:
        return self._transition_seconds

    @property
    def time_definition(self) -> TimeDefinition:
        return self._time_definition

    @property
    def standard_offset(self) -> ZoneOffset:
        return self._standard_offset

    @property
    def offset_before(self) -> ZoneOffset:
        return self._offset_before

    @property
    def offset_after(self) -> ZoneOffset:
        return self._offset_after

    def _date_in(self, year: int) -> Any:
        from isochron.core.local_date import LocalDate

        if self._dom < 0:
            length = self._month.length(is_leap_year(year))
            date = LocalDate(year, self._month.value, length + 1 + self._dom)
            if self._dow is not None:
                # previous-or-same
                date = date.minus_days((date.day_of_week.value - self._dow.value) % 7)
        else:
            date = LocalDate(year, self._month.value, self._dom)
            if self._dow is not None:
                date = date.plus_days((self._dow.value - date.day_of_week.value) % 7)
        return date

    def create_transition(self, year: int) -> ZoneOffsetTransition:
        """Create the transition for a year."""
        from isochron.core.local_date_time import LocalDateTime
        from isochron.core.local_time import LocalTime

        local = LocalDateTime.of(self._date_in(year), LocalTime.MIDNIGHT)
        local = local.plus_seconds(self._transition_seconds)
        wall = self._time_definition.create_date_time(
            local, self._standard_offset, self._offset_before
        )
        return ZoneOffsetTransition(wall, self._offset_before, self._offset_after)

    def _key(self) -> tuple:
        return (
            self._month,
            self._dom,
            self._dow,
            self._transition_seconds,
            self._time_definition,
            self._standard_offset,
            self._offset_before,
            self._offset_after,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffsetTransitionRule):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self._dow is None:
            when = f"{self._month.display_name} {self._dom}"
        elif self._dom == -1:
            when = f"{self._dow.display_name} on or before last day of {self._month.display_name}"
        elif self._dom < 0:
            when = (
                f"{self._dow.display_name} on or before last day minus "
                f"{-self._dom - 1} of {self._month.display_name}"
            )
        else:
            when = f"{self._dow.display_name} on or after {self._month.display_name} {self._dom}"
        kind = "Gap" if self._offset_after.total_seconds > self._offset_before.total_seconds else "Overlap"
        return (
            f"TransitionRule[{kind} {self._offset_before} to {self._offset_after}, "
            f"{when} at {self._transition_seconds}s {self._time_definition.value}, "
            f"standard offset {self._standard_offset}]"
        )


__all__ = ["ZoneOffsetTransition", "ZoneOffsetTransitionRule", "TimeDefinition"]
