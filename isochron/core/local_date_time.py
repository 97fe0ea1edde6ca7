"""LocalDateTime class combining a date and a time of day.

This module provides the LocalDateTime class, a date-time without an
offset or zone such as 2007-12-03T10:15:30.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron._internal.arith import trunc_div
from isochron._internal.constants import NANOS_PER_DAY, NANOS_PER_SECOND, SECONDS_PER_DAY
from isochron.format.iso8601 import parse_date_time
from isochron.temporal.base import Temporal
from isochron.temporal.field import DATE_FIELDS, TIME_FIELDS, ChronoField
from isochron.temporal.unit import ChronoUnit
from isochron.temporal.value_range import ValueRange
from isochron.core.local_date import LocalDate
from isochron.core.local_time import LocalTime

if TYPE_CHECKING:
    from isochron.core.clock import Clock
    from isochron.core.instant import Instant
    from isochron.core.offset_date_time import OffsetDateTime
    from isochron.core.zoned_date_time import ZonedDateTime
    from isochron.temporal.base import TemporalUnit
    from isochron.units.day_of_week import DayOfWeek
    from isochron.zone.offset import ZoneOffset
    from isochron.zone.zone_id import ZoneId

_F = ChronoField
_U = ChronoUnit
_ALL_UNITS = frozenset(unit for unit in ChronoUnit if unit is not ChronoUnit.FOREVER)


class LocalDateTime(Temporal):
    """A date-time without a time-zone, such as 2007-12-03T10:15:30.

    LocalDateTime is a LocalDate plus a LocalTime. Time units carry over
    into the date, so 23:00 plus two hours moves to the next day.

    Attributes:
        date: The date part.
        time: The time part.

    Examples:
        >>> dt = LocalDateTime(2024, 1, 15, 14, 30)
        >>> str(dt)
        '2024-01-15T14:30'
        >>> dt.plus_hours(10)
        LocalDateTime(2024, 1, 16, 0, 30)
    """

    __slots__ = ("_date", "_time")

    _FIELDS = DATE_FIELDS | TIME_FIELDS
    _UNITS = _ALL_UNITS

    MIN: LocalDateTime
    MAX: LocalDateTime

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a LocalDateTime from its components.

        Raises:
            FieldOutOfRangeError: If a component is outside its range.
            InvalidDateError: If the day does not exist in the month.
        """
        self._date = LocalDate(year, month, day)
        self._time = LocalTime(hour, minute, second, nanosecond)

    @classmethod
    def of(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        """Create a LocalDateTime from a date and a time."""
        if not isinstance(date, LocalDate) or not isinstance(time, LocalTime):
            raise TypeError("expected a LocalDate and a LocalTime")
        date_time = object.__new__(cls)
        date_time._date = date
        date_time._time = time
        return date_time

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nano_of_second: int, offset: ZoneOffset
    ) -> LocalDateTime:
        """Create the local date-time of an epoch second at an offset."""
        _F.NANO_OF_SECOND.check_valid_value(nano_of_second)
        local_second = epoch_second + offset.total_seconds
        epoch_day, second_of_day = divmod(local_second, SECONDS_PER_DAY)
        return cls.of(
            LocalDate.of_epoch_day(epoch_day),
            LocalTime._from_nanos(second_of_day * NANOS_PER_SECOND + nano_of_second),
        )

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> LocalDateTime:
        """Return the wall-clock date-time of an instant in a zone."""
        offset = zone.rules.get_offset(instant)
        return cls.of_epoch_second(instant.epoch_second, instant.nano, offset)

    @classmethod
    def now(cls, clock: Clock | None = None) -> LocalDateTime:
        """Return the current date-time from the clock."""
        from isochron.core.clock import Clock

        clock = clock or Clock.system_default_zone()
        return cls.of_instant(clock.instant(), clock.zone)

    @classmethod
    def from_temporal(cls, temporal: Any) -> LocalDateTime:
        """Obtain a LocalDateTime from a value with both date and time."""
        if isinstance(temporal, LocalDateTime):
            return temporal
        local = getattr(temporal, "to_local_date_time", None)
        if local is not None:
            return local()
        return cls.of(LocalDate.from_temporal(temporal), LocalTime.from_temporal(temporal))

    @classmethod
    def from_iso_format(cls, text: str) -> LocalDateTime:
        """Parse a date-time in the form uuuu-MM-dd'T'HH:mm[:ss[.f]].

        Raises:
            ParseError: If the text is not valid ISO 8601 format.

        Examples:
            >>> LocalDateTime.from_iso_format("2024-03-31T02:30")
            LocalDateTime(2024, 3, 31, 2, 30)
        """
        date, time = parse_date_time(text)
        return cls(*date, *time)

    @property
    def date(self) -> LocalDate:
        return self._date

    @property
    def time(self) -> LocalTime:
        return self._time

    def to_local_date(self) -> LocalDate:
        return self._date

    def to_local_time(self) -> LocalTime:
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date.day_of_week

    @property
    def day_of_year(self) -> int:
        return self._date.day_of_year

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    def _range_of(self, field: ChronoField) -> ValueRange:
        if field.is_time_based():
            return self._time.range(field)
        return self._date.range(field)

    def _get_field(self, field: ChronoField) -> int:
        if field.is_time_based():
            return self._time.get(field)
        return self._date.get(field)

    def _with_field(self, field: ChronoField, value: int) -> LocalDateTime:
        if field.is_time_based():
            return self._with(self._date, self._time.with_field(field, value))
        return self._with(self._date.with_field(field, value), self._time)

    def _with(self, date: LocalDate, time: LocalTime) -> LocalDateTime:
        if date is self._date and time is self._time:
            return self
        return LocalDateTime.of(date, time)

    def with_year(self, year: int) -> LocalDateTime:
        return self._with(self._date.with_year(year), self._time)

    def with_month(self, month: int) -> LocalDateTime:
        return self._with(self._date.with_month(month), self._time)

    def with_day_of_month(self, day: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_month(day), self._time)

    def with_day_of_year(self, day_of_year: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_year(day_of_year), self._time)

    def with_hour(self, hour: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_hour(hour))

    def with_minute(self, minute: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_minute(minute))

    def with_second(self, second: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_second(second))

    def with_nanosecond(self, nanosecond: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_nanosecond(nanosecond))

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> LocalDateTime:
        if unit.is_time_based():
            if unit is _U.HALF_DAYS:
                return self.plus_hours(amount * 12)
            return self.plus_nanos(amount * unit.nanos)
        return self._with(self._date.plus(amount, unit), self._time)

    def plus_years(self, years: int) -> LocalDateTime:
        return self._with(self._date.plus_years(years), self._time)

    def plus_months(self, months: int) -> LocalDateTime:
        return self._with(self._date.plus_months(months), self._time)

    def plus_weeks(self, weeks: int) -> LocalDateTime:
        return self._with(self._date.plus_weeks(weeks), self._time)

    def plus_days(self, days: int) -> LocalDateTime:
        return self._with(self._date.plus_days(days), self._time)

    def plus_hours(self, hours: int) -> LocalDateTime:
        return self.plus_nanos(hours * 3_600 * NANOS_PER_SECOND)

    def plus_minutes(self, minutes: int) -> LocalDateTime:
        return self.plus_nanos(minutes * 60 * NANOS_PER_SECOND)

    def plus_seconds(self, seconds: int) -> LocalDateTime:
        return self.plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> LocalDateTime:
        """Return a copy with nanoseconds added, carrying into the date.

        Raises:
            OverflowError: If the date moves outside the supported range.
        """
        if nanos == 0:
            return self
        days, nano_of_day = divmod(self._time.to_nano_of_day() + nanos, NANOS_PER_DAY)
        return self._with(self._date.plus_days(days), LocalTime._from_nanos(nano_of_day))

    def minus_years(self, years: int) -> LocalDateTime:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> LocalDateTime:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> LocalDateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> LocalDateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> LocalDateTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> LocalDateTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> LocalDateTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> LocalDateTime:
        return self.plus_nanos(-nanos)

    def _nanos_until(self, end: LocalDateTime) -> int:
        days = end._date.to_epoch_day() - self._date.to_epoch_day()
        return days * NANOS_PER_DAY + end._time.to_nano_of_day() - self._time.to_nano_of_day()

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """Return the whole number of units until end, truncated toward zero.

        For date units a day is only counted once the end time-of-day has
        been reached, so 2024-01-01T12:00 until 2024-01-02T11:00 is zero
        days.

        Examples:
            >>> start = LocalDateTime(2024, 1, 1, 12, 0)
            >>> start.until(LocalDateTime(2024, 1, 2, 11, 0), ChronoUnit.DAYS)
            0
            >>> start.until(LocalDateTime(2024, 1, 2, 11, 0), ChronoUnit.HOURS)
            23
        """
        end = LocalDateTime.from_temporal(end)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        if unit.is_time_based():
            return trunc_div(self._nanos_until(end), unit.nanos)
        end_date = end._date
        if end_date > self._date and end._time < self._time:
            end_date = end_date.minus_days(1)
        elif end_date < self._date and end._time > self._time:
            end_date = end_date.plus_days(1)
        return self._date.until(end_date, unit)

    def truncated_to(self, unit: TemporalUnit) -> LocalDateTime:
        """Return a copy with the time truncated to the unit."""
        return self._with(self._date, self._time.truncated_to(unit))

    def to_epoch_second(self, offset: ZoneOffset) -> int:
        """Return the epoch second of this date-time at the offset."""
        return (
            self._date.to_epoch_day() * SECONDS_PER_DAY
            + self._time.to_second_of_day()
            - offset.total_seconds
        )

    def to_instant(self, offset: ZoneOffset) -> Instant:
        from isochron.core.instant import Instant

        return Instant.of_epoch_second(self.to_epoch_second(offset), self.nanosecond)

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        """Combine this date-time with an offset."""
        from isochron.core.offset_date_time import OffsetDateTime

        return OffsetDateTime(self, offset)

    def at_zone(self, zone: ZoneId, **policies: Any) -> ZonedDateTime:
        """Resolve this date-time in a zone.

        Keyword arguments are passed to ZonedDateTime.of_local, so a gap
        or overlap policy may be given.
        """
        from isochron.core.zoned_date_time import ZonedDateTime

        return ZonedDateTime.of_local(self, zone, **policies)

    def to_iso_format(self) -> str:
        """Return the date-time as uuuu-MM-dd'T'HH:mm[:ss[.fff]]."""
        return f"{self._date.to_iso_format()}T{self._time.to_iso_format()}"

    def _key(self) -> tuple[int, int]:
        return (self._date.to_epoch_day(), self._time.to_nano_of_day())

    def __add__(self, other: object) -> LocalDateTime:
        from isochron.core.duration import Duration
        from isochron.core.period import Period

        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> LocalDateTime:
        from isochron.core.duration import Duration
        from isochron.core.period import Period

        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        d, t = self._date, self._time
        parts = [d.year, d.month, d.day, t.hour, t.minute]
        if t.second or t.nanosecond:
            parts.append(t.second)
        if t.nanosecond:
            parts.append(t.nanosecond)
        return f"LocalDateTime({', '.join(str(part) for part in parts)})"

    def __str__(self) -> str:
        return self.to_iso_format()


LocalDateTime.MIN = LocalDateTime.of(LocalDate.MIN, LocalTime.MIN)
LocalDateTime.MAX = LocalDateTime.of(LocalDate.MAX, LocalTime.MAX)


__all__ = ["LocalDateTime"]
