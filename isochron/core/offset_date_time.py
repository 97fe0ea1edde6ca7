"""OffsetDateTime class: a date-time with a fixed offset from UTC.

An OffsetDateTime identifies a single instant and also records the
wall-clock reading at which it was observed. Unlike ZonedDateTime, the
offset never changes as a result of arithmetic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron.errors import ParseError
from isochron.format.iso8601 import format_offset_id, parse_zoned
from isochron.temporal.base import Temporal
from isochron.temporal.field import ChronoField
from isochron.temporal.unit import ChronoUnit
from isochron.core.instant import Instant
from isochron.core.local_date import LocalDate
from isochron.core.local_date_time import LocalDateTime
from isochron.core.local_time import LocalTime
from isochron.zone.offset import ZoneOffset

if TYPE_CHECKING:
    from isochron.core.clock import Clock
    from isochron.core.offset_time import OffsetTime
    from isochron.core.zoned_date_time import ZonedDateTime
    from isochron.temporal.base import TemporalUnit
    from isochron.temporal.value_range import ValueRange
    from isochron.zone.zone_id import ZoneId

_F = ChronoField
_ALL_FIELDS = frozenset(ChronoField)
_ALL_UNITS = frozenset(unit for unit in ChronoUnit if unit is not ChronoUnit.FOREVER)


class OffsetDateTime(Temporal):
    """A date-time with an offset from UTC, such as 2007-12-03T10:15:30+01:00.

    Ordering is by instant first and local date-time second, so two
    values for the same instant with different offsets are ordered but
    not equal. Use ``is_equal`` to compare instants only.

    Examples:
        >>> odt = OffsetDateTime.from_iso_format("2024-01-15T10:00+01:00")
        >>> odt.to_instant()
        Instant(epoch_second=1705309200, nano=0)
        >>> str(odt.plus_months(1))
        '2024-02-15T10:00+01:00'
    """

    __slots__ = ("_date_time", "_offset")

    _FIELDS = _ALL_FIELDS
    _UNITS = _ALL_UNITS

    def __init__(self, date_time: LocalDateTime, offset: ZoneOffset) -> None:
        if not isinstance(date_time, LocalDateTime) or not isinstance(offset, ZoneOffset):
            raise TypeError("expected a LocalDateTime and a ZoneOffset")
        self._date_time = date_time
        self._offset = offset

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nanosecond: int,
        offset: ZoneOffset,
    ) -> OffsetDateTime:
        return cls(LocalDateTime(year, month, day, hour, minute, second, nanosecond), offset)

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> OffsetDateTime:
        """Return the date-time of an instant using the zone's offset at that instant."""
        offset = zone.rules.get_offset(instant)
        local = LocalDateTime.of_epoch_second(instant.epoch_second, instant.nano, offset)
        return cls(local, offset)

    @classmethod
    def now(cls, clock: Clock | None = None) -> OffsetDateTime:
        from isochron.core.clock import Clock

        clock = clock or Clock.system_default_zone()
        return cls.of_instant(clock.instant(), clock.zone)

    @classmethod
    def from_temporal(cls, temporal: Any) -> OffsetDateTime:
        if isinstance(temporal, OffsetDateTime):
            return temporal
        to_offset = getattr(temporal, "to_offset_date_time", None)
        if to_offset is not None:
            return to_offset()
        offset = ZoneOffset.of_total_seconds(temporal.get(_F.OFFSET_SECONDS))
        return cls(LocalDateTime.from_temporal(temporal), offset)

    @classmethod
    def from_iso_format(cls, text: str) -> OffsetDateTime:
        """Parse a date-time with an offset, such as 2024-01-15T10:00:00+01:00.

        Raises:
            ParseError: If the text is not valid or carries a zone ID.
        """
        date, time, offset_seconds, zone = parse_zoned(text)
        if zone is not None:
            index = text.index("[")
            raise ParseError(
                f"Text {text!r} could not be parsed as an offset date-time at index {index}",
                text,
                index,
            )
        return cls(LocalDateTime(*date, *time), ZoneOffset.of_total_seconds(offset_seconds))

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    def to_local_date_time(self) -> LocalDateTime:
        return self._date_time

    def to_local_date(self) -> LocalDate:
        return self._date_time.date

    def to_local_time(self) -> LocalTime:
        return self._date_time.time

    def to_offset_time(self) -> OffsetTime:
        from isochron.core.offset_time import OffsetTime

        return OffsetTime(self._date_time.time, self._offset)

    @property
    def year(self) -> int:
        return self._date_time.year

    @property
    def month(self) -> int:
        return self._date_time.month

    @property
    def day(self) -> int:
        return self._date_time.day

    @property
    def hour(self) -> int:
        return self._date_time.hour

    @property
    def minute(self) -> int:
        return self._date_time.minute

    @property
    def second(self) -> int:
        return self._date_time.second

    @property
    def nanosecond(self) -> int:
        return self._date_time.nanosecond

    def to_epoch_second(self) -> int:
        return self._date_time.to_epoch_second(self._offset)

    def to_instant(self) -> Instant:
        return Instant.of_epoch_second(self.to_epoch_second(), self.nanosecond)

    def _range_of(self, field: ChronoField) -> ValueRange:
        if field in (_F.INSTANT_SECONDS, _F.OFFSET_SECONDS):
            return field.range()
        return self._date_time.range(field)

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.INSTANT_SECONDS:
            return self.to_epoch_second()
        if field is _F.OFFSET_SECONDS:
            return self._offset.total_seconds
        return self._date_time.get(field)

    def _with_field(self, field: ChronoField, value: int) -> OffsetDateTime:
        if field is _F.INSTANT_SECONDS:
            instant = Instant.of_epoch_second(value, self.nanosecond)
            return OffsetDateTime.of_instant(instant, self._offset)
        if field is _F.OFFSET_SECONDS:
            field.check_valid_value(value)
            return self._with(self._date_time, ZoneOffset.of_total_seconds(value))
        return self._with(self._date_time.with_field(field, value), self._offset)

    def _with(self, date_time: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        if date_time is self._date_time and offset is self._offset:
            return self
        return OffsetDateTime(date_time, offset)

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetDateTime:
        return self._with(self._date_time, offset)

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetDateTime:
        """Return the same instant expressed in another offset.

        Examples:
            >>> odt = OffsetDateTime.from_iso_format("2024-01-15T23:30+00:00")
            >>> str(odt.with_offset_same_instant(ZoneOffset.of_hours(2)))
            '2024-01-16T01:30+02:00'
        """
        if offset == self._offset:
            return self
        difference = offset.total_seconds - self._offset.total_seconds
        return OffsetDateTime(self._date_time.plus_seconds(difference), offset)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> OffsetDateTime:
        return self._with(self._date_time.plus(amount, unit), self._offset)

    def plus_years(self, years: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_years(years), self._offset)

    def plus_months(self, months: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_months(months), self._offset)

    def plus_weeks(self, weeks: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_weeks(weeks), self._offset)

    def plus_days(self, days: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_days(days), self._offset)

    def plus_hours(self, hours: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_hours(hours), self._offset)

    def plus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_minutes(minutes), self._offset)

    def plus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_seconds(seconds), self._offset)

    def plus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_nanos(nanos), self._offset)

    def minus_years(self, years: int) -> OffsetDateTime:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> OffsetDateTime:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> OffsetDateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> OffsetDateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> OffsetDateTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> OffsetDateTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> OffsetDateTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> OffsetDateTime:
        return self.plus_nanos(-nanos)

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """Return the amount of time until end, measured in this offset."""
        end = OffsetDateTime.from_temporal(end).with_offset_same_instant(self._offset)
        return self._date_time.until(end._date_time, unit)

    def truncated_to(self, unit: TemporalUnit) -> OffsetDateTime:
        return self._with(self._date_time.truncated_to(unit), self._offset)

    def at_zone_same_instant(self, zone: ZoneId) -> ZonedDateTime:
        """Return the ZonedDateTime for the same instant in a zone."""
        from isochron.core.zoned_date_time import ZonedDateTime

        return ZonedDateTime.of_instant(self.to_instant(), zone)

    def at_zone_similar_local(self, zone: ZoneId) -> ZonedDateTime:
        """Return the ZonedDateTime for the same local date-time in a zone.

        This offset is kept if it is valid in the zone.
        """
        from isochron.core.zoned_date_time import ZonedDateTime

        return ZonedDateTime.of_local(self._date_time, zone, preferred_offset=self._offset)

    def to_zoned_date_time(self) -> ZonedDateTime:
        from isochron.core.zoned_date_time import ZonedDateTime

        return ZonedDateTime.of_local(self._date_time, self._offset)

    def to_iso_format(self) -> str:
        return self._date_time.to_iso_format() + format_offset_id(self._offset.total_seconds)

    def is_before(self, other: OffsetDateTime) -> bool:
        """Compare instants only."""
        return self._instant_key() < other._instant_key()

    def is_after(self, other: OffsetDateTime) -> bool:
        return self._instant_key() > other._instant_key()

    def is_equal(self, other: OffsetDateTime) -> bool:
        return self._instant_key() == other._instant_key()

    def _instant_key(self) -> tuple[int, int]:
        return (self.to_epoch_second(), self.nanosecond)

    def _key(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return (self._instant_key(), self._date_time._key())

    def __add__(self, other: object) -> OffsetDateTime:
        from isochron.core.duration import Duration
        from isochron.core.period import Period

        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> OffsetDateTime:
        from isochron.core.duration import Duration
        from isochron.core.period import Period

        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._date_time == other._date_time and self._offset == other._offset

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._date_time, self._offset))

    def __repr__(self) -> str:
        return f"OffsetDateTime({self._date_time!r}, {self._offset!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["OffsetDateTime"]
