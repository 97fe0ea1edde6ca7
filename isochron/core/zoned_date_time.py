"""ZonedDateTime class: a date-time in a time-zone.

A ZonedDateTime is a LocalDateTime, the ZoneOffset in force at that
local date-time, and the ZoneId whose rules produced the offset.

Arithmetic follows two rules:

    Date-based units (days and longer) operate on the local date-time
    and then re-resolve it in the zone, keeping the previous offset if
    it is still valid. Adding one day across a daylight saving change
    keeps the wall-clock time.

    Time-based units (hours and shorter) operate on the instant.
    Adding 24 hours across a daylight saving change may move the
    wall-clock time by an hour.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron.errors import UnresolvedLocalTimeError, ZoneRulesError
from isochron.format.iso8601 import format_offset_id, parse_zoned
from isochron.temporal.base import Temporal
from isochron.temporal.field import ChronoField
from isochron.temporal.unit import ChronoUnit
from isochron.core.instant import Instant
from isochron.core.local_date import LocalDate
from isochron.core.local_date_time import LocalDateTime
from isochron.core.local_time import LocalTime
from isochron.core.offset_date_time import OffsetDateTime
from isochron.zone.offset import ZoneOffset
from isochron.zone.resolution import GapPolicy, OverlapPolicy, resolve_local
from isochron.zone.zone_id import ZoneId

if TYPE_CHECKING:
    from isochron.core.clock import Clock
    from isochron.temporal.base import TemporalUnit
    from isochron.temporal.value_range import ValueRange

_F = ChronoField
_ALL_FIELDS = frozenset(ChronoField)
_ALL_UNITS = frozenset(unit for unit in ChronoUnit if unit is not ChronoUnit.FOREVER)


class ZonedDateTime(Temporal):
    """A date-time with a time-zone, such as 2007-12-03T10:15:30+01:00[Europe/Paris].

    Constructing one from a local date-time resolves it against the
    zone rules. In a gap the local time is shifted forward by the length
    of the gap; in an overlap the earlier offset is used. Both can be
    changed with ``gap`` and ``overlap`` policies.

    Examples:
        >>> zone = ZoneOffset.of_hours(2)
        >>> zdt = ZonedDateTime(LocalDateTime(2024, 6, 1, 12, 0), zone)
        >>> str(zdt)
        '2024-06-01T12:00+02:00'
        >>> str(zdt.plus_hours(13))
        '2024-06-02T01:00+02:00'
    """

    __slots__ = ("_date_time", "_offset", "_zone")

    _FIELDS = _ALL_FIELDS
    _UNITS = _ALL_UNITS

    def __init__(
        self,
        date_time: LocalDateTime,
        zone: ZoneId,
        *,
        gap: GapPolicy = GapPolicy.SHIFT_FORWARD,
        overlap: OverlapPolicy = OverlapPolicy.EARLIER,
        preferred_offset: ZoneOffset | None = None,
    ) -> None:
        """Resolve a local date-time in a zone.

        Args:
            date_time: The wall-clock date-time.
            zone: The time-zone.
            gap: What to do if the local time does not exist.
            overlap: What to do if the local time occurs twice.
            preferred_offset: Offset to keep in an overlap if valid.

        Raises:
            UnresolvedLocalTimeError: If a RAISE policy applies.
        """
        if not isinstance(date_time, LocalDateTime) or not isinstance(zone, ZoneId):
            raise TypeError("expected a LocalDateTime and a ZoneId")
        local, offset = resolve_local(date_time, zone, gap, overlap, preferred_offset)
        self._date_time = local
        self._offset = offset
        self._zone = zone

    @classmethod
    def _of(cls, date_time: LocalDateTime, offset: ZoneOffset, zone: ZoneId) -> ZonedDateTime:
        zdt = object.__new__(cls)
        zdt._date_time = date_time
        zdt._offset = offset
        zdt._zone = zone
        return zdt

    @classmethod
    def of_local(
        cls,
        date_time: LocalDateTime,
        zone: ZoneId,
        gap: GapPolicy = GapPolicy.SHIFT_FORWARD,
        overlap: OverlapPolicy = OverlapPolicy.EARLIER,
        preferred_offset: ZoneOffset | None = None,
    ) -> ZonedDateTime:
        """Resolve a local date-time in a zone, see the constructor.

        Examples:
            >>> zdt = ZonedDateTime.of_local(LocalDateTime(2024, 1, 1, 9, 0), ZoneId.of("UTC"))
            >>> str(zdt)
            '2024-01-01T09:00Z[UTC]'
        """
        return cls(date_time, zone, gap=gap, overlap=overlap, preferred_offset=preferred_offset)

    @classmethod
    def of(cls, date: LocalDate, time: LocalTime, zone: ZoneId) -> ZonedDateTime:
        return cls(LocalDateTime.of(date, time), zone)

    @classmethod
    def _create(cls, epoch_second: int, nano: int, zone: ZoneId) -> ZonedDateTime:
        instant = Instant.of_epoch_second(epoch_second, nano)
        offset = zone.rules.get_offset(instant)
        local = LocalDateTime.of_epoch_second(instant.epoch_second, instant.nano, offset)
        return cls._of(local, offset, zone)

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> ZonedDateTime:
        """Return the date-time of an instant in a zone; always unambiguous."""
        return cls._create(instant.epoch_second, instant.nano, zone)

    @classmethod
    def of_strict(
        cls, date_time: LocalDateTime, offset: ZoneOffset, zone: ZoneId
    ) -> ZonedDateTime:
        """Combine the three parts, requiring the offset to be valid.

        Raises:
            UnresolvedLocalTimeError: If the local date-time is in a gap.
            ZoneRulesError: If the offset is not valid for the local
                date-time in the zone.
        """
        rules = zone.rules
        if not rules.is_valid_offset(date_time, offset):
            transition = rules.get_transition(date_time)
            if transition is not None and transition.is_gap:
                raise UnresolvedLocalTimeError(
                    f"LocalDateTime '{date_time}' does not exist in zone '{zone}' "
                    f"due to a gap in the local time-line",
                    transition,
                )
            raise ZoneRulesError(
                f"ZoneOffset '{offset}' is not valid for LocalDateTime '{date_time}' "
                f"in zone '{zone}'"
            )
        return cls._of(date_time, offset, zone)

    @classmethod
    def now(cls, clock: Clock | None = None) -> ZonedDateTime:
        from isochron.core.clock import Clock

        clock = clock or Clock.system_default_zone()
        return cls.of_instant(clock.instant(), clock.zone)

    @classmethod
    def from_temporal(cls, temporal: Any) -> ZonedDateTime:
        """Obtain a ZonedDateTime from a ZonedDateTime or OffsetDateTime."""
        if isinstance(temporal, ZonedDateTime):
            return temporal
        to_zoned = getattr(temporal, "to_zoned_date_time", None)
        if to_zoned is None:
            raise TypeError(f"Unable to obtain ZonedDateTime from {type(temporal).__name__}")
        return to_zoned()

    @classmethod
    def from_iso_format(cls, text: str) -> ZonedDateTime:
        """Parse text such as 2024-03-31T03:30+02:00[Europe/Paris].

        The offset and local date-time define the instant, which is then
        placed in the bracketed zone. Without a bracketed zone the
        offset is used as the zone.

        Raises:
            ParseError: If the text is malformed.
            ZoneRulesError: If the zone is unknown.
        """
        date, time, offset_seconds, zone_id = parse_zoned(text)
        offset = ZoneOffset.of_total_seconds(offset_seconds)
        local = LocalDateTime(*date, *time)
        zone = ZoneId.of(zone_id) if zone_id is not None else offset
        return cls._create(local.to_epoch_second(offset), local.nanosecond, zone)

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def zone(self) -> ZoneId:
        return self._zone

    def to_local_date_time(self) -> LocalDateTime:
        return self._date_time

    def to_local_date(self) -> LocalDate:
        return self._date_time.date

    def to_local_time(self) -> LocalTime:
        return self._date_time.time

    def to_offset_date_time(self) -> OffsetDateTime:
        return OffsetDateTime(self._date_time, self._offset)

    def to_zoned_date_time(self) -> ZonedDateTime:
        return self

    def to_epoch_second(self) -> int:
        return self._date_time.to_epoch_second(self._offset)

    def to_instant(self) -> Instant:
        return Instant.of_epoch_second(self.to_epoch_second(), self.nanosecond)

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

    def _resolve_local(self, date_time: LocalDateTime) -> ZonedDateTime:
        if date_time is self._date_time:
            return self
        return ZonedDateTime(date_time, self._zone, preferred_offset=self._offset)

    def _resolve_instant(self, date_time: LocalDateTime) -> ZonedDateTime:
        if date_time is self._date_time:
            return self
        return ZonedDateTime._create(
            date_time.to_epoch_second(self._offset), date_time.nanosecond, self._zone
        )

    def _resolve_offset(self, offset: ZoneOffset) -> ZonedDateTime:
        if offset != self._offset and self._zone.rules.is_valid_offset(self._date_time, offset):
            return ZonedDateTime._of(self._date_time, offset, self._zone)
        return self

    def _with_field(self, field: ChronoField, value: int) -> ZonedDateTime:
        if field is _F.INSTANT_SECONDS:
            return ZonedDateTime._create(value, self.nanosecond, self._zone)
        if field is _F.OFFSET_SECONDS:
            field.check_valid_value(value)
            return self._resolve_offset(ZoneOffset.of_total_seconds(value))
        return self._resolve_local(self._date_time.with_field(field, value))

    def with_year(self, year: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.with_year(year))

    def with_month(self, month: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.with_month(month))

    def with_day_of_month(self, day: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.with_day_of_month(day))

    def with_hour(self, hour: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.with_hour(hour))

    def with_minute(self, minute: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.with_minute(minute))

    def with_second(self, second: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.with_second(second))

    def with_nanosecond(self, nanosecond: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.with_nanosecond(nanosecond))

    def with_earlier_offset_at_overlap(self) -> ZonedDateTime:
        """During an overlap, return the copy using the earlier offset."""
        transition = self._zone.rules.get_transition(self._date_time)
        if transition is not None and transition.is_overlap:
            return self._resolve_offset(transition.offset_before)
        return self

    def with_later_offset_at_overlap(self) -> ZonedDateTime:
        """During an overlap, return the copy using the later offset."""
        transition = self._zone.rules.get_transition(self._date_time)
        if transition is not None and transition.is_overlap:
            return self._resolve_offset(transition.offset_after)
        return self

    def with_zone_same_local(self, zone: ZoneId) -> ZonedDateTime:
        """Keep the local date-time, re-resolving it in another zone."""
        if zone == self._zone:
            return self
        return ZonedDateTime(self._date_time, zone, preferred_offset=self._offset)

    def with_zone_same_instant(self, zone: ZoneId) -> ZonedDateTime:
        """Keep the instant, expressing it in another zone."""
        if zone == self._zone:
            return self
        return ZonedDateTime._create(self.to_epoch_second(), self.nanosecond, zone)

    def with_fixed_offset_zone(self) -> ZonedDateTime:
        """Return a copy whose zone is its current offset."""
        if self._zone == self._offset:
            return self
        return ZonedDateTime._of(self._date_time, self._offset, self._offset)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> ZonedDateTime:
        if unit.is_date_based():
            return self._resolve_local(self._date_time.plus(amount, unit))
        return self._resolve_instant(self._date_time.plus(amount, unit))

    def plus_years(self, years: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.plus_years(years))

    def plus_months(self, months: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.plus_months(months))

    def plus_weeks(self, weeks: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.plus_weeks(weeks))

    def plus_days(self, days: int) -> ZonedDateTime:
        return self._resolve_local(self._date_time.plus_days(days))

    def plus_hours(self, hours: int) -> ZonedDateTime:
        return self._resolve_instant(self._date_time.plus_hours(hours))

    def plus_minutes(self, minutes: int) -> ZonedDateTime:
        return self._resolve_instant(self._date_time.plus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> ZonedDateTime:
        return self._resolve_instant(self._date_time.plus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> ZonedDateTime:
        return self._resolve_instant(self._date_time.plus_nanos(nanos))

    def minus_years(self, years: int) -> ZonedDateTime:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> ZonedDateTime:
        return self.plus_months(-months)

    def minus_weeks(self, weeks: int) -> ZonedDateTime:
        return self.plus_weeks(-weeks)

    def minus_days(self, days: int) -> ZonedDateTime:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> ZonedDateTime:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> ZonedDateTime:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> ZonedDateTime:
        return self.plus_seconds(-seconds)

    def minus_nanos(self, nanos: int) -> ZonedDateTime:
        return self.plus_nanos(-nanos)

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """Return the amount of time until end.

        End is first moved into this zone. Date units are measured on
        the local time-line and time units on the instant time-line.
        """
        end = ZonedDateTime.from_temporal(end).with_zone_same_instant(self._zone)
        if isinstance(unit, ChronoUnit) and unit.is_date_based():
            return self._date_time.until(end._date_time, unit)
        return self.to_offset_date_time().until(end.to_offset_date_time(), unit)

    def truncated_to(self, unit: TemporalUnit) -> ZonedDateTime:
        return self._resolve_local(self._date_time.truncated_to(unit))

    def to_iso_format(self) -> str:
        """Return the ISO form with the zone ID in brackets unless it is an offset."""
        text = self._date_time.to_iso_format() + format_offset_id(self._offset.total_seconds)
        if self._zone != self._offset:
            text += f"[{self._zone}]"
        return text

    def _instant_key(self) -> tuple[int, int]:
        return (self.to_epoch_second(), self.nanosecond)

    def is_before(self, other: ZonedDateTime) -> bool:
        """Compare instants only."""
        return self._instant_key() < other._instant_key()

    def is_after(self, other: ZonedDateTime) -> bool:
        return self._instant_key() > other._instant_key()

    def is_equal(self, other: ZonedDateTime) -> bool:
        return self._instant_key() == other._instant_key()

    def _key(self) -> tuple:
        return (self._instant_key(), self._date_time._key(), self._zone.id)

    def __add__(self, other: object) -> ZonedDateTime:
        from isochron.core.duration import Duration
        from isochron.core.period import Period

        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> ZonedDateTime:
        from isochron.core.duration import Duration
        from isochron.core.period import Period

        if not isinstance(other, (Duration, Period)):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return (
            self._date_time == other._date_time
            and self._offset == other._offset
            and self._zone == other._zone
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._date_time, self._offset, self._zone))

    def __repr__(self) -> str:
        return f"ZonedDateTime({self._date_time!r}, {self._offset!r}, {self._zone!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["ZonedDateTime"]
