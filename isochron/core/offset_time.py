"""OffsetTime class: a time of day with an offset from UTC."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron._internal.arith import trunc_div
from isochron._internal.constants import NANOS_PER_SECOND, SECONDS_PER_DAY
from isochron.errors import UnsupportedFieldError
from isochron.format.iso8601 import format_offset_id, parse_offset_time
from isochron.temporal.base import Temporal
from isochron.temporal.field import TIME_FIELDS, ChronoField
from isochron.temporal.unit import ChronoUnit
from isochron.core.local_time import LocalTime
from isochron.zone.offset import ZoneOffset

if TYPE_CHECKING:
    from isochron.core.clock import Clock
    from isochron.core.instant import Instant
    from isochron.core.local_date import LocalDate
    from isochron.core.offset_date_time import OffsetDateTime
    from isochron.temporal.base import TemporalUnit
    from isochron.zone.zone_id import ZoneId

_TIME_UNITS = frozenset(unit for unit in ChronoUnit if unit.is_time_based())


class OffsetTime(Temporal):
    """A time with an offset from UTC, such as 10:15:30+01:00.

    Two OffsetTimes compare by the instant they would represent on the
    same date, then by local time. Equality requires both the local
    time and the offset to match.

    Examples:
        >>> OffsetTime.from_iso_format("10:15+01:00").to_iso_format()
        '10:15+01:00'
    """

    __slots__ = ("_time", "_offset")

    _FIELDS = TIME_FIELDS | {ChronoField.OFFSET_SECONDS}
    _UNITS = _TIME_UNITS

    def __init__(self, time: LocalTime, offset: ZoneOffset) -> None:
        if not isinstance(time, LocalTime) or not isinstance(offset, ZoneOffset):
            raise TypeError("expected a LocalTime and a ZoneOffset")
        self._time = time
        self._offset = offset

    @classmethod
    def of_instant(cls, instant: Instant, zone: ZoneId) -> OffsetTime:
        offset = zone.rules.get_offset(instant)
        second_of_day = (instant.epoch_second + offset.total_seconds) % SECONDS_PER_DAY
        time = LocalTime._from_nanos(second_of_day * NANOS_PER_SECOND + instant.nano)
        return cls(time, offset)

    @classmethod
    def now(cls, clock: Clock | None = None) -> OffsetTime:
        from isochron.core.clock import Clock

        clock = clock or Clock.system_default_zone()
        return cls.of_instant(clock.instant(), clock.zone)

    @classmethod
    def from_iso_format(cls, text: str) -> OffsetTime:
        """Parse HH:mm[:ss[.f]] followed by Z or an offset.

        Raises:
            ParseError: If the text is not a valid offset time.
        """
        time, offset_seconds = parse_offset_time(text)
        return cls(LocalTime(*time), ZoneOffset.of_total_seconds(offset_seconds))

    @property
    def time(self) -> LocalTime:
        return self._time

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    def to_local_time(self) -> LocalTime:
        return self._time

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

    def _get_field(self, field: ChronoField) -> int:
        if field is ChronoField.OFFSET_SECONDS:
            return self._offset.total_seconds
        return self._time.get(field)

    def _with_field(self, field: ChronoField, value: int) -> OffsetTime:
        if field is ChronoField.OFFSET_SECONDS:
            field.check_valid_value(value)
            return self._with(self._time, ZoneOffset.of_total_seconds(value))
        return self._with(self._time.with_field(field, value), self._offset)

    def _with(self, time: LocalTime, offset: ZoneOffset) -> OffsetTime:
        if time is self._time and offset is self._offset:
            return self
        return OffsetTime(time, offset)

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetTime:
        """Return a copy with a different offset and the same local time."""
        return self._with(self._time, offset)

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetTime:
        """Return a copy with a different offset, adjusting the local time.

        Examples:
            >>> t = OffsetTime.from_iso_format("10:00+01:00")
            >>> str(t.with_offset_same_instant(ZoneOffset.of_hours(3)))
            '12:00+03:00'
        """
        if offset == self._offset:
            return self
        difference = offset.total_seconds - self._offset.total_seconds
        return OffsetTime(self._time.plus_seconds(difference), offset)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> OffsetTime:
        return self._with(self._time.plus(amount, unit), self._offset)

    def plus_hours(self, hours: int) -> OffsetTime:
        return self._with(self._time.plus_hours(hours), self._offset)

    def plus_minutes(self, minutes: int) -> OffsetTime:
        return self._with(self._time.plus_minutes(minutes), self._offset)

    def plus_seconds(self, seconds: int) -> OffsetTime:
        return self._with(self._time.plus_seconds(seconds), self._offset)

    def plus_nanos(self, nanos: int) -> OffsetTime:
        return self._with(self._time.plus_nanos(nanos), self._offset)

    def minus_hours(self, hours: int) -> OffsetTime:
        return self._with(self._time.minus_hours(hours), self._offset)

    def minus_minutes(self, minutes: int) -> OffsetTime:
        return self._with(self._time.minus_minutes(minutes), self._offset)

    def minus_seconds(self, seconds: int) -> OffsetTime:
        return self._with(self._time.minus_seconds(seconds), self._offset)

    def minus_nanos(self, nanos: int) -> OffsetTime:
        return self._with(self._time.minus_nanos(nanos), self._offset)

    def _epoch_nano(self) -> int:
        return self._time.to_nano_of_day() - self._offset.total_seconds * NANOS_PER_SECOND

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """Return the amount of time until end, after aligning its offset."""
        if not isinstance(end, OffsetTime):
            offset = ZoneOffset.of_total_seconds(end.get(ChronoField.OFFSET_SECONDS))
            end = OffsetTime(LocalTime.from_temporal(end), offset)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        if unit not in _TIME_UNITS:
            raise UnsupportedFieldError(f"Unsupported unit: {unit}")
        return trunc_div(end._epoch_nano() - self._epoch_nano(), unit.nanos)

    def truncated_to(self, unit: TemporalUnit) -> OffsetTime:
        return self._with(self._time.truncated_to(unit), self._offset)

    def at_date(self, date: LocalDate) -> OffsetDateTime:
        """Combine with a date to form an OffsetDateTime."""
        from isochron.core.offset_date_time import OffsetDateTime

        return OffsetDateTime(self._time.at_date(date), self._offset)

    def to_iso_format(self) -> str:
        return self._time.to_iso_format() + format_offset_id(self._offset.total_seconds)

    def is_before(self, other: OffsetTime) -> bool:
        """Compare instants only, ignoring the local time."""
        return self._epoch_nano() < other._epoch_nano()

    def is_after(self, other: OffsetTime) -> bool:
        return self._epoch_nano() > other._epoch_nano()

    def is_equal(self, other: OffsetTime) -> bool:
        return self._epoch_nano() == other._epoch_nano()

    def _key(self) -> tuple[int, int]:
        return (self._epoch_nano(), self._time.to_nano_of_day())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._time == other._time and self._offset == other._offset

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._time, self._offset))

    def __repr__(self) -> str:
        return f"OffsetTime({self._time!r}, {self._offset!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["OffsetTime"]
