"""LocalTime class representing a time of day.

This module provides the LocalTime class, a time without a date or
offset stored as a nanosecond-of-day.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron._internal.arith import trunc_div
from isochron._internal.constants import (
    HOURS_PER_DAY,
    MINUTES_PER_DAY,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from isochron.errors import UnsupportedFieldError
from isochron.format.iso8601 import format_time, parse_time
from isochron.temporal.base import Temporal
from isochron.temporal.field import TIME_FIELDS, ChronoField
from isochron.temporal.unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.core.clock import Clock
    from isochron.core.local_date import LocalDate
    from isochron.core.local_date_time import LocalDateTime
    from isochron.core.offset_time import OffsetTime
    from isochron.temporal.base import TemporalUnit
    from isochron.zone.offset import ZoneOffset

_F = ChronoField
_TIME_UNITS = frozenset(unit for unit in ChronoUnit if unit.is_time_based())


class LocalTime(Temporal):
    """A time without a time-zone, such as 10:15:30.

    LocalTime is stored as the number of nanoseconds since midnight and
    has nanosecond precision. Times wrap around midnight when adding or
    subtracting, so 23:00 plus two hours is 01:00.

    Attributes:
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        nanosecond: The nanosecond (0-999,999,999).

    Examples:
        >>> t = LocalTime(14, 30, 45)
        >>> t.hour
        14
        >>> str(t)
        '14:30:45'
        >>> str(LocalTime(10, 15))
        '10:15'
        >>> LocalTime(23, 0).plus_hours(2)
        LocalTime(1, 0)
    """

    __slots__ = ("_nanos",)

    _FIELDS = TIME_FIELDS
    _UNITS = _TIME_UNITS

    MIN: LocalTime
    MAX: LocalTime
    MIDNIGHT: LocalTime
    NOON: LocalTime

    def __init__(
        self, hour: int = 0, minute: int = 0, second: int = 0, nanosecond: int = 0
    ) -> None:
        """Create a LocalTime from its components.

        Raises:
            FieldOutOfRangeError: If any component is out of range.

        Examples:
            >>> LocalTime(24, 0)
            Traceback (most recent call last):
            ...
            FieldOutOfRangeError: Invalid value for HourOfDay (valid values 0 - 23): 24
        """
        _F.HOUR_OF_DAY.check_valid_value(hour)
        _F.MINUTE_OF_HOUR.check_valid_value(minute)
        _F.SECOND_OF_MINUTE.check_valid_value(second)
        _F.NANO_OF_SECOND.check_valid_value(nanosecond)
        self._nanos = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> LocalTime:
        """Create a LocalTime from a nanosecond-of-day already in range."""
        time = object.__new__(cls)
        time._nanos = nanos
        return time

    @classmethod
    def of_second_of_day(cls, second_of_day: int) -> LocalTime:
        """Create a LocalTime from a second-of-day, 0 to 86,399."""
        _F.SECOND_OF_DAY.check_valid_value(second_of_day)
        return cls._from_nanos(second_of_day * NANOS_PER_SECOND)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Create a LocalTime from a nanosecond-of-day."""
        _F.NANO_OF_DAY.check_valid_value(nano_of_day)
        return cls._from_nanos(nano_of_day)

    @classmethod
    def of_instant(cls, instant: Any, zone: Any) -> LocalTime:
        """Return the wall-clock time of an instant in a zone."""
        offset = zone.rules.get_offset(instant)
        local_second = instant.epoch_second + offset.total_seconds
        return cls._from_nanos(
            (local_second % SECONDS_PER_DAY) * NANOS_PER_SECOND + instant.nano
        )

    @classmethod
    def now(cls, clock: Clock | None = None) -> LocalTime:
        """Return the current time from the clock (system default zone if None)."""
        from isochron.core.clock import Clock

        clock = clock or Clock.system_default_zone()
        return cls.of_instant(clock.instant(), clock.zone)

    @classmethod
    def from_temporal(cls, temporal: Any) -> LocalTime:
        """Obtain a LocalTime from any value that supports NANO_OF_DAY."""
        if isinstance(temporal, LocalTime):
            return temporal
        if not temporal.is_supported(_F.NANO_OF_DAY):
            raise UnsupportedFieldError(
                f"Unable to obtain LocalTime from {type(temporal).__name__}"
            )
        return cls._from_nanos(temporal.get(_F.NANO_OF_DAY))

    @classmethod
    def from_iso_format(cls, text: str) -> LocalTime:
        """Parse a time in the form HH:mm[:ss[.fffffffff]].

        Raises:
            ParseError: If the text is not a valid ISO 8601 time.
            FieldOutOfRangeError: If a component is out of range.

        Examples:
            >>> LocalTime.from_iso_format("10:15:30.5")
            LocalTime(10, 15, 30, 500000000)
        """
        return cls(*parse_time(text))

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return self._nanos // NANOS_PER_MINUTE % 60

    @property
    def second(self) -> int:
        return self._nanos // NANOS_PER_SECOND % 60

    @property
    def nanosecond(self) -> int:
        return self._nanos % NANOS_PER_SECOND

    def to_second_of_day(self) -> int:
        return self._nanos // NANOS_PER_SECOND

    def to_nano_of_day(self) -> int:
        return self._nanos

    def _get_field(self, field: ChronoField) -> int:
        nod = self._nanos
        hour = self.hour
        if field is _F.NANO_OF_SECOND:
            return self.nanosecond
        if field is _F.NANO_OF_DAY:
            return nod
        if field is _F.MICRO_OF_SECOND:
            return self.nanosecond // NANOS_PER_MICROSECOND
        if field is _F.MICRO_OF_DAY:
            return nod // NANOS_PER_MICROSECOND
        if field is _F.MILLI_OF_SECOND:
            return self.nanosecond // NANOS_PER_MILLISECOND
        if field is _F.MILLI_OF_DAY:
            return nod // NANOS_PER_MILLISECOND
        if field is _F.SECOND_OF_MINUTE:
            return self.second
        if field is _F.SECOND_OF_DAY:
            return self.to_second_of_day()
        if field is _F.MINUTE_OF_HOUR:
            return self.minute
        if field is _F.MINUTE_OF_DAY:
            return nod // NANOS_PER_MINUTE
        if field is _F.HOUR_OF_AMPM:
            return hour % 12
        if field is _F.CLOCK_HOUR_OF_AMPM:
            return 12 if hour % 12 == 0 else hour % 12
        if field is _F.HOUR_OF_DAY:
            return hour
        if field is _F.CLOCK_HOUR_OF_DAY:
            return 24 if hour == 0 else hour
        # AMPM_OF_DAY
        return hour // 12

    def _with_field(self, field: ChronoField, value: int) -> LocalTime:
        field.check_valid_value(value)
        if field is _F.NANO_OF_SECOND:
            return self.with_nanosecond(value)
        if field is _F.NANO_OF_DAY:
            return LocalTime.of_nano_of_day(value)
        if field is _F.MICRO_OF_SECOND:
            return self.with_nanosecond(value * NANOS_PER_MICROSECOND)
        if field is _F.MICRO_OF_DAY:
            return LocalTime.of_nano_of_day(value * NANOS_PER_MICROSECOND)
        if field is _F.MILLI_OF_SECOND:
            return self.with_nanosecond(value * NANOS_PER_MILLISECOND)
        if field is _F.MILLI_OF_DAY:
            return LocalTime.of_nano_of_day(value * NANOS_PER_MILLISECOND)
        if field is _F.SECOND_OF_MINUTE:
            return self.with_second(value)
        if field is _F.SECOND_OF_DAY:
            return self.plus_seconds(value - self.to_second_of_day())
        if field is _F.MINUTE_OF_HOUR:
            return self.with_minute(value)
        if field is _F.MINUTE_OF_DAY:
            return self.plus_minutes(value - (self.hour * 60 + self.minute))
        if field is _F.HOUR_OF_AMPM:
            return self.plus_hours(value - self.hour % 12)
        if field is _F.CLOCK_HOUR_OF_AMPM:
            return self.plus_hours((0 if value == 12 else value) - self.hour % 12)
        if field is _F.HOUR_OF_DAY:
            return self.with_hour(value)
        if field is _F.CLOCK_HOUR_OF_DAY:
            return self.with_hour(0 if value == 24 else value)
        # AMPM_OF_DAY
        return self.plus_hours((value - self.hour // 12) * 12)

    def with_hour(self, hour: int) -> LocalTime:
        return LocalTime(hour, self.minute, self.second, self.nanosecond)

    def with_minute(self, minute: int) -> LocalTime:
        return LocalTime(self.hour, minute, self.second, self.nanosecond)

    def with_second(self, second: int) -> LocalTime:
        return LocalTime(self.hour, self.minute, second, self.nanosecond)

    def with_nanosecond(self, nanosecond: int) -> LocalTime:
        return LocalTime(self.hour, self.minute, self.second, nanosecond)

    def replace(
        self,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        nanosecond: int | None = None,
    ) -> LocalTime:
        """Return a new LocalTime with specified components replaced.

        Examples:
            >>> LocalTime(14, 30).replace(minute=45)
            LocalTime(14, 45)
        """
        return LocalTime(
            self.hour if hour is None else hour,
            self.minute if minute is None else minute,
            self.second if second is None else second,
            self.nanosecond if nanosecond is None else nanosecond,
        )

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> LocalTime:
        if unit is ChronoUnit.HALF_DAYS:
            return self.plus_hours((amount % 2) * 12)
        return self.plus_nanos(amount * unit.nanos)

    def plus_hours(self, hours: int) -> LocalTime:
        return self.plus_nanos(hours * NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_nanos(minutes * NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_nanos(self, nanos: int) -> LocalTime:
        """Return a copy with nanoseconds added, wrapping around midnight."""
        if nanos == 0:
            return self
        return LocalTime._from_nanos((self._nanos + nanos) % NANOS_PER_DAY)

    def minus_hours(self, hours: int) -> LocalTime:
        return self.plus_hours(-(hours % HOURS_PER_DAY))

    def minus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_minutes(-(minutes % MINUTES_PER_DAY))

    def minus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_seconds(-(seconds % SECONDS_PER_DAY))

    def minus_nanos(self, nanos: int) -> LocalTime:
        return self.plus_nanos(-(nanos % NANOS_PER_DAY))

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """Return the amount of time until end in the given time unit.

        The result is truncated toward zero and is negative if end is
        earlier in the day.

        Examples:
            >>> LocalTime(10, 0).until(LocalTime(12, 30), ChronoUnit.HOURS)
            2
        """
        end = LocalTime.from_temporal(end)
        if isinstance(unit, ChronoUnit):
            if unit not in _TIME_UNITS:
                raise UnsupportedFieldError(f"Unsupported unit: {unit}")
            return trunc_div(end._nanos - self._nanos, unit.nanos)
        return unit.between(self, end)

    def truncated_to(self, unit: TemporalUnit) -> LocalTime:
        """Return a copy truncated to the unit, which must divide a day.

        Examples:
            >>> LocalTime(10, 15, 30, 123).truncated_to(ChronoUnit.MINUTES)
            LocalTime(10, 15)
        """
        if unit is ChronoUnit.NANOS:
            return self
        if unit is ChronoUnit.DAYS:
            return LocalTime.MIDNIGHT
        unit_nanos = unit.duration.to_nanos()
        if unit_nanos > NANOS_PER_DAY:
            raise UnsupportedFieldError("Unit is too large to be used for truncation")
        if NANOS_PER_DAY % unit_nanos != 0:
            raise UnsupportedFieldError(
                "Unit must divide into a standard day without remainder"
            )
        return LocalTime._from_nanos(self._nanos // unit_nanos * unit_nanos)

    def at_date(self, date: LocalDate) -> LocalDateTime:
        """Combine this time with a date."""
        from isochron.core.local_date_time import LocalDateTime

        return LocalDateTime.of(date, self)

    def at_offset(self, offset: ZoneOffset) -> OffsetTime:
        """Combine this time with an offset."""
        from isochron.core.offset_time import OffsetTime

        return OffsetTime(self, offset)

    def to_iso_format(self) -> str:
        """Return the time as HH:mm[:ss[.fff]].

        Examples:
            >>> LocalTime(10, 15, 0, 120_000_000).to_iso_format()
            '10:15:00.120'
        """
        return format_time(self.hour, self.minute, self.second, self.nanosecond)

    def __add__(self, other: object) -> LocalTime:
        from isochron.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus_nanos(other.to_nanos())

    def __sub__(self, other: object) -> LocalTime:
        from isochron.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus_nanos(-other.to_nanos())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        parts = [str(self.hour), str(self.minute)]
        if self.second or self.nanosecond:
            parts.append(str(self.second))
        if self.nanosecond:
            parts.append(str(self.nanosecond))
        return f"LocalTime({', '.join(parts)})"

    def __str__(self) -> str:
        return self.to_iso_format()


LocalTime.MIN = LocalTime._from_nanos(0)
LocalTime.MAX = LocalTime._from_nanos(NANOS_PER_DAY - 1)
LocalTime.MIDNIGHT = LocalTime.MIN
LocalTime.NOON = LocalTime._from_nanos(12 * NANOS_PER_HOUR)


__all__ = ["LocalTime"]
