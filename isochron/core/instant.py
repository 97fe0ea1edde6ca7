"""Instant class representing a point on the UTC time-line.

An Instant is a count of seconds and nanoseconds from the epoch of
1970-01-01T00:00:00Z. It carries no calendar and no zone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron._internal.arith import trunc_div
from isochron._internal.calendar import epoch_day_to_ymd
from isochron._internal.constants import (
    MAX_INSTANT_SECOND,
    MIN_INSTANT_SECOND,
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from isochron.errors import OverflowError, UnsupportedFieldError
from isochron.format.iso8601 import format_date, format_time, parse_zoned
from isochron.temporal.base import Temporal
from isochron.temporal.field import ChronoField
from isochron.temporal.unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.core.clock import Clock
    from isochron.core.offset_date_time import OffsetDateTime
    from isochron.core.zoned_date_time import ZonedDateTime
    from isochron.temporal.base import TemporalUnit
    from isochron.zone.offset import ZoneOffset
    from isochron.zone.zone_id import ZoneId

_F = ChronoField
_U = ChronoUnit

_INSTANT_FIELDS = frozenset(
    {_F.NANO_OF_SECOND, _F.MICRO_OF_SECOND, _F.MILLI_OF_SECOND, _F.INSTANT_SECONDS}
)
_INSTANT_UNITS = frozenset(
    unit for unit in ChronoUnit if unit.is_time_based() or unit is _U.DAYS
)


class Instant(Temporal):
    """An instantaneous point on the time-line.

    Instants range from -1000000000-01-01T00:00Z to
    1000000000-12-31T23:59:59.999999999Z. Arithmetic that leaves this
    range raises OverflowError.

    Attributes:
        epoch_second: Seconds from the epoch, negative before 1970.
        nano: Nanosecond within the second, always 0-999,999,999.

    Examples:
        >>> Instant.of_epoch_second(0)
        Instant(epoch_second=0, nano=0)
        >>> str(Instant.of_epoch_milli(1_500))
        '1970-01-01T00:00:01.500Z'
    """

    __slots__ = ("_seconds", "_nanos")

    _FIELDS = _INSTANT_FIELDS
    _UNITS = _INSTANT_UNITS

    EPOCH: Instant
    MIN: Instant
    MAX: Instant

    def __init__(self, epoch_second: int = 0, nano: int = 0) -> None:
        """Create an Instant, normalizing nano into the second.

        Raises:
            OverflowError: If the instant is outside the supported range.
        """
        extra, nano = divmod(nano, NANOS_PER_SECOND)
        seconds = epoch_second + extra
        if seconds < MIN_INSTANT_SECOND or seconds > MAX_INSTANT_SECOND:
            raise OverflowError("Instant exceeds minimum or maximum instant")
        self._seconds = seconds
        self._nanos = nano

    @classmethod
    def of_epoch_second(cls, epoch_second: int, nano_adjustment: int = 0) -> Instant:
        return cls(epoch_second, nano_adjustment)

    @classmethod
    def of_epoch_milli(cls, epoch_milli: int) -> Instant:
        seconds, millis = divmod(epoch_milli, 1_000)
        return cls(seconds, millis * NANOS_PER_MILLISECOND)

    @classmethod
    def now(cls, clock: Clock | None = None) -> Instant:
        """Return the current instant from the clock (system UTC if None)."""
        from isochron.core.clock import Clock

        return (clock or Clock.system_utc()).instant()

    @classmethod
    def from_temporal(cls, temporal: Any) -> Instant:
        """Obtain an Instant from a value exposing INSTANT_SECONDS."""
        if isinstance(temporal, Instant):
            return temporal
        return cls(temporal.get(_F.INSTANT_SECONDS), temporal.get(_F.NANO_OF_SECOND))

    @classmethod
    def from_iso_format(cls, text: str) -> Instant:
        """Parse an instant such as 2024-01-15T10:00:00Z.

        An offset other than Z is accepted and applied.

        Raises:
            ParseError: If the text is not a valid instant.

        Examples:
            >>> Instant.from_iso_format("1970-01-01T01:00+01:00")
            Instant(epoch_second=0, nano=0)
        """
        from isochron.core.local_date_time import LocalDateTime
        from isochron.errors import ParseError

        date, time, offset_seconds, zone = parse_zoned(text)
        if zone is not None:
            index = text.index("[")
            raise ParseError(
                f"Text {text!r} could not be parsed as an instant at index {index}", text, index
            )
        local = LocalDateTime(*date, *time)
        epoch_day = local.date.to_epoch_day()
        seconds = epoch_day * SECONDS_PER_DAY + local.time.to_second_of_day() - offset_seconds
        return cls(seconds, local.nanosecond)

    @property
    def epoch_second(self) -> int:
        return self._seconds

    @property
    def nano(self) -> int:
        return self._nanos

    def to_epoch_milli(self) -> int:
        """Return milliseconds from the epoch, flooring any sub-milli part."""
        return self._seconds * 1_000 + self._nanos // NANOS_PER_MILLISECOND

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.NANO_OF_SECOND:
            return self._nanos
        if field is _F.MICRO_OF_SECOND:
            return self._nanos // NANOS_PER_MICROSECOND
        if field is _F.MILLI_OF_SECOND:
            return self._nanos // NANOS_PER_MILLISECOND
        return self._seconds

    def _with_field(self, field: ChronoField, value: int) -> Instant:
        field.check_valid_value(value)
        if field is _F.MILLI_OF_SECOND:
            nanos = value * NANOS_PER_MILLISECOND
        elif field is _F.MICRO_OF_SECOND:
            nanos = value * NANOS_PER_MICROSECOND
        elif field is _F.NANO_OF_SECOND:
            nanos = value
        else:
            return self if value == self._seconds else Instant(value, self._nanos)
        return self if nanos == self._nanos else Instant(self._seconds, nanos)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> Instant:
        if unit is _U.NANOS:
            return self.plus_nanos(amount)
        if unit is _U.MICROS:
            return self.plus_nanos(amount * NANOS_PER_MICROSECOND)
        if unit is _U.MILLIS:
            return self.plus_millis(amount)
        return self.plus_seconds(amount * (unit.nanos // NANOS_PER_SECOND))

    def plus_seconds(self, seconds: int) -> Instant:
        if seconds == 0:
            return self
        return Instant(self._seconds + seconds, self._nanos)

    def plus_millis(self, millis: int) -> Instant:
        return self.plus_nanos(millis * NANOS_PER_MILLISECOND)

    def plus_nanos(self, nanos: int) -> Instant:
        if nanos == 0:
            return self
        return Instant(self._seconds, self._nanos + nanos)

    def minus_seconds(self, seconds: int) -> Instant:
        return self.plus_seconds(-seconds)

    def minus_millis(self, millis: int) -> Instant:
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Instant:
        return self.plus_nanos(-nanos)

    def _total_nanos(self) -> int:
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """Return the whole number of units between this and end.

        Examples:
            >>> start = Instant.of_epoch_second(0)
            >>> start.until(Instant.of_epoch_second(7_199), ChronoUnit.HOURS)
            1
        """
        end = Instant.from_temporal(end)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        if unit not in _INSTANT_UNITS:
            raise UnsupportedFieldError(f"Unsupported unit: {unit}")
        return trunc_div(end._total_nanos() - self._total_nanos(), unit.nanos)

    def truncated_to(self, unit: TemporalUnit) -> Instant:
        """Return a copy truncated to the unit.

        The unit must divide a day exactly; truncation floors toward the
        start of the UTC day.
        """
        if unit is _U.NANOS:
            return self
        unit_nanos = unit.duration.to_nanos()
        if unit_nanos > NANOS_PER_DAY:
            raise UnsupportedFieldError("Unit is too large to be used for truncation")
        if NANOS_PER_DAY % unit_nanos != 0:
            raise UnsupportedFieldError("Unit must divide into a standard day without remainder")
        nano_of_day = (self._seconds % SECONDS_PER_DAY) * NANOS_PER_SECOND + self._nanos
        result = (nano_of_day // unit_nanos) * unit_nanos
        return self.plus_nanos(result - nano_of_day)

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        from isochron.core.offset_date_time import OffsetDateTime

        return OffsetDateTime.of_instant(self, offset)

    def at_zone(self, zone: ZoneId) -> ZonedDateTime:
        from isochron.core.zoned_date_time import ZonedDateTime

        return ZonedDateTime.of_instant(self, zone)

    def to_iso_format(self) -> str:
        """Return the instant in UTC, always with seconds and a Z suffix."""
        epoch_day, second_of_day = divmod(self._seconds, SECONDS_PER_DAY)
        year, month, day = epoch_day_to_ymd(epoch_day)
        time = format_time(
            second_of_day // SECONDS_PER_HOUR,
            second_of_day // SECONDS_PER_MINUTE % 60,
            second_of_day % 60,
            self._nanos,
            always_seconds=True,
        )
        return f"{format_date(year, month, day)}T{time}Z"

    def _key(self) -> tuple[int, int]:
        return (self._seconds, self._nanos)

    def __add__(self, other: object) -> Instant:
        from isochron.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Any:
        from isochron.core.duration import Duration

        if isinstance(other, Duration):
            return self.minus(other)
        if isinstance(other, Instant):
            return Duration.between(other, self)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Instant(epoch_second={self._seconds}, nano={self._nanos})"

    def __str__(self) -> str:
        return self.to_iso_format()


Instant.EPOCH = Instant(0, 0)
Instant.MIN = Instant(MIN_INSTANT_SECOND, 0)
Instant.MAX = Instant(MAX_INSTANT_SECOND, 999_999_999)


__all__ = ["Instant"]
