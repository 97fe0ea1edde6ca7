"""Duration class representing an exact amount of time.

This module provides the Duration class, a time-based amount stored as
seconds plus nanoseconds. Durations are exact: one day is always
86,400 seconds, regardless of daylight saving transitions. For
calendar-relative amounts see Period.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from isochron._internal.arith import check_long, trunc_div, trunc_mod
from isochron._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from isochron.errors import OverflowError, ParseError, UnsupportedFieldError
from isochron.temporal.base import TemporalAmount
from isochron.temporal.unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.temporal.base import TemporalUnit

_PATTERN = re.compile(
    r"([-+]?)P(?:([-+]?[0-9]+)D)?"
    r"(T(?:([-+]?[0-9]+)H)?(?:([-+]?[0-9]+)M)?(?:([-+]?[0-9]+)(?:[.,]([0-9]{0,9}))?S)?)?",
    re.IGNORECASE | re.ASCII,
)


class Duration(TemporalAmount):
    """A time-based amount of time, such as '34.5 seconds'.

    The duration is stored as a number of seconds and a nanosecond
    adjustment that is always in the range 0 to 999,999,999. A negative
    duration therefore carries its sign in the seconds only:
    -0.5 seconds is stored as -1 second plus 500,000,000 nanoseconds.

    Attributes:
        seconds: Whole seconds, may be negative.
        nanos: Nanosecond adjustment, 0 to 999,999,999.

    Examples:
        >>> d = Duration.of_seconds(-1, 500_000_000)
        >>> (d.seconds, d.nanos)
        (-1, 500000000)

        >>> str(Duration.of_hours(2) + Duration.of_minutes(3))
        'PT2H3M'

        >>> Duration.from_iso_format("PT-0.5S") == Duration.of_millis(-500)
        True
    """

    __slots__ = ("_seconds", "_nanos")

    ZERO: Duration

    def __init__(self, seconds: int = 0, nanos: int = 0) -> None:
        """Create a Duration from seconds and a nanosecond adjustment.

        Both parts may be any integer; the result is normalized so that
        the stored nanos lie in [0, 1e9).

        Raises:
            OverflowError: If the seconds exceed the signed 64-bit range.
        """
        seconds, nanos = divmod(seconds * NANOS_PER_SECOND + nanos, NANOS_PER_SECOND)
        self._seconds = check_long(seconds, "Duration seconds")
        self._nanos = nanos

    @classmethod
    def _from_nanos(cls, total_nanos: int) -> Duration:
        """Create a Duration from a total number of nanoseconds."""
        return cls(0, total_nanos)

    @classmethod
    def of_days(cls, days: int) -> Duration:
        """Create a Duration of standard 24-hour days."""
        return cls(days * SECONDS_PER_DAY)

    @classmethod
    def of_hours(cls, hours: int) -> Duration:
        """Create a Duration of hours."""
        return cls(hours * SECONDS_PER_HOUR)

    @classmethod
    def of_minutes(cls, minutes: int) -> Duration:
        """Create a Duration of minutes."""
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration of seconds with an optional nanosecond adjustment.

        Args:
            seconds: Number of seconds, positive or negative.
            nano_adjustment: Nanoseconds added to seconds, any sign.

        Examples:
            >>> Duration.of_seconds(3, 1)
            Duration(seconds=3, nanos=1)
            >>> Duration.of_seconds(4, -999_999_999)
            Duration(seconds=3, nanos=1)
        """
        return cls(seconds, nano_adjustment)

    @classmethod
    def of_millis(cls, millis: int) -> Duration:
        """Create a Duration of milliseconds."""
        return cls(0, millis * NANOS_PER_MILLISECOND)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        """Create a Duration of nanoseconds."""
        return cls(0, nanos)

    @classmethod
    def of(cls, amount: int, unit: TemporalUnit) -> Duration:
        """Create a Duration from an amount of a unit with an exact duration.

        DAYS is accepted and treated as 24 hours.

        Raises:
            UnsupportedFieldError: If the unit has an estimated duration.

        Examples:
            >>> Duration.of(3, ChronoUnit.HALF_DAYS)
            Duration(seconds=129600, nanos=0)
        """
        return cls.ZERO.plus(amount, unit)

    @classmethod
    def between(cls, start_inclusive: Any, end_exclusive: Any) -> Duration:
        """Return the Duration between two temporal values.

        Both values must support NANOS, e.g. two Instants or two
        LocalDateTimes. The result is negative if end is before start.
        """
        return cls._from_nanos(start_inclusive.until(end_exclusive, ChronoUnit.NANOS))

    @classmethod
    def from_iso_format(cls, text: str) -> Duration:
        """Parse a duration in the ISO 8601 form PnDTnHnMn.nS.

        Days are exactly 24 hours. Any component may carry a sign and
        the whole text may be prefixed by a sign. The letters are
        case-insensitive and either '.' or ',' introduces the fraction.

        Raises:
            ParseError: If the text does not match the grammar.

        Examples:
            >>> Duration.from_iso_format("PT20.345S")
            Duration(seconds=20, nanos=345000000)
            >>> Duration.from_iso_format("P2DT3H4M")
            Duration(seconds=183840, nanos=0)
            >>> Duration.from_iso_format("-PT6H3M")
            Duration(seconds=-21780, nanos=0)
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        match = _PATTERN.fullmatch(text)
        if match is None or match.group(3) in ("T", "t"):
            raise ParseError(f"Text {text!r} cannot be parsed to a Duration", text, 0)
        negate, days, time_part, hours, minutes, seconds, fraction = match.groups()
        if days is None and time_part is None:
            raise ParseError(f"Text {text!r} cannot be parsed to a Duration", text, 0)

        total_seconds = (
            int(days or 0) * SECONDS_PER_DAY
            + int(hours or 0) * SECONDS_PER_HOUR
            + int(minutes or 0) * SECONDS_PER_MINUTE
            + int(seconds or 0)
        )
        nanos = int(fraction.ljust(9, "0")) if fraction else 0
        if seconds is not None and seconds.startswith("-"):
            nanos = -nanos
        try:
            result = cls(total_seconds, nanos)
        except OverflowError as exc:
            raise ParseError(f"Text {text!r} cannot be parsed to a Duration: {exc}", text, 0) from exc
        return result.negated() if negate == "-" else result

    @property
    def seconds(self) -> int:
        """Return the whole seconds, which carry the sign of the duration."""
        return self._seconds

    @property
    def nanos(self) -> int:
        """Return the nanosecond adjustment, 0 to 999,999,999."""
        return self._nanos

    @property
    def units(self) -> list[ChronoUnit]:
        """Return the units of this amount: SECONDS and NANOS."""
        return [ChronoUnit.SECONDS, ChronoUnit.NANOS]

    def get(self, unit: TemporalUnit) -> int:
        """Return the amount of SECONDS or NANOS."""
        if unit is ChronoUnit.SECONDS:
            return self._seconds
        if unit is ChronoUnit.NANOS:
            return self._nanos
        raise UnsupportedFieldError(f"Unsupported unit: {unit}")

    @property
    def is_zero(self) -> bool:
        """Return True if this duration has zero length."""
        return self._seconds == 0 and self._nanos == 0

    @property
    def is_negative(self) -> bool:
        """Return True if this duration is less than zero."""
        return self._seconds < 0

    @property
    def is_positive(self) -> bool:
        """Return True if this duration is greater than zero."""
        return not self.is_negative and not self.is_zero

    def with_seconds(self, seconds: int) -> Duration:
        return Duration(seconds, self._nanos)

    def with_nanos(self, nano_of_second: int) -> Duration:
        from isochron.temporal.field import ChronoField

        ChronoField.NANO_OF_SECOND.check_valid_value(nano_of_second)
        return Duration(self._seconds, nano_of_second)

    def plus(self, amount: Any, unit: TemporalUnit | None = None) -> Duration:
        """Return this duration plus another duration or an amount of a unit.

        Args:
            amount: A Duration when unit is None, else an integer.
            unit: A unit with an exact duration, or DAYS.

        Raises:
            UnsupportedFieldError: If the unit has an estimated duration.
        """
        if unit is None:
            if not isinstance(amount, Duration):
                raise TypeError(f"expected Duration, got {type(amount).__name__}")
            return self._plus_nanos(amount.to_nanos())
        if unit is ChronoUnit.DAYS:
            return self._plus_nanos(amount * NANOS_PER_DAY)
        if unit.is_duration_estimated():
            raise UnsupportedFieldError("Unit must not have an estimated duration")
        if amount == 0:
            return self
        if isinstance(unit, ChronoUnit):
            return self._plus_nanos(amount * unit.nanos)
        return self._plus_nanos(unit.duration.multiplied_by(amount).to_nanos())

    def minus(self, amount: Any, unit: TemporalUnit | None = None) -> Duration:
        """Return this duration minus another duration or an amount of a unit."""
        if unit is None:
            if not isinstance(amount, Duration):
                raise TypeError(f"expected Duration, got {type(amount).__name__}")
            return self._plus_nanos(-amount.to_nanos())
        return self.plus(-amount, unit)

    def _plus_nanos(self, nanos: int) -> Duration:
        if nanos == 0:
            return self
        return Duration(self._seconds, self._nanos + nanos)

    def plus_days(self, days: int) -> Duration:
        return self._plus_nanos(days * NANOS_PER_DAY)

    def plus_hours(self, hours: int) -> Duration:
        return self._plus_nanos(hours * SECONDS_PER_HOUR * NANOS_PER_SECOND)

    def plus_minutes(self, minutes: int) -> Duration:
        return self._plus_nanos(minutes * SECONDS_PER_MINUTE * NANOS_PER_SECOND)

    def plus_seconds(self, seconds: int) -> Duration:
        return self._plus_nanos(seconds * NANOS_PER_SECOND)

    def plus_millis(self, millis: int) -> Duration:
        return self._plus_nanos(millis * NANOS_PER_MILLISECOND)

    def plus_nanos(self, nanos: int) -> Duration:
        return self._plus_nanos(nanos)

    def minus_days(self, days: int) -> Duration:
        return self.plus_days(-days)

    def minus_hours(self, hours: int) -> Duration:
        return self.plus_hours(-hours)

    def minus_minutes(self, minutes: int) -> Duration:
        return self.plus_minutes(-minutes)

    def minus_seconds(self, seconds: int) -> Duration:
        return self.plus_seconds(-seconds)

    def minus_millis(self, millis: int) -> Duration:
        return self.plus_millis(-millis)

    def minus_nanos(self, nanos: int) -> Duration:
        return self.plus_nanos(-nanos)

    def multiplied_by(self, multiplicand: int) -> Duration:
        """Return this duration multiplied by a scalar.

        Raises:
            OverflowError: If the result exceeds the Duration range.
        """
        if multiplicand == 1:
            return self
        return Duration._from_nanos(self.to_nanos() * multiplicand)

    def divided_by(self, divisor: Any) -> Any:
        """Divide by an integer scalar or by another Duration.

        Division by a scalar truncates toward zero at nanosecond
        precision and returns a Duration. Division by a Duration returns
        the whole number of times the divisor fits, truncated toward zero.

        Raises:
            ZeroDivisionError: If the divisor is zero.

        Examples:
            >>> Duration.of_seconds(10).divided_by(3)
            Duration(seconds=3, nanos=333333333)
            >>> Duration.of_minutes(-7).divided_by(Duration.of_minutes(2))
            -3
        """
        if isinstance(divisor, Duration):
            if divisor.is_zero:
                raise ZeroDivisionError("Cannot divide by zero")
            return trunc_div(self.to_nanos(), divisor.to_nanos())
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        if divisor == 1:
            return self
        return Duration._from_nanos(trunc_div(self.to_nanos(), divisor))

    def negated(self) -> Duration:
        """Return this duration with the length negated."""
        return Duration._from_nanos(-self.to_nanos())

    def abs(self) -> Duration:
        """Return a copy with a positive length."""
        return self.negated() if self.is_negative else self

    def add_to(self, temporal: Any) -> Any:
        """Add this duration to a temporal value supporting seconds and nanos."""
        if self._seconds != 0:
            temporal = temporal.plus(self._seconds, ChronoUnit.SECONDS)
        if self._nanos != 0:
            temporal = temporal.plus(self._nanos, ChronoUnit.NANOS)
        return temporal

    def subtract_from(self, temporal: Any) -> Any:
        """Subtract this duration from a temporal value."""
        if self._seconds != 0:
            temporal = temporal.minus(self._seconds, ChronoUnit.SECONDS)
        if self._nanos != 0:
            temporal = temporal.minus(self._nanos, ChronoUnit.NANOS)
        return temporal

    def to_days(self) -> int:
        """Return the number of whole 24-hour days, truncated toward zero."""
        return trunc_div(self._seconds, SECONDS_PER_DAY)

    def to_hours(self) -> int:
        return trunc_div(self._seconds, SECONDS_PER_HOUR)

    def to_minutes(self) -> int:
        return trunc_div(self._seconds, SECONDS_PER_MINUTE)

    def to_seconds(self) -> int:
        """Return the whole seconds, same as ``seconds``."""
        return self._seconds

    def to_millis(self) -> int:
        """Return the total length in milliseconds, rounding toward -inf."""
        return self._seconds * 1000 + self._nanos // NANOS_PER_MILLISECOND

    def to_nanos(self) -> int:
        """Return the total length in nanoseconds."""
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def to_days_part(self) -> int:
        return trunc_div(self._seconds, SECONDS_PER_DAY)

    def to_hours_part(self) -> int:
        """Return the hours part, 0 to 23 in magnitude."""
        return trunc_mod(self.to_hours(), 24)

    def to_minutes_part(self) -> int:
        return trunc_mod(self.to_minutes(), 60)

    def to_seconds_part(self) -> int:
        return trunc_mod(self._seconds, 60)

    def to_millis_part(self) -> int:
        return self._nanos // NANOS_PER_MILLISECOND

    def to_nanos_part(self) -> int:
        return self._nanos

    def truncated_to(self, unit: TemporalUnit) -> Duration:
        """Return a copy truncated to the unit.

        The unit must have a duration that divides a standard day
        without remainder; DAYS is the largest allowed unit.

        Raises:
            UnsupportedFieldError: If the unit is too large or does not
                divide a day.

        Examples:
            >>> Duration.of_seconds(3725, 5).truncated_to(ChronoUnit.MINUTES)
            Duration(seconds=3720, nanos=0)
        """
        if unit is ChronoUnit.SECONDS and (self._seconds >= 0 or self._nanos == 0):
            return Duration(self._seconds)
        if unit is ChronoUnit.NANOS:
            return self
        unit_nanos = unit.duration.to_nanos()
        if unit_nanos > NANOS_PER_DAY:
            raise UnsupportedFieldError("Unit is too large to be used for truncation")
        if NANOS_PER_DAY % unit_nanos != 0:
            raise UnsupportedFieldError(
                "Unit must divide into a standard day without remainder"
            )
        nano_of_day = trunc_mod(self._seconds, SECONDS_PER_DAY) * NANOS_PER_SECOND + self._nanos
        result = trunc_div(nano_of_day, unit_nanos) * unit_nanos
        return self._plus_nanos(result - nano_of_day)

    def to_iso_format(self) -> str:
        """Return the duration as PTnHnMn.nS.

        Days are folded into hours. A zero duration is 'PT0S'.

        Examples:
            >>> Duration.of_days(1).to_iso_format()
            'PT24H'
            >>> Duration.of_seconds(-1, 500_000_000).to_iso_format()
            'PT-0.5S'
        """
        if self.is_zero:
            return "PT0S"
        effective_seconds = self._seconds
        if self._seconds < 0 and self._nanos > 0:
            effective_seconds += 1
        hours = trunc_div(effective_seconds, SECONDS_PER_HOUR)
        minutes = trunc_div(trunc_mod(effective_seconds, SECONDS_PER_HOUR), SECONDS_PER_MINUTE)
        secs = trunc_mod(effective_seconds, SECONDS_PER_MINUTE)

        text = "PT"
        if hours != 0:
            text += f"{hours}H"
        if minutes != 0:
            text += f"{minutes}M"
        if secs == 0 and self._nanos == 0 and len(text) > 2:
            return text
        if self._seconds < 0 and self._nanos > 0 and secs == 0:
            text += "-0"
        else:
            text += str(secs)
        if self._nanos > 0:
            if self._seconds < 0:
                fraction = str(2 * NANOS_PER_SECOND - self._nanos)
            else:
                fraction = str(self._nanos + NANOS_PER_SECOND)
            text += "." + fraction[1:].rstrip("0")
        return text + "S"

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: object) -> Duration:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Duration:
        """Support scalar * Duration."""
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> Any:
        """Divide by an int (Duration result) or a Duration (int result).

        Unlike int floor division, the result truncates toward zero.
        """
        if isinstance(other, bool) or not isinstance(other, (int, Duration)):
            return NotImplemented
        return self.divided_by(other)

    def __neg__(self) -> Duration:
        return self.negated()

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) < (other._seconds, other._nanos)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) <= (other._seconds, other._nanos)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) > (other._seconds, other._nanos)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._seconds, self._nanos) >= (other._seconds, other._nanos)

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanos={self._nanos})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return not self.is_zero


Duration.ZERO = Duration()


__all__ = ["Duration"]
