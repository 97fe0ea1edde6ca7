"""The standard set of date-time units.

ChronoUnit covers the units from NANOS to FOREVER. Units up to and
including HALF_DAYS are time-based and have exact durations; DAYS and
longer are date-based and their durations are estimates (a day may be
23 or 25 hours across a daylight saving transition, a month is a
twelfth of an average Gregorian year).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from isochron._internal.constants import MAX_LONG, NANOS_PER_SECOND
from isochron.temporal.base import TemporalEnumMeta, TemporalUnit

if TYPE_CHECKING:
    from isochron.core.duration import Duration

# Average Gregorian year: 365.2425 days
_SECONDS_PER_YEAR = 31_556_952


class ChronoUnit(TemporalUnit, Enum, metaclass=TemporalEnumMeta):
    """A standard set of date period units.

    Examples:
        >>> ChronoUnit.HOURS.duration
        Duration(seconds=3600, nanos=0)
        >>> ChronoUnit.DAYS.is_date_based()
        True
        >>> str(ChronoUnit.HALF_DAYS)
        'HalfDays'
    """

    NANOS = ("Nanos", 0, 1)
    MICROS = ("Micros", 0, 1_000)
    MILLIS = ("Millis", 0, 1_000_000)
    SECONDS = ("Seconds", 1, 0)
    MINUTES = ("Minutes", 60, 0)
    HOURS = ("Hours", 3_600, 0)
    HALF_DAYS = ("HalfDays", 43_200, 0)
    DAYS = ("Days", 86_400, 0)
    WEEKS = ("Weeks", 7 * 86_400, 0)
    MONTHS = ("Months", _SECONDS_PER_YEAR // 12, 0)
    YEARS = ("Years", _SECONDS_PER_YEAR, 0)
    DECADES = ("Decades", _SECONDS_PER_YEAR * 10, 0)
    CENTURIES = ("Centuries", _SECONDS_PER_YEAR * 100, 0)
    MILLENNIA = ("Millennia", _SECONDS_PER_YEAR * 1_000, 0)
    ERAS = ("Eras", _SECONDS_PER_YEAR * 1_000_000_000, 0)
    FOREVER = ("Forever", MAX_LONG, 999_999_999)

    def __init__(self, display_name: str, seconds: int, nanos: int) -> None:
        self._display_name = display_name
        self._seconds = seconds
        self._nanos = nanos

    @property
    def duration(self) -> Duration:
        """Return the (possibly estimated) duration of this unit."""
        # Import here to avoid circular imports
        from isochron.core.duration import Duration

        return Duration.of_seconds(self._seconds, self._nanos)

    @property
    def nanos(self) -> int:
        """Return the duration of this unit in nanoseconds."""
        return self._seconds * NANOS_PER_SECOND + self._nanos

    def is_duration_estimated(self) -> bool:
        """Return True for DAYS and longer."""
        return self._seconds >= 86_400

    def is_date_based(self) -> bool:
        """Return True for DAYS up to ERAS; FOREVER is neither."""
        return self._seconds >= 86_400 and self is not ChronoUnit.FOREVER

    def is_time_based(self) -> bool:
        """Return True for NANOS up to HALF_DAYS."""
        return self._seconds < 86_400

    def is_supported_by(self, temporal: Any) -> bool:
        return temporal.is_supported(self)

    def add_to(self, temporal: Any, amount: int) -> Any:
        """Return temporal moved by amount of this unit."""
        return temporal.plus(amount, self)

    def between(self, start: Any, end: Any) -> int:
        """Return the whole number of this unit between start and end."""
        return start.until(end, self)

    def __str__(self) -> str:
        return self._display_name


__all__ = ["ChronoUnit"]
