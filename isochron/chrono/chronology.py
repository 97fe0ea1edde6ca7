"""Calendar systems.

A Chronology knows how one calendar numbers its years, months and days
and how to map them to and from the epoch-day, which every calendar
shares. The set of chronologies is closed: ``Chronology.of`` accepts
``ISO``, ``Minguo``, ``ThaiBuddhist`` and ``Julian``.

Examples:
    >>> Chronology.of("Minguo").date(113, 1, 15).to_local_date()
    LocalDate(2024, 1, 15)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from isochron._internal.calendar import (
    days_in_month,
    epoch_day_to_ymd,
    is_leap_year,
    ymd_to_epoch_day,
)
from isochron._internal.constants import MAX_YEAR, MIN_YEAR
from isochron.errors import InvalidDateError, ValidationError
from isochron.temporal.field import ChronoField
from isochron.temporal.value_range import ValueRange

if TYPE_CHECKING:
    from isochron.chrono.chrono_date import ChronoDate
    from isochron.core.clock import Clock
    from isochron.zone.zone_id import ZoneId

_F = ChronoField


class Chronology(ABC):
    """A calendar system used to organize and identify dates.

    Subclasses supply the year numbering and the mapping between
    (proleptic year, month, day) and the epoch-day. Every calendar here
    has twelve months and two eras, with era 1 holding years 1 and up
    and era 0 holding year 0 and below.
    """

    __slots__ = ()

    _ERA_TYPE: type[Enum]

    @staticmethod
    def of(chronology_id: str) -> Chronology:
        """Return the chronology with the given id or calendar type.

        Raises:
            ValidationError: If the id is unknown.
        """
        chronology = _registry().get(chronology_id)
        if chronology is None:
            raise ValidationError(f"Unknown chronology: {chronology_id}")
        return chronology

    @staticmethod
    def available_chronologies() -> list[Chronology]:
        unique: dict[str, Chronology] = {}
        for chronology in _registry().values():
            unique[chronology.id] = chronology
        return list(unique.values())

    @staticmethod
    def from_temporal(temporal: Any) -> Chronology:
        """Return the chronology of a date, ISO for the core types."""
        chronology = getattr(temporal, "chronology", None)
        if chronology is None:
            from isochron.chrono.iso import IsoChronology

            return IsoChronology.INSTANCE
        return chronology

    @property
    @abstractmethod
    def id(self) -> str:
        """The chronology id, such as 'ISO' or 'Minguo'."""

    @property
    @abstractmethod
    def calendar_type(self) -> str | None:
        """The CLDR calendar type, such as 'iso8601' or 'roc'."""

    @abstractmethod
    def is_leap_year(self, proleptic_year: int) -> bool:
        """Return True if the proleptic year is a leap year."""

    @abstractmethod
    def length_of_month(self, proleptic_year: int, month: int) -> int:
        """Return the number of days in the month."""

    def length_of_year(self, proleptic_year: int) -> int:
        return 366 if self.is_leap_year(proleptic_year) else 365

    def eras(self) -> list[Any]:
        return list(self._ERA_TYPE)

    def era_of(self, value: int) -> Any:
        """Return the era for an ERA field value.

        Raises:
            FieldOutOfRangeError: If value is not 0 or 1.
        """
        return self._ERA_TYPE.of(value)

    def proleptic_year(self, era: Any, year_of_era: int) -> int:
        """Convert an era and year-of-era to a proleptic year.

        Raises:
            ValidationError: If era does not belong to this chronology.
        """
        if not isinstance(era, self._ERA_TYPE):
            raise ValidationError(f"Era must be {self._ERA_TYPE.__name__}, got {era!r}")
        return year_of_era if era.value == 1 else 1 - year_of_era

    @abstractmethod
    def range(self, field: ChronoField) -> ValueRange:
        """Return the range of valid values for a field in this calendar."""

    @abstractmethod
    def _to_epoch_day(self, proleptic_year: int, month: int, day: int) -> int:
        """Convert a date already known to be valid to an epoch-day."""

    @abstractmethod
    def _from_epoch_day(self, epoch_day: int) -> tuple[int, int, int]:
        """Convert an epoch-day to (proleptic year, month, day)."""

    def _validate(self, proleptic_year: int, month: int, day: int) -> None:
        self.range(_F.YEAR).check_valid_value(proleptic_year, _F.YEAR)
        _F.MONTH_OF_YEAR.check_valid_value(month)
        _F.DAY_OF_MONTH.check_valid_value(day)
        if day > self.length_of_month(proleptic_year, month):
            if month == 2 and day == 29:
                raise InvalidDateError(
                    f"Invalid date 'February 29' as '{proleptic_year}' is not a leap year"
                )
            raise InvalidDateError(f"Invalid date: {proleptic_year}-{month:02d}-{day:02d}")

    def _create(self, proleptic_year: int, month: int, day: int) -> Any:
        """Build a date known to be valid; ChronoDate unless overridden."""
        from isochron.chrono.chrono_date import ChronoDate

        return ChronoDate._of(self, proleptic_year, month, day)

    def _resolve_previous_valid(self, proleptic_year: int, month: int, day: int) -> Any:
        """Build a date, clamping the day to the end of the month."""
        self.range(_F.YEAR).check_valid_value(proleptic_year, _F.YEAR)
        day = min(day, self.length_of_month(proleptic_year, month))
        return self._create(proleptic_year, month, day)

    def date(self, proleptic_year: int, month: int, day: int) -> ChronoDate:
        """Return the date for a proleptic year, month and day.

        Raises:
            FieldOutOfRangeError: If a component is outside its range.
            InvalidDateError: If the day does not exist in the month.
        """
        self._validate(proleptic_year, month, day)
        return self._create(proleptic_year, month, day)

    def date_of_era(self, era: Any, year_of_era: int, month: int, day: int) -> ChronoDate:
        """Return the date for an era, year-of-era, month and day."""
        return self.date(self.proleptic_year(era, year_of_era), month, day)

    def date_year_day(self, proleptic_year: int, day_of_year: int) -> ChronoDate:
        """Return the date for a proleptic year and day-of-year.

        Raises:
            InvalidDateError: If the year has fewer days.
        """
        self.range(_F.YEAR).check_valid_value(proleptic_year, _F.YEAR)
        _F.DAY_OF_YEAR.check_valid_value(day_of_year)
        if day_of_year > self.length_of_year(proleptic_year):
            raise InvalidDateError(
                f"Invalid date 'DayOfYear 366' as '{proleptic_year}' is not a leap year"
            )
        start = self._to_epoch_day(proleptic_year, 1, 1)
        return self.date_epoch_day(start + day_of_year - 1)

    def date_epoch_day(self, epoch_day: int) -> ChronoDate:
        """Return the date for an epoch-day.

        Raises:
            FieldOutOfRangeError: If the epoch-day is outside this calendar.
        """
        self.range(_F.EPOCH_DAY).check_valid_value(epoch_day, _F.EPOCH_DAY)
        return self._create(*self._from_epoch_day(epoch_day))

    def date_now(self, clock: Clock | ZoneId | None = None) -> ChronoDate:
        """Return the current date in this calendar.

        Args:
            clock: A Clock, a ZoneId for the system clock in that zone,
                or None for the system clock in the default zone.
        """
        from isochron.core.clock import Clock
        from isochron.core.local_date import LocalDate

        if clock is not None and not isinstance(clock, Clock):
            clock = Clock.system(clock)
        return self.date_from(LocalDate.now(clock))

    def date_from(self, temporal: Any) -> ChronoDate:
        """Convert any date-bearing value to this calendar via its epoch-day."""
        from isochron.chrono.chrono_date import ChronoDate

        if isinstance(temporal, ChronoDate) and temporal.chronology == self:
            return temporal
        return self.date_epoch_day(temporal.get(_F.EPOCH_DAY))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chronology):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.INSTANCE"

    def __str__(self) -> str:
        return self.id


class YearOffsetChronology(Chronology):
    """A calendar identical to ISO except that years are renumbered.

    The proleptic year of this calendar is the ISO year minus
    ``_YEAR_OFFSET``.
    """

    __slots__ = ()

    _YEAR_OFFSET: int

    def is_leap_year(self, proleptic_year: int) -> bool:
        return is_leap_year(proleptic_year + self._YEAR_OFFSET)

    def length_of_month(self, proleptic_year: int, month: int) -> int:
        return days_in_month(proleptic_year + self._YEAR_OFFSET, month)

    def range(self, field: ChronoField) -> ValueRange:
        offset = self._YEAR_OFFSET
        if field is _F.PROLEPTIC_MONTH:
            outer = field.range()
            return ValueRange.of(outer.minimum - offset * 12, outer.maximum - offset * 12)
        if field is _F.YEAR_OF_ERA:
            return ValueRange.of(1, MAX_YEAR - offset, -MIN_YEAR + 1 + offset)
        if field is _F.YEAR:
            return ValueRange.of(MIN_YEAR - offset, MAX_YEAR - offset)
        return field.range()

    def _to_epoch_day(self, proleptic_year: int, month: int, day: int) -> int:
        return ymd_to_epoch_day(proleptic_year + self._YEAR_OFFSET, month, day)

    def _from_epoch_day(self, epoch_day: int) -> tuple[int, int, int]:
        year, month, day = epoch_day_to_ymd(epoch_day)
        return year - self._YEAR_OFFSET, month, day


@lru_cache(maxsize=1)
def _registry() -> dict[str, Chronology]:
    """Map ids and calendar types to the built-in chronologies."""
    # Import here to avoid circular imports
    from isochron.chrono.iso import IsoChronology
    from isochron.chrono.julian import JulianChronology
    from isochron.chrono.minguo import MinguoChronology
    from isochron.chrono.thai_buddhist import ThaiBuddhistChronology

    registry: dict[str, Chronology] = {}
    for chronology in (
        IsoChronology.INSTANCE,
        MinguoChronology.INSTANCE,
        ThaiBuddhistChronology.INSTANCE,
        JulianChronology.INSTANCE,
    ):
        registry[chronology.id] = chronology
        if chronology.calendar_type is not None:
            registry[chronology.calendar_type] = chronology
    return registry


__all__ = ["Chronology", "YearOffsetChronology"]
