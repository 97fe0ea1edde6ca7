"""The proleptic Julian calendar.

Every fourth year is a leap year, without the Gregorian century rule.
Years are numbered like ISO: year 0 exists and is 1 BC, and eras use
IsoEra. The Julian calendar runs behind ISO by ten days in 1582 and by
thirteen days between 1900 and 2100.
"""

from __future__ import annotations

from isochron._internal.constants import DAYS_IN_MONTH
from isochron.chrono.chronology import Chronology
from isochron.temporal.field import ChronoField
from isochron.temporal.value_range import ValueRange
from isochron.units.era import IsoEra

_F = ChronoField

_MIN_YEAR = -999_999
_MAX_YEAR = 999_999

# Julian 0000-01-01 is two days before ISO 0000-01-01
_DAYS_0000_TO_1970 = 719_530
_DAYS_0001_TO_1970 = _DAYS_0000_TO_1970 - 366
_DAYS_PER_CYCLE = 4 * 365 + 1


def _is_leap(year: int) -> bool:
    return year % 4 == 0


def _month_length(year: int, month: int) -> int:
    if month == 2:
        return 29 if _is_leap(year) else 28
    return DAYS_IN_MONTH[month]


def _to_epoch_day(year: int, month: int, day: int) -> int:
    total = 365 * year + (year + 3) // 4
    total += (367 * month - 362) // 12 + day - 1
    if month > 2:
        total -= 1 if _is_leap(year) else 2
    return total - _DAYS_0000_TO_1970


def _from_epoch_day(epoch_day: int) -> tuple[int, int, int]:
    cycle, day_in_cycle = divmod(epoch_day + _DAYS_0001_TO_1970, _DAYS_PER_CYCLE)
    if day_in_cycle == _DAYS_PER_CYCLE - 1:
        # the last day of the leap year at the end of each cycle
        return cycle * 4 + 4, 12, 31
    year = cycle * 4 + day_in_cycle // 365 + 1
    remaining = day_in_cycle % 365
    month = 1
    while remaining >= _month_length(year, month):
        remaining -= _month_length(year, month)
        month += 1
    return year, month, remaining + 1


_MIN_EPOCH_DAY = _to_epoch_day(_MIN_YEAR, 1, 1)
_MAX_EPOCH_DAY = _to_epoch_day(_MAX_YEAR, 12, 31)


class JulianChronology(Chronology):
    """The proleptic Julian calendar system.

    Examples:
        >>> d = JulianChronology.INSTANCE.date(1582, 10, 5)
        >>> d.to_local_date()
        LocalDate(1582, 10, 15)
        >>> JulianChronology.INSTANCE.is_leap_year(1900)
        True
    """

    __slots__ = ()

    _ERA_TYPE = IsoEra

    INSTANCE: JulianChronology

    @property
    def id(self) -> str:
        return "Julian"

    @property
    def calendar_type(self) -> str:
        return "julian"

    def is_leap_year(self, proleptic_year: int) -> bool:
        return _is_leap(proleptic_year)

    def length_of_month(self, proleptic_year: int, month: int) -> int:
        return _month_length(proleptic_year, month)

    def range(self, field: ChronoField) -> ValueRange:
        if field is _F.PROLEPTIC_MONTH:
            return ValueRange.of(_MIN_YEAR * 12, _MAX_YEAR * 12 + 11)
        if field is _F.YEAR_OF_ERA:
            return ValueRange.of(1, _MAX_YEAR, -_MIN_YEAR + 1)
        if field is _F.YEAR:
            return ValueRange.of(_MIN_YEAR, _MAX_YEAR)
        if field is _F.EPOCH_DAY:
            return ValueRange.of(_MIN_EPOCH_DAY, _MAX_EPOCH_DAY)
        return field.range()

    def _to_epoch_day(self, proleptic_year: int, month: int, day: int) -> int:
        return _to_epoch_day(proleptic_year, month, day)

    def _from_epoch_day(self, epoch_day: int) -> tuple[int, int, int]:
        return _from_epoch_day(epoch_day)


JulianChronology.INSTANCE = JulianChronology()


__all__ = ["JulianChronology"]
