"""The ISO-8601 calendar system, whose dates are LocalDate."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron._internal.calendar import (
    days_in_month,
    epoch_day_to_ymd,
    is_leap_year,
    ymd_to_epoch_day,
)
from isochron.chrono.chronology import Chronology
from isochron.temporal.field import ChronoField
from isochron.temporal.value_range import ValueRange
from isochron.units.era import IsoEra

if TYPE_CHECKING:
    from isochron.core.local_date import LocalDate


class IsoChronology(Chronology):
    """The proleptic Gregorian calendar.

    Dates created through this chronology are plain LocalDate values.

    Examples:
        >>> IsoChronology.INSTANCE.date(2024, 2, 29)
        LocalDate(2024, 2, 29)
        >>> IsoChronology.INSTANCE.is_leap_year(1900)
        False
    """

    __slots__ = ()

    _ERA_TYPE = IsoEra

    INSTANCE: IsoChronology

    @property
    def id(self) -> str:
        return "ISO"

    @property
    def calendar_type(self) -> str:
        return "iso8601"

    def is_leap_year(self, proleptic_year: int) -> bool:
        return is_leap_year(proleptic_year)

    def length_of_month(self, proleptic_year: int, month: int) -> int:
        return days_in_month(proleptic_year, month)

    def range(self, field: ChronoField) -> ValueRange:
        return field.range()

    def _to_epoch_day(self, proleptic_year: int, month: int, day: int) -> int:
        return ymd_to_epoch_day(proleptic_year, month, day)

    def _from_epoch_day(self, epoch_day: int) -> tuple[int, int, int]:
        return epoch_day_to_ymd(epoch_day)

    def _create(self, proleptic_year: int, month: int, day: int) -> LocalDate:
        from isochron.core.local_date import LocalDate

        return LocalDate._from_epoch_day(ymd_to_epoch_day(proleptic_year, month, day))

    def date_from(self, temporal: Any) -> LocalDate:
        from isochron.core.local_date import LocalDate

        return LocalDate.from_temporal(temporal)


IsoChronology.INSTANCE = IsoChronology()


__all__ = ["IsoChronology"]
