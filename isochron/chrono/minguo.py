"""The Minguo calendar, used in the Republic of China (Taiwan)."""

from __future__ import annotations

from isochron.chrono.chronology import YearOffsetChronology
from isochron.units.era import MinguoEra


class MinguoChronology(YearOffsetChronology):
    """ISO calendar rules with years counted from 1912.

    Minguo year 1 is ISO year 1912; the year before is 1 BEFORE_ROC.

    Examples:
        >>> MinguoChronology.INSTANCE.date(113, 1, 15).to_local_date()
        LocalDate(2024, 1, 15)
    """

    __slots__ = ()

    _ERA_TYPE = MinguoEra
    _YEAR_OFFSET = 1911

    INSTANCE: MinguoChronology

    @property
    def id(self) -> str:
        return "Minguo"

    @property
    def calendar_type(self) -> str:
        return "roc"


MinguoChronology.INSTANCE = MinguoChronology()


__all__ = ["MinguoChronology"]
