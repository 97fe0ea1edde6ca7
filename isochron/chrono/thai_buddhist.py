"""The Thai Buddhist calendar."""

from __future__ import annotations

from isochron.chrono.chronology import YearOffsetChronology
from isochron.units.era import ThaiBuddhistEra


class ThaiBuddhistChronology(YearOffsetChronology):
    """ISO calendar rules with years counted in the Buddhist era.

    Buddhist year 2567 is ISO year 2024.
    """

    __slots__ = ()

    _ERA_TYPE = ThaiBuddhistEra
    _YEAR_OFFSET = -543

    INSTANCE: ThaiBuddhistChronology

    @property
    def id(self) -> str:
        return "ThaiBuddhist"

    @property
    def calendar_type(self) -> str:
        return "buddhist"


ThaiBuddhistChronology.INSTANCE = ThaiBuddhistChronology()


__all__ = ["ThaiBuddhistChronology"]
