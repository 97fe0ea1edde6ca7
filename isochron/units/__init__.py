"""Calendar enumerations.

This module provides:
    - Month: month-of-year enum with wrap-around arithmetic
    - DayOfWeek: ISO day-of-week enum
    - IsoEra, MinguoEra, ThaiBuddhistEra: eras per calendar system
"""

from __future__ import annotations

from isochron.units.day_of_week import DayOfWeek
from isochron.units.era import IsoEra, MinguoEra, ThaiBuddhistEra
from isochron.units.month import Month

__all__: list[str] = [
    "DayOfWeek",
    "IsoEra",
    "MinguoEra",
    "Month",
    "ThaiBuddhistEra",
]
