"""Calendar systems.

Classes:
    Chronology: Abstract calendar system; ``Chronology.of`` looks one up.
    IsoChronology: The ISO calendar; its dates are LocalDate.
    MinguoChronology, ThaiBuddhistChronology: ISO with renumbered years.
    JulianChronology: The proleptic Julian calendar.
    ChronoDate: A date in a non-ISO chronology.
"""

from __future__ import annotations

from isochron.chrono.chronology import Chronology, YearOffsetChronology
from isochron.chrono.chrono_date import ChronoDate
from isochron.chrono.iso import IsoChronology
from isochron.chrono.julian import JulianChronology
from isochron.chrono.minguo import MinguoChronology
from isochron.chrono.thai_buddhist import ThaiBuddhistChronology

__all__: list[str] = [
    "Chronology",
    "YearOffsetChronology",
    "ChronoDate",
    "IsoChronology",
    "JulianChronology",
    "MinguoChronology",
    "ThaiBuddhistChronology",
]
