"""Isochron: immutable dates, times, zones and calendar systems.

Isochron models time the way the ISO 8601 calendar and the tz database
describe it: exact instants, local dates and times without a zone,
fixed offsets, zone rules with daylight-saving transitions, and
alternative calendar systems sharing the ISO day count.

Core Types:
    Instant: A point on the UTC time-line with nanosecond precision
    LocalDate, LocalTime, LocalDateTime: Values without a zone
    OffsetTime, OffsetDateTime: Local values with a fixed offset
    ZonedDateTime: A local date-time resolved against zone rules
    Year, YearMonth, MonthDay: Partial dates
    Duration: Exact amount of seconds and nanoseconds
    Period: Calendar amount of years, months and days
    Clock: Source of the current instant and zone

Zones:
    ZoneId, ZoneOffset: Zone identifiers
    ZoneRules: Offset history of a zone
    GapPolicy, OverlapPolicy: How ambiguous local times resolve

Calendars:
    Chronology, ChronoDate: Calendar systems and their dates

Fields and Units:
    ChronoField, ChronoUnit, IsoFields, JulianFields, ValueRange

Exceptions:
    IsochronError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    OverflowError: Arithmetic overflow
    ZoneRulesError: Unknown zone or malformed zone data

Example:
    >>> from isochron import LocalDateTime, ZoneId, ZonedDateTime
    >>> paris = ZoneId.of("Europe/Paris")
    >>> zdt = ZonedDateTime.of_local(LocalDateTime(2024, 3, 31, 2, 30), paris)
    >>> str(zdt)
    '2024-03-31T03:30+02:00[Europe/Paris]'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from isochron.core import (
    Clock,
    Duration,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    MonthDay,
    OffsetDateTime,
    OffsetTime,
    Period,
    Year,
    YearMonth,
    ZonedDateTime,
)

# Units
from isochron.units import DayOfWeek, IsoEra, MinguoEra, Month, ThaiBuddhistEra

# Fields
from isochron.temporal import (
    ChronoField,
    ChronoUnit,
    IsoFields,
    JulianFields,
    ResolverStyle,
    ValueRange,
    resolve_fields,
)

# Zones
from isochron.zone import (
    GapPolicy,
    OverlapPolicy,
    ZoneId,
    ZoneOffset,
    ZoneOffsetTransition,
    ZoneRules,
)

# Calendars
from isochron.chrono import (
    ChronoDate,
    Chronology,
    IsoChronology,
    JulianChronology,
    MinguoChronology,
    ThaiBuddhistChronology,
)

# Exceptions
from isochron.errors import (
    FieldOutOfRangeError,
    InvalidDateError,
    IsochronError,
    OverflowError,
    ParseError,
    UnresolvedLocalTimeError,
    UnsupportedFieldError,
    ValidationError,
    ZoneRulesError,
)

# Format functions
from isochron.format import format_iso8601, parse_iso8601

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Clock",
    "Duration",
    "Instant",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "MonthDay",
    "OffsetDateTime",
    "OffsetTime",
    "Period",
    "Year",
    "YearMonth",
    "ZonedDateTime",
    # Units
    "DayOfWeek",
    "IsoEra",
    "MinguoEra",
    "Month",
    "ThaiBuddhistEra",
    # Fields
    "ChronoField",
    "ChronoUnit",
    "IsoFields",
    "JulianFields",
    "ResolverStyle",
    "ValueRange",
    "resolve_fields",
    # Zones
    "GapPolicy",
    "OverlapPolicy",
    "ZoneId",
    "ZoneOffset",
    "ZoneOffsetTransition",
    "ZoneRules",
    # Calendars
    "ChronoDate",
    "Chronology",
    "IsoChronology",
    "JulianChronology",
    "MinguoChronology",
    "ThaiBuddhistChronology",
    # Exceptions
    "IsochronError",
    "ValidationError",
    "FieldOutOfRangeError",
    "InvalidDateError",
    "ParseError",
    "OverflowError",
    "UnsupportedFieldError",
    "ZoneRulesError",
    "UnresolvedLocalTimeError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
