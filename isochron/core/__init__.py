"""Core temporal types.

This module provides the fundamental temporal types:
    - Instant: A point on the UTC time-line with nanosecond precision
    - LocalDate: Calendar date in the proleptic ISO calendar
    - LocalTime: Time of day with nanosecond precision
    - LocalDateTime: Date and time without an offset or zone
    - OffsetTime, OffsetDateTime: Local values with a fixed UTC offset
    - ZonedDateTime: Date and time in a time-zone with resolved offset
    - Year, YearMonth, MonthDay: Partial dates
    - Duration: Exact time-based amount
    - Period: Calendar-based amount (years, months, days)
    - Clock: Source of the current instant
"""

from __future__ import annotations

from isochron.core.duration import Duration
from isochron.core.period import Period
from isochron.core.local_time import LocalTime
from isochron.core.local_date import LocalDate
from isochron.core.local_date_time import LocalDateTime
from isochron.core.instant import Instant
from isochron.core.offset_time import OffsetTime
from isochron.core.offset_date_time import OffsetDateTime
from isochron.core.zoned_date_time import ZonedDateTime
from isochron.core.year import Year
from isochron.core.year_month import YearMonth
from isochron.core.month_day import MonthDay
from isochron.core.clock import Clock

__all__: list[str] = [
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
]
