"""Internal constants for Isochron.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

MICROS_PER_DAY: int = NANOS_PER_DAY // NANOS_PER_MICROSECOND
MILLIS_PER_DAY: int = NANOS_PER_DAY // NANOS_PER_MILLISECOND

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
MINUTES_PER_HOUR: int = 60
MINUTES_PER_DAY: int = 24 * MINUTES_PER_HOUR
HOURS_PER_DAY: int = 24

# Proleptic ISO year limits
MIN_YEAR: int = -999_999_999
MAX_YEAR: int = 999_999_999

# Epoch-day bounds: -999999999-01-01 and +999999999-12-31
MIN_EPOCH_DAY: int = -365_243_219_162
MAX_EPOCH_DAY: int = 365_241_780_471

# Instant bounds in epoch seconds
MIN_INSTANT_SECOND: int = -31_557_014_167_219_200
MAX_INSTANT_SECOND: int = 31_556_889_864_403_199

# Signed 64-bit range, used for Duration seconds and INSTANT_SECONDS
MIN_LONG: int = -(2**63)
MAX_LONG: int = 2**63 - 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days from 0000-03-01 to 1970-01-01
DAYS_0000_TO_1970: int = 719_468

# Day-count offsets for the Julian fields
JULIAN_DAY_OFFSET: int = 2_440_588
MODIFIED_JULIAN_DAY_OFFSET: int = 40_587
RATA_DIE_OFFSET: int = 719_163

# Offset limits (in seconds)
MAX_OFFSET_SECONDS: int = 18 * SECONDS_PER_HOUR


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "MICROS_PER_DAY",
    "MILLIS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MINUTES_PER_HOUR",
    "MINUTES_PER_DAY",
    "HOURS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_EPOCH_DAY",
    "MAX_EPOCH_DAY",
    "MIN_INSTANT_SECOND",
    "MAX_INSTANT_SECOND",
    "MIN_LONG",
    "MAX_LONG",
    "DAYS_IN_MONTH",
    "DAYS_0000_TO_1970",
    "JULIAN_DAY_OFFSET",
    "MODIFIED_JULIAN_DAY_OFFSET",
    "RATA_DIE_OFFSET",
    "MAX_OFFSET_SECONDS",
]
