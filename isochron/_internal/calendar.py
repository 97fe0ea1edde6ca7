"""Calendar utilities for Isochron.

This module provides internal functions for proleptic Gregorian
calendar calculations based on the epoch-day count, where
epoch-day 0 = 1970-01-01.

The conversions use a 400-year era starting on March 1st so that the
leap day is the last day of each computational year. All divisions
are floor divisions, which keeps the formulas valid for negative
years.

This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.constants import DAYS_0000_TO_1970, DAYS_IN_MONTH

# Days in a 400 year Gregorian cycle
DAYS_PER_CYCLE: int = 146_097


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return the number of days in a year (365 or 366)."""
    return 366 if is_leap_year(year) else 365


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of month."""
    days = sum(DAYS_IN_MONTH[1:month])
    if month > 2 and is_leap_year(year):
        days += 1
    return days


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert a year, month and day to an epoch-day count.

    Args:
        year: The proleptic year.
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Days since 1970-01-01.

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(2024, 1, 15)
        19737
        >>> ymd_to_epoch_day(1969, 12, 31)
        -1
    """
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    month_index = (month + 9) % 12
    day_of_year = (153 * month_index + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * DAYS_PER_CYCLE + day_of_era - DAYS_0000_TO_1970


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert an epoch-day count to (year, month, day).

    Args:
        epoch_day: Days since 1970-01-01.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> epoch_day_to_ymd(0)
        (1970, 1, 1)
        >>> epoch_day_to_ymd(19737)
        (2024, 1, 15)
    """
    z = epoch_day + DAYS_0000_TO_1970
    era = z // DAYS_PER_CYCLE
    day_of_era = z - era * DAYS_PER_CYCLE
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    year = year_of_era + era * 400
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    month_index = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * month_index + 2) // 5 + 1
    month = month_index + 3 if month_index < 10 else month_index - 9
    if month <= 2:
        year += 1
    return year, month, day


def epoch_day_to_day_of_week(epoch_day: int) -> int:
    """Return the ISO day of week for an epoch-day (1=Monday, 7=Sunday).

    1970-01-01 was a Thursday.

    Examples:
        >>> epoch_day_to_day_of_week(0)
        4
    """
    return (epoch_day + 3) % 7 + 1


__all__ = [
    "DAYS_PER_CYCLE",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_day_of_week",
]
