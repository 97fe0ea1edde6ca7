"""Validation utilities for Isochron.

This module provides helpers for ensuring raw field values are within
valid ranges before a temporal value is built from them.

This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.calendar import days_in_month, is_leap_year
from isochron._internal.constants import MAX_YEAR, MIN_YEAR
from isochron.errors import FieldOutOfRangeError, InvalidDateError

_MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def validate_range(
    name: str, value: int, low: int, high: int, field: object = None
) -> int:
    """Validate that value lies in [low, high].

    Args:
        name: Name used in the error message.
        value: The value to check.
        low: Inclusive minimum.
        high: Inclusive maximum.
        field: Optional field object attached to the error.

    Returns:
        The value, unchanged.

    Raises:
        FieldOutOfRangeError: If the value is out of range.

    Examples:
        >>> validate_range("month", 13, 1, 12)
        Traceback (most recent call last):
        ...
        FieldOutOfRangeError: month must be between 1 and 12, got 13
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < low or value > high:
        raise FieldOutOfRangeError(
            f"{name} must be between {low} and {high}, got {value}", field, value
        )
    return value


def validate_year(year: int) -> int:
    """Validate a proleptic ISO year."""
    return validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> int:
    """Validate a month-of-year (1-12)."""
    return validate_range("month", month, 1, 12)


def validate_date(year: int, month: int, day: int) -> None:
    """Validate a complete ISO date.

    Each field is checked against its own range first; a day that is
    valid in general but not in the given month is reported as an
    InvalidDateError.

    Raises:
        FieldOutOfRangeError: If a single field is out of range.
        InvalidDateError: If the combination does not exist.

    Examples:
        >>> validate_date(2023, 2, 29)
        Traceback (most recent call last):
        ...
        InvalidDateError: Invalid date 'February 29' as '2023' is not a leap year
    """
    validate_year(year)
    validate_month(month)
    validate_range("day", day, 1, 31)
    if day > 28 and day > days_in_month(year, month):
        if day == 29:
            raise InvalidDateError(
                f"Invalid date 'February 29' as '{year}' is not a leap year"
            )
        raise InvalidDateError(f"Invalid date '{_MONTH_NAMES[month]} {day}'")


def validate_leap_day(year: int, day_of_year: int) -> None:
    """Validate a day-of-year against the length of the year."""
    validate_range("day_of_year", day_of_year, 1, 366)
    if day_of_year == 366 and not is_leap_year(year):
        raise InvalidDateError(
            f"Invalid date 'DayOfYear 366' as '{year}' is not a leap year"
        )


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_date",
    "validate_leap_day",
]
