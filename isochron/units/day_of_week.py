"""Day-of-week enumeration."""

from __future__ import annotations

from enum import Enum

from isochron._internal.validation import validate_range


class DayOfWeek(Enum):
    """A day-of-week following ISO-8601, MONDAY=1 to SUNDAY=7.

    Examples:
        >>> DayOfWeek.SUNDAY.plus(1)
        <DayOfWeek.MONDAY: 1>
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, day_of_week: int) -> DayOfWeek:
        """Return the day for a value from 1 (Monday) to 7 (Sunday).

        Raises:
            FieldOutOfRangeError: If the value is not in 1-7.
        """
        validate_range("day_of_week", day_of_week, 1, 7)
        return cls(day_of_week)

    @property
    def display_name(self) -> str:
        """Return the day name in title case, e.g. 'Monday'."""
        return self.name.title()

    def plus(self, days: int) -> DayOfWeek:
        """Return the day that is the given number of days later."""
        return DayOfWeek((self.value - 1 + days) % 7 + 1)

    def minus(self, days: int) -> DayOfWeek:
        """Return the day that is the given number of days earlier."""
        return self.plus(-(days % 7))


__all__ = ["DayOfWeek"]
