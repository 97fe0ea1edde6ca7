"""Month-of-year enumeration."""

from __future__ import annotations

from enum import Enum

from isochron._internal.constants import DAYS_IN_MONTH
from isochron._internal.validation import validate_range


class Month(Enum):
    """A month-of-year in the ISO calendar, JANUARY=1 to DECEMBER=12.

    Months wrap around when adding or subtracting, so DECEMBER plus one
    month is JANUARY.

    Examples:
        >>> Month.JANUARY.plus(13)
        <Month.FEBRUARY: 2>
        >>> Month.FEBRUARY.length(leap_year=True)
        29
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        """Return the month for a value from 1 to 12.

        Raises:
            FieldOutOfRangeError: If month is not in 1-12.
        """
        validate_range("month", month, 1, 12)
        return cls(month)

    @property
    def display_name(self) -> str:
        """Return the month name in title case, e.g. 'January'."""
        return self.name.title()

    def plus(self, months: int) -> Month:
        """Return the month that is the given number of months later."""
        return Month((self.value - 1 + months) % 12 + 1)

    def minus(self, months: int) -> Month:
        """Return the month that is the given number of months earlier."""
        return self.plus(-(months % 12))

    def length(self, leap_year: bool) -> int:
        """Return the length of this month in days."""
        if self is Month.FEBRUARY:
            return 29 if leap_year else 28
        return DAYS_IN_MONTH[self.value]

    def min_length(self) -> int:
        return self.length(False)

    def max_length(self) -> int:
        return self.length(True)

    def first_day_of_year(self, leap_year: bool) -> int:
        """Return the day-of-year of the first day of this month."""
        leap = 1 if leap_year and self.value > 2 else 0
        return sum(DAYS_IN_MONTH[1 : self.value]) + 1 + leap

    def first_month_of_quarter(self) -> Month:
        """Return the first month of the quarter containing this month."""
        return Month(((self.value - 1) // 3) * 3 + 1)


__all__ = ["Month"]
