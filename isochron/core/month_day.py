"""MonthDay class: a recurring day of the year, such as --12-03."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron._internal.calendar import is_leap_year
from isochron.errors import InvalidDateError
from isochron.format.iso8601 import parse_month_day
from isochron.temporal.base import TemporalAccessor
from isochron.temporal.field import ChronoField
from isochron.temporal.value_range import ValueRange
from isochron.units.month import Month

if TYPE_CHECKING:
    from isochron.core.clock import Clock
    from isochron.core.local_date import LocalDate

_F = ChronoField


class MonthDay(TemporalAccessor):
    """A month and day-of-month without a year, such as a birthday.

    February 29 is a valid MonthDay; combining it with a common year
    yields February 28.

    Examples:
        >>> MonthDay(2, 29).is_valid_year(2023)
        False
        >>> MonthDay(2, 29).at_year(2023)
        LocalDate(2023, 2, 28)
        >>> str(MonthDay(12, 3))
        '--12-03'
    """

    __slots__ = ("_month", "_day")

    _FIELDS = frozenset({_F.MONTH_OF_YEAR, _F.DAY_OF_MONTH})

    def __init__(self, month: int | Month, day: int) -> None:
        if isinstance(month, Month):
            month = month.value
        _F.MONTH_OF_YEAR.check_valid_value(month)
        _F.DAY_OF_MONTH.check_valid_value(day)
        if day > Month(month).max_length():
            raise InvalidDateError(
                f"Illegal value for DayOfMonth field, value {day} is not valid "
                f"for month {Month(month).name}"
            )
        self._month = month
        self._day = day

    @classmethod
    def of(cls, month: int | Month, day: int) -> MonthDay:
        return cls(month, day)

    @classmethod
    def now(cls, clock: Clock | None = None) -> MonthDay:
        from isochron.core.local_date import LocalDate

        today = LocalDate.now(clock)
        return cls(today.month, today.day)

    @classmethod
    def from_temporal(cls, temporal: Any) -> MonthDay:
        if isinstance(temporal, MonthDay):
            return temporal
        return cls(temporal.get(_F.MONTH_OF_YEAR), temporal.get(_F.DAY_OF_MONTH))

    @classmethod
    def from_iso_format(cls, text: str) -> MonthDay:
        """Parse --MM-dd, such as --12-03.

        Raises:
            ParseError: If the text is not a valid month-day.
            InvalidDateError: If the day does not exist in any year.
        """
        return cls(*parse_month_day(text))

    @property
    def month(self) -> int:
        return self._month

    @property
    def month_of_year(self) -> Month:
        return Month(self._month)

    @property
    def day(self) -> int:
        return self._day

    def is_valid_year(self, year: int) -> bool:
        return not (self._day == 29 and self._month == 2 and not is_leap_year(year))

    def _range_of(self, field: ChronoField) -> ValueRange:
        if field is _F.DAY_OF_MONTH:
            month = Month(self._month)
            return ValueRange.of(1, month.min_length(), month.max_length())
        return field.range()

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.MONTH_OF_YEAR:
            return self._month
        return self._day

    def with_month(self, month: int) -> MonthDay:
        """Return a copy with the month changed, clamping the day if needed."""
        _F.MONTH_OF_YEAR.check_valid_value(month)
        return MonthDay(month, min(self._day, Month(month).max_length()))

    def with_day_of_month(self, day: int) -> MonthDay:
        if day == self._day:
            return self
        return MonthDay(self._month, day)

    def at_year(self, year: int) -> LocalDate:
        """Combine with a year; February 29 becomes the 28th in a common year."""
        from isochron.core.local_date import LocalDate

        day = self._day if self.is_valid_year(year) else 28
        return LocalDate(year, self._month, day)

    def to_iso_format(self) -> str:
        return f"--{self._month:02d}-{self._day:02d}"

    def _key(self) -> tuple[int, int]:
        return (self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"MonthDay({self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["MonthDay"]
