"""Year class: a year in the ISO calendar, such as 2024."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron._internal.arith import trunc_div
from isochron._internal.calendar import is_leap_year
from isochron._internal.constants import MAX_YEAR, MIN_YEAR
from isochron.errors import UnsupportedFieldError
from isochron.format.iso8601 import format_year, parse_year
from isochron.temporal.base import Temporal
from isochron.temporal.field import ChronoField
from isochron.temporal.unit import ChronoUnit
from isochron.temporal.value_range import ValueRange

if TYPE_CHECKING:
    from isochron.core.clock import Clock
    from isochron.core.local_date import LocalDate
    from isochron.core.month_day import MonthDay
    from isochron.core.year_month import YearMonth
    from isochron.temporal.base import TemporalUnit

_F = ChronoField
_U = ChronoUnit

_YEAR_FIELDS = frozenset({_F.YEAR_OF_ERA, _F.YEAR, _F.ERA})
_YEAR_UNITS = frozenset({_U.YEARS, _U.DECADES, _U.CENTURIES, _U.MILLENNIA, _U.ERAS})


class Year(Temporal):
    """A year in the proleptic ISO calendar.

    Year 0 is 1 BCE. The text form always has at least four digits so
    that it can be parsed back.

    Examples:
        >>> Year(2024).is_leap
        True
        >>> Year(2024).length()
        366
        >>> Year(2023).at_day(60)
        LocalDate(2023, 3, 1)
    """

    __slots__ = ("_year",)

    _FIELDS = _YEAR_FIELDS
    _UNITS = _YEAR_UNITS

    MIN_VALUE = MIN_YEAR
    MAX_VALUE = MAX_YEAR

    def __init__(self, year: int) -> None:
        _F.YEAR.check_valid_value(year)
        self._year = year

    @classmethod
    def of(cls, year: int) -> Year:
        return cls(year)

    @classmethod
    def now(cls, clock: Clock | None = None) -> Year:
        from isochron.core.local_date import LocalDate

        return cls(LocalDate.now(clock).year)

    @classmethod
    def from_temporal(cls, temporal: Any) -> Year:
        if isinstance(temporal, Year):
            return temporal
        return cls(temporal.get(_F.YEAR))

    @classmethod
    def from_iso_format(cls, text: str) -> Year:
        """Parse a year such as 2024, -0044 or +12345.

        Raises:
            ParseError: If the text is not a valid year.
        """
        return cls(parse_year(text))

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Return True if the proleptic year is a leap year."""
        return is_leap_year(year)

    @property
    def value(self) -> int:
        return self._year

    @property
    def is_leap(self) -> bool:
        return is_leap_year(self._year)

    def length(self) -> int:
        return 366 if self.is_leap else 365

    def is_valid_month_day(self, month_day: MonthDay | None) -> bool:
        """Return True if the month-day exists in this year."""
        return month_day is not None and month_day.is_valid_year(self._year)

    def _range_of(self, field: ChronoField) -> ValueRange:
        if field is _F.YEAR_OF_ERA:
            if self._year <= 0:
                return ValueRange.of(1, MAX_YEAR + 1)
            return ValueRange.of(1, MAX_YEAR)
        return field.range()

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        if field is _F.ERA:
            return 1 if self._year >= 1 else 0
        return self._year

    def _with_field(self, field: ChronoField, value: int) -> Year:
        field.check_valid_value(value)
        if field is _F.YEAR_OF_ERA:
            return Year(value if self._year >= 1 else 1 - value)
        if field is _F.ERA:
            return self if self.get(_F.ERA) == value else Year(1 - self._year)
        return Year(value)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> Year:
        if unit is _U.YEARS:
            return self.plus_years(amount)
        if unit is _U.DECADES:
            return self.plus_years(amount * 10)
        if unit is _U.CENTURIES:
            return self.plus_years(amount * 100)
        if unit is _U.MILLENNIA:
            return self.plus_years(amount * 1_000)
        return self.with_field(_F.ERA, self.get(_F.ERA) + amount)

    def plus_years(self, years: int) -> Year:
        """Return a copy with years added.

        Raises:
            FieldOutOfRangeError: If the result is outside the supported range.
        """
        if years == 0:
            return self
        return Year(self._year + years)

    def minus_years(self, years: int) -> Year:
        return self.plus_years(-years)

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """Return the number of whole units between this year and end."""
        end = Year.from_temporal(end)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        years = end._year - self._year
        if unit is _U.YEARS:
            return years
        if unit is _U.DECADES:
            return trunc_div(years, 10)
        if unit is _U.CENTURIES:
            return trunc_div(years, 100)
        if unit is _U.MILLENNIA:
            return trunc_div(years, 1_000)
        if unit is _U.ERAS:
            return end.get(_F.ERA) - self.get(_F.ERA)
        raise UnsupportedFieldError(f"Unsupported unit: {unit}")

    def at_day(self, day_of_year: int) -> LocalDate:
        """Combine with a day-of-year to form a date.

        Raises:
            InvalidDateError: If day 366 is requested in a common year.
        """
        from isochron.core.local_date import LocalDate

        return LocalDate.of_year_day(self._year, day_of_year)

    def at_month(self, month: int) -> YearMonth:
        from isochron.core.year_month import YearMonth

        return YearMonth(self._year, month)

    def at_month_day(self, month_day: MonthDay) -> LocalDate:
        """Combine with a month-day; February 29 becomes the 28th in a common year."""
        return month_day.at_year(self._year)

    def to_iso_format(self) -> str:
        return format_year(self._year)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._year == other._year

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._year < other._year

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._year <= other._year

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._year > other._year

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._year >= other._year

    def __hash__(self) -> int:
        return hash(self._year)

    def __repr__(self) -> str:
        return f"Year({self._year})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Year"]
