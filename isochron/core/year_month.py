"""YearMonth class: a month in a particular year, such as 2024-02."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron._internal.arith import trunc_div
from isochron._internal.calendar import days_in_month, is_leap_year
from isochron._internal.constants import MAX_YEAR
from isochron.errors import UnsupportedFieldError
from isochron.format.iso8601 import format_year, parse_year_month
from isochron.temporal.base import Temporal
from isochron.temporal.field import ChronoField
from isochron.temporal.unit import ChronoUnit
from isochron.temporal.value_range import ValueRange
from isochron.units.month import Month

if TYPE_CHECKING:
    from isochron.core.clock import Clock
    from isochron.core.local_date import LocalDate
    from isochron.temporal.base import TemporalUnit

_F = ChronoField
_U = ChronoUnit


class YearMonth(Temporal):
    """A year and month in the ISO calendar, with no day.

    Examples:
        >>> ym = YearMonth(2024, 2)
        >>> ym.length_of_month()
        29
        >>> str(ym.plus_months(11))
        '2025-01'
    """

    __slots__ = ("_year", "_month")

    _FIELDS = frozenset(
        {_F.MONTH_OF_YEAR, _F.PROLEPTIC_MONTH, _F.YEAR_OF_ERA, _F.YEAR, _F.ERA}
    )
    _UNITS = frozenset(
        {_U.MONTHS, _U.YEARS, _U.DECADES, _U.CENTURIES, _U.MILLENNIA, _U.ERAS}
    )

    def __init__(self, year: int, month: int | Month) -> None:
        if isinstance(month, Month):
            month = month.value
        _F.YEAR.check_valid_value(year)
        _F.MONTH_OF_YEAR.check_valid_value(month)
        self._year = year
        self._month = month

    @classmethod
    def of(cls, year: int, month: int | Month) -> YearMonth:
        return cls(year, month)

    @classmethod
    def now(cls, clock: Clock | None = None) -> YearMonth:
        from isochron.core.local_date import LocalDate

        today = LocalDate.now(clock)
        return cls(today.year, today.month)

    @classmethod
    def from_temporal(cls, temporal: Any) -> YearMonth:
        if isinstance(temporal, YearMonth):
            return temporal
        return cls(temporal.get(_F.YEAR), temporal.get(_F.MONTH_OF_YEAR))

    @classmethod
    def from_iso_format(cls, text: str) -> YearMonth:
        """Parse uuuu-MM, such as 2024-02.

        Raises:
            ParseError: If the text is not a valid year-month.
        """
        return cls(*parse_year_month(text))

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def month_of_year(self) -> Month:
        return Month(self._month)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def is_valid_day(self, day_of_month: int) -> bool:
        return 1 <= day_of_month <= self.length_of_month()

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month)

    def length_of_year(self) -> int:
        return 366 if self.is_leap_year else 365

    @property
    def _proleptic_month(self) -> int:
        return self._year * 12 + self._month - 1

    def _range_of(self, field: ChronoField) -> ValueRange:
        if field is _F.YEAR_OF_ERA:
            return ValueRange.of(1, MAX_YEAR + 1 if self._year <= 0 else MAX_YEAR)
        return field.range()

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.MONTH_OF_YEAR:
            return self._month
        if field is _F.PROLEPTIC_MONTH:
            return self._proleptic_month
        if field is _F.YEAR_OF_ERA:
            return self._year if self._year >= 1 else 1 - self._year
        if field is _F.YEAR:
            return self._year
        return 1 if self._year >= 1 else 0

    def _with_field(self, field: ChronoField, value: int) -> YearMonth:
        field.check_valid_value(value)
        if field is _F.MONTH_OF_YEAR:
            return self.with_month(value)
        if field is _F.PROLEPTIC_MONTH:
            return self.plus_months(value - self._proleptic_month)
        if field is _F.YEAR_OF_ERA:
            return self.with_year(value if self._year >= 1 else 1 - value)
        if field is _F.YEAR:
            return self.with_year(value)
        return self if self._get_field(_F.ERA) == value else self.with_year(1 - self._year)

    def _with(self, year: int, month: int) -> YearMonth:
        if year == self._year and month == self._month:
            return self
        return YearMonth(year, month)

    def with_year(self, year: int) -> YearMonth:
        return self._with(year, self._month)

    def with_month(self, month: int) -> YearMonth:
        return self._with(self._year, month)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> YearMonth:
        if unit is _U.MONTHS:
            return self.plus_months(amount)
        if unit is _U.YEARS:
            return self.plus_years(amount)
        if unit is _U.DECADES:
            return self.plus_years(amount * 10)
        if unit is _U.CENTURIES:
            return self.plus_years(amount * 100)
        if unit is _U.MILLENNIA:
            return self.plus_years(amount * 1_000)
        return self.with_field(_F.ERA, self.get(_F.ERA) + amount)

    def plus_years(self, years: int) -> YearMonth:
        if years == 0:
            return self
        return self._with(self._year + years, self._month)

    def plus_months(self, months: int) -> YearMonth:
        """Return a copy with months added, rolling the year as needed.

        Raises:
            FieldOutOfRangeError: If the year leaves the supported range.
        """
        if months == 0:
            return self
        year, month0 = divmod(self._proleptic_month + months, 12)
        return self._with(year, month0 + 1)

    def minus_years(self, years: int) -> YearMonth:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> YearMonth:
        return self.plus_months(-months)

    def until(self, end: Any, unit: TemporalUnit) -> int:
        """Return the number of whole units between this year-month and end."""
        end = YearMonth.from_temporal(end)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        months = end._proleptic_month - self._proleptic_month
        if unit is _U.MONTHS:
            return months
        if unit is _U.YEARS:
            return trunc_div(months, 12)
        if unit is _U.DECADES:
            return trunc_div(months, 120)
        if unit is _U.CENTURIES:
            return trunc_div(months, 1_200)
        if unit is _U.MILLENNIA:
            return trunc_div(months, 12_000)
        if unit is _U.ERAS:
            return end.get(_F.ERA) - self.get(_F.ERA)
        raise UnsupportedFieldError(f"Unsupported unit: {unit}")

    def at_day(self, day_of_month: int) -> LocalDate:
        """Combine with a day-of-month to form a date.

        Raises:
            InvalidDateError: If the day does not exist in this month.
        """
        from isochron.core.local_date import LocalDate

        return LocalDate(self._year, self._month, day_of_month)

    def at_end_of_month(self) -> LocalDate:
        from isochron.core.local_date import LocalDate

        return LocalDate(self._year, self._month, self.length_of_month())

    def to_iso_format(self) -> str:
        return f"{format_year(self._year)}-{self._month:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._proleptic_month == other._proleptic_month

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._proleptic_month < other._proleptic_month

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._proleptic_month <= other._proleptic_month

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._proleptic_month > other._proleptic_month

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._proleptic_month >= other._proleptic_month

    def __hash__(self) -> int:
        return hash((self._year, self._month))

    def __repr__(self) -> str:
        return f"YearMonth({self._year}, {self._month})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["YearMonth"]
