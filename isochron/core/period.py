"""Period class representing calendar-based amounts.

This module provides the Period class for representing calendar
amounts that vary by context (months, years) as opposed to exact time
spans (Duration).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from isochron._internal.arith import trunc_div, trunc_mod
from isochron.errors import ParseError, UnsupportedFieldError
from isochron.temporal.base import TemporalAmount
from isochron.temporal.unit import ChronoUnit

if TYPE_CHECKING:
    from isochron.core.local_date import LocalDate
    from isochron.temporal.base import TemporalUnit

_PATTERN = re.compile(
    r"([-+]?)P(?:([-+]?[0-9]+)Y)?(?:([-+]?[0-9]+)M)?(?:([-+]?[0-9]+)W)?(?:([-+]?[0-9]+)D)?",
    re.IGNORECASE | re.ASCII,
)


class Period(TemporalAmount):
    """A date-based amount of time in years, months and days.

    Unlike Duration (which is exact), Period represents calendar
    concepts like "1 month" that vary by context. Adding 1 month to
    Jan 31 yields Feb 28/29, not exactly 30 or 31 days.

    The components are stored as-is without normalization. For example,
    Period(months=14) remains 14 months rather than being converted to
    1 year and 2 months. Use normalized() if you want normalized form.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).

    Examples:
        >>> p = Period(years=1, months=2)
        >>> p.years
        1
        >>> str(p)
        'P1Y2M'

        >>> from isochron.core.local_date import LocalDate
        >>> LocalDate(2024, 1, 31) + Period.of_months(1)  # Clamps to Feb 29
        LocalDate(2024, 2, 29)
    """

    __slots__ = ("_years", "_months", "_days")

    ZERO: Period

    def __init__(self, years: int = 0, months: int = 0, days: int = 0) -> None:
        """Create a Period from component parts.

        All parameters can be positive, negative, or zero.

        Examples:
            >>> Period(years=1, months=6)
            Period(years=1, months=6, days=0)
        """
        for name, value in (("years", years), ("months", months), ("days", days)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        self._years = years
        self._months = months
        self._days = days

    @classmethod
    def of(cls, years: int, months: int, days: int) -> Period:
        return cls(years, months, days)

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        """Create a Period of weeks, stored as seven days per week.

        Examples:
            >>> Period.of_weeks(2)
            Period(years=0, months=0, days=14)
        """
        return cls(days=weeks * 7)

    @classmethod
    def of_days(cls, days: int) -> Period:
        return cls(days=days)

    @classmethod
    def between(cls, start_inclusive: LocalDate, end_exclusive: LocalDate) -> Period:
        """Return the Period between two dates.

        The start date is included and the end date is not. Months are
        counted first, then the remaining days, so the result of
        2024-01-31 to 2024-03-01 is one month and one day.

        Examples:
            >>> from isochron.core.local_date import LocalDate
            >>> Period.between(LocalDate(2024, 1, 15), LocalDate(2025, 3, 20))
            Period(years=1, months=2, days=5)
        """
        return start_inclusive.until(end_exclusive)

    @classmethod
    def from_iso_format(cls, text: str) -> Period:
        """Parse a period in the ISO 8601 form PnYnMnWnD.

        Weeks are converted to days. Each component may carry a sign, and
        a leading minus negates the whole period.

        Raises:
            ParseError: If the text does not match the grammar.

        Examples:
            >>> Period.from_iso_format("P1Y2M3D")
            Period(years=1, months=2, days=3)
            >>> Period.from_iso_format("P2W")
            Period(years=0, months=0, days=14)
            >>> Period.from_iso_format("-P1Y2M")
            Period(years=-1, months=-2, days=0)
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ParseError(f"Text {text!r} cannot be parsed to a Period", text, 0)
        negate, years, months, weeks, days = match.groups()
        if years is None and months is None and weeks is None and days is None:
            raise ParseError(f"Text {text!r} cannot be parsed to a Period", text, 0)
        sign = -1 if negate == "-" else 1
        return cls(
            sign * int(years or 0),
            sign * int(months or 0),
            sign * (int(weeks or 0) * 7 + int(days or 0)),
        )

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    @property
    def units(self) -> list[ChronoUnit]:
        """Return the units of this amount: YEARS, MONTHS and DAYS."""
        return [ChronoUnit.YEARS, ChronoUnit.MONTHS, ChronoUnit.DAYS]

    def get(self, unit: TemporalUnit) -> int:
        """Return the amount of YEARS, MONTHS or DAYS."""
        if unit is ChronoUnit.YEARS:
            return self._years
        if unit is ChronoUnit.MONTHS:
            return self._months
        if unit is ChronoUnit.DAYS:
            return self._days
        raise UnsupportedFieldError(f"Unsupported unit: {unit}")

    @property
    def is_zero(self) -> bool:
        """Return True if all three units are zero."""
        return self._years == 0 and self._months == 0 and self._days == 0

    @property
    def is_negative(self) -> bool:
        """Return True if any of the three units is negative."""
        return self._years < 0 or self._months < 0 or self._days < 0

    def to_total_months(self) -> int:
        """Return the total number of months, ignoring days.

        Examples:
            >>> Period(years=1, months=6, days=3).to_total_months()
            18
        """
        return self._years * 12 + self._months

    def with_years(self, years: int) -> Period:
        return Period(years, self._months, self._days)

    def with_months(self, months: int) -> Period:
        return Period(self._years, months, self._days)

    def with_days(self, days: int) -> Period:
        return Period(self._years, self._months, days)

    def plus(self, other: Period) -> Period:
        """Return the component-wise sum of two periods."""
        if not isinstance(other, Period):
            raise TypeError(f"expected Period, got {type(other).__name__}")
        return Period(
            self._years + other._years,
            self._months + other._months,
            self._days + other._days,
        )

    def minus(self, other: Period) -> Period:
        """Return the component-wise difference of two periods."""
        if not isinstance(other, Period):
            raise TypeError(f"expected Period, got {type(other).__name__}")
        return self.plus(other.negated())

    def plus_years(self, years: int) -> Period:
        return Period(self._years + years, self._months, self._days)

    def plus_months(self, months: int) -> Period:
        return Period(self._years, self._months + months, self._days)

    def plus_days(self, days: int) -> Period:
        return Period(self._years, self._months, self._days + days)

    def minus_years(self, years: int) -> Period:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> Period:
        return self.plus_months(-months)

    def minus_days(self, days: int) -> Period:
        return self.plus_days(-days)

    def multiplied_by(self, scalar: int) -> Period:
        """Return a period with each component multiplied by scalar."""
        if self.is_zero or scalar == 1:
            return self
        return Period(self._years * scalar, self._months * scalar, self._days * scalar)

    def negated(self) -> Period:
        return self.multiplied_by(-1)

    def normalized(self) -> Period:
        """Return a copy with months folded into years.

        Months are kept in the range -11 to 11 with the same sign as the
        years. Days are left untouched.

        Examples:
            >>> Period(years=1, months=15).normalized()
            Period(years=2, months=3, days=0)
            >>> Period(years=1, months=-25).normalized()
            Period(years=-1, months=-1, days=0)
        """
        total_months = self.to_total_months()
        years = trunc_div(total_months, 12)
        months = trunc_mod(total_months, 12)
        if years == self._years and months == self._months:
            return self
        return Period(years, months, self._days)

    def add_to(self, temporal: Any) -> Any:
        """Add this period to a date-based temporal value.

        Years and months are added together as a single number of months
        so the day-of-month is clamped at most once, then days are added.
        """
        from isochron.arithmetic.period_ops import add_period

        return add_period(temporal, self)

    def subtract_from(self, temporal: Any) -> Any:
        """Subtract this period from a date-based temporal value."""
        from isochron.arithmetic.period_ops import subtract_period

        return subtract_period(temporal, self)

    def to_iso_format(self) -> str:
        """Return the period as PnYnMnD, omitting zero components.

        A zero period is 'P0D'.
        """
        if self.is_zero:
            return "P0D"
        text = "P"
        if self._years != 0:
            text += f"{self._years}Y"
        if self._months != 0:
            text += f"{self._months}M"
        if self._days != 0:
            text += f"{self._days}D"
        return text

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: object) -> Period:
        """Support sum() by handling 0 + Period."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Period:
        return self.negated()

    def __pos__(self) -> Period:
        return self

    def __mul__(self, other: object) -> Period:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Period:
        """Support scalar * Period."""
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        """Compare component-wise; P1Y and P12M are not equal."""
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._days == other._days
        )

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __repr__(self) -> str:
        return f"Period(years={self._years}, months={self._months}, days={self._days})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Return True if this is a non-zero period."""
        return not self.is_zero


Period.ZERO = Period()


__all__ = ["Period"]
