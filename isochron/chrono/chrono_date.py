"""ChronoDate class: a date in a non-ISO calendar system."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from isochron._internal.arith import trunc_div
from isochron._internal.calendar import epoch_day_to_day_of_week
from isochron.errors import UnsupportedFieldError
from isochron.temporal.base import Temporal
from isochron.temporal.field import DATE_FIELDS, ChronoField
from isochron.temporal.unit import ChronoUnit
from isochron.temporal.value_range import ValueRange

if TYPE_CHECKING:
    from isochron.chrono.chronology import Chronology
    from isochron.core.local_date import LocalDate
    from isochron.core.period import Period
    from isochron.temporal.base import TemporalUnit

_F = ChronoField
_U = ChronoUnit
_DATE_UNITS = frozenset(unit for unit in ChronoUnit if unit.is_date_based())


class ChronoDate(Temporal):
    """A date in the Minguo, Thai Buddhist or Julian calendar.

    Fields are read in the terms of the owning chronology, so the YEAR
    of a Minguo date is its Minguo year. Dates from different
    chronologies, ISO LocalDate included, can be ordered by their
    position on the time-line with ``is_before``/``is_after``/``is_equal``.
    ``<`` and friends order by epoch-day and then chronology id; ``==``
    also requires the same chronology.

    Create instances through a Chronology:

        >>> from isochron.chrono import MinguoChronology
        >>> d = MinguoChronology.INSTANCE.date(113, 2, 29)
        >>> str(d)
        'Minguo ROC 113-02-29'
        >>> d.plus(1, ChronoUnit.YEARS).day
        28
    """

    __slots__ = ("_chronology", "_year", "_month", "_day")

    _FIELDS = DATE_FIELDS
    _UNITS = _DATE_UNITS

    @classmethod
    def _of(cls, chronology: Chronology, year: int, month: int, day: int) -> ChronoDate:
        """Create a ChronoDate from components already known to be valid."""
        date = object.__new__(cls)
        date._chronology = chronology
        date._year = year
        date._month = month
        date._day = day
        return date

    @property
    def chronology(self) -> Chronology:
        return self._chronology

    @property
    def year(self) -> int:
        """The proleptic year in this calendar."""
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def era(self) -> Any:
        return self._chronology.era_of(1 if self._year >= 1 else 0)

    @property
    def year_of_era(self) -> int:
        return self._year if self._year >= 1 else 1 - self._year

    @property
    def is_leap_year(self) -> bool:
        return self._chronology.is_leap_year(self._year)

    def length_of_month(self) -> int:
        return self._chronology.length_of_month(self._year, self._month)

    def length_of_year(self) -> int:
        return self._chronology.length_of_year(self._year)

    def to_epoch_day(self) -> int:
        return self._chronology._to_epoch_day(self._year, self._month, self._day)

    def to_local_date(self) -> LocalDate:
        """Return the same day in the ISO calendar."""
        from isochron.core.local_date import LocalDate

        return LocalDate.of_epoch_day(self.to_epoch_day())

    @property
    def _day_of_year(self) -> int:
        return self.to_epoch_day() - self._chronology._to_epoch_day(self._year, 1, 1) + 1

    @property
    def _proleptic_month(self) -> int:
        return self._year * 12 + self._month - 1

    def _range_of(self, field: ChronoField) -> ValueRange:
        if field is _F.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is _F.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if field is _F.ALIGNED_WEEK_OF_MONTH:
            return ValueRange.of(1, 4 if self.length_of_month() == 28 else 5)
        if field is _F.YEAR_OF_ERA:
            years = self._chronology.range(_F.YEAR)
            if self._year >= 1:
                return ValueRange.of(1, years.maximum)
            return ValueRange.of(1, 1 - years.minimum)
        return self._chronology.range(field)

    def _get_field(self, field: ChronoField) -> int:
        if field is _F.DAY_OF_WEEK:
            return epoch_day_to_day_of_week(self.to_epoch_day())
        if field is _F.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return (self._day - 1) % 7 + 1
        if field is _F.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return (self._day_of_year - 1) % 7 + 1
        if field is _F.DAY_OF_MONTH:
            return self._day
        if field is _F.DAY_OF_YEAR:
            return self._day_of_year
        if field is _F.EPOCH_DAY:
            return self.to_epoch_day()
        if field is _F.ALIGNED_WEEK_OF_MONTH:
            return (self._day - 1) // 7 + 1
        if field is _F.ALIGNED_WEEK_OF_YEAR:
            return (self._day_of_year - 1) // 7 + 1
        if field is _F.MONTH_OF_YEAR:
            return self._month
        if field is _F.PROLEPTIC_MONTH:
            return self._proleptic_month
        if field is _F.YEAR_OF_ERA:
            return self.year_of_era
        if field is _F.YEAR:
            return self._year
        return 1 if self._year >= 1 else 0

    def _with_field(self, field: ChronoField, value: int) -> ChronoDate:
        chronology = self._chronology
        chronology.range(field).check_valid_value(value, field)
        if field is _F.DAY_OF_WEEK:
            return self.plus_days(value - self._get_field(field))
        if field in (_F.ALIGNED_DAY_OF_WEEK_IN_MONTH, _F.ALIGNED_DAY_OF_WEEK_IN_YEAR):
            return self.plus_days(value - self._get_field(field))
        if field in (_F.ALIGNED_WEEK_OF_MONTH, _F.ALIGNED_WEEK_OF_YEAR):
            return self.plus_days((value - self._get_field(field)) * 7)
        if field is _F.DAY_OF_MONTH:
            return chronology.date(self._year, self._month, value)
        if field is _F.DAY_OF_YEAR:
            return chronology.date_year_day(self._year, value)
        if field is _F.EPOCH_DAY:
            return chronology.date_epoch_day(value)
        if field is _F.MONTH_OF_YEAR:
            return chronology._resolve_previous_valid(self._year, value, self._day)
        if field is _F.PROLEPTIC_MONTH:
            return self.plus_months(value - self._proleptic_month)
        if field is _F.YEAR_OF_ERA:
            year = value if self._year >= 1 else 1 - value
            return chronology._resolve_previous_valid(year, self._month, self._day)
        if field is _F.YEAR:
            return chronology._resolve_previous_valid(value, self._month, self._day)
        if self._get_field(_F.ERA) == value:
            return self
        return chronology._resolve_previous_valid(1 - self._year, self._month, self._day)

    def _plus_unit(self, amount: int, unit: ChronoUnit) -> ChronoDate:
        if unit is _U.DAYS:
            return self.plus_days(amount)
        if unit is _U.WEEKS:
            return self.plus_days(amount * 7)
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
        return self.with_field(_F.ERA, self._get_field(_F.ERA) + amount)

    def plus_days(self, days: int) -> ChronoDate:
        if days == 0:
            return self
        return self._chronology.date_epoch_day(self.to_epoch_day() + days)

    def plus_months(self, months: int) -> ChronoDate:
        """Return a copy with months added, clamping the day-of-month."""
        if months == 0:
            return self
        year, month0 = divmod(self._proleptic_month + months, 12)
        return self._chronology._resolve_previous_valid(year, month0 + 1, self._day)

    def plus_years(self, years: int) -> ChronoDate:
        if years == 0:
            return self
        return self._chronology._resolve_previous_valid(
            self._year + years, self._month, self._day
        )

    def until(self, end: Any, unit: TemporalUnit | None = None) -> Any:
        """Return the amount of time until end, in this calendar.

        Without a unit, returns the Period of years, months and days.
        """
        end = self._chronology.date_from(end)
        if unit is None:
            return self._period_until(end)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end)
        if unit is _U.DAYS:
            return end.to_epoch_day() - self.to_epoch_day()
        if unit is _U.WEEKS:
            return trunc_div(end.to_epoch_day() - self.to_epoch_day(), 7)
        if unit is _U.MONTHS:
            return self._months_until(end)
        if unit is _U.YEARS:
            return trunc_div(self._months_until(end), 12)
        if unit is _U.DECADES:
            return trunc_div(self._months_until(end), 120)
        if unit is _U.CENTURIES:
            return trunc_div(self._months_until(end), 1_200)
        if unit is _U.MILLENNIA:
            return trunc_div(self._months_until(end), 12_000)
        if unit is _U.ERAS:
            return end._get_field(_F.ERA) - self._get_field(_F.ERA)
        raise UnsupportedFieldError(f"Unsupported unit: {unit}")

    def _months_until(self, end: ChronoDate) -> int:
        packed1 = self._proleptic_month * 32 + self._day
        packed2 = end._proleptic_month * 32 + end._day
        return trunc_div(packed2 - packed1, 32)

    def _period_until(self, end: ChronoDate) -> Period:
        from isochron.core.period import Period

        total_months = end._proleptic_month - self._proleptic_month
        days = end._day - self._day
        if total_months > 0 and days < 0:
            total_months -= 1
            days = end.to_epoch_day() - self.plus_months(total_months).to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        years = trunc_div(total_months, 12)
        return Period(years, total_months - years * 12, days)

    def is_before(self, other: Any) -> bool:
        """Compare positions on the time-line, ignoring the chronology."""
        return self.to_epoch_day() < other.get(_F.EPOCH_DAY)

    def is_after(self, other: Any) -> bool:
        return self.to_epoch_day() > other.get(_F.EPOCH_DAY)

    def is_equal(self, other: Any) -> bool:
        return self.to_epoch_day() == other.get(_F.EPOCH_DAY)

    def _key(self) -> tuple[int, str]:
        return (self.to_epoch_day(), self._chronology.id)

    @staticmethod
    def _order_key(other: object) -> tuple[int, str] | None:
        from isochron.core.local_date import LocalDate

        if isinstance(other, ChronoDate):
            return other._key()
        if isinstance(other, LocalDate):
            return (other.to_epoch_day(), other.chronology.id)
        return None

    def __add__(self, other: object) -> ChronoDate:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> ChronoDate:
        from isochron.core.period import Period

        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChronoDate):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        key = self._order_key(other)
        if key is None:
            return NotImplemented
        return self._key() < key

    def __le__(self, other: object) -> bool:
        key = self._order_key(other)
        if key is None:
            return NotImplemented
        return self._key() <= key

    def __gt__(self, other: object) -> bool:
        key = self._order_key(other)
        if key is None:
            return NotImplemented
        return self._key() > key

    def __ge__(self, other: object) -> bool:
        key = self._order_key(other)
        if key is None:
            return NotImplemented
        return self._key() >= key

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"ChronoDate({self._chronology.id!r}, {self._year}, {self._month}, {self._day})"
        )

    def __str__(self) -> str:
        return (
            f"{self._chronology.id} {self.era.name} "
            f"{self.year_of_era}-{self._month:02d}-{self._day:02d}"
        )


__all__ = ["ChronoDate"]
