"""Fields and units specific to the ISO calendar.

IsoFields adds quarter-of-year and week-based-year access to any
ISO date-bearing value:

    DAY_OF_QUARTER: 1 to 90, 91 or 92.
    QUARTER_OF_YEAR: 1 to 4.
    WEEK_OF_WEEK_BASED_YEAR: 1 to 52 or 53. Week 1 is the week with
        the first Thursday of the year, and weeks start on Monday.
    WEEK_BASED_YEAR: the year that owns the week, which differs from
        the calendar year for a few days around New Year.

Examples:
    >>> d = LocalDate(2021, 1, 1)
    >>> d.get(IsoFields.WEEK_BASED_YEAR), d.get(IsoFields.WEEK_OF_WEEK_BASED_YEAR)
    (2020, 53)
    >>> d.get(IsoFields.QUARTER_OF_YEAR)
    1
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from isochron._internal.arith import trunc_div, trunc_mod
from isochron._internal.calendar import is_leap_year
from isochron.errors import UnsupportedFieldError, ValidationError
from isochron.temporal.base import TemporalEnumMeta, TemporalField, TemporalUnit
from isochron.temporal.field import ChronoField
from isochron.temporal.resolver import ResolverStyle
from isochron.temporal.unit import ChronoUnit
from isochron.temporal.value_range import ValueRange

if TYPE_CHECKING:
    from isochron.core.duration import Duration
    from isochron.core.local_date import LocalDate

_F = ChronoField

# Day-of-year before the first day of each quarter, common then leap
_QUARTER_DAYS = (0, 90, 181, 273, 0, 91, 182, 274)


def _is_iso(temporal: Any) -> bool:
    from isochron.chrono.chronology import Chronology
    from isochron.chrono.iso import IsoChronology

    return Chronology.from_temporal(temporal) == IsoChronology.INSTANCE


def _local_date(temporal: Any) -> LocalDate:
    from isochron.core.local_date import LocalDate

    if not _is_iso(temporal):
        raise ValidationError("Resolve requires IsoChronology")
    return LocalDate.from_temporal(temporal)


def _week_based_year_and_week(date: LocalDate) -> tuple[int, int]:
    # The Thursday of the same Monday-based week decides the year
    thursday = date.plus_days(4 - date.day_of_week.value)
    return thursday.year, (thursday.day_of_year - 1) // 7 + 1


def _weeks_in_week_based_year(week_based_year: int) -> int:
    from isochron.core.local_date import LocalDate

    jan1 = LocalDate(week_based_year, 1, 1).day_of_week.value
    if jan1 == 4 or (jan1 == 3 and is_leap_year(week_based_year)):
        return 53
    return 52


def _week_one_monday(week_based_year: int) -> LocalDate:
    from isochron.core.local_date import LocalDate

    # January 4th always lies in week 1
    jan4 = LocalDate(week_based_year, 1, 4)
    return jan4.minus_days(jan4.day_of_week.value - 1)


class IsoField(TemporalField, Enum, metaclass=TemporalEnumMeta):
    """A field defined by ISO-8601 quarters and week-based years."""

    DAY_OF_QUARTER = ("DayOfQuarter", ValueRange.of(1, 90, 92))
    QUARTER_OF_YEAR = ("QuarterOfYear", ValueRange.of(1, 4))
    WEEK_OF_WEEK_BASED_YEAR = ("WeekOfWeekBasedYear", ValueRange.of(1, 52, 53))
    WEEK_BASED_YEAR = ("WeekBasedYear", _F.YEAR.range())

    def __init__(self, display_name: str, value_range: ValueRange) -> None:
        self._display_name = display_name
        self._range = value_range

    @property
    def base_unit(self) -> TemporalUnit:
        return _BASE_UNITS[self.name]

    @property
    def range_unit(self) -> TemporalUnit:
        return _RANGE_UNITS[self.name]

    def range(self) -> ValueRange:
        return self._range

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: Any) -> bool:
        if self is IsoField.DAY_OF_QUARTER:
            required = (_F.DAY_OF_YEAR, _F.MONTH_OF_YEAR, _F.YEAR)
        elif self is IsoField.QUARTER_OF_YEAR:
            required = (_F.MONTH_OF_YEAR,)
        else:
            required = (_F.EPOCH_DAY,)
        return all(temporal.is_supported(field) for field in required) and _is_iso(temporal)

    def _check_supported(self, temporal: Any) -> None:
        if not self.is_supported_by(temporal):
            raise UnsupportedFieldError(f"Unsupported field: {self}")

    def range_refined_by(self, temporal: Any) -> ValueRange:
        self._check_supported(temporal)
        if self is IsoField.DAY_OF_QUARTER:
            quarter = (temporal.get(_F.MONTH_OF_YEAR) - 1) // 3 + 1
            if quarter == 1:
                return ValueRange.of(1, 91 if is_leap_year(temporal.get(_F.YEAR)) else 90)
            if quarter == 2:
                return ValueRange.of(1, 91)
            return ValueRange.of(1, 92)
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            year, _ = _week_based_year_and_week(_local_date(temporal))
            return ValueRange.of(1, _weeks_in_week_based_year(year))
        return self._range

    def get_from(self, temporal: Any) -> int:
        self._check_supported(temporal)
        if self is IsoField.DAY_OF_QUARTER:
            month = temporal.get(_F.MONTH_OF_YEAR)
            leap = 4 if is_leap_year(temporal.get(_F.YEAR)) else 0
            return temporal.get(_F.DAY_OF_YEAR) - _QUARTER_DAYS[(month - 1) // 3 + leap]
        if self is IsoField.QUARTER_OF_YEAR:
            return (temporal.get(_F.MONTH_OF_YEAR) + 2) // 3
        year, week = _week_based_year_and_week(_local_date(temporal))
        return week if self is IsoField.WEEK_OF_WEEK_BASED_YEAR else year

    def adjust_into(self, temporal: Any, value: int) -> Any:
        """Return temporal with this field set to value.

        Raises:
            FieldOutOfRangeError: If value is outside the valid range.
        """
        current = self.get_from(temporal)
        self.range_refined_by(temporal).check_valid_value(value, self)
        if self is IsoField.DAY_OF_QUARTER:
            day_of_year = temporal.get(_F.DAY_OF_YEAR) + value - current
            return temporal.with_field(_F.DAY_OF_YEAR, day_of_year)
        if self is IsoField.QUARTER_OF_YEAR:
            month = temporal.get(_F.MONTH_OF_YEAR)
            return temporal.with_field(_F.MONTH_OF_YEAR, month + (value - current) * 3)
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            return temporal.plus(value - current, ChronoUnit.WEEKS)
        date = _local_date(temporal)
        _, week = _week_based_year_and_week(date)
        if week == 53 and _weeks_in_week_based_year(value) == 52:
            week = 52
        target = _week_one_monday(value).plus_days(
            (week - 1) * 7 + date.day_of_week.value - 1
        )
        return temporal.with_field(_F.EPOCH_DAY, target.to_epoch_day())

    def resolve(
        self, field_values: dict[Any, int], chronology: Any, style: Any
    ) -> LocalDate | None:
        """Build a date from year and quarter fields or week-based fields."""
        if self is IsoField.DAY_OF_QUARTER:
            return self._resolve_quarter(field_values, style)
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            return self._resolve_week_based(field_values, style)
        return None

    def _resolve_quarter(self, field_values: dict[Any, int], style: Any) -> LocalDate | None:
        from isochron.core.local_date import LocalDate

        if _F.YEAR not in field_values or IsoField.QUARTER_OF_YEAR not in field_values:
            return None
        year = _F.YEAR.check_valid_int_value(field_values[_F.YEAR])
        quarter = field_values[IsoField.QUARTER_OF_YEAR]
        day = field_values[IsoField.DAY_OF_QUARTER]
        if style is ResolverStyle.LENIENT:
            date = LocalDate(year, 1, 1).plus_months((quarter - 1) * 3)
        else:
            quarter = IsoField.QUARTER_OF_YEAR.range().check_valid_int_value(
                quarter, IsoField.QUARTER_OF_YEAR
            )
            date = LocalDate(year, (quarter - 1) * 3 + 1, 1)
            if style is ResolverStyle.STRICT:
                self.range_refined_by(date).check_valid_value(day, self)
            else:
                self._range.check_valid_value(day, self)
        for field in (self, _F.YEAR, IsoField.QUARTER_OF_YEAR):
            del field_values[field]
        return date.plus_days(day - 1)

    def _resolve_week_based(self, field_values: dict[Any, int], style: Any) -> LocalDate | None:
        if IsoField.WEEK_BASED_YEAR not in field_values or _F.DAY_OF_WEEK not in field_values:
            return None
        year = IsoField.WEEK_BASED_YEAR.range().check_valid_int_value(
            field_values[IsoField.WEEK_BASED_YEAR], IsoField.WEEK_BASED_YEAR
        )
        week = field_values[self]
        day_of_week = field_values[_F.DAY_OF_WEEK]
        if style is not ResolverStyle.LENIENT:
            _F.DAY_OF_WEEK.check_valid_value(day_of_week)
            if style is ResolverStyle.STRICT:
                ValueRange.of(1, _weeks_in_week_based_year(year)).check_valid_value(week, self)
            else:
                self._range.check_valid_value(week, self)
        for field in (self, IsoField.WEEK_BASED_YEAR, _F.DAY_OF_WEEK):
            del field_values[field]
        return _week_one_monday(year).plus_days((week - 1) * 7 + day_of_week - 1)

    def __str__(self) -> str:
        return self._display_name


class IsoUnit(TemporalUnit, Enum, metaclass=TemporalEnumMeta):
    """A unit of week-based years or quarters."""

    WEEK_BASED_YEARS = ("WeekBasedYears", 31_556_952)
    QUARTER_YEARS = ("QuarterYears", 31_556_952 // 4)

    def __init__(self, display_name: str, seconds: int) -> None:
        self._display_name = display_name
        self._seconds = seconds

    @property
    def duration(self) -> Duration:
        from isochron.core.duration import Duration

        return Duration.of_seconds(self._seconds)

    def is_duration_estimated(self) -> bool:
        return True

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: Any) -> bool:
        return temporal.is_supported(_F.EPOCH_DAY) and _is_iso(temporal)

    def add_to(self, temporal: Any, amount: int) -> Any:
        if not self.is_supported_by(temporal):
            raise UnsupportedFieldError(f"Unsupported unit: {self}")
        if self is IsoUnit.WEEK_BASED_YEARS:
            year = IsoField.WEEK_BASED_YEAR.get_from(temporal)
            return IsoField.WEEK_BASED_YEAR.adjust_into(temporal, year + amount)
        temporal = temporal.plus(trunc_div(amount, 4), ChronoUnit.YEARS)
        return temporal.plus(trunc_mod(amount, 4) * 3, ChronoUnit.MONTHS)

    def between(self, start: Any, end: Any) -> int:
        if self is IsoUnit.WEEK_BASED_YEARS:
            return IsoField.WEEK_BASED_YEAR.get_from(end) - IsoField.WEEK_BASED_YEAR.get_from(
                start
            )
        return trunc_div(start.until(end, ChronoUnit.MONTHS), 3)

    def __str__(self) -> str:
        return self._display_name


_BASE_UNITS: dict[str, TemporalUnit] = {
    "DAY_OF_QUARTER": ChronoUnit.DAYS,
    "QUARTER_OF_YEAR": IsoUnit.QUARTER_YEARS,
    "WEEK_OF_WEEK_BASED_YEAR": ChronoUnit.WEEKS,
    "WEEK_BASED_YEAR": IsoUnit.WEEK_BASED_YEARS,
}
_RANGE_UNITS: dict[str, TemporalUnit] = {
    "DAY_OF_QUARTER": IsoUnit.QUARTER_YEARS,
    "QUARTER_OF_YEAR": ChronoUnit.YEARS,
    "WEEK_OF_WEEK_BASED_YEAR": IsoUnit.WEEK_BASED_YEARS,
    "WEEK_BASED_YEAR": ChronoUnit.FOREVER,
}


class IsoFields:
    """Namespace of the ISO fields and units."""

    DAY_OF_QUARTER = IsoField.DAY_OF_QUARTER
    QUARTER_OF_YEAR = IsoField.QUARTER_OF_YEAR
    WEEK_OF_WEEK_BASED_YEAR = IsoField.WEEK_OF_WEEK_BASED_YEAR
    WEEK_BASED_YEAR = IsoField.WEEK_BASED_YEAR
    WEEK_BASED_YEARS = IsoUnit.WEEK_BASED_YEARS
    QUARTER_YEARS = IsoUnit.QUARTER_YEARS


__all__ = ["IsoFields", "IsoField", "IsoUnit"]
