"""The standard set of date-time fields.

Each ChronoField has a base unit (what one step of the field is), a
range unit (what the field cycles within) and an outer ValueRange.
Types that support a field may narrow that range; the day-of-month of
a February in a leap year is ``1 - 29`` rather than ``1 - 28/31``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from isochron._internal.constants import (
    MAX_EPOCH_DAY,
    MAX_LONG,
    MAX_OFFSET_SECONDS,
    MAX_YEAR,
    MICROS_PER_DAY,
    MILLIS_PER_DAY,
    MIN_EPOCH_DAY,
    MIN_LONG,
    MIN_YEAR,
    NANOS_PER_DAY,
)
from isochron.temporal.base import TemporalEnumMeta, TemporalField
from isochron.temporal.unit import ChronoUnit
from isochron.temporal.value_range import ValueRange

_U = ChronoUnit


class ChronoField(TemporalField, Enum, metaclass=TemporalEnumMeta):
    """A standard set of fields.

    Examples:
        >>> ChronoField.MONTH_OF_YEAR.range()
        ValueRange(1, 12)
        >>> ChronoField.DAY_OF_MONTH.is_date_based()
        True
        >>> str(ChronoField.HOUR_OF_DAY)
        'HourOfDay'
    """

    NANO_OF_SECOND = ("NanoOfSecond", _U.NANOS, _U.SECONDS, ValueRange.of(0, 999_999_999))
    NANO_OF_DAY = ("NanoOfDay", _U.NANOS, _U.DAYS, ValueRange.of(0, NANOS_PER_DAY - 1))
    MICRO_OF_SECOND = ("MicroOfSecond", _U.MICROS, _U.SECONDS, ValueRange.of(0, 999_999))
    MICRO_OF_DAY = ("MicroOfDay", _U.MICROS, _U.DAYS, ValueRange.of(0, MICROS_PER_DAY - 1))
    MILLI_OF_SECOND = ("MilliOfSecond", _U.MILLIS, _U.SECONDS, ValueRange.of(0, 999))
    MILLI_OF_DAY = ("MilliOfDay", _U.MILLIS, _U.DAYS, ValueRange.of(0, MILLIS_PER_DAY - 1))
    SECOND_OF_MINUTE = ("SecondOfMinute", _U.SECONDS, _U.MINUTES, ValueRange.of(0, 59))
    SECOND_OF_DAY = ("SecondOfDay", _U.SECONDS, _U.DAYS, ValueRange.of(0, 86_400 - 1))
    MINUTE_OF_HOUR = ("MinuteOfHour", _U.MINUTES, _U.HOURS, ValueRange.of(0, 59))
    MINUTE_OF_DAY = ("MinuteOfDay", _U.MINUTES, _U.DAYS, ValueRange.of(0, 24 * 60 - 1))
    HOUR_OF_AMPM = ("HourOfAmPm", _U.HOURS, _U.HALF_DAYS, ValueRange.of(0, 11))
    CLOCK_HOUR_OF_AMPM = ("ClockHourOfAmPm", _U.HOURS, _U.HALF_DAYS, ValueRange.of(1, 12))
    HOUR_OF_DAY = ("HourOfDay", _U.HOURS, _U.DAYS, ValueRange.of(0, 23))
    CLOCK_HOUR_OF_DAY = ("ClockHourOfDay", _U.HOURS, _U.DAYS, ValueRange.of(1, 24))
    AMPM_OF_DAY = ("AmPmOfDay", _U.HALF_DAYS, _U.DAYS, ValueRange.of(0, 1))
    DAY_OF_WEEK = ("DayOfWeek", _U.DAYS, _U.WEEKS, ValueRange.of(1, 7))
    ALIGNED_DAY_OF_WEEK_IN_MONTH = (
        "AlignedDayOfWeekInMonth", _U.DAYS, _U.WEEKS, ValueRange.of(1, 7)
    )
    ALIGNED_DAY_OF_WEEK_IN_YEAR = (
        "AlignedDayOfWeekInYear", _U.DAYS, _U.WEEKS, ValueRange.of(1, 7)
    )
    DAY_OF_MONTH = ("DayOfMonth", _U.DAYS, _U.MONTHS, ValueRange.of(1, 28, 31))
    DAY_OF_YEAR = ("DayOfYear", _U.DAYS, _U.YEARS, ValueRange.of(1, 365, 366))
    EPOCH_DAY = ("EpochDay", _U.DAYS, _U.FOREVER, ValueRange.of(MIN_EPOCH_DAY, MAX_EPOCH_DAY))
    ALIGNED_WEEK_OF_MONTH = ("AlignedWeekOfMonth", _U.WEEKS, _U.MONTHS, ValueRange.of(1, 4, 5))
    ALIGNED_WEEK_OF_YEAR = ("AlignedWeekOfYear", _U.WEEKS, _U.YEARS, ValueRange.of(1, 53))
    MONTH_OF_YEAR = ("MonthOfYear", _U.MONTHS, _U.YEARS, ValueRange.of(1, 12))
    PROLEPTIC_MONTH = (
        "ProlepticMonth", _U.MONTHS, _U.FOREVER, ValueRange.of(MIN_YEAR * 12, MAX_YEAR * 12 + 11)
    )
    YEAR_OF_ERA = ("YearOfEra", _U.YEARS, _U.FOREVER, ValueRange.of(1, MAX_YEAR, MAX_YEAR + 1))
    YEAR = ("Year", _U.YEARS, _U.FOREVER, ValueRange.of(MIN_YEAR, MAX_YEAR))
    ERA = ("Era", _U.ERAS, _U.FOREVER, ValueRange.of(0, 1))
    INSTANT_SECONDS = ("InstantSeconds", _U.SECONDS, _U.FOREVER, ValueRange.of(MIN_LONG, MAX_LONG))
    OFFSET_SECONDS = (
        "OffsetSeconds", _U.SECONDS, _U.FOREVER, ValueRange.of(-MAX_OFFSET_SECONDS, MAX_OFFSET_SECONDS)
    )

    def __init__(
        self,
        display_name: str,
        base_unit: ChronoUnit,
        range_unit: ChronoUnit,
        value_range: ValueRange,
    ) -> None:
        self._display_name = display_name
        self._base_unit = base_unit
        self._range_unit = range_unit
        self._range = value_range

    @property
    def base_unit(self) -> ChronoUnit:
        return self._base_unit

    @property
    def range_unit(self) -> ChronoUnit:
        return self._range_unit

    def range(self) -> ValueRange:
        """Return the outer range of valid values for the field."""
        return self._range

    def is_date_based(self) -> bool:
        """Return True for DAY_OF_WEEK through ERA."""
        return _DAY_OF_WEEK_INDEX <= _ORDER[self] <= _ERA_INDEX

    def is_time_based(self) -> bool:
        """Return True for NANO_OF_SECOND through AMPM_OF_DAY."""
        return _ORDER[self] < _DAY_OF_WEEK_INDEX

    def check_valid_value(self, value: int) -> int:
        """Validate value against the outer range of this field.

        Raises:
            FieldOutOfRangeError: If value is outside the range.
        """
        return self._range.check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        return self._range.check_valid_int_value(value, self)

    def is_supported_by(self, temporal: Any) -> bool:
        return temporal.is_supported(self)

    def range_refined_by(self, temporal: Any) -> ValueRange:
        return temporal.range(self)

    def get_from(self, temporal: Any) -> int:
        return temporal.get(self)

    def adjust_into(self, temporal: Any, value: int) -> Any:
        return temporal.with_field(self, value)

    def __str__(self) -> str:
        return self._display_name


_ORDER: dict[ChronoField, int] = {field: index for index, field in enumerate(ChronoField)}
_DAY_OF_WEEK_INDEX = _ORDER[ChronoField.DAY_OF_WEEK]
_ERA_INDEX = _ORDER[ChronoField.ERA]

DATE_FIELDS: frozenset[ChronoField] = frozenset(
    field for field in ChronoField if field.is_date_based()
)
TIME_FIELDS: frozenset[ChronoField] = frozenset(
    field for field in ChronoField if field.is_time_based()
)


__all__ = ["ChronoField", "DATE_FIELDS", "TIME_FIELDS"]
