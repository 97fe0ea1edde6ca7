"""Day-count fields used by astronomers and other calendars.

Each field is a fixed offset from the epoch-day, so it works with any
value that supports ChronoField.EPOCH_DAY, in any chronology.

    JULIAN_DAY: days since noon on 4713-11-24 BCE (Gregorian); the
        value is the day that starts at midnight, so 1970-01-01 is
        2440588.
    MODIFIED_JULIAN_DAY: days since 1858-11-17; 1970-01-01 is 40587.
    RATA_DIE: days since 0000-12-31, so 0001-01-01 is day 1;
        1970-01-01 is 719163.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from isochron._internal.constants import (
    JULIAN_DAY_OFFSET,
    MODIFIED_JULIAN_DAY_OFFSET,
    RATA_DIE_OFFSET,
)
from isochron.errors import UnsupportedFieldError
from isochron.temporal.base import TemporalEnumMeta, TemporalField
from isochron.temporal.field import ChronoField
from isochron.temporal.resolver import ResolverStyle
from isochron.temporal.unit import ChronoUnit
from isochron.temporal.value_range import ValueRange

_EPOCH_DAY = ChronoField.EPOCH_DAY


def _shifted(offset: int) -> ValueRange:
    outer = _EPOCH_DAY.range()
    return ValueRange.of(outer.minimum + offset, outer.maximum + offset)


class JulianField(TemporalField, Enum, metaclass=TemporalEnumMeta):
    """A day count offset from the epoch-day."""

    JULIAN_DAY = ("JulianDay", JULIAN_DAY_OFFSET)
    MODIFIED_JULIAN_DAY = ("ModifiedJulianDay", MODIFIED_JULIAN_DAY_OFFSET)
    RATA_DIE = ("RataDie", RATA_DIE_OFFSET)

    def __init__(self, display_name: str, offset: int) -> None:
        self._display_name = display_name
        self._offset = offset
        self._range = _shifted(offset)

    @property
    def offset(self) -> int:
        """The value of this field on 1970-01-01."""
        return self._offset

    @property
    def base_unit(self) -> ChronoUnit:
        return ChronoUnit.DAYS

    @property
    def range_unit(self) -> ChronoUnit:
        return ChronoUnit.FOREVER

    def range(self) -> ValueRange:
        return self._range

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: Any) -> bool:
        return temporal.is_supported(_EPOCH_DAY)

    def range_refined_by(self, temporal: Any) -> ValueRange:
        if not self.is_supported_by(temporal):
            raise UnsupportedFieldError(f"Unsupported field: {self}")
        return self._range

    def get_from(self, temporal: Any) -> int:
        return temporal.get(_EPOCH_DAY) + self._offset

    def adjust_into(self, temporal: Any, value: int) -> Any:
        """Return temporal moved to the day with this day count.

        Raises:
            FieldOutOfRangeError: If value is outside the valid range.
        """
        self._range.check_valid_value(value, self)
        return temporal.with_field(_EPOCH_DAY, value - self._offset)

    def resolve(self, field_values: dict[Any, int], chronology: Any, style: Any) -> Any:
        value = field_values.pop(self)
        if style is not ResolverStyle.LENIENT:
            self._range.check_valid_value(value, self)
        return chronology.date_epoch_day(value - self._offset)

    def __str__(self) -> str:
        return self._display_name


class JulianFields:
    """Namespace of the Julian day fields.

    Examples:
        >>> LocalDate(1970, 1, 1).get(JulianFields.JULIAN_DAY)
        2440588
        >>> LocalDate(2024, 1, 1).with_field(JulianFields.MODIFIED_JULIAN_DAY, 40587)
        LocalDate(1970, 1, 1)
    """

    JULIAN_DAY = JulianField.JULIAN_DAY
    MODIFIED_JULIAN_DAY = JulianField.MODIFIED_JULIAN_DAY
    RATA_DIE = JulianField.RATA_DIE


__all__ = ["JulianFields", "JulianField"]
