"""Framework-level interfaces shared by all temporal types.

This module defines the seams the rest of the library is written
against:

    TemporalField: something that can be read from or written into a
        temporal value (ChronoField, IsoFields, JulianFields).
    TemporalUnit: something a temporal value can be moved by
        (ChronoUnit, IsoFields units).
    TemporalAmount: a span that knows how to add itself (Duration, Period).
    TemporalAccessor: read-only access to fields.
    Temporal: accessor that also supports adjustment and arithmetic.

The ``Chrono*`` enums are handled directly by each type through the
``_get_field`` / ``_with_field`` / ``_plus_unit`` hooks; any other field
or unit is asked to do the work itself, which is how custom fields plug
in without the core types knowing about them.
"""

from __future__ import annotations

from abc import ABC, ABCMeta, abstractmethod
from enum import EnumMeta
from typing import TYPE_CHECKING, Any

from isochron.errors import UnsupportedFieldError

if TYPE_CHECKING:
    from isochron.core.duration import Duration
    from isochron.temporal.value_range import ValueRange


class TemporalEnumMeta(ABCMeta, EnumMeta):
    """Metaclass for the Enum implementations of TemporalField and TemporalUnit."""


class TemporalUnit(ABC):
    """A unit of date-time, such as Days or Hours."""

    @property
    @abstractmethod
    def duration(self) -> Duration:
        """The length of the unit, estimated for date units."""

    @abstractmethod
    def is_duration_estimated(self) -> bool:
        """Return True if the length varies, as for days and longer."""

    @abstractmethod
    def is_date_based(self) -> bool:
        """Return True for days and longer, except FOREVER."""

    @abstractmethod
    def is_time_based(self) -> bool:
        """Return True for units shorter than a day."""

    def is_supported_by(self, temporal: Temporal) -> bool:
        """Return True if temporal can be moved by this unit."""
        try:
            temporal.plus(1, self)
        except UnsupportedFieldError:
            return False
        return True

    @abstractmethod
    def add_to(self, temporal: Any, amount: int) -> Any:
        """Return a copy of temporal with amount of this unit added."""

    @abstractmethod
    def between(self, start: Any, end: Any) -> int:
        """Return the number of whole units from start to end."""


class TemporalField(ABC):
    """A field of date-time, such as month-of-year or hour-of-day."""

    @property
    @abstractmethod
    def base_unit(self) -> TemporalUnit:
        """The unit the field is measured in."""

    @property
    @abstractmethod
    def range_unit(self) -> TemporalUnit:
        """The unit the field is bound by."""

    @abstractmethod
    def range(self) -> ValueRange:
        """The outer range of valid values."""

    @abstractmethod
    def is_date_based(self) -> bool:
        pass

    @abstractmethod
    def is_time_based(self) -> bool:
        pass

    @abstractmethod
    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        pass

    @abstractmethod
    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        """The range of valid values given the other fields of temporal."""

    @abstractmethod
    def get_from(self, temporal: TemporalAccessor) -> int:
        pass

    @abstractmethod
    def adjust_into(self, temporal: Any, value: int) -> Any:
        """Return a copy of temporal with this field set to value."""

    def resolve(
        self, field_values: dict[Any, int], chronology: Any, style: Any
    ) -> TemporalAccessor | None:
        """Hook for the field resolver.

        A field that can build a date from the values in field_values
        removes the values it used and returns the date; otherwise it
        returns None and leaves field_values alone.
        """
        return None


class TemporalAmount:
    """An amount of time such as '6 hours' or '2 months'."""

    __slots__ = ()

    @property
    def units(self) -> list[TemporalUnit]:
        raise NotImplementedError

    def get(self, unit: TemporalUnit) -> int:
        raise NotImplementedError

    def add_to(self, temporal: Any) -> Any:
        raise NotImplementedError

    def subtract_from(self, temporal: Any) -> Any:
        raise NotImplementedError


class TemporalAccessor:
    """Read-only access to the fields of a temporal value.

    Subclasses list the ChronoFields they support in ``_FIELDS`` and
    implement ``_get_field``. Variable ranges are supplied by
    overriding ``_range_of``.
    """

    __slots__ = ()

    _FIELDS: frozenset = frozenset()
    _UNITS: frozenset = frozenset()

    def is_supported(self, field_or_unit: TemporalField | TemporalUnit | None) -> bool:
        """Return True if the field can be queried or the unit added.

        Args:
            field_or_unit: A TemporalField or TemporalUnit.

        Examples:
            >>> from isochron import LocalDate, ChronoField, ChronoUnit
            >>> LocalDate(2024, 1, 15).is_supported(ChronoField.HOUR_OF_DAY)
            False
            >>> LocalDate(2024, 1, 15).is_supported(ChronoUnit.MONTHS)
            True
        """
        from isochron.temporal.field import ChronoField
        from isochron.temporal.unit import ChronoUnit

        if field_or_unit is None:
            return False
        if isinstance(field_or_unit, ChronoField):
            return field_or_unit in self._FIELDS
        if isinstance(field_or_unit, ChronoUnit):
            return field_or_unit in self._UNITS
        return field_or_unit.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        """Return the range of valid values for the field in this context.

        Raises:
            UnsupportedFieldError: If the field is not supported.
        """
        from isochron.temporal.field import ChronoField

        if isinstance(field, ChronoField):
            if field not in self._FIELDS:
                raise UnsupportedFieldError(f"Unsupported field: {field}")
            return self._range_of(field)
        return field.range_refined_by(self)

    def get(self, field: TemporalField) -> int:
        """Return the value of the field.

        Raises:
            UnsupportedFieldError: If the field is not supported.
        """
        from isochron.temporal.field import ChronoField

        if isinstance(field, ChronoField):
            if field not in self._FIELDS:
                raise UnsupportedFieldError(f"Unsupported field: {field}")
            return self._get_field(field)
        return field.get_from(self)

    def _range_of(self, field: Any) -> ValueRange:
        return field.range()

    def _get_field(self, field: Any) -> int:
        raise NotImplementedError


class Temporal(TemporalAccessor):
    """A temporal value that can be adjusted and moved along the timeline.

    Subclasses list the ChronoUnits they support in ``_UNITS`` and
    implement ``_with_field``, ``_plus_unit`` and ``until``.
    """

    __slots__ = ()

    def with_field(self, field: TemporalField, value: int) -> Any:
        """Return a copy with the field set to value.

        Raises:
            UnsupportedFieldError: If the field is not supported.
            FieldOutOfRangeError: If the value is invalid for the field.
        """
        from isochron.temporal.field import ChronoField

        if isinstance(field, ChronoField):
            if field not in self._FIELDS:
                raise UnsupportedFieldError(f"Unsupported field: {field}")
            return self._with_field(field, value)
        return field.adjust_into(self, value)

    def plus(self, amount: Any, unit: TemporalUnit | None = None) -> Any:
        """Return a copy with the amount added.

        Args:
            amount: A TemporalAmount (Duration, Period) when unit is None,
                otherwise an integer count of unit.
            unit: The unit of amount.

        Raises:
            UnsupportedFieldError: If the unit is not supported.
        """
        from isochron.temporal.unit import ChronoUnit

        if unit is None:
            if not isinstance(amount, TemporalAmount):
                raise TypeError(
                    f"expected a TemporalAmount, got {type(amount).__name__}"
                )
            return amount.add_to(self)
        if isinstance(unit, ChronoUnit):
            if unit not in self._UNITS:
                raise UnsupportedFieldError(f"Unsupported unit: {unit}")
            return self._plus_unit(amount, unit)
        return unit.add_to(self, amount)

    def minus(self, amount: Any, unit: TemporalUnit | None = None) -> Any:
        """Return a copy with the amount subtracted."""
        if unit is None:
            if not isinstance(amount, TemporalAmount):
                raise TypeError(
                    f"expected a TemporalAmount, got {type(amount).__name__}"
                )
            return amount.subtract_from(self)
        return self.plus(-amount, unit)

    def until(self, end: Any, unit: TemporalUnit) -> int:
        raise NotImplementedError

    def _with_field(self, field: Any, value: int) -> Any:
        raise NotImplementedError

    def _plus_unit(self, amount: int, unit: Any) -> Any:
        raise NotImplementedError


__all__ = [
    "TemporalUnit",
    "TemporalField",
    "TemporalAmount",
    "TemporalAccessor",
    "Temporal",
]
