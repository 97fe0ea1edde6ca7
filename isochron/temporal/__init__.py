"""Fields, units and the interfaces temporal types are built on.

Classes:
    ChronoField, ChronoUnit: The standard fields and units.
    ValueRange: The valid values of a field.
    IsoFields: Quarter and week-based-year fields.
    JulianFields: Julian day, modified Julian day and rata die.
    ResolverStyle, resolve_fields: Field map resolution.
    TemporalField, TemporalUnit, TemporalAmount, TemporalAccessor,
    Temporal: Interfaces shared by all temporal types.
"""

from __future__ import annotations

from isochron.temporal.base import (
    Temporal,
    TemporalAccessor,
    TemporalAmount,
    TemporalField,
    TemporalUnit,
)
from isochron.temporal.unit import ChronoUnit
from isochron.temporal.value_range import ValueRange
from isochron.temporal.field import ChronoField
from isochron.temporal.resolver import ResolvedFields, ResolverStyle, resolve_fields
from isochron.temporal.iso_fields import IsoFields
from isochron.temporal.julian_fields import JulianFields

__all__: list[str] = [
    "ChronoField",
    "ChronoUnit",
    "ValueRange",
    "IsoFields",
    "JulianFields",
    "ResolverStyle",
    "ResolvedFields",
    "resolve_fields",
    "Temporal",
    "TemporalAccessor",
    "TemporalAmount",
    "TemporalField",
    "TemporalUnit",
]
