"""Isochron exception hierarchy.

All Isochron-specific exceptions inherit from IsochronError.
"""

from __future__ import annotations


class IsochronError(Exception):
    """Base exception for all Isochron errors."""

    pass


class ValidationError(IsochronError):
    """Invalid input values.

    Raised when a temporal value is out of range or a combination of
    field values cannot be resolved.

    Examples:
        - Conflicting values while resolving a field map
        - Unknown chronology identifier
    """

    pass


class FieldOutOfRangeError(ValidationError):
    """A single field value lies outside its valid range.

    Examples:
        - Month value outside 1-12
        - Hour value outside 0-23
        - Offset outside -18:00 to +18:00
    """

    def __init__(self, message: str, field: object = None, value: int | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidDateError(ValidationError):
    """Field values that are individually valid but do not form a date.

    Examples:
        - February 30
        - February 29 in a non-leap year
    """

    pass


class ParseError(IsochronError):
    """Failed to parse string representation.

    Raised when a string deviates from the ISO 8601 grammar expected
    for the target type.

    Attributes:
        text: The text that failed to parse.
        index: The position at which parsing failed, 0 when unknown.
    """

    def __init__(self, message: str, text: str = "", index: int = 0) -> None:
        super().__init__(message)
        self.text = text
        self.index = index


class OverflowError(IsochronError):
    """Arithmetic operation exceeded representable range.

    Examples:
        - Adding a duration that moves an instant past the maximum
        - A Duration whose seconds no longer fit a signed 64-bit value
    """

    pass


class UnsupportedFieldError(IsochronError):
    """A field or unit is not supported by the temporal type.

    Examples:
        - Asking a LocalDate for HOUR_OF_DAY
        - Adding HOURS to a YearMonth
    """

    pass


class ZoneRulesError(IsochronError):
    """Invalid or unknown zone, or malformed zone rule data.

    Examples:
        - Unknown region identifier
        - Corrupt TZif file
    """

    pass


class UnresolvedLocalTimeError(ZoneRulesError):
    """A local date-time falls in a gap or overlap rejected by policy.

    Attributes:
        transition: The ZoneOffsetTransition that caused the failure.
    """

    def __init__(self, message: str, transition: object = None) -> None:
        super().__init__(message)
        self.transition = transition


__all__ = [
    "IsochronError",
    "ValidationError",
    "FieldOutOfRangeError",
    "InvalidDateError",
    "ParseError",
    "OverflowError",
    "UnsupportedFieldError",
    "ZoneRulesError",
    "UnresolvedLocalTimeError",
]
