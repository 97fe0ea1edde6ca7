"""Era enumerations for the supported calendar systems.

This module provides one era enum per chronology. Each era carries the
integer value used by the ERA field, so ``IsoEra(0)`` is the era
before year 1.
"""

from __future__ import annotations

from enum import Enum

from isochron._internal.validation import validate_range


class IsoEra(Enum):
    """Era of the ISO and Julian calendar systems.

    Year 0 exists in proleptic numbering and belongs to BCE, so the
    year-of-era of proleptic year 0 is 1 BCE.

    Examples:
        >>> IsoEra.CE.value
        1
        >>> IsoEra.of(0)
        <IsoEra.BCE: 0>
    """

    BCE = 0  # Before Common Era
    CE = 1  # Common Era

    @classmethod
    def of(cls, value: int) -> IsoEra:
        """Return the era for an ERA field value (0 or 1)."""
        validate_range("era", value, 0, 1)
        return cls(value)

    @property
    def is_before_common_era(self) -> bool:
        """Return True if this era is Before Common Era."""
        return self is IsoEra.BCE


class MinguoEra(Enum):
    """Era of the Minguo (Republic of China) calendar.

    Year 1 of the ROC era is ISO year 1912.
    """

    BEFORE_ROC = 0
    ROC = 1

    @classmethod
    def of(cls, value: int) -> MinguoEra:
        """Return the era for an ERA field value (0 or 1)."""
        validate_range("era", value, 0, 1)
        return cls(value)


class ThaiBuddhistEra(Enum):
    """Era of the Thai Buddhist calendar.

    Year 1 of the Buddhist era is ISO year -542.
    """

    BEFORE_BE = 0
    BE = 1

    @classmethod
    def of(cls, value: int) -> ThaiBuddhistEra:
        """Return the era for an ERA field value (0 or 1)."""
        validate_range("era", value, 0, 1)
        return cls(value)


__all__ = ["IsoEra", "MinguoEra", "ThaiBuddhistEra"]
