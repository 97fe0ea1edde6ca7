"""Internal utilities for Isochron.

This module contains private implementation details:
    - Constants and magic numbers
    - Epoch-day calendar conversions
    - Truncating integer arithmetic
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from isochron._internal.validation import (
    validate_date,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "validate_date",
    "validate_month",
    "validate_range",
    "validate_year",
]
