"""Temporal conversion utilities.

Functions:
    to_json: Convert a temporal object to a type-tagged dict.
    from_json: Create a temporal object from a type-tagged dict.

Examples:
    >>> from isochron import LocalDate
    >>> from isochron.convert import to_json, from_json

    >>> from_json(to_json(LocalDate(2024, 1, 15)))
    LocalDate(2024, 1, 15)
"""

from __future__ import annotations

from isochron.convert.json import from_json, to_json

__all__: list[str] = [
    "to_json",
    "from_json",
]
