"""ISO 8601 text formats.

Functions:
    parse_iso8601: Parse an ISO 8601 string into a temporal object.
    format_iso8601: Format a temporal object as an ISO 8601 string.
"""

from __future__ import annotations

from isochron.format.iso8601 import format_iso8601, parse_iso8601

__all__: list[str] = [
    "format_iso8601",
    "parse_iso8601",
]
