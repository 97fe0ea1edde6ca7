"""JSON serialization and deserialization for temporal objects.

This module converts isochron values to and from JSON-serializable
dictionaries.

Functions:
    to_json: Convert a temporal object to a JSON-serializable dict.
    from_json: Create a temporal object from a JSON dict.

Every dict carries a ``_type`` tag naming the class and a ``value``
holding its ISO 8601 text:

    {"_type": "LocalDate", "value": "2024-01-15"}
    {"_type": "ZonedDateTime", "value": "2024-03-31T03:30+02:00[Europe/Paris]"}
    {"_type": "Duration", "value": "PT2H30M", "total_nanos": 9000000000000}
    {"_type": "ChronoDate", "chronology": "Minguo", "value": "2024-01-15"}

A ChronoDate stores the ISO date of the same day; ``chronology`` names
the calendar to convert it back into.

Examples:
    >>> from isochron import LocalDateTime
    >>> from isochron.convert import to_json, from_json

    >>> dt = LocalDateTime(2024, 1, 15, 14, 30, 45)
    >>> data = to_json(dt)
    >>> data['_type']
    'LocalDateTime'

    >>> from_json(data) == dt
    True
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from isochron.errors import ParseError


@lru_cache(maxsize=1)
def _value_types() -> dict[str, type]:
    # Import here to avoid circular imports
    from isochron.core.duration import Duration
    from isochron.core.instant import Instant
    from isochron.core.local_date import LocalDate
    from isochron.core.local_date_time import LocalDateTime
    from isochron.core.local_time import LocalTime
    from isochron.core.month_day import MonthDay
    from isochron.core.offset_date_time import OffsetDateTime
    from isochron.core.offset_time import OffsetTime
    from isochron.core.period import Period
    from isochron.core.year import Year
    from isochron.core.year_month import YearMonth
    from isochron.core.zoned_date_time import ZonedDateTime

    return {
        cls.__name__: cls
        for cls in (
            Instant,
            LocalDate,
            LocalTime,
            LocalDateTime,
            OffsetTime,
            OffsetDateTime,
            ZonedDateTime,
            Year,
            YearMonth,
            MonthDay,
            Duration,
            Period,
        )
    }


def to_json(value: Any) -> dict[str, Any]:
    """Convert a temporal object to a JSON-serializable dictionary.

    Args:
        value: Any isochron value type, a ChronoDate, or a ZoneId.

    Returns:
        A dictionary with ``_type`` and ``value`` keys, plus
        ``total_nanos`` for a Duration and ``chronology`` for a
        ChronoDate.

    Raises:
        TypeError: If value is not a supported temporal type.

    Examples:
        >>> from isochron import Duration, LocalDate
        >>> to_json(LocalDate(2024, 1, 15))
        {'_type': 'LocalDate', 'value': '2024-01-15'}

        >>> to_json(Duration.of_minutes(90))
        {'_type': 'Duration', 'value': 'PT1H30M', 'total_nanos': 5400000000000}
    """
    # Import here to avoid circular imports
    from isochron.chrono.chrono_date import ChronoDate
    from isochron.core.duration import Duration
    from isochron.zone.offset import ZoneOffset
    from isochron.zone.zone_id import ZoneId

    if isinstance(value, ChronoDate):
        return {
            "_type": "ChronoDate",
            "chronology": value.chronology.id,
            "value": value.to_local_date().to_iso_format(),
        }
    elif isinstance(value, Duration):
        return {
            "_type": "Duration",
            "value": value.to_iso_format(),
            "total_nanos": value.to_nanos(),
        }
    elif isinstance(value, ZoneOffset):
        return {"_type": "ZoneOffset", "value": value.id}
    elif isinstance(value, ZoneId):
        return {"_type": "ZoneId", "value": value.id}

    type_name = type(value).__name__
    if _value_types().get(type_name) is not type(value):
        raise TypeError(f"expected an isochron temporal value, got {type_name}")
    return {"_type": type_name, "value": value.to_iso_format()}


def from_json(data: dict[str, Any]) -> Any:
    """Create a temporal object from a JSON dictionary.

    Args:
        data: A dictionary produced by ``to_json``.

    Returns:
        The value named by the ``_type`` field.

    Raises:
        ParseError: If the data is missing required fields or the text
            is malformed.
        TypeError: If ``_type`` is not a recognized temporal type.
        ValidationError: If a ChronoDate names an unknown chronology.

    Examples:
        >>> from_json({'_type': 'LocalDate', 'value': '2024-01-15'})
        LocalDate(2024, 1, 15)

        >>> from_json({'_type': 'ChronoDate', 'chronology': 'Minguo',
        ...            'value': '2024-01-15'})
        ChronoDate('Minguo', 113, 1, 15)
    """
    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")

    if type_name == "Duration":
        # Prefer total_nanos for exact precision
        total_nanos = data.get("total_nanos")
        if total_nanos is not None:
            # Import here to avoid circular imports
            from isochron.core.duration import Duration

            return Duration.of_nanos(total_nanos)

    value = data.get("value")
    if not value or not isinstance(value, str):
        raise ParseError(f"missing 'value' field for {type_name}")

    if type_name == "ChronoDate":
        return _chrono_date_from_json(data, value)
    elif type_name == "ZoneOffset":
        from isochron.zone.offset import ZoneOffset

        return ZoneOffset.of(value)
    elif type_name == "ZoneId":
        from isochron.zone.zone_id import ZoneId

        return ZoneId.of(value)

    cls = _value_types().get(type_name)
    if cls is None:
        raise TypeError(f"unknown temporal type: {type_name!r}")
    return cls.from_iso_format(value)


def _chrono_date_from_json(data: dict[str, Any], value: str) -> Any:
    from isochron.chrono.chronology import Chronology
    from isochron.core.local_date import LocalDate

    chronology_id = data.get("chronology")
    if not chronology_id:
        raise ParseError("missing 'chronology' field for ChronoDate")
    return Chronology.of(chronology_id).date_from(LocalDate.from_iso_format(value))


__all__ = ["to_json", "from_json"]
