"""Fixed offsets from UTC.

ZoneOffset is both a ZoneId (with rules that never change) and a
temporal accessor exposing the OFFSET_SECONDS field.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from isochron._internal.constants import (
    MAX_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from isochron.errors import FieldOutOfRangeError, ParseError
from isochron.format.iso8601 import format_offset_id
from isochron.temporal.base import TemporalAccessor
from isochron.temporal.field import ChronoField
from isochron.zone.zone_id import ZoneId

if TYPE_CHECKING:
    from isochron.zone.rules import ZoneRules

_CACHE: dict[int, ZoneOffset] = {}
_CACHE_LOCK = threading.Lock()


def _check_part(name: str, value: int, limit: int) -> None:
    if value < -limit or value > limit:
        raise FieldOutOfRangeError(
            f"Zone offset {name} not in valid range: value {value} is not in "
            f"the range {-limit} to {limit}",
            value=value,
        )


class ZoneOffset(ZoneId, TemporalAccessor):
    """A time-zone offset from UTC, such as ``+02:00``.

    Offsets range from -18:00 to +18:00. Instances are cached, so equal
    offsets are usually the same object.

    Offsets sort in descending order of their total seconds, matching
    the order in which the same local time occurs on the time-line:
    ``+02:00`` sorts before ``+01:00``.

    Examples:
        >>> ZoneOffset.of("+05:30").total_seconds
        19800
        >>> ZoneOffset.of_hours(0) is ZoneOffset.UTC
        True
    """

    __slots__ = ("_total_seconds", "_id", "_rules")

    _FIELDS = frozenset({ChronoField.OFFSET_SECONDS})

    UTC: ZoneOffset
    MIN: ZoneOffset
    MAX: ZoneOffset

    def __init__(self, total_seconds: int) -> None:
        if abs(total_seconds) > MAX_OFFSET_SECONDS:
            raise FieldOutOfRangeError(
                "Zone offset not in valid range: -18:00 to +18:00",
                ChronoField.OFFSET_SECONDS,
                total_seconds,
            )
        self._total_seconds = total_seconds
        self._id = format_offset_id(total_seconds)
        self._rules: ZoneRules | None = None

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> ZoneOffset:
        """Obtain an offset from a total number of seconds.

        Raises:
            FieldOutOfRangeError: If the offset exceeds 18 hours.
        """
        offset = _CACHE.get(total_seconds)
        if offset is None:
            offset = cls(total_seconds)
            with _CACHE_LOCK:
                offset = _CACHE.setdefault(total_seconds, offset)
        return offset

    @classmethod
    def of_hours(cls, hours: int) -> ZoneOffset:
        return cls.of_hours_minutes_seconds(hours, 0, 0)

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int) -> ZoneOffset:
        return cls.of_hours_minutes_seconds(hours, minutes, 0)

    @classmethod
    def of_hours_minutes_seconds(cls, hours: int, minutes: int, seconds: int) -> ZoneOffset:
        """Obtain an offset from hours, minutes and seconds.

        All non-zero parts must share the same sign.

        Raises:
            FieldOutOfRangeError: If a part is out of range or the signs
                disagree.
        """
        _check_part("hours", hours, 18)
        if hours > 0:
            if minutes < 0 or seconds < 0:
                raise FieldOutOfRangeError(
                    "Zone offset minutes and seconds must be positive because hours is positive"
                )
        elif hours < 0:
            if minutes > 0 or seconds > 0:
                raise FieldOutOfRangeError(
                    "Zone offset minutes and seconds must be negative because hours is negative"
                )
        elif (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
            raise FieldOutOfRangeError("Zone offset minutes and seconds must have the same sign")
        _check_part("minutes", minutes, 59)
        _check_part("seconds", seconds, 59)
        if abs(hours) == 18 and (minutes or seconds):
            raise FieldOutOfRangeError("Zone offset not in valid range: -18:00 to +18:00")
        return cls.of_total_seconds(
            hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        )

    @classmethod
    def of(cls, offset_id: str) -> ZoneOffset:
        """Parse an offset ID.

        Accepted forms are ``Z``, ``+h``, ``+hh``, ``+hh:mm``, ``+hhmm``,
        ``+hh:mm:ss`` and ``+hhmmss``, with either sign.

        Raises:
            ParseError: If the text is not a valid offset ID.
            FieldOutOfRangeError: If the offset exceeds 18 hours.

        Examples:
            >>> ZoneOffset.of("-0830")
            ZoneOffset('-08:30')
        """
        if offset_id == "Z":
            return cls.UTC
        length = len(offset_id)
        if length == 2:
            text = f"{offset_id[0]}0{offset_id[1]}"
        else:
            text = offset_id
        length = len(text)
        if length == 3:
            parts = (text[1:3], "00", "00")
        elif length == 5:
            parts = (text[1:3], text[3:5], "00")
        elif length == 6 and text[3] == ":":
            parts = (text[1:3], text[4:6], "00")
        elif length == 7:
            parts = (text[1:3], text[3:5], text[5:7])
        elif length == 9 and text[3] == ":" and text[6] == ":":
            parts = (text[1:3], text[4:6], text[7:9])
        else:
            raise ParseError(f"Invalid ID for ZoneOffset, invalid format: {offset_id}", offset_id)
        if text[0] not in "+-" or not all(part.isascii() and part.isdigit() for part in parts):
            raise ParseError(f"Invalid ID for ZoneOffset, invalid format: {offset_id}", offset_id)
        hours, minutes, seconds = (int(part) for part in parts)
        if text[0] == "-":
            hours, minutes, seconds = -hours, -minutes, -seconds
        return cls.of_hours_minutes_seconds(hours, minutes, seconds)

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def id(self) -> str:
        return self._id

    @property
    def rules(self) -> ZoneRules:
        """Return rules that always answer this offset."""
        if self._rules is None:
            # Import here to avoid circular imports
            from isochron.zone.rules import ZoneRules

            self._rules = ZoneRules.of(self)
        return self._rules

    def _get_field(self, field: ChronoField) -> int:
        return self._total_seconds

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ZoneOffset):
            return self._total_seconds == other._total_seconds
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds > other._total_seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds >= other._total_seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds < other._total_seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds <= other._total_seconds

    def __repr__(self) -> str:
        return f"ZoneOffset({self._id!r})"


ZoneOffset.UTC = ZoneOffset.of_total_seconds(0)
ZoneOffset.MIN = ZoneOffset.of_total_seconds(-MAX_OFFSET_SECONDS)
ZoneOffset.MAX = ZoneOffset.of_total_seconds(MAX_OFFSET_SECONDS)


__all__ = ["ZoneOffset"]
