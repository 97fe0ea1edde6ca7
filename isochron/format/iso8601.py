"""ISO 8601 formatting and parsing.

This module holds the grammar shared by every temporal type, plus two
convenience functions that dispatch on the shape of the text or the
type of the value.

Functions:
    parse_iso8601: Parse an ISO 8601 string into a temporal object.
    format_iso8601: Format a temporal object as an ISO 8601 string.

Supported forms:

Dates:
    - YYYY-MM-DD
    - -YYYY-MM-DD (years before year 0 carry a minus sign)
    - +YYYYY-MM-DD (years past 9999 carry a plus sign, up to 9 digits)

Times:
    - HH:MM
    - HH:MM:SS
    - HH:MM:SS.f (fractional seconds, 1-9 digits)

Date-times:
    - date'T'time
    - date'T'time followed by Z or +HH:MM[:SS]
    - any of the above followed by [Region/City]

Formatting omits zero seconds and prints fractions in groups of three
digits, so ``10:15`` and ``10:15:30.120`` are produced rather than
``10:15:00`` and ``10:15:30.12``.

Examples:
    >>> from isochron.format import parse_iso8601, format_iso8601
    >>> parse_iso8601("2024-01-15")
    LocalDate(2024, 1, 15)

    >>> format_iso8601(parse_iso8601("2024-01-15T14:30:45Z"))
    '2024-01-15T14:30:45Z'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Union

from isochron._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from isochron.errors import ParseError

if TYPE_CHECKING:
    from isochron.core.local_date import LocalDate
    from isochron.core.local_date_time import LocalDateTime
    from isochron.core.local_time import LocalTime
    from isochron.core.offset_date_time import OffsetDateTime
    from isochron.core.zoned_date_time import ZonedDateTime

# Type alias for the values parse_iso8601 can produce
TemporalType = Union[
    "LocalDate", "LocalTime", "LocalDateTime", "OffsetDateTime", "ZonedDateTime"
]

# Grammars are sequences of regex parts; a nested tuple is an optional
# group that is entered once its first part matches.
YEAR_PART = r"(?P<year>[+-]\d{4,9}|\d{4})"
DATE_PARTS = (YEAR_PART, "-", r"(?P<month>\d{2})", "-", r"(?P<day>\d{2})")
TIME_PARTS = (
    r"(?P<hour>\d{2})",
    ":",
    r"(?P<minute>\d{2})",
    (":", r"(?P<second>\d{2})", (r"\.", r"(?P<fraction>\d{1,9})")),
)
OFFSET_PART = r"(?P<offset>[Zz]|[+-]\d{2}:\d{2}(?::\d{2})?)"
ZONE_PARTS = (r"\[", r"(?P<zone>[^\[\]]+)", r"\]")


def _source(parts: tuple[Any, ...]) -> str:
    pieces = []
    for part in parts:
        if isinstance(part, tuple):
            pieces.append(f"(?:{_source(part)})?")
        else:
            pieces.append(part)
    return "".join(pieces)


def _walk(parts: tuple[Any, ...], text: str, pos: int) -> tuple[int, bool]:
    """Match parts one by one from pos.

    Returns the position reached and whether every required part matched.
    """
    for part in parts:
        if isinstance(part, tuple):
            if re.compile(_source(part[:1]), re.ASCII).match(text, pos) is None:
                continue
            pos, matched = _walk(part, text, pos)
        else:
            match = re.compile(part, re.ASCII).match(text, pos)
            matched = match is not None
            if matched:
                pos = match.end()
        if not matched:
            return pos, False
    return pos, True


class _Grammar:
    """One ISO 8601 form, matched whole or diagnosed part by part."""

    def __init__(self, kind: str, *parts: Any) -> None:
        self.kind = kind
        self.parts = parts
        self.pattern = re.compile(_source(parts), re.ASCII)

    def error_index(self, text: str) -> int:
        """Return the index where the text stops matching the grammar.

        This is the start of the first field or separator that does not
        match, so ``2024-1-15`` fails at 5. Trailing text after a complete
        match fails at its first character.
        """
        pos, _ = _walk(self.parts, text, 0)
        return pos

    def fullmatch(self, text: str) -> re.Match[str] | None:
        return self.pattern.fullmatch(text)


_DATE = _Grammar("a date", *DATE_PARTS)
_TIME = _Grammar("a time", *TIME_PARTS)
_DATE_TIME = _Grammar("a date-time", *DATE_PARTS, "[Tt]", *TIME_PARTS)
_ZONED = _Grammar(
    "a zoned date-time", *DATE_PARTS, "[Tt]", *TIME_PARTS, OFFSET_PART, ZONE_PARTS
)
_OFFSET_TIME = _Grammar("an offset time", *TIME_PARTS, OFFSET_PART)
_YEAR = _Grammar("a year", YEAR_PART)
_YEAR_MONTH = _Grammar("a year-month", YEAR_PART, "-", r"(?P<month>\d{2})")
_MONTH_DAY = _Grammar("a month-day", "--", r"(?P<month>\d{2})", "-", r"(?P<day>\d{2})")


def format_year(year: int) -> str:
    """Format a proleptic year with at least four digits.

    Examples:
        >>> format_year(2024)
        '2024'
        >>> format_year(-44)
        '-0044'
        >>> format_year(12345)
        '+12345'
    """
    if abs(year) < 1000:
        if year < 0:
            return f"-{-year:04d}"
        return f"{year:04d}"
    if year > 9999:
        return f"+{year}"
    return str(year)


def format_date(year: int, month: int, day: int) -> str:
    """Format a date as uuuu-MM-dd."""
    return f"{format_year(year)}-{month:02d}-{day:02d}"


def format_fraction(nanos: int) -> str:
    """Format nano-of-second as a fraction in groups of three digits.

    Returns an empty string when nanos is zero.

    Examples:
        >>> format_fraction(500_000_000)
        '.500'
        >>> format_fraction(1_000)
        '.000001'
    """
    if nanos == 0:
        return ""
    if nanos % NANOS_PER_MILLISECOND == 0:
        return f".{nanos // NANOS_PER_MILLISECOND:03d}"
    if nanos % NANOS_PER_MICROSECOND == 0:
        return f".{nanos // NANOS_PER_MICROSECOND:06d}"
    return f".{nanos:09d}"


def format_time(
    hour: int, minute: int, second: int, nanos: int, always_seconds: bool = False
) -> str:
    """Format a time of day as HH:mm[:ss[.fff]].

    Seconds are omitted when both seconds and nanos are zero, unless
    always_seconds is set.
    """
    text = f"{hour:02d}:{minute:02d}"
    if second or nanos or always_seconds:
        text += f":{second:02d}{format_fraction(nanos)}"
    return text


def format_offset_id(total_seconds: int) -> str:
    """Format an offset in seconds as Z or +HH:MM[:SS].

    Examples:
        >>> format_offset_id(0)
        'Z'
        >>> format_offset_id(-(5 * 3600 + 30 * 60))
        '-05:30'
    """
    if total_seconds == 0:
        return "Z"
    sign = "-" if total_seconds < 0 else "+"
    absolute = abs(total_seconds)
    hours = absolute // SECONDS_PER_HOUR
    minutes = absolute // SECONDS_PER_MINUTE % 60
    seconds = absolute % 60
    text = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        text += f":{seconds:02d}"
    return text


def _fail(kind: str, text: str, index: int = 0) -> ParseError:
    return ParseError(
        f"Text {text!r} could not be parsed as {kind} at index {index}", text, index
    )


def _year(match: re.Match[str], text: str, kind: str) -> int:
    year_text = match.group("year")
    if year_text[0] == "+" and len(year_text) == 5:
        # A plus sign is only used for years that exceed four digits
        raise _fail(kind, text, match.start("year"))
    return int(year_text)


def _time_fields(match: re.Match[str]) -> tuple[int, int, int, int]:
    second = match.group("second")
    fraction = match.group("fraction")
    nanos = int(fraction.ljust(9, "0")) if fraction else 0
    return (
        int(match.group("hour")),
        int(match.group("minute")),
        int(second) if second else 0,
        nanos,
    )


def _match(grammar: _Grammar, text: str) -> re.Match[str]:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    match = grammar.fullmatch(text)
    if match is None:
        raise _fail(grammar.kind, text, grammar.error_index(text))
    return match


def parse_date(text: str) -> tuple[int, int, int]:
    """Parse uuuu-MM-dd into (year, month, day).

    Raises:
        ParseError: If the text is not an ISO 8601 date.
    """
    match = _match(_DATE, text)
    return _year(match, text, "a date"), int(match.group("month")), int(match.group("day"))


def parse_time(text: str) -> tuple[int, int, int, int]:
    """Parse HH:mm[:ss[.fffffffff]] into (hour, minute, second, nanos).

    Raises:
        ParseError: If the text is not an ISO 8601 time.
    """
    return _time_fields(_match(_TIME, text))


def parse_date_time(text: str) -> tuple[tuple[int, int, int], tuple[int, int, int, int]]:
    """Parse a local date-time into ((y, m, d), (h, mi, s, n))."""
    match = _match(_DATE_TIME, text)
    date = (
        _year(match, text, "a date-time"),
        int(match.group("month")),
        int(match.group("day")),
    )
    return date, _time_fields(match)


def parse_offset_seconds(offset_text: str) -> int:
    """Convert Z or +HH:MM[:SS] text to a signed number of seconds.

    The text must already have matched OFFSET_PART; range checks are
    left to ZoneOffset.
    """
    if offset_text in ("Z", "z"):
        return 0
    sign = -1 if offset_text[0] == "-" else 1
    parts = [int(part) for part in offset_text[1:].split(":")]
    hours, minutes = parts[0], parts[1]
    seconds = parts[2] if len(parts) > 2 else 0
    if minutes > 59:
        raise _fail("an offset", offset_text, 4)
    if seconds > 59:
        raise _fail("an offset", offset_text, 7)
    return sign * (hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds)


def parse_zoned(
    text: str,
) -> tuple[tuple[int, int, int], tuple[int, int, int, int], int, str | None]:
    """Parse date'T'time offset [zone] into its parts.

    Returns:
        ((year, month, day), (hour, minute, second, nanos),
        offset_seconds, zone_id or None).
    """
    match = _match(_ZONED, text)
    date = (
        _year(match, text, "a zoned date-time"),
        int(match.group("month")),
        int(match.group("day")),
    )
    return (
        date,
        _time_fields(match),
        parse_offset_seconds(match.group("offset")),
        match.group("zone"),
    )


def parse_year(text: str) -> int:
    """Parse uuuu into a proleptic year."""
    return _year(_match(_YEAR, text), text, "a year")


def parse_year_month(text: str) -> tuple[int, int]:
    """Parse uuuu-MM into (year, month)."""
    match = _match(_YEAR_MONTH, text)
    return _year(match, text, "a year-month"), int(match.group("month"))


def parse_month_day(text: str) -> tuple[int, int]:
    """Parse --MM-dd into (month, day)."""
    match = _match(_MONTH_DAY, text)
    return int(match.group("month")), int(match.group("day"))


def parse_offset_time(text: str) -> tuple[tuple[int, int, int, int], int]:
    """Parse HH:mm[:ss[.f]] followed by an offset."""
    match = _match(_OFFSET_TIME, text)
    return _time_fields(match), parse_offset_seconds(match.group("offset"))


def parse_iso8601(s: str) -> TemporalType:
    """Parse an ISO 8601 string into a temporal object.

    Detects the kind of value from the shape of the text.

    Args:
        s: The ISO 8601 string to parse.

    Returns:
        LocalDate, LocalTime, LocalDateTime, OffsetDateTime (offset
        without a zone id) or ZonedDateTime (with a bracketed zone id).

    Raises:
        ParseError: If the string is not valid ISO 8601 format.

    Examples:
        >>> parse_iso8601("14:30:45")
        LocalTime(14, 30, 45)

        >>> type(parse_iso8601("2024-01-15T14:30:45+01:00")).__name__
        'OffsetDateTime'
    """
    # Import here to avoid circular imports
    from isochron.core.local_date import LocalDate
    from isochron.core.local_date_time import LocalDateTime
    from isochron.core.local_time import LocalTime
    from isochron.core.offset_date_time import OffsetDateTime
    from isochron.core.zoned_date_time import ZonedDateTime

    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    s = s.strip()
    if not s:
        raise ParseError("empty string", s, 0)

    if "T" in s or "t" in s:
        if s.endswith("]"):
            return ZonedDateTime.from_iso_format(s)
        if _DATE_TIME.fullmatch(s):
            return LocalDateTime.from_iso_format(s)
        return OffsetDateTime.from_iso_format(s)
    if ":" in s:
        return LocalTime.from_iso_format(s)
    return LocalDate.from_iso_format(s)


def format_iso8601(value: Any) -> str:
    """Format a temporal object as an ISO 8601 string.

    Args:
        value: Any isochron value with a ``to_iso_format`` method.

    Returns:
        ISO 8601 formatted string.

    Raises:
        TypeError: If the value cannot be formatted.

    Examples:
        >>> from isochron import LocalDate
        >>> format_iso8601(LocalDate(2024, 1, 15))
        '2024-01-15'
    """
    formatter = getattr(value, "to_iso_format", None)
    if formatter is None:
        raise TypeError(f"cannot format {type(value).__name__} as ISO 8601")
    return formatter()


__all__ = [
    "TemporalType",
    "format_year",
    "format_date",
    "format_fraction",
    "format_time",
    "format_offset_id",
    "parse_date",
    "parse_time",
    "parse_date_time",
    "parse_offset_seconds",
    "parse_zoned",
    "parse_offset_time",
    "parse_iso8601",
    "format_iso8601",
]
