"""Decoder for compiled time-zone information files.

TZif files (RFC 8536) are the binary format produced by ``zic`` and
shipped both by operating systems under ``/usr/share/zoneinfo`` and by
the ``tzdata`` package. A file holds a list of transition instants, the
local time types they switch to, and for version 2 and later a POSIX TZ
string footer describing the rules for times after the last transition.

Leap second records are read past but not applied.
"""

from __future__ import annotations

import logging
import re
import struct
from typing import NamedTuple

from isochron._internal.constants import (
    DAYS_IN_MONTH,
    MAX_INSTANT_SECOND,
    MIN_INSTANT_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from isochron.errors import FieldOutOfRangeError, ZoneRulesError
from isochron.units.day_of_week import DayOfWeek
from isochron.units.month import Month
from isochron.zone.offset import ZoneOffset
from isochron.zone.rules import ZoneRules
from isochron.zone.transition import (
    TimeDefinition,
    ZoneOffsetTransition,
    ZoneOffsetTransitionRule,
)

logger = logging.getLogger(__name__)

_MAGIC = b"TZif"
_HEADER = struct.Struct(">4sc15x6l")
_TTINFO = struct.Struct(">lBB")

# Transitions this far from the ends of the instant range cannot be
# turned into local date-times and are folded into the initial state.
_MIN_TRANSITION = MIN_INSTANT_SECOND + 2 * SECONDS_PER_DAY
_MAX_TRANSITION = MAX_INSTANT_SECOND - 2 * SECONDS_PER_DAY

_NAME = r"(?:<[A-Za-z0-9+-]+>|[A-Za-z]{3,})"
_OFFSET = r"[+-]?\d{1,3}(?::\d{2}(?::\d{2})?)?"
_DATE = r"(?:J\d{1,3}|\d{1,3}|M\d{1,2}\.\d\.\d)"
_POSIX_TZ = re.compile(
    rf"(?P<std>{_NAME})(?P<std_offset>{_OFFSET})"
    rf"(?:(?P<dst>{_NAME})(?P<dst_offset>{_OFFSET})?"
    rf"(?:,(?P<start>{_DATE})(?:/(?P<start_time>{_OFFSET}))?"
    rf",(?P<end>{_DATE})(?:/(?P<end_time>{_OFFSET}))?)?)?",
    re.ASCII,
)

_DEFAULT_RULE_TIME = 2 * SECONDS_PER_HOUR


class TzifData(NamedTuple):
    """The raw content of a TZif file.

    Attributes:
        version: The format version, 1 to 4.
        transition_times: Transition instants in epoch seconds.
        transition_types: Index into ``types`` for each transition.
        types: (utc_offset_seconds, is_dst, abbreviation) per local time type.
        footer: The POSIX TZ string, empty when absent.
    """

    version: int
    transition_times: list[int]
    transition_types: list[int]
    types: list[tuple[int, bool, str]]
    footer: str


def _invalid(zone_id: str, reason: str) -> ZoneRulesError:
    return ZoneRulesError(f"Invalid TZif data for {zone_id or '<unknown>'}: {reason}")


def _read_block(
    data: bytes, start: int, counts: tuple[int, ...], time_size: int, zone_id: str
) -> tuple[list[int], list[int], list[tuple[int, bool, str]], int]:
    isutcnt, isstdcnt, leapcnt, timecnt, typecnt, charcnt = counts
    if typecnt == 0:
        raise _invalid(zone_id, "no local time types")
    time_format = ">" + ("q" if time_size == 8 else "l") * timecnt
    size = (
        timecnt * time_size
        + timecnt
        + typecnt * _TTINFO.size
        + charcnt
        + leapcnt * (time_size + 4)
        + isstdcnt
        + isutcnt
    )
    if start + size > len(data):
        raise _invalid(zone_id, "truncated data block")
    pos = start
    times = list(struct.unpack_from(time_format, data, pos))
    pos += timecnt * time_size
    indices = list(data[pos:pos + timecnt])
    pos += timecnt
    raw_types = []
    for _ in range(typecnt):
        raw_types.append(_TTINFO.unpack_from(data, pos))
        pos += _TTINFO.size
    chars = data[pos:pos + charcnt]
    if any(index >= typecnt for index in indices):
        raise _invalid(zone_id, "transition type index out of range")
    types = []
    for utoff, isdst, desigidx in raw_types:
        end = chars.find(b"\0", desigidx)
        abbreviation = chars[desigidx:end if end >= 0 else None].decode("ascii", "replace")
        types.append((utoff, bool(isdst), abbreviation))
    return times, indices, types, start + size


def read_tzif(data: bytes, zone_id: str = "") -> TzifData:
    """Decode the structure of a TZif file without interpreting it.

    The version 2+ block with 64-bit times is used when present.

    Raises:
        ZoneRulesError: If the data is not a valid TZif file.
    """
    if len(data) < _HEADER.size or data[:4] != _MAGIC:
        raise _invalid(zone_id, "missing TZif magic")
    _, version_byte, *counts = _HEADER.unpack_from(data, 0)
    version = 1 if version_byte == b"\0" else int(version_byte.decode("ascii", "replace") or 0)
    times, indices, types, end = _read_block(data, _HEADER.size, tuple(counts), 4, zone_id)
    footer = ""
    if version >= 2:
        if len(data) < end + _HEADER.size or data[end:end + 4] != _MAGIC:
            raise _invalid(zone_id, "missing second header")
        _, _, *counts = _HEADER.unpack_from(data, end)
        times, indices, types, end = _read_block(
            data, end + _HEADER.size, tuple(counts), 8, zone_id
        )
        if data[end:end + 1] == b"\n":
            newline = data.find(b"\n", end + 1)
            if newline < 0:
                raise _invalid(zone_id, "unterminated footer")
            footer = data[end + 1:newline].decode("ascii")
    return TzifData(version, times, indices, types, footer)


def _offset(zone_id: str, seconds: int) -> ZoneOffset:
    try:
        return ZoneOffset.of_total_seconds(seconds)
    except FieldOutOfRangeError as exc:
        raise _invalid(zone_id, f"offset {seconds} out of range") from exc


def _parse_hms(text: str) -> int:
    sign = -1 if text.startswith("-") else 1
    parts = [int(part) for part in text.lstrip("+-").split(":")]
    parts += [0] * (3 - len(parts))
    return sign * (parts[0] * SECONDS_PER_HOUR + parts[1] * SECONDS_PER_MINUTE + parts[2])


def _rule_date(text: str, zone_id: str) -> tuple[Month, int, DayOfWeek | None]:
    """Convert a POSIX rule date to (month, day-of-month indicator, day-of-week)."""
    if text.startswith("M"):
        month, week, day = (int(part) for part in text[1:].split("."))
        if not 1 <= month <= 12 or not 1 <= week <= 5 or not 0 <= day <= 6:
            raise _invalid(zone_id, f"bad rule date {text!r}")
        day_of_week = DayOfWeek.SUNDAY if day == 0 else DayOfWeek.of(day)
        if week == 5:
            return Month.of(month), -1, day_of_week
        return Month.of(month), 1 + 7 * (week - 1), day_of_week
    if text.startswith("J"):
        # Julian day 1-365, February 29 is never counted
        day_of_year = int(text[1:])
        if not 1 <= day_of_year <= 365:
            raise _invalid(zone_id, f"bad rule date {text!r}")
    else:
        # Zero-based day counting February 29; only unambiguous before March
        day_of_year = int(text) + 1
        if day_of_year > 59:
            raise _invalid(zone_id, f"unsupported rule date {text!r}")
    month = 1
    while day_of_year > DAYS_IN_MONTH[month]:
        day_of_year -= DAYS_IN_MONTH[month]
        month += 1
    return Month.of(month), day_of_year, None


def parse_posix_tz(footer: str, zone_id: str = "") -> tuple[ZoneOffset, list[ZoneOffsetTransitionRule]]:
    """Parse a POSIX TZ string into a standard offset and annual rules.

    Returns:
        The standard offset and either no rules (no daylight saving) or
        two rules, the start and the end of daylight saving.

    Raises:
        ZoneRulesError: If the string cannot be interpreted.

    Examples:
        >>> offset, rules = parse_posix_tz("CET-1CEST,M3.5.0,M10.5.0/3")
        >>> offset, len(rules)
        (ZoneOffset('+01:00'), 2)
    """
    match = _POSIX_TZ.fullmatch(footer)
    if match is None:
        raise _invalid(zone_id, f"bad TZ string {footer!r}")
    # POSIX offsets are positive west of Greenwich
    std = _offset(zone_id, -_parse_hms(match.group("std_offset")))
    if match.group("dst") is None:
        return std, []
    if match.group("dst_offset") is not None:
        dst = _offset(zone_id, -_parse_hms(match.group("dst_offset")))
    else:
        dst = _offset(zone_id, std.total_seconds + SECONDS_PER_HOUR)
    if match.group("start") is None:
        raise _invalid(zone_id, f"TZ string {footer!r} has no transition rules")
    rules = []
    for date_group, time_group, before, after in (
        ("start", "start_time", std, dst),
        ("end", "end_time", dst, std),
    ):
        month, dom, dow = _rule_date(match.group(date_group), zone_id)
        time_text = match.group(time_group)
        seconds = _parse_hms(time_text) if time_text else _DEFAULT_RULE_TIME
        rules.append(
            ZoneOffsetTransitionRule(
                month, dom, dow, seconds, TimeDefinition.WALL, std, before, after
            )
        )
    if std == dst:
        return std, []
    return std, rules


def _standard_offset_seconds(
    types: list[tuple[int, bool, str]], indices: list[int]
) -> tuple[int, list[int]]:
    """Infer the standard offset before and after each transition.

    TZif files only record whether a type is daylight saving, not the
    standard offset it is relative to. A daylight type takes the
    standard offset of the nearest preceding standard type, or of the
    next one when none precedes it.
    """
    base_utoff, base_dst, _ = types[0]
    known: int | None = None if base_dst else base_utoff
    result: list[int | None] = []
    for index in indices:
        utoff, isdst, _ = types[index]
        if not isdst:
            known = utoff
        result.append(known)
    following: int | None = None
    for i in range(len(result) - 1, -1, -1):
        utoff, isdst, _ = types[indices[i]]
        if not isdst:
            following = utoff
        if result[i] is None:
            result[i] = following if following is not None else utoff - SECONDS_PER_HOUR
    if base_dst:
        base = result[0] if result else base_utoff - SECONDS_PER_HOUR
    else:
        base = base_utoff
    return base, [value for value in result if value is not None]


def build_rules(tzif: TzifData, zone_id: str = "") -> ZoneRules:
    """Interpret decoded TZif data as ZoneRules.

    Consecutive transitions that do not change the offset (only the
    abbreviation or daylight flag) are merged away. The footer rules
    still only take over after the last transition in the file.
    """
    times = tzif.transition_times
    indices = tzif.transition_types
    types = tzif.types
    base_standard, standard_seconds = _standard_offset_seconds(types, indices)
    base_wall = types[0][0]

    wall_transitions: list[ZoneOffsetTransition] = []
    standard_transitions: list[ZoneOffsetTransition] = []
    wall_before, standard_before = base_wall, base_standard
    last_time: int | None = None
    for epoch_second, index, standard in zip(times, indices, standard_seconds):
        wall = types[index][0]
        if epoch_second < _MIN_TRANSITION:
            base_wall = wall_before = wall
            base_standard = standard_before = standard
            continue
        if epoch_second > _MAX_TRANSITION:
            break
        last_time = epoch_second
        if wall != wall_before:
            wall_transitions.append(
                ZoneOffsetTransition.of_epoch_second(
                    epoch_second, _offset(zone_id, wall_before), _offset(zone_id, wall)
                )
            )
        if standard != standard_before:
            standard_transitions.append(
                ZoneOffsetTransition.of_epoch_second(
                    epoch_second, _offset(zone_id, standard_before), _offset(zone_id, standard)
                )
            )
        wall_before, standard_before = wall, standard

    last_rules: list[ZoneOffsetTransitionRule] = []
    if tzif.footer:
        _, last_rules = parse_posix_tz(tzif.footer, zone_id)
    logger.debug(
        "Loaded %s: TZif v%d, %d transitions, %d annual rules",
        zone_id or "<unknown>",
        tzif.version,
        len(wall_transitions),
        len(last_rules),
    )
    return ZoneRules(
        _offset(zone_id, base_standard),
        _offset(zone_id, base_wall),
        standard_transitions,
        wall_transitions,
        last_rules,
        last_time,
    )


def load_tzif(data: bytes, zone_id: str = "") -> ZoneRules:
    """Decode TZif bytes into ZoneRules.

    Raises:
        ZoneRulesError: If the data is malformed.
    """
    return build_rules(read_tzif(data, zone_id), zone_id)


__all__ = ["TzifData", "read_tzif", "parse_posix_tz", "build_rules", "load_tzif"]
