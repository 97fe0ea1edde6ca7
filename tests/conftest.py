"""Pytest configuration and fixtures for Isochron tests."""

from __future__ import annotations

import struct

import pytest

from isochron import Clock, Instant, ZoneId, ZoneOffset, ZoneRules
from isochron.units import DayOfWeek, Month
from isochron.zone import (
    StaticZoneRulesProvider,
    TimeDefinition,
    ZoneOffsetTransitionRule,
    set_default_provider,
)

CET = ZoneOffset.of_hours(1)
CEST = ZoneOffset.of_hours(2)


def central_european_rules() -> ZoneRules:
    """EU summer time: last Sunday of March and October at 01:00 UTC."""
    spring = ZoneOffsetTransitionRule(
        Month.MARCH, -1, DayOfWeek.SUNDAY, 3600, TimeDefinition.UTC, CET, CET, CEST
    )
    autumn = ZoneOffsetTransitionRule(
        Month.OCTOBER, -1, DayOfWeek.SUNDAY, 3600, TimeDefinition.UTC, CET, CEST, CET
    )
    return ZoneRules(CET, CET, last_rules=[spring, autumn])


@pytest.fixture
def cet_rules() -> ZoneRules:
    return central_european_rules()


@pytest.fixture
def static_provider(cet_rules):
    """Install a provider serving Europe/Paris from hand-built rules."""
    provider = StaticZoneRulesProvider(
        {"Europe/Paris": cet_rules, "Test/Fixed": ZoneOffset.of_hours(5).rules}
    )
    set_default_provider(provider)
    yield provider
    set_default_provider(None)


@pytest.fixture
def paris(static_provider) -> ZoneId:
    return ZoneId.of("Europe/Paris")


@pytest.fixture
def fixed_instant() -> Instant:
    return Instant.from_iso_format("2024-01-15T10:30:00Z")


@pytest.fixture
def fixed_clock(fixed_instant) -> Clock:
    return Clock.fixed(fixed_instant, ZoneOffset.UTC)


def make_tzif(
    times: list[int],
    indices: list[int],
    types: list[tuple[int, bool, str]],
    footer: str = "",
    version: bytes = b"2",
) -> bytes:
    """Assemble TZif bytes; version 2 and later repeat the data with 64-bit times."""
    chars = b""
    ttinfos = b""
    for utoff, isdst, abbreviation in types:
        ttinfos += struct.pack(">lBB", utoff, int(isdst), len(chars))
        chars += abbreviation.encode("ascii") + b"\0"

    def block(time_size: int) -> bytes:
        header = struct.pack(
            ">4sc15x6l", b"TZif", version, 0, 0, 0, len(times), len(types), len(chars)
        )
        time_format = ">" + ("q" if time_size == 8 else "l") * len(times)
        return header + struct.pack(time_format, *times) + bytes(indices) + ttinfos + chars

    data = block(4)
    if version != b"\0":
        data += block(8) + b"\n" + footer.encode("ascii") + b"\n"
    return data


# 2000-03-26T01:00Z and 2000-10-29T01:00Z
SPRING_2000 = 954_032_400
AUTUMN_2000 = 972_781_200


@pytest.fixture
def build_tzif():
    return make_tzif


@pytest.fixture
def cet_tzif() -> bytes:
    """A TZif v2 file with the year 2000 transitions and an EU footer."""
    return make_tzif(
        [SPRING_2000, AUTUMN_2000],
        [1, 0],
        [(3600, False, "CET"), (7200, True, "CEST")],
        "CET-1CEST,M3.5.0,M10.5.0/3",
    )
