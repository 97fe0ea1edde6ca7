"""Time-zone identifiers, offsets and rules.

Classes:
    ZoneId: Base of all zone identifiers; ``ZoneId.of`` parses one.
    ZoneOffset: A fixed offset from UTC.
    ZoneRegion: A named region with rules from a provider.
    ZoneRules: Offset history and annual rules of a zone.
    ZoneOffsetTransition: A single change of offset.
    ZoneOffsetTransitionRule: A yearly recurring change of offset.
    GapPolicy, OverlapPolicy: How local times in transitions resolve.
"""

from __future__ import annotations

from isochron.zone.zone_id import ZoneId, ZoneRegion
from isochron.zone.offset import ZoneOffset
from isochron.zone.transition import (
    TimeDefinition,
    ZoneOffsetTransition,
    ZoneOffsetTransitionRule,
)
from isochron.zone.rules import ZoneRules
from isochron.zone.resolution import GapPolicy, OverlapPolicy, resolve_local
from isochron.zone.provider import (
    CompositeZoneRulesProvider,
    DirectoryZoneRulesProvider,
    StaticZoneRulesProvider,
    TzdataZoneRulesProvider,
    ZoneRulesProvider,
    get_default_provider,
    set_default_provider,
)
from isochron.zone.tzif import load_tzif, parse_posix_tz, read_tzif

__all__: list[str] = [
    "ZoneId",
    "ZoneRegion",
    "ZoneOffset",
    "TimeDefinition",
    "ZoneOffsetTransition",
    "ZoneOffsetTransitionRule",
    "ZoneRules",
    "GapPolicy",
    "OverlapPolicy",
    "resolve_local",
    "ZoneRulesProvider",
    "TzdataZoneRulesProvider",
    "DirectoryZoneRulesProvider",
    "StaticZoneRulesProvider",
    "CompositeZoneRulesProvider",
    "get_default_provider",
    "set_default_provider",
    "load_tzif",
    "parse_posix_tz",
    "read_tzif",
]
