"""Time-zone identifiers.

A ZoneId names a set of rules for converting between instants and local
date-times. There are two kinds:

    ZoneOffset: a fixed offset from UTC such as ``+02:00``.
    ZoneRegion: a named region such as ``Europe/Paris`` whose rules are
        looked up from the configured ZoneRulesProvider.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from isochron.errors import ZoneRulesError

if TYPE_CHECKING:
    from isochron.zone.offset import ZoneOffset
    from isochron.zone.provider import ZoneRulesProvider
    from isochron.zone.rules import ZoneRules

_REGION_ID = re.compile(r"[A-Za-z][A-Za-z0-9~/._+-]+", re.ASCII)
_PREFIXES = ("UTC", "GMT", "UT")


class ZoneId(ABC):
    """Base class for ZoneOffset and ZoneRegion.

    Use ``ZoneId.of`` to obtain an instance from its string form.

    Examples:
        >>> ZoneId.of("Z")
        ZoneOffset('Z')
        >>> ZoneId.of("UTC+01:00").normalized()
        ZoneOffset('+01:00')
    """

    __slots__ = ()

    @staticmethod
    def of(zone_id: str, provider: ZoneRulesProvider | None = None) -> ZoneId:
        """Obtain a ZoneId from an identifier.

        Accepted forms:
            ``Z``, ``+hh``, ``+hh:mm``, ``-hh:mm:ss``: a ZoneOffset.
            ``UTC``, ``GMT``, ``UT``: a region with a fixed zero offset.
            ``UTC+01:00`` and similar: a region with a fixed offset.
            ``Europe/Paris`` and other region IDs: a region whose rules
            come from the zone rules provider.

        Args:
            zone_id: The identifier.
            provider: Where region rules are looked up; the default
                provider when None.

        Raises:
            ParseError: If an offset is malformed.
            ZoneRulesError: If the region ID is malformed or unknown.
        """
        # Import here to avoid circular imports
        from isochron.zone.offset import ZoneOffset

        if not isinstance(zone_id, str):
            raise TypeError(f"expected str, got {type(zone_id).__name__}")
        if len(zone_id) <= 1 or zone_id[0] in "+-":
            return ZoneOffset.of(zone_id)
        for prefix in _PREFIXES:
            if zone_id == prefix:
                return ZoneRegion(prefix, ZoneOffset.UTC.rules)
            if zone_id.startswith(prefix) and zone_id[len(prefix)] in "+-":
                offset = ZoneOffset.of(zone_id[len(prefix):])
                if offset.total_seconds == 0:
                    return ZoneRegion(prefix, offset.rules)
                return ZoneRegion(prefix + offset.id, offset.rules)
        return ZoneRegion.of_id(zone_id, provider)

    @staticmethod
    def of_offset(prefix: str, offset: ZoneOffset) -> ZoneId:
        """Obtain a ZoneId wrapping an offset with a UTC, GMT or UT prefix."""
        if not prefix:
            return offset
        if prefix not in _PREFIXES:
            raise ValueError(f"prefix should be GMT, UTC or UT, is: {prefix}")
        if offset.total_seconds == 0:
            return ZoneRegion(prefix, offset.rules)
        return ZoneRegion(prefix + offset.id, offset.rules)

    @staticmethod
    def system_default() -> ZoneId:
        """Return the zone named by the ``default_zone`` setting."""
        from isochron.config import get_settings

        return ZoneId.of(get_settings().default_zone)

    @staticmethod
    def available_zone_ids() -> set[str]:
        """Return the region IDs known to the default provider."""
        from isochron.zone.provider import get_default_provider

        return get_default_provider().provide_zone_ids()

    @property
    @abstractmethod
    def id(self) -> str:
        """The normalized identifier, such as ``Europe/Paris`` or ``+02:00``."""

    @property
    @abstractmethod
    def rules(self) -> ZoneRules:
        """The rules used to map instants to offsets for this zone."""

    def normalized(self) -> ZoneId:
        """Return a ZoneOffset if the rules are fixed, otherwise self."""
        from isochron.core.instant import Instant

        rules = self.rules
        if rules.is_fixed_offset():
            return rules.get_offset(Instant.EPOCH)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneId):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"ZoneId({self.id!r})"


class ZoneRegion(ZoneId):
    """A geographical region where the same time-zone rules apply.

    Instances are normally obtained through ``ZoneId.of``.
    """

    __slots__ = ("_id", "_rules")

    def __init__(self, zone_id: str, rules: ZoneRules) -> None:
        self._id = zone_id
        self._rules = rules

    @classmethod
    def of_id(cls, zone_id: str, provider: ZoneRulesProvider | None = None) -> ZoneRegion:
        """Look up a region by ID in a provider, the default one if None.

        Raises:
            ZoneRulesError: If the ID is malformed or not known.
        """
        from isochron.zone.provider import get_default_provider

        if not _REGION_ID.fullmatch(zone_id):
            raise ZoneRulesError(f"Invalid ID for region-based ZoneId, invalid format: {zone_id}")
        provider = provider or get_default_provider()
        return cls(zone_id, provider.get_rules(zone_id))

    @property
    def id(self) -> str:
        return self._id

    @property
    def rules(self) -> ZoneRules:
        return self._rules


__all__ = ["ZoneId", "ZoneRegion"]
