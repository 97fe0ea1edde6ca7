"""Sources of zone rules.

A ZoneRulesProvider maps region IDs such as ``Europe/Paris`` to
ZoneRules. Providers cache what they load, so each zone file is decoded
at most once per provider.

Providers:
    TzdataZoneRulesProvider: reads TZif resources from the ``tzdata``
        package.
    DirectoryZoneRulesProvider: reads TZif files from a zoneinfo
        directory such as ``/usr/share/zoneinfo``.
    StaticZoneRulesProvider: serves rules built in code.
    CompositeZoneRulesProvider: asks several providers in order.

The process-wide default provider is built from the settings on first
use; see ``get_default_provider``.
"""

from __future__ import annotations

import logging
import os
import threading
from abc import ABC, abstractmethod
from importlib import resources
from typing import Iterable, Mapping

from isochron.errors import ZoneRulesError
from isochron.zone.rules import ZoneRules
from isochron.zone.tzif import load_tzif

logger = logging.getLogger(__name__)


class ZoneRulesProvider(ABC):
    """Base class for zone rule sources.

    Subclasses implement ``provide_zone_ids`` and ``_load_rules``; the
    base class adds caching and the unknown-zone error.
    """

    def __init__(self) -> None:
        self._cache: dict[str, ZoneRules] = {}
        self._lock = threading.Lock()

    @abstractmethod
    def provide_zone_ids(self) -> set[str]:
        """Return the region IDs this provider can supply."""

    @abstractmethod
    def _load_rules(self, zone_id: str) -> ZoneRules | None:
        """Load the rules for a zone, or return None if unknown."""

    def find_rules(self, zone_id: str) -> ZoneRules | None:
        """Return the rules for a zone, or None if this provider lacks it."""
        rules = self._cache.get(zone_id)
        if rules is not None:
            return rules
        with self._lock:
            rules = self._cache.get(zone_id)
            if rules is None:
                rules = self._load_rules(zone_id)
                if rules is not None:
                    self._cache[zone_id] = rules
        return rules

    def get_rules(self, zone_id: str) -> ZoneRules:
        """Return the rules for a zone.

        Raises:
            ZoneRulesError: If the zone is unknown or its data is invalid.
        """
        rules = self.find_rules(zone_id)
        if rules is None:
            raise ZoneRulesError(f"Unknown time-zone ID: {zone_id}")
        return rules


def _safe_components(zone_id: str) -> list[str] | None:
    components = zone_id.split("/")
    if any(part in ("", ".", "..") for part in components):
        return None
    return components


class TzdataZoneRulesProvider(ZoneRulesProvider):
    """Rules read from the ``tzdata`` package resources.

    Args:
        package: The package holding ``zoneinfo`` resources and a
            ``zones`` index file.
    """

    def __init__(self, package: str = "tzdata") -> None:
        super().__init__()
        self._package = package
        self._zone_ids: set[str] | None = None

    def provide_zone_ids(self) -> set[str]:
        if self._zone_ids is None:
            try:
                text = resources.files(self._package).joinpath("zones").read_text("utf-8")
            except (ModuleNotFoundError, FileNotFoundError):
                logger.warning("Zone index not found in package %s", self._package)
                return set()
            self._zone_ids = {line.strip() for line in text.splitlines() if line.strip()}
        return set(self._zone_ids)

    def _load_rules(self, zone_id: str) -> ZoneRules | None:
        components = _safe_components(zone_id)
        if components is None:
            return None
        package = ".".join([self._package, "zoneinfo", *components[:-1]])
        try:
            data = resources.files(package).joinpath(components[-1]).read_bytes()
        except (ModuleNotFoundError, FileNotFoundError, IsADirectoryError, UnicodeEncodeError):
            return None
        logger.debug("Reading %s from package %s", zone_id, package)
        return load_tzif(data, zone_id)

    def __repr__(self) -> str:
        return f"TzdataZoneRulesProvider({self._package!r})"


class DirectoryZoneRulesProvider(ZoneRulesProvider):
    """Rules read from TZif files below a zoneinfo directory."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        super().__init__()
        self._root = os.fspath(root)

    def provide_zone_ids(self) -> set[str]:
        zone_ids = set()
        for directory, _, files in os.walk(self._root):
            for name in files:
                path = os.path.join(directory, name)
                try:
                    with open(path, "rb") as handle:
                        if handle.read(4) != b"TZif":
                            continue
                except OSError:
                    continue
                relative = os.path.relpath(path, self._root)
                zone_ids.add(relative.replace(os.sep, "/"))
        return zone_ids

    def _load_rules(self, zone_id: str) -> ZoneRules | None:
        components = _safe_components(zone_id)
        if components is None:
            return None
        path = os.path.join(self._root, *components)
        if not os.path.isfile(path):
            return None
        logger.debug("Reading %s from %s", zone_id, path)
        with open(path, "rb") as handle:
            return load_tzif(handle.read(), zone_id)

    def __repr__(self) -> str:
        return f"DirectoryZoneRulesProvider({self._root!r})"


class StaticZoneRulesProvider(ZoneRulesProvider):
    """Rules supplied up front, keyed by region ID.

    Examples:
        >>> from isochron import ZoneOffset
        >>> provider = StaticZoneRulesProvider({"Test/Fixed": ZoneOffset.of_hours(5).rules})
        >>> provider.get_rules("Test/Fixed").is_fixed_offset()
        True
    """

    def __init__(self, rules: Mapping[str, ZoneRules]) -> None:
        super().__init__()
        self._rules = dict(rules)

    def provide_zone_ids(self) -> set[str]:
        return set(self._rules)

    def _load_rules(self, zone_id: str) -> ZoneRules | None:
        return self._rules.get(zone_id)


class CompositeZoneRulesProvider(ZoneRulesProvider):
    """Asks each provider in turn; the first that knows a zone wins."""

    def __init__(self, providers: Iterable[ZoneRulesProvider]) -> None:
        super().__init__()
        self._providers = list(providers)

    @property
    def providers(self) -> list[ZoneRulesProvider]:
        return list(self._providers)

    def provide_zone_ids(self) -> set[str]:
        zone_ids: set[str] = set()
        for provider in self._providers:
            zone_ids |= provider.provide_zone_ids()
        return zone_ids

    def _load_rules(self, zone_id: str) -> ZoneRules | None:
        for provider in self._providers:
            rules = provider.find_rules(zone_id)
            if rules is not None:
                return rules
        return None

    def __repr__(self) -> str:
        return f"CompositeZoneRulesProvider({self._providers!r})"


_default_provider: ZoneRulesProvider | None = None
_default_lock = threading.Lock()


def _provider_from_settings() -> ZoneRulesProvider:
    from isochron.config import get_settings

    settings = get_settings()
    directories: list[ZoneRulesProvider] = [
        DirectoryZoneRulesProvider(path) for path in settings.tzpath_list
    ]
    package = TzdataZoneRulesProvider(settings.tzdata_package)
    if settings.zone_source == "tzdata":
        providers = [package]
    elif settings.zone_source == "tzpath":
        if not directories:
            raise ZoneRulesError("zone_source is 'tzpath' but no tzpath is configured")
        providers = directories
    else:
        providers = [*directories, package]
    logger.debug("Default zone rules providers: %r", providers)
    if len(providers) == 1:
        return providers[0]
    return CompositeZoneRulesProvider(providers)


def get_default_provider() -> ZoneRulesProvider:
    """Return the process-wide provider, creating it from settings on first use."""
    global _default_provider
    provider = _default_provider
    if provider is None:
        with _default_lock:
            if _default_provider is None:
                _default_provider = _provider_from_settings()
            provider = _default_provider
    return provider


def set_default_provider(provider: ZoneRulesProvider | None) -> None:
    """Replace the process-wide provider; None rebuilds it from settings."""
    global _default_provider
    with _default_lock:
        _default_provider = provider


__all__ = [
    "ZoneRulesProvider",
    "TzdataZoneRulesProvider",
    "DirectoryZoneRulesProvider",
    "StaticZoneRulesProvider",
    "CompositeZoneRulesProvider",
    "get_default_provider",
    "set_default_provider",
]
