"""Runtime configuration for Isochron.

Settings are read from ``ISOCHRON_*`` environment variables (and an
optional ``.env`` file) on first use and cached for the process.

Examples:
    ISOCHRON_TZPATH=/usr/share/zoneinfo
    ISOCHRON_DEFAULT_ZONE=Europe/Paris
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IsochronSettings(BaseSettings):
    """Isochron configuration.

    All settings can be overridden via environment variables prefixed
    with ``ISOCHRON_``.

    Attributes:
        tzpath: Zoneinfo directories searched for TZif files, separated
            by ``os.pathsep``. Empty means only the tzdata package is used.
        tzdata_package: Package whose ``zoneinfo`` resources hold the
            bundled zone database.
        zone_source: Which source the default provider uses.
        default_zone: Zone used by ``Clock.system_default_zone()``.
    """

    tzpath: str = Field(default="")
    tzdata_package: str = Field(default="tzdata")
    zone_source: Literal["auto", "tzdata", "tzpath"] = Field(default="auto")
    default_zone: str = Field(default="UTC")

    model_config = SettingsConfigDict(
        env_prefix="ISOCHRON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("default_zone")
    @classmethod
    def _strip_zone(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default_zone must not be empty")
        return value

    @property
    def tzpath_list(self) -> list[str]:
        """Parse the tzpath string into a list of directories."""
        return [path for path in self.tzpath.split(os.pathsep) if path.strip()]


@lru_cache(maxsize=1)
def get_settings() -> IsochronSettings:
    """Return the process-wide settings, created on first use."""
    return IsochronSettings()


__all__ = ["IsochronSettings", "get_settings"]
