"""Tests for zone rule providers and the default provider."""

from __future__ import annotations

import pytest

from isochron import Instant, LocalDateTime, ZoneId, ZoneOffset
from isochron.config import get_settings
from isochron.errors import ZoneRulesError
from isochron.zone import (
    CompositeZoneRulesProvider,
    DirectoryZoneRulesProvider,
    StaticZoneRulesProvider,
    TzdataZoneRulesProvider,
    get_default_provider,
    set_default_provider,
)

FIXED_RULES = ZoneOffset.of_hours(5).rules


@pytest.fixture
def zoneinfo_dir(tmp_path, cet_tzif):
    """A zoneinfo directory with one zone and one file that is not TZif."""
    (tmp_path / "Test").mkdir()
    (tmp_path / "Test" / "Zone").write_bytes(cet_tzif)
    (tmp_path / "zone.tab").write_text("# not a zone\n")
    return tmp_path


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings and provider around a test."""
    for name in ("ISOCHRON_TZPATH", "ISOCHRON_ZONE_SOURCE", "ISOCHRON_TZDATA_PACKAGE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    set_default_provider(None)
    yield monkeypatch
    get_settings.cache_clear()
    set_default_provider(None)


class TestStaticProvider:
    """Tests for rules built in code."""

    def test_get_rules(self) -> None:
        """Test looking up rules by id."""
        provider = StaticZoneRulesProvider({"Test/Fixed": FIXED_RULES})
        assert provider.get_rules("Test/Fixed") is FIXED_RULES
        assert provider.provide_zone_ids() == {"Test/Fixed"}

    def test_unknown(self) -> None:
        """Test that an unknown id raises ZoneRulesError."""
        provider = StaticZoneRulesProvider({})
        assert provider.find_rules("Test/Missing") is None
        with pytest.raises(ZoneRulesError, match="Unknown time-zone ID"):
            provider.get_rules("Test/Missing")

    def test_zone_id_lookup(self) -> None:
        """Test ZoneId.of() with an explicit provider."""
        provider = StaticZoneRulesProvider({"Test/Fixed": FIXED_RULES})
        zone = ZoneId.of("Test/Fixed", provider)
        assert zone.id == "Test/Fixed"
        assert zone.normalized() == ZoneOffset.of_hours(5)

    def test_malformed_region_id(self) -> None:
        """Test that a malformed id raises ZoneRulesError."""
        provider = StaticZoneRulesProvider({})
        with pytest.raises(ZoneRulesError, match="invalid format"):
            ZoneId.of("Bad Zone!", provider)


class TestCompositeProvider:
    """Tests for chaining providers."""

    def test_first_provider_wins(self, cet_rules) -> None:
        """Test earlier providers shadow later ones."""
        first = StaticZoneRulesProvider({"Europe/Paris": cet_rules})
        second = StaticZoneRulesProvider(
            {"Europe/Paris": FIXED_RULES, "Test/Fixed": FIXED_RULES}
        )
        provider = CompositeZoneRulesProvider([first, second])
        assert provider.get_rules("Europe/Paris") is cet_rules
        assert provider.get_rules("Test/Fixed") is FIXED_RULES
        assert provider.provide_zone_ids() == {"Europe/Paris", "Test/Fixed"}
        assert provider.find_rules("Test/Missing") is None


class TestDirectoryProvider:
    """Tests for reading a zoneinfo directory."""

    def test_reads_tzif_files(self, zoneinfo_dir) -> None:
        """Test zone ids and rules from TZif files."""
        provider = DirectoryZoneRulesProvider(zoneinfo_dir)
        assert provider.provide_zone_ids() == {"Test/Zone"}
        rules = provider.get_rules("Test/Zone")
        assert rules.get_offset(Instant.from_iso_format("2024-07-01T00:00:00Z")) == ZoneOffset.of_hours(2)

    def test_rules_are_cached(self, zoneinfo_dir) -> None:
        """Test rules are read once."""
        provider = DirectoryZoneRulesProvider(zoneinfo_dir)
        first = provider.get_rules("Test/Zone")
        (zoneinfo_dir / "Test" / "Zone").unlink()
        assert provider.get_rules("Test/Zone") is first

    @pytest.mark.parametrize("zone_id", ["../Test/Zone", "Test/./Zone", "Test//Zone", "Test/"])
    def test_unsafe_ids(self, zoneinfo_dir, zone_id) -> None:
        """Test ids that would leave the directory are rejected."""
        assert DirectoryZoneRulesProvider(zoneinfo_dir).find_rules(zone_id) is None

    def test_missing_and_invalid_files(self, zoneinfo_dir) -> None:
        """Test directories and non-TZif files."""
        provider = DirectoryZoneRulesProvider(zoneinfo_dir)
        assert provider.find_rules("Test") is None
        with pytest.raises(ZoneRulesError, match="magic"):
            provider.get_rules("zone.tab")


class TestTzdataProvider:
    """Tests against the bundled tzdata package."""

    def test_paris(self) -> None:
        """Test Paris rules from tzdata."""
        rules = TzdataZoneRulesProvider().get_rules("Europe/Paris")
        assert rules.get_valid_offsets(LocalDateTime(2024, 3, 31, 2, 30)) == []
        assert rules.get_offset(Instant.from_iso_format("2024-07-01T00:00:00Z")) == ZoneOffset.of_hours(2)
        assert rules.get_offset(Instant.from_iso_format("2080-01-01T00:00:00Z")) == ZoneOffset.of_hours(1)

    def test_new_york(self) -> None:
        """Test New York rules from tzdata."""
        rules = TzdataZoneRulesProvider().get_rules("America/New_York")
        eastern = ZoneOffset.of_hours(-5)
        assert rules.get_offset(Instant.from_iso_format("2024-01-15T12:00:00Z")) == eastern
        following = rules.next_transition(Instant.from_iso_format("2024-01-15T12:00:00Z"))
        assert following.date_time_before == LocalDateTime(2024, 3, 10, 2, 0)

    def test_zone_ids(self) -> None:
        """Test the zone ids listed by tzdata."""
        zone_ids = TzdataZoneRulesProvider().provide_zone_ids()
        assert "Europe/Paris" in zone_ids
        assert "Asia/Tokyo" in zone_ids

    def test_unknown(self) -> None:
        """Test unknown and unsafe ids give None."""
        provider = TzdataZoneRulesProvider()
        assert provider.find_rules("Mars/Olympus") is None
        assert provider.find_rules("..") is None

    def test_missing_package(self) -> None:
        """Test a missing package provides nothing."""
        provider = TzdataZoneRulesProvider("isochron_no_such_package")
        assert provider.provide_zone_ids() == set()
        assert provider.find_rules("Europe/Paris") is None


class TestDefaultProvider:
    """Tests for the provider built from settings."""

    def test_auto_without_tzpath_uses_tzdata(self, fresh_settings) -> None:
        """Test the default provider uses tzdata and is cached."""
        assert isinstance(get_default_provider(), TzdataZoneRulesProvider)
        assert get_default_provider() is get_default_provider()

    def test_auto_with_tzpath(self, fresh_settings, zoneinfo_dir) -> None:
        """Test a tzpath is searched before tzdata."""
        fresh_settings.setenv("ISOCHRON_TZPATH", str(zoneinfo_dir))
        provider = get_default_provider()
        assert isinstance(provider, CompositeZoneRulesProvider)
        assert isinstance(provider.providers[0], DirectoryZoneRulesProvider)
        assert ZoneId.of("Test/Zone").id == "Test/Zone"
        assert ZoneId.of("Europe/Paris").id == "Europe/Paris"

    def test_tzpath_only(self, fresh_settings, zoneinfo_dir) -> None:
        """Test the tzpath source ignores tzdata."""
        fresh_settings.setenv("ISOCHRON_TZPATH", str(zoneinfo_dir))
        fresh_settings.setenv("ISOCHRON_ZONE_SOURCE", "tzpath")
        assert isinstance(get_default_provider(), DirectoryZoneRulesProvider)
        with pytest.raises(ZoneRulesError):
            ZoneId.of("Europe/Paris")

    def test_tzpath_source_needs_directories(self, fresh_settings) -> None:
        """Test that a tzpath source without directories raises ZoneRulesError."""
        fresh_settings.setenv("ISOCHRON_ZONE_SOURCE", "tzpath")
        with pytest.raises(ZoneRulesError, match="no tzpath"):
            get_default_provider()

    def test_set_default_provider(self, fresh_settings) -> None:
        """Test replacing the default provider."""
        provider = StaticZoneRulesProvider({"Test/Fixed": FIXED_RULES})
        set_default_provider(provider)
        assert get_default_provider() is provider
        assert ZoneId.available_zone_ids() == {"Test/Fixed"}
