"""Tests for isochron package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations

import pytest


def test_import_isochron() -> None:
    """Import isochron package succeeds."""
    import isochron

    assert hasattr(isochron, "__version__")
    assert isochron.__version__ == "0.1.0"


@pytest.mark.parametrize(
    "name",
    ["core", "units", "format", "convert", "arithmetic", "_internal", "temporal", "zone", "chrono"],
)
def test_import_submodule(name: str) -> None:
    """Every subpackage imports and declares __all__."""
    import importlib

    module = importlib.import_module(f"isochron.{name}")
    assert hasattr(module, "__all__")


def test_import_errors_module() -> None:
    """Import isochron.errors submodule succeeds."""
    from isochron import errors

    assert hasattr(errors, "IsochronError")
    assert hasattr(errors, "ValidationError")
    assert hasattr(errors, "ParseError")
    assert hasattr(errors, "OverflowError")
    assert hasattr(errors, "ZoneRulesError")


def test_exception_hierarchy() -> None:
    """Exception classes have correct inheritance."""
    from isochron.errors import (
        FieldOutOfRangeError,
        InvalidDateError,
        IsochronError,
        OverflowError,
        ParseError,
        UnresolvedLocalTimeError,
        UnsupportedFieldError,
        ValidationError,
        ZoneRulesError,
    )

    assert issubclass(IsochronError, Exception)
    assert issubclass(ValidationError, IsochronError)
    assert issubclass(FieldOutOfRangeError, ValidationError)
    assert issubclass(InvalidDateError, ValidationError)
    assert issubclass(ParseError, IsochronError)
    assert issubclass(OverflowError, IsochronError)
    assert issubclass(UnsupportedFieldError, IsochronError)
    assert issubclass(ZoneRulesError, IsochronError)
    assert issubclass(UnresolvedLocalTimeError, ZoneRulesError)


def test_all_exports_exist() -> None:
    """Every name in __all__ is an attribute of the package."""
    import isochron

    for name in isochron.__all__:
        assert hasattr(isochron, name), name


def test_top_level_exports() -> None:
    """The main types are exported at package level."""
    import isochron

    for name in (
        "LocalDate",
        "LocalTime",
        "LocalDateTime",
        "Instant",
        "ZonedDateTime",
        "Duration",
        "Period",
        "ZoneId",
        "ZoneRules",
        "Chronology",
        "resolve_fields",
        "parse_iso8601",
    ):
        assert name in isochron.__all__, name


def test_exports_are_exceptions() -> None:
    """Errors exported at package level are the same classes as in errors."""
    import isochron
    from isochron import errors

    assert isochron.ParseError is errors.ParseError
    assert isochron.ZoneRulesError is errors.ZoneRulesError
