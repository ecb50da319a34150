"""Tests for Datewise package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_datewise() -> None:
    """Import datewise package succeeds."""
    import datewise

    assert hasattr(datewise, "__version__")
    assert datewise.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import datewise.core submodule succeeds."""
    from datewise import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import datewise.units submodule succeeds."""
    from datewise import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import datewise.format submodule succeeds."""
    from datewise import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import datewise.convert submodule succeeds."""
    from datewise import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import datewise.arithmetic submodule succeeds."""
    from datewise import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import datewise._internal submodule succeeds."""
    from datewise import _internal

    assert hasattr(_internal, "__all__")


def test_public_names_resolve() -> None:
    """Every name in datewise.__all__ is an attribute of the package."""
    import datewise

    for name in datewise.__all__:
        assert hasattr(datewise, name), name


def test_errors_share_base_class() -> None:
    """All library exceptions derive from DatewiseError."""
    from datewise import (
        DatewiseError,
        InvalidFieldCombination,
        ParseError,
        TimezoneError,
        UnknownTimeZone,
        ValidationError,
    )

    for error in (InvalidFieldCombination, ParseError, TimezoneError, UnknownTimeZone, ValidationError):
        assert issubclass(error, DatewiseError)
    assert issubclass(InvalidFieldCombination, ValidationError)
    assert issubclass(UnknownTimeZone, TimezoneError)
