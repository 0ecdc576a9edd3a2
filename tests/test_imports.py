"""Tests for Picochron package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_picochron() -> None:
    """Import picochron package succeeds."""
    import picochron

    assert hasattr(picochron, "__version__")
    assert picochron.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import picochron.core submodule succeeds."""
    from picochron import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import picochron.units submodule succeeds."""
    from picochron import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import picochron.format submodule succeeds."""
    from picochron import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import picochron.convert submodule succeeds."""
    from picochron import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import picochron.arithmetic submodule succeeds."""
    from picochron import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import picochron._internal submodule succeeds."""
    from picochron import _internal

    assert hasattr(_internal, "__all__")


def test_public_names_resolve() -> None:
    """Every name in picochron.__all__ exists."""
    import picochron

    for name in picochron.__all__:
        assert hasattr(picochron, name), name


def test_units_enums() -> None:
    """TimeUnit and Weekday expose their helpers."""
    from fractions import Fraction

    from picochron import TimeUnit, Weekday

    assert TimeUnit.MILLISECOND.to_seconds() == Fraction(1, 1000)
    assert TimeUnit.DAY.symbol == "d"
    assert Weekday.SATURDAY.is_weekend
    assert not Weekday.FRIDAY.is_weekend


def test_is_valid_date_is_public() -> None:
    """is_valid_date is available from the package root."""
    from picochron import DateTime, is_valid_date

    assert is_valid_date(2024, 2, 29)
    assert not is_valid_date(2023, 2, 29)
    assert not is_valid_date(10000, 1, 1)
    assert DateTime(2024, 2, 29).day == 29
