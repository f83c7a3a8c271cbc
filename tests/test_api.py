"""Integration tests for the public API.

These tests verify that the main public API (massformat/__init__.py)
works end to end: formatting functions, unit listing and re-exports.

For unit tests of specific modules, see:
- test_units.py - Unit catalog and conversion
- test_locales.py - Metric / imperial classification
- test_numeric.py - Number rendering
- test_mass.py - Unit selection and MassFormatter

Run with: pytest tests/test_api.py
"""

import math

import pandas as pd
import pytest

import massformat
from massformat import (
    MassFormatter,
    MassFormattingError,
    Unit,
    UnitStyle,
    format_mass,
    format_kilograms,
    unit_for_kilograms,
    list_units,
)


class TestFormatMass:

    def test_long(self):
        assert format_mass(1.2, "kg", unit_style="long") == "1.2 kilograms"

    def test_short(self):
        assert format_mass(2.5, Unit.POUND, unit_style="short") == "2.5lb"

    def test_default_style_is_medium(self):
        assert format_mass(2.5, "oz") == "2.5 oz"

    def test_locale(self):
        assert format_mass(2.5, "g", locale="de_DE") == "2,5 g"

    def test_style_member(self):
        assert format_mass(1.0, "stone", unit_style=UnitStyle.LONG) == "1 stone"

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            format_mass(1.0, "furlong")

    def test_unrenderable(self):
        with pytest.raises(MassFormattingError):
            format_mass(math.inf, "kg")


class TestFormatKilograms:

    def test_default_locale_is_imperial(self):
        assert format_kilograms(1.0) == "2.205 lb"

    def test_metric_locale(self):
        assert format_kilograms(0.5, locale="fr_FR", unit_style="long") == "500 grams"

    def test_unknown_locale(self):
        with pytest.raises(MassFormattingError):
            format_kilograms(1.0, locale="xx_NOPE")

    def test_nan(self):
        with pytest.raises(MassFormattingError):
            format_kilograms(float("nan"))

    def test_matches_formatter(self):
        formatter = MassFormatter()
        for kilograms in (0.1, 1.0, 12.5):
            assert format_kilograms(kilograms) == formatter.string_from_kilograms(kilograms)


class TestUnitForKilograms:

    def test_us(self):
        result = unit_for_kilograms(1.0)
        assert result["unit"] is Unit.POUND
        assert result["unit_string"] == "lb"
        assert result["value"] == pytest.approx(2.20462, rel=1e-5)

    def test_long_metric(self):
        result = unit_for_kilograms(0.25, locale="de_DE", unit_style="long")
        assert result["unit"] is Unit.GRAM
        assert result["unit_string"] == "grams"
        assert result["value"] == pytest.approx(250.0)


class TestListUnits:

    def test_all_units(self):
        df = list_units()
        assert isinstance(df, pd.DataFrame)
        assert len(df) == len(Unit)
        assert list(df.columns) == [
            "unit", "code", "symbol", "singular", "plural",
            "conversion_unit", "kilograms", "system",
        ]
        assert list(df["symbol"]) == ["g", "kg", "oz", "lb", "st"]

    def test_filter_system(self):
        imperial = list_units(system="imperial")
        assert list(imperial["singular"]) == ["ounce", "pound", "stone"]
        metric = list_units(system="metric")
        assert list(metric["unit"]) == ["GRAM", "KILOGRAM"]

    def test_kilogram_factors(self):
        df = list_units().set_index("symbol")
        assert df.loc["kg", "kilograms"] == 1.0
        assert df.loc["g", "kilograms"] == pytest.approx(0.001)
        assert df.loc["lb", "kilograms"] == pytest.approx(0.45359237)

    def test_unknown_system(self):
        with pytest.raises(ValueError, match="Unknown unit system"):
            list_units(system="nautical")


class TestExports:

    def test_version(self):
        assert massformat.__version__ == "0.0.1"

    def test_all_names_importable(self):
        for name in massformat.__all__:
            assert hasattr(massformat, name), name
