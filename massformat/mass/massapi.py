"""Mass formatting API.

Stateless entry points over MassFormatter for callers that do not want to
hold a formatter instance, plus a listing of the supported units.
"""

from typing import Optional, Union

import pandas as pd

from massformat.mass.massformatter import MassFormatter
from massformat.units.unitcatalog import Unit, UnitStyle
from massformat.units.unitconvert import kilograms_per_unit, kilograms_to


def _formatter(
    locale: Optional[str],
    unit_style: Optional[Union[UnitStyle, str]],
) -> MassFormatter:
    formatter = MassFormatter(unit_style=unit_style)
    if locale is not None:
        formatter.number_formatter.locale = locale
    return formatter


def format_mass(
    value: float,
    unit: Union[Unit, str],
    *,
    locale: Optional[str] = None,
    unit_style: Optional[Union[UnitStyle, str]] = None,
) -> str:
    """Format a value in an explicit unit.

    Args:
        value: Magnitude in the given unit
        unit: Unit member or name ("kg", "pound", "OUNCE", ...)
        locale: Locale identifier. Default from config (en_US).
        unit_style: "short" | "medium" | "long". Default from config (medium).

    Returns:
        Formatted string

    Raises:
        MassFormattingError: If the value cannot be rendered
        ValueError: If unit or unit_style is unknown

    Examples:
        >>> format_mass(1.2, "kg", unit_style="long")
        '1.2 kilograms'
        >>> format_mass(2.5, Unit.POUND, unit_style="short")
        '2.5lb'
        >>> format_mass(2.5, "g", locale="de_DE")
        '2,5 g'
    """
    return _formatter(locale, unit_style).string_from_value(value, unit)


def format_kilograms(
    kilograms: float,
    *,
    locale: Optional[str] = None,
    unit_style: Optional[Union[UnitStyle, str]] = None,
) -> str:
    """Format a mass in kilograms using the locale-appropriate unit.

    Examples:
        >>> format_kilograms(1.0)
        '2.205 lb'
        >>> format_kilograms(0.5, locale="fr_FR", unit_style="long")
        '500 grams'
    """
    return _formatter(locale, unit_style).string_from_kilograms(kilograms)


def unit_for_kilograms(
    kilograms: float,
    *,
    locale: Optional[str] = None,
    unit_style: Optional[Union[UnitStyle, str]] = None,
) -> dict:
    """Describe the unit string_from_kilograms() would use.

    Returns:
        {
            "unit": Unit,          # Selected unit
            "unit_string": str,    # Unit text in the requested style
            "value": float         # Mass converted to the selected unit
        }

    Examples:
        >>> unit_for_kilograms(1.0)
        {'unit': <Unit.POUND: 1538>, 'unit_string': 'lb', 'value': 2.2046226218487757}
    """
    formatter = _formatter(locale, unit_style)
    unit_string, unit = formatter.unit_string_from_kilograms(kilograms)
    return {
        "unit": unit,
        "unit_string": unit_string,
        "value": kilograms_to(kilograms, unit),
    }


def list_units(system: Optional[str] = None) -> pd.DataFrame:
    """List supported mass units.

    Args:
        system: Optional filter, "metric" or "imperial"

    Returns:
        DataFrame with columns:
          - unit: Unit member name (e.g., "GRAM")
          - code: Integer code of the unit
          - symbol, singular, plural: Display strings
          - conversion_unit: Unit name used for conversion
          - kilograms: Mass of one unit in kilograms
          - system: "metric" | "imperial"

    Examples:
        >>> list_units(system="imperial")[["symbol", "singular"]].values
        array([['oz', 'ounce'], ['lb', 'pound'], ['st', 'stone']], dtype=object)
    """
    if system is not None and system not in ("metric", "imperial"):
        raise ValueError(f"Unknown unit system: {system!r}. Use 'metric' or 'imperial'")

    df = pd.DataFrame([
        {
            "unit": unit.name,
            "code": int(unit),
            "symbol": unit.symbol,
            "singular": unit.singular_string,
            "plural": unit.plural_string,
            "conversion_unit": unit.conversion_unit,
            "kilograms": kilograms_per_unit(unit),
            "system": "metric" if unit.is_metric else "imperial",
        }
        for unit in Unit
    ])

    if system is not None:
        df = df[df["system"] == system].reset_index(drop=True)

    return df


__all__ = [
    "format_mass",
    "format_kilograms",
    "unit_for_kilograms",
    "list_units",
]
