"""Mass module for locale-aware mass formatting.

Public API:
    MassFormatter
        Configurable formatter (number formatter, unit style, person-mass flag)

    format_mass(value, unit, *, locale=None, unit_style=None) -> str
        Format a value in an explicit unit

    format_kilograms(kilograms, *, locale=None, unit_style=None) -> str
        Format kilograms in the locale-appropriate unit

    unit_for_kilograms(kilograms, *, locale=None, unit_style=None) -> dict
        Unit, unit text and converted value format_kilograms() would use

    list_units(system=None) -> DataFrame
        Supported units with symbols, names and kilogram factors

Examples:
    >>> from massformat.mass import MassFormatter, format_kilograms
    >>> format_kilograms(1.0)
    '2.205 lb'
    >>> format_kilograms(1.0, locale="de_DE", unit_style="short")
    '1.000g'
"""

from .massformatter import (
    MassFormatter,
    MassFormattingError,
)
from .massselect import select_unit
from .massapi import (
    format_mass,
    format_kilograms,
    unit_for_kilograms,
    list_units,
)

__all__ = [
    "MassFormatter",
    "MassFormattingError",
    "select_unit",
    "format_mass",
    "format_kilograms",
    "unit_for_kilograms",
    "list_units",
]
