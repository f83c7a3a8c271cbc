"""Units module: mass unit catalog and conversion.

Public API:
    Unit, UnitStyle
        Closed enumerations of mass units and unit rendering styles

    convert_mass(value, from_unit, to_unit) -> float
        Linear conversion between mass units

    kilograms_to(kilograms, unit) -> float
        Convert a value in kilograms to another unit

Examples:
    >>> from massformat.units import Unit, convert_mass
    >>> Unit.STONE.plural_string
    'stones'
    >>> convert_mass(2.5, Unit.KILOGRAM, Unit.GRAM)
    2500.0
"""

from .unitcatalog import (
    Unit,
    UnitStyle,
)
from .unitconvert import (
    UnitConversionError,
    convert_mass,
    kilograms_to,
    kilograms_per_unit,
)

__all__ = [
    "Unit",
    "UnitStyle",
    "UnitConversionError",
    "convert_mass",
    "kilograms_to",
    "kilograms_per_unit",
]
