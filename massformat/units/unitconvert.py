"""Linear mass conversion backed by pint.

The registry is built once and reused; every supported unit is a fixed
multiple of the kilogram, so conversions are exact linear scalings.

Examples:
    >>> convert_mass(1.0, Unit.KILOGRAM, Unit.POUND)
    2.2046226218487757
    >>> kilograms_to(0.25, Unit.GRAM)
    250.0
"""

import logging
from functools import lru_cache
from typing import Union

import pint

from massformat.units.unitcatalog import Unit

logger = logging.getLogger(__name__)

UnitLike = Union[Unit, str]


class UnitConversionError(ValueError):
    """Raised when a unit is not known to the conversion utility."""


@lru_cache(maxsize=1)
def get_registry() -> pint.UnitRegistry:
    """Return the shared unit registry (built on first use)."""
    logger.debug("Building pint unit registry")
    return pint.UnitRegistry()


def _unit_name(unit: UnitLike) -> str:
    if isinstance(unit, Unit):
        return unit.conversion_unit
    return str(unit)


def convert_mass(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """Convert a mass value between units.

    Args:
        value: Magnitude expressed in from_unit
        from_unit: Unit member or pint unit name (e.g., "kilogram")
        to_unit: Unit member or pint unit name

    Returns:
        Magnitude expressed in to_unit. Returned unchanged when both units
        are the same.

    Raises:
        UnitConversionError: If either unit is unknown or not a mass unit
    """
    source = _unit_name(from_unit)
    target = _unit_name(to_unit)

    if source == target:
        return value

    ureg = get_registry()
    try:
        quantity = ureg.Quantity(value, source)
        return float(quantity.to(target).magnitude)
    except (pint.UndefinedUnitError, pint.DimensionalityError) as e:
        raise UnitConversionError(f"Cannot convert {source!r} to {target!r}: {e}") from e


def kilograms_to(kilograms: float, unit: UnitLike) -> float:
    """Convert a value in kilograms to the given unit."""
    return convert_mass(kilograms, Unit.KILOGRAM, unit)


def kilograms_per_unit(unit: UnitLike) -> float:
    """Mass of one unit, in kilograms."""
    return convert_mass(1.0, unit, Unit.KILOGRAM)


__all__ = [
    "UnitConversionError",
    "convert_mass",
    "kilograms_to",
    "kilograms_per_unit",
    "get_registry",
]
