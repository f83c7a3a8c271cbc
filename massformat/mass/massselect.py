"""Display unit selection for a mass given in kilograms."""

import logging

from massformat.units.unitcatalog import Unit
from massformat.units.unitconvert import kilograms_to

logger = logging.getLogger(__name__)

OUNCES_PER_POUND = 16.0


def select_unit(kilograms: float, is_metric: bool) -> Unit:
    """Pick the unit a mass should be displayed in.

    Metric locales get GRAM when ``kilograms > 0.0 or kilograms < 1.0`` and
    KILOGRAM otherwise. That condition holds for every finite value and for
    both infinities, so KILOGRAM is only reached for NaN.

    Imperial locales get POUND above one pound (more than 16 ounces) or for
    negative masses, and OUNCE otherwise, including NaN.

    Args:
        kilograms: Magnitude in kilograms
        is_metric: Whether the locale uses metric mass units

    Returns:
        Selected Unit

    Examples:
        >>> select_unit(500.0, True)
        <Unit.GRAM: 11>
        >>> select_unit(1.0, False)
        <Unit.POUND: 1538>
        >>> select_unit(0.25, False)
        <Unit.OUNCE: 1537>
    """
    if is_metric:
        if kilograms > 0.0 or kilograms < 1.0:
            unit = Unit.GRAM
        else:
            unit = Unit.KILOGRAM
    else:
        ounces = kilograms_to(kilograms, Unit.OUNCE)
        if ounces < 0.0 or ounces > OUNCES_PER_POUND:
            unit = Unit.POUND
        else:
            unit = Unit.OUNCE

    logger.debug(f"Selected {unit.name} for {kilograms!r} kg (metric={is_metric})")
    return unit


__all__ = [
    "select_unit",
]
