"""massformat - Locale-aware mass formatting

Formats a mass with a unit into a human-readable string for a locale, and
picks the display unit for a raw kilogram value (grams in metric locales,
ounces or pounds in imperial ones).

Usage:
    from massformat import MassFormatter, Unit, UnitStyle
    from massformat import format_mass, format_kilograms

    formatter = MassFormatter()
    formatter.string_from_kilograms(1.0)                # '2.205 lb'
    formatter.unit_style = UnitStyle.LONG
    formatter.string_from_value(1.2, Unit.KILOGRAM)     # '1.2 kilograms'

    format_kilograms(0.5, locale="fr_FR")                # '500 g'
"""

__version__ = "0.0.1"

# ============================================================================
# Formatter
# ============================================================================

from .mass.massformatter import (
    MassFormatter,        # Primary API - configurable mass formatter
    MassFormattingError,  # Raised when a value cannot be rendered
)

# ============================================================================
# Functional API
# ============================================================================

from .mass.massapi import (
    format_mass,          # Format value + explicit unit
    format_kilograms,     # Format kilograms in the locale-appropriate unit
    unit_for_kilograms,   # Unit that format_kilograms() would use
    list_units,           # List supported units
)

# ============================================================================
# Building Blocks
# ============================================================================

from .units.unitcatalog import Unit, UnitStyle
from .units.unitconvert import UnitConversionError, convert_mass
from .locales.localemetric import is_metric_locale
from .numeric.numberformatter import NumberFormatter, NumberStyle
from .mass.massselect import select_unit

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "MassFormatter",
    "format_mass",
    "format_kilograms",

    # ========================================================================
    # Formatting support
    # ========================================================================
    "unit_for_kilograms",
    "list_units",
    "MassFormattingError",

    # ========================================================================
    # Building blocks
    # ========================================================================
    "Unit",
    "UnitStyle",
    "UnitConversionError",
    "convert_mass",
    "is_metric_locale",
    "NumberFormatter",
    "NumberStyle",
    "select_unit",
]
