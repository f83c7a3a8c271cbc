"""Mass unit catalog.

Closed enumerations of the supported mass units and unit styles, plus the
static facts attached to each unit (symbol, singular/plural words, and the
unit name understood by the conversion utility).

Examples:
    >>> Unit.KILOGRAM.symbol
    'kg'
    >>> Unit.POUND.plural_string
    'pounds'
    >>> Unit.from_name("oz")
    <Unit.OUNCE: 1537>
"""

from enum import IntEnum
from typing import Dict, NamedTuple, Union


class UnitStyle(IntEnum):
    """Textual rendering of a unit.

    SHORT and MEDIUM render the symbol; LONG renders the full word.
    """

    SHORT = 1
    MEDIUM = 2
    LONG = 3

    @classmethod
    def from_name(cls, style: Union["UnitStyle", str, int]) -> "UnitStyle":
        """Resolve a style member, its integer value or its (case-insensitive) name."""
        if isinstance(style, cls):
            return style
        if isinstance(style, int) and not isinstance(style, bool):
            try:
                return cls(style)
            except ValueError:
                pass
        if isinstance(style, str):
            try:
                return cls[style.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown unit style: {style!r}. Use 'short', 'medium' or 'long'")


class Unit(IntEnum):
    """Supported mass units."""

    GRAM = 11
    KILOGRAM = 14
    OUNCE = 1537
    POUND = 1538
    STONE = 1539

    @property
    def symbol(self) -> str:
        return _UNIT_FACTS[self].symbol

    @property
    def singular_string(self) -> str:
        return _UNIT_FACTS[self].singular

    @property
    def plural_string(self) -> str:
        return f"{self.singular_string}s"

    @property
    def conversion_unit(self) -> str:
        """Unit name in the conversion utility's unit space."""
        return _UNIT_FACTS[self].conversion_unit

    @property
    def is_metric(self) -> bool:
        return _UNIT_FACTS[self].system == "metric"

    @classmethod
    def from_name(cls, name: Union["Unit", str]) -> "Unit":
        """Resolve a unit from its member name, symbol, singular or plural word.

        Args:
            name: Unit member or text such as "kg", "Kilogram", "pounds"

        Returns:
            Matching Unit member

        Raises:
            ValueError: If the text does not name a supported unit

        Examples:
            >>> Unit.from_name("lb")
            <Unit.POUND: 1538>
            >>> Unit.from_name("Grams")
            <Unit.GRAM: 11>
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = name.strip().lower()
            for unit in cls:
                if key in (unit.name.lower(), unit.symbol, unit.singular_string, unit.plural_string):
                    return unit
        raise ValueError(f"Unknown mass unit: {name!r}")


class _UnitFacts(NamedTuple):
    symbol: str
    singular: str
    conversion_unit: str
    system: str


# Must cover every Unit member (checked in tests/test_units.py)
_UNIT_FACTS: Dict[Unit, _UnitFacts] = {
    Unit.GRAM: _UnitFacts("g", "gram", "gram", "metric"),
    Unit.KILOGRAM: _UnitFacts("kg", "kilogram", "kilogram", "metric"),
    Unit.OUNCE: _UnitFacts("oz", "ounce", "ounce", "imperial"),
    Unit.POUND: _UnitFacts("lb", "pound", "pound", "imperial"),
    Unit.STONE: _UnitFacts("st", "stone", "stone", "imperial"),
}


__all__ = [
    "Unit",
    "UnitStyle",
]
