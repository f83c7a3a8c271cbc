"""Mass formatting.

MassFormatter turns a mass into a localized string. It owns three settings:
the number formatter (which also carries the locale), the unit style, and
the person-mass flag. Each formatting call only reads them.

Pipeline for string_from_kilograms():
    kilograms -> metric/imperial locale check -> unit selection
              -> conversion to that unit -> number rendering -> unit text

Examples:
    >>> formatter = MassFormatter()
    >>> formatter.string_from_kilograms(1.0)
    '2.205 lb'
    >>> formatter.unit_style = UnitStyle.LONG
    >>> formatter.string_from_value(1.0, Unit.KILOGRAM)
    '1 kilogram'
    >>> formatter.unit_string_from_kilograms(0.25)
    ('ounces', <Unit.OUNCE: 1537>)
"""

import logging
from numbers import Real
from typing import Any, Dict, Optional, Tuple, Union

from massformat.locales.localemetric import is_metric_locale
from massformat.mass.massconfig import load_config
from massformat.mass.massselect import select_unit
from massformat.numeric.numberformatter import NumberFormatter, NumberStyle
from massformat.units.unitcatalog import Unit, UnitStyle
from massformat.units.unitconvert import kilograms_to

logger = logging.getLogger(__name__)


class MassFormattingError(ValueError):
    """Raised when the number formatter cannot render a value."""


def number_formatter_from_config(config: Dict[str, Any]) -> NumberFormatter:
    """Build a decimal-style NumberFormatter from a config dict."""
    number = config.get("number") or {}
    uses_grouping = number.get("uses_grouping", True)
    if not isinstance(uses_grouping, bool):
        raise ValueError(f"number.uses_grouping must be true or false, got {uses_grouping!r}")

    return NumberFormatter(
        locale=config["locale"],
        number_style=NumberStyle.DECIMAL,
        minimum_fraction_digits=int(number.get("minimum_fraction_digits", 0)),
        maximum_fraction_digits=int(number.get("maximum_fraction_digits", 3)),
        uses_grouping=uses_grouping,
    )


class MassFormatter:
    """Format masses for display.

    Not internally synchronized. Concurrent use of one instance is safe only
    while nobody mutates its settings; otherwise keep a single writer or
    guard the instance with an external lock.

    Args:
        number_formatter: Number renderer; its locale drives unit selection.
            Defaults to a decimal NumberFormatter built from the config.
        unit_style: UnitStyle member or name. Defaults to the config value
            (medium).
        is_for_person_mass_use: Marks values as a person's body mass.
            Defaults to the config value (False). Currently advisory: unit
            selection does not consult it.
    """

    def __init__(
        self,
        number_formatter: Optional[NumberFormatter] = None,
        unit_style: Optional[Union[UnitStyle, str]] = None,
        is_for_person_mass_use: Optional[bool] = None,
    ):
        config = load_config()

        if number_formatter is None:
            number_formatter = number_formatter_from_config(config)
        if unit_style is None:
            unit_style = config["unit_style"]
        if is_for_person_mass_use is None:
            is_for_person_mass_use = config["is_for_person_mass_use"]

        self.number_formatter = number_formatter
        self.unit_style = unit_style
        self.is_for_person_mass_use = is_for_person_mass_use

    @property
    def unit_style(self) -> UnitStyle:
        return self._unit_style

    @unit_style.setter
    def unit_style(self, value: Union[UnitStyle, str]) -> None:
        self._unit_style = UnitStyle.from_name(value)

    @property
    def is_for_person_mass_use(self) -> bool:
        return self._is_for_person_mass_use

    @is_for_person_mass_use.setter
    def is_for_person_mass_use(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise ValueError(f"is_for_person_mass_use must be a bool, got {value!r}")
        self._is_for_person_mass_use = value

    @property
    def locale(self) -> str:
        """Locale identifier of the number formatter."""
        return self.number_formatter.locale

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def string_from_value(self, value: float, unit: Union[Unit, str]) -> str:
        """Format a value in the given unit, e.g. '1.5 kg' or '1.5kg'.

        Raises:
            MassFormattingError: If the number formatter cannot render value
        """
        unit = Unit.from_name(unit)
        formatted = self.number_formatter.string_from(value)
        if formatted is None:
            raise MassFormattingError(
                f"Cannot format {value!r} as string (locale {self.locale!r})"
            )

        separator = "" if self.unit_style is UnitStyle.SHORT else " "
        return f"{formatted}{separator}{self.unit_string_from_value(value, unit)}"

    def unit_string_from_value(self, value: float, unit: Union[Unit, str]) -> str:
        """Unit text for a value: the symbol, or the singular/plural word in LONG style."""
        unit = Unit.from_name(unit)
        if self.unit_style in (UnitStyle.SHORT, UnitStyle.MEDIUM):
            return unit.symbol
        if value == 1.0:
            return unit.singular_string
        return unit.plural_string

    def string_from_kilograms(self, kilograms: float) -> str:
        """Format a mass given in kilograms in the locale-appropriate unit.

        Raises:
            MassFormattingError: If the converted value cannot be rendered
        """
        value, unit = self._convert_from_kilograms(kilograms)
        return self.string_from_value(value, unit)

    def unit_string_from_kilograms(self, kilograms: float) -> Tuple[str, Unit]:
        """Unit text and unit that string_from_kilograms() would use.

        Returns:
            (unit text, selected Unit)
        """
        value, unit = self._convert_from_kilograms(kilograms)
        return self.unit_string_from_value(value, unit), unit

    def string_for(self, obj: Any) -> Optional[str]:
        """Format any object; real numbers are taken as kilograms.

        Returns None for anything that is not a real number (bools included).
        """
        if isinstance(obj, bool) or not isinstance(obj, Real):
            return None
        return self.string_from_kilograms(float(obj))

    def parse_value(self, string: str) -> None:
        """Parsing formatted masses is not supported; always returns None."""
        logger.debug(f"Parsing is not supported, no value for {string!r}")
        return None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _convert_from_kilograms(self, kilograms: float) -> Tuple[float, Unit]:
        unit = select_unit(kilograms, is_metric_locale(self.locale))
        value = kilograms_to(kilograms, unit)
        logger.debug(f"{kilograms!r} kg -> {value!r} {unit.symbol} (locale {self.locale!r})")
        return value, unit

    def __repr__(self) -> str:
        return (
            f"MassFormatter(locale={self.locale!r}, unit_style={self.unit_style.name}, "
            f"is_for_person_mass_use={self.is_for_person_mass_use})"
        )


__all__ = [
    "MassFormattingError",
    "MassFormatter",
    "number_formatter_from_config",
]
