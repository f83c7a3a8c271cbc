"""Locale-aware number rendering.

A small mutable wrapper over babel's CLDR number formatting. It renders a
number to a localized digit string and reports failure with None rather than
raising, so callers decide how fatal an unrenderable value is.

Examples:
    >>> NumberFormatter().string_from(1234.5678)
    '1,234.568'
    >>> NumberFormatter(locale="fr_FR").string_from(2.5)
    '2,5'
    >>> NumberFormatter(locale="xx_NOPE").string_from(2.5) is None
    True
"""

import logging
import math
from decimal import Decimal, localcontext
from enum import Enum
from numbers import Real
from typing import Optional, Union

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

from massformat.locales.localemetric import locale_identifier

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"
RENDER_PRECISION = 400


class NumberStyle(Enum):
    """Number rendering styles."""

    NONE = "none"        # integer digits only, no grouping
    DECIMAL = "decimal"  # grouped integer part, bounded fraction digits


class NumberFormatter:
    """Render numbers as localized decimal strings.

    Not internally synchronized: mutate settings from one thread, or guard
    the instance with an external lock.

    Args:
        locale: Locale identifier (e.g., "de_DE") or babel Locale
        number_style: NumberStyle.DECIMAL (default) or NumberStyle.NONE
        minimum_fraction_digits: Fraction digits always shown (DECIMAL only)
        maximum_fraction_digits: Fraction digits shown at most (DECIMAL only)
        uses_grouping: Whether to group integer digits (DECIMAL only)
    """

    def __init__(
        self,
        locale: Union[str, Locale] = DEFAULT_LOCALE,
        number_style: NumberStyle = NumberStyle.DECIMAL,
        minimum_fraction_digits: int = 0,
        maximum_fraction_digits: int = 3,
        uses_grouping: bool = True,
    ):
        self.locale = locale
        self.number_style = NumberStyle(number_style)
        self.minimum_fraction_digits = minimum_fraction_digits
        self.maximum_fraction_digits = maximum_fraction_digits
        self.uses_grouping = uses_grouping

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    @property
    def locale(self) -> str:
        """Locale identifier exactly as it was given (e.g., 'en_US')."""
        return self._locale_id

    @locale.setter
    def locale(self, value: Union[str, Locale]) -> None:
        # babel may expand the identifier (vai_LR -> vai_Vaii_LR); the parsed
        # Locale is only used for rendering. An unknown locale is kept as-is
        # and rendering then reports failure.
        self._babel_locale = _parse_locale(value)
        self._locale_id = locale_identifier(value) if isinstance(value, Locale) else str(value)

    @property
    def minimum_fraction_digits(self) -> int:
        return self._minimum_fraction_digits

    @minimum_fraction_digits.setter
    def minimum_fraction_digits(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"minimum_fraction_digits must be >= 0, got {value}")
        self._minimum_fraction_digits = int(value)

    @property
    def maximum_fraction_digits(self) -> int:
        return self._maximum_fraction_digits

    @maximum_fraction_digits.setter
    def maximum_fraction_digits(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"maximum_fraction_digits must be >= 0, got {value}")
        self._maximum_fraction_digits = int(value)

    @property
    def pattern(self) -> str:
        """CLDR number pattern built from the current settings."""
        if self.number_style is NumberStyle.NONE:
            return "0"

        integer = "#,##0" if self.uses_grouping else "0"
        minimum = min(self.minimum_fraction_digits, self.maximum_fraction_digits)
        fraction = "0" * minimum + "#" * (self.maximum_fraction_digits - minimum)
        return f"{integer}.{fraction}" if fraction else integer

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def string_from(self, value: Union[Real, Decimal]) -> Optional[str]:
        """Render a number, or return None if it cannot be rendered.

        Rendering fails for non-numeric input (including bool), NaN,
        infinities, an unknown or malformed locale, and Decimals too large
        for RENDER_PRECISION digits.
        """
        if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
            logger.debug(f"Cannot render non-numeric value {value!r}")
            return None

        if isinstance(value, Decimal):
            finite = value.is_finite()
        else:
            finite = math.isfinite(value)
        if not finite:
            logger.debug(f"Cannot render non-finite value {value!r}")
            return None

        if self._babel_locale is None:
            logger.debug(f"Cannot render {value!r}: unknown locale {self._locale_id!r}")
            return None

        # Room for every digit of the largest finite float plus the fraction.
        with localcontext() as ctx:
            ctx.prec = RENDER_PRECISION
            try:
                return format_decimal(value, format=self.pattern, locale=self._babel_locale)
            except ArithmeticError as e:
                logger.debug(f"Cannot render {value!r}: {e!r}")
                return None

    def __repr__(self) -> str:
        return (
            f"NumberFormatter(locale={self.locale!r}, number_style={self.number_style}, "
            f"pattern={self.pattern!r})"
        )


def _parse_locale(value: Union[str, Locale]) -> Optional[Locale]:
    if isinstance(value, Locale):
        return value
    try:
        return Locale.parse(value)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug(f"Unknown locale {value!r}: {e}")
        return None


__all__ = [
    "DEFAULT_LOCALE",
    "NumberStyle",
    "NumberFormatter",
]
