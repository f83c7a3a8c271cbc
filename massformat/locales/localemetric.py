"""Metric / imperial locale classification.

CLDR measurement-system metadata is not consulted here. The set below is the
fixed list of locale identifiers whose conventional mass units are ounces and
pounds; every other identifier is treated as metric.

Examples:
    >>> is_metric_locale("en_US")
    False
    >>> is_metric_locale("fr_FR")
    True
"""

from typing import FrozenSet, Union

from babel import Locale

NON_METRIC_LOCALES: FrozenSet[str] = frozenset({
    "en_US",
    "en_US_POSIX",
    "haw_US",
    "es_US",
    "chr_US",
    "my_MM",
    "en_LR",
    "vai_LR",
})


def locale_identifier(locale: Union[str, Locale]) -> str:
    """Identifier of a locale in language_TERRITORY_VARIANT form.

    Strings are returned unchanged. For a babel Locale the script subtag is
    left out, since Locale.parse() adds one for some locales (vai_LR parses
    to vai_Vaii_LR).

    Examples:
        >>> locale_identifier(Locale.parse("vai_LR"))
        'vai_LR'
        >>> locale_identifier(Locale.parse("en_US_POSIX"))
        'en_US_POSIX'
    """
    if isinstance(locale, Locale):
        return "_".join(part for part in (locale.language, locale.territory, locale.variant) if part)
    return str(locale)


def is_metric_locale(locale: Union[str, Locale]) -> bool:
    """Return whether a locale uses metric mass units.

    Args:
        locale: Locale identifier (e.g., "en_US") or babel Locale.
            Identifiers are compared exactly, without normalization.

    Returns:
        False if the identifier is in NON_METRIC_LOCALES, True otherwise
    """
    return locale_identifier(locale) not in NON_METRIC_LOCALES


__all__ = [
    "NON_METRIC_LOCALES",
    "is_metric_locale",
    "locale_identifier",
]
