"""Locales module: metric / imperial classification of locale identifiers."""

from .localemetric import (
    NON_METRIC_LOCALES,
    is_metric_locale,
    locale_identifier,
)

__all__ = [
    "NON_METRIC_LOCALES",
    "is_metric_locale",
    "locale_identifier",
]
