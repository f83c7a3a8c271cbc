"""Numeric module: locale-aware decimal rendering (babel)."""

from .numberformatter import (
    DEFAULT_LOCALE,
    NumberStyle,
    NumberFormatter,
)

__all__ = [
    "DEFAULT_LOCALE",
    "NumberStyle",
    "NumberFormatter",
]
