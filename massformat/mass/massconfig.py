"""Formatter configuration defaults.

Defaults for new MassFormatter instances are read from massconfig.yaml, which
ships next to this module. Keys missing from the file fall back to the
built-in values below; a missing file means built-in values only.
"""

import copy
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).parent / "massconfig.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "locale": "en_US",
    "unit_style": "medium",
    "is_for_person_mass_use": False,
    "number": {
        "minimum_fraction_digits": 0,
        "maximum_fraction_digits": 3,
        "uses_grouping": True,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@lru_cache(maxsize=4)
def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load formatter defaults from YAML.

    Args:
        path: Optional path to a YAML file. Defaults to the packaged
              massconfig.yaml.

    Returns:
        Dictionary with keys locale, unit_style, is_for_person_mass_use
        and number (minimum_fraction_digits, maximum_fraction_digits,
        uses_grouping). Treat as read-only; it is cached.

    Raises:
        ValueError: If the file does not contain a YAML mapping
    """
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        logger.warning(f"Config file {config_path} not found, using built-in defaults")
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Expected a mapping in {config_path}, got {type(loaded).__name__}")

    logger.info(f"Loaded formatter defaults from {config_path}")
    return _merge(DEFAULT_CONFIG, loaded)


def clear_cache():
    """Clear the cached configuration.

    Useful for testing or after editing the YAML file.
    """
    load_config.cache_clear()
    logger.info("Cleared formatter config cache")


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_CONFIG",
    "load_config",
    "clear_cache",
]
