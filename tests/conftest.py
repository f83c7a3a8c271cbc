"""Shared test fixtures and utilities for massformat tests."""

import pytest

from massformat.mass.massconfig import clear_cache
from massformat.mass.massformatter import MassFormatter
from massformat.numeric.numberformatter import NumberFormatter


@pytest.fixture(autouse=True)
def fresh_config():
    """Clear the cached formatter config around every test.

    Tests that load a custom YAML file must not leak it into other tests.
    """
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def us_formatter():
    """MassFormatter in en_US (imperial), medium style."""
    return MassFormatter(number_formatter=NumberFormatter(locale="en_US"))


@pytest.fixture
def fr_formatter():
    """MassFormatter in fr_FR (metric), medium style."""
    return MassFormatter(number_formatter=NumberFormatter(locale="fr_FR"))


@pytest.fixture
def de_formatter():
    """MassFormatter in de_DE (metric), medium style."""
    return MassFormatter(number_formatter=NumberFormatter(locale="de_DE"))
