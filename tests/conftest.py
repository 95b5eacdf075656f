"""Shared fixtures for localekit tests."""

import pytest

from tests.factories.i18n import make_translation_table


@pytest.fixture
def translation_table():
    """Sample en/fr translation table."""
    return make_translation_table()
