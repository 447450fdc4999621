"""Shared fixtures for login_api tests."""

import pytest

from login_api.core.config import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """get_settings() is lru_cached; never leak one test's settings into the next."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
