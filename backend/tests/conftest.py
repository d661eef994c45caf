"""Root conftest — shared test configuration."""

import pytest

from hello_api.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are lru_cached; drop the cache so env changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
