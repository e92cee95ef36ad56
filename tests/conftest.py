"""
Pytest fixtures for GiroCode testing.
"""

from collections.abc import Iterator

import pytest

from girocode.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
