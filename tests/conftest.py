"""Pytest configuration shared by unit and integration suites."""

from __future__ import annotations

from typing import Generator
from unittest.mock import MagicMock

import pytest

from sqlite_statements.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Reload settings around every test so monkeypatched env vars apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_cursor():
    """Cursor double returning one row holding a single key column."""
    cursor = MagicMock()
    cursor.fetchone.return_value = (42,)
    return cursor
