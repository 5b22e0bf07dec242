"""Root conftest — shared test configuration."""

import os
from datetime import datetime, timezone

import pytest

# Keep tests independent of a developer's .env
os.environ.setdefault("CRAWL_TIMEOUT_MINUTES", "60")
os.environ.setdefault("LOG_FORMAT", "text")

from llm_boost.config import get_settings  # noqa: E402


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
