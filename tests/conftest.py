"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import httpx
import pytest

from stellaria.config import Settings, get_settings

TEST_TOKEN = "test-token"
FIXED_TODAY = date(2025, 6, 1)

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def fixed_clock() -> Callable[[], date]:
    """Clock frozen at 2025-06-01."""
    return lambda: FIXED_TODAY


@pytest.fixture
def test_settings() -> Settings:
    return Settings(API_TOKEN=TEST_TOKEN, _env_file=None)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_http_client():
    """Build AsyncClients that answer through a MockTransport."""

    def factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url="https://api.nasa.gov",
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def apod_entry() -> dict:
    return {
        "copyright": "Jane Doe",
        "date": "2024-01-01",
        "explanation": "A spiral galaxy seen face on.",
        "hdurl": "https://apod.nasa.gov/apod/image/2401/galaxy_hd.jpg",
        "media_type": "image",
        "service_version": "v1",
        "title": "Face-on Spiral",
        "url": "https://apod.nasa.gov/apod/image/2401/galaxy.jpg",
    }
