"""Fixtures for live tests against api.nasa.gov."""

from __future__ import annotations

import os

import pytest

from stellaria.client import StellariaClient


@pytest.fixture
def api_token() -> str:
    """Token for live calls; skip when none is configured."""
    token = os.environ.get("API_TOKEN")
    if not token:
        pytest.skip("API_TOKEN not set")
    return token


@pytest.fixture
def live_client(api_token) -> StellariaClient:
    return StellariaClient(api_token)
