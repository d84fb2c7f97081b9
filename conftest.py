from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings")
# Provider response bodies are logged in tests.
os.environ.setdefault("TESTING_MODE", "1")
os.environ.setdefault("WEATHER_LOG_LEVEL", "DEBUG")

django.setup()

from backend.api.views import get_weather_service  # noqa: E402  (needs configured settings)


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture(autouse=True)
def fresh_weather_service():
    """Rebuild the cached service per test so settings overrides take effect."""
    get_weather_service.cache_clear()
    yield
    get_weather_service.cache_clear()
