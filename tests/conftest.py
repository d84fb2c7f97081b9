from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

import pytest

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

HOURLY_CODES = [0, 3, 61, 95, 1234]
DAILY_UV = [5.5, None, 0.0, 7.49, 11.6, 3.2, 2.5]


def make_forecast_payload(
    hours: int = 24,
    days: int = 7,
    timezone: Optional[str] = "America/Los_Angeles",
) -> Dict[str, Any]:
    start = datetime(2024, 6, 1, 10, 0)
    payload: Dict[str, Any] = {
        "latitude": 37.77,
        "longitude": -122.42,
        "current": {
            "time": "2024-06-01T10:15",
            "interval": 900,
            "temperature_2m": 16.44,
            "weather_code": 2,
            "uv_index": 4.5,
        },
        "hourly": {
            "time": [(start + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M") for i in range(hours)],
            "temperature_2m": [12.25 + 0.5 * i for i in range(hours)],
            "weather_code": [HOURLY_CODES[i % len(HOURLY_CODES)] for i in range(hours)],
        },
        "daily": {
            "time": [(start + timedelta(days=d)).strftime("%Y-%m-%d") for d in range(days)],
            "weather_code": [61 if d % 2 else 0 for d in range(days)],
            "temperature_2m_max": [18.55 + d for d in range(days)],
            "temperature_2m_min": [10.0 + d for d in range(days)],
            "uv_index_max": [DAILY_UV[d % len(DAILY_UV)] for d in range(days)],
        },
    }
    if timezone is not None:
        payload["timezone"] = timezone
    return payload


def make_geocoding_payload(**match: Any) -> Dict[str, Any]:
    result = {
        "name": "San Francisco",
        "latitude": 37.77493,
        "longitude": -122.41942,
        "admin1": "California",
        "country": "United States",
        "timezone": "America/Los_Angeles",
    }
    result.update(match)
    return {"results": [result], "generationtime_ms": 0.6}


@pytest.fixture()
def forecast_payload() -> Callable[..., Dict[str, Any]]:
    return make_forecast_payload


@pytest.fixture()
def geocoding_payload() -> Callable[..., Dict[str, Any]]:
    return make_geocoding_payload
