from __future__ import annotations

from typing import List, Tuple

import pytest

from backend.core.entities import ResolvedLocation
from backend.core.normalizer import ForecastNormalizer, NormalizerConfig
from backend.core.providers.base import ProviderError
from backend.core.providers.geocoding import LocationNotFound
from backend.core.schemas import ForecastPayload
from backend.core.services.weather_service import WeatherReportService


class _DummyGeocoder:
    def __init__(self, location: ResolvedLocation | None = None) -> None:
        self.location = location
        self.calls: List[str] = []

    def resolve(self, city_name: str) -> ResolvedLocation:
        self.calls.append(city_name)
        if self.location is None:
            raise LocationNotFound(city_name)
        return self.location


class _DummyForecastProvider:
    def __init__(self, payload: dict | None = None) -> None:
        self.payload = payload
        self.calls: List[Tuple[float, float]] = []

    def fetch(self, latitude: float, longitude: float) -> ForecastPayload:
        self.calls.append((latitude, longitude))
        if self.payload is None:
            raise ProviderError("boom")
        return ForecastPayload.model_validate(self.payload)


LONDON = ResolvedLocation(latitude=51.50853, longitude=-0.12574, display_name="London, England, United Kingdom")


def test_report_chains_geocoder_provider_and_normalizer(forecast_payload) -> None:
    geocoder = _DummyGeocoder(LONDON)
    provider = _DummyForecastProvider(forecast_payload(timezone="Europe/London"))
    service = WeatherReportService(geocoder, provider)

    report = service.get_report("London")

    assert geocoder.calls == ["London"]
    assert provider.calls == [(51.50853, -0.12574)]
    assert report.location == "London, England, United Kingdom"
    assert report.timezone == "Europe/London"
    assert len(report.hourly) == 24
    assert len(report.daily) == 7


def test_report_uses_injected_normalizer(forecast_payload) -> None:
    normalizer = ForecastNormalizer(NormalizerConfig(hours=12, days=5))
    service = WeatherReportService(_DummyGeocoder(LONDON), _DummyForecastProvider(forecast_payload()), normalizer)

    report = service.get_report("London")

    assert len(report.hourly) == 12
    assert len(report.daily) == 5


def test_not_found_skips_forecast_call() -> None:
    provider = _DummyForecastProvider()
    service = WeatherReportService(_DummyGeocoder(None), provider)

    with pytest.raises(LocationNotFound):
        service.get_report("InvalidCityNameThatDoesNotExist123")

    assert provider.calls == []


def test_provider_failure_propagates() -> None:
    service = WeatherReportService(_DummyGeocoder(LONDON), _DummyForecastProvider(None))

    with pytest.raises(ProviderError):
        service.get_report("London")
