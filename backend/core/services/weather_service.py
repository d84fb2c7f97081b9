"""Weather report service: geocode a city, fetch its forecast and normalize it."""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from backend.core.entities import ResolvedLocation, WeatherResponse
from backend.core.normalizer import ForecastNormalizer
from backend.core.schemas import ForecastPayload


logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    def resolve(self, city_name: str) -> ResolvedLocation:
        ...


class ForecastProvider(Protocol):
    def fetch(self, latitude: float, longitude: float) -> ForecastPayload:
        ...


class WeatherReportService:
    """Run the two sequential upstream calls for one request.

    Errors from the geocoder, the provider and the normalizer propagate
    unchanged so the caller can map them to its own status codes.
    """

    def __init__(
        self,
        geocoder: Geocoder,
        forecast_provider: ForecastProvider,
        normalizer: Optional[ForecastNormalizer] = None,
    ) -> None:
        self.geocoder = geocoder
        self.forecast_provider = forecast_provider
        self.normalizer = normalizer or ForecastNormalizer()

    def get_report(self, city_name: str) -> WeatherResponse:
        location = self.geocoder.resolve(city_name)
        logger.info(
            "Resolved %r to %s (%.4f, %.4f)",
            city_name,
            location.display_name,
            location.latitude,
            location.longitude,
        )
        payload = self.forecast_provider.fetch(location.latitude, location.longitude)
        return self.normalizer.normalize(location, payload)


__all__ = ["ForecastProvider", "Geocoder", "WeatherReportService"]
