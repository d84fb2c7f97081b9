"""REST API views for weather information."""
from __future__ import annotations

import logging
from functools import lru_cache

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.core.normalizer import ForecastNormalizer, NormalizerConfig
from backend.core.providers.base import ProviderError, RequestConfig
from backend.core.providers.geocoding import GeocodingUnavailable, LocationNotFound, OpenMeteoGeocoder
from backend.core.providers.openmeteo import OpenMeteoForecastProvider
from backend.core.services.weather_service import WeatherReportService


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherReportService:
    request_config = RequestConfig(timeout=settings.WEATHER_HTTP_TIMEOUT)
    normalizer = ForecastNormalizer(
        NormalizerConfig(
            hours=settings.WEATHER_HOURS,
            days=settings.WEATHER_DAYS,
            hourly_uv_index=settings.WEATHER_HOURLY_UV_INDEX,
            fallback_timezone=settings.WEATHER_FALLBACK_TIMEZONE,
        )
    )
    return WeatherReportService(
        geocoder=OpenMeteoGeocoder(base_url=settings.WEATHER_GEOCODING_URL, request_config=request_config),
        forecast_provider=OpenMeteoForecastProvider(
            base_url=settings.WEATHER_FORECAST_URL,
            hours=settings.WEATHER_HOURS,
            days=settings.WEATHER_DAYS,
            request_config=request_config,
        ),
        normalizer=normalizer,
    )


def _error(detail: str, status_code: int) -> Response:
    return Response({"detail": detail}, status=status_code)


class WeatherView(APIView):
    """Current, hourly and daily weather for a city name."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the weather report for the ``location`` query parameter."""
        location = (request.query_params.get("location") or "").strip()
        if not location:
            return _error("location query parameter is required", status.HTTP_400_BAD_REQUEST)

        try:
            report = get_weather_service().get_report(location)
        except LocationNotFound:
            logger.warning("Location %r not found", location)
            return _error(f"Location '{location}' not found", status.HTTP_404_NOT_FOUND)
        except GeocodingUnavailable as exc:
            logger.error("Geocoding failed for %r: %s", location, exc)
            if settings.WEATHER_GEOCODER_FAILURE_IS_NOT_FOUND:
                return _error(f"Location '{location}' not found", status.HTTP_404_NOT_FOUND)
            return _error("Geocoding service unavailable", status.HTTP_500_INTERNAL_SERVER_ERROR)
        except ProviderError as exc:
            logger.error("Forecast failed for %r: %s", location, exc)
            return _error("Failed to fetch weather data", status.HTTP_500_INTERNAL_SERVER_ERROR)
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error while building weather for %r", location)
            return _error("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(report.as_dict(), status=status.HTTP_200_OK)
