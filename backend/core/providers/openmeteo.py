from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from .base import HttpProvider, UpstreamDataError
from ..schemas import ForecastPayload


CURRENT_FIELDS = ["temperature_2m", "weather_code", "uv_index"]
HOURLY_FIELDS = ["temperature_2m", "weather_code"]
DAILY_FIELDS = ["weather_code", "temperature_2m_max", "temperature_2m_min", "uv_index_max"]


class OpenMeteoForecastProvider(HttpProvider):
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(
        self,
        base_url: Optional[str] = None,
        hours: int = 24,
        days: int = 7,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self.hours = hours
        self.days = days

    def fetch(self, latitude: float, longitude: float) -> ForecastPayload:
        """Return the validated forecast payload for the given coordinates.

        ``timezone=auto`` makes every timestamp local to the coordinates and
        ``forecast_hours`` anchors the hourly series at the current hour.
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
            "hourly": ",".join(HOURLY_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
            "forecast_days": self.days,
            "forecast_hours": self.hours,
        }
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        try:
            return ForecastPayload.model_validate(data)
        except ValidationError as exc:
            self._log.error("Invalid forecast payload for %s,%s", latitude, longitude, exc_info=exc)
            raise UpstreamDataError("forecast payload is missing required data") from exc


__all__ = ["OpenMeteoForecastProvider"]
