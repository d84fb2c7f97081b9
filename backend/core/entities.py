"""Value types returned by the weather API."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ResolvedLocation:
    """Best geocoding match for a user supplied city name."""

    latitude: float
    longitude: float
    display_name: str


@dataclass(frozen=True)
class Weather:
    """Single forecast entry.

    Temperatures are in Celsius. Hourly entries carry no separate bounds so
    ``temperature_min`` and ``temperature_max`` repeat ``temperature``.
    """

    time: str
    temperature: float
    temperature_min: float
    temperature_max: float
    condition: str
    uv_index: int

    def __post_init__(self) -> None:
        if not self.time:
            raise ValueError("time must be provided")
        if self.temperature_min > self.temperature_max:
            raise ValueError(
                f"temperature_min {self.temperature_min} exceeds temperature_max {self.temperature_max}"
            )
        if not self.condition:
            raise ValueError("condition must be a non-empty string")
        if self.uv_index < 0:
            raise ValueError("uv_index must be non-negative")


@dataclass(frozen=True)
class WeatherResponse:
    location: str
    timezone: str
    current: Weather
    hourly: Tuple[Weather, ...]
    daily: Tuple[Weather, ...]

    def __post_init__(self) -> None:
        if not self.location:
            raise ValueError("location must be a non-empty string")
        if not self.timezone:
            raise ValueError("timezone must be a non-empty string")

    def as_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["hourly"] = list(payload["hourly"])
        payload["daily"] = list(payload["daily"])
        return payload


__all__ = ["ResolvedLocation", "Weather", "WeatherResponse"]
