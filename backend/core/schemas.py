"""Pydantic schemas for the raw Open-Meteo payloads."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "CurrentBlock",
    "DailyBlock",
    "ForecastPayload",
    "GeocodingMatch",
    "GeocodingResult",
    "HourlyBlock",
]


def _ensure_iso(value: str) -> str:
    # kept verbatim, only checked to parse as an ISO date or date-time
    datetime.fromisoformat(value)
    return value


class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)


class CurrentBlock(_ProviderModel):
    time: str
    temperature_2m: float
    weather_code: Optional[int] = Field(default=None)
    uv_index: Optional[float] = Field(default=None)

    @field_validator("time")
    @classmethod
    def _validate_time(cls, value: str) -> str:
        return _ensure_iso(value)


class _SeriesBlock(_ProviderModel):
    time: List[str]

    @field_validator("time")
    @classmethod
    def _validate_times(cls, values: List[str]) -> List[str]:
        return [_ensure_iso(value) for value in values]


class HourlyBlock(_SeriesBlock):
    temperature_2m: List[float]
    weather_code: List[Optional[int]]


class DailyBlock(_SeriesBlock):
    weather_code: List[Optional[int]]
    temperature_2m_max: List[float]
    temperature_2m_min: List[float]
    uv_index_max: List[Optional[float]] = Field(default_factory=list)


class ForecastPayload(_ProviderModel):
    timezone: Optional[str] = Field(default=None)
    current: CurrentBlock
    hourly: HourlyBlock
    daily: DailyBlock


class GeocodingMatch(_ProviderModel):
    latitude: float
    longitude: float
    name: Optional[str] = Field(default=None)
    admin1: Optional[str] = Field(default=None)
    country: Optional[str] = Field(default=None)
    timezone: Optional[str] = Field(default=None)

    @field_validator("name", "admin1", "country", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def display_parts(self) -> List[str]:
        return [part.strip() for part in (self.name, self.admin1, self.country) if part]


class GeocodingResult(_ProviderModel):
    results: List[GeocodingMatch] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, value: object) -> object:
        return [] if value is None else value
