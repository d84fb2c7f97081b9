"""Reshape Open-Meteo forecast payloads into :class:`WeatherResponse` values.

All temperatures go through :func:`round_one_decimal` so current, hourly and
daily entries agree on the same rounding rule.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from .conditions import condition_for_code
from .entities import ResolvedLocation, Weather, WeatherResponse
from .providers.base import UpstreamDataError
from .schemas import ForecastPayload


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizerConfig:
    hours: int = 24
    days: int = 7
    hourly_uv_index: int = 0
    fallback_timezone: str = "UTC"


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return _round_half_away(value * 10) / 10


def round_uv(value: Optional[float]) -> int:
    if not value:
        return 0
    return max(_round_half_away(value), 0)


class ForecastNormalizer:
    def __init__(self, config: Optional[NormalizerConfig] = None) -> None:
        self.config = config or NormalizerConfig()

    def normalize(
        self,
        location: ResolvedLocation,
        payload: Union[ForecastPayload, Mapping[str, Any]],
    ) -> WeatherResponse:
        forecast = self._validate(payload)
        self._require_points("hourly", forecast.hourly, self.config.hours)
        self._require_points("daily", forecast.daily, self.config.days)
        try:
            response = WeatherResponse(
                location=location.display_name,
                timezone=forecast.timezone or self.config.fallback_timezone,
                current=self._current(forecast),
                hourly=tuple(self._hourly(forecast)),
                daily=tuple(self._daily(forecast)),
            )
        except ValueError as exc:
            logger.error("Forecast for %s produced an invalid entry: %s", location.display_name, exc)
            raise UpstreamDataError(str(exc)) from exc
        return response

    # helpers ------------------------------------------------------------
    def _validate(self, payload: Union[ForecastPayload, Mapping[str, Any]]) -> ForecastPayload:
        if isinstance(payload, ForecastPayload):
            return payload
        if payload is None:
            raise UpstreamDataError("empty forecast payload")
        try:
            return ForecastPayload.model_validate(payload)
        except ValidationError as exc:
            raise UpstreamDataError("forecast payload is missing required data") from exc

    def _require_points(self, section: str, block: Any, count: int) -> None:
        for name, series in block:
            # uv series is optional, missing values become 0
            if name == "uv_index_max":
                continue
            if len(series) < count:
                raise UpstreamDataError(
                    f"{section}.{name} has {len(series)} points, expected at least {count}"
                )

    def _current(self, forecast: ForecastPayload) -> Weather:
        current = forecast.current
        today = forecast.daily
        return Weather(
            time=current.time,
            temperature=round_one_decimal(current.temperature_2m),
            temperature_min=round_one_decimal(today.temperature_2m_min[0]),
            temperature_max=round_one_decimal(today.temperature_2m_max[0]),
            condition=condition_for_code(current.weather_code),
            uv_index=round_uv(current.uv_index),
        )

    def _hourly(self, forecast: ForecastPayload) -> List[Weather]:
        hourly = forecast.hourly
        entries: List[Weather] = []
        for idx in range(self.config.hours):
            temperature = round_one_decimal(hourly.temperature_2m[idx])
            entries.append(
                Weather(
                    time=hourly.time[idx],
                    temperature=temperature,
                    temperature_min=temperature,
                    temperature_max=temperature,
                    condition=condition_for_code(hourly.weather_code[idx]),
                    uv_index=self.config.hourly_uv_index,
                )
            )
        return entries

    def _daily(self, forecast: ForecastPayload) -> List[Weather]:
        daily = forecast.daily
        entries: List[Weather] = []
        for idx in range(self.config.days):
            low = round_one_decimal(daily.temperature_2m_min[idx])
            high = round_one_decimal(daily.temperature_2m_max[idx])
            entries.append(
                Weather(
                    time=daily.time[idx],
                    temperature=round_one_decimal((low + high) / 2),
                    temperature_min=low,
                    temperature_max=high,
                    condition=condition_for_code(daily.weather_code[idx]),
                    uv_index=round_uv(_at(daily.uv_index_max, idx)),
                )
            )
        return entries


def _at(values: Sequence[Optional[float]], index: int) -> Optional[float]:
    if index < len(values):
        return values[index]
    return None


__all__ = ["ForecastNormalizer", "NormalizerConfig", "round_one_decimal", "round_uv"]
