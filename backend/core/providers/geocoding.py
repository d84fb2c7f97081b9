"""City name lookup through the Open-Meteo geocoding API."""
from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from .base import HttpProvider, ProviderError
from ..entities import ResolvedLocation
from ..schemas import GeocodingMatch, GeocodingResult


class LocationNotFound(LookupError):
    """Raised when the geocoder has no match for the requested name."""


class GeocodingUnavailable(ProviderError):
    """Raised when the geocoding service cannot be reached or answers garbage."""


class OpenMeteoGeocoder(HttpProvider):
    base_url = "https://geocoding-api.open-meteo.com/v1/search"

    def __init__(self, base_url: Optional[str] = None, language: str = "en", **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self.language = language

    def resolve(self, city_name: str) -> ResolvedLocation:
        query = (city_name or "").strip()
        if not query:
            raise LocationNotFound("empty location")
        params = {"name": query, "count": 1, "language": self.language, "format": "json"}
        try:
            response = self._request("GET", self.base_url, params=params)
            result = GeocodingResult.model_validate(self._json(response))
        except ProviderError as exc:
            raise GeocodingUnavailable(f"geocoding failed for {query!r}: {exc}") from exc
        except ValidationError as exc:
            self._log.error("Invalid geocoding payload for %r", query, exc_info=exc)
            raise GeocodingUnavailable(f"invalid geocoding payload for {query!r}") from exc

        if not result.results:
            self._log.info("No geocoding match for %r", query)
            raise LocationNotFound(query)
        match = result.results[0]
        return ResolvedLocation(
            latitude=match.latitude,
            longitude=match.longitude,
            display_name=display_name(match, fallback=query),
        )


def display_name(match: GeocodingMatch, fallback: str) -> str:
    parts = match.display_parts()
    if not parts:
        return fallback
    return ", ".join(parts)


__all__ = ["GeocodingUnavailable", "LocationNotFound", "OpenMeteoGeocoder", "display_name"]
