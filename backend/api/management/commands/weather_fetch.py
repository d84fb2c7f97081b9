"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_weather_service
from backend.core.providers.base import ProviderError
from backend.core.providers.geocoding import LocationNotFound


class Command(BaseCommand):
    help = "Fetch current, hourly and daily weather for a city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, help="City name (defaults to WEATHER_DEFAULT_CITY)")
        parser.add_argument("--indent", type=int, default=None, help="Pretty-print the JSON output")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = (options.get("city") or settings.WEATHER_DEFAULT_CITY).strip()
        if not city:
            raise CommandError("--city must not be blank")

        try:
            report = get_weather_service().get_report(city)
        except LocationNotFound as exc:
            raise CommandError(f"Location '{city}' not found") from exc
        except ProviderError as exc:
            raise CommandError(f"Failed to fetch weather for '{city}': {exc}") from exc

        self.stdout.write(json.dumps(report.as_dict(), indent=options.get("indent")))
