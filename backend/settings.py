"""Django settings for the weather lookup service."""
from __future__ import annotations

from pathlib import Path
import os

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


def env_bool(name: str, default: str = "0") -> bool:
    return env(name, default).strip().lower() in {"1", "true", "yes", "on"}


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = env_bool("DJANGO_DEBUG")
ALLOWED_HOSTS = env("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "backend.api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "backend.urls"

WSGI_APPLICATION = "backend.wsgi.application"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Nothing is persisted; the database is only here to satisfy contrib apps.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": env("DB_NAME", str(BASE_DIR / "db.sqlite3")),
    }
}

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

# Upstream providers
WEATHER_GEOCODING_URL = env("WEATHER_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
WEATHER_FORECAST_URL = env("WEATHER_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
WEATHER_HTTP_TIMEOUT = float(env("WEATHER_HTTP_TIMEOUT", "8"))

# Response shape
WEATHER_DEFAULT_CITY = env("WEATHER_DEFAULT_CITY", "San Francisco")
WEATHER_HOURS = int(env("WEATHER_HOURS", "24"))
WEATHER_DAYS = int(env("WEATHER_DAYS", "7"))
WEATHER_HOURLY_UV_INDEX = int(env("WEATHER_HOURLY_UV_INDEX", "0"))
WEATHER_FALLBACK_TIMEZONE = env("WEATHER_FALLBACK_TIMEZONE", "UTC")

# Geocoder outages are reported as 404 like an unknown city; disable to get 500.
WEATHER_GEOCODER_FAILURE_IS_NOT_FOUND = env_bool("WEATHER_GEOCODER_FAILURE_IS_NOT_FOUND", "1")

WEATHER_LOG_LEVEL = env("WEATHER_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "backend": {
            "handlers": ["console"],
            "level": WEATHER_LOG_LEVEL,
            "propagate": False,
        },
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True
