from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_LATITUDE = 40.71  # New York City
DEFAULT_LONGITUDE = -74.01
DEFAULT_DAYS = 2


class ImproperlyConfigured(ValueError):
    """Raised when an environment setting cannot be used."""


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ImproperlyConfigured(f"Environment variable {name} must be a number, got {value!r}") from exc


@dataclass(frozen=True)
class ForecastConfig:
    """Settings for one run. Coordinates and day count come from the command line."""

    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    days: int = DEFAULT_DAYS
    base_url: str = field(
        default_factory=lambda: os.getenv("FORECAST_API_URL", "https://api.open-meteo.com/v1/forecast")
    )
    timeout: float = field(default_factory=lambda: _env_float("FORECAST_TIMEOUT", 5.0))
    log_level: str = field(default_factory=lambda: os.getenv("FORECAST_LOG_LEVEL", "WARNING").upper())


__all__ = ["ImproperlyConfigured", "DEFAULT_DAYS", "DEFAULT_LATITUDE", "DEFAULT_LONGITUDE", "ForecastConfig"]
