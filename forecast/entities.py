from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ForecastRequest:
    """Coordinates to forecast for. Ranges are not checked locally."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class HourlySeries:
    """Index-aligned hourly values.

    ``time`` holds local wall-clock stamps (``YYYY-MM-DDTHH:MM``) in the
    forecast's timezone; the other sequences are in the units returned by the
    API:
    - temperature in Celsius
    - precipitation probability in percent
    - precipitation in millimetres (mm)
    """

    time: Tuple[str, ...] = ()
    temperature: Tuple[float, ...] = ()
    precipitation_probability: Tuple[float, ...] = ()
    precipitation: Tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class DailySeries:
    """Index-aligned per-day aggregates as reported by the API."""

    date: Tuple[str, ...] = ()
    temperature_max: Tuple[float, ...] = ()
    temperature_min: Tuple[float, ...] = ()
    precipitation_sum: Tuple[float, ...] = ()
    rain_sum: Tuple[float, ...] = ()
    precipitation_hours: Tuple[float, ...] = ()
    precipitation_probability_max: Tuple[float, ...] = ()
    wind_speed_max: Tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.date)


@dataclass(frozen=True)
class ForecastResponse:
    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""
    hourly: HourlySeries = field(default_factory=HourlySeries)
    daily: DailySeries = field(default_factory=DailySeries)


__all__ = ["DailySeries", "ForecastRequest", "ForecastResponse", "HourlySeries"]
