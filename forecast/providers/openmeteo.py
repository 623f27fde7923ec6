from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Optional

from pydantic import ValidationError

from .base import DecodeError, ForecastProvider
from ..entities import ForecastRequest, ForecastResponse
from ..schemas import ForecastPayload


HOURLY_FIELDS = ("temperature_2m", "precipitation_probability", "precipitation")
DAILY_FIELDS = (
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "rain_sum",
    "precipitation_hours",
    "precipitation_probability_max",
    "wind_speed_10m_max",
)


def format_coordinate(value: float) -> str:
    """Shortest plain decimal that round-trips, e.g. ``40.71`` or ``0.00001``."""
    return format(Decimal(repr(float(value))).normalize(), "f")


class OpenMeteoProvider(ForecastProvider):
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    def fetch(self, latitude: float, longitude: float) -> ForecastResponse:
        return self.forecast(ForecastRequest(latitude=latitude, longitude=longitude))

    def forecast(self, request: ForecastRequest) -> ForecastResponse:
        params = self.build_params(request)
        response = self._request("GET", self.base_url, params=params)
        forecast = self._decode(response.content)
        self._log.info(
            "Forecast for %s, %s (%s): %d hourly, %d daily entries",
            forecast.latitude,
            forecast.longitude,
            forecast.timezone or "n/a",
            len(forecast.hourly),
            len(forecast.daily),
        )
        return forecast

    def build_params(self, request: ForecastRequest) -> dict:
        return {
            "latitude": format_coordinate(request.latitude),
            "longitude": format_coordinate(request.longitude),
            "hourly": ",".join(HOURLY_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
        }

    # helpers ------------------------------------------------------------
    def _decode(self, body: bytes) -> ForecastResponse:
        try:
            data = json.loads(body)
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise DecodeError(f"error parsing JSON response: {exc}") from exc
        if not isinstance(data, dict):
            raise DecodeError("error parsing JSON response: expected an object")
        try:
            payload = ForecastPayload.model_validate(data)
        except ValidationError as exc:
            self._log.error("Unexpected forecast shape: %s", exc)
            raise DecodeError(f"error parsing JSON response: {exc.error_count()} invalid field(s)") from exc
        return payload.to_forecast()


__all__ = ["DAILY_FIELDS", "HOURLY_FIELDS", "OpenMeteoProvider", "format_coordinate"]
