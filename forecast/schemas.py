"""Payload schemas mapping the forecast API JSON onto the entities.

Decoding is permissive in the same places the upstream API is: unknown keys
are ignored, absent blocks and arrays become empty sequences and ``null``
values fall back to zero. A value of the wrong type still fails validation.
"""
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .entities import DailySeries, ForecastResponse, HourlySeries

__all__ = ["DailyPayload", "ForecastPayload", "HourlyPayload"]


def _null_to_empty(value: Any) -> Any:
    if value is None:
        return []
    return value


def _nulls_to_zero(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [0.0 if item is None else item for item in value]
    return value


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class HourlyPayload(_Payload):
    time: List[str] = Field(default_factory=list)
    temperature_2m: List[float] = Field(default_factory=list)
    precipitation_probability: List[float] = Field(default_factory=list)
    precipitation: List[float] = Field(default_factory=list)

    @field_validator("time", mode="before")
    @classmethod
    def empty_time(cls, value: Any) -> Any:
        return _null_to_empty(value)

    @field_validator(
        "temperature_2m", "precipitation_probability", "precipitation", mode="before"
    )
    @classmethod
    def zero_nulls(cls, value: Any) -> Any:
        return _nulls_to_zero(value)

    def to_series(self) -> HourlySeries:
        return HourlySeries(
            time=tuple(self.time),
            temperature=tuple(self.temperature_2m),
            precipitation_probability=tuple(self.precipitation_probability),
            precipitation=tuple(self.precipitation),
        )


class DailyPayload(_Payload):
    time: List[str] = Field(default_factory=list)
    temperature_2m_max: List[float] = Field(default_factory=list)
    temperature_2m_min: List[float] = Field(default_factory=list)
    precipitation_sum: List[float] = Field(default_factory=list)
    rain_sum: List[float] = Field(default_factory=list)
    precipitation_hours: List[float] = Field(default_factory=list)
    precipitation_probability_max: List[float] = Field(default_factory=list)
    wind_speed_10m_max: List[float] = Field(default_factory=list)

    @field_validator("time", mode="before")
    @classmethod
    def empty_time(cls, value: Any) -> Any:
        return _null_to_empty(value)

    @field_validator(
        "temperature_2m_max",
        "temperature_2m_min",
        "precipitation_sum",
        "rain_sum",
        "precipitation_hours",
        "precipitation_probability_max",
        "wind_speed_10m_max",
        mode="before",
    )
    @classmethod
    def zero_nulls(cls, value: Any) -> Any:
        return _nulls_to_zero(value)

    def to_series(self) -> DailySeries:
        return DailySeries(
            date=tuple(self.time),
            temperature_max=tuple(self.temperature_2m_max),
            temperature_min=tuple(self.temperature_2m_min),
            precipitation_sum=tuple(self.precipitation_sum),
            rain_sum=tuple(self.rain_sum),
            precipitation_hours=tuple(self.precipitation_hours),
            precipitation_probability_max=tuple(self.precipitation_probability_max),
            wind_speed_max=tuple(self.wind_speed_10m_max),
        )


class ForecastPayload(_Payload):
    """Top-level body of a ``/v1/forecast`` response."""

    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""
    hourly: HourlyPayload = Field(default_factory=HourlyPayload)
    daily: DailyPayload = Field(default_factory=DailyPayload)

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def coordinate_or_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value

    @field_validator("timezone", mode="before")
    @classmethod
    def timezone_or_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("hourly", "daily", mode="before")
    @classmethod
    def block_or_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_forecast(self) -> ForecastResponse:
        return ForecastResponse(
            latitude=self.latitude,
            longitude=self.longitude,
            timezone=self.timezone,
            hourly=self.hourly.to_series(),
            daily=self.daily.to_series(),
        )
