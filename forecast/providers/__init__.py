from __future__ import annotations

from .base import (
    BodyReadError,
    DecodeError,
    ForecastError,
    ForecastProvider,
    RequestConfig,
    StatusError,
    TransportError,
)
from .openmeteo import OpenMeteoProvider

__all__ = [
    "BodyReadError",
    "DecodeError",
    "ForecastError",
    "ForecastProvider",
    "OpenMeteoProvider",
    "RequestConfig",
    "StatusError",
    "TransportError",
]
