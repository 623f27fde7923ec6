"""Console weather forecast for a single location."""
from __future__ import annotations

from .entities import DailySeries, ForecastRequest, ForecastResponse, HourlySeries

__all__ = ["DailySeries", "ForecastRequest", "ForecastResponse", "HourlySeries"]
