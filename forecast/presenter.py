"""Text rendering of a forecast and location of the current hour."""
from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone as dt_timezone
from typing import List, Optional, Sequence, TextIO, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .entities import DailySeries, ForecastResponse, HourlySeries


logger = logging.getLogger(__name__)

HOURS_TO_SHOW = 5
TIME_FORMAT = "%Y-%m-%dT%H:%M"


class TimezoneError(ValueError):
    """Raised when the forecast's timezone name cannot be resolved."""


def resolve_timezone(name: str) -> Union[ZoneInfo, dt_timezone]:
    if not name:
        return dt_timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise TimezoneError(f"error loading timezone {name}: {exc}") from exc


def locate_now(
    hourly_times: Sequence[str],
    timezone: str,
    now: Optional[datetime] = None,
) -> int:
    """Return the index of the first entry strictly after the current time.

    Each stamp is read as wall-clock time in ``timezone``. Entries that do not
    parse are skipped. When nothing lies in the future, index 0 is returned.

    ``now`` must be timezone aware; it defaults to the current instant.
    """
    zone = resolve_timezone(timezone)
    current = (now or datetime.now(dt_timezone.utc)).astimezone(zone)
    logger.info("Current time in %s: %s", timezone, current.strftime("%Y-%m-%d %H:%M:%S"))

    for index, stamp in enumerate(hourly_times):
        try:
            forecast_time = datetime.strptime(stamp, TIME_FORMAT).replace(tzinfo=zone)
        except (TypeError, ValueError):
            logger.debug("Skipping unparseable forecast time %r", stamp)
            continue
        if forecast_time > current:
            logger.info("Found next forecast time: %s (index %d)", forecast_time.strftime("%Y-%m-%d %H:%M"), index)
            return index

    logger.info("No future forecast times found, starting from beginning")
    return 0


def day_label(index: int) -> str:
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    return f"Day {index + 1}"


def render_header(forecast: ForecastResponse) -> str:
    return f"Weather for: {forecast.latitude:.4f}, {forecast.longitude:.4f} - Timezone: {forecast.timezone}"


def render_daily(daily: DailySeries, days: int) -> List[str]:
    lines: List[str] = []
    for idx in range(min(days, len(daily.date))):
        lines.extend(
            [
                f"{day_label(idx)} ({daily.date[idx]}):",
                f"  Temperature: {_fmt(daily.temperature_min, idx)}°C to {_fmt(daily.temperature_max, idx)}°C",
                f"  Precipitation: {_fmt(daily.precipitation_sum, idx)} mm "
                f"(probability: {_fmt(daily.precipitation_probability_max, idx)}%)",
                f"  Rain: {_fmt(daily.rain_sum, idx)} mm - "
                f"Precipitation Hours: {_fmt(daily.precipitation_hours, idx)}",
                f"  Max Wind Speed: {_fmt(daily.wind_speed_max, idx)} km/h",
                "",
            ]
        )
    return lines


def render_hourly(hourly: HourlySeries, start: int, count: int = HOURS_TO_SHOW) -> List[str]:
    """Render up to ``count`` hours from ``start``, never past the end of the series."""
    lines: List[str] = []
    for idx in range(max(start, 0), min(start + count, len(hourly.time))):
        lines.append(
            f"  {hourly.time[idx]}: {_fmt(hourly.temperature, idx)}°C, "
            f"Precipitation: {_fmt(hourly.precipitation, idx)} mm "
            f"({_fmt(hourly.precipitation_probability, idx)}% probability)"
        )
    return lines


class ForecastPresenter:
    """Writes a forecast to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, hours: int = HOURS_TO_SHOW) -> None:
        self.stream = stream or sys.stdout
        self.hours = hours

    def present(self, forecast: ForecastResponse, days: int, now: Optional[datetime] = None) -> None:
        self._write(render_header(forecast))
        for line in render_daily(forecast.daily, days):
            self._write(line)

        try:
            start = locate_now(forecast.hourly.time, forecast.timezone, now=now)
        except TimezoneError as exc:
            self._write(f"Warning: Could not determine current time, showing from beginning: {exc}")
            start = 0

        self._write(f"Hourly Forecast (next {self.hours} hours):")
        for line in render_hourly(forecast.hourly, start, self.hours):
            self._write(line)

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")


def _fmt(values: Sequence[float], index: int) -> str:
    try:
        return f"{values[index]:.1f}"
    except IndexError:
        return "n/a"


__all__ = [
    "ForecastPresenter",
    "HOURS_TO_SHOW",
    "TimezoneError",
    "day_label",
    "locate_now",
    "render_daily",
    "render_header",
    "render_hourly",
    "resolve_timezone",
]
