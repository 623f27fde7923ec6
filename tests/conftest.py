from __future__ import annotations

import copy

import pytest

from requests_mock import Mocker


SAMPLE_FORECAST = {
    "latitude": 40.710335,
    "longitude": -73.99307,
    "generationtime_ms": 0.12,
    "utc_offset_seconds": 0,
    "timezone": "UTC",
    "timezone_abbreviation": "UTC",
    "hourly_units": {"time": "iso8601", "temperature_2m": "°C"},
    "hourly": {
        "time": [
            "2024-06-01T00:00",
            "2024-06-01T01:00",
            "2024-06-01T02:00",
            "2024-06-01T03:00",
            "2024-06-01T04:00",
            "2024-06-01T05:00",
            "2024-06-01T06:00",
        ],
        "temperature_2m": [14.2, 13.9, 13.5, 13.1, 12.8, 13.4, 15.0],
        "precipitation_probability": [0, 5, 10, 20, 35, 20, 5],
        "precipitation": [0.0, 0.0, 0.1, 0.4, 1.2, 0.3, 0.0],
    },
    "daily": {
        "time": ["2024-06-01", "2024-06-02"],
        "temperature_2m_max": [25.0, 27.0],
        "temperature_2m_min": [15.0, 16.0],
        "precipitation_sum": [2.0, 0.0],
        "rain_sum": [1.8, 0.0],
        "precipitation_hours": [3.0, 0.0],
        "precipitation_probability_max": [35, 0],
        "wind_speed_10m_max": [18.4, 12.1],
    },
}


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def forecast_payload():
    return copy.deepcopy(SAMPLE_FORECAST)
