from __future__ import annotations

import io
from datetime import datetime, timezone

import pytest

from forecast.entities import DailySeries, ForecastResponse, HourlySeries
from forecast.presenter import (
    ForecastPresenter,
    TimezoneError,
    day_label,
    locate_now,
    render_daily,
    render_header,
    render_hourly,
)


HOURS = ["2024-01-01T00:00", "2024-01-01T01:00", "2024-01-01T02:00"]


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def make_hourly(count: int) -> HourlySeries:
    times = tuple(f"2024-06-01T{hour:02d}:00" for hour in range(count))
    return HourlySeries(
        time=times,
        temperature=tuple(10.0 + hour for hour in range(count)),
        precipitation_probability=tuple(float(hour * 5) for hour in range(count)),
        precipitation=tuple(hour / 10 for hour in range(count)),
    )


def make_daily(count: int) -> DailySeries:
    return DailySeries(
        date=tuple(f"2024-06-{day + 1:02d}" for day in range(count)),
        temperature_max=tuple(20.0 + day for day in range(count)),
        temperature_min=tuple(10.0 + day for day in range(count)),
        precipitation_sum=(0.0,) * count,
        rain_sum=(0.0,) * count,
        precipitation_hours=(0.0,) * count,
        precipitation_probability_max=(0.0,) * count,
        wind_speed_max=(5.0,) * count,
    )


# -- locate_now ---------------------------------------------------------------

def test_locate_now_returns_first_entry_after_now():
    assert locate_now(HOURS, "UTC", now=utc(2024, 1, 1, 0, 30)) == 1


def test_locate_now_requires_strictly_after():
    assert locate_now(HOURS, "UTC", now=utc(2024, 1, 1, 1, 0)) == 2


def test_locate_now_skips_unparseable_entries():
    times = ["bad", "2024-01-01T00:00", "2024-01-01T01:00"]

    assert locate_now(times, "UTC", now=utc(2024, 1, 1, 0, 30)) == 2


def test_locate_now_skips_entries_with_seconds():
    times = ["2024-01-01T05:00:00", "2024-01-01T06:00"]

    assert locate_now(times, "UTC", now=utc(2024, 1, 1, 0, 0)) == 1


def test_locate_now_empty_sequence_returns_zero():
    assert locate_now([], "UTC", now=utc(2024, 1, 1)) == 0


def test_locate_now_all_past_falls_back_to_zero():
    assert locate_now(HOURS, "UTC", now=utc(2030, 1, 1)) == 0


def test_locate_now_reads_stamps_as_local_wall_clock():
    times = ["2024-06-01T07:00", "2024-06-01T08:00", "2024-06-01T09:00"]

    # 12:30 UTC is 08:30 in New York (EDT, UTC-4).
    assert locate_now(times, "America/New_York", now=utc(2024, 6, 1, 12, 30)) == 2


def test_locate_now_blank_timezone_is_utc():
    assert locate_now(HOURS, "", now=utc(2024, 1, 1, 1, 30)) == 2


@pytest.mark.parametrize("name", ["Not/AZone", "../etc/passwd"])
def test_locate_now_unknown_timezone_raises(name):
    with pytest.raises(TimezoneError):
        locate_now(HOURS, name, now=utc(2024, 1, 1))


# -- daily --------------------------------------------------------------------

def test_day_labels():
    assert [day_label(i) for i in range(4)] == ["Today", "Tomorrow", "Day 3", "Day 4"]


def test_render_daily_block_format():
    lines = render_daily(make_daily(1), days=1)

    assert lines == [
        "Today (2024-06-01):",
        "  Temperature: 10.0°C to 20.0°C",
        "  Precipitation: 0.0 mm (probability: 0.0%)",
        "  Rain: 0.0 mm - Precipitation Hours: 0.0",
        "  Max Wind Speed: 5.0 km/h",
        "",
    ]


def test_render_daily_never_exceeds_available_days():
    lines = render_daily(make_daily(3), days=7)

    headings = [line for line in lines if line.endswith("):")]
    assert headings == ["Today (2024-06-01):", "Tomorrow (2024-06-02):", "Day 3 (2024-06-03):"]


def test_render_daily_respects_requested_days():
    lines = render_daily(make_daily(7), days=2)

    assert [line for line in lines if line.endswith("):")] == ["Today (2024-06-01):", "Tomorrow (2024-06-02):"]


def test_render_daily_marks_missing_values():
    daily = DailySeries(date=("2024-06-01",), temperature_max=(25.0,), temperature_min=(15.0,))

    lines = render_daily(daily, days=1)

    assert lines[1] == "  Temperature: 15.0°C to 25.0°C"
    assert lines[2] == "  Precipitation: n/a mm (probability: n/a%)"


# -- hourly -------------------------------------------------------------------

@pytest.mark.parametrize(
    "length, start, expected",
    [(8, 0, 5), (8, 3, 5), (8, 5, 3), (8, 7, 1), (8, 8, 0), (8, 12, 0), (0, 0, 0), (3, 0, 3)],
)
def test_render_hourly_window_is_clamped(length, start, expected):
    assert len(render_hourly(make_hourly(length), start)) == expected


def test_render_hourly_line_format():
    lines = render_hourly(make_hourly(3), 1)

    assert lines[0] == "  2024-06-01T01:00: 11.0°C, Precipitation: 0.1 mm (5.0% probability)"


# -- presenter ----------------------------------------------------------------

def test_render_header():
    forecast = ForecastResponse(latitude=40.710335, longitude=-73.99307, timezone="America/New_York")

    assert render_header(forecast) == "Weather for: 40.7103, -73.9931 - Timezone: America/New_York"


def test_presenter_writes_sections_in_order():
    stream = io.StringIO()
    forecast = ForecastResponse(timezone="UTC", hourly=make_hourly(10), daily=make_daily(3))

    ForecastPresenter(stream=stream).present(forecast, days=2, now=utc(2024, 6, 1, 2, 15))

    output = stream.getvalue().splitlines()
    assert output[0] == "Weather for: 0.0000, 0.0000 - Timezone: UTC"
    assert output[1] == "Today (2024-06-01):"
    assert "Day 3 (2024-06-03):" not in output
    hourly_at = output.index("Hourly Forecast (next 5 hours):")
    assert output[hourly_at + 1].startswith("  2024-06-01T03:00:")
    assert len(output) == hourly_at + 6


def test_presenter_unknown_timezone_starts_from_beginning():
    stream = io.StringIO()
    forecast = ForecastResponse(timezone="Mars/Olympus_Mons", hourly=make_hourly(10), daily=make_daily(1))

    ForecastPresenter(stream=stream).present(forecast, days=1, now=utc(2024, 6, 1, 2, 15))

    output = stream.getvalue().splitlines()
    warnings = [line for line in output if line.startswith("Warning: Could not determine current time")]
    assert len(warnings) == 1
    hourly_at = output.index("Hourly Forecast (next 5 hours):")
    assert output[hourly_at + 1].startswith("  2024-06-01T00:00:")
