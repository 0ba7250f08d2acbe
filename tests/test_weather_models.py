"""Construction-time validation of weather value models."""

from __future__ import annotations

import json
import math

import pytest
from pydantic import ValidationError
from weather_builders import make_current, make_day

from farm_weather_advisor.weather.models import HourlyForecast, WeatherSnapshot


@pytest.mark.parametrize(
    "overrides",
    [
        {"humidity": 100.01},
        {"humidity": -0.01},
        {"rainfall": -0.01},
        {"wind_speed": -1.0},
        {"temperature": math.nan},
        {"temperature": math.inf},
    ],
)
def test_current_conditions_reject_impossible_values(overrides: dict[str, float]) -> None:
    with pytest.raises(ValidationError):
        make_current(**overrides)


@pytest.mark.parametrize("humidity", [0.0, 100.0])
def test_current_humidity_bounds_are_inclusive(humidity: float) -> None:
    assert make_current(humidity=humidity).humidity == humidity


@pytest.mark.parametrize(
    "overrides",
    [
        {"rainfall": -0.01},
        {"wind_speed": -1.0},
        {"day_temp": math.nan},
        {"night_temp": -math.inf},
        {"rainfall": math.nan},
    ],
)
def test_forecast_day_rejects_impossible_values(overrides: dict[str, float]) -> None:
    with pytest.raises(ValidationError):
        make_day(**overrides)


def test_forecast_day_accepts_zero_rain_and_wind() -> None:
    day = make_day(rainfall=0.0, wind_speed=0.0)
    assert day.rainfall == 0.0
    assert day.wind_speed == 0.0


def test_hourly_forecast_rejects_non_finite_temperature() -> None:
    with pytest.raises(ValidationError):
        HourlyForecast(time="06:00", temperature=math.inf, rainfall=0.0)


def test_snapshot_json_with_nan_literal_is_rejected() -> None:
    payload = {
        "provider": "fixture",
        "provider_version": "test",
        "retrieval_timestamp": "2026-10-19T06:00:00+00:00",
        "location": {},
        "current": make_current().model_dump(mode="json"),
        "forecast": [make_day().model_dump(mode="json")],
    }
    payload["forecast"][0]["day_temp"] = math.nan
    # json.dumps writes the bare NaN literal, which json.loads reads back as float nan.
    parsed = json.loads(json.dumps(payload))
    with pytest.raises(ValidationError):
        WeatherSnapshot.model_validate(parsed)
