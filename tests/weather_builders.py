"""Builders for weather analysis test inputs."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

from farm_weather_advisor.analysis.models import WeatherMetrics
from farm_weather_advisor.weather.models import CurrentConditions, ForecastDay

RETRIEVED_AT = datetime(2026, 10, 19, 6, 0, tzinfo=UTC)


def make_current(**overrides: object) -> CurrentConditions:
    payload: dict[str, object] = {
        "timestamp": RETRIEVED_AT,
        "temperature": 20.0,
        "humidity": 50.0,
        "wind_speed": 10.0,
        "rainfall": 0.0,
        "condition": "Partly cloudy",
    }
    payload.update(overrides)
    return CurrentConditions.model_validate(payload)


def make_day(offset: int = 0, **overrides: object) -> ForecastDay:
    payload: dict[str, object] = {
        "date": date(2026, 10, 19) + timedelta(days=offset),
        "day_temp": 20.0,
        "night_temp": 12.0,
        "rainfall": 3.0,
        "wind_speed": 10.0,
        "condition": "Sunny",
    }
    payload.update(overrides)
    return ForecastDay.model_validate(payload)


def make_forecast(count: int = 3, **overrides: object) -> list[ForecastDay]:
    return [make_day(offset, **overrides) for offset in range(count)]


def make_metrics(**overrides: object) -> WeatherMetrics:
    payload: dict[str, object] = {
        "current_temp": 20.0,
        "current_humidity": 50.0,
        "current_wind": 10.0,
        "avg_temp": 20.0,
        "max_temp": 22.0,
        "min_temp": 12.0,
        "total_rainfall": 10.0,
        "avg_humidity": 50.0,
        "max_wind": 10.0,
        "window_days": 3,
    }
    payload.update(overrides)
    return WeatherMetrics.model_validate(payload)


Scenario = tuple[CurrentConditions, list[ForecastDay]]
