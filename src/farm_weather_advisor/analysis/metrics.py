"""Reduce current conditions and a daily forecast into scalar metrics."""

from __future__ import annotations

from collections.abc import Sequence

from ..exceptions import InsufficientDataError
from ..weather.models import CurrentConditions, ForecastDay
from .models import WeatherMetrics

FORECAST_WINDOW_DAYS = 3


def forecast_window(forecast: Sequence[ForecastDay]) -> list[ForecastDay]:
    """Return the leading forecast days considered by the classifiers."""
    if not forecast:
        raise InsufficientDataError(
            "At least one forecast day is required for weather analysis.",
            required=1,
            supplied=0,
        )
    return list(forecast[:FORECAST_WINDOW_DAYS])


def compute_metrics(
    current: CurrentConditions, forecast: Sequence[ForecastDay]
) -> WeatherMetrics:
    """Aggregate the forecast window into a ``WeatherMetrics`` value."""
    window = forecast_window(forecast)
    return WeatherMetrics(
        current_temp=current.temperature,
        current_humidity=current.humidity,
        current_wind=current.wind_speed,
        avg_temp=sum(day.day_temp for day in window) / len(window),
        max_temp=max(day.day_temp for day in window),
        min_temp=min(day.night_temp for day in window),
        total_rainfall=sum(day.rainfall for day in window),
        # Forecast days carry no humidity; current humidity stands in for the window.
        avg_humidity=current.humidity,
        max_wind=max(day.wind_speed for day in window),
        window_days=len(window),
    )
