"""Weather provider integrations."""

from .base import WeatherProvider
from .models import (
    CurrentConditions,
    ForecastDay,
    HourlyForecast,
    WeatherAlert,
    WeatherFetchResult,
    WeatherLocation,
    WeatherSnapshot,
)
from .weatherapi import WeatherAPIProvider

__all__ = [
    "CurrentConditions",
    "ForecastDay",
    "HourlyForecast",
    "WeatherAPIProvider",
    "WeatherAlert",
    "WeatherFetchResult",
    "WeatherLocation",
    "WeatherProvider",
    "WeatherSnapshot",
]
