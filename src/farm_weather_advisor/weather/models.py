"""Typed models for normalized weather snapshots."""

from __future__ import annotations

import datetime as dt
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..models import RiskLevel


class CurrentConditions(BaseModel):
    """Observed conditions at retrieval time."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    timestamp: datetime
    temperature: float = Field(description="Air temperature in degrees Celsius")
    humidity: float = Field(ge=0.0, le=100.0, description="Relative humidity in percent")
    wind_speed: float = Field(ge=0.0, description="Wind speed in km/h")
    rainfall: float = Field(ge=0.0, description="Precipitation in mm")
    condition: str = ""
    pressure: float | None = Field(default=None, description="Pressure in mb")
    visibility: float | None = Field(default=None, ge=0.0, description="Visibility in km")
    uv_index: float | None = None


class HourlyForecast(BaseModel):
    """One hourly slot inside a forecast day."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    time: str
    temperature: float
    rainfall: float = Field(ge=0.0)
    condition: str = ""


class ForecastDay(BaseModel):
    """Daily forecast summary."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    date: dt.date
    day_temp: float
    night_temp: float
    rainfall: float = Field(ge=0.0, description="Daily precipitation total in mm")
    wind_speed: float = Field(ge=0.0, description="Maximum wind speed in km/h")
    condition: str = ""
    hourly: list[HourlyForecast] = Field(default_factory=list)


class WeatherLocation(BaseModel):
    """Location metadata for a weather snapshot."""

    name: str | None = None
    region: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    elevation: float | None = None


class WeatherAlert(BaseModel):
    """Provider-derived weather warning."""

    alert_type: str
    severity: RiskLevel
    description: str
    start_time: datetime
    end_time: datetime


class WeatherSnapshot(BaseModel):
    """Normalized provider snapshot: current conditions plus daily forecast."""

    provider: str
    provider_version: str
    retrieval_timestamp: datetime
    location: WeatherLocation
    current: CurrentConditions
    forecast: list[ForecastDay] = Field(default_factory=list)
    alerts: list[WeatherAlert] = Field(default_factory=list)
    raw_payload_path: str | None = None


class WeatherFetchResult(BaseModel):
    """Raw + normalized result returned by weather providers."""

    snapshot: WeatherSnapshot
    raw_current_payload: dict[str, Any]
    raw_forecast_payload: dict[str, Any]
