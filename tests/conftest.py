"""Shared fixtures for weather analysis tests."""

from __future__ import annotations

import pytest
from weather_builders import Scenario, make_current, make_forecast


@pytest.fixture
def scenario_a() -> Scenario:
    """Hot, humid and dry: current 32°C / 80%, three 33/20°C rainless days."""
    current = make_current(temperature=32.0, humidity=80.0, wind_speed=10.0, rainfall=2.0)
    forecast = make_forecast(day_temp=33.0, night_temp=20.0, rainfall=0.0, wind_speed=12.0)
    return current, forecast


@pytest.fixture
def scenario_b() -> Scenario:
    """Cold and waterlogged: three 6/1°C days with 30 mm rain each."""
    current = make_current(temperature=5.0, humidity=50.0, wind_speed=5.0, rainfall=0.0)
    forecast = make_forecast(day_temp=6.0, night_temp=1.0, rainfall=30.0, wind_speed=5.0)
    return current, forecast
