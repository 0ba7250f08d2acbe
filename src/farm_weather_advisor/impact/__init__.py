"""Farm impact mapping and control recommendations."""

from .mapper import UPDATE_INTERVAL, build_farm_impact, build_weather_report, is_stale
from .models import FarmImpact, FarmWeatherReport, WeatherRecommendations, YieldImpact
from .recommendations import generate_recommendations
from .scoring import (
    DEFAULT_YIELD_WEIGHTS,
    YieldImpactWeights,
    calculate_yield_impact_percentage,
)

__all__ = [
    "DEFAULT_YIELD_WEIGHTS",
    "FarmImpact",
    "FarmWeatherReport",
    "UPDATE_INTERVAL",
    "WeatherRecommendations",
    "YieldImpact",
    "YieldImpactWeights",
    "build_farm_impact",
    "build_weather_report",
    "calculate_yield_impact_percentage",
    "generate_recommendations",
    "is_stale",
]
