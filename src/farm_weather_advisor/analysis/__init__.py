"""Agronomic weather risk analysis."""

from .analyzer import WeatherAnalyzer, analyze_weather_for_agriculture
from .classifiers import (
    classify_crop_growth,
    classify_field_operations,
    classify_irrigation,
    classify_risks,
    classify_soil_moisture,
)
from .metrics import FORECAST_WINDOW_DAYS, compute_metrics
from .models import (
    AgriculturalAnalysis,
    CropGrowthFacet,
    FieldOperationsFacet,
    IrrigationFacet,
    RiskDetails,
    RiskFacet,
    SoilMoistureFacet,
    WeatherMetrics,
)
from .thresholds import DEFAULT_THRESHOLDS, ThresholdTables

__all__ = [
    "AgriculturalAnalysis",
    "CropGrowthFacet",
    "DEFAULT_THRESHOLDS",
    "FORECAST_WINDOW_DAYS",
    "FieldOperationsFacet",
    "IrrigationFacet",
    "RiskDetails",
    "RiskFacet",
    "SoilMoistureFacet",
    "ThresholdTables",
    "WeatherAnalyzer",
    "WeatherMetrics",
    "analyze_weather_for_agriculture",
    "classify_crop_growth",
    "classify_field_operations",
    "classify_irrigation",
    "classify_risks",
    "classify_soil_moisture",
    "compute_metrics",
]
