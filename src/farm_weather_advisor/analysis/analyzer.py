"""Compose the five classifier facets into one agronomic weather analysis."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..weather.models import CurrentConditions, ForecastDay, WeatherSnapshot
from .classifiers import (
    classify_crop_growth,
    classify_field_operations,
    classify_irrigation,
    classify_risks,
    classify_soil_moisture,
)
from .metrics import compute_metrics
from .models import AgriculturalAnalysis, WeatherMetrics
from .thresholds import DEFAULT_THRESHOLDS, ThresholdTables


class WeatherAnalyzer:
    """Stateless analyzer bound to one immutable threshold table.

    Instances hold no per-call state and may be shared between threads.
    """

    def __init__(
        self,
        thresholds: ThresholdTables = DEFAULT_THRESHOLDS,
        logger: logging.Logger | None = None,
    ) -> None:
        self.thresholds = thresholds
        self.logger = logger or logging.getLogger("farm_weather_advisor.analysis.analyzer")

    def analyze(
        self, current: CurrentConditions, forecast: Sequence[ForecastDay]
    ) -> AgriculturalAnalysis:
        """Return the full analysis; raises ``InsufficientDataError`` on empty forecast."""
        metrics = compute_metrics(current, forecast)
        analysis = self.analyze_metrics(metrics)
        self.logger.debug(
            "Weather analysis window_days=%d avg_temp=%.2f total_rainfall=%.2f "
            "soil=%s pest=%s disease=%s",
            metrics.window_days,
            metrics.avg_temp,
            metrics.total_rainfall,
            analysis.soil_moisture.status,
            analysis.risks.pest,
            analysis.risks.disease,
        )
        return analysis

    def analyze_metrics(self, metrics: WeatherMetrics) -> AgriculturalAnalysis:
        """Run every classifier against already aggregated metrics."""
        return AgriculturalAnalysis(
            soil_moisture=classify_soil_moisture(metrics, self.thresholds),
            crop_growth=classify_crop_growth(metrics, self.thresholds),
            irrigation=classify_irrigation(metrics, self.thresholds),
            risks=classify_risks(metrics, self.thresholds),
            field_operations=classify_field_operations(metrics, self.thresholds),
        )

    def analyze_snapshot(self, snapshot: WeatherSnapshot) -> AgriculturalAnalysis:
        return self.analyze(snapshot.current, snapshot.forecast)


def analyze_weather_for_agriculture(
    current: CurrentConditions,
    forecast: Sequence[ForecastDay],
    thresholds: ThresholdTables | None = None,
) -> AgriculturalAnalysis:
    """Analyze with default (or given) thresholds without keeping an analyzer around."""
    return WeatherAnalyzer(thresholds or DEFAULT_THRESHOLDS).analyze(current, forecast)
