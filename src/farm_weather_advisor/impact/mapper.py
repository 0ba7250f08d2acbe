"""Map an agricultural analysis onto the stored farm impact record."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from ..analysis.analyzer import WeatherAnalyzer
from ..analysis.models import AgriculturalAnalysis
from ..weather.models import WeatherSnapshot
from .models import (
    FarmImpact,
    FarmWeatherReport,
    FieldWork,
    ImpactRecommendations,
    ImpactRisks,
    YieldImpact,
)
from .recommendations import generate_recommendations
from .scoring import DEFAULT_YIELD_WEIGHTS, YieldImpactWeights, calculate_yield_impact_percentage

UPDATE_INTERVAL = timedelta(hours=6)
IMMEDIATE_RECOMMENDATION_LIMIT = 2


def build_farm_impact(
    analysis: AgriculturalAnalysis,
    weights: YieldImpactWeights = DEFAULT_YIELD_WEIGHTS,
) -> FarmImpact:
    """Flatten the five facets into the farm impact record."""
    return FarmImpact(
        soil_moisture=analysis.soil_moisture.status,
        crop_health=analysis.crop_growth.status,
        irrigation_needed=analysis.irrigation.needed,
        risks=ImpactRisks(
            pest=analysis.risks.pest,
            disease=analysis.risks.disease,
            frost=analysis.risks.frost,
            heat=analysis.risks.heat,
        ),
        yield_impact=YieldImpact(
            status="at risk" if analysis.crop_growth.risks else "stable",
            percentage=calculate_yield_impact_percentage(analysis, weights),
        ),
        recommendations=ImpactRecommendations(
            immediate=analysis.crop_growth.recommendations[:IMMEDIATE_RECOMMENDATION_LIMIT],
            short_term=[analysis.irrigation.recommendation],
            long_term=list(analysis.soil_moisture.management_tips),
        ),
        field_work=FieldWork(
            suitable=analysis.field_operations.suitable,
            activities=list(analysis.field_operations.activities),
        ),
    )


def build_weather_report(
    snapshot: WeatherSnapshot,
    analyzer: WeatherAnalyzer,
    *,
    farm_id: str = "default",
    now: datetime | None = None,
    weights: YieldImpactWeights = DEFAULT_YIELD_WEIGHTS,
) -> FarmWeatherReport:
    """Analyze a snapshot and bundle it with impact, advice and refresh times."""
    analysis = analyzer.analyze_snapshot(snapshot)
    impact = build_farm_impact(analysis, weights)
    last_updated = now or datetime.now(UTC)
    return FarmWeatherReport(
        farm_id=farm_id,
        snapshot=snapshot,
        analysis=analysis,
        farm_impact=impact,
        recommendations=generate_recommendations(impact, snapshot.forecast),
        last_updated=last_updated,
        next_update=last_updated + UPDATE_INTERVAL,
    )


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def is_stale(last_updated: datetime, now: datetime | None = None) -> bool:
    """Return True once more than ``UPDATE_INTERVAL`` has passed since ``last_updated``."""
    current = _as_utc(now or datetime.now(UTC))
    return current - _as_utc(last_updated) > UPDATE_INTERVAL
