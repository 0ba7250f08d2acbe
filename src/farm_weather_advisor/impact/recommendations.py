"""Control recommendations derived from a farm impact record and its forecast."""

from __future__ import annotations

from collections.abc import Sequence

from ..models import RiskLevel
from ..weather.models import ForecastDay
from .models import FarmImpact, WeatherRecommendations

# Daily rainfall (mm) above which a day counts as a rain day for planning.
RAIN_DAY_MM = 5.0
FIELD_PLANNING_DAYS = 3

PEST_CONTROL: dict[RiskLevel, str] = {
    "high": "Immediate preventive measures needed",
    "medium": "Monitor and prepare control measures",
    "low": "Regular monitoring sufficient",
    "critical": "Urgent pest control intervention required",
}

DISEASE_CONTROL: dict[RiskLevel, str] = {
    "high": "Apply preventive fungicide treatment",
    "medium": "Monitor susceptible crops closely",
    "low": "Standard monitoring adequate",
    "critical": "Urgent disease management required",
}


def _irrigation_advice(impact: FarmImpact, forecast: Sequence[ForecastDay]) -> str:
    if impact.irrigation_needed:
        for recommendation in impact.recommendations.immediate:
            if "irrigat" in recommendation.lower():
                return recommendation
        return "Irrigation recommended"
    if any(day.rainfall > RAIN_DAY_MM for day in forecast):
        return "Hold irrigation due to expected rainfall"
    return "Regular irrigation schedule can be maintained"


def _field_operations_advice(impact: FarmImpact, forecast: Sequence[ForecastDay]) -> str:
    if not impact.field_work.suitable:
        return "Field operations not recommended at this time"
    if any(day.rainfall > RAIN_DAY_MM for day in forecast[:FIELD_PLANNING_DAYS]):
        return "Plan field operations around expected rainfall"
    return f"Favorable conditions for: {', '.join(impact.field_work.activities)}"


def generate_recommendations(
    impact: FarmImpact, forecast: Sequence[ForecastDay]
) -> WeatherRecommendations:
    """Build irrigation, pest, disease and field-work advice.

    Irrigation advice looks at the whole forecast; field-work advice only at
    the first three days.
    """
    return WeatherRecommendations(
        irrigation=_irrigation_advice(impact, forecast),
        pest_control=PEST_CONTROL[impact.risks.pest],
        disease_control=DISEASE_CONTROL[impact.risks.disease],
        field_operations=_field_operations_advice(impact, forecast),
    )
