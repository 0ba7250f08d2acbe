"""Weighted yield impact score over classifier output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..analysis.models import AgriculturalAnalysis

YIELD_IMPACT_FLOOR = -50
YIELD_IMPACT_CEILING = 50


class YieldImpactWeights(BaseModel):
    """Penalty (negative) and bonus (positive) weights per analysis condition."""

    model_config = ConfigDict(frozen=True)

    pest_high: int = -15
    pest_medium: int = -7
    disease_high: int = -20
    disease_medium: int = -10
    frost: int = -25
    heat: int = -18
    adequate_moisture: int = 10
    no_irrigation_needed: int = 5


DEFAULT_YIELD_WEIGHTS = YieldImpactWeights()


def calculate_yield_impact_percentage(
    analysis: AgriculturalAnalysis,
    weights: YieldImpactWeights = DEFAULT_YIELD_WEIGHTS,
) -> int:
    """Sum condition weights and clamp the result to [-50, 50]."""
    impact = 0
    risks = analysis.risks

    if risks.pest == "high":
        impact += weights.pest_high
    elif risks.pest == "medium":
        impact += weights.pest_medium

    if risks.disease == "high":
        impact += weights.disease_high
    elif risks.disease == "medium":
        impact += weights.disease_medium

    if risks.frost:
        impact += weights.frost
    if risks.heat:
        impact += weights.heat

    if analysis.soil_moisture.status == "adequate":
        impact += weights.adequate_moisture
    if not analysis.irrigation.needed:
        impact += weights.no_irrigation_needed

    return max(min(impact, YIELD_IMPACT_CEILING), YIELD_IMPACT_FLOOR)
