"""Typed models for the farm impact record derived from a weather analysis."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from ..analysis.models import AgriculturalAnalysis
from ..models import RiskLevel
from ..weather.models import WeatherSnapshot

YieldStatus = Literal["at risk", "stable"]


class ImpactRisks(BaseModel):
    pest: RiskLevel
    disease: RiskLevel
    frost: bool = False
    heat: bool = False


class YieldImpact(BaseModel):
    """Coarse yield outlook; percentage is clamped to [-50, 50]."""

    status: YieldStatus
    percentage: int = Field(ge=-50, le=50)


class ImpactRecommendations(BaseModel):
    immediate: list[str] = Field(default_factory=list)
    short_term: list[str] = Field(default_factory=list)
    long_term: list[str] = Field(default_factory=list)


class FieldWork(BaseModel):
    suitable: bool
    activities: list[str] = Field(default_factory=list)


class FarmImpact(BaseModel):
    """Farm impact record stored alongside a weather snapshot."""

    soil_moisture: str
    crop_health: str
    irrigation_needed: bool
    risks: ImpactRisks
    yield_impact: YieldImpact
    recommendations: ImpactRecommendations
    field_work: FieldWork


class WeatherRecommendations(BaseModel):
    """Operator-facing control recommendations derived from a farm impact record."""

    irrigation: str
    pest_control: str
    disease_control: str
    field_operations: str


class FarmWeatherReport(BaseModel):
    """Snapshot, analysis and farm impact bundled with refresh bookkeeping."""

    farm_id: str = "default"
    snapshot: WeatherSnapshot
    analysis: AgriculturalAnalysis
    farm_impact: FarmImpact
    recommendations: WeatherRecommendations
    last_updated: datetime
    next_update: datetime
