"""Typed facet models produced by the agronomic weather analyzer."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..models import RiskLevel

SoilMoistureStatus = Literal["saturated", "adequate", "at risk of drying", "needs monitoring"]
CropGrowthStatus = Literal["heat stress", "warm", "optimal", "cool"]


class WeatherMetrics(BaseModel):
    """Scalar summary of current conditions and the forecast window."""

    model_config = ConfigDict(frozen=True)

    current_temp: float
    current_humidity: float
    current_wind: float
    avg_temp: float
    max_temp: float
    min_temp: float
    total_rainfall: float
    avg_humidity: float
    max_wind: float
    window_days: int = Field(ge=1)


class SoilMoistureFacet(BaseModel):
    """Soil moisture status with its effect and management tips."""

    model_config = ConfigDict(frozen=True)

    status: SoilMoistureStatus
    effect: str
    management_tips: list[str] = Field(default_factory=list)


class CropGrowthFacet(BaseModel):
    """Growth conditions and temperature damage risks."""

    model_config = ConfigDict(frozen=True)

    status: CropGrowthStatus
    risks: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class IrrigationFacet(BaseModel):
    """Irrigation necessity and timing hint."""

    model_config = ConfigDict(frozen=True)

    needed: bool
    recommendation: str
    schedule: str


class RiskDetails(BaseModel):
    """Free-text annotations attached to the risk facet."""

    model_config = ConfigDict(frozen=True)

    pest_warning: str | None = None
    disease_warning: str | None = None
    extreme_conditions: list[str] = Field(default_factory=list)


class RiskFacet(BaseModel):
    """Pest, disease, frost and heat risk levels."""

    model_config = ConfigDict(frozen=True)

    pest: RiskLevel
    disease: RiskLevel
    frost: bool
    heat: bool
    details: RiskDetails = Field(default_factory=RiskDetails)


class FieldOperationsFacet(BaseModel):
    """Field work suitability, allowed activities and restrictions."""

    model_config = ConfigDict(frozen=True)

    suitable: bool
    activities: list[str] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)


class AgriculturalAnalysis(BaseModel):
    """Composite report of the five independently computed facets."""

    model_config = ConfigDict(frozen=True)

    soil_moisture: SoilMoistureFacet
    crop_growth: CropGrowthFacet
    irrigation: IrrigationFacet
    risks: RiskFacet
    field_operations: FieldOperationsFacet
