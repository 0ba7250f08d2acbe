"""Agronomic weather classifiers.

Each classifier is a pure function of ``(metrics, thresholds)`` returning one
facet of the analysis. Classifiers never call each other and never read
another facet, so they can be evaluated in any order. All band comparisons
are strict: a value equal to a cutoff does not enter that band.
"""

from __future__ import annotations

from ..models import RiskLevel
from .models import (
    CropGrowthFacet,
    CropGrowthStatus,
    FieldOperationsFacet,
    IrrigationFacet,
    RiskDetails,
    RiskFacet,
    SoilMoistureFacet,
    SoilMoistureStatus,
    WeatherMetrics,
)
from .thresholds import DEFAULT_THRESHOLDS, ThresholdTables

MOISTURE_EFFECTS: dict[SoilMoistureStatus, str] = {
    "saturated": "High risk of waterlogging and root diseases",
    "adequate": "Optimal conditions for crop growth",
    "at risk of drying": "Potential water stress for crops",
    "needs monitoring": "Monitor soil moisture levels closely",
}

MOISTURE_TIPS: dict[SoilMoistureStatus, tuple[str, ...]] = {
    "saturated": (
        "Ensure proper drainage",
        "Monitor for root diseases",
        "Avoid heavy machinery",
    ),
    "adequate": ("Maintain current irrigation schedule", "Monitor weather changes"),
    "at risk of drying": ("Increase irrigation frequency", "Apply mulch if possible"),
    "needs monitoring": ("Check soil moisture regularly", "Prepare irrigation systems"),
}

HEAT_DAMAGE = "heat damage"
FROST_DAMAGE = "frost damage"

GROWTH_RISK_TIPS: dict[str, tuple[str, ...]] = {
    HEAT_DAMAGE: ("Provide shade if possible", "Increase irrigation frequency"),
    FROST_DAMAGE: ("Prepare frost protection", "Monitor night temperatures"),
}
DEFAULT_GROWTH_TIP = "Maintain regular crop care"

NO_IRRIGATION = "No irrigation needed at this time"
IMMEDIATE_IRRIGATION = "Immediate irrigation required"
MONITOR_IRRIGATION = "Monitor and irrigate as needed"

REGULAR_SCHEDULE = "Follow regular schedule"
COOL_HOURS_SCHEDULE = "Early morning or evening irrigation"
DAYTIME_SCHEDULE = "Regular daytime irrigation acceptable"

PEST_WARNING = "High temperature increases pest activity"
DISEASE_WARNING = "High humidity increases disease risk"
TEMPERATURE_STRESS = "Temperature stress likely"

LIMITED_OPERATIONS = "Limited field operations possible"
GENERAL_FIELD_WORK = "General field work"
HEAVY_MACHINERY_RESTRICTED = "Heavy machinery use restricted"
SPRAYING_NOT_ADVISED = "Spraying operations not advised"


def classify_soil_moisture(
    metrics: WeatherMetrics, thresholds: ThresholdTables = DEFAULT_THRESHOLDS
) -> SoilMoistureFacet:
    """Classify soil moisture from window rainfall and average temperature."""
    rainfall = metrics.total_rainfall
    status: SoilMoistureStatus
    if rainfall > thresholds.rainfall.heavy:
        status = "saturated"
    elif rainfall > thresholds.rainfall.moderate:
        status = "adequate"
    elif metrics.avg_temp > thresholds.temperature.hot and rainfall < thresholds.rainfall.dry:
        status = "at risk of drying"
    else:
        status = "needs monitoring"
    return SoilMoistureFacet(
        status=status,
        effect=MOISTURE_EFFECTS[status],
        management_tips=list(MOISTURE_TIPS[status]),
    )


def classify_crop_growth(
    metrics: WeatherMetrics, thresholds: ThresholdTables = DEFAULT_THRESHOLDS
) -> CropGrowthFacet:
    """Classify growth conditions and flag heat/frost damage risks."""
    temps = thresholds.temperature
    status: CropGrowthStatus
    if metrics.avg_temp > temps.extreme:
        status = "heat stress"
    elif metrics.avg_temp > temps.optimal:
        status = "warm"
    elif metrics.avg_temp > temps.cold:
        status = "optimal"
    else:
        status = "cool"

    risks: list[str] = []
    if metrics.max_temp > temps.extreme:
        risks.append(HEAT_DAMAGE)
    if metrics.min_temp < temps.frost:
        risks.append(FROST_DAMAGE)

    recommendations = [tip for risk in risks for tip in GROWTH_RISK_TIPS[risk]]
    return CropGrowthFacet(
        status=status,
        risks=risks,
        recommendations=recommendations or [DEFAULT_GROWTH_TIP],
    )


def classify_irrigation(
    metrics: WeatherMetrics, thresholds: ThresholdTables = DEFAULT_THRESHOLDS
) -> IrrigationFacet:
    """Decide whether irrigation is needed and when to run it."""
    needed = (
        metrics.total_rainfall < thresholds.rainfall.moderate
        and metrics.avg_temp > thresholds.temperature.optimal
    )
    if not needed:
        return IrrigationFacet(
            needed=False,
            recommendation=NO_IRRIGATION,
            schedule=REGULAR_SCHEDULE,
        )

    if metrics.total_rainfall < thresholds.rainfall.dry:
        recommendation = IMMEDIATE_IRRIGATION
    else:
        recommendation = MONITOR_IRRIGATION
    if metrics.current_temp > thresholds.temperature.hot:
        schedule = COOL_HOURS_SCHEDULE
    else:
        schedule = DAYTIME_SCHEDULE
    return IrrigationFacet(needed=True, recommendation=recommendation, schedule=schedule)


def _pest_risk(metrics: WeatherMetrics, thresholds: ThresholdTables) -> RiskLevel:
    temps = thresholds.temperature
    humidity = thresholds.humidity
    if metrics.avg_temp > temps.hot and metrics.avg_humidity > humidity.high:
        return "high"
    if metrics.avg_temp > temps.optimal and metrics.avg_humidity > humidity.optimal:
        return "medium"
    return "low"


def _disease_risk(metrics: WeatherMetrics, thresholds: ThresholdTables) -> RiskLevel:
    humidity = thresholds.humidity
    wet = metrics.total_rainfall > thresholds.rainfall.moderate
    if metrics.avg_humidity > humidity.high and wet:
        return "high"
    if metrics.avg_humidity > humidity.optimal or wet:
        return "medium"
    return "low"


def classify_risks(
    metrics: WeatherMetrics, thresholds: ThresholdTables = DEFAULT_THRESHOLDS
) -> RiskFacet:
    """Rate pest and disease pressure and flag frost/heat exposure."""
    temps = thresholds.temperature
    frost = metrics.min_temp < temps.frost
    heat = metrics.max_temp > temps.extreme

    details = RiskDetails(
        pest_warning=PEST_WARNING if metrics.avg_temp > temps.hot else None,
        disease_warning=(
            DISEASE_WARNING if metrics.avg_humidity > thresholds.humidity.high else None
        ),
        extreme_conditions=[TEMPERATURE_STRESS] if frost or heat else [],
    )
    return RiskFacet(
        pest=_pest_risk(metrics, thresholds),
        disease=_disease_risk(metrics, thresholds),
        frost=frost,
        heat=heat,
        details=details,
    )


def classify_field_operations(
    metrics: WeatherMetrics, thresholds: ThresholdTables = DEFAULT_THRESHOLDS
) -> FieldOperationsFacet:
    """Assess field work suitability from window rainfall and peak wind."""
    rain = thresholds.rainfall
    wind = thresholds.wind
    suitable = metrics.total_rainfall < rain.moderate and metrics.max_wind < wind.moderate

    if suitable:
        activities = [GENERAL_FIELD_WORK]
        if metrics.total_rainfall < rain.dry:
            activities.extend(["Irrigation", "Fertilizer application"])
        if metrics.max_wind < wind.safe:
            activities.append("Spraying operations")
    else:
        activities = [LIMITED_OPERATIONS]

    restrictions: list[str] = []
    if metrics.total_rainfall > rain.heavy:
        restrictions.append(HEAVY_MACHINERY_RESTRICTED)
    if metrics.max_wind > wind.strong:
        restrictions.append(SPRAYING_NOT_ADVISED)

    return FieldOperationsFacet(
        suitable=suitable,
        activities=activities,
        restrictions=restrictions,
    )
