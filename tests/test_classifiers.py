"""Facet-level tests for the five agronomic classifiers."""

from __future__ import annotations

import pytest
from weather_builders import make_metrics

from farm_weather_advisor.analysis.classifiers import (
    MOISTURE_EFFECTS,
    MOISTURE_TIPS,
    classify_crop_growth,
    classify_field_operations,
    classify_irrigation,
    classify_risks,
    classify_soil_moisture,
)
from farm_weather_advisor.models import RISK_LEVELS, risk_severity


@pytest.mark.parametrize(
    ("rainfall", "avg_temp", "expected"),
    [
        (30.0, 33.0, "saturated"),
        (20.0, 33.0, "adequate"),
        (2.0, 33.0, "at risk of drying"),
        (2.0, 28.0, "needs monitoring"),
        (8.0, 33.0, "needs monitoring"),
    ],
)
def test_soil_moisture_status_priority(rainfall: float, avg_temp: float, expected: str) -> None:
    facet = classify_soil_moisture(make_metrics(total_rainfall=rainfall, avg_temp=avg_temp))
    assert facet.status == expected
    assert facet.effect == MOISTURE_EFFECTS[expected]
    assert facet.management_tips == list(MOISTURE_TIPS[expected])


def test_saturated_soil_tips() -> None:
    facet = classify_soil_moisture(make_metrics(total_rainfall=40.0))
    assert facet.effect == "High risk of waterlogging and root diseases"
    assert facet.management_tips == [
        "Ensure proper drainage",
        "Monitor for root diseases",
        "Avoid heavy machinery",
    ]


@pytest.mark.parametrize(
    ("avg_temp", "expected"),
    [(36.0, "heat stress"), (28.0, "warm"), (18.0, "optimal"), (4.0, "cool")],
)
def test_crop_growth_status_by_average_temperature(avg_temp: float, expected: str) -> None:
    assert classify_crop_growth(make_metrics(avg_temp=avg_temp)).status == expected


def test_crop_growth_without_risks_recommends_regular_care() -> None:
    facet = classify_crop_growth(make_metrics())
    assert facet.risks == []
    assert facet.recommendations == ["Maintain regular crop care"]


def test_heat_and_frost_risks_can_fire_together() -> None:
    facet = classify_crop_growth(make_metrics(max_temp=38.0, min_temp=0.0))
    assert facet.risks == ["heat damage", "frost damage"]
    assert facet.recommendations == [
        "Provide shade if possible",
        "Increase irrigation frequency",
        "Prepare frost protection",
        "Monitor night temperatures",
    ]


def test_irrigation_not_needed() -> None:
    facet = classify_irrigation(make_metrics(avg_temp=20.0, total_rainfall=2.0))
    assert facet.needed is False
    assert facet.recommendation == "No irrigation needed at this time"
    assert facet.schedule == "Follow regular schedule"


def test_irrigation_needed_in_dry_heat_schedules_cool_hours() -> None:
    facet = classify_irrigation(
        make_metrics(avg_temp=28.0, total_rainfall=1.0, current_temp=31.0)
    )
    assert facet.needed is True
    assert facet.recommendation == "Immediate irrigation required"
    assert facet.schedule == "Early morning or evening irrigation"


def test_irrigation_needed_with_some_rain_allows_daytime() -> None:
    facet = classify_irrigation(
        make_metrics(avg_temp=28.0, total_rainfall=9.0, current_temp=24.0)
    )
    assert facet.needed is True
    assert facet.recommendation == "Monitor and irrigate as needed"
    assert facet.schedule == "Regular daytime irrigation acceptable"


@pytest.mark.parametrize(
    ("avg_temp", "humidity", "expected"),
    [
        (31.0, 80.0, "high"),
        (31.0, 70.0, "medium"),
        (27.0, 80.0, "medium"),
        (27.0, 55.0, "low"),
        (22.0, 90.0, "low"),
    ],
)
def test_pest_risk_levels(avg_temp: float, humidity: float, expected: str) -> None:
    facet = classify_risks(make_metrics(avg_temp=avg_temp, avg_humidity=humidity))
    assert facet.pest == expected


@pytest.mark.parametrize(
    ("humidity", "rainfall", "expected"),
    [
        (80.0, 20.0, "high"),
        (80.0, 0.0, "medium"),
        (50.0, 20.0, "medium"),
        (65.0, 0.0, "medium"),
        (50.0, 0.0, "low"),
    ],
)
def test_disease_risk_levels(humidity: float, rainfall: float, expected: str) -> None:
    facet = classify_risks(make_metrics(avg_humidity=humidity, total_rainfall=rainfall))
    assert facet.disease == expected


def test_risk_details_are_conditional() -> None:
    calm = classify_risks(make_metrics())
    assert calm.details.pest_warning is None
    assert calm.details.disease_warning is None
    assert calm.details.extreme_conditions == []

    harsh = classify_risks(make_metrics(avg_temp=32.0, avg_humidity=85.0, min_temp=-1.0))
    assert harsh.details.pest_warning == "High temperature increases pest activity"
    assert harsh.details.disease_warning == "High humidity increases disease risk"
    assert harsh.details.extreme_conditions == ["Temperature stress likely"]
    assert harsh.frost is True
    assert harsh.heat is False


def test_field_operations_suitable_full_activity_list() -> None:
    facet = classify_field_operations(make_metrics(total_rainfall=2.0, max_wind=10.0))
    assert facet.suitable is True
    assert facet.activities == [
        "General field work",
        "Irrigation",
        "Fertilizer application",
        "Spraying operations",
    ]
    assert facet.restrictions == []


def test_field_operations_suitable_base_activity_only() -> None:
    facet = classify_field_operations(make_metrics(total_rainfall=10.0, max_wind=20.0))
    assert facet.suitable is True
    assert facet.activities == ["General field work"]


def test_field_operations_unsuitable_with_restrictions() -> None:
    facet = classify_field_operations(make_metrics(total_rainfall=40.0, max_wind=50.0))
    assert facet.suitable is False
    assert facet.activities == ["Limited field operations possible"]
    assert facet.restrictions == [
        "Heavy machinery use restricted",
        "Spraying operations not advised",
    ]


def test_restrictions_apply_independently_of_suitability() -> None:
    # Rain alone makes work unsuitable without adding a spraying restriction.
    facet = classify_field_operations(make_metrics(total_rainfall=20.0, max_wind=5.0))
    assert facet.suitable is False
    assert facet.restrictions == []


def test_risk_levels_are_ordered_by_severity() -> None:
    assert [risk_severity(level) for level in RISK_LEVELS] == [0, 1, 2, 3]
    assert risk_severity("critical") > risk_severity("high") > risk_severity("medium")
