"""Settings loading, threshold overrides and startup validation."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from farm_weather_advisor.analysis.thresholds import DEFAULT_THRESHOLDS
from farm_weather_advisor.config import Settings, load_settings
from farm_weather_advisor.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the developer's environment and any local .env file."""
    for name in list(os.environ):
        if name.startswith(("WEATHER_", "THRESHOLD_")) or name in {"APP_ENV", "JOURNAL_DIR"}:
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults_without_environment() -> None:
    settings = Settings(_env_file=None)
    assert settings.app_env == "dev"
    assert str(settings.weather_api_base_url).startswith("https://api.weatherapi.com/v1")
    assert settings.weather_api_key is None
    assert settings.weather_forecast_days == 7
    assert settings.weather_max_print == 7
    assert settings.threshold_overrides() == {}
    assert settings.thresholds() is DEFAULT_THRESHOLDS


def test_threshold_overrides_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("THRESHOLD_TEMPERATURE_EXTREME", "38")
    monkeypatch.setenv("THRESHOLD_RAINFALL_DRY", "3.5")
    monkeypatch.setenv("THRESHOLD_WIND_STRONG", "")

    settings = Settings(_env_file=None)
    assert settings.threshold_overrides() == {
        "temperature": {"extreme": 38.0},
        "rainfall": {"dry": 3.5},
    }
    tables = settings.thresholds()
    assert tables.temperature.extreme == 38.0
    assert tables.temperature.hot == DEFAULT_THRESHOLDS.temperature.hot
    assert tables.rainfall.dry == 3.5
    assert tables.wind == DEFAULT_THRESHOLDS.wind


def test_out_of_order_threshold_override_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("THRESHOLD_RAINFALL_MODERATE", "30")

    with pytest.raises(ValueError, match="Invalid THRESHOLD_\\* overrides"):
        Settings(_env_file=None)


def test_load_settings_wraps_validation_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("THRESHOLD_TEMPERATURE_FROST", "12")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_settings()


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("WEATHER_TIMEOUT_SECONDS", "0", "WEATHER_TIMEOUT_SECONDS"),
        ("WEATHER_FORECAST_DAYS", "15", "WEATHER_FORECAST_DAYS"),
        ("WEATHER_MAX_PRINT", "0", "WEATHER_MAX_PRINT"),
        ("WEATHER_DEFAULT_LAT", "12.5", "must be set together"),
        ("APP_ENV", "qa", "app_env|APP_ENV"),
    ],
)
def test_invalid_settings_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str, message: str
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError, match=message):
        load_settings()


def test_load_settings_creates_output_dirs(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("JOURNAL_DIR", str(tmp_path / "journal"))
    monkeypatch.setenv("WEATHER_RAW_PAYLOAD_DIR", str(tmp_path / "raw"))
    monkeypatch.setenv("WEATHER_DEFAULT_LAT", "-0.28")
    monkeypatch.setenv("WEATHER_DEFAULT_LON", "36.07")

    settings = load_settings()
    assert settings.journal_dir.is_dir()
    assert settings.weather_raw_payload_dir.is_dir()
    assert settings.weather_default_lat == -0.28


def test_safe_summary_omits_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHER_API_KEY", "wk-super-secret")
    monkeypatch.setenv("THRESHOLD_HUMIDITY_HIGH", "80")

    settings = Settings(_env_file=None)
    summary = settings.safe_summary()
    assert summary["weather_api_credentials_configured"] is True
    assert summary["threshold_overrides"] == {"humidity": {"high": 80.0}}
    assert "wk-super-secret" not in repr(summary)
    assert "wk-super-secret" not in repr(settings)


def test_unwritable_journal_dir_is_config_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv("JOURNAL_DIR", str(blocker / "journal"))

    with pytest.raises(ConfigError, match="Cannot create output directory"):
        load_settings()
