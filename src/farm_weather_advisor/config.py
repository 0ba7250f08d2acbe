"""Typed settings loader for the farm weather advisor."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import AnyUrl, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .analysis.thresholds import DEFAULT_THRESHOLDS, ThresholdTables
from .exceptions import ConfigError

# Settings field -> (threshold group, band).
_THRESHOLD_FIELDS: dict[str, tuple[str, str]] = {
    "threshold_temperature_frost": ("temperature", "frost"),
    "threshold_temperature_cold": ("temperature", "cold"),
    "threshold_temperature_optimal": ("temperature", "optimal"),
    "threshold_temperature_hot": ("temperature", "hot"),
    "threshold_temperature_extreme": ("temperature", "extreme"),
    "threshold_rainfall_dry": ("rainfall", "dry"),
    "threshold_rainfall_moderate": ("rainfall", "moderate"),
    "threshold_rainfall_heavy": ("rainfall", "heavy"),
    "threshold_humidity_low": ("humidity", "low"),
    "threshold_humidity_optimal": ("humidity", "optimal"),
    "threshold_humidity_high": ("humidity", "high"),
    "threshold_wind_safe": ("wind", "safe"),
    "threshold_wind_moderate": ("wind", "moderate"),
    "threshold_wind_strong": ("wind", "strong"),
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: Literal["dev", "staging", "prod"] = Field(default="dev", alias="APP_ENV")
    weather_api_base_url: AnyUrl = Field(
        default="https://api.weatherapi.com/v1",
        alias="WEATHER_API_BASE_URL",
        validate_default=True,
    )
    weather_api_key: str | None = Field(default=None, alias="WEATHER_API_KEY", repr=False)
    weather_timeout_seconds: float = Field(default=15.0, alias="WEATHER_TIMEOUT_SECONDS")
    weather_forecast_days: int = Field(default=7, alias="WEATHER_FORECAST_DAYS")
    weather_journal_raw_payloads: bool = Field(default=True, alias="WEATHER_JOURNAL_RAW_PAYLOADS")
    weather_default_lat: float | None = Field(default=None, alias="WEATHER_DEFAULT_LAT")
    weather_default_lon: float | None = Field(default=None, alias="WEATHER_DEFAULT_LON")
    weather_max_print: int = Field(default=7, alias="WEATHER_MAX_PRINT")
    journal_dir: Path = Field(default=Path("./data/journal"), alias="JOURNAL_DIR")
    weather_raw_payload_dir: Path = Field(
        default=Path("./data/raw/weather"),
        alias="WEATHER_RAW_PAYLOAD_DIR",
    )

    threshold_temperature_frost: float | None = Field(
        default=None, alias="THRESHOLD_TEMPERATURE_FROST"
    )
    threshold_temperature_cold: float | None = Field(
        default=None, alias="THRESHOLD_TEMPERATURE_COLD"
    )
    threshold_temperature_optimal: float | None = Field(
        default=None, alias="THRESHOLD_TEMPERATURE_OPTIMAL"
    )
    threshold_temperature_hot: float | None = Field(
        default=None, alias="THRESHOLD_TEMPERATURE_HOT"
    )
    threshold_temperature_extreme: float | None = Field(
        default=None, alias="THRESHOLD_TEMPERATURE_EXTREME"
    )
    threshold_rainfall_dry: float | None = Field(default=None, alias="THRESHOLD_RAINFALL_DRY")
    threshold_rainfall_moderate: float | None = Field(
        default=None, alias="THRESHOLD_RAINFALL_MODERATE"
    )
    threshold_rainfall_heavy: float | None = Field(default=None, alias="THRESHOLD_RAINFALL_HEAVY")
    threshold_humidity_low: float | None = Field(default=None, alias="THRESHOLD_HUMIDITY_LOW")
    threshold_humidity_optimal: float | None = Field(
        default=None, alias="THRESHOLD_HUMIDITY_OPTIMAL"
    )
    threshold_humidity_high: float | None = Field(default=None, alias="THRESHOLD_HUMIDITY_HIGH")
    threshold_wind_safe: float | None = Field(default=None, alias="THRESHOLD_WIND_SAFE")
    threshold_wind_moderate: float | None = Field(default=None, alias="THRESHOLD_WIND_MODERATE")
    threshold_wind_strong: float | None = Field(default=None, alias="THRESHOLD_WIND_STRONG")

    @field_validator(
        "weather_api_key",
        "weather_default_lat",
        "weather_default_lon",
        *_THRESHOLD_FIELDS,
        mode="before",
    )
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Treat empty env-string values as unset optional fields."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @model_validator(mode="after")
    def validate_ranges(self) -> Settings:
        """Validate numeric ranges and paired options."""
        if self.weather_timeout_seconds <= 0:
            raise ValueError("WEATHER_TIMEOUT_SECONDS must be > 0.")
        if not (1 <= self.weather_forecast_days <= 14):
            raise ValueError("WEATHER_FORECAST_DAYS must be between 1 and 14.")
        if self.weather_max_print <= 0:
            raise ValueError("WEATHER_MAX_PRINT must be > 0.")
        has_default_lat = self.weather_default_lat is not None
        has_default_lon = self.weather_default_lon is not None
        if has_default_lat != has_default_lon:
            raise ValueError("WEATHER_DEFAULT_LAT and WEATHER_DEFAULT_LON must be set together.")
        if has_default_lat and not (-90 <= self.weather_default_lat <= 90):
            raise ValueError("WEATHER_DEFAULT_LAT must be between -90 and 90.")
        if has_default_lon and not (-180 <= self.weather_default_lon <= 180):
            raise ValueError("WEATHER_DEFAULT_LON must be between -180 and 180.")
        # Surface band ordering problems at load time rather than at first analysis.
        try:
            self.thresholds()
        except ValueError as exc:
            raise ValueError(f"Invalid THRESHOLD_* overrides: {exc}") from exc
        return self

    def threshold_overrides(self) -> dict[str, dict[str, float]]:
        """Return only the threshold cutoffs explicitly configured."""
        overrides: dict[str, dict[str, float]] = {}
        for field_name, (group, band) in _THRESHOLD_FIELDS.items():
            value = getattr(self, field_name)
            if value is not None:
                overrides.setdefault(group, {})[band] = value
        return overrides

    def thresholds(self) -> ThresholdTables:
        """Build the immutable threshold tables with configured overrides applied."""
        overrides = self.threshold_overrides()
        if not overrides:
            return DEFAULT_THRESHOLDS
        return DEFAULT_THRESHOLDS.with_overrides(overrides)

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for journaling (no credentials)."""
        return {
            "app_env": self.app_env,
            "weather_api_base_url": str(self.weather_api_base_url),
            "weather_api_credentials_configured": bool(self.weather_api_key),
            "weather_timeout_seconds": self.weather_timeout_seconds,
            "weather_forecast_days": self.weather_forecast_days,
            "weather_raw_journaling": self.weather_journal_raw_payloads,
            "threshold_overrides": self.threshold_overrides(),
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        settings = Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc

    for directory in (settings.journal_dir, settings.weather_raw_payload_dir):
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"Cannot create output directory {directory}: {exc}") from exc
    return settings
