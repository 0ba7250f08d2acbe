"""WeatherAPI.com provider implementation (current + daily forecast)."""

from __future__ import annotations

import logging
import time
from datetime import UTC, date, datetime, timedelta
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from ..exceptions import WeatherProviderError
from ..redaction import sanitize_text
from .base import WeatherProvider
from .models import (
    CurrentConditions,
    ForecastDay,
    HourlyForecast,
    WeatherAlert,
    WeatherFetchResult,
    WeatherLocation,
    WeatherSnapshot,
)

if TYPE_CHECKING:
    from ..config import Settings

# Current precipitation (mm) above which a heavy rainfall alert is raised.
HEAVY_RAINFALL_ALERT_MM = 25.0
ALERT_DURATION = timedelta(hours=24)


class WeatherAPIProvider(WeatherProvider):
    """Fetches and normalizes current conditions and forecasts from WeatherAPI.com."""

    provider_name = "weatherapi"
    provider_version = "v1"

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        max_retries: int = 1,
        retry_delay_seconds: float = 1.0,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self._max_retries = max_retries
        self._retry_delay = retry_delay_seconds
        self._base_url = str(settings.weather_api_base_url).rstrip("/")
        self._client = httpx.Client(
            timeout=settings.weather_timeout_seconds,
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> WeatherAPIProvider:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_snapshot(
        self,
        *,
        lat: float | None = None,
        lon: float | None = None,
        location: str | None = None,
        days: int = 7,
    ) -> WeatherFetchResult:
        """Fetch current conditions and a ``days``-long forecast for one location."""
        query = self._resolve_query(lat=lat, lon=lon, location=location)
        if not (1 <= days <= 14):
            raise WeatherProviderError(f"Invalid forecast days {days}; expected between 1 and 14.")

        current_payload = self._request_json(
            "/current.json", params={"q": query}, context="current conditions"
        )
        forecast_payload = self._request_json(
            "/forecast.json", params={"q": query, "days": days}, context="forecast fetch"
        )
        snapshot = self._normalize_snapshot(
            current_payload=current_payload,
            forecast_payload=forecast_payload,
            fallback_lat=lat,
            fallback_lon=lon,
        )
        return WeatherFetchResult(
            snapshot=snapshot,
            raw_current_payload=current_payload,
            raw_forecast_payload=forecast_payload,
        )

    @staticmethod
    def _resolve_query(
        *,
        lat: float | None,
        lon: float | None,
        location: str | None,
    ) -> str:
        if location and (lat is not None or lon is not None):
            raise WeatherProviderError("Use either --location or --lat/--lon, not both.")
        if location:
            if not location.strip():
                raise WeatherProviderError("Location query must not be empty.")
            return location.strip()
        if lat is None or lon is None:
            raise WeatherProviderError("Missing coordinates: provide both latitude and longitude.")
        if not (-90 <= lat <= 90):
            raise WeatherProviderError(f"Invalid latitude {lat}; expected between -90 and 90.")
        if not (-180 <= lon <= 180):
            raise WeatherProviderError(f"Invalid longitude {lon}; expected between -180 and 180.")
        return f"{lat:.4f},{lon:.4f}"

    def _request_json(
        self, path: str, params: dict[str, Any], context: str
    ) -> dict[str, Any]:
        if not self.settings.weather_api_key:
            raise WeatherProviderError("WEATHER_API_KEY is required for live weather fetches.")

        url = f"{self._base_url}{path}"
        query = {"key": self.settings.weather_api_key, **params}
        last_error: Exception | None = None
        for attempt in range(self._max_retries + 1):
            try:
                response = self._client.get(url, params=query)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                # Don't retry 4xx client errors except 429 rate-limit.
                if 400 <= status < 500 and status != 429:
                    raise WeatherProviderError(
                        f"WeatherAPI {context} failed with status {status} "
                        f"at {url}: {sanitize_text(exc.response.text[:300])}"
                    ) from exc
                last_error = exc
                if attempt < self._max_retries:
                    self.logger.warning(
                        "WeatherAPI %s failed (HTTP %d); retrying",
                        context,
                        status,
                        extra={"provider": self.provider_name},
                    )
                    time.sleep(self._retry_delay)
                    continue
                raise WeatherProviderError(
                    f"WeatherAPI {context} failed with status {status} "
                    f"at {url}: {sanitize_text(exc.response.text[:300])}"
                ) from exc
            except httpx.HTTPError as exc:
                last_error = exc
                if attempt < self._max_retries:
                    self.logger.warning(
                        "WeatherAPI %s request failed (%s); retrying",
                        context,
                        type(exc).__name__,
                        extra={"provider": self.provider_name},
                    )
                    time.sleep(self._retry_delay)
                    continue
                raise WeatherProviderError(
                    f"WeatherAPI {context} request failed at {url}: {sanitize_text(str(exc))}"
                ) from exc

            try:
                payload = response.json()
            except ValueError as exc:
                raise WeatherProviderError(
                    f"WeatherAPI {context} returned non-JSON response at {url}."
                ) from exc

            if not isinstance(payload, dict):
                raise WeatherProviderError(
                    f"WeatherAPI {context} returned unexpected payload type "
                    f"{type(payload).__name__} at {url}."
                )
            return payload

        raise WeatherProviderError(
            f"WeatherAPI {context} failed after retries: {sanitize_text(str(last_error))}"
        )

    def _normalize_snapshot(
        self,
        *,
        current_payload: dict[str, Any],
        forecast_payload: dict[str, Any],
        fallback_lat: float | None,
        fallback_lon: float | None,
    ) -> WeatherSnapshot:
        raw_current = current_payload.get("current")
        if not isinstance(raw_current, dict):
            raise WeatherProviderError("WeatherAPI current payload missing 'current' object.")

        forecast_obj = forecast_payload.get("forecast")
        if not isinstance(forecast_obj, dict):
            raise WeatherProviderError("WeatherAPI forecast payload missing 'forecast' object.")
        raw_days = forecast_obj.get("forecastday")
        if not isinstance(raw_days, list):
            raise WeatherProviderError(
                "WeatherAPI forecast payload missing 'forecast.forecastday' list."
            )
        if not raw_days:
            raise WeatherProviderError("WeatherAPI forecast payload contained no forecast days.")

        retrieved_at = datetime.now(UTC)
        try:
            current = self._normalize_current(raw_current, retrieved_at)
            forecast = [self._normalize_day(item) for item in raw_days]
        except ValidationError as exc:
            raise WeatherProviderError(
                f"WeatherAPI payload failed validation: {exc.error_count()} error(s): {exc}"
            ) from exc

        return WeatherSnapshot(
            provider=self.provider_name,
            provider_version=self.provider_version,
            retrieval_timestamp=retrieved_at,
            location=self._normalize_location(
                current_payload.get("location") or forecast_payload.get("location"),
                fallback_lat=fallback_lat,
                fallback_lon=fallback_lon,
            ),
            current=current,
            forecast=forecast,
            alerts=self.derive_alerts(current),
            raw_payload_path=None,
        )

    def _normalize_current(
        self, raw: dict[str, Any], retrieved_at: datetime
    ) -> CurrentConditions:
        temperature = self._as_float(raw.get("temp_c"))
        if temperature is None:
            raise WeatherProviderError("WeatherAPI current payload missing numeric 'temp_c'.")
        return CurrentConditions(
            timestamp=retrieved_at,
            temperature=temperature,
            humidity=self._as_float(raw.get("humidity")) or 0.0,
            wind_speed=self._as_float(raw.get("wind_kph")) or 0.0,
            rainfall=self._as_float(raw.get("precip_mm")) or 0.0,
            condition=self._condition_text(raw.get("condition")) or "",
            pressure=self._as_float(raw.get("pressure_mb")),
            visibility=self._as_float(raw.get("vis_km")),
            uv_index=self._as_float(raw.get("uv")),
        )

    def _normalize_day(self, item: Any) -> ForecastDay:
        if not isinstance(item, dict):
            raise WeatherProviderError(
                f"WeatherAPI forecast day entry is {type(item).__name__}, expected an object."
            )
        day_date = self._parse_date(item.get("date"))
        if day_date is None:
            raise WeatherProviderError("WeatherAPI forecast day missing or invalid 'date'.")
        day = item.get("day")
        if not isinstance(day, dict):
            raise WeatherProviderError(f"WeatherAPI forecast day {day_date} missing 'day' object.")

        day_temp = self._as_float(day.get("maxtemp_c"))
        night_temp = self._as_float(day.get("mintemp_c"))
        if day_temp is None or night_temp is None:
            raise WeatherProviderError(
                f"WeatherAPI forecast day {day_date} missing 'maxtemp_c'/'mintemp_c'."
            )

        hourly: list[HourlyForecast] = []
        raw_hours = item.get("hour")
        if isinstance(raw_hours, list):
            for hour in raw_hours:
                if not isinstance(hour, dict):
                    continue
                temp = self._as_float(hour.get("temp_c"))
                stamp = self._as_str(hour.get("time"))
                if temp is None or stamp is None:
                    continue
                hourly.append(
                    HourlyForecast(
                        # "2026-10-19 06:00" -> "06:00"
                        time=stamp.split(" ")[-1],
                        temperature=temp,
                        rainfall=self._as_float(hour.get("precip_mm")) or 0.0,
                        condition=self._condition_text(hour.get("condition")) or "",
                    )
                )

        return ForecastDay(
            date=day_date,
            day_temp=day_temp,
            night_temp=night_temp,
            rainfall=self._as_float(day.get("totalprecip_mm")) or 0.0,
            wind_speed=self._as_float(day.get("maxwind_kph")) or 0.0,
            condition=self._condition_text(day.get("condition")) or "",
            hourly=hourly,
        )

    def _normalize_location(
        self,
        raw: Any,
        *,
        fallback_lat: float | None,
        fallback_lon: float | None,
    ) -> WeatherLocation:
        if not isinstance(raw, dict):
            return WeatherLocation(latitude=fallback_lat, longitude=fallback_lon)
        lat = self._as_float(raw.get("lat"))
        lon = self._as_float(raw.get("lon"))
        return WeatherLocation(
            name=self._as_str(raw.get("name")),
            region=self._as_str(raw.get("region")),
            country=self._as_str(raw.get("country")),
            latitude=lat if lat is not None else fallback_lat,
            longitude=lon if lon is not None else fallback_lon,
        )

    @staticmethod
    def derive_alerts(current: CurrentConditions) -> list[WeatherAlert]:
        """Build provider-side alerts from current conditions."""
        alerts: list[WeatherAlert] = []
        if current.rainfall > HEAVY_RAINFALL_ALERT_MM:
            alerts.append(
                WeatherAlert(
                    alert_type="Heavy Rainfall",
                    severity="medium",
                    description="Heavy rainfall may cause waterlogging",
                    start_time=current.timestamp,
                    end_time=current.timestamp + ALERT_DURATION,
                )
            )
        return alerts

    @classmethod
    def _condition_text(cls, value: Any) -> str | None:
        if isinstance(value, dict):
            return cls._as_str(value.get("text"))
        return cls._as_str(value)

    @staticmethod
    def _as_str(value: Any) -> str | None:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    @staticmethod
    def _as_float(value: Any) -> float | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return float(value)
        return None

    @staticmethod
    def _parse_date(value: Any) -> date | None:
        if isinstance(value, date):
            return value
        if isinstance(value, str) and value.strip():
            try:
                return date.fromisoformat(value.strip())
            except ValueError:
                return None
        return None
