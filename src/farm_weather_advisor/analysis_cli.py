"""CLI: fetch (or load) a weather snapshot, run the agronomic analysis, journal results."""

from __future__ import annotations

import argparse
import json
import sys
import uuid
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .analysis.analyzer import WeatherAnalyzer
from .config import Settings, load_settings
from .exceptions import AnalysisError, ConfigError, JournalError, WeatherProviderError
from .impact.mapper import build_weather_report
from .impact.models import FarmWeatherReport
from .journal import JournalWriter
from .log_setup import setup_logger
from .models import risk_severity
from .weather.models import WeatherSnapshot
from .weather.weatherapi import WeatherAPIProvider


def parse_args() -> argparse.Namespace:
    """Parse analysis CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Analyze weather conditions for agricultural impact."
    )
    parser.add_argument("--lat", type=float, default=None, help="Farm latitude.")
    parser.add_argument("--lon", type=float, default=None, help="Farm longitude.")
    parser.add_argument(
        "--location",
        type=str,
        default=None,
        help="Free-text location query (city, postcode) instead of coordinates.",
    )
    parser.add_argument(
        "--input-weather-file",
        type=Path,
        default=None,
        help="Analyze a normalized weather snapshot JSON file instead of fetching.",
    )
    parser.add_argument("--farm-id", type=str, default="default", help="Farm identifier.")
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Forecast days to fetch (1-14).",
    )
    parser.add_argument(
        "--max-print",
        type=int,
        default=None,
        help="Number of forecast days to print.",
    )
    return parser.parse_args()


def _validate_cli_input(
    args: argparse.Namespace, settings: Settings
) -> tuple[float | None, float | None]:
    if args.max_print is not None and args.max_print <= 0:
        raise WeatherProviderError("--max-print must be > 0 when provided.")
    if args.days is not None and not (1 <= args.days <= 14):
        raise WeatherProviderError("--days must be between 1 and 14.")

    explicit_coords = args.lat is not None or args.lon is not None
    if args.input_weather_file is not None:
        if explicit_coords or args.location:
            raise WeatherProviderError(
                "Use either --input-weather-file or a live location, not both."
            )
        return None, None
    if args.location:
        if explicit_coords:
            raise WeatherProviderError("Use either --location or --lat/--lon, not both.")
        return None, None

    lat = args.lat if args.lat is not None else settings.weather_default_lat
    lon = args.lon if args.lon is not None else settings.weather_default_lon
    if lat is None or lon is None:
        raise WeatherProviderError(
            "Missing location input: pass --lat and --lon, --location, set "
            "WEATHER_DEFAULT_LAT/LON, or use --input-weather-file."
        )
    if not (-90 <= lat <= 90):
        raise WeatherProviderError(f"Invalid latitude {lat}; expected between -90 and 90.")
    if not (-180 <= lon <= 180):
        raise WeatherProviderError(f"Invalid longitude {lon}; expected between -180 and 180.")
    return lat, lon


def _load_snapshot_file(path: Path) -> WeatherSnapshot:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise WeatherProviderError(f"Failed reading weather snapshot file {path}: {exc}") from exc
    try:
        return WeatherSnapshot.model_validate(payload)
    except ValidationError as exc:
        raise WeatherProviderError(
            f"Weather snapshot file {path} failed validation: {exc}"
        ) from exc


def _print_report(console: Console, report: FarmWeatherReport, max_print: int) -> None:
    snapshot = report.snapshot
    location = snapshot.location
    location_str = ", ".join(
        part for part in [location.name, location.region, location.country] if part
    ) or "unknown"
    current = snapshot.current
    console.print(
        f"Provider={snapshot.provider} farm={report.farm_id} location={location_str} "
        f"days={len(snapshot.forecast)} alerts={len(snapshot.alerts)}"
    )
    console.print(
        f"Current: {current.temperature:g}°C humidity={current.humidity:g}% "
        f"wind={current.wind_speed:g} km/h rain={current.rainfall:g} mm "
        f"{current.condition or '-'}"
    )

    forecast_table = Table(title="Daily Forecast")
    forecast_table.add_column("Date")
    forecast_table.add_column("Day °C")
    forecast_table.add_column("Night °C")
    forecast_table.add_column("Rain mm")
    forecast_table.add_column("Wind km/h")
    forecast_table.add_column("Condition", overflow="fold")
    for day in snapshot.forecast[:max_print]:
        forecast_table.add_row(
            day.date.isoformat(),
            f"{day.day_temp:g}",
            f"{day.night_temp:g}",
            f"{day.rainfall:g}",
            f"{day.wind_speed:g}",
            day.condition or "-",
        )
    console.print(forecast_table)

    analysis = report.analysis
    facet_table = Table(title="Agricultural Analysis")
    facet_table.add_column("Facet")
    facet_table.add_column("Assessment", overflow="fold")
    facet_table.add_column("Guidance", overflow="fold")
    facet_table.add_row(
        "Soil moisture",
        analysis.soil_moisture.status,
        "; ".join([analysis.soil_moisture.effect, *analysis.soil_moisture.management_tips]),
    )
    facet_table.add_row(
        "Crop growth",
        analysis.crop_growth.status
        + (f" ({', '.join(analysis.crop_growth.risks)})" if analysis.crop_growth.risks else ""),
        "; ".join(analysis.crop_growth.recommendations),
    )
    facet_table.add_row(
        "Irrigation",
        "needed" if analysis.irrigation.needed else "not needed",
        f"{analysis.irrigation.recommendation}; {analysis.irrigation.schedule}",
    )
    risks = analysis.risks
    facet_table.add_row(
        "Risks",
        f"pest={risks.pest} disease={risks.disease} frost={risks.frost} heat={risks.heat}",
        "; ".join(
            text
            for text in [
                risks.details.pest_warning,
                risks.details.disease_warning,
                *risks.details.extreme_conditions,
            ]
            if text
        )
        or "-",
    )
    field_ops = analysis.field_operations
    facet_table.add_row(
        "Field operations",
        "suitable" if field_ops.suitable else "not suitable",
        "; ".join([*field_ops.activities, *field_ops.restrictions]),
    )
    console.print(facet_table)

    impact = report.farm_impact
    advice = report.recommendations
    console.print(
        f"Yield impact: {impact.yield_impact.status} ({impact.yield_impact.percentage:+d}%)"
    )
    advice_table = Table(title="Recommendations")
    advice_table.add_column("Area")
    advice_table.add_column("Recommendation", overflow="fold")
    advice_table.add_row("Irrigation", advice.irrigation)
    advice_table.add_row("Pest control", advice.pest_control)
    advice_table.add_row("Disease control", advice.disease_control)
    advice_table.add_row("Field operations", advice.field_operations)
    console.print(advice_table)
    console.print(f"Next update due: {report.next_update.isoformat()}")


def main() -> int:
    """Run the weather analysis flow."""
    args = parse_args()
    logger = setup_logger()
    console = Console()
    session_id = uuid.uuid4().hex[:12]
    journal: JournalWriter | None = None

    try:
        settings = load_settings()
        lat, lon = _validate_cli_input(args, settings)
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2
    except WeatherProviderError as exc:
        logger.error("Invalid input: %s", exc)
        return 2

    try:
        journal = JournalWriter(
            journal_dir=settings.journal_dir,
            raw_payload_dir=settings.weather_raw_payload_dir,
            session_id=session_id,
        )
        journal.write_event(
            event_type="analysis_startup",
            payload=settings.safe_summary(),
            metadata={"session_id": session_id},
        )
    except JournalError as exc:
        logger.error("Failed to initialize analysis journal: %s", exc)
        return 3

    log_context = {"session_id": session_id, "farm_id": args.farm_id}
    exit_code = 0
    try:
        days = args.days or settings.weather_forecast_days
        journal.write_event(
            "analysis_request_start",
            payload={
                "farm_id": args.farm_id,
                "offline": args.input_weather_file is not None,
                "input_file": args.input_weather_file,
                "location": args.location,
                "lat": lat,
                "lon": lon,
                "days": days,
            },
            metadata={"session_id": session_id},
        )

        if args.input_weather_file is not None:
            snapshot = _load_snapshot_file(args.input_weather_file)
        else:
            with WeatherAPIProvider(settings=settings, logger=logger) as provider:
                fetch_result = provider.fetch_snapshot(
                    lat=lat, lon=lon, location=args.location, days=days
                )
            snapshot = fetch_result.snapshot
            if settings.weather_journal_raw_payloads:
                current_raw_path = journal.write_raw_snapshot(
                    "weatherapi_current", fetch_result.raw_current_payload
                )
                forecast_raw_path = journal.write_raw_snapshot(
                    "weatherapi_forecast", fetch_result.raw_forecast_payload
                )
                journal.write_event(
                    "weather_raw_snapshot",
                    payload={
                        "current_raw_path": str(current_raw_path),
                        "forecast_raw_path": str(forecast_raw_path),
                    },
                    metadata={"session_id": session_id},
                )
                snapshot = snapshot.model_copy(
                    update={"raw_payload_path": str(forecast_raw_path)}
                )

        journal.write_event(
            "weather_snapshot_normalized",
            payload={"snapshot": snapshot},
            metadata={"session_id": session_id},
        )

        analyzer = WeatherAnalyzer(thresholds=settings.thresholds(), logger=logger)
        report = build_weather_report(snapshot, analyzer, farm_id=args.farm_id)
        journal.write_event(
            "analysis_completed",
            payload={
                "farm_id": report.farm_id,
                "analysis": report.analysis,
                "farm_impact": report.farm_impact,
                "recommendations": report.recommendations,
                "next_update": report.next_update,
            },
            metadata={"session_id": session_id},
        )
        logger.info(
            "Weather analysis completed soil=%s yield_impact=%d",
            report.farm_impact.soil_moisture,
            report.farm_impact.yield_impact.percentage,
            extra=log_context,
        )
        risks = report.farm_impact.risks
        if max(risk_severity(risks.pest), risk_severity(risks.disease)) >= risk_severity("high"):
            logger.warning(
                "High crop risk pest=%s disease=%s",
                risks.pest,
                risks.disease,
                extra=log_context,
            )

        max_print = args.max_print or settings.weather_max_print
        _print_report(console, report=report, max_print=max_print)
    except (WeatherProviderError, AnalysisError, JournalError) as exc:
        exit_code = 4
        logger.error("Weather analysis failure: %s", exc, extra=log_context)
        try:
            journal.write_event(
                "analysis_failure",
                payload={"error": str(exc), "type": type(exc).__name__},
                metadata={"session_id": session_id},
            )
        except JournalError:
            logger.error("Failed to write analysis_failure event.")
    except Exception as exc:  # pragma: no cover
        exit_code = 99
        logger.exception("Unexpected analysis CLI failure: %s", exc)
        try:
            journal.write_event(
                "analysis_failure_unhandled",
                payload={"error": str(exc), "type": type(exc).__name__},
                metadata={"session_id": session_id},
            )
        except JournalError:
            logger.error("Failed to write analysis_failure_unhandled event.")
    finally:
        if journal is not None:
            try:
                journal.write_event(
                    "analysis_shutdown",
                    payload={"exit_code": exit_code},
                    metadata={"session_id": session_id},
                )
            except JournalError:
                logger.error("Failed to write analysis_shutdown event.")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
