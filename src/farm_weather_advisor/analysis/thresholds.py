"""Immutable threshold tables used by the agronomic weather classifiers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class _BandGroup(BaseModel):
    """Ordered cutoffs for one weather dimension."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def validate_increasing(self) -> _BandGroup:
        """Reject cutoffs that are not strictly increasing in declaration order."""
        cutoffs = [(name, getattr(self, name)) for name in type(self).model_fields]
        for (low_name, low), (high_name, high) in zip(cutoffs, cutoffs[1:]):
            if low >= high:
                raise ValueError(
                    f"{type(self).__name__}.{low_name} ({low}) must be below "
                    f"{high_name} ({high})."
                )
        return self


class TemperatureBands(_BandGroup):
    """Air temperature cutoffs in degrees Celsius."""

    frost: float = 2.0
    cold: float = 10.0
    optimal: float = 25.0
    hot: float = 30.0
    extreme: float = 35.0


class RainfallBands(_BandGroup):
    """Window rainfall totals in millimetres."""

    dry: float = 5.0
    moderate: float = 15.0
    heavy: float = 25.0


class HumidityBands(_BandGroup):
    """Relative humidity cutoffs in percent."""

    low: float = 40.0
    optimal: float = 60.0
    high: float = 75.0


class WindBands(_BandGroup):
    """Wind speed cutoffs in km/h."""

    safe: float = 15.0
    moderate: float = 25.0
    strong: float = 35.0


class ThresholdTables(BaseModel):
    """All band groups consulted by the classifiers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    temperature: TemperatureBands = TemperatureBands()
    rainfall: RainfallBands = RainfallBands()
    humidity: HumidityBands = HumidityBands()
    wind: WindBands = WindBands()

    def with_overrides(self, overrides: dict[str, dict[str, float]]) -> ThresholdTables:
        """Return a new table with selected cutoffs replaced.

        ``overrides`` is keyed by group then band, e.g.
        ``{"temperature": {"extreme": 38}}``. Unknown groups or bands raise
        ``ValueError``.
        """
        payload: dict[str, Any] = self.model_dump()
        for group, bands in overrides.items():
            if group not in payload:
                raise ValueError(f"Unknown threshold group '{group}'.")
            for band, value in bands.items():
                if band not in payload[group]:
                    raise ValueError(f"Unknown threshold band '{group}.{band}'.")
                payload[group][band] = float(value)
        return ThresholdTables.model_validate(payload)


DEFAULT_THRESHOLDS = ThresholdTables()
