"""Shared typed values used across weather, analysis and impact packages."""

from __future__ import annotations

from typing import Literal

RiskLevel = Literal["low", "medium", "high", "critical"]

RISK_LEVELS: tuple[RiskLevel, ...] = ("low", "medium", "high", "critical")


def risk_severity(level: RiskLevel) -> int:
    """Return the ordinal severity of a risk level (``low`` is 0)."""
    return RISK_LEVELS.index(level)
