"""Provider-agnostic weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import WeatherFetchResult


class WeatherProvider(ABC):
    """Base contract for weather providers feeding the agronomic analyzer."""

    @abstractmethod
    def fetch_snapshot(
        self,
        *,
        lat: float | None = None,
        lon: float | None = None,
        location: str | None = None,
        days: int = 7,
    ) -> WeatherFetchResult:
        """Fetch current conditions plus a daily forecast and normalize them."""

    @abstractmethod
    def close(self) -> None:
        """Release provider resources."""
