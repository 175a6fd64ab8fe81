from __future__ import annotations

from abc import ABC, abstractmethod

from weatherapp.schemas.weather import Coordinates, WeatherResult


class WeatherSource(ABC):
    """Anything that can answer a current-conditions query for a point in time."""

    name: str = "weather"

    @abstractmethod
    async def fetch_current_conditions(self, coords: Coordinates) -> WeatherResult:
        """Fetch current conditions, raising TransportError or DecodeError on failure."""
