from __future__ import annotations

from weatherapp.schemas.weather import Coordinates, WeatherResult
from weatherapp.services.weather.base import WeatherSource


class WeatherService:
    """Seam between the presentation layer and whichever WeatherSource is configured."""

    def __init__(self, source: WeatherSource):
        self._source = source

    @property
    def source(self) -> WeatherSource:
        return self._source

    async def get_weather(self, coords: Coordinates) -> WeatherResult:
        return await self._source.fetch_current_conditions(coords)
