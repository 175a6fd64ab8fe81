from __future__ import annotations

from weatherapp.services.weather.base import WeatherSource
from weatherapp.services.weather.darksky import DarkSkyClient
from weatherapp.services.weather.service import WeatherService

__all__ = [
    "WeatherSource",
    "DarkSkyClient",
    "WeatherService",
]
