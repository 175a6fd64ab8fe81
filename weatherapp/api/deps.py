from __future__ import annotations

from fastapi import Request
from fastapi.templating import Jinja2Templates

from weatherapp.services.weather.service import WeatherService


def get_weather_service(request: Request) -> WeatherService:
    service = getattr(request.app.state, "weather_service", None)
    if service is None:
        raise RuntimeError("Weather service not initialized. Was the app built with create_app()?")
    return service


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
