from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from weatherapp.api.deps import get_templates, get_weather_service
from weatherapp.core.errors import RoutingError
from weatherapp.schemas.forms import validate_coordinate_form
from weatherapp.services.weather.service import WeatherService


router = APIRouter()


@router.get("/{lat}/{lon}/{time}", response_class=HTMLResponse)
async def weather_at(
    request: Request,
    lat: str,
    lon: str,
    time: str,
    service: WeatherService = Depends(get_weather_service),
    templates: Jinja2Templates = Depends(get_templates),
):
    parsed = validate_coordinate_form(lat, lon, time)
    if parsed.coordinates is None:
        raise RoutingError(parsed.violations)

    result = await service.get_weather(parsed.coordinates)
    return templates.TemplateResponse(
        request,
        "weather.html",
        {"coordinates": parsed.coordinates, "weather": result},
    )
