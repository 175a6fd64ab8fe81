from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates

from weatherapp.api.router import web_router
from weatherapp.core.config import Settings, get_settings
from weatherapp.core.errors import RoutingError, WeatherUnavailableError
from weatherapp.core.log import configure_logging
from weatherapp.services.weather.base import WeatherSource
from weatherapp.services.weather.darksky import DarkSkyClient
from weatherapp.services.weather.service import WeatherService


TEMPLATES_DIR = Path(__file__).parent / "templates"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    source: WeatherSource = app.state.weather_service.source
    logger.info("Starting weatherapp with %s source at %s", source.name, settings.provider_base_url)
    try:
        yield
    finally:
        logger.info("Shutting down weatherapp")


async def routing_error_handler(request: Request, exc: RoutingError):
    logger.info("Rejected weather path %s: %s", request.url.path, exc)
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "title": "Bad request",
            "message": "The coordinates in this address are not valid.",
            "violations": exc.violations,
        },
        status_code=400,
    )


async def weather_unavailable_handler(request: Request, exc: WeatherUnavailableError):
    logger.info("Weather unavailable for %s: %s", request.url.path, exc)
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "title": "Weather unavailable",
            "message": "Weather data is unavailable right now. Please try again later.",
            "violations": [],
        },
        status_code=502,
    )


def create_app(
    settings: Settings | None = None,
    weather_source: WeatherSource | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    source = weather_source or DarkSkyClient(settings)

    app = FastAPI(
        title="weatherapp",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.weather_service = WeatherService(source)
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    app.add_exception_handler(RoutingError, routing_error_handler)
    app.add_exception_handler(WeatherUnavailableError, weather_unavailable_handler)

    app.include_router(web_router)
    return app


app = create_app()
