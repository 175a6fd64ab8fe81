from fastapi import APIRouter

from weatherapp.api.endpoints.home import router as home_router
from weatherapp.api.endpoints.weather import router as weather_router


web_router = APIRouter()
web_router.include_router(home_router, tags=["home"])
web_router.include_router(weather_router, tags=["weather"])
