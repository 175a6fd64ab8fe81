import os

import pytest

# weatherapp.main builds the app at import time and refuses to start without a key.
os.environ.setdefault("WEATHERAPP_PROVIDER_API_KEY", "test-key")

from weatherapp.core.config import Settings  # noqa: E402
from weatherapp.services.weather.base import WeatherSource  # noqa: E402


class StubWeatherSource(WeatherSource):
    name = "stub"

    def __init__(self, result=None, exc=None):
        self.result = result
        self.exc = exc
        self.calls = []

    async def fetch_current_conditions(self, coords):
        self.calls.append(coords)
        if self.exc is not None:
            raise self.exc
        return self.result


@pytest.fixture
def settings():
    return Settings(provider_api_key="test-key", _env_file=None)


@pytest.fixture
def stub_source_cls():
    return StubWeatherSource
