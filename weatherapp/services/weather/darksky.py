from __future__ import annotations

import asyncio
import logging

import httpx
from pydantic import ValidationError

from weatherapp.core.config import Settings
from weatherapp.core.errors import DecodeError, TransportError
from weatherapp.core.http import create_http_client
from weatherapp.schemas.weather import Coordinates, WeatherResult, format_number
from weatherapp.services.weather.base import WeatherSource


logger = logging.getLogger(__name__)


EXCLUDED_BLOCKS = ["daily", "hourly", "minutely", "alerts", "flags"]

SNIPPET_LENGTH = 200


class DarkSkyClient(WeatherSource):
    """Client for the Dark Sky style ``/forecast/<key>/<lat>,<lon>,<time>`` endpoint."""

    name = "darksky"

    def __init__(self, settings: Settings):
        self._settings = settings

    def build_url(self, coords: Coordinates) -> str:
        settings = self._settings
        key = settings.provider_api_key.get_secret_value()
        location = ",".join(
            [format_number(coords.latitude), format_number(coords.longitude), str(coords.timestamp)]
        )
        url = f"{settings.provider_base_url}/forecast/{key}/{location}?exclude={','.join(EXCLUDED_BLOCKS)}"
        if settings.provider_units:
            url += f"&units={settings.provider_units}"
        return url

    async def fetch_current_conditions(self, coords: Coordinates) -> WeatherResult:
        url = self.build_url(coords)
        where = f"{format_number(coords.latitude)},{format_number(coords.longitude)}@{coords.timestamp}"

        deadline = self._settings.http_timeout_seconds

        async with create_http_client(self._settings) as client:
            try:
                # httpx timeouts are per phase; this bounds the whole exchange.
                resp = await asyncio.wait_for(client.get(url), timeout=deadline)
            except asyncio.TimeoutError as exc:
                logger.warning("Weather provider exceeded %ss deadline for %s", deadline, where)
                raise TransportError(f"Weather upstream timeout after {deadline}s") from exc
            except httpx.TimeoutException as exc:
                logger.warning("Weather provider timed out for %s: %s", where, type(exc).__name__)
                raise TransportError(f"Weather upstream timeout: {type(exc).__name__}") from exc
            except httpx.RequestError as exc:
                logger.warning("Weather provider unreachable for %s: %s", where, type(exc).__name__)
                raise TransportError(f"Weather upstream error: {type(exc).__name__}") from exc

        if not resp.is_success:
            logger.warning("Weather provider returned status %s for %s", resp.status_code, where)
            raise TransportError(
                f"Weather upstream status {resp.status_code}", status_code=resp.status_code
            )

        return self._decode(resp, where)

    def _decode(self, resp: httpx.Response, where: str) -> WeatherResult:
        body = resp.content
        snippet = resp.text[:SNIPPET_LENGTH]
        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning(
                "Weather provider sent invalid JSON for %s (%d bytes): %r", where, len(body), snippet
            )
            raise DecodeError("Weather upstream sent invalid JSON", body_size=len(body), snippet=snippet) from exc

        try:
            return WeatherResult.model_validate(data)
        except ValidationError as exc:
            logger.warning(
                "Weather provider sent unexpected payload for %s (%d bytes): %r", where, len(body), snippet
            )
            raise DecodeError(
                f"Weather upstream payload invalid: {exc.error_count()} error(s)",
                body_size=len(body),
                snippet=snippet,
            ) from exc
