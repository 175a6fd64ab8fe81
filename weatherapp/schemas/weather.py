from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


MIN_TIMESTAMP = 1_000_000_000
MAX_TIMESTAMP = 9_999_999_999


def format_number(value: float | int) -> str:
    """Render a number the way it appears in URLs.

    Fixed-point without exponent or trailing ``.0``: ``45.0 -> "45"``,
    ``1e-05 -> "0.00001"``. Digits come from the shortest round-trip repr, so
    ``float(format_number(x)) == x``.
    """
    if isinstance(value, int):
        return str(value)
    text = format(Decimal(repr(float(value))), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    timestamp: int = Field(..., ge=MIN_TIMESTAMP, le=MAX_TIMESTAMP, description="Unix seconds.")

    @property
    def path(self) -> str:
        return f"/{format_number(self.latitude)}/{format_number(self.longitude)}/{self.timestamp}"


class CurrentConditions(BaseModel):
    # The provider sends temperature and humidity as numbers.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    time: int | None = Field(None, description="Unix seconds the observation refers to.")
    summary: str | None = None
    temperature: str | None = None
    humidity: str | None = None


class WeatherResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    latitude: float
    longitude: float
    timezone: str | None = None
    current_conditions: CurrentConditions | None = Field(None, alias="currently")
