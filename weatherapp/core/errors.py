from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weatherapp.schemas.forms import FieldViolation


class WeatherAppError(Exception):
    """Base class for errors raised by weatherapp."""


class RoutingError(WeatherAppError):
    """Path parameters of a weather URL could not be parsed."""

    def __init__(self, violations: list["FieldViolation"]):
        self.violations = violations
        fields = ", ".join(v.field for v in violations) or "path"
        super().__init__(f"Malformed path parameters: {fields}")


class WeatherUnavailableError(WeatherAppError):
    """The weather provider could not deliver a usable answer."""


class TransportError(WeatherUnavailableError):
    def __init__(self, message: str, *, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class DecodeError(WeatherUnavailableError):
    def __init__(self, message: str, *, body_size: int = 0, snippet: str = ""):
        self.body_size = body_size
        self.snippet = snippet
        super().__init__(message)
