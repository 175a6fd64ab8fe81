from __future__ import annotations

from weatherapp.schemas.forms import CoordinateFormResult, FieldViolation, validate_coordinate_form
from weatherapp.schemas.weather import Coordinates, CurrentConditions, WeatherResult

__all__ = [
    "Coordinates",
    "CurrentConditions",
    "WeatherResult",
    "FieldViolation",
    "CoordinateFormResult",
    "validate_coordinate_form",
]
