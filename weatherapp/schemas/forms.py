from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field

from weatherapp.schemas.weather import MAX_TIMESTAMP, MIN_TIMESTAMP, Coordinates, format_number


LATITUDE_PATTERN = re.compile(r"^[-+]?([1-8]?\d(\.\d+)?|90(\.0+)?)$")
LONGITUDE_PATTERN = re.compile(r"^[-+]?(180(\.0+)?|((1[0-7]\d)|([1-9]?\d))(\.\d+)?)$")
TIMESTAMP_PATTERN = re.compile(r"^[-+]?\d{1,11}$")


class FieldViolation(BaseModel):
    field: str
    message: str


class CoordinateFormResult(BaseModel):
    coordinates: Coordinates | None = None
    violations: list[FieldViolation] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.coordinates is not None and not self.violations

    def errors_for(self, field: str) -> list[str]:
        return [v.message for v in self.violations if v.field == field]


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value).strip()


def validate_coordinate_form(latitude: Any, longitude: Any, time: Any) -> CoordinateFormResult:
    """Validate raw latitude/longitude/time values.

    Values may be numbers or the strings a form or URL delivers. Either every
    field is valid and ``coordinates`` is set, or ``violations`` lists what is
    wrong per field and ``coordinates`` is None.
    """
    violations: list[FieldViolation] = []

    lat_text = _as_text(latitude)
    if not lat_text:
        violations.append(FieldViolation(field="latitude", message="Latitude is required."))
    elif not LATITUDE_PATTERN.match(lat_text):
        violations.append(
            FieldViolation(field="latitude", message="Latitude must be a decimal number between -90 and 90.")
        )

    lon_text = _as_text(longitude)
    if not lon_text:
        violations.append(FieldViolation(field="longitude", message="Longitude is required."))
    elif not LONGITUDE_PATTERN.match(lon_text):
        violations.append(
            FieldViolation(field="longitude", message="Longitude must be a decimal number between -180 and 180.")
        )

    time_text = _as_text(time)
    if not time_text:
        violations.append(FieldViolation(field="time", message="Time is required."))
    elif not TIMESTAMP_PATTERN.match(time_text) or not MIN_TIMESTAMP <= int(time_text) <= MAX_TIMESTAMP:
        violations.append(
            FieldViolation(
                field="time",
                message=f"Time must be a unix timestamp between {MIN_TIMESTAMP} and {MAX_TIMESTAMP}.",
            )
        )

    if violations:
        return CoordinateFormResult(violations=violations)

    return CoordinateFormResult(
        coordinates=Coordinates(
            latitude=float(lat_text),
            longitude=float(lon_text),
            timestamp=int(time_text),
        )
    )
