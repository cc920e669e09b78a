"""Pydantic schemas mirroring the weatherstack "current" payload.

Field names are the wire keys, so a decoded response dumps back to the same
JSON shape. Every field has a zero-value default: the provider omits keys
freely and the report treats "absent" and "empty" the same way. No
interpretation logic lives here beyond picking the headline condition.

Scalar fields are strict: "12" is not an int and true is not a number.
Integers are still accepted where a float is expected.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    model_validator,
)

from weather_report.errors import DataError, DecodeError, ProviderError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="decoder")


class _WireModel(BaseModel):
    """Immutable base that ignores unknown keys and treats null as absent."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Request(_WireModel):
    """Query parameters as echoed back by the provider."""
    type: StrictStr = ""
    query: StrictStr = ""
    language: StrictStr = ""
    unit: StrictStr = ""


class Location(_WireModel):
    """Resolved place for the query. Coordinates stay text."""
    name: StrictStr = ""
    country: StrictStr = ""
    region: StrictStr = ""
    lat: StrictStr = ""
    lon: StrictStr = ""
    timezone_id: StrictStr = ""
    localtime: StrictStr = ""
    localtime_epoch: StrictInt = 0
    utc_offset: StrictStr = ""


class Astro(_WireModel):
    """Sun and moon times for the location's current day."""
    sunrise: StrictStr = ""
    sunset: StrictStr = ""
    moonrise: StrictStr = ""
    moonset: StrictStr = ""
    moon_phase: StrictStr = ""
    moon_illumination: StrictInt = 0


class Current(_WireModel):
    """Weather snapshot at `observation_time`."""
    observation_time: StrictStr = ""
    temperature: StrictInt = 0
    weather_code: StrictInt = 0
    weather_icons: List[StrictStr] = Field(default_factory=list)
    weather_descriptions: List[StrictStr] = Field(default_factory=list)
    astro: Astro = Field(default_factory=Astro)
    wind_speed: StrictInt = 0
    wind_degree: StrictInt = 0
    wind_dir: StrictStr = ""
    pressure: StrictInt = 0
    precip: StrictFloat = 0.0
    humidity: StrictInt = 0
    cloudcover: StrictInt = 0
    feelslike: StrictInt = 0
    uv_index: StrictInt = 0
    visibility: StrictInt = 0
    is_day: StrictStr = ""

    def primary_description(self) -> str:
        """Return the first condition description or raise DataError."""
        if not self.weather_descriptions:
            raise DataError("Response has no weather_descriptions entry")
        return self.weather_descriptions[0]

    def primary_icon(self) -> str:
        """Return the first condition icon URL or raise DataError."""
        if not self.weather_icons:
            raise DataError("Response has no weather_icons entry")
        return self.weather_icons[0]


class WeatherResponse(_WireModel):
    """Root of the decoded payload."""
    request: Request = Field(default_factory=Request)
    location: Location = Field(default_factory=Location)
    current: Current = Field(default_factory=Current)

    def to_payload(self) -> Dict[str, Any]:
        """Return the wire-shaped dict for this response."""
        return self.model_dump(mode="json")


def _raise_for_provider_error(payload: Dict[str, Any]) -> None:
    """Turn the provider's `{"success": false, "error": {...}}` envelope into ProviderError."""
    if payload.get("success") is not False:
        return
    error = payload.get("error")
    if not isinstance(error, dict):
        error = {}
    code = error.get("code")
    raise ProviderError(
        code=code if isinstance(code, int) else 0,
        type=str(error.get("type") or "unknown"),
        info=str(error.get("info") or "no details given"),
    )


def decode_weather_response(raw: bytes | str) -> WeatherResponse:
    """Parse a raw response body into a WeatherResponse.

    Raises DecodeError for malformed JSON, a non-object top level, or values
    of the wrong type; ProviderError when the body is the provider's error
    envelope.
    """
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        # UnicodeDecodeError is a ValueError too
        raise DecodeError(f"Response is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise DecodeError("Response JSON is nested too deeply") from exc

    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object, got {type(payload).__name__}")

    _raise_for_provider_error(payload)

    try:
        weather = WeatherResponse.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"Response does not match the weather schema: {exc}") from exc

    logger.debug("Decoded weather for %r (%s)", weather.location.name, weather.request.query)
    return weather
