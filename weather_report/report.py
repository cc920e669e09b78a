"""Plain-text weather report built from a decoded WeatherResponse."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from weather_report.models import WeatherResponse

REPORT_TITLE = "=== Weather report ==="
ADVISORY_TITLE = "=== Conclusions and recommendations ==="

SECTION_TITLES = (
    "1. General information:",
    "2. Current weather:",
    "3. Wind:",
    "4. Atmospheric conditions:",
    "5. Astronomical data:",
    "6. Additional observations:",
)

# Canned commentary, independent of the reported values.
ADVISORY_LINES = (
    "- The weather is cool, dress warmly.",
    "- The air is clean, a good time to plan a walk.",
    "- The day lasts about 12 hours, enjoy the daylight.",
)

# Labels per provider unit system, keyed by the echoed `request.unit`.
UNIT_LABELS = {
    "m": {"temperature": "°C", "speed": "km/h", "distance": "km", "precip": "mm", "pressure": "mbar"},
    "s": {"temperature": " K", "speed": "km/h", "distance": "km", "precip": "mm", "pressure": "mbar"},
    "f": {"temperature": "°F", "speed": "mph", "distance": "miles", "precip": "inches", "pressure": "mbar"},
}
PRECIP_FORMAT = {"mm": "{:.1f}", "inches": "{:.2f}"}
DEFAULT_UNIT_SYSTEM = "m"


def unit_labels(unit: str) -> dict:
    """Return the labels for a provider unit code; unknown codes mean metric."""
    return UNIT_LABELS.get(unit, UNIT_LABELS[DEFAULT_UNIT_SYSTEM])


def _section(title: str, items: List[str]) -> List[str]:
    return [title, *(f"- {item}" for item in items), ""]


def build_report_lines(weather: WeatherResponse) -> List[str]:
    """Return the report as a list of lines, without trailing newlines.

    Raises DataError if the response has no condition description or icon,
    before any line is produced.
    """
    request = weather.request
    location = weather.location
    current = weather.current
    astro = current.astro

    description = current.primary_description()
    icon = current.primary_icon()
    units = unit_labels(request.unit)
    precip = PRECIP_FORMAT[units["precip"]].format(current.precip)

    lines = [REPORT_TITLE, ""]
    lines += _section(SECTION_TITLES[0], [
        f"Request type: {request.type}",
        f"Query: {request.query}",
        f"Language: {request.language}",
        f"Units: {request.unit}",
        f"Location: {location.name}, {location.country}",
        f"Region: {location.region}",
        f"Coordinates: latitude {location.lat}, longitude {location.lon}",
        f"Time zone: {location.timezone_id} (UTC{location.utc_offset})",
        f"Local time: {location.localtime}",
    ])
    lines += _section(SECTION_TITLES[1], [
        f"Observation time: {current.observation_time}",
        f"Temperature: {current.temperature}{units['temperature']}",
        f"Feels like: {current.feelslike}{units['temperature']}",
        f"Conditions: {description}",
        f"Weather code: {current.weather_code}",
        f"Weather icon: {icon}",
    ])
    lines += _section(SECTION_TITLES[2], [
        f"Wind speed: {current.wind_speed} {units['speed']}",
        f"Wind direction: {current.wind_dir} ({current.wind_degree}°)",
    ])
    lines += _section(SECTION_TITLES[3], [
        f"Pressure: {current.pressure} {units['pressure']}",
        f"Humidity: {current.humidity}%",
        f"Cloud cover: {current.cloudcover}%",
        f"Visibility: {current.visibility} {units['distance']}",
        f"Precipitation: {precip} {units['precip']}",
    ])
    lines += _section(SECTION_TITLES[4], [
        f"Sunrise: {astro.sunrise}",
        f"Sunset: {astro.sunset}",
        f"Moonrise: {astro.moonrise}",
        f"Moonset: {astro.moonset}",
        f"Moon phase: {astro.moon_phase}",
        f"Moon illumination: {astro.moon_illumination}%",
    ])
    lines += _section(SECTION_TITLES[5], [
        f"UV index: {current.uv_index}",
        f"Day or night: {current.is_day}",
    ])
    lines.append(ADVISORY_TITLE)
    lines.extend(ADVISORY_LINES)
    return lines


def print_weather_report(weather: WeatherResponse, stream: Optional[TextIO] = None) -> None:
    """Write the report to `stream` (stdout by default)."""
    lines = build_report_lines(weather)
    out = stream if stream is not None else sys.stdout
    out.write("\n".join(lines) + "\n")
    out.flush()
