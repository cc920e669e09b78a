"""Run the fetch -> decode -> report pipeline for one location."""
from __future__ import annotations

import time
from typing import Callable, Optional, TextIO

from weather_report.config import Settings, settings as default_settings
from weather_report.data_sources import fetch_current
from weather_report.models import WeatherResponse, decode_weather_response
from weather_report.report import print_weather_report
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="service")

FetchFn = Callable[..., bytes]


def generate_report(access_key: str,
                    country: str,
                    region: str,
                    *,
                    settings: Optional[Settings] = None,
                    stream: Optional[TextIO] = None,
                    fetch: Optional[FetchFn] = None,
                    units: Optional[str] = None,
                   ) -> WeatherResponse:
    """Fetch, decode and print the current-conditions report.

    Any WeatherReportError from a stage propagates unchanged and nothing is
    printed for that run.
    """
    settings = settings or default_settings
    fetch = fetch or fetch_current

    started = time.monotonic()
    logger.info("Building weather report for %s, %s", country, region)

    raw = fetch(access_key, country, region, settings=settings, units=units)
    weather = decode_weather_response(raw)
    logger.info(
        "Decoded conditions for %s, %s (observed %s)",
        weather.location.name or region,
        weather.location.country or country,
        weather.current.observation_time or "unknown",
    )

    print_weather_report(weather, stream=stream)
    logger.debug("Report finished in %.2fs", time.monotonic() - started)
    return weather
