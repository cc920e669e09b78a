"""Current-conditions weather report backed by the weatherstack API."""

from .errors import (
    BodyTooLargeError,
    DataError,
    DecodeError,
    EmptyBodyError,
    FetchError,
    FetchTimeoutError,
    HTTPStatusError,
    ProviderError,
    ReadError,
    WeatherReportError,
)
from .models import WeatherResponse, decode_weather_response
from .report import build_report_lines, print_weather_report
from .service import generate_report

__all__ = [
    "BodyTooLargeError",
    "DataError",
    "DecodeError",
    "EmptyBodyError",
    "FetchError",
    "FetchTimeoutError",
    "HTTPStatusError",
    "ProviderError",
    "ReadError",
    "WeatherReportError",
    "WeatherResponse",
    "build_report_lines",
    "decode_weather_response",
    "generate_report",
    "print_weather_report",
]
