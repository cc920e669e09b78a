"""Exception hierarchy for the fetch -> decode -> report pipeline.

Every failure aborts the whole report. Callers that only care whether a run
worked can catch :class:`WeatherReportError`; the subclasses say which stage
failed and why.
"""

from __future__ import annotations


class WeatherReportError(Exception):
    """Base class for all weather report failures."""


class FetchError(WeatherReportError):
    """Raised when the weather API could not be reached or read."""


class FetchTimeoutError(FetchError):
    """Raised when the weather API did not answer within the configured timeout."""


class HTTPStatusError(FetchError):
    """Raised when the weather API answers with a non-success status."""

    def __init__(self, status_code: int, body_excerpt: str = "") -> None:
        self.status_code = status_code
        self.body_excerpt = body_excerpt
        message = f"Weather API error {status_code}"
        if body_excerpt:
            message = f"{message}: {body_excerpt}"
        super().__init__(message)


class EmptyBodyError(FetchError):
    """Raised when the weather API answers with zero bytes."""


class BodyTooLargeError(FetchError):
    """Raised when the response body exceeds the configured size limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Response body exceeded {limit} bytes")


class ReadError(FetchError):
    """Raised when the connection fails part-way through the response body."""


class DecodeError(WeatherReportError):
    """Raised when the response body is not a weather payload."""


class DataError(DecodeError):
    """Raised when a decoded payload lacks data the report needs."""


class ProviderError(WeatherReportError):
    """Raised when the provider returns its error envelope instead of data."""

    def __init__(self, code: int, type: str, info: str) -> None:
        self.code = code
        self.type = type
        self.info = info
        super().__init__(f"Weather provider error {code} ({type}): {info}")
