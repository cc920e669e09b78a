"""Helpers for fetching current conditions from the weatherstack API."""
from __future__ import annotations

from typing import Optional
from urllib.parse import quote

import requests

from weather_report.config import Settings, settings as default_settings
from weather_report.errors import (
    BodyTooLargeError,
    EmptyBodyError,
    FetchError,
    FetchTimeoutError,
    HTTPStatusError,
    ReadError,
)
from utils.logging_utils import get_tagged_logger, mask_url

logger = get_tagged_logger(__name__, tag="weatherstack_client")

session = requests.Session()

CURRENT_ENDPOINT = "current"

# Bytes of an error body read into HTTPStatusError; the rest is never read.
ERROR_EXCERPT_CHARS = 200


def _encode(value: str) -> str:
    """Percent-encode a single query value, reserved characters included."""
    return quote(str(value), safe="")


def build_current_url(access_key: str,
                      country: str,
                      region: str,
                      *,
                      base_url: str,
                      units: Optional[str] = None,
                     ) -> str:
    """Compose the current-conditions URL for `country,region`."""
    url = (
        f"{base_url.rstrip('/')}/{CURRENT_ENDPOINT}"
        f"?access_key={_encode(access_key)}"
        f"&query={_encode(country)},{_encode(region)}"
    )
    if units:
        url += f"&units={_encode(units)}"
    return url


def _read_body(resp: requests.Response, *, max_bytes: int, chunk_size: int) -> bytes:
    """Drain the response body to end-of-stream, refusing anything over `max_bytes`."""
    chunks = []
    total = 0
    try:
        for chunk in resp.iter_content(chunk_size=chunk_size):
            if not chunk:
                continue
            total += len(chunk)
            if total > max_bytes:
                raise BodyTooLargeError(max_bytes)
            chunks.append(chunk)
    except requests.exceptions.RequestException as exc:
        raise ReadError(f"Connection failed after {total} bytes: {exc}") from exc
    return b"".join(chunks)


def _error_excerpt(resp: requests.Response) -> str:
    """Read at most ERROR_EXCERPT_CHARS bytes of an error body."""
    try:
        head = next(resp.iter_content(chunk_size=ERROR_EXCERPT_CHARS), b"")
    except requests.exceptions.RequestException:
        return ""
    return head[:ERROR_EXCERPT_CHARS].decode("utf-8", errors="replace")


def fetch_current(access_key: str,
                  country: str,
                  region: str,
                  *,
                  settings: Optional[Settings] = None,
                  units: Optional[str] = None,
                 ) -> bytes:
    """Fetch the raw current-conditions body for `country, region`.

    The whole body is read before returning; the response is closed on every
    path. Any failure raises a FetchError subclass.
    """
    settings = settings or default_settings
    if not access_key:
        raise FetchError("No weatherstack access key given (set WEATHER_ACCESS_KEY).")

    url = build_current_url(
        access_key,
        country,
        region,
        base_url=settings.base_url,
        units=units or settings.units,
    )
    logger.info("Requesting current conditions: %s", mask_url(url))

    try:
        resp = session.get(url, timeout=settings.request_timeout_seconds, stream=True)
    except requests.exceptions.Timeout as exc:
        raise FetchTimeoutError(
            f"Weather API did not answer within {settings.request_timeout_seconds}s"
        ) from exc
    except requests.exceptions.RequestException as exc:
        raise FetchError(f"Weather API request failed: {exc}") from exc

    with resp:
        if not 200 <= resp.status_code < 300:
            raise HTTPStatusError(resp.status_code, _error_excerpt(resp))

        body = _read_body(resp, max_bytes=settings.max_body_bytes, chunk_size=settings.chunk_size)

    if not body:
        raise EmptyBodyError("Weather API returned an empty body")

    logger.info("Weather API answered %s with %d bytes", resp.status_code, len(body))
    return body
