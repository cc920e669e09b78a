"""Upstream weather providers."""

from .weatherstack_client import build_current_url, fetch_current

__all__ = [
    "build_current_url",
    "fetch_current",
]
