"""Runtime configuration pulled from environment variables via pydantic."""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the weather report tool."""
    model_config = SettingsConfigDict(env_prefix="WEATHER_", extra="ignore")

    access_key: str | None = None
    base_url: str = "https://api.weatherstack.com"
    units: str | None = None  # options: m, f, s
    request_timeout_seconds: float = 10.0
    max_body_bytes: int = 1_048_576
    chunk_size: int = 4096
    log_level: str = "INFO"

    @field_validator("base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs to avoid double slashes."""
        return str(v).rstrip("/")

    @field_validator("units", mode="after")
    @classmethod
    def check_units(cls, v: str | None) -> str | None:
        """Accept only the unit codes the provider understands."""
        if v is None or v == "":
            return None
        if v not in ("m", "f", "s"):
            raise ValueError(f"units must be one of m, f, s (got {v!r})")
        return v

    @field_validator("max_body_bytes", "chunk_size", mode="after")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive number of bytes")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Normalize to an upper-case stdlib level name."""
        level = str(v).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {v!r}")
        return level


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4, exclude={'access_key'})}")
