"""Environment-driven configuration for the Addresses API.

Every setting the service reads lives on ``AppSettings`` so that anyone
inspecting the project can answer "what can I tune?" from a single file.
Values come from the process environment first, then from ``.env`` files.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Environment-driven application configuration."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Addresses API"

    BASE_DIR: Path = Field(default_factory=lambda: Path(__file__).resolve().parents[2])
    DATA_DIR: Path = Field(default_factory=lambda: Path(__file__).resolve().parents[2] / "data")

    # Empty means "SQLite file under DATA_DIR", filled in by ``get_settings``.
    DB_URL: str = Field(default="", validation_alias=AliasChoices("DB_URL", "DATABASE_URL"))

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    METRICS_ENABLED: bool = True

    # Geocoding used to fill in missing coordinates. Without an API key the
    # static defaults below are stored instead.
    GOOGLE_MAPS_API_KEY: str = ""
    GOOGLE_GEOCODING_URL: str = "https://maps.googleapis.com/maps/api/geocode/json"
    GEOCODING_TIMEOUT_SECONDS: float = 6.0
    DEFAULT_LATITUDE: float = Field(default=0.0, ge=-90, le=90)
    DEFAULT_LONGITUDE: float = Field(default=0.0, ge=-180, le=180)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    settings = AppSettings()
    if not settings.DB_URL:
        settings.DATA_DIR.mkdir(parents=True, exist_ok=True)
        settings.DB_URL = f"sqlite:///{settings.DATA_DIR / 'addresses.db'}"
    return settings


# Importing ``settings`` anywhere gives the same, already-resolved object.
settings = get_settings()
