"""
Application settings.

Values come from environment variables prefixed with ``WEATHER_WIDGET_``
or from a local ``.env`` file, e.g.::

    WEATHER_WIDGET_API_KEY=abc123
    WEATHER_WIDGET_DEFAULT_UNITS=imperial
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_widget.schemas import UnitMode

OPENWEATHER_API_URL = "https://api.openweathermap.org/data/2.5/weather"


class Settings(BaseSettings):
    """Runtime configuration for the widget."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_WIDGET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "weather-widget"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    api_key: str = Field(default="", description="OpenWeatherMap API key")
    api_url: str = OPENWEATHER_API_URL
    request_timeout: float = Field(default=10.0, gt=0)
    default_units: UnitMode = UnitMode.METRIC

    prefs_path: Path = Path("~/.config/weather-widget/prefs.json").expanduser()
    site_dir: Path = Path("site")
    api_port: int = 8000

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
