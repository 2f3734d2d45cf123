"""
Domain models for the weather widget.

Pydantic models for normalized weather data and the small enums that
drive display state. The OpenWeatherMap client normalizes its responses
to ``WeatherRecord``; everything downstream works off that.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

# =============================================================================
# Modes
# =============================================================================


class UnitMode(StrEnum):
    """Unit system used for fetching and displaying values."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    def flipped(self) -> UnitMode:
        return UnitMode.IMPERIAL if self is UnitMode.METRIC else UnitMode.METRIC

    @property
    def temperature_suffix(self) -> str:
        return "°C" if self is UnitMode.METRIC else "°F"


class ThemePreference(StrEnum):
    """Page color scheme."""

    LIGHT = "light"
    DARK = "dark"

    def flipped(self) -> ThemePreference:
        return ThemePreference.DARK if self is ThemePreference.LIGHT else ThemePreference.LIGHT


class RequestState(StrEnum):
    """Which presentation surface is currently visible."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    DISPLAYING = "displaying"


# =============================================================================
# Weather
# =============================================================================


class WeatherRecord(BaseModel):
    """Current conditions for one location, as fetched.

    Temperatures are kept exactly as the provider returned them, in
    ``units``. Wind speed is always stored in m/s regardless of ``units``.
    """

    model_config = {"frozen": True}

    location_label: str
    country_code: str = ""
    temperature_value: float
    feels_like_value: float
    condition_category: str = ""
    condition_description: str = ""
    humidity_percent: int = Field(..., ge=0, le=100)
    wind_speed_mps: float = Field(..., ge=0)
    pressure_hpa: float
    visibility_meters: float = Field(default=0, ge=0)
    units: UnitMode = UnitMode.METRIC

    @property
    def display_location(self) -> str:
        """``"London, GB"``, or just the name when the country is unknown."""
        if self.country_code:
            return f"{self.location_label}, {self.country_code}"
        return self.location_label
