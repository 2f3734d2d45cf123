"""Display state: the last fetched record plus the active unit mode.

The record is kept exactly as fetched. Every string the view shows is
projected from it on demand, so switching units back and forth never
accumulates rounding error.
"""

from __future__ import annotations

from dataclasses import dataclass

from weather_widget.icons import map_category
from weather_widget.schemas import UnitMode, WeatherRecord
from weather_widget.units import convert_temperature, meters_to_km, mps_to_kmh, mps_to_mph, round_half_up

UNIT_LABELS = {
    UnitMode.METRIC: "°C / °F",
    UnitMode.IMPERIAL: "°F / °C",
}


@dataclass(frozen=True)
class DisplayView:
    """Formatted strings for every display slot."""

    location: str
    temperature: str
    icon: str
    description: str
    feels_like: str
    humidity: str
    wind: str
    pressure: str
    visibility: str


def format_wind(mps: float, mode: UnitMode) -> str:
    if mode is UnitMode.IMPERIAL:
        return f"{round_half_up(mps_to_mph(mps))} mph"
    return f"{round_half_up(mps_to_kmh(mps))} km/h"


def format_visibility(meters: float) -> str:
    return f"{meters_to_km(meters):.1f} km"


def format_pressure(hpa: float) -> str:
    return f"{hpa:g} hPa"


def project(record: WeatherRecord, mode: UnitMode) -> DisplayView:
    """Render a record for ``mode`` without touching any stored state."""
    temp = convert_temperature(record.temperature_value, record.units, mode)
    feels = convert_temperature(record.feels_like_value, record.units, mode)
    suffix = mode.temperature_suffix
    return DisplayView(
        location=record.display_location,
        temperature=f"{temp}{suffix}",
        icon=map_category(record.condition_category),
        description=record.condition_description,
        feels_like=f"Feels like {feels}{suffix}",
        humidity=f"{record.humidity_percent}%",
        wind=format_wind(record.wind_speed_mps, mode),
        pressure=format_pressure(record.pressure_hpa),
        visibility=format_visibility(record.visibility_meters),
    )


class DisplayStateStore:
    """Holds the canonical record and the unit mode it is shown in."""

    def __init__(self, mode: UnitMode = UnitMode.METRIC) -> None:
        self._record: WeatherRecord | None = None
        self._mode = mode

    @property
    def record(self) -> WeatherRecord | None:
        return self._record

    @property
    def mode(self) -> UnitMode:
        return self._mode

    def set_record(self, record: WeatherRecord, mode: UnitMode) -> None:
        """Replace the record and the active mode together."""
        self._record = record
        self._mode = mode

    def toggle_unit(self) -> UnitMode:
        """Flip the unit mode and return the new one.

        With no record yet this only changes the label and the units the
        next search is fetched in.
        """
        self._mode = self._mode.flipped()
        return self._mode

    def unit_label(self) -> str:
        return UNIT_LABELS[self._mode]

    def current_display(self) -> DisplayView | None:
        if self._record is None:
            return None
        return project(self._record, self._mode)
