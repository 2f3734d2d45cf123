"""OpenWeatherMap current-weather response models.

Only the fields the widget displays are modelled; everything else in the
payload is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from weather_widget.schemas import UnitMode, WeatherRecord
from weather_widget.units import mph_to_mps


class MainBlock(BaseModel):
    temp: float
    feels_like: float
    humidity: int
    pressure: float


class SysBlock(BaseModel):
    country: str = ""


class Condition(BaseModel):
    main: str
    description: str = ""


class WindBlock(BaseModel):
    speed: float = 0.0


class CurrentWeatherResponse(BaseModel):
    """Body of ``GET /data/2.5/weather``."""

    name: str
    sys: SysBlock = Field(default_factory=SysBlock)
    main: MainBlock
    weather: list[Condition] = Field(..., min_length=1)
    wind: WindBlock = Field(default_factory=WindBlock)
    # Omitted by the provider for some stations
    visibility: float = 0.0

    def to_record(self, units: UnitMode) -> WeatherRecord:
        """Normalize to a ``WeatherRecord`` fetched in ``units``.

        Imperial responses report wind in mph; the record always holds m/s.
        """
        wind_mps = self.wind.speed
        if units is UnitMode.IMPERIAL:
            wind_mps = mph_to_mps(wind_mps)

        condition = self.weather[0]
        return WeatherRecord(
            location_label=self.name,
            country_code=self.sys.country,
            temperature_value=self.main.temp,
            feels_like_value=self.main.feels_like,
            condition_category=condition.main,
            condition_description=condition.description,
            humidity_percent=self.main.humidity,
            wind_speed_mps=wind_mps,
            pressure_hpa=self.main.pressure,
            visibility_meters=self.visibility,
            units=units,
        )
