"""OpenWeatherMap data source.

Fetches current conditions by city name (API key required).

Public API:
  - client: WeatherClient
  - models: CurrentWeatherResponse (provider payload)
"""

from weather_widget.datasources.openweather.client import WeatherClient
from weather_widget.datasources.openweather.models import CurrentWeatherResponse

__all__ = [
    "CurrentWeatherResponse",
    "WeatherClient",
]
