"""Weather condition glyphs.

Maps OpenWeatherMap condition groups (``weather[0].main``) to emoji.
Lookup is exact and case-sensitive; anything else gets ``UNKNOWN_GLYPH``.
"""

from __future__ import annotations

_FOG = "🌫️"

# https://openweathermap.org/weather-conditions
CATEGORY_GLYPHS: dict[str, str] = {
    "Clear": "☀️",
    "Clouds": "☁️",
    "Rain": "🌧️",
    "Drizzle": "🌦️",
    "Thunderstorm": "⛈️",
    "Snow": "❄️",
    "Mist": _FOG,
    "Smoke": _FOG,
    "Haze": _FOG,
    "Dust": _FOG,
    "Fog": _FOG,
    "Sand": _FOG,
    "Ash": _FOG,
    "Squall": "💨",
    "Tornado": "🌪️",
}

UNKNOWN_GLYPH = "🌤️"


def map_category(category: str) -> str:
    """Return the display glyph for a condition category."""
    return CATEGORY_GLYPHS.get(category, UNKNOWN_GLYPH)
