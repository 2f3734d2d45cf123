"""Weather Widget - current weather lookup with unit and theme toggles.

Architecture::

    datasources/   External APIs (OpenWeatherMap current weather)
    units.py       Pure temperature / speed / distance conversions
    icons.py       Condition category -> display glyph
    display.py     Canonical record + unit mode, projected to display strings
    theme.py       Light/dark preference, persisted through store.py
    controller.py  Request state machine wiring input events to the above
    renderers/     Views: Jinja2 HTML page, terminal output, date formatting
    flows/         Prefect orchestration (fetch once, write a static page)
    services/      Shared utilities (HTTP session with default timeout)

Data flow: user event -> controller -> client | display | theme -> view
"""

__version__ = "0.1.0"

from weather_widget.config import Settings
from weather_widget.schemas import UnitMode, WeatherRecord

__all__ = ["Settings", "UnitMode", "WeatherRecord", "__version__"]
