"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URL, request building, error classification
    └── models.py         # Pydantic models for API responses

A client returns domain models from ``weather_widget.schemas`` and raises
``weather_widget.errors.WeatherError`` subclasses. It must satisfy the
``WeatherProvider`` protocol in ``controller.py``::

    def fetch(self, location_query: str, mode: UnitMode) -> WeatherRecord: ...
"""
