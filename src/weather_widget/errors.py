"""
Failure taxonomy for weather lookups.

Every error carries a ``kind`` and a user-facing ``message``. The controller
recovers all of them; views decide how much of the message to show.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    EMPTY_QUERY = "empty_query"
    MISSING_CREDENTIALS = "missing_credentials"
    LOCATION_NOT_FOUND = "location_not_found"
    INVALID_CREDENTIALS = "invalid_credentials"
    PROVIDER_ERROR = "provider_error"
    NETWORK_FAILURE = "network_failure"
    MALFORMED_RESPONSE = "malformed_response"


class WeatherError(Exception):
    """Base class for all lookup failures."""

    kind: ErrorKind
    default_message = "Failed to fetch weather data"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyQuery(WeatherError):
    kind = ErrorKind.EMPTY_QUERY
    default_message = "Please enter a location"


class MissingCredentials(WeatherError):
    kind = ErrorKind.MISSING_CREDENTIALS
    default_message = "Please add your OpenWeatherMap API key"


class LocationNotFound(WeatherError):
    kind = ErrorKind.LOCATION_NOT_FOUND
    default_message = "Location not found"


class InvalidCredentials(WeatherError):
    kind = ErrorKind.INVALID_CREDENTIALS
    default_message = "Invalid API key"


class ProviderError(WeatherError):
    kind = ErrorKind.PROVIDER_ERROR

    def __init__(self, status: int, message: str | None = None) -> None:
        self.status = status
        super().__init__(message or f"Weather provider returned HTTP {status}")


class NetworkFailure(WeatherError):
    kind = ErrorKind.NETWORK_FAILURE
    default_message = "Could not reach the weather service"


class MalformedResponse(WeatherError):
    kind = ErrorKind.MALFORMED_RESPONSE
    default_message = "Weather service returned an unexpected response"
