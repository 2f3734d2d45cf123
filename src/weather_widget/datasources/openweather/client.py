"""OpenWeatherMap current-weather client.

API docs: https://openweathermap.org/current

Every failure is classified into a ``WeatherError`` subclass and raised;
nothing is retried.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests
from pydantic import ValidationError

from weather_widget.config import OPENWEATHER_API_URL
from weather_widget.datasources.openweather.models import CurrentWeatherResponse
from weather_widget.errors import (
    InvalidCredentials,
    LocationNotFound,
    MalformedResponse,
    MissingCredentials,
    NetworkFailure,
    ProviderError,
)
from weather_widget.services.http import session as default_session

if TYPE_CHECKING:
    from weather_widget.schemas import UnitMode, WeatherRecord

logger = logging.getLogger(__name__)


class WeatherClient:
    """Fetches current conditions for a free-text location."""

    def __init__(
        self,
        api_key: str,
        api_url: str = OPENWEATHER_API_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self.session = session or default_session

    def fetch(self, location_query: str, mode: UnitMode) -> WeatherRecord:
        """
        Fetch current weather for ``location_query`` in ``mode`` units.

        The caller is expected to have rejected blank queries already.

        Args:
            location_query: City name, optionally ``"City,CC"``.
            mode: Unit system for the provider's temperatures.

        Returns:
            The normalized record.

        Raises:
            MissingCredentials: No API key configured.
            NetworkFailure: The request never got a response.
            LocationNotFound: HTTP 404, or a query that cannot be encoded.
            InvalidCredentials: HTTP 401.
            ProviderError: Any other non-2xx status.
            MalformedResponse: The body is not the expected JSON shape.
        """
        if not self.api_key:
            raise MissingCredentials

        params: dict[str, str] = {
            "q": location_query,
            "appid": self.api_key,
            "units": mode.value,
        }

        try:
            resp = self.session.get(self.api_url, params=params)
        except requests.RequestException as exc:
            logger.warning("Weather request for %r failed: %s", location_query, exc)
            raise NetworkFailure from exc
        except UnicodeError as exc:
            # Lone surrogates, e.g. from non-UTF-8 argv.
            logger.warning("Weather request for %r could not be encoded: %s", location_query, exc)
            raise LocationNotFound from exc

        if not resp.ok:
            logger.warning("Weather provider returned %s for %r", resp.status_code, location_query)
            raise _classify_status(resp.status_code)

        try:
            body: Any = resp.json()
            payload = CurrentWeatherResponse.model_validate(body)
            return payload.to_record(mode)
        except (ValueError, ValidationError) as exc:
            logger.warning("Unexpected weather payload for %r: %s", location_query, exc)
            raise MalformedResponse from exc


def _classify_status(status: int) -> ProviderError | LocationNotFound | InvalidCredentials:
    if status == 404:
        return LocationNotFound()
    if status == 401:
        return InvalidCredentials()
    return ProviderError(status)
