"""Shared fixtures and in-memory fakes for the controller's collaborators."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest

from weather_widget.controller import AppController
from weather_widget.display import DisplayStateStore
from weather_widget.renderers.page import HtmlPageView
from weather_widget.schemas import UnitMode, WeatherRecord
from weather_widget.theme import ThemeController

if TYPE_CHECKING:
    from weather_widget.errors import WeatherError


class MemoryStore:
    """Dict-backed ``KeyValueStore``."""

    def __init__(self, initial: dict[str, str] | None = None, fail_writes: bool = False) -> None:
        self.data = dict(initial or {})
        self.fail_writes = fail_writes

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            msg = "storage quota exceeded"
            raise OSError(msg)
        self.data[key] = value


class FakeProvider:
    """Returns queued results in order and records every call."""

    def __init__(self, *results: WeatherRecord | WeatherError) -> None:
        self.results = list(results)
        self.calls: list[tuple[str, UnitMode]] = []

    def fetch(self, location_query: str, mode: UnitMode) -> WeatherRecord:
        self.calls.append((location_query, mode))
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def make_record(**overrides: object) -> WeatherRecord:
    """A London record in metric units; override any field."""
    fields: dict[str, object] = {
        "location_label": "London",
        "country_code": "GB",
        "temperature_value": 21.6,
        "feels_like_value": 20.4,
        "condition_category": "Clouds",
        "condition_description": "scattered clouds",
        "humidity_percent": 55,
        "wind_speed_mps": 5.2,
        "pressure_hpa": 1013,
        "visibility_meters": 10000,
        "units": UnitMode.METRIC,
    }
    fields.update(overrides)
    return WeatherRecord.model_validate(fields)


@pytest.fixture
def record() -> WeatherRecord:
    return make_record()


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def page() -> HtmlPageView:
    return HtmlPageView()


@pytest.fixture
def make_controller(page: HtmlPageView, memory_store: MemoryStore):  # noqa: ANN201
    """Factory: build a started controller around ``page`` and a provider."""

    def _make(
        provider: FakeProvider | None = None,
        mode: UnitMode = UnitMode.METRIC,
        has_credentials: bool = True,
    ) -> AppController:
        controller = AppController(
            provider=provider or FakeProvider(),
            view=page,
            theme=ThemeController(memory_store, surface=page),
            display=DisplayStateStore(mode),
            has_credentials=has_credentials,
            today=lambda: date(2026, 10, 19),
        )
        controller.start()
        return controller

    return _make
