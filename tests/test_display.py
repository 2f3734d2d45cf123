"""Tests for display state and its projection to strings."""

from __future__ import annotations

from conftest import make_record

from weather_widget.display import (
    DisplayStateStore,
    format_pressure,
    format_visibility,
    format_wind,
    project,
)
from weather_widget.icons import UNKNOWN_GLYPH
from weather_widget.schemas import UnitMode, WeatherRecord


class TestProject:
    """Test projecting a record into display strings."""

    def test_metric_display(self, record: WeatherRecord) -> None:
        view = project(record, UnitMode.METRIC)
        assert view.location == "London, GB"
        assert view.temperature == "22°C"
        assert view.feels_like == "Feels like 20°C"
        assert view.humidity == "55%"
        assert view.wind == "19 km/h"
        assert view.pressure == "1013 hPa"
        assert view.visibility == "10.0 km"
        assert view.icon == "☁️"
        assert view.description == "scattered clouds"

    def test_imperial_display_of_metric_record(self, record: WeatherRecord) -> None:
        view = project(record, UnitMode.IMPERIAL)
        assert view.temperature == "71°F"
        assert view.feels_like == "Feels like 69°F"
        assert view.wind == "12 mph"
        assert view.visibility == "10.0 km"

    def test_imperial_record_in_metric(self) -> None:
        record = make_record(
            temperature_value=70.9, feels_like_value=68.7, units=UnitMode.IMPERIAL
        )
        view = project(record, UnitMode.METRIC)
        assert view.temperature == "22°C"
        assert view.feels_like == "Feels like 20°C"

    def test_location_without_country(self) -> None:
        view = project(make_record(country_code=""), UnitMode.METRIC)
        assert view.location == "London"

    def test_unknown_category_uses_fallback_icon(self) -> None:
        view = project(make_record(condition_category="Volcano"), UnitMode.METRIC)
        assert view.icon == UNKNOWN_GLYPH

    def test_negative_temperatures(self) -> None:
        view = project(make_record(temperature_value=-3.5, feels_like_value=-8.6), UnitMode.METRIC)
        assert view.temperature == "-3°C"
        assert view.feels_like == "Feels like -9°C"


class TestFormatters:
    """Test individual slot formatters."""

    def test_wind_metric(self) -> None:
        assert format_wind(0, UnitMode.METRIC) == "0 km/h"
        assert format_wind(5.2, UnitMode.METRIC) == "19 km/h"

    def test_wind_imperial(self) -> None:
        assert format_wind(4.4704, UnitMode.IMPERIAL) == "10 mph"

    def test_visibility_one_decimal(self) -> None:
        assert format_visibility(10000) == "10.0 km"
        assert format_visibility(850) == "0.8 km"
        assert format_visibility(0) == "0.0 km"

    def test_pressure_drops_trailing_zero(self) -> None:
        assert format_pressure(1013.0) == "1013 hPa"
        assert format_pressure(1013.5) == "1013.5 hPa"


class TestDisplayStateStore:
    """Test the record + mode store."""

    def test_starts_empty(self) -> None:
        store = DisplayStateStore()
        assert store.record is None
        assert store.mode is UnitMode.METRIC
        assert store.current_display() is None

    def test_set_record_replaces_record_and_mode(self, record: WeatherRecord) -> None:
        store = DisplayStateStore()
        store.set_record(record, UnitMode.IMPERIAL)
        assert store.record is record
        assert store.mode is UnitMode.IMPERIAL

        other = make_record(location_label="Paris", country_code="FR")
        store.set_record(other, UnitMode.METRIC)
        assert store.record is other
        assert store.mode is UnitMode.METRIC

    def test_toggle_without_record_only_changes_label(self) -> None:
        store = DisplayStateStore()
        assert store.unit_label() == "°C / °F"

        assert store.toggle_unit() is UnitMode.IMPERIAL
        assert store.unit_label() == "°F / °C"
        assert store.current_display() is None

    def test_toggle_rederives_from_record(self, record: WeatherRecord) -> None:
        store = DisplayStateStore()
        store.set_record(record, UnitMode.METRIC)

        store.toggle_unit()
        view = store.current_display()
        assert view is not None
        assert view.temperature == "71°F"
        assert view.feels_like == "Feels like 69°F"

    def test_even_toggles_restore_display_exactly(self) -> None:
        """Repeated toggling never drifts, for every plausible temperature."""
        for tenths in range(-900, 601, 7):
            celsius = tenths / 10
            store = DisplayStateStore()
            store.set_record(
                make_record(temperature_value=celsius, feels_like_value=celsius - 1.3),
                UnitMode.METRIC,
            )
            original = store.current_display()

            for _ in range(10):
                store.toggle_unit()
            assert store.current_display() == original, celsius

    def test_record_is_not_modified_by_toggle(self, record: WeatherRecord) -> None:
        store = DisplayStateStore()
        store.set_record(record, UnitMode.METRIC)
        store.toggle_unit()
        store.toggle_unit()
        assert store.record == make_record()
