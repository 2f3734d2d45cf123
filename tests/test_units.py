"""Tests for unit conversion functions."""

from __future__ import annotations

import pytest

from weather_widget.schemas import UnitMode
from weather_widget.units import (
    celsius_to_fahrenheit,
    convert_temperature,
    fahrenheit_to_celsius,
    meters_to_km,
    mph_to_mps,
    mps_to_kmh,
    mps_to_mph,
    round_half_up,
)


class TestRoundHalfUp:
    """Rounding matches the browser, not Python's banker's rounding."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.5, 1),
            (1.5, 2),
            (2.5, 3),
            (-0.5, 0),
            (-1.5, -1),
            (-1.6, -2),
            (21.6, 22),
            (20.4, 20),
        ],
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestTemperature:
    """Test Celsius <-> Fahrenheit conversions."""

    @pytest.mark.parametrize(
        ("celsius", "fahrenheit"),
        [(0, 32), (100, 212), (-40, -40), (37, 99), (21.6, 71), (-90, -130)],
    )
    def test_celsius_to_fahrenheit(self, celsius: float, fahrenheit: int) -> None:
        assert celsius_to_fahrenheit(celsius) == fahrenheit

    @pytest.mark.parametrize(
        ("fahrenheit", "celsius"),
        [(32, 0), (212, 100), (-40, -40), (71, 22), (70, 21), (0, -18)],
    )
    def test_fahrenheit_to_celsius(self, fahrenheit: float, celsius: int) -> None:
        assert fahrenheit_to_celsius(fahrenheit) == celsius

    def test_returns_integers(self) -> None:
        assert isinstance(celsius_to_fahrenheit(21.6), int)
        assert isinstance(fahrenheit_to_celsius(70.9), int)

    def test_round_trip_stays_within_one_degree(self) -> None:
        """Every plausible Celsius reading survives a there-and-back conversion."""
        for celsius in range(-90, 61):
            back = fahrenheit_to_celsius(celsius_to_fahrenheit(celsius))
            assert abs(back - celsius) <= 1, celsius


class TestConvertTemperature:
    """Test mode-aware conversion."""

    def test_same_mode_only_rounds(self) -> None:
        assert convert_temperature(21.6, UnitMode.METRIC, UnitMode.METRIC) == 22
        assert convert_temperature(70.4, UnitMode.IMPERIAL, UnitMode.IMPERIAL) == 70

    def test_metric_to_imperial(self) -> None:
        assert convert_temperature(21.6, UnitMode.METRIC, UnitMode.IMPERIAL) == 71

    def test_imperial_to_metric(self) -> None:
        assert convert_temperature(70.9, UnitMode.IMPERIAL, UnitMode.METRIC) == 22


class TestSpeedAndDistance:
    """Test wind speed and visibility helpers."""

    def test_mps_to_kmh(self) -> None:
        assert mps_to_kmh(5.2) == pytest.approx(18.72)

    def test_mph_round_trip(self) -> None:
        assert mps_to_mph(mph_to_mps(10)) == pytest.approx(10)

    def test_mph_to_mps(self) -> None:
        assert mph_to_mps(1) == pytest.approx(0.44704)

    def test_meters_to_km(self) -> None:
        assert meters_to_km(10000) == 10.0
        assert meters_to_km(850) == pytest.approx(0.85)
