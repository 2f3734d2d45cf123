"""Unit conversion functions.

Pure conversions with no external dependencies. Temperature conversions
round half up to whole degrees, the same way the page has always shown them.
"""

from __future__ import annotations

import math

from weather_widget.schemas import UnitMode

MPS_PER_MPH = 0.44704
KMH_PER_MPS = 3.6


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Python's ``round`` uses banker's rounding (``round(0.5) == 0``), which
    would make 0.5 °C show as 0 here but 1 everywhere else.
    """
    return math.floor(value + 0.5)


def celsius_to_fahrenheit(celsius: float) -> int:
    """Convert Celsius to whole degrees Fahrenheit."""
    return round_half_up(celsius * 9 / 5 + 32)


def fahrenheit_to_celsius(fahrenheit: float) -> int:
    """Convert Fahrenheit to whole degrees Celsius."""
    return round_half_up((fahrenheit - 32) * 5 / 9)


def convert_temperature(value: float, source: UnitMode, target: UnitMode) -> int:
    """Express a temperature measured in ``source`` units as whole ``target`` units."""
    if source is target:
        return round_half_up(value)
    if target is UnitMode.IMPERIAL:
        return celsius_to_fahrenheit(value)
    return fahrenheit_to_celsius(value)


def mps_to_kmh(mps: float) -> float:
    return mps * KMH_PER_MPS


def mps_to_mph(mps: float) -> float:
    return mps / MPS_PER_MPH


def mph_to_mps(mph: float) -> float:
    return mph * MPS_PER_MPH


def meters_to_km(meters: float) -> float:
    return meters / 1000
