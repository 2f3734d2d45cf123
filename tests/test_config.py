"""Tests for application settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from weather_widget.config import OPENWEATHER_API_URL, Settings, get_settings
from weather_widget.schemas import UnitMode

if TYPE_CHECKING:
    from pathlib import Path


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)  # no stray .env
        monkeypatch.delenv("WEATHER_WIDGET_API_KEY", raising=False)
        monkeypatch.delenv("WEATHER_WIDGET_DEFAULT_UNITS", raising=False)
        settings = Settings()
        assert settings.api_url == OPENWEATHER_API_URL
        assert settings.default_units is UnitMode.METRIC
        assert settings.request_timeout == 10.0
        assert settings.api_key == ""
        assert not settings.has_credentials

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_WIDGET_API_KEY", "abc123")
        monkeypatch.setenv("WEATHER_WIDGET_DEFAULT_UNITS", "imperial")
        settings = Settings()
        assert settings.api_key == "abc123"
        assert settings.has_credentials
        assert settings.default_units is UnitMode.IMPERIAL

    def test_whitespace_key_is_not_a_credential(self) -> None:
        assert not Settings(api_key="   ").has_credentials

    def test_rejects_bad_units(self) -> None:
        with pytest.raises(ValidationError):
            Settings(default_units="kelvin")

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            Settings(request_timeout=0)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
