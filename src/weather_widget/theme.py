"""Light/dark theme preference.

The preference is read once at startup and written back on every toggle.
A failed write is logged and otherwise ignored: the theme stays applied
for the rest of the session.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from weather_widget.schemas import ThemePreference
from weather_widget.store import StoreError

if TYPE_CHECKING:
    from weather_widget.store import KeyValueStore

logger = logging.getLogger(__name__)

THEME_KEY = "theme"

# Label for the toggle control: it offers the *other* theme.
TOGGLE_LABELS: dict[ThemePreference, tuple[str, str]] = {
    ThemePreference.DARK: ("☀️", "Light Mode"),
    ThemePreference.LIGHT: ("🌙", "Dark Mode"),
}


class ThemeSurface(Protocol):
    def apply_theme(self, theme: ThemePreference, glyph: str, label: str) -> None: ...


class ThemeController:
    """Current theme, its persistence, and the surface that shows it."""

    def __init__(self, store: KeyValueStore, surface: ThemeSurface | None = None) -> None:
        self._store = store
        self._surface = surface
        self.current = ThemePreference.LIGHT

    def initialize(self) -> ThemePreference:
        """Load the saved preference (light if absent or unreadable) and apply it."""
        try:
            saved = self._store.get(THEME_KEY)
        except (OSError, StoreError) as exc:
            logger.warning("Could not read theme preference: %s", exc)
            saved = None

        try:
            self.current = ThemePreference(saved) if saved else ThemePreference.LIGHT
        except ValueError:
            logger.warning("Ignoring unknown theme preference %r", saved)
            self.current = ThemePreference.LIGHT

        self._apply()
        return self.current

    def toggle(self) -> ThemePreference:
        """Switch themes, apply, persist, and return the new preference."""
        self.current = self.current.flipped()
        self._apply()
        try:
            self._store.set(THEME_KEY, self.current.value)
        except (OSError, StoreError) as exc:
            logger.warning("Could not save theme preference: %s", exc)
        return self.current

    def toggle_label(self) -> tuple[str, str]:
        """(glyph, text) for the toggle control."""
        return TOGGLE_LABELS[self.current]

    def _apply(self) -> None:
        if self._surface is not None:
            glyph, label = self.toggle_label()
            self._surface.apply_theme(self.current, glyph, label)
