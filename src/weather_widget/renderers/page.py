"""HTML page view.

``HtmlPageView`` keeps the state of every slot and visibility toggle the
controller writes, and renders the whole page on demand. The loading
indicator, the weather card and the error modal each carry a ``show``
class when visible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from weather_widget.renderers import render_template
from weather_widget.schemas import ThemePreference

if TYPE_CHECKING:
    from weather_widget.display import DisplayView
    from weather_widget.errors import WeatherError

# Element ids in templates/page.html.j2, keyed by DisplayView field
SLOT_IDS: dict[str, str] = {
    "location": "locationName",
    "temperature": "temperature",
    "icon": "weatherIcon",
    "description": "description",
    "feels_like": "feelsLike",
    "humidity": "humidity",
    "wind": "windSpeed",
    "pressure": "pressure",
    "visibility": "visibility",
}


@dataclass
class HtmlPageView:
    """In-memory page state, rendered to HTML by ``render()``."""

    slots: dict[str, str] = field(default_factory=dict)
    date_text: str = ""
    loading_visible: bool = False
    display_visible: bool = False
    error: WeatherError | None = None
    input_value: str = ""
    input_focused: bool = False
    unit_label: str = ""
    theme: ThemePreference = ThemePreference.LIGHT
    theme_glyph: str = ""
    theme_label: str = ""

    @property
    def error_visible(self) -> bool:
        return self.error is not None

    # -- WeatherView -------------------------------------------------------

    def render_display(self, view: DisplayView) -> None:
        for attr, slot_id in SLOT_IDS.items():
            self.slots[slot_id] = getattr(view, attr)

    def set_date(self, text: str) -> None:
        self.date_text = text

    def show_loading(self) -> None:
        self.loading_visible = True

    def hide_loading(self) -> None:
        self.loading_visible = False

    def show_display(self) -> None:
        self.display_visible = True

    def hide_display(self) -> None:
        self.display_visible = False

    def show_error(self, error: WeatherError) -> None:
        self.error = error
        # Focus moves to the modal's close button
        self.input_focused = False

    def hide_error(self) -> None:
        self.error = None

    def focus_input(self) -> None:
        self.input_focused = True

    def clear_input(self) -> None:
        self.input_value = ""

    def set_unit_label(self, text: str) -> None:
        self.unit_label = text

    def apply_theme(self, theme: ThemePreference, glyph: str, label: str) -> None:
        self.theme = theme
        self.theme_glyph = glyph
        self.theme_label = label

    # -- output ------------------------------------------------------------

    def render(self) -> str:
        """Full HTML document for the current state."""
        return render_template(
            "page.html.j2",
            theme=self.theme.value,
            theme_glyph=self.theme_glyph,
            theme_label=self.theme_label,
            unit_label=self.unit_label,
            date_text=self.date_text,
            slots=self.slots,
            input_value=self.input_value,
            loading_visible=self.loading_visible,
            display_visible=self.display_visible,
            error_kind=self.error.kind.value if self.error else "",
            error_visible=self.error_visible,
        )
