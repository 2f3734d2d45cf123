"""Plain-text view for the CLI."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from weather_widget.display import DisplayView
    from weather_widget.errors import WeatherError
    from weather_widget.schemas import ThemePreference


class TerminalView:
    """Prints the display card; visibility toggles that make no sense in a terminal are no-ops."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.date_text = ""

    def render_display(self, view: DisplayView) -> None:
        lines = [
            f"{view.icon}  {view.location}",
            self.date_text,
            f"{view.temperature}  {view.description}",
            view.feels_like,
            f"Humidity:   {view.humidity}",
            f"Wind:       {view.wind}",
            f"Pressure:   {view.pressure}",
            f"Visibility: {view.visibility}",
        ]
        print("\n".join(line for line in lines if line), file=self.out)

    def set_date(self, text: str) -> None:
        self.date_text = text

    def show_loading(self) -> None:
        print("Loading weather data...", file=self.err)

    def hide_loading(self) -> None:
        pass

    def show_display(self) -> None:
        pass

    def hide_display(self) -> None:
        pass

    def show_error(self, error: WeatherError) -> None:
        print(f"Error: {error.message}", file=self.err)

    def hide_error(self) -> None:
        pass

    def focus_input(self) -> None:
        pass

    def clear_input(self) -> None:
        pass

    def set_unit_label(self, text: str) -> None:
        pass

    def apply_theme(self, theme: ThemePreference, glyph: str, label: str) -> None:
        pass
