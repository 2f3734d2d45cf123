"""
Application controller: user events in, view updates out.

The controller owns the request state machine::

    idle ──submit──▶ loading ──success──▶ displaying ──submit──▶ loading
                        │
                        └──failure──▶ error ──dismiss──▶ idle

Collaborators are injected: a ``WeatherProvider`` that fetches records, a
``WeatherView`` that shows them, and a ``ThemeController`` that persists the
theme. Tests substitute in-memory fakes for all three.

Every search gets a ticket carrying a generation number. Only the newest
ticket may change state; a response that arrives after a newer search was
submitted is dropped.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Protocol

from weather_widget.display import DisplayStateStore
from weather_widget.errors import EmptyQuery, MissingCredentials, WeatherError
from weather_widget.renderers.date_utils import format_long_date
from weather_widget.schemas import RequestState, UnitMode

if TYPE_CHECKING:
    from collections.abc import Callable

    from weather_widget.display import DisplayView
    from weather_widget.schemas import ThemePreference, WeatherRecord
    from weather_widget.theme import ThemeController

logger = logging.getLogger(__name__)


class WeatherProvider(Protocol):
    def fetch(self, location_query: str, mode: UnitMode) -> WeatherRecord: ...


class WeatherView(Protocol):
    def render_display(self, view: DisplayView) -> None: ...
    def set_date(self, text: str) -> None: ...
    def show_loading(self) -> None: ...
    def hide_loading(self) -> None: ...
    def show_display(self) -> None: ...
    def hide_display(self) -> None: ...
    def show_error(self, error: WeatherError) -> None: ...
    def hide_error(self) -> None: ...
    def focus_input(self) -> None: ...
    def clear_input(self) -> None: ...
    def set_unit_label(self, text: str) -> None: ...
    def apply_theme(self, theme: ThemePreference, glyph: str, label: str) -> None: ...


@dataclass(frozen=True)
class SearchTicket:
    """One submitted search."""

    generation: int
    query: str
    mode: UnitMode


@dataclass(frozen=True)
class KeyEvent:
    """A key press. ``in_input`` is set when the location field has focus."""

    key: str
    ctrl: bool = False
    meta: bool = False
    in_input: bool = False
    input_text: str = ""


class AppController:
    """Wires user events to the client, display state, theme and view."""

    def __init__(
        self,
        provider: WeatherProvider,
        view: WeatherView,
        theme: ThemeController,
        display: DisplayStateStore | None = None,
        *,
        has_credentials: bool = True,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.provider = provider
        self.view = view
        self.theme = theme
        self.display = display or DisplayStateStore()
        self.has_credentials = has_credentials
        self._today = today
        self._generation = 0
        self.state = RequestState.IDLE

    def start(self) -> None:
        """Apply the saved theme and initial labels, then focus the input."""
        self.theme.initialize()
        self.view.set_unit_label(self.display.unit_label())
        self.view.set_date(format_long_date(self._today()))
        self.view.focus_input()

    # -- search ------------------------------------------------------------

    def begin_search(self, text: str) -> SearchTicket | None:
        """Validate input and enter the loading state.

        Returns None when the input is rejected; the provider must not be
        called in that case and the state is left as it was.
        """
        query = text.strip()
        if not query:
            self.view.show_error(EmptyQuery())
            return None
        if not self.has_credentials:
            self.view.show_error(MissingCredentials())
            return None

        self._generation += 1
        ticket = SearchTicket(self._generation, query, self.display.mode)
        logger.debug("Search #%d for %r in %s units", ticket.generation, query, ticket.mode)

        self.state = RequestState.LOADING
        self.view.show_loading()
        self.view.hide_display()
        return ticket

    def is_current(self, ticket: SearchTicket) -> bool:
        return ticket.generation == self._generation

    def complete_search(self, ticket: SearchTicket, record: WeatherRecord) -> bool:
        """Show a fetched record. Returns False if the ticket was superseded."""
        if not self.is_current(ticket):
            logger.debug("Dropping stale result for search #%d", ticket.generation)
            return False

        # The unit may have been toggled while loading; the record knows its own units.
        self.display.set_record(record, self.display.mode)
        current = self.display.current_display()
        if current is not None:
            self.view.render_display(current)
        self.view.set_date(format_long_date(self._today()))
        self.view.hide_loading()
        self.view.show_display()
        self.view.clear_input()
        self.state = RequestState.DISPLAYING
        return True

    def fail_search(self, ticket: SearchTicket, error: WeatherError) -> bool:
        """Open the error modal. Returns False if the ticket was superseded."""
        if not self.is_current(ticket):
            logger.debug("Dropping stale failure for search #%d: %s", ticket.generation, error)
            return False

        logger.info("Search for %r failed: %s", ticket.query, error.message)
        self.view.hide_loading()
        self.view.show_error(error)
        self.state = RequestState.ERROR
        return True

    async def submit_search(self, text: str) -> RequestState:
        """Run a full search: validate, fetch off the event loop, then show the outcome."""
        ticket = self.begin_search(text)
        if ticket is None:
            return self.state

        try:
            record = await asyncio.to_thread(self.provider.fetch, ticket.query, ticket.mode)
        except WeatherError as exc:
            self.fail_search(ticket, exc)
        else:
            self.complete_search(ticket, record)
        return self.state

    # -- other events ------------------------------------------------------

    def dismiss_error(self) -> None:
        self.view.hide_error()
        self.view.focus_input()
        if self.state is RequestState.ERROR:
            self.state = RequestState.IDLE

    def toggle_unit(self) -> UnitMode:
        """Flip units and redraw temperatures from the stored record."""
        mode = self.display.toggle_unit()
        self.view.set_unit_label(self.display.unit_label())
        current = self.display.current_display()
        if current is not None:
            self.view.render_display(current)
        return mode

    def toggle_theme(self) -> ThemePreference:
        return self.theme.toggle()

    async def handle_key(self, event: KeyEvent) -> bool:
        """Keyboard shortcuts. Returns True if the key was handled.

        - Ctrl/Cmd+K focuses the location field
        - Escape closes the error modal
        - Enter in the location field submits the search
        """
        if event.key.lower() == "k" and (event.ctrl or event.meta):
            self.view.focus_input()
            return True
        if event.key == "Escape":
            self.dismiss_error()
            return True
        if event.key == "Enter" and event.in_input:
            await self.submit_search(event.input_text)
            return True
        return False
