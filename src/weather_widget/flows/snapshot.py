"""
Prefect flow that renders a static weather page for one location.

Fetches current conditions once, drives the controller against an
``HtmlPageView``, and writes ``site/index.html``.

Run locally:
    python -m weather_widget.flows.snapshot "London"

Run with Prefect dashboard:
    prefect server start &
    python -m weather_widget.flows.snapshot "London"
"""

from __future__ import annotations

import sys
from pathlib import Path

from prefect import flow, task

from weather_widget.config import get_settings
from weather_widget.controller import AppController
from weather_widget.datasources.openweather import WeatherClient
from weather_widget.display import DisplayStateStore
from weather_widget.errors import EmptyQuery, WeatherError
from weather_widget.renderers.page import HtmlPageView
from weather_widget.schemas import UnitMode, WeatherRecord
from weather_widget.services.http import create_session
from weather_widget.store import JsonFileStore
from weather_widget.theme import ThemeController


@task(name="fetch-current-weather")
def fetch_record(location: str, units: UnitMode) -> WeatherRecord:
    """Fetch current conditions; lookup failures propagate as ``WeatherError``."""
    settings = get_settings()
    client = WeatherClient(
        settings.api_key,
        api_url=settings.api_url,
        session=create_session(timeout=settings.request_timeout),
    )
    return client.fetch(location, units)


@task(name="build-page")
def build_page(
    location: str,
    units: UnitMode,
    record: WeatherRecord | None,
    error: WeatherError | None = None,
    prefs_path: Path | None = None,
) -> str:
    """Render the page for a fetched record (or the error modal)."""
    settings = get_settings()
    view = HtmlPageView()
    theme = ThemeController(JsonFileStore(prefs_path or settings.prefs_path), surface=view)
    controller = AppController(
        provider=_NoFetch(),
        view=view,
        theme=theme,
        display=DisplayStateStore(units),
        has_credentials=True,
    )
    controller.start()

    ticket = controller.begin_search(location)
    if ticket is not None:
        if record is not None:
            controller.complete_search(ticket, record)
        elif error is not None:
            controller.fail_search(ticket, error)
    return view.render()


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write HTML to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


@flow(name="render-snapshot", log_prints=True)
def render_snapshot(location: str, units: UnitMode = UnitMode.METRIC) -> dict[str, str]:
    """
    Fetch weather for ``location`` and write a static page.

    A failed lookup still produces a page, with the error modal open. A blank
    location is rejected before the provider is contacted.
    """
    settings = get_settings()

    record: WeatherRecord | None = None
    error: WeatherError | None = None
    if not location.strip():
        error = EmptyQuery()
        print(f"Lookup skipped: {error.message}")
    else:
        print(f"Fetching weather for {location!r} ({units})...")
        try:
            record = fetch_record(location, units)
        except WeatherError as exc:
            print(f"Lookup failed: {exc.message}")
            error = exc

    print("Building HTML...")
    html = build_page(location, units, record, error)

    print("Writing site...")
    output_path = write_site(html, settings.site_dir)

    print(f"Site built: {output_path}")
    result = {"output": str(output_path), "status": "ok" if record else "error"}
    if error is not None:
        result["error"] = error.kind.value
    return result


class _NoFetch:
    """Provider for a controller whose record is fetched elsewhere."""

    def fetch(self, location_query: str, mode: UnitMode) -> WeatherRecord:
        msg = "records are fetched by the fetch-current-weather task"
        raise RuntimeError(msg)


if __name__ == "__main__":
    result = render_snapshot(sys.argv[1] if len(sys.argv) > 1 else "London")
    print(f"Flow complete: {result}")
