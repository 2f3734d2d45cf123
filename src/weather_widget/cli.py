"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import functools
import http.server
import logging
import sys

from weather_widget import __version__
from weather_widget.config import get_settings
from weather_widget.controller import AppController
from weather_widget.datasources.openweather import WeatherClient
from weather_widget.display import DisplayStateStore
from weather_widget.flows.snapshot import render_snapshot
from weather_widget.renderers.terminal import TerminalView
from weather_widget.schemas import RequestState, UnitMode
from weather_widget.services.http import create_session
from weather_widget.store import JsonFileStore
from weather_widget.theme import ThemeController


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-widget",
        description="Current weather lookup with unit and theme toggles",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    lookup_parser = subparsers.add_parser("lookup", help="Show current weather for a location")
    lookup_parser.add_argument("location", help="City name, e.g. 'London' or 'Paris,FR'")
    _add_units_argument(lookup_parser)

    theme_parser = subparsers.add_parser("theme", help="Show or toggle the saved theme")
    theme_parser.add_argument(
        "action",
        nargs="?",
        choices=["show", "toggle"],
        default="show",
        help="Action (default: show)",
    )

    render_parser = subparsers.add_parser("render", help="Write a static weather page")
    render_parser.add_argument("location", help="City name")
    _add_units_argument(render_parser)

    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def _add_units_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--units",
        type=UnitMode,
        choices=list(UnitMode),
        default=None,
        help="Unit system (default: default_units from settings)",
    )


def configure_logging(debug: bool = False) -> None:
    settings = get_settings()
    level = logging.DEBUG if debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"API key configured: {settings.has_credentials}")
    print(f"Default units: {settings.default_units}")
    print(f"Preferences: {settings.prefs_path}")
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Handle the 'lookup' command: one search through the controller."""
    settings = get_settings()
    units = args.units or settings.default_units

    view = TerminalView()
    client = WeatherClient(
        settings.api_key,
        api_url=settings.api_url,
        session=create_session(timeout=settings.request_timeout),
    )
    controller = AppController(
        provider=client,
        view=view,
        theme=ThemeController(JsonFileStore(settings.prefs_path), surface=view),
        display=DisplayStateStore(units),
        has_credentials=settings.has_credentials,
    )
    controller.start()

    state = asyncio.run(controller.submit_search(args.location))
    return 0 if state is RequestState.DISPLAYING else 1


def cmd_theme(args: argparse.Namespace) -> int:
    """Handle the 'theme' command."""
    settings = get_settings()
    theme = ThemeController(JsonFileStore(settings.prefs_path))
    theme.initialize()
    if args.action == "toggle":
        theme.toggle()

    glyph, label = theme.toggle_label()
    print(f"Theme: {theme.current} (toggle offers {glyph} {label})")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Handle the 'render' command: write site/index.html."""
    settings = get_settings()
    units = args.units or settings.default_units
    result = render_snapshot(args.location, units)
    return 0 if result.get("status") == "ok" else 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.site_dir

    if not site_dir.exists():
        print("No site directory found. Run 'weather-widget render' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "lookup": cmd_lookup,
        "theme": cmd_theme,
        "render": cmd_render,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
