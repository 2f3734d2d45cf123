"""Date formatting for the date slot."""

from __future__ import annotations

from datetime import date


def format_long_date(day: date) -> str:
    """US-style long date, e.g. ``Monday, October 19, 2026``.

    Built by hand rather than with ``%-d`` so the day has no leading zero
    on every platform.
    """
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"
