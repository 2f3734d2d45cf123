"""Views: display state -> something a person can look at.

Every view implements the ``WeatherView`` protocol from ``controller.py``.

  - page: HtmlPageView, a stateful HTML page rendered through Jinja2
  - terminal: TerminalView, prints to stdout/stderr for the CLI
  - date_utils: format_long_date for the date slot

Templates live in ``templates/`` and are rendered with ``render_template``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
