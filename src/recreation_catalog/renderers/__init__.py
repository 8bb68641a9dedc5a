"""Pure rendering functions: catalog records -> HTML strings.

All renderers follow the same pattern:
  - Input: Facility / Campsite records (or an index of them)
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no catalog access, no Prefect decorators

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - facility: build_facility_html, build_facility_index_html
  - campsites: build_campsite_list_html
  - render_page: wrap a fragment in ``base.html.j2``
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


def render_page(title: str, content: str, updated: str = "") -> str:
    """Wrap an HTML fragment in the site's base page."""
    return render_template(
        "base.html.j2",
        title=title,
        content=content,
        updated=updated,
    )
