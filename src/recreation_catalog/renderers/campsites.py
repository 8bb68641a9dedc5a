"""Campsite list renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recreation_catalog.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Iterable

    from recreation_catalog.schemas import Campsite


def _equipment_label(campsite: Campsite) -> str:
    parts = []
    for eq in campsite.permitted_equipment:
        if eq.max_length:
            parts.append(f"{eq.name} ({eq.max_length:g} ft)")
        else:
            parts.append(eq.name)
    return ", ".join(parts)


def build_campsite_list_html(campsites: Iterable[Campsite], title: str = "Campsites") -> str:
    """Build an HTML table of campsites sorted by name."""
    sites = sorted(campsites, key=lambda c: (c.name, c.campsite_id))
    if not sites:
        return "<p>No campsites available.</p>"

    rows = [
        {
            "name": site.name,
            "url": site.url,
            "type_of_use": site.type_of_use,
            "reservable": site.reservable,
            "equipment": _equipment_label(site),
            "attributes": [(a.name, a.value) for a in site.attributes],
        }
        for site in sites
    ]
    return render_template("campsites.html.j2", title=title, campsites=rows)
