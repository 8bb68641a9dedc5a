"""Facility page renderer.

Builds the facility summary (contact, links, stay limit) shown above its
campsite list, and the index of all rendered facilities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recreation_catalog.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Iterable

    from recreation_catalog.schemas import Facility


def _map_link(lat: float | None, lon: float | None) -> str:
    """OpenStreetMap link for a coordinate pair, or empty if unknown."""
    if lat is None or lon is None:
        return ""
    return f"https://www.openstreetmap.org/?mlat={lat}&mlon={lon}#map=14/{lat}/{lon}"


def build_facility_html(facility: Facility, campsites_href: str = "") -> str:
    """Build the HTML summary for one facility."""
    return render_template(
        "facility.html.j2",
        facility=facility,
        map_link=_map_link(facility.latitude, facility.longitude),
        campsite_count=facility.campsites.size,
        campsites_href=campsites_href,
    )


def build_facility_index_html(facilities: Iterable[Facility]) -> str:
    """Build the list of facilities linking to their pages."""
    rows = [
        {
            "name": f.name,
            "href": f"facility/{f.facility_id}.html",
            "campsite_count": f.campsites.size,
            "reservable": f.reservable,
        }
        for f in sorted(facilities, key=lambda f: f.name)
    ]
    if not rows:
        return "<p>No facilities available.</p>"
    return render_template("facility_index.html.j2", facilities=rows)
