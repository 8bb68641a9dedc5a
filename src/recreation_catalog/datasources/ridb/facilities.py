"""Facility fetching: base record plus its aggregated campsites."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recreation_catalog.datasources.ridb.campsites import fetch_all_campsites
from recreation_catalog.datasources.ridb.client import MAX_PAGES, PAGE_SIZE, RECGOV_BASE_URL
from recreation_catalog.schemas import Facility

if TYPE_CHECKING:
    from recreation_catalog.datasources.ridb.client import RemoteCatalog


def fetch_facility(
    catalog: RemoteCatalog,
    facility_id: str,
    *,
    page_size: int = PAGE_SIZE,
    max_pages: int = MAX_PAGES,
    display_base_url: str = RECGOV_BASE_URL,
) -> Facility | None:
    """Fetch a facility and all of its campsites.

    Returns None when the catalog has no such facility; campsites are not
    requested in that case.
    """
    record = catalog.fetch_facility(facility_id)
    if record is None:
        return None

    campsites = fetch_all_campsites(
        catalog,
        facility_id,
        page_size=page_size,
        max_pages=max_pages,
        display_base_url=display_base_url,
    )
    return Facility(**record.model_dump(), campsites=campsites)
