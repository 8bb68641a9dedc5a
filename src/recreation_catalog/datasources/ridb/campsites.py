"""Campsite fetching: single lookups and paginated aggregation per facility."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from recreation_catalog.datasources.ridb.client import MAX_PAGES, PAGE_SIZE, RECGOV_BASE_URL
from recreation_catalog.index import CampsiteIndex, campsite_index
from recreation_catalog.schemas import Campsite, CampsiteRecord

if TYPE_CHECKING:
    from recreation_catalog.datasources.ridb.client import RemoteCatalog

logger = logging.getLogger(__name__)


# =============================================================================
# Shaping
# =============================================================================


def campsite_display_url(campsite_id: str, base_url: str = RECGOV_BASE_URL) -> str:
    """Public recreation.gov page for a campsite."""
    return f"{base_url.rstrip('/')}/camping/campsites/{campsite_id}"


def produce_campsite(record: CampsiteRecord, base_url: str = RECGOV_BASE_URL) -> Campsite:
    """Attach the display URL to a raw RIDB campsite record."""
    return Campsite(
        **record.model_dump(),
        url=campsite_display_url(record.campsite_id, base_url),
    )


# =============================================================================
# API Fetching
# =============================================================================


def fetch_campsite(
    catalog: RemoteCatalog,
    campsite_id: str,
    query: str | None = None,
    *,
    display_base_url: str = RECGOV_BASE_URL,
) -> Campsite | None:
    """Fetch one campsite by identifier. None if the catalog has no such site."""
    record = catalog.fetch_campsite(campsite_id, query)
    if record is None:
        return None
    return produce_campsite(record, display_base_url)


def fetch_all_campsites(
    catalog: RemoteCatalog,
    facility_id: str,
    query: str | None = None,
    *,
    page_size: int = PAGE_SIZE,
    max_pages: int = MAX_PAGES,
    display_base_url: str = RECGOV_BASE_URL,
) -> CampsiteIndex:
    """
    Collect every campsite of a facility across result pages.

    Pages are requested one at a time until the collection holds the total
    the catalog reported on the first page, or ``max_pages`` requests have
    been made. Hitting the ceiling truncates the result silently (a warning
    is logged). Any failed page request propagates and nothing is returned.

    Args:
        catalog: Backend to page through.
        facility_id: Facility whose campsites to collect.
        query: Optional free-text filter passed to every page request.
        page_size: Campsites requested per page.
        max_pages: Maximum number of page requests, first page included.
        display_base_url: Base for each campsite's display URL.

    Returns:
        CampsiteIndex of the collected campsites; empty when the catalog
        reports a total of zero.
    """
    first = catalog.fetch_campsite_page(facility_id, offset=0, limit=page_size, query=query)
    total = first.total_count
    if total == 0:
        # No campsites, or the catalog failed and reported nothing
        logger.debug("Facility %s reports no campsites", facility_id)
        return campsite_index()

    campsites = campsite_index(produce_campsite(r, display_base_url) for r in first.items)
    pages = 1

    while campsites.size < total and pages < max_pages:
        page = catalog.fetch_campsite_page(
            facility_id, offset=pages * page_size, limit=page_size, query=query
        )
        pages += 1
        logger.debug(
            "Facility %s page %d: %d campsites (%d/%d collected)",
            facility_id,
            pages,
            page.current_count,
            campsites.size,
            total,
        )
        if page.current_count > 0:
            campsites.add_many(produce_campsite(r, display_base_url) for r in page.items)

    if campsites.size < total:
        logger.warning(
            "Facility %s: stopped after %d pages with %d of %d campsites",
            facility_id,
            pages,
            campsites.size,
            total,
        )
    return campsites
