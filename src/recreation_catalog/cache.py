"""Process-local catalog cache.

``CatalogCache`` answers facility and campsite lookups from two in-memory
indexes and falls back to the remote catalog on a miss. Entries never expire;
pass ``refresh=True`` to fetch again and replace the cached record.

Lifecycle: build one cache when the process (or flow run) starts, pass it to
whatever needs catalog data, and let it die with the process. Nothing is
persisted. All calls are synchronous and sequential, so the indexes are
mutated without locking.

A failed fetch raises ``CatalogError`` and leaves the cache as it was.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from recreation_catalog.config import Settings, get_settings
from recreation_catalog.datasources.ridb import (
    MAX_PAGES,
    PAGE_SIZE,
    RECGOV_BASE_URL,
    RidbClient,
    fetch_campsite,
    fetch_facility,
)
from recreation_catalog.index import campsite_index, facility_index

if TYPE_CHECKING:
    from recreation_catalog.datasources.ridb import RemoteCatalog
    from recreation_catalog.index import CampsiteIndex, FacilityIndex
    from recreation_catalog.schemas import Campsite, Facility

logger = logging.getLogger(__name__)


class CatalogCache:
    """Cache-or-fetch access to facilities and campsites."""

    def __init__(
        self,
        catalog: RemoteCatalog,
        *,
        page_size: int = PAGE_SIZE,
        max_pages: int = MAX_PAGES,
        display_base_url: str = RECGOV_BASE_URL,
    ) -> None:
        self.catalog = catalog
        self.page_size = page_size
        self.max_pages = max_pages
        self.display_base_url = display_base_url
        self.facilities: FacilityIndex = facility_index()
        self.campsites: CampsiteIndex = campsite_index()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> CatalogCache:
        """Build a cache backed by an ``RidbClient`` configured from settings."""
        settings = settings or get_settings()
        return cls(
            RidbClient.from_settings(settings),
            page_size=settings.page_size,
            max_pages=settings.max_pages,
            display_base_url=settings.recgov_base_url,
        )

    def get_facility(self, facility_id: str, refresh: bool = False) -> Facility | None:
        """Return a facility with its campsites, fetching on miss or refresh.

        Every fetched campsite is also stored in the flat campsite index.
        Returns None when the catalog has no such facility.
        """
        if not refresh:
            cached = self.facilities.get(facility_id)
            if cached is not None:
                logger.debug("Facility %s served from cache", facility_id)
                return cached

        logger.info("Fetching facility %s (refresh=%s)", facility_id, refresh)
        facility = fetch_facility(
            self.catalog,
            facility_id,
            page_size=self.page_size,
            max_pages=self.max_pages,
            display_base_url=self.display_base_url,
        )
        if facility is None:
            logger.info("Facility %s not found", facility_id)
            return None

        for campsite in facility.campsites:
            self.campsites.add(campsite)
        self.facilities.add(facility)
        logger.info(
            "Cached facility %s (%s) with %d campsites",
            facility.facility_id,
            facility.name,
            facility.campsites.size,
        )
        return facility

    def get_campsite(self, campsite_id: str, refresh: bool = False) -> Campsite | None:
        """Return a campsite, fetching it on its own on miss or refresh."""
        if not refresh:
            cached = self.campsites.get(campsite_id)
            if cached is not None:
                logger.debug("Campsite %s served from cache", campsite_id)
                return cached

        logger.info("Fetching campsite %s (refresh=%s)", campsite_id, refresh)
        campsite = fetch_campsite(
            self.catalog, campsite_id, display_base_url=self.display_base_url
        )
        if campsite is None:
            logger.info("Campsite %s not found", campsite_id)
            return None

        self.campsites.add(campsite)
        return campsite

    def get_all_campsites(self, facility_id: str) -> CampsiteIndex | None:
        """Campsites of a facility, resolving the facility first if needed."""
        facility = self.get_facility(facility_id)
        if facility is None:
            return None
        return facility.campsites

    def clear(self) -> None:
        """Forget every cached facility and campsite."""
        self.facilities.clear()
        self.campsites.clear()
