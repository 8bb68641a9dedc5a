"""RIDB (recreation.gov) facility and campsite data source.

Public API:
  - client: RemoteCatalog protocol, RidbClient, URL builders, paging constants
  - campsites: fetch_campsite, fetch_all_campsites, produce_campsite
  - facilities: fetch_facility
"""

from recreation_catalog.datasources.ridb.campsites import (
    campsite_display_url,
    fetch_all_campsites,
    fetch_campsite,
    produce_campsite,
)
from recreation_catalog.datasources.ridb.client import (
    MAX_PAGES,
    PAGE_SIZE,
    RECGOV_BASE_URL,
    RIDB_BASE_URL,
    RemoteCatalog,
    RidbClient,
)
from recreation_catalog.datasources.ridb.facilities import fetch_facility

__all__ = [
    "MAX_PAGES",
    "PAGE_SIZE",
    "RECGOV_BASE_URL",
    "RIDB_BASE_URL",
    "RemoteCatalog",
    "RidbClient",
    "campsite_display_url",
    "fetch_all_campsites",
    "fetch_campsite",
    "fetch_facility",
    "produce_campsite",
]
