"""
RIDB (Recreation Information Database) API client.

Low-level HTTP client for the recreation.gov catalog API v1. Every request
is a GET carrying the ``apikey`` header; responses are parsed into the
records in ``recreation_catalog.schemas``.

API docs: https://ridb.recreation.gov/docs
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

import requests
from pydantic import ValidationError

from recreation_catalog.errors import CatalogFetchError, MissingApiKeyError
from recreation_catalog.schemas import CampsitePage, CampsiteRecord, FacilityRecord
from recreation_catalog.services.http import DEFAULT_TIMEOUT, build_retry, create_session

if TYPE_CHECKING:
    from recreation_catalog.config import Settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
RIDB_BASE_URL = "https://ridb.recreation.gov/api/v1"
RECGOV_BASE_URL = "https://www.recreation.gov"
PAGE_SIZE = 50  # campsites per page in the aggregation path
MAX_PAGES = 5  # page ceiling per aggregation (first page included)


class RemoteCatalog(Protocol):
    """What the cache needs from a catalog backend."""

    def fetch_facility(self, facility_id: str) -> FacilityRecord | None: ...

    def fetch_campsite_page(
        self,
        facility_id: str,
        offset: int = 0,
        limit: int = PAGE_SIZE,
        query: str | None = None,
    ) -> CampsitePage: ...

    def fetch_campsite(
        self, campsite_id: str, query: str | None = None
    ) -> CampsiteRecord | None: ...


# ---------------------------------------------------------------------------
# URL builders
# ---------------------------------------------------------------------------


def facility_url(base_url: str, facility_id: str) -> str:
    return f"{base_url.rstrip('/')}/facilities/{facility_id}"


def facility_campsites_url(base_url: str, facility_id: str) -> str:
    return f"{facility_url(base_url, facility_id)}/campsites"


def campsite_url(base_url: str, campsite_id: str) -> str:
    return f"{base_url.rstrip('/')}/campsites/{campsite_id}"


class RidbClient:
    """``RemoteCatalog`` backed by the RIDB REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = RIDB_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        if not api_key:
            raise MissingApiKeyError
        self.base_url = base_url
        self.session = session or create_session()
        self.session.headers["Accept"] = "application/json"
        self.session.headers["apikey"] = api_key

    @classmethod
    def from_settings(cls, settings: Settings) -> RidbClient:
        session = create_session(
            retry=build_retry(settings.max_retries),
            timeout=settings.request_timeout or DEFAULT_TIMEOUT,
        )
        return cls(settings.ridb_api_key, base_url=settings.ridb_base_url, session=session)

    def _get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``url`` and decode JSON. Returns None on 404."""
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params or {})
            if resp.status_code == requests.codes.not_found:
                return None
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as exc:
            raise CatalogFetchError(url, str(exc)) from exc
        except ValueError as exc:  # body was not JSON
            raise CatalogFetchError(url, f"invalid JSON: {exc}") from exc

    # -----------------------------------------------------------------------
    # RemoteCatalog
    # -----------------------------------------------------------------------

    def fetch_facility(self, facility_id: str) -> FacilityRecord | None:
        """GET /facilities/{id}?full=true. None if RIDB has no such facility."""
        url = facility_url(self.base_url, facility_id)
        data = self._get(url, {"full": "true"})
        if not data:
            return None
        try:
            return FacilityRecord.model_validate(data)
        except ValidationError as exc:
            raise CatalogFetchError(url, f"malformed facility: {exc}") from exc

    def fetch_campsite_page(
        self,
        facility_id: str,
        offset: int = 0,
        limit: int = PAGE_SIZE,
        query: str | None = None,
    ) -> CampsitePage:
        """GET /facilities/{id}/campsites for one page of results."""
        url = facility_campsites_url(self.base_url, facility_id)
        params: dict[str, Any] = {"offset": offset, "limit": limit}
        if query:
            params["query"] = query
        data = self._get(url, params)
        if data is None:
            return CampsitePage(total_count=0, current_count=0, limit=limit, offset=offset)
        if not isinstance(data, dict):
            raise CatalogFetchError(url, f"expected an object, got {type(data).__name__}")
        try:
            return CampsitePage.from_ridb(data)
        except ValidationError as exc:
            raise CatalogFetchError(url, f"malformed campsite page: {exc}") from exc

    def fetch_campsite(
        self, campsite_id: str, query: str | None = None
    ) -> CampsiteRecord | None:
        """GET /campsites/{id}. None if RIDB has no such campsite."""
        url = campsite_url(self.base_url, campsite_id)
        data = self._get(url, {"query": query} if query else None)
        if not data:
            return None
        try:
            return CampsiteRecord.model_validate(data)
        except ValidationError as exc:
            raise CatalogFetchError(url, f"malformed campsite: {exc}") from exc
