"""
Tests for the catalog cache façade.
"""

from __future__ import annotations

import pytest

from recreation_catalog.cache import CatalogCache
from recreation_catalog.config import Settings
from recreation_catalog.datasources.ridb import RidbClient
from recreation_catalog.errors import CatalogFetchError, MissingApiKeyError
from recreation_catalog.index import LookupType

from conftest import StubCatalog, make_campsite, make_facility


@pytest.fixture
def cache(catalog: StubCatalog) -> CatalogCache:
    catalog.add_facility(make_facility("232831", "Elk Lake"), sizes=[50, 50, 20])
    return CatalogCache(catalog)


class TestGetFacility:
    """Cache-or-fetch for facilities."""

    def test_second_call_served_from_cache(self, cache: CatalogCache, catalog: StubCatalog) -> None:
        """Second lookup does not hit the catalog."""
        first = cache.get_facility("232831")
        second = cache.get_facility("232831")
        assert first is not None
        assert second is first
        assert catalog.facility_calls == ["232831"]
        assert len(catalog.page_calls) == 3

    def test_refresh_always_fetches(self, cache: CatalogCache, catalog: StubCatalog) -> None:
        """refresh=True replaces the cached facility."""
        cache.get_facility("232831")
        catalog.facilities["232831"] = make_facility("232831", "Elk Lake", StayLimit="7 days")

        refreshed = cache.get_facility("232831", refresh=True)

        assert refreshed is not None
        assert refreshed.stay_limit == "7 days"
        assert catalog.facility_calls == ["232831", "232831"]
        assert cache.get_facility("232831") is refreshed
        assert cache.facilities.get("Elk Lake", LookupType.NAME) is refreshed

    def test_refresh_on_uncached_id(self, cache: CatalogCache, catalog: StubCatalog) -> None:
        """refresh=True on an uncached id fetches once."""
        facility = cache.get_facility("232831", refresh=True)
        assert facility is not None
        assert catalog.facility_calls == ["232831"]

    def test_campsites_indexed_individually(self, cache: CatalogCache) -> None:
        """Facility campsites land in the flat campsite index."""
        facility = cache.get_facility("232831")
        assert facility is not None
        assert cache.campsites.size == 120
        site = cache.campsites.get("232831-0")
        assert site is facility.campsites.get("232831-0")

    def test_indexed_by_name(self, cache: CatalogCache) -> None:
        """Cached facility is reachable by name."""
        facility = cache.get_facility("232831")
        assert cache.facilities.get("Elk Lake", LookupType.NAME) is facility

    def test_not_found_is_none_and_uncached(
        self, cache: CatalogCache, catalog: StubCatalog
    ) -> None:
        """Missing facility is not cached."""
        assert cache.get_facility("000000") is None
        assert cache.get_facility("000000") is None
        assert catalog.facility_calls == ["000000", "000000"]
        assert cache.facilities.size == 0

    def test_failure_propagates(self, cache: CatalogCache, catalog: StubCatalog) -> None:
        """Fetch errors propagate and nothing is cached."""
        catalog.fail_on.add("facility")
        with pytest.raises(CatalogFetchError):
            cache.get_facility("232831")
        assert cache.facilities.size == 0

    def test_failed_page_leaves_cache_unmodified(
        self, cache: CatalogCache, catalog: StubCatalog
    ) -> None:
        """Failed refresh keeps the previous entry."""
        original = cache.get_facility("232831")
        catalog.page_calls.clear()
        catalog.fail_on.add("page:2")

        with pytest.raises(CatalogFetchError):
            cache.get_facility("232831", refresh=True)

        assert cache.get_facility("232831") is original
        assert cache.campsites.size == 120

    def test_rename_on_refresh_drops_old_name(
        self, cache: CatalogCache, catalog: StubCatalog
    ) -> None:
        """Refresh under a new name drops the old name."""
        cache.get_facility("232831")
        catalog.facilities["232831"] = make_facility("232831", "Elk Lake Campground")
        cache.get_facility("232831", refresh=True)
        assert cache.facilities.get("Elk Lake", LookupType.NAME) is None
        assert cache.facilities.get("Elk Lake Campground", LookupType.NAME) is not None


class TestGetCampsite:
    """Cache-or-fetch for single campsites."""

    def test_fetch_then_cache(self, catalog: StubCatalog) -> None:
        """Campsite is fetched once then served from cache."""
        catalog.campsites["42"] = make_campsite("42", "Hike-in 42")
        cache = CatalogCache(catalog)
        first = cache.get_campsite("42")
        second = cache.get_campsite("42")
        assert first is not None
        assert second is first
        assert catalog.campsite_calls == ["42"]
        assert catalog.page_calls == []

    def test_refresh(self, catalog: StubCatalog) -> None:
        """refresh=True fetches the campsite again."""
        catalog.campsites["42"] = make_campsite("42", "Hike-in 42")
        cache = CatalogCache(catalog)
        cache.get_campsite("42")
        catalog.campsites["42"] = make_campsite("42", "Hike-in 42", CampsiteReservable=False)
        refreshed = cache.get_campsite("42", refresh=True)
        assert refreshed is not None
        assert refreshed.reservable is False
        assert catalog.campsite_calls == ["42", "42"]

    def test_served_from_facility_aggregation(
        self, cache: CatalogCache, catalog: StubCatalog
    ) -> None:
        """Campsites loaded with a facility need no extra request."""
        cache.get_facility("232831")
        site = cache.get_campsite("232831-5")
        assert site is not None
        assert catalog.campsite_calls == []

    def test_standalone_and_aggregated_share_entry(
        self, cache: CatalogCache, catalog: StubCatalog
    ) -> None:
        """Standalone and aggregated fetches share one entry."""
        standalone = cache.get_campsite("232831-7")
        assert standalone is not None
        assert cache.campsites.size == 1

        cache.get_facility("232831")

        assert cache.campsites.size == 120
        entry = cache.campsites.get("232831-7")
        assert entry is not None
        assert entry.campsite_id == standalone.campsite_id
        assert cache.get_campsite("232831-7") is entry
        assert cache.campsites.ids().count("232831-7") == 1

    def test_not_found(self, catalog: StubCatalog) -> None:
        """Missing campsite returns None and is not cached."""
        cache = CatalogCache(catalog)
        assert cache.get_campsite("nope") is None
        assert cache.campsites.size == 0

    def test_failure_propagates(self, catalog: StubCatalog) -> None:
        """Campsite fetch errors propagate."""
        catalog.fail_on.add("campsite")
        cache = CatalogCache(catalog)
        with pytest.raises(CatalogFetchError):
            cache.get_campsite("42")


class TestGetAllCampsites:
    """Facility campsites through the cache."""

    def test_returns_facility_campsites(self, cache: CatalogCache, catalog: StubCatalog) -> None:
        """Returns the campsites of a fetched facility."""
        sites = cache.get_all_campsites("232831")
        assert sites is not None
        assert sites.size == 120
        assert len(catalog.page_calls) == 3

    def test_uses_cached_facility(self, cache: CatalogCache, catalog: StubCatalog) -> None:
        """Cached facility's index is returned as is."""
        facility = cache.get_facility("232831")
        assert facility is not None
        assert cache.get_all_campsites("232831") is facility.campsites
        assert catalog.facility_calls == ["232831"]

    def test_empty_facility(self, catalog: StubCatalog) -> None:
        """Facility without campsites returns an empty index."""
        catalog.add_facility(make_facility("9", "Day Use Only"), sizes=[])
        cache = CatalogCache(catalog)
        sites = cache.get_all_campsites("9")
        assert sites is not None
        assert sites.size == 0
        assert len(catalog.page_calls) == 1

    def test_unknown_facility(self, catalog: StubCatalog) -> None:
        """Unknown facility returns None."""
        assert CatalogCache(catalog).get_all_campsites("nope") is None

    def test_ceiling_applies(self, catalog: StubCatalog) -> None:
        """Cache-level max_pages limits the fetch."""
        catalog.add_facility(make_facility("big", "Huge Campground"), sizes=[50] * 7)
        cache = CatalogCache(catalog, max_pages=3)
        sites = cache.get_all_campsites("big")
        assert sites is not None
        assert sites.size == 150
        assert len(catalog.page_calls) == 3


class TestLifecycle:
    """Construction and reset."""

    def test_clear(self, cache: CatalogCache, catalog: StubCatalog) -> None:
        """clear forces the next lookup to fetch."""
        cache.get_facility("232831")
        cache.clear()
        assert cache.facilities.size == 0
        assert cache.campsites.size == 0
        cache.get_facility("232831")
        assert catalog.facility_calls == ["232831", "232831"]

    def test_separate_caches_do_not_share_state(self, catalog: StubCatalog) -> None:
        """Two caches keep independent indexes."""
        catalog.add_facility(make_facility("1"), sizes=[3])
        a, b = CatalogCache(catalog), CatalogCache(catalog)
        a.get_facility("1")
        assert b.facilities.size == 0

    def test_from_settings(self) -> None:
        """Cache is built from settings."""
        settings = Settings(
            ridb_api_key="secret",
            ridb_base_url="https://ridb.example.test/api/v1",
            recgov_base_url="https://recgov.example.test",
            page_size=25,
            max_pages=3,
        )
        cache = CatalogCache.from_settings(settings)
        assert isinstance(cache.catalog, RidbClient)
        assert cache.catalog.base_url == "https://ridb.example.test/api/v1"
        assert cache.page_size == 25
        assert cache.max_pages == 3
        assert cache.display_base_url == "https://recgov.example.test"

    def test_from_settings_requires_key(self) -> None:
        """Missing API key is rejected."""
        with pytest.raises(MissingApiKeyError):
            CatalogCache.from_settings(Settings(ridb_api_key=""))
