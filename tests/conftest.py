"""Shared fixtures: a stub RemoteCatalog that counts its calls."""

from __future__ import annotations

from typing import Any

import pytest

from recreation_catalog.errors import CatalogFetchError
from recreation_catalog.schemas import CampsitePage, CampsiteRecord, FacilityRecord


def make_campsite(campsite_id: str, name: str | None = None, **extra: Any) -> CampsiteRecord:
    """Build a campsite record from RIDB-style fields."""
    payload: dict[str, Any] = {
        "CampsiteID": campsite_id,
        "CampsiteName": name or f"Site {campsite_id}",
        "CampsiteLatitude": 44.0,
        "CampsiteLongitude": -121.0,
        "CampsiteReservable": True,
        "TypeOfUse": "Overnight",
        "PERMITTEDEQUIPMENT": [{"EquipmentName": "Tent", "MaxLength": 0}],
        "ATTRIBUTES": [{"AttributeName": "Shade", "AttributeValue": "Yes"}],
    }
    payload.update(extra)
    return CampsiteRecord.model_validate(payload)


def make_facility(facility_id: str, name: str | None = None, **extra: Any) -> FacilityRecord:
    """Build a facility record from RIDB-style fields."""
    payload: dict[str, Any] = {
        "FacilityID": facility_id,
        "FacilityName": name or f"Facility {facility_id}",
        "FacilityDescription": "<p>Pine forest campground.</p>",
        "FacilityPhone": "541-555-0100",
        "FacilityEmail": "camp@example.com",
        "FacilityLatitude": 44.1,
        "FacilityLongitude": -121.2,
        "StayLimit": "14 days",
        "Reservable": True,
    }
    payload.update(extra)
    return FacilityRecord.model_validate(payload)


class StubCatalog:
    """In-memory RemoteCatalog with call counters.

    ``pages`` maps a facility ID to the list of page item lists served in
    order of offset. ``totals`` overrides the reported TOTAL_COUNT.
    """

    def __init__(self, page_size: int = 50) -> None:
        self.page_size = page_size
        self.facilities: dict[str, FacilityRecord] = {}
        self.pages: dict[str, list[list[CampsiteRecord]]] = {}
        self.totals: dict[str, int] = {}
        self.campsites: dict[str, CampsiteRecord] = {}
        self.fail_on: set[str] = set()
        self.facility_calls: list[str] = []
        self.page_calls: list[tuple[str, int, int, str | None]] = []
        self.campsite_calls: list[str] = []

    # -- setup helpers --------------------------------------------------------

    def add_facility(
        self, facility: FacilityRecord, sizes: list[int] | None = None, total: int | None = None
    ) -> None:
        """Register a facility whose campsites are split into pages of ``sizes``."""
        fid = facility.facility_id
        self.facilities[fid] = facility
        pages: list[list[CampsiteRecord]] = []
        n = 0
        for size in sizes or []:
            page = [make_campsite(f"{fid}-{n + i}", facility_id=fid) for i in range(size)]
            n += size
            pages.append(page)
        self.pages[fid] = pages
        self.totals[fid] = n if total is None else total

    @property
    def total_calls(self) -> int:
        return len(self.facility_calls) + len(self.page_calls) + len(self.campsite_calls)

    # -- RemoteCatalog ------------------------------------------------------

    def fetch_facility(self, facility_id: str) -> FacilityRecord | None:
        self.facility_calls.append(facility_id)
        if "facility" in self.fail_on:
            raise CatalogFetchError(f"stub://facilities/{facility_id}", "boom")
        return self.facilities.get(facility_id)

    def fetch_campsite_page(
        self,
        facility_id: str,
        offset: int = 0,
        limit: int = 50,
        query: str | None = None,
    ) -> CampsitePage:
        self.page_calls.append((facility_id, offset, limit, query))
        page_no = len([c for c in self.page_calls if c[0] == facility_id]) - 1
        if f"page:{page_no}" in self.fail_on:
            raise CatalogFetchError(f"stub://facilities/{facility_id}/campsites", "boom")
        pages = self.pages.get(facility_id, [])
        index = offset // limit if limit else 0
        items = pages[index] if index < len(pages) else []
        return CampsitePage(
            total_count=self.totals.get(facility_id, 0),
            current_count=len(items),
            limit=limit,
            offset=offset,
            query=query,
            items=items,
        )

    def fetch_campsite(self, campsite_id: str, query: str | None = None) -> CampsiteRecord | None:
        self.campsite_calls.append(campsite_id)
        if "campsite" in self.fail_on:
            raise CatalogFetchError(f"stub://campsites/{campsite_id}", "boom")
        if campsite_id in self.campsites:
            return self.campsites[campsite_id]
        for pages in self.pages.values():
            for page in pages:
                for record in page:
                    if record.campsite_id == campsite_id:
                        return record
        return None


@pytest.fixture
def catalog() -> StubCatalog:
    return StubCatalog()


@pytest.fixture
def facility_record() -> FacilityRecord:
    return make_facility("232831", "Elk Lake")
