"""
Domain models for the recreation catalog.

Pydantic models parsed straight from RIDB JSON. Field aliases carry the RIDB
names (``FacilityID``, ``PERMITTEDEQUIPMENT``, ...); attributes are
snake_case. Records are treated as immutable once cached: a refresh replaces
the whole record instead of patching fields.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recreation_catalog.index import DualIndexStore  # noqa: TC001 (pydantic resolves it at runtime)

_RIDB_CONFIG = ConfigDict(
    populate_by_name=True,
    coerce_numbers_to_str=True,
    str_strip_whitespace=True,
    extra="ignore",
)


def _blank_to_none(value: Any) -> Any:
    """RIDB sends "" for unknown numbers."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


# =============================================================================
# Campsites
# =============================================================================


class PermittedEquipment(BaseModel):
    """Equipment allowed on a campsite (tent, RV, trailer, ...)."""

    model_config = _RIDB_CONFIG

    name: str = Field(..., alias="EquipmentName")
    max_length: float | None = Field(default=None, alias="MaxLength")

    @field_validator("max_length", mode="before")
    @classmethod
    def blank_length(cls, value: Any) -> Any:
        return _blank_to_none(value)


class CampsiteAttribute(BaseModel):
    """Free-form campsite attribute, e.g. ``Driveway Surface: Paved``."""

    model_config = _RIDB_CONFIG

    name: str = Field(..., alias="AttributeName")
    value: str = Field(default="", alias="AttributeValue")


class CampsiteRecord(BaseModel):
    """A campsite as returned by RIDB."""

    model_config = _RIDB_CONFIG

    campsite_id: str = Field(..., alias="CampsiteID")
    facility_id: str | None = Field(default=None, alias="FacilityID")
    name: str = Field(..., alias="CampsiteName")
    latitude: float | None = Field(default=None, alias="CampsiteLatitude")
    longitude: float | None = Field(default=None, alias="CampsiteLongitude")
    reservable: bool = Field(default=False, alias="CampsiteReservable")
    type_of_use: str = Field(default="", alias="TypeOfUse")
    permitted_equipment: list[PermittedEquipment] = Field(
        default_factory=list, alias="PERMITTEDEQUIPMENT"
    )
    attributes: list[CampsiteAttribute] = Field(default_factory=list, alias="ATTRIBUTES")

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def blank_coordinates(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("permitted_equipment", "attributes", mode="before")
    @classmethod
    def null_lists(cls, value: Any) -> Any:
        return [] if value is None else value


class Campsite(CampsiteRecord):
    """A campsite with its recreation.gov display URL attached."""

    url: str

    def attribute(self, name: str) -> str | None:
        """Value of the named attribute, or None."""
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return None

    @property
    def equipment_names(self) -> list[str]:
        return [e.name for e in self.permitted_equipment]


class CampsitePage(BaseModel):
    """One page of ``/facilities/{id}/campsites`` results."""

    model_config = _RIDB_CONFIG

    total_count: int
    current_count: int
    limit: int = 0
    offset: int = 0
    query: str | None = None
    items: list[CampsiteRecord] = Field(default_factory=list)

    @classmethod
    def from_ridb(cls, payload: dict[str, Any]) -> CampsitePage:
        """Parse the RIDB ``METADATA`` / ``RECDATA`` envelope."""
        metadata = payload.get("METADATA") or {}
        results = metadata.get("RESULTS") or {}
        search = metadata.get("SEARCH_PARAMETERS") or {}
        return cls.model_validate(
            {
                "total_count": results.get("TOTAL_COUNT"),
                "current_count": results.get("CURRENT_COUNT"),
                "limit": search.get("LIMIT") or 0,
                "offset": search.get("OFFSET") or 0,
                "query": search.get("QUERY") or None,
                "items": payload.get("RECDATA") or [],
            }
        )


# =============================================================================
# Facilities
# =============================================================================


class FacilityRecord(BaseModel):
    """A recreation facility (campground) as returned by RIDB."""

    model_config = _RIDB_CONFIG

    facility_id: str = Field(..., alias="FacilityID")
    name: str = Field(..., alias="FacilityName")
    description: str = Field(default="", alias="FacilityDescription")
    phone: str = Field(default="", alias="FacilityPhone")
    email: str = Field(default="", alias="FacilityEmail")
    reservation_url: str = Field(default="", alias="FacilityReservationURL")
    map_url: str = Field(default="", alias="FacilityMapURL")
    latitude: float | None = Field(default=None, alias="FacilityLatitude")
    longitude: float | None = Field(default=None, alias="FacilityLongitude")
    stay_limit: str = Field(default="", alias="StayLimit")
    reservable: bool = Field(default=False, alias="Reservable")

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def blank_coordinates(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator(
        "description",
        "phone",
        "email",
        "reservation_url",
        "map_url",
        "stay_limit",
        mode="before",
    )
    @classmethod
    def null_strings(cls, value: Any) -> Any:
        return "" if value is None else value


class Facility(FacilityRecord):
    """A facility together with the campsites it owns."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    campsites: DualIndexStore = Field(exclude=True)

    @property
    def campsite_count(self) -> int:
        return self.campsites.size
