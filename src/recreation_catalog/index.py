"""Dual-key in-memory index.

A ``DualIndexStore`` holds one authoritative mapping keyed by identifier and
a secondary mapping keyed by name. Both are only ever mutated together, from
the same record, so a caller cannot update one view without the other::

    sites = campsite_index()
    sites.add(campsite)
    sites.get("1234") is sites.get("Loop A 001", LookupType.NAME)  # True

Facilities and campsites use the same store type with different key
functions; see ``facility_index`` and ``campsite_index``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from enum import StrEnum
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from recreation_catalog.schemas import Campsite, Facility

T = TypeVar("T")


class LookupType(StrEnum):
    """Which key a lookup or delete refers to."""

    ID = "id"
    NAME = "name"


class DualIndexStore(Generic[T]):
    """Items indexed by identifier and by name."""

    def __init__(
        self,
        id_of: Callable[[T], str],
        name_of: Callable[[T], str],
        items: Iterable[T] = (),
    ) -> None:
        self._id_of = id_of
        self._name_of = name_of
        self._by_id: dict[str, T] = {}
        self._by_name: dict[str, T] = {}
        self.add_many(items)

    @property
    def size(self) -> int:
        """Number of items, counted on the identifier index."""
        return len(self._by_id)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, key: object) -> bool:
        return key in self._by_id

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._by_id.values()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"

    def add(self, item: T) -> None:
        """Insert ``item`` under both keys, replacing any current occupant.

        When the identifier was held by an item with a different name, that
        item's name entry is dropped so it cannot linger under a stale key.
        """
        item_id = self._id_of(item)
        name = self._name_of(item)

        previous = self._by_id.get(item_id)
        if previous is not None:
            old_name = self._name_of(previous)
            if old_name != name and self._by_name.get(old_name) is previous:
                del self._by_name[old_name]

        self._by_id[item_id] = item
        self._by_name[name] = item

    def add_many(self, items: Iterable[T]) -> None:
        for item in items:
            self.add(item)

    def get(self, key: str, by: LookupType = LookupType.ID) -> T | None:
        """Return the item stored under ``key``, or None."""
        if by == LookupType.NAME:
            return self._by_name.get(key)
        return self._by_id.get(key)

    def delete(self, key: str, by: LookupType = LookupType.ID) -> None:
        """Remove the item stored under ``key`` from both indexes.

        Deleting a missing key is a no-op.
        """
        item = self.get(key, by)
        if item is None:
            return

        item_id = self._id_of(item)
        name = self._name_of(item)
        if self._by_id.get(item_id) is item:
            del self._by_id[item_id]
        if self._by_name.get(name) is item:
            del self._by_name[name]

    def clear(self) -> None:
        self._by_id.clear()
        self._by_name.clear()

    def values(self) -> list[T]:
        """Items in insertion order of their identifiers."""
        return list(self._by_id.values())

    def ids(self) -> list[str]:
        return list(self._by_id)

    def names(self) -> list[str]:
        return list(self._by_name)


# Type aliases for the two concrete indexes
FacilityIndex = DualIndexStore["Facility"]
CampsiteIndex = DualIndexStore["Campsite"]


def facility_index(items: Iterable[Facility] = ()) -> FacilityIndex:
    """Index facilities by ``facility_id`` and ``name``."""
    return DualIndexStore(lambda f: f.facility_id, lambda f: f.name, items)


def campsite_index(items: Iterable[Campsite] = ()) -> CampsiteIndex:
    """Index campsites by ``campsite_id`` and ``name``.

    Campsite names repeat across facilities ("001", "A12"), so in a flat
    index spanning several facilities the name view keeps the latest site
    added under each name. Deleting that site removes the name entirely; the
    name does not pass back to the site it displaced, which stays reachable
    by ``campsite_id`` only.
    """
    return DualIndexStore(lambda c: c.campsite_id, lambda c: c.name, items)
