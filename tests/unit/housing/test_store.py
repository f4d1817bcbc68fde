"""Tests for HousingStore routing."""

from __future__ import annotations

import logging

import pytest

from housing.errors import ContainerNotFoundError, UnitNotFoundError
from housing.filters import FilterState
from housing.models import Bed, Building, Hotel, HousingKind, Room, TentLocation
from housing.store import HousingStore


@pytest.fixture
def store(make_room, make_tent, ali, sara, waiting):
    hotel = Hotel(id="hotel-1", name="Hotel 1", rooms=[make_room("101", occupants=[ali]), make_room("102")])
    building = Building(
        id="building-1",
        name="Residence 1",
        floors=2,
        rooms=[make_room("201", hotel_id=None, building_id="building-1", floor=2)],
    )
    return HousingStore(
        hotels=[hotel],
        buildings=[building],
        mina_tents=[make_tent("M-001", occupants=[sara])],
        arafat_tents=[make_tent("A-001", location=TentLocation.ARAFAT)],
        pilgrims=[ali, sara, waiting],
    )


class TestHousingStoreViews:
    """Units, filters, and stats per view."""

    def test_units_per_view(self, store):
        """Each kind resolves to its own unit list."""
        assert len(store.units(HousingKind.HOTEL, "hotel-1")) == 2
        assert len(store.units(HousingKind.BUILDING, "building-1")) == 1
        assert store.units(HousingKind.MINA) is store.mina_tents
        assert store.units(HousingKind.ARAFAT) is store.arafat_tents

    def test_container_id_required_for_rooms(self, store):
        """Room views need a hotel or building id."""
        with pytest.raises(ContainerNotFoundError):
            store.units(HousingKind.HOTEL)

    def test_unknown_container(self, store):
        """Unknown ids raise."""
        with pytest.raises(ContainerNotFoundError):
            store.container(HousingKind.BUILDING, "nope")

    def test_filter_and_stats(self, store):
        """Views feed the filter engine and aggregation."""
        empty = store.filter(HousingKind.HOTEL, FilterState(empty_only=True), "hotel-1")
        assert [room.room_number for room in empty] == ["102"]

        stats = store.stats(HousingKind.MINA)
        assert stats.occupied_beds == 1
        assert stats.total_beds == 10

    def test_overview(self, store):
        """Overview spans every site."""
        overview = store.overview()
        assert overview.total_housed == 2
        assert overview.total_capacity == 4 + 4 + 4 + 10 + 10


class TestHousingStoreAssign:
    """Assignment through the store."""

    def test_assign_updates_view_and_directory(self, store):
        """The container's room list and the directory both change."""
        result = store.assign(HousingKind.HOTEL, "102", "room-102-bed-1", "p-wait", container_id="hotel-1")

        assert result.changed is True
        assert store.container(HousingKind.HOTEL, "hotel-1").rooms[1].beds[0].pilgrim_id == "p-wait"
        assert store.directory.find("p-wait").assigned_room.hotel_id == "hotel-1"

    def test_assign_to_tent(self, store):
        """Tent views need no container id."""
        store.assign(HousingKind.ARAFAT, "A-001", "tent-A-001-bed-3", "p-wait")
        assert store.directory.find("p-wait").assigned_tent.location == TentLocation.ARAFAT

    def test_unit_from_another_view(self, store):
        """Unit numbers resolve only within the addressed view."""
        with pytest.raises(UnitNotFoundError):
            store.assign(HousingKind.MINA, "A-001", "tent-A-001-bed-1", "p-wait")


class TestHousingStoreMaintenance:
    """Adding containers and tents."""

    def test_add_container_replaces_same_id(self, store):
        """A container with a known id replaces the old one."""
        store.add_container(Hotel(id="hotel-1", name="Renamed"))
        store.add_container(Hotel(id="hotel-2", name="Second"))
        assert [h.name for h in store.hotels] == ["Renamed", "Second"]

    def test_add_tents_routes_by_location(self, store, make_tent):
        """Tents land in their location's list."""
        store.add_tents([make_tent("M-002"), make_tent("A-002", location=TentLocation.ARAFAT)])
        assert [t.tent_number for t in store.mina_tents] == ["M-001", "M-002"]
        assert [t.tent_number for t in store.arafat_tents] == ["A-001", "A-002"]


class TestMalformedUnits:
    """Rooms storing more beds than they hold."""

    def test_warned_once_on_entry(self, caplog):
        """The warning fires when the store takes the room, not on every filter or stats pass."""
        room = Room(id="r", room_number="101", total_beds=2, beds=[Bed.empty(f"r-bed-{i}") for i in range(1, 5)])
        with caplog.at_level(logging.WARNING, logger="housing.inventory"):
            store = HousingStore(hotels=[Hotel(id="hotel-1", name="H", rooms=[room])])
            store.filter(HousingKind.HOTEL, FilterState(empty_only=True), "hotel-1")
            stats = store.stats(HousingKind.HOTEL, "hotel-1")

        assert len(caplog.records) == 1
        assert stats.total_beds == 2
        assert stats.available_beds == 2

    def test_added_containers_and_tents_are_checked(self, make_tent, caplog):
        """Units arriving through add_container and add_tents are checked too."""
        store = HousingStore()
        room = Room(id="r", room_number="101", total_beds=2, beds=[Bed.empty(f"r-bed-{i}") for i in range(1, 4)])
        tent = make_tent("M-009").model_copy(
            update={"beds": [Bed.empty(f"tent-M-009-bed-{i}") for i in range(1, 12)]}
        )
        with caplog.at_level(logging.WARNING, logger="housing.inventory"):
            store.add_container(Hotel(id="hotel-9", name="H", rooms=[room]))
            store.add_tents([tent])

        assert len(caplog.records) == 2
