"""
Shared factories for housing unit tests.

Fixtures return builder functions so each test can describe exactly the
rooms, tents, and pilgrims it needs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from housing.directory import PilgrimDirectory
from housing.models import Bed, Gender, Pilgrim, Room, RoomGender, Tent, TentLocation


def occupied_bed(bed_id: str, pilgrim: Pilgrim) -> Bed:
    return Bed(
        id=bed_id,
        occupied=True,
        pilgrim_id=pilgrim.id,
        pilgrim_name=pilgrim.name,
        pilgrim_gender=pilgrim.gender,
    )


def create_pilgrim(
    pilgrim_id: str = "p-1",
    name: str = "Ali Hassan",
    gender: Gender = Gender.MALE,
    nationality: str = "EG",
    **extra: Any,
) -> Pilgrim:
    return Pilgrim(id=pilgrim_id, name=name, gender=gender, age=40, nationality=nationality, **extra)


def create_room(
    room_number: str = "101",
    total_beds: int = 4,
    occupants: list[Pilgrim] | None = None,
    gender: RoomGender = RoomGender.MIXED,
    floor: int | None = 1,
    hotel_id: str | None = "hotel-1",
    building_id: str | None = None,
) -> Room:
    room_id = f"room-{room_number}"
    beds = [occupied_bed(f"{room_id}-bed-{i + 1}", p) for i, p in enumerate(occupants or [])]
    beds.extend(Bed.empty(f"{room_id}-bed-{i + 1}") for i in range(len(beds), total_beds))
    return Room(
        id=room_id,
        room_number=room_number,
        total_beds=total_beds,
        beds=beds,
        gender=gender,
        floor=floor,
        hotel_id=hotel_id,
        building_id=building_id,
    )


def create_tent(
    tent_number: str = "M-001",
    total_beds: int = 10,
    occupants: list[Pilgrim] | None = None,
    location: TentLocation = TentLocation.MINA,
    section: str | None = "Section 1",
    pad: bool = True,
) -> Tent:
    """Tent whose first beds hold ``occupants``; with pad=False only those beds are stored."""
    tent_id = f"tent-{tent_number}"
    beds = [occupied_bed(f"{tent_id}-bed-{i + 1}", p) for i, p in enumerate(occupants or [])]
    if pad:
        beds.extend(Bed.empty(f"{tent_id}-bed-{i + 1}") for i in range(len(beds), total_beds))
    return Tent(
        id=tent_id,
        tent_number=tent_number,
        total_beds=total_beds,
        beds=beds,
        location=location,
        section=section,
    )


@pytest.fixture
def make_pilgrim() -> Callable[..., Pilgrim]:
    return create_pilgrim


@pytest.fixture
def make_room() -> Callable[..., Room]:
    return create_room


@pytest.fixture
def make_tent() -> Callable[..., Tent]:
    return create_tent


@pytest.fixture
def make_bed() -> Callable[[str, Pilgrim], Bed]:
    return occupied_bed


@pytest.fixture
def ali() -> Pilgrim:
    return create_pilgrim(
        "p-ali",
        "Ali",
        Gender.MALE,
        "EG",
        phone="0501234567",
        email="ali@example.com",
        organizer="Organizer 7",
        passport_number="A1234567",
        visa_number="V0001",
    )


@pytest.fixture
def sara() -> Pilgrim:
    return create_pilgrim(
        "p-sara",
        "Sara",
        Gender.FEMALE,
        "SA",
        phone="0559876543",
        email="sara@example.com",
        organizer="Organizer 2",
        passport_number="B7654321",
        visa_number="V0002",
    )


@pytest.fixture
def waiting() -> Pilgrim:
    """A pilgrim with no bed yet."""
    return create_pilgrim("p-wait", "Omar Waiting", Gender.MALE, "PK", phone="0540000000", email="omar@example.com")


@pytest.fixture
def directory(ali: Pilgrim, sara: Pilgrim, waiting: Pilgrim) -> PilgrimDirectory:
    return PilgrimDirectory([ali, sara, waiting])
