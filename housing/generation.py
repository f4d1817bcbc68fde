"""
Inventory generation and housing-record conversion.

Builds rooms, tents, and pilgrims for demos and tests, and turns a saved
HousingRecord into a hotel or building. Pass a seeded random.Random for
reproducible output.
"""

from __future__ import annotations

import logging
import math
import random

from housing.errors import InvalidRecordError
from housing.inventory import occupied_beds
from housing.models import (
    Bed,
    Building,
    City,
    ContainerType,
    Gender,
    Hotel,
    HousingKind,
    HousingRecord,
    Pilgrim,
    Room,
    RoomAssignment,
    RoomGender,
    Tent,
    TentAssignment,
    TentLocation,
)
from housing.settings import HousingSettings, get_settings
from housing.store import HousingStore

logger = logging.getLogger(__name__)

NATIONALITIES = ("saudi", "egyptian", "pakistani", "indian", "indonesian", "turkish", "jordanian")
ROOM_GENDER_CYCLE = (RoomGender.MALE, RoomGender.FEMALE, RoomGender.MIXED)
TENT_PREFIX = {TentLocation.MINA: "M", TentLocation.ARAFAT: "A"}


def _rng(rng: random.Random | None, settings: HousingSettings) -> random.Random:
    return rng if rng is not None else random.Random(settings.random_seed)


def generate_beds(unit_id: str, total_beds: int, occupied: int, gender: Gender | None = None) -> list[Bed]:
    """Beds for one unit. The first ``occupied`` beds hold synthetic pilgrims.

    Args:
        unit_id: Id of the room or tent, used as the bed id prefix
        total_beds: Number of beds to create
        occupied: How many beds to fill (clamped to 0..total_beds)
        gender: Occupant gender for every filled bed; alternates male/female if None
    """
    occupied = max(0, min(occupied, total_beds))
    beds: list[Bed] = []
    for i in range(total_beds):
        bed_id = f"{unit_id}-bed-{i + 1}"
        if i < occupied:
            occupant_gender = gender or (Gender.MALE if i % 2 == 0 else Gender.FEMALE)
            beds.append(
                Bed(
                    id=bed_id,
                    occupied=True,
                    pilgrim_id=f"pilgrim-{unit_id}-{i + 1}",
                    pilgrim_name=f"Pilgrim {unit_id}-{i + 1}",
                    pilgrim_gender=occupant_gender,
                )
            )
        else:
            beds.append(Bed.empty(bed_id))
    return beds


def generate_rooms(
    parent_id: str,
    count: int,
    container_type: ContainerType,
    rng: random.Random | None = None,
    floors: int | None = None,
    settings: HousingSettings | None = None,
) -> list[Room]:
    """Rooms for a hotel or building, spread evenly over ``floors`` when given.

    Building rooms are numbered floor + two-digit position ("101", "102", ...);
    hotel rooms are numbered sequentially.
    """
    settings = settings or get_settings()
    rng = _rng(rng, settings)
    rooms_per_floor = math.ceil(count / floors) if floors else None

    rooms: list[Room] = []
    for i in range(count):
        room_id = f"{parent_id}-room-{i + 1}"
        total_beds = rng.randint(settings.room_min_beds, settings.room_max_beds)
        gender = ROOM_GENDER_CYCLE[i % len(ROOM_GENDER_CYCLE)]
        floor = i // rooms_per_floor + 1 if rooms_per_floor else None

        if container_type == ContainerType.BUILDING and floor is not None:
            room_number = f"{floor}{(i % rooms_per_floor) + 1:02d}"
        else:
            room_number = f"{i + 1}"

        occupant_gender = None if gender == RoomGender.MIXED else Gender(gender.value)
        rooms.append(
            Room(
                id=room_id,
                room_number=room_number,
                total_beds=total_beds,
                beds=generate_beds(room_id, total_beds, rng.randint(0, total_beds), occupant_gender),
                gender=gender,
                floor=floor,
                hotel_id=parent_id if container_type == ContainerType.HOTEL else None,
                building_id=parent_id if container_type == ContainerType.BUILDING else None,
            )
        )
    return rooms


def generate_tents(
    location: TentLocation,
    count: int,
    rng: random.Random | None = None,
    tents_per_section: int = 10,
    settings: HousingSettings | None = None,
) -> list[Tent]:
    settings = settings or get_settings()
    rng = _rng(rng, settings)

    tents: list[Tent] = []
    for i in range(count):
        tent_id = f"{location.value}-tent-{i + 1}"
        total_beds = rng.randint(settings.tent_min_beds, settings.tent_max_beds)
        tents.append(
            Tent(
                id=tent_id,
                tent_number=f"{TENT_PREFIX[location]}-{i + 1:03d}",
                total_beds=total_beds,
                beds=generate_beds(tent_id, total_beds, rng.randint(0, total_beds)),
                location=location,
                section=f"Section {i // tents_per_section + 1}",
            )
        )
    return tents


def generate_pilgrim(pilgrim_id: str, name: str, index: int, rng: random.Random, gender: Gender | None = None) -> Pilgrim:
    """One synthetic pilgrim; ``index`` drives the cycled attributes."""
    return Pilgrim(
        id=pilgrim_id,
        name=name,
        gender=gender or (Gender.MALE if index % 2 == 0 else Gender.FEMALE),
        age=rng.randint(25, 74),
        nationality=NATIONALITIES[index % len(NATIONALITIES)],
        bravo_code=f"BRV{index + 1:06d}",
        hawiya=f"{index + 1:010d}",
        phone=f"05{rng.randrange(100_000_000):08d}",
        email=f"pilgrim{index + 1}@example.com",
        service_center=f"Center {index % 10 + 1}",
        organizer=f"Organizer {index % 5 + 1}",
        group=f"Group {index % 20 + 1}",
        passport_number=f"P{rng.randrange(10_000_000):07d}",
        visa_number=f"V{rng.randrange(100_000_000):08d}",
    )


def _occupants_of_rooms(containers: list[Hotel] | list[Building], rng: random.Random, start: int) -> list[Pilgrim]:
    pilgrims: list[Pilgrim] = []
    for container in containers:
        container_type = ContainerType.HOTEL if isinstance(container, Hotel) else ContainerType.BUILDING
        for room in container.rooms:
            for bed in occupied_beds(room):
                pilgrim = generate_pilgrim(bed.pilgrim_id, bed.pilgrim_name, start + len(pilgrims), rng, bed.pilgrim_gender)
                link = RoomAssignment(
                    type=container_type,
                    hotel_id=room.hotel_id,
                    building_id=room.building_id,
                    room_id=room.id,
                    room_number=room.room_number,
                    bed_id=bed.id,
                )
                pilgrims.append(pilgrim.model_copy(update={"assigned_room": link}))
    return pilgrims


def _occupants_of_tents(tents: list[Tent], rng: random.Random, start: int) -> list[Pilgrim]:
    pilgrims: list[Pilgrim] = []
    for tent in tents:
        for bed in occupied_beds(tent):
            pilgrim = generate_pilgrim(bed.pilgrim_id, bed.pilgrim_name, start + len(pilgrims), rng, bed.pilgrim_gender)
            link = TentAssignment(location=tent.location, tent_id=tent.id, tent_number=tent.tent_number, bed_id=bed.id)
            pilgrims.append(pilgrim.model_copy(update={"assigned_tent": link}))
    return pilgrims


def generate_store(
    hotels: int = 2,
    buildings: int = 2,
    rooms_per_container: int = 50,
    mina_tents: int = 30,
    arafat_tents: int = 25,
    unassigned_pilgrims: int = 50,
    seed: int | None = None,
    settings: HousingSettings | None = None,
) -> HousingStore:
    """A complete, consistent store: every occupied bed's pilgrim exists in the
    directory with a matching reverse link, plus some pilgrims awaiting a bed.
    """
    settings = settings or get_settings()
    rng = random.Random(seed if seed is not None else settings.random_seed)

    hotel_list = [
        Hotel(
            id=f"hotel-{n}",
            name=f"Hotel {n}",
            location="Makkah",
            rooms=generate_rooms(f"hotel-{n}", rooms_per_container, ContainerType.HOTEL, rng, floors=5, settings=settings),
        )
        for n in range(1, hotels + 1)
    ]
    building_list = [
        Building(
            id=f"building-{n}",
            name=f"Residence Complex {n}",
            location="Makkah",
            floors=5,
            rooms=generate_rooms(
                f"building-{n}", rooms_per_container, ContainerType.BUILDING, rng, floors=5, settings=settings
            ),
        )
        for n in range(1, buildings + 1)
    ]
    mina = generate_tents(TentLocation.MINA, mina_tents, rng, settings=settings)
    arafat = generate_tents(TentLocation.ARAFAT, arafat_tents, rng, tents_per_section=8, settings=settings)

    pilgrims = _occupants_of_rooms(hotel_list, rng, 0)
    pilgrims.extend(_occupants_of_rooms(building_list, rng, len(pilgrims)))
    pilgrims.extend(_occupants_of_tents(mina + arafat, rng, len(pilgrims)))
    for _ in range(unassigned_pilgrims):
        index = len(pilgrims)
        pilgrims.append(generate_pilgrim(f"pilgrim-{index + 1}", f"Pilgrim {index + 1}", index, rng))

    logger.info(
        f"Generated {hotels} hotels, {buildings} buildings, {mina_tents + arafat_tents} tents, "
        f"{len(pilgrims)} pilgrims"
    )
    return HousingStore(hotel_list, building_list, mina, arafat, pilgrims)


def _room_count(record: HousingRecord) -> int:
    return record.reserved_rooms_before_hajj or record.housing_capacity // 3


def _location_label(record: HousingRecord) -> str:
    city = "Makkah" if record.city == City.MAKKAH else "Madinah"
    return f"{city}, {record.district}"


def hotel_from_record(
    record: HousingRecord, rng: random.Random | None = None, settings: HousingSettings | None = None
) -> Hotel:
    """Convert a hotel HousingRecord into a Hotel with generated rooms.

    Raises:
        InvalidRecordError: The record is not a hotel record
    """
    if record.type != HousingKind.HOTEL:
        raise InvalidRecordError(f"Record {record.id} is a {record.type.value} record, not a hotel")

    rooms = generate_rooms(
        record.id, _room_count(record), ContainerType.HOTEL, rng, floors=record.number_of_floors, settings=settings
    )
    return Hotel(
        id=record.id,
        name=record.housing_name,
        location=_location_label(record),
        rooms=rooms,
        housing_record_id=record.id,
    )


def building_from_record(
    record: HousingRecord, rng: random.Random | None = None, settings: HousingSettings | None = None
) -> Building:
    """Convert a building HousingRecord into a Building; rooms default to one floor.

    Raises:
        InvalidRecordError: The record is not a building record
    """
    if record.type != HousingKind.BUILDING:
        raise InvalidRecordError(f"Record {record.id} is a {record.type.value} record, not a building")

    floors = record.number_of_floors or 1
    rooms = generate_rooms(record.id, _room_count(record), ContainerType.BUILDING, rng, floors=floors, settings=settings)
    return Building(
        id=record.id,
        name=record.housing_name,
        location=_location_label(record),
        rooms=rooms,
        floors=floors,
        housing_record_id=record.id,
    )
