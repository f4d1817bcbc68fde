from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

# Bed count bounds per unit type
ROOM_BED_RANGE = (2, 4)
TENT_BED_RANGE = (10, 50)


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class RoomGender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    MIXED = "mixed"


class TentLocation(str, Enum):
    MINA = "mina"
    ARAFAT = "arafat"


class ContainerType(str, Enum):
    HOTEL = "hotel"
    BUILDING = "building"


class HousingKind(str, Enum):
    """Every kind of housing site a record or a store view can refer to."""

    HOTEL = "hotel"
    BUILDING = "building"
    MINA = "mina"
    ARAFAT = "arafat"


class City(str, Enum):
    MAKKAH = "makkah"
    MADINAH = "madinah"


class Bed(BaseModel):
    """A single bed. Occupant fields are present only while the bed is occupied."""

    id: str
    occupied: bool = False
    pilgrim_id: str | None = None
    pilgrim_name: str | None = None
    pilgrim_gender: Gender | None = None

    @model_validator(mode="after")
    def check_occupant_fields(self) -> Bed:
        has_occupant_data = any(
            value is not None for value in (self.pilgrim_id, self.pilgrim_name, self.pilgrim_gender)
        )
        if not self.occupied and has_occupant_data:
            raise ValueError(f"Bed {self.id} is empty but carries occupant data")
        if self.occupied and not self.pilgrim_name:
            raise ValueError(f"Bed {self.id} is occupied but has no pilgrim name")
        return self

    @classmethod
    def empty(cls, bed_id: str) -> Bed:
        return cls(id=bed_id, occupied=False)


class Room(BaseModel):
    id: str
    room_number: str
    total_beds: int = Field(ge=ROOM_BED_RANGE[0], le=ROOM_BED_RANGE[1])
    beds: list[Bed] = Field(default_factory=list)
    gender: RoomGender = RoomGender.MIXED
    floor: int | None = None
    hotel_id: str | None = None
    building_id: str | None = None

    @model_validator(mode="after")
    def check_single_parent(self) -> Room:
        if self.hotel_id is not None and self.building_id is not None:
            raise ValueError(f"Room {self.id} cannot belong to both a hotel and a building")
        return self

    @property
    def parent_id(self) -> str | None:
        return self.hotel_id if self.hotel_id is not None else self.building_id


class Tent(BaseModel):
    id: str
    tent_number: str
    total_beds: int = Field(ge=TENT_BED_RANGE[0], le=TENT_BED_RANGE[1])
    beds: list[Bed] = Field(default_factory=list)
    location: TentLocation
    section: str | None = None


# Anything that holds beds directly
Unit = Room | Tent


class Hotel(BaseModel):
    id: str
    name: str
    location: str = ""
    rooms: list[Room] = Field(default_factory=list)
    housing_record_id: str | None = None

    @property
    def total_rooms(self) -> int:
        return len(self.rooms)


class Building(BaseModel):
    id: str
    name: str
    location: str = ""
    rooms: list[Room] = Field(default_factory=list)
    floors: int | None = None
    housing_record_id: str | None = None

    @property
    def total_rooms(self) -> int:
        return len(self.rooms)


Container = Hotel | Building


class RoomAssignment(BaseModel):
    """Reverse link from a pilgrim to the hotel or building bed they occupy."""

    type: ContainerType
    hotel_id: str | None = None
    building_id: str | None = None
    room_id: str
    room_number: str
    bed_id: str


class TentAssignment(BaseModel):
    """Reverse link from a pilgrim to the tent bed they occupy."""

    location: TentLocation
    tent_id: str
    tent_number: str
    bed_id: str


class Pilgrim(BaseModel):
    id: str
    name: str
    gender: Gender
    age: int = Field(ge=0)
    nationality: str
    phone: str | None = None
    email: str | None = None
    organizer: str | None = None
    group: str | None = None
    passport_number: str | None = None
    visa_number: str | None = None
    service_center: str | None = None
    hawiya: str | None = None  # national id
    bravo_code: str | None = None
    assigned_room: RoomAssignment | None = None
    assigned_tent: TentAssignment | None = None

    @model_validator(mode="after")
    def check_single_assignment(self) -> Pilgrim:
        if self.assigned_room is not None and self.assigned_tent is not None:
            raise ValueError(f"Pilgrim {self.id} cannot be assigned to a room and a tent at once")
        return self

    @property
    def is_assigned(self) -> bool:
        return self.assigned_room is not None or self.assigned_tent is not None


class HousingRecord(BaseModel):
    """Registration form for a housing site, as captured by the add-housing screen."""

    id: str
    type: HousingKind
    housing_name: str
    license_number: str = ""
    city: City = City.MAKKAH
    district: str = ""
    full_address: str = ""
    housing_capacity: int = Field(ge=0)
    number_of_floors: int | None = Field(default=None, ge=1)
    reserved_rooms_before_hajj: int | None = Field(default=None, ge=0)
    reserved_rooms_after_hajj: int | None = Field(default=None, ge=0)
    check_in_date: str | None = None
    check_out_date: str | None = None
