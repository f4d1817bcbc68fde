"""
Bed assignment - bind a pilgrim to one bed of a room or tent.

The bed and the pilgrim's reverse link are updated together. Every
precondition is checked before anything is written, and both records are
swapped in as new copies, so callers never observe a half-applied assignment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from housing.directory import PilgrimDirectory
from housing.errors import (
    BedAlreadyOccupiedError,
    BedNotFoundError,
    PilgrimAlreadyAssignedError,
    PilgrimNotFoundError,
    UnitNotFoundError,
)
from housing.inventory import beds_of, unit_number
from housing.models import Bed, ContainerType, Pilgrim, Room, RoomAssignment, TentAssignment, Unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssignmentResult:
    """Outcome of an assignment. changed is False when it was already in place."""

    unit: Unit
    bed: Bed
    pilgrim: Pilgrim
    changed: bool


def _locate_unit(units: list[Unit], number: str) -> int:
    for position, unit in enumerate(units):
        if unit_number(unit) == number:
            return position
    raise UnitNotFoundError(number)


def _linked_bed(pilgrim: Pilgrim) -> tuple[str, str] | None:
    """(unit id, bed id) the pilgrim's reverse link points at, if any."""
    if pilgrim.assigned_room is not None:
        return pilgrim.assigned_room.room_id, pilgrim.assigned_room.bed_id
    if pilgrim.assigned_tent is not None:
        return pilgrim.assigned_tent.tent_id, pilgrim.assigned_tent.bed_id
    return None


def _link_pilgrim(pilgrim: Pilgrim, unit: Unit, bed_id: str) -> Pilgrim:
    if isinstance(unit, Room):
        link = RoomAssignment(
            type=ContainerType.BUILDING if unit.building_id is not None else ContainerType.HOTEL,
            hotel_id=unit.hotel_id,
            building_id=unit.building_id,
            room_id=unit.id,
            room_number=unit.room_number,
            bed_id=bed_id,
        )
        return pilgrim.model_copy(update={"assigned_room": link, "assigned_tent": None})

    link = TentAssignment(
        location=unit.location,
        tent_id=unit.id,
        tent_number=unit.tent_number,
        bed_id=bed_id,
    )
    return pilgrim.model_copy(update={"assigned_tent": link, "assigned_room": None})


def assign_pilgrim(
    units: list[Unit],
    number: str,
    bed_id: str,
    pilgrim_id: str,
    directory: PilgrimDirectory,
) -> AssignmentResult:
    """Assign a pilgrim to a bed within the unit carrying the given number.

    The matching entry of ``units`` is replaced with an updated copy and the
    pilgrim record in ``directory`` gains its reverse link. Padded beds (see
    beds_of) are assignable; the stored bed list is normalized on write.

    Args:
        units: Rooms of one hotel/building, or tents of one location. Updated in place.
        number: Room number or tent number
        bed_id: Bed id within that unit
        pilgrim_id: Directory id of the pilgrim
        directory: Pilgrim directory. Updated in place.

    Returns:
        AssignmentResult with the new unit, bed, and pilgrim records

    Raises:
        PilgrimNotFoundError: pilgrim_id does not resolve
        UnitNotFoundError: no unit carries that number
        BedNotFoundError: bed_id is not one of the unit's beds
        BedAlreadyOccupiedError: the bed holds a different pilgrim
        PilgrimAlreadyAssignedError: the pilgrim holds a different bed
    """
    pilgrim = directory.find(pilgrim_id)
    if pilgrim is None:
        raise PilgrimNotFoundError(pilgrim_id)

    position = _locate_unit(units, number)
    unit = units[position]
    beds = beds_of(unit)

    bed_index = next((i for i, bed in enumerate(beds) if bed.id == bed_id), None)
    if bed_index is None:
        raise BedNotFoundError(number, bed_id)
    bed = beds[bed_index]

    if bed.occupied and bed.pilgrim_id != pilgrim.id:
        raise BedAlreadyOccupiedError(number, bed_id, bed.pilgrim_id or bed.pilgrim_name)

    linked = _linked_bed(pilgrim)
    if linked is not None and linked != (unit.id, bed_id):
        raise PilgrimAlreadyAssignedError(pilgrim.id, linked[1])

    if bed.occupied and linked is not None:
        logger.debug(f"Pilgrim {pilgrim.id} already holds bed {bed_id} in unit {number}")
        return AssignmentResult(unit=unit, bed=bed, pilgrim=pilgrim, changed=False)

    new_bed = Bed(
        id=bed.id,
        occupied=True,
        pilgrim_id=pilgrim.id,
        pilgrim_name=pilgrim.name,
        pilgrim_gender=pilgrim.gender,
    )
    beds[bed_index] = new_bed
    new_unit = unit.model_copy(update={"beds": beds})
    new_pilgrim = _link_pilgrim(pilgrim, unit, bed_id)

    units[position] = new_unit
    directory.replace(new_pilgrim)

    logger.info(f"Assigned pilgrim {pilgrim.id} ({pilgrim.name}) to bed {bed_id} in unit {number}")
    return AssignmentResult(unit=new_unit, bed=new_bed, pilgrim=new_pilgrim, changed=True)
