"""
Inventory access - normalized bed views and occupancy counts.

Stored bed lists are not trusted to match a unit's capacity. Every read goes
through beds_of(), which pads short lists with empty beds and truncates long
ones, so callers always see exactly total_beds entries.
"""

from __future__ import annotations

import logging

from housing.models import Bed, Container, Room, Unit

logger = logging.getLogger(__name__)


def unit_number(unit: Unit) -> str:
    """Display number of a room or tent."""
    if isinstance(unit, Room):
        return unit.room_number
    return unit.tent_number


def synthetic_bed_id(unit: Unit, index: int) -> str:
    return f"{unit.id}-bed-{index + 1}"


def beds_of(unit: Unit) -> list[Bed]:
    """Return the unit's beds normalized to exactly total_beds entries.

    Missing beds are synthesized as empty. Surplus beds (more stored than the
    unit's capacity) are dropped; see check_unit for the one-time warning.

    Args:
        unit: Room or tent to read

    Returns:
        New list of beds; the unit itself is not modified
    """
    stored = unit.beds
    if len(stored) > unit.total_beds:
        logger.debug(f"Unit {unit_number(unit)}: reading {unit.total_beds} of {len(stored)} stored beds")
        return list(stored[: unit.total_beds])

    beds = list(stored)
    taken_ids = {bed.id for bed in beds}
    for index in range(len(stored), unit.total_beds):
        bed_id = synthetic_bed_id(unit, index)
        while bed_id in taken_ids:
            bed_id = f"{bed_id}-pad"
        taken_ids.add(bed_id)
        beds.append(Bed.empty(bed_id))
    return beds


def check_unit(unit: Unit) -> bool:
    """Warn if the unit stores more beds than its capacity.

    Called once when a unit enters a store or is normalized, not on every read.

    Returns:
        True if the stored bed list fits the unit's capacity
    """
    if len(unit.beds) <= unit.total_beds:
        return True
    logger.warning(
        f"Unit {unit_number(unit)} stores {len(unit.beds)} beds for a capacity of {unit.total_beds} - truncating"
    )
    return False


def occupied_count(unit: Unit) -> int:
    return sum(1 for bed in beds_of(unit) if bed.occupied)


def available_count(unit: Unit) -> int:
    return unit.total_beds - occupied_count(unit)


def is_empty(unit: Unit) -> bool:
    return occupied_count(unit) == 0


def normalize_unit(unit: Unit) -> Unit:
    """Copy of the unit whose stored beds equal its normalized bed list."""
    check_unit(unit)
    return unit.model_copy(update={"beds": beds_of(unit)})


def total_capacity(container: Container) -> int:
    """Total beds across a hotel's or building's rooms."""
    return sum(room.total_beds for room in container.rooms)


def occupied_capacity(container: Container) -> int:
    return sum(occupied_count(room) for room in container.rooms)


def occupied_beds(unit: Unit) -> list[Bed]:
    """Occupied beds of a unit, in bed order."""
    return [bed for bed in beds_of(unit) if bed.occupied]
