"""
Filter Predicate Engine - decide which rooms and tents a filter state keeps.

Basic filters (search, gender, capacity, empty-only, floor/section, tent
capacity range) and advanced filters are combined with AND. Advanced filters
are toggled individually; a disabled filter is ignored whatever its value.

Occupant filters (pilgrim name, nationality, passport, organizer, mobile,
visa) look at the pilgrims sleeping in the unit's beds:
- A unit with no resolvable occupants never passes them
- Otherwise ONE occupant must satisfy EVERY enabled occupant filter
  (existential-AND, not "any pilgrim matches any filter")

Evaluation is total. Contradictory states simply match nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, Field

from housing.directory import PilgrimDirectory
from housing.inventory import beds_of, occupied_count, unit_number
from housing.models import Pilgrim, Room, RoomGender, Tent, Unit

logger = logging.getLogger(__name__)

# Wildcard for select-style filters
ALL = "all"


class GenderFilter(str, Enum):
    ALL = "all"
    MALE = "male"
    FEMALE = "female"
    MIXED = "mixed"


class AdvancedFilter(str, Enum):
    PILGRIM_NAME = "pilgrim_name"
    ROOM_NUMBER = "room_number"
    NATIONALITY = "nationality"
    PASSPORT_NUMBER = "passport_number"
    ORGANIZER_NUMBER = "organizer_number"
    MOBILE_NUMBER = "mobile_number"
    VISA_NUMBER = "visa_number"


# Advanced filters answered by the unit's occupants rather than the unit itself
OCCUPANT_FILTERS = frozenset(
    {
        AdvancedFilter.PILGRIM_NAME,
        AdvancedFilter.NATIONALITY,
        AdvancedFilter.PASSPORT_NUMBER,
        AdvancedFilter.ORGANIZER_NUMBER,
        AdvancedFilter.MOBILE_NUMBER,
        AdvancedFilter.VISA_NUMBER,
    }
)


class FilterState(BaseModel):
    """Everything the housing screens can filter on. Defaults filter nothing out."""

    # Basic filters
    search_term: str = ""
    gender: GenderFilter = GenderFilter.ALL
    capacity: int | str = ALL  # rooms only
    empty_only: bool = False
    floor: int | str = ALL  # rooms only
    section: str = ALL  # tents only
    min_capacity: int | str = ALL  # tents only
    max_capacity: int | str = ALL  # tents only

    # Advanced filters
    enabled_advanced_filters: set[AdvancedFilter] = Field(default_factory=set)
    pilgrim_name: str = ""
    room_number: str = ""
    nationality: str = ALL
    passport_number: str = ""
    organizer_number: str = ""
    mobile_number: str = ""
    visa_number: str = ""

    def is_enabled(self, advanced: AdvancedFilter) -> bool:
        return advanced in self.enabled_advanced_filters

    @property
    def occupant_filters_enabled(self) -> bool:
        return not OCCUPANT_FILTERS.isdisjoint(self.enabled_advanced_filters)

    def enable(self, *filters: AdvancedFilter) -> FilterState:
        return self.model_copy(update={"enabled_advanced_filters": self.enabled_advanced_filters | set(filters)})

    def disable(self, *filters: AdvancedFilter) -> FilterState:
        return self.model_copy(update={"enabled_advanced_filters": self.enabled_advanced_filters - set(filters)})


def _is_wildcard(value: int | str | None) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value.strip().lower() in ("", ALL)


def _as_int(value: int | str) -> int | None:
    """Numeric value of a filter, or None if it is not a number."""
    if isinstance(value, int):
        return value
    try:
        return int(value.strip())
    except ValueError:
        return None


def _contains(value: str | None, needle: str) -> bool:
    return value is not None and needle.lower() in value.lower()


def _occupants(unit: Unit, directory: PilgrimDirectory) -> list[Pilgrim]:
    """Pilgrims resolved from the unit's occupied beds. Unknown ids are skipped."""
    occupants: list[Pilgrim] = []
    for bed in beds_of(unit):
        if bed.occupied and bed.pilgrim_id:
            pilgrim = directory.find(bed.pilgrim_id)
            if pilgrim is not None:
                occupants.append(pilgrim)
    return occupants


def _occupant_matches(pilgrim: Pilgrim, state: FilterState) -> bool:
    """True if this one pilgrim satisfies every enabled occupant filter."""
    if state.is_enabled(AdvancedFilter.PILGRIM_NAME) and state.pilgrim_name:
        if not _contains(pilgrim.name, state.pilgrim_name):
            return False

    if state.is_enabled(AdvancedFilter.NATIONALITY) and not _is_wildcard(state.nationality):
        if pilgrim.nationality.lower() != state.nationality.strip().lower():
            return False

    if state.is_enabled(AdvancedFilter.PASSPORT_NUMBER) and state.passport_number:
        if not _contains(pilgrim.passport_number, state.passport_number):
            return False

    if state.is_enabled(AdvancedFilter.ORGANIZER_NUMBER) and state.organizer_number:
        if not _contains(pilgrim.organizer, state.organizer_number):
            return False

    if state.is_enabled(AdvancedFilter.MOBILE_NUMBER) and state.mobile_number:
        if not _contains(pilgrim.phone, state.mobile_number):
            return False

    if state.is_enabled(AdvancedFilter.VISA_NUMBER) and state.visa_number:
        if not _contains(pilgrim.visa_number, state.visa_number):
            return False

    return True


def _matches_capacity_range(tent: Tent, state: FilterState) -> bool:
    if not _is_wildcard(state.min_capacity):
        minimum = _as_int(state.min_capacity)
        if minimum is None or tent.total_beds < minimum:
            return False
    if not _is_wildcard(state.max_capacity):
        maximum = _as_int(state.max_capacity)
        if maximum is None or tent.total_beds > maximum:
            return False
    return True


def _matches_room_filters(room: Room, state: FilterState) -> bool:
    if not _is_wildcard(state.floor):
        if room.floor is None or str(room.floor) != str(state.floor).strip():
            return False

    if state.empty_only and occupied_count(room) > 0:
        return False

    if state.gender != GenderFilter.ALL:
        if room.gender != RoomGender.MIXED and room.gender.value != state.gender.value:
            return False

    if not _is_wildcard(state.capacity):
        if _as_int(state.capacity) != room.total_beds:
            return False

    return True


def _matches_tent_filters(tent: Tent, state: FilterState, occupants: list[Pilgrim]) -> bool:
    if not _is_wildcard(state.section) and tent.section != state.section:
        return False

    if not _matches_capacity_range(tent, state):
        return False

    if state.empty_only and occupied_count(tent) > 0:
        return False

    # Tents have no gender of their own; judge by who sleeps there
    if state.gender not in (GenderFilter.ALL, GenderFilter.MIXED) and occupants:
        if not any(p.gender.value == state.gender.value for p in occupants):
            return False

    return True


def unit_matches(unit: Unit, state: FilterState, directory: PilgrimDirectory) -> bool:
    """Return True if the room or tent passes every active filter."""
    number = unit_number(unit).lower()

    if state.search_term and state.search_term.lower() not in number:
        return False

    if state.is_enabled(AdvancedFilter.ROOM_NUMBER) and state.room_number:
        if state.room_number.lower() not in number:
            return False

    needs_occupants = state.occupant_filters_enabled or (
        isinstance(unit, Tent) and state.gender not in (GenderFilter.ALL, GenderFilter.MIXED)
    )
    occupants = _occupants(unit, directory) if needs_occupants else []

    if state.occupant_filters_enabled:
        if not occupants:
            return False
        if not any(_occupant_matches(pilgrim, state) for pilgrim in occupants):
            return False

    if isinstance(unit, Room):
        return _matches_room_filters(unit, state)
    return _matches_tent_filters(unit, state, occupants)


def filter_units(units: Iterable[Unit], state: FilterState, directory: PilgrimDirectory) -> list[Unit]:
    """Units passing the filter state, in their original order.

    Pure: the inputs are not modified, and repeated calls give the same result.
    """
    units = list(units)
    matched = [unit for unit in units if unit_matches(unit, state, directory)]
    logger.debug(f"Filter matched {len(matched)} of {len(units)} units")
    return matched


def section_options(tents: Iterable[Tent]) -> list[str]:
    return sorted({tent.section for tent in tents if tent.section})


def floor_options(rooms: Iterable[Room]) -> list[int]:
    return sorted({room.floor for room in rooms if room.floor is not None})
