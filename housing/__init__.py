"""
Housing - occupancy core for pilgrim housing administration.

This package contains:
- models: Domain models (Bed, Room, Tent, Hotel, Building, Pilgrim)
- inventory: Normalized bed access and occupancy counts
- directory: Pilgrim directory
- assignment: Pilgrim-to-bed assignment
- filters: Filter predicate engine for rooms and tents
- aggregation: Occupancy statistics
- store: HousingStore owning the collections for one session
- generation: Inventory generation and housing-record conversion
- persistence: JSON snapshots of a store
- settings, logging_config: Configuration and log formatting
"""

from housing.aggregation import HousingStats, OccupancyStats, aggregate, housing_overview
from housing.assignment import AssignmentResult, assign_pilgrim
from housing.directory import PilgrimDirectory, PilgrimFilter
from housing.errors import (
    AssignmentError,
    BedAlreadyOccupiedError,
    BedNotFoundError,
    ContainerNotFoundError,
    HousingError,
    InvalidRecordError,
    PilgrimAlreadyAssignedError,
    PilgrimNotFoundError,
    SnapshotError,
    UnitNotFoundError,
)
from housing.filters import AdvancedFilter, FilterState, GenderFilter, filter_units, unit_matches
from housing.inventory import beds_of, occupied_count
from housing.models import Bed, Building, Gender, Hotel, Pilgrim, Room, RoomGender, Tent, TentLocation
from housing.store import HousingStore

__all__ = [
    "AdvancedFilter",
    "AssignmentError",
    "AssignmentResult",
    "Bed",
    "BedAlreadyOccupiedError",
    "BedNotFoundError",
    "Building",
    "ContainerNotFoundError",
    "FilterState",
    "Gender",
    "GenderFilter",
    "Hotel",
    "HousingError",
    "HousingStats",
    "HousingStore",
    "InvalidRecordError",
    "OccupancyStats",
    "Pilgrim",
    "PilgrimAlreadyAssignedError",
    "PilgrimDirectory",
    "PilgrimFilter",
    "PilgrimNotFoundError",
    "Room",
    "RoomGender",
    "SnapshotError",
    "Tent",
    "TentLocation",
    "UnitNotFoundError",
    "aggregate",
    "assign_pilgrim",
    "beds_of",
    "filter_units",
    "housing_overview",
    "occupied_count",
    "unit_matches",
]
