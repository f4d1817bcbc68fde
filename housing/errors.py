"""Housing error classes.

Assignment failures are raised explicitly instead of silently no-oping or
overwriting an occupied bed.
"""

from __future__ import annotations


class HousingError(Exception):
    """Base exception for housing errors."""

    pass


class AssignmentError(HousingError):
    """Base exception for failed bed assignments."""

    pass


class PilgrimNotFoundError(AssignmentError):
    """Raised when a pilgrim id does not resolve in the directory."""

    def __init__(self, pilgrim_id: str):
        self.pilgrim_id = pilgrim_id
        super().__init__(f"Pilgrim '{pilgrim_id}' not found")


class UnitNotFoundError(AssignmentError):
    """Raised when no room or tent carries the requested number."""

    def __init__(self, unit_number: str):
        self.unit_number = unit_number
        super().__init__(f"No room or tent numbered '{unit_number}'")


class BedNotFoundError(AssignmentError):
    """Raised when a bed id does not belong to the referenced unit."""

    def __init__(self, unit_number: str, bed_id: str):
        self.unit_number = unit_number
        self.bed_id = bed_id
        super().__init__(f"Bed '{bed_id}' does not belong to unit '{unit_number}'")


class BedAlreadyOccupiedError(AssignmentError):
    """Raised when assigning a pilgrim to a bed held by someone else."""

    def __init__(self, unit_number: str, bed_id: str, occupant: str | None):
        self.unit_number = unit_number
        self.bed_id = bed_id
        self.occupant = occupant
        super().__init__(f"Bed '{bed_id}' in unit '{unit_number}' is already occupied by '{occupant}'")


class PilgrimAlreadyAssignedError(AssignmentError):
    """Raised when a pilgrim already holds a different bed."""

    def __init__(self, pilgrim_id: str, bed_id: str):
        self.pilgrim_id = pilgrim_id
        self.bed_id = bed_id
        super().__init__(f"Pilgrim '{pilgrim_id}' is already assigned to bed '{bed_id}'")


class ContainerNotFoundError(HousingError):
    """Raised when a hotel or building id is unknown to the store."""

    pass


class InvalidRecordError(HousingError):
    """Raised when a housing record cannot be converted to the requested container."""

    pass


class SnapshotError(HousingError):
    """Raised when a housing snapshot cannot be read or written."""

    pass
