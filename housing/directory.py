"""Pilgrim directory.

Flat, ordered collection of pilgrims with an id index. Used by the filter
engine to resolve bed occupants and by the assignment flow to pick
unassigned pilgrims.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field

from housing.errors import PilgrimNotFoundError
from housing.models import Gender, Pilgrim


def _contains(value: str | None, needle: str) -> bool:
    return value is not None and needle in value.lower()


class PilgrimFilter(BaseModel):
    """Criteria for the pilgrims list screen. Empty sets impose no constraint."""

    search: str = ""
    genders: set[Gender] = Field(default_factory=set)
    nationalities: set[str] = Field(default_factory=set)
    age_range: tuple[int, int | None] | None = None
    service_centers: set[str] = Field(default_factory=set)
    organizers: set[str] = Field(default_factory=set)

    def matches(self, pilgrim: Pilgrim) -> bool:
        if self.search:
            needle = self.search.lower()
            if not any(
                _contains(value, needle) for value in (pilgrim.name, pilgrim.hawiya, pilgrim.phone, pilgrim.email)
            ):
                return False

        if self.genders and pilgrim.gender not in self.genders:
            return False

        if self.nationalities and pilgrim.nationality not in self.nationalities:
            return False

        if self.age_range is not None:
            min_age, max_age = self.age_range
            if pilgrim.age < min_age or (max_age is not None and pilgrim.age > max_age):
                return False

        if self.service_centers and pilgrim.service_center not in self.service_centers:
            return False

        return not (self.organizers and pilgrim.organizer not in self.organizers)


class PilgrimDirectory:
    """Ordered pilgrim collection queryable by id and assignment status."""

    def __init__(self, pilgrims: Iterable[Pilgrim] = ()) -> None:
        self._pilgrims: list[Pilgrim] = []
        self._index: dict[str, int] = {}
        for pilgrim in pilgrims:
            self.add(pilgrim)

    def __iter__(self) -> Iterator[Pilgrim]:
        return iter(self._pilgrims)

    def __len__(self) -> int:
        return len(self._pilgrims)

    def __contains__(self, pilgrim_id: object) -> bool:
        return pilgrim_id in self._index

    @property
    def pilgrims(self) -> list[Pilgrim]:
        return list(self._pilgrims)

    def find(self, pilgrim_id: str) -> Pilgrim | None:
        position = self._index.get(pilgrim_id)
        return self._pilgrims[position] if position is not None else None

    def add(self, pilgrim: Pilgrim) -> None:
        if pilgrim.id in self._index:
            raise ValueError(f"Duplicate pilgrim id: {pilgrim.id}")
        self._index[pilgrim.id] = len(self._pilgrims)
        self._pilgrims.append(pilgrim)

    def replace(self, pilgrim: Pilgrim) -> None:
        """Swap in an updated record for an existing pilgrim, keeping its position."""
        position = self._index.get(pilgrim.id)
        if position is None:
            raise PilgrimNotFoundError(pilgrim.id)
        self._pilgrims[position] = pilgrim

    def unassigned(self, filter_text: str | None = None) -> Iterator[Pilgrim]:
        """Yield pilgrims holding neither a room nor a tent bed.

        Each call starts a fresh pass over the current directory contents.

        Args:
            filter_text: Optional case-insensitive substring matched against
                name, phone, or email
        """
        needle = filter_text.lower() if filter_text else None
        for pilgrim in self._pilgrims:
            if pilgrim.is_assigned:
                continue
            if needle is not None and not any(
                _contains(value, needle) for value in (pilgrim.name, pilgrim.phone, pilgrim.email)
            ):
                continue
            yield pilgrim

    def search(self, criteria: PilgrimFilter) -> list[Pilgrim]:
        return [pilgrim for pilgrim in self._pilgrims if criteria.matches(pilgrim)]

    def nationalities(self) -> list[str]:
        return sorted({p.nationality for p in self._pilgrims if p.nationality})

    def organizers(self) -> list[str]:
        return sorted({p.organizer for p in self._pilgrims if p.organizer})

    def service_centers(self) -> list[str]:
        return sorted({p.service_center for p in self._pilgrims if p.service_center})
