"""
HousingStore - explicit owner of the housing collections.

Holds hotels, buildings, Mina and Arafat tents, and the pilgrim directory,
and routes the screens' queries (filter, stats, assign) to the pure core
functions. Loading and saving are left to housing.persistence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from housing.aggregation import HousingStats, OccupancyStats, aggregate, housing_overview
from housing.assignment import AssignmentResult, assign_pilgrim
from housing.directory import PilgrimDirectory
from housing.errors import ContainerNotFoundError
from housing.filters import FilterState, filter_units
from housing.inventory import check_unit
from housing.models import Building, Container, Hotel, HousingKind, Pilgrim, Tent, TentLocation, Unit

logger = logging.getLogger(__name__)


class HousingStore:
    """In-memory housing inventory plus pilgrim directory for one session."""

    def __init__(
        self,
        hotels: Iterable[Hotel] = (),
        buildings: Iterable[Building] = (),
        mina_tents: Iterable[Tent] = (),
        arafat_tents: Iterable[Tent] = (),
        pilgrims: Iterable[Pilgrim] = (),
    ) -> None:
        self.hotels: list[Hotel] = list(hotels)
        self.buildings: list[Building] = list(buildings)
        self.mina_tents: list[Tent] = list(mina_tents)
        self.arafat_tents: list[Tent] = list(arafat_tents)
        self.directory = PilgrimDirectory(pilgrims)

        for container in self.hotels + self.buildings:
            self._check_rooms(container)
        for tent in self.mina_tents + self.arafat_tents:
            check_unit(tent)

    def _check_rooms(self, container: Container) -> None:
        for room in container.rooms:
            check_unit(room)

    def _containers(self, kind: HousingKind) -> list[Hotel] | list[Building]:
        return self.hotels if kind == HousingKind.HOTEL else self.buildings

    def container(self, kind: HousingKind, container_id: str) -> Container:
        """Look up a hotel or building by id.

        Raises:
            ContainerNotFoundError: Unknown id, or kind is a tent location
        """
        if kind not in (HousingKind.HOTEL, HousingKind.BUILDING):
            raise ContainerNotFoundError(f"{kind.value} has no containers")
        for container in self._containers(kind):
            if container.id == container_id:
                return container
        raise ContainerNotFoundError(f"No {kind.value} with id '{container_id}'")

    def units(self, kind: HousingKind, container_id: str | None = None) -> list[Unit]:
        """Live unit list for a view: one hotel's/building's rooms, or one location's tents."""
        if kind == HousingKind.MINA:
            return self.mina_tents  # type: ignore[return-value]
        if kind == HousingKind.ARAFAT:
            return self.arafat_tents  # type: ignore[return-value]
        if container_id is None:
            raise ContainerNotFoundError(f"A {kind.value} id is required to list rooms")
        return self.container(kind, container_id).rooms  # type: ignore[return-value]

    def filter(self, kind: HousingKind, state: FilterState, container_id: str | None = None) -> list[Unit]:
        return filter_units(self.units(kind, container_id), state, self.directory)

    def stats(self, kind: HousingKind, container_id: str | None = None) -> OccupancyStats:
        return aggregate(self.units(kind, container_id))

    def overview(self) -> HousingStats:
        return housing_overview(self.hotels, self.buildings, self.mina_tents, self.arafat_tents)

    def assign(
        self,
        kind: HousingKind,
        unit_number: str,
        bed_id: str,
        pilgrim_id: str,
        container_id: str | None = None,
    ) -> AssignmentResult:
        """Assign a pilgrim to a bed in one of the store's views. See assign_pilgrim."""
        return assign_pilgrim(self.units(kind, container_id), unit_number, bed_id, pilgrim_id, self.directory)

    def add_container(self, container: Container) -> None:
        """Append a hotel or building, replacing any existing one with the same id."""
        self._check_rooms(container)
        containers: list = self.hotels if isinstance(container, Hotel) else self.buildings
        for position, existing in enumerate(containers):
            if existing.id == container.id:
                containers[position] = container
                logger.debug(f"Replaced container {container.id}")
                return
        containers.append(container)

    def add_tents(self, tents: Iterable[Tent]) -> None:
        """Append tents to their location, replacing any with the same id."""
        for tent in tents:
            check_unit(tent)
            target = self.mina_tents if tent.location == TentLocation.MINA else self.arafat_tents
            position = next((i for i, existing in enumerate(target) if existing.id == tent.id), None)
            if position is None:
                target.append(tent)
            else:
                target[position] = tent
