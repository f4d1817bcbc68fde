"""Occupancy summaries for the housing dashboards."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from housing.inventory import occupied_count
from housing.models import Building, Hotel, Tent, Unit


class OccupancyStats(BaseModel):
    """Counters over a (filtered or unfiltered) set of rooms or tents."""

    total_units: int = Field(default=0, ge=0)
    occupied_units: int = Field(default=0, ge=0)
    total_beds: int = Field(default=0, ge=0)
    occupied_beds: int = Field(default=0, ge=0)
    available_beds: int = Field(default=0, ge=0)
    occupancy_rate: float = Field(default=0.0, ge=0.0, le=100.0)  # percent


class HousingStats(BaseModel):
    """Totals across every housing site, as shown on the housing dashboard."""

    total_housed: int = 0
    total_capacity: int = 0
    available_beds: int = 0
    occupancy_rate: float = 0.0
    hotels_count: int = 0
    buildings_count: int = 0
    mina_tents_count: int = 0
    arafat_tents_count: int = 0


def _rate(occupied: int, total: int) -> float:
    return round(occupied / total * 100, 1) if total > 0 else 0.0


def aggregate(units: Iterable[Unit]) -> OccupancyStats:
    """Summarize occupancy over a collection of units.

    Invariant: occupied_beds + available_beds == total_beds.
    """
    total_units = 0
    occupied_units = 0
    total_beds = 0
    occupied_beds = 0

    for unit in units:
        occupied = occupied_count(unit)
        total_units += 1
        total_beds += unit.total_beds
        occupied_beds += occupied
        if occupied > 0:
            occupied_units += 1

    return OccupancyStats(
        total_units=total_units,
        occupied_units=occupied_units,
        total_beds=total_beds,
        occupied_beds=occupied_beds,
        available_beds=total_beds - occupied_beds,
        occupancy_rate=_rate(occupied_beds, total_beds),
    )


def housing_overview(
    hotels: list[Hotel],
    buildings: list[Building],
    mina_tents: list[Tent],
    arafat_tents: list[Tent],
) -> HousingStats:
    all_units: list[Unit] = [room for hotel in hotels for room in hotel.rooms]
    all_units.extend(room for building in buildings for room in building.rooms)
    all_units.extend(mina_tents)
    all_units.extend(arafat_tents)
    totals = aggregate(all_units)

    return HousingStats(
        total_housed=totals.occupied_beds,
        total_capacity=totals.total_beds,
        available_beds=totals.available_beds,
        occupancy_rate=totals.occupancy_rate,
        hotels_count=len(hotels),
        buildings_count=len(buildings),
        mina_tents_count=len(mina_tents),
        arafat_tents_count=len(arafat_tents),
    )
