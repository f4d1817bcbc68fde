"""JSON snapshot persistence for a HousingStore.

Stands in for the browser's local storage: the whole store is written as one
JSON document and read back with full model validation.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from housing.errors import SnapshotError
from housing.models import Building, Hotel, Pilgrim, Tent
from housing.settings import get_settings
from housing.store import HousingStore

logger = logging.getLogger(__name__)


class HousingSnapshot(BaseModel):
    """Serializable image of every collection a HousingStore owns."""

    hotels: list[Hotel] = Field(default_factory=list)
    buildings: list[Building] = Field(default_factory=list)
    mina_tents: list[Tent] = Field(default_factory=list)
    arafat_tents: list[Tent] = Field(default_factory=list)
    pilgrims: list[Pilgrim] = Field(default_factory=list)

    @classmethod
    def from_store(cls, store: HousingStore) -> HousingSnapshot:
        return cls(
            hotels=store.hotels,
            buildings=store.buildings,
            mina_tents=store.mina_tents,
            arafat_tents=store.arafat_tents,
            pilgrims=store.directory.pilgrims,
        )

    def to_store(self) -> HousingStore:
        return HousingStore(self.hotels, self.buildings, self.mina_tents, self.arafat_tents, self.pilgrims)


def save_snapshot(store: HousingStore, path: Path | str | None = None) -> Path:
    """Write the store to ``path`` (defaults to settings.snapshot_path).

    Returns:
        The path written

    Raises:
        SnapshotError: The file could not be written
    """
    target = Path(path) if path is not None else get_settings().snapshot_path
    payload = HousingSnapshot.from_store(store).model_dump_json(indent=2)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(payload, encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Could not write housing snapshot to {target}: {e}") from e

    logger.info(f"Housing snapshot saved to {target}")
    return target


def load_snapshot(path: Path | str | None = None) -> HousingStore:
    """Read a store previously written by save_snapshot.

    Raises:
        SnapshotError: The file is missing, unreadable, or fails validation
    """
    source = Path(path) if path is not None else get_settings().snapshot_path
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotError(f"Could not read housing snapshot from {source}: {e}") from e

    try:
        snapshot = HousingSnapshot.model_validate_json(raw)
    except ValidationError as e:
        raise SnapshotError(f"Housing snapshot at {source} is invalid: {e}") from e

    try:
        store = snapshot.to_store()
    except ValueError as e:
        raise SnapshotError(f"Housing snapshot at {source} is inconsistent: {e}") from e

    logger.info(
        f"Housing snapshot loaded from {source}: {len(store.hotels)} hotels, {len(store.buildings)} buildings, "
        f"{len(store.mina_tents) + len(store.arafat_tents)} tents, {len(store.directory)} pilgrims"
    )
    return store
