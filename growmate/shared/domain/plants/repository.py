"""In-memory plant repository."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .models import Plant

logger = logging.getLogger(__name__)


class PlantRepository:
    """Owns the ordered plant collection.

    Ids are unique at all times. Order is insertion order; replacing a plant
    keeps the slot of the plant it replaces.
    """

    def __init__(self, plants: Optional[Iterable[Plant]] = None) -> None:
        self._plants: List[Plant] = []
        for plant in plants or ():
            self.upsert(plant)

    def _index_of(self, plant_id: str) -> int:
        for index, plant in enumerate(self._plants):
            if plant.id == plant_id:
                return index
        return -1

    def upsert(self, plant: Plant) -> bool:
        """Insert or replace by id.

        Returns:
            True if the plant was appended, False if it replaced an existing one
        """
        index = self._index_of(plant.id)
        if index != -1:
            self._plants[index] = plant
            logger.debug(f"Replaced plant '{plant.id}' at position {index}")
            return False

        self._plants.append(plant)
        logger.debug(f"Added plant '{plant.id}' ({len(self._plants)} total)")
        return True

    def list(self) -> Tuple[Plant, ...]:
        """Return the plants as they are right now."""
        return tuple(self._plants)

    def remove(self, plant_id: str) -> Optional[Plant]:
        """Delete the plant with ``plant_id``.

        Unknown ids are ignored; the return value is the removed plant or None.
        """
        index = self._index_of(plant_id)
        if index == -1:
            logger.debug(f"remove('{plant_id}') ignored: no such plant")
            return None
        return self._plants.pop(index)

    def find_by_id(self, plant_id: str) -> Optional[Plant]:
        index = self._index_of(plant_id)
        return self._plants[index] if index != -1 else None

    def clear(self) -> None:
        self._plants.clear()

    def __len__(self) -> int:
        return len(self._plants)

    def __contains__(self, plant_id: object) -> bool:
        return isinstance(plant_id, str) and self._index_of(plant_id) != -1
