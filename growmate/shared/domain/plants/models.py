"""Plant entity definitions."""

from __future__ import annotations

import uuid
from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class PlantType(str, Enum):
    """Categorical plant variant shown on the add/edit form."""
    FLOWERING = "flowering"
    NON_FLOWERING = "non-flowering"
    SUCCULENT = "succulent"
    FERN = "fern"
    HERB = "herb"


def new_plant_id() -> str:
    return uuid.uuid4().hex


class Plant(BaseModel):
    """A tracked plant.

    Instances are frozen: an edit produces a new Plant with the same ``id``
    (see ``revise``), which the repository swaps in at the original position.
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    id: str = Field(default_factory=new_plant_id, min_length=1, description="Stable unique identifier")
    name: str = Field(min_length=1, description="Display name")
    species: str = Field(default="", description="Free text species")
    plant_type: PlantType = Field(default=PlantType.FLOWERING)
    age: int = Field(default=0, ge=0, description="Age in months")
    leaves: int = Field(default=0, ge=0)
    buds: int = Field(default=0, ge=0)
    flowers: int = Field(default=0, ge=0)
    photo: Optional[str] = Field(default=None, description="Opaque image reference (URL or data URI)")
    last_watered: Optional[date] = Field(default=None, description="No future-date check is applied")

    def revise(self, **changes: Any) -> "Plant":
        """Return a validated copy with ``changes`` applied.

        Raises:
            ValueError: If the change set tries to replace the id
        """
        if "id" in changes and changes["id"] != self.id:
            raise ValueError(f"Plant id is immutable (tried to change '{self.id}')")
        data = self.model_dump()
        data.update(changes)
        return Plant(**data)
