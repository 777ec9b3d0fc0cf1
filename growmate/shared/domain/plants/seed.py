"""Demo plants loaded into a fresh repository."""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional

from .models import Plant, PlantType


def demo_plants(today: Optional[date] = None) -> List[Plant]:
    """Build the two demo plants, with watering dates relative to ``today``."""
    today = today or date.today()
    return [
        Plant(
            id="1",
            name="Rosie",
            species="Rosa",
            plant_type=PlantType.FLOWERING,
            age=6,
            leaves=32,
            buds=5,
            flowers=2,
            photo="https://picsum.photos/seed/rosie/400/400",
            last_watered=today - timedelta(days=1),
        ),
        Plant(
            id="2",
            name="Spike",
            species="Echinocactus grusonii",
            plant_type=PlantType.SUCCULENT,
            age=12,
            leaves=0,
            buds=0,
            flowers=0,
            photo="https://picsum.photos/seed/spike/400/400",
            last_watered=today - timedelta(days=7),
        ),
    ]
