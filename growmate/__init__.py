"""GrowMate package."""

from .shared.core.event_bus import EventBus
from .shared.domain.plants import Plant, PlantRepository, PlantType
from .tracker.state import AppStateController, Store

__all__ = ["AppStateController", "EventBus", "Plant", "PlantRepository", "PlantType", "Store"]
