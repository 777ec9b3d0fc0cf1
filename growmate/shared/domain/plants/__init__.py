from .models import Plant, PlantType, new_plant_id
from .repository import PlantRepository
from .seed import demo_plants

__all__ = ["Plant", "PlantType", "PlantRepository", "demo_plants", "new_plant_id"]
