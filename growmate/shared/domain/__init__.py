"""
Shared Domain Module
====================

Business entities for GrowMate.

Structure:
- plants: Plant entity, PlantType and the in-memory PlantRepository
"""

from .plants import Plant, PlantRepository, PlantType

__all__ = ["Plant", "PlantRepository", "PlantType"]
