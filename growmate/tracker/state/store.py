"""Global State Store - Service Locator Pattern.

Provides centralized access to the single state controller from any
presentation component.
"""

from __future__ import annotations

from typing import Optional

from growmate.shared.core.configuration import UIConfig
from growmate.shared.core.event_bus import EventBus
from growmate.shared.domain.plants.repository import PlantRepository
from growmate.shared.infrastructure.auth.gateway import AuthGateway

from .app_state import AppStateController


class Store:
    """Global state store for the tracker application.

    Usage:
        # During app initialization
        Store.initialize(event_bus, repository=repo)

        # In any presentation component
        store = Store.get()
        store.app.select_plant(plant)
    """

    _instance: Optional['Store'] = None

    def __init__(
        self,
        event_bus: EventBus,
        repository: Optional[PlantRepository] = None,
        auth_gateway: Optional[AuthGateway] = None,
        ui_config: Optional[UIConfig] = None,
    ) -> None:
        """Initialize store with event bus.

        Note: Do not call directly. Use Store.initialize() instead.
        """
        self.bus = event_bus
        self.app = AppStateController(
            event_bus,
            repository=repository,
            auth_gateway=auth_gateway,
            ui_config=ui_config,
        )

    @classmethod
    def initialize(
        cls,
        event_bus: EventBus,
        repository: Optional[PlantRepository] = None,
        auth_gateway: Optional[AuthGateway] = None,
        ui_config: Optional[UIConfig] = None,
    ) -> 'Store':
        """Initialize the global store instance.

        Should be called once during application startup before any
        presentation components are created.

        Raises:
            RuntimeError: If store is already initialized
        """
        if cls._instance is not None:
            raise RuntimeError("Store already initialized!")

        cls._instance = cls(
            event_bus,
            repository=repository,
            auth_gateway=auth_gateway,
            ui_config=ui_config,
        )
        return cls._instance

    @classmethod
    def get(cls) -> 'Store':
        """Get the global store instance.

        Raises:
            RuntimeError: If store has not been initialized
        """
        if cls._instance is None:
            raise RuntimeError("Store not initialized! Call Store.initialize() first.")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the store instance.

        Primarily used for testing. In production, store persists for
        application lifetime.
        """
        cls._instance = None
