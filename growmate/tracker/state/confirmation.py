"""Two-phase confirmation for destructive plant actions."""

from __future__ import annotations

import logging
from typing import Optional

from growmate.shared.domain.plants.models import Plant
from growmate.shared.domain.plants.repository import PlantRepository

from .navigation import NavigationController

logger = logging.getLogger(__name__)


class ConfirmationGate:
    """Holds a pending delete until the user confirms or cancels it.

    ``confirm`` is the only path by which a user-initiated delete reaches
    the repository. ``confirm_visible`` is True iff ``pending_delete`` is set.
    """

    def __init__(self, repository: PlantRepository, navigation: NavigationController) -> None:
        self._repository = repository
        self._navigation = navigation
        self.pending_delete: Optional[Plant] = None

    @property
    def confirm_visible(self) -> bool:
        return self.pending_delete is not None

    def request_delete(self, plant: Plant) -> None:
        """Ask for confirmation; a second request replaces the pending target."""
        if self.pending_delete is not None and self.pending_delete.id != plant.id:
            logger.debug(f"Pending delete '{self.pending_delete.id}' replaced by '{plant.id}'")
        self.pending_delete = plant

    def confirm(self) -> Optional[Plant]:
        """Carry out the pending delete, if any, and close the prompt.

        Returns:
            The plant removed from the repository, or None
        """
        removed: Optional[Plant] = None
        target = self.pending_delete
        if target is not None:
            removed = self._repository.remove(target.id)
            self._navigation.back()
            logger.info(f"Deleted plant '{target.id}' ({target.name})")
        self.pending_delete = None
        return removed

    def cancel(self) -> None:
        self.pending_delete = None
