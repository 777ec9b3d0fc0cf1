"""Navigation state machine for the main views and the dashboard sub-views."""

from __future__ import annotations

import logging
from typing import Optional, Union

from growmate.shared.domain.plants.models import Plant

from .views import CREATE, CreateMode, DashboardView, EditMode, MainView

logger = logging.getLogger(__name__)


class NavigationController:
    """Owns the active screen and the transient plant references.

    Invariants:
    - ``selected_plant`` is None whenever ``dashboard_view`` is LIST
    - ``form_mode`` is only read while ``main_view`` is ADD
    """

    def __init__(self, initial_view: MainView = MainView.DASHBOARD) -> None:
        self._initial_view = MainView(initial_view)
        self.main_view: MainView = self._initial_view
        self.dashboard_view: DashboardView = DashboardView.LIST
        self.selected_plant: Optional[Plant] = None
        self.form_mode: Union[CreateMode, EditMode] = CREATE

    def navigate(self, view: MainView) -> None:
        """Switch the main view.

        Leaving the dashboard collapses any open detail screen; entering ADD
        this way always means create mode (use ``edit_plant`` for edit mode).
        """
        view = MainView(view)
        self.main_view = view
        if view != MainView.DASHBOARD:
            self.back()
        if view == MainView.ADD:
            self.form_mode = CREATE
        logger.debug(f"Navigated to '{view.value}'")

    def select_plant(self, plant: Plant) -> None:
        """Open the detail screen for ``plant``; only valid on the dashboard."""
        if self.main_view != MainView.DASHBOARD:
            logger.warning(
                f"Ignoring select of plant '{plant.id}' while on '{self.main_view.value}'"
            )
            return
        self.selected_plant = plant
        self.dashboard_view = DashboardView.DETAIL

    def back(self) -> None:
        self.dashboard_view = DashboardView.LIST
        self.selected_plant = None

    def edit_plant(self, plant: Plant) -> None:
        """Open the add form in edit mode for ``plant``.

        Bypasses ``navigate`` so the create-mode reset does not apply; the
        dashboard selection is kept, so cancelling returns to the detail screen.
        """
        self.form_mode = EditMode(plant_id=plant.id)
        self.main_view = MainView.ADD

    def clear_edit(self) -> None:
        self.form_mode = CREATE

    def reset(self) -> None:
        """Return to the state of a freshly started app."""
        self.main_view = self._initial_view
        self.back()
        self.clear_edit()
