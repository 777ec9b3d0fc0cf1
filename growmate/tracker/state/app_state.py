"""Application State Controller.

Single owner of the tracker state: session flag, navigation, plant
repository and the delete confirmation gate. Presentation components call the
public actions (or ``dispatch`` an intent) and receive a fresh ``Snapshot``;
the same snapshot is published on ``state.changed`` for subscribers.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple, Type

from growmate.shared.core import events
from growmate.shared.core.configuration import UIConfig
from growmate.shared.core.event_bus import EventBus, EventPayload
from growmate.shared.domain.plants.models import Plant
from growmate.shared.domain.plants.repository import PlantRepository
from growmate.shared.infrastructure.auth.gateway import AuthGateway, LocalAuthGateway

from . import intents
from .confirmation import ConfirmationGate
from .navigation import NavigationController
from .snapshot import Snapshot
from .views import AuthView, DashboardView, EditMode, MainView

logger = logging.getLogger(__name__)


class AppStateController:
    """State for the plant tracker shell.

    Every public action runs synchronously to completion before anything is
    published, so subscribers never see a half-applied transition.
    """

    def __init__(
        self,
        event_bus: EventBus,
        repository: Optional[PlantRepository] = None,
        auth_gateway: Optional[AuthGateway] = None,
        ui_config: Optional[UIConfig] = None,
    ) -> None:
        """Initialize application state.

        Args:
            event_bus: Bus that receives snapshots and domain events
            repository: Plant store; a new empty one when omitted
            auth_gateway: Login/signup outcome provider
            ui_config: Initial views and logout behaviour
        """
        self.bus = event_bus
        self.ui_config = ui_config or UIConfig()
        self.repository = repository if repository is not None else PlantRepository()
        self.auth = auth_gateway or LocalAuthGateway()

        # Session State
        self.is_logged_in: bool = False
        self.auth_view: AuthView = AuthView(self.ui_config.initial_auth_view)

        self.navigation = NavigationController(MainView(self.ui_config.initial_main_view))
        self.confirmation = ConfirmationGate(self.repository, self.navigation)

        self._last_nav: Tuple[MainView, DashboardView] = self._nav_key()
        self._handlers: Dict[Type[Any], Callable[[Any], Snapshot]] = {
            intents.Navigate: lambda i: self.navigate(i.view),
            intents.SelectPlant: lambda i: self.select_plant(i.plant),
            intents.Back: lambda i: self.back(),
            intents.AddPlant: lambda i: self.add_plant(),
            intents.EditPlant: lambda i: self.edit_plant(i.plant),
            intents.SavePlant: lambda i: self.save_plant(i.plant),
            intents.RequestDelete: lambda i: self.request_delete(i.plant),
            intents.ConfirmDelete: lambda i: self.confirm_delete(),
            intents.CancelDelete: lambda i: self.cancel_delete(),
            intents.Login: lambda i: self.login(),
            intents.Signup: lambda i: self.signup(),
            intents.Logout: lambda i: self.logout(),
            intents.SwitchAuthView: lambda i: self.switch_auth_view(i.view),
        }

    # --- Read Side ---

    def snapshot(self) -> Snapshot:
        """Project the current state for rendering."""
        nav = self.navigation
        plant_to_edit: Optional[Plant] = None
        if isinstance(nav.form_mode, EditMode):
            plant_to_edit = self.repository.find_by_id(nav.form_mode.plant_id)

        return Snapshot(
            plants=self.repository.list(),
            is_logged_in=self.is_logged_in,
            auth_view=self.auth_view,
            main_view=nav.main_view,
            dashboard_view=nav.dashboard_view,
            selected_plant=nav.selected_plant,
            form_mode=nav.form_mode,
            plant_to_edit=plant_to_edit,
            pending_delete=self.confirmation.pending_delete,
            confirm_visible=self.confirmation.confirm_visible,
        )

    def dispatch(self, intent: intents.Intent) -> Snapshot:
        """Apply one intent from the closed set in ``intents``.

        Raises:
            TypeError: If ``intent`` is not one of the known intent types
        """
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise TypeError(f"Unsupported intent: {intent!r}")
        return handler(intent)

    # --- Navigation Actions ---

    def navigate(self, view: MainView) -> Snapshot:
        self.navigation.navigate(view)
        return self._commit("navigate")

    def add_plant(self) -> Snapshot:
        """Open the add form in create mode."""
        self.navigation.navigate(MainView.ADD)
        return self._commit("add_plant")

    def select_plant(self, plant: Plant) -> Snapshot:
        self.navigation.select_plant(plant)
        return self._commit("select_plant")

    def back(self) -> Snapshot:
        self.navigation.back()
        return self._commit("back")

    def edit_plant(self, plant: Plant) -> Snapshot:
        self.navigation.edit_plant(plant)
        return self._commit("edit_plant")

    # --- Plant Actions ---

    def save_plant(self, plant: Plant) -> Snapshot:
        """Insert or replace ``plant`` and return to the dashboard list."""
        created = self.repository.upsert(plant)
        self.navigation.clear_edit()
        self.navigation.navigate(MainView.DASHBOARD)
        # Saving always lands on the dashboard list
        self.navigation.back()
        logger.info(f"{'Created' if created else 'Updated'} plant '{plant.id}' ({plant.name})")
        self._publish(events.TOPIC_PLANT_SAVED, events.create_plant_saved_event(plant, created))
        return self._commit("save_plant")

    def request_delete(self, plant: Plant) -> Snapshot:
        self.confirmation.request_delete(plant)
        self._publish(events.TOPIC_DELETE_REQUESTED, events.create_delete_requested_event(plant))
        return self._commit("request_delete")

    def confirm_delete(self) -> Snapshot:
        removed = self.confirmation.confirm()
        if removed is not None:
            self._publish(events.TOPIC_PLANT_DELETED, events.create_plant_deleted_event(removed))
        return self._commit("confirm_delete")

    def cancel_delete(self) -> Snapshot:
        pending = self.confirmation.pending_delete
        self.confirmation.cancel()
        self._publish(events.TOPIC_DELETE_CANCELLED, events.create_delete_cancelled_event(pending))
        return self._commit("cancel_delete")

    # --- Session Actions ---

    def login(self) -> Snapshot:
        return self._authenticate("login", self.auth.login)

    def signup(self) -> Snapshot:
        return self._authenticate("signup", self.auth.signup)

    def logout(self) -> Snapshot:
        """End the session; plant data always survives a logout."""
        self.is_logged_in = False
        if self.ui_config.reset_navigation_on_logout:
            self.navigation.reset()
            self.confirmation.cancel()
            self.auth_view = AuthView(self.ui_config.initial_auth_view)
        logger.info("Logged out")
        self._publish(events.TOPIC_SESSION_LOGOUT, events.create_session_event(False, "logout"))
        return self._commit("logout")

    def switch_auth_view(self, view: AuthView) -> Snapshot:
        """Toggle between the login and signup screens."""
        self.auth_view = AuthView(view)
        return self._commit("switch_auth_view")

    # --- Internals ---

    def _authenticate(self, method: str, flow: Callable[[], bool]) -> Snapshot:
        if flow():
            self.is_logged_in = True
            logger.info(f"Session started via {method}")
            self._publish(events.TOPIC_SESSION_LOGIN, events.create_session_event(True, method))
        else:
            logger.warning(f"{method} was not completed by the auth gateway")
        return self._commit(method)

    def _nav_key(self) -> Tuple[MainView, DashboardView]:
        return (self.navigation.main_view, self.navigation.dashboard_view)

    def _commit(self, intent: str) -> Snapshot:
        """Build the post-transition snapshot and notify subscribers."""
        snapshot = self.snapshot()

        nav_key = self._nav_key()
        if nav_key != self._last_nav:
            self._last_nav = nav_key
            self._publish(
                events.TOPIC_NAV_SELECT,
                events.create_nav_select_event(nav_key[0].value, nav_key[1].value),
            )

        self._publish(events.TOPIC_STATE_CHANGED, events.create_state_changed_event(intent, snapshot))
        return snapshot

    def _publish(self, topic: str, payload: EventPayload) -> None:
        self.bus.publish(topic, payload)
