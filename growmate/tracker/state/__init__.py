"""State management for the GrowMate tracker.

Architecture:
- AppStateController: single owner of session, navigation, plants and the
  delete confirmation gate
- Store: service locator for reaching the controller from any component
"""

from .app_state import AppStateController
from .confirmation import ConfirmationGate
from .navigation import NavigationController
from .snapshot import Snapshot
from .store import Store
from .views import AuthView, CreateMode, DashboardView, EditMode, MainView

__all__ = [
    "AppStateController",
    "ConfirmationGate",
    "NavigationController",
    "Snapshot",
    "Store",
    "AuthView",
    "CreateMode",
    "DashboardView",
    "EditMode",
    "MainView",
]
