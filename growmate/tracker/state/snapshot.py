"""Read-only projection of the application state for presentation components."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from growmate.shared.domain.plants.models import Plant

from .views import AuthView, DashboardView, FormMode, MainView


class Snapshot(BaseModel):
    """Immutable view of everything a screen needs to render."""
    model_config = ConfigDict(frozen=True)

    plants: Tuple[Plant, ...]
    is_logged_in: bool
    auth_view: AuthView
    main_view: MainView
    dashboard_view: DashboardView
    selected_plant: Optional[Plant] = None
    form_mode: FormMode
    plant_to_edit: Optional[Plant] = None
    pending_delete: Optional[Plant] = None
    confirm_visible: bool = False

    @property
    def is_editing(self) -> bool:
        return self.plant_to_edit is not None
