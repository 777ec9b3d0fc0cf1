"""Canonical event definitions for GrowMate."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Optional

from .event_bus import EventPayload

if TYPE_CHECKING:
    from growmate.shared.domain.plants.models import Plant
    from growmate.tracker.state.snapshot import Snapshot

# State Topics
TOPIC_STATE_CHANGED = "state.changed"
TOPIC_NAV_SELECT = "nav.select"

# Plant lifecycle
TOPIC_PLANT_SAVED = "plant.saved"
TOPIC_PLANT_DELETED = "plant.deleted"

# Confirmation protocol
TOPIC_DELETE_REQUESTED = "delete.requested"
TOPIC_DELETE_CANCELLED = "delete.cancelled"

# Session
TOPIC_SESSION_LOGIN = "session.login"
TOPIC_SESSION_LOGOUT = "session.logout"


def create_state_changed_event(intent: str, snapshot: Snapshot) -> EventPayload:
    """Create a state changed event carrying the post-transition snapshot."""
    return {
        "intent": intent,
        "snapshot": snapshot,
        "ts": time.time(),
    }


def create_nav_select_event(main_view: str, dashboard_view: str) -> EventPayload:
    """Create a navigation selection event."""
    return {
        "id": main_view,
        "dashboard_view": dashboard_view,
    }


def create_plant_saved_event(plant: Plant, created: bool) -> EventPayload:
    """Create a plant saved event.

    Args:
        plant: The plant as stored after the upsert
        created: True when the id was new and the plant was appended
    """
    return {
        "plant_id": plant.id,
        "plant": plant,
        "created": created,
    }


def create_plant_deleted_event(plant: Plant) -> EventPayload:
    """Create a plant deleted event."""
    return {
        "plant_id": plant.id,
        "plant": plant,
    }


def create_delete_requested_event(plant: Plant) -> EventPayload:
    return {
        "plant_id": plant.id,
        "name": plant.name,
    }


def create_delete_cancelled_event(plant: Optional[Plant]) -> EventPayload:
    return {
        "plant_id": plant.id if plant else None,
    }


def create_session_event(is_logged_in: bool, method: str) -> EventPayload:
    """Create a session login/logout event.

    Args:
        is_logged_in: Session flag after the transition
        method: "login", "signup" or "logout"
    """
    return {
        "is_logged_in": is_logged_in,
        "method": method,
        "ts": time.time(),
    }
