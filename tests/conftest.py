"""
Shared test fixtures for the GrowMate test suite.

Provides:
- Demo plants with fixed watering dates
- A repository, event bus and controller wired together
- An event recorder subscribed to every published topic

Usage:
    def test_example(controller, rosie):
        snapshot = controller.select_plant(rosie)
        assert snapshot.selected_plant == rosie
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Tuple

import pytest

from growmate.shared.core import configuration, events
from growmate.shared.core.event_bus import EventBus
from growmate.shared.domain.plants.models import Plant, PlantType
from growmate.shared.domain.plants.repository import PlantRepository
from growmate.shared.domain.plants.seed import demo_plants
from growmate.tracker.state import AppStateController, Store

logging.getLogger("growmate").setLevel(logging.WARNING)

TODAY = date(2024, 5, 1)

ALL_TOPICS = [
    events.TOPIC_STATE_CHANGED,
    events.TOPIC_NAV_SELECT,
    events.TOPIC_PLANT_SAVED,
    events.TOPIC_PLANT_DELETED,
    events.TOPIC_DELETE_REQUESTED,
    events.TOPIC_DELETE_CANCELLED,
    events.TOPIC_SESSION_LOGIN,
    events.TOPIC_SESSION_LOGOUT,
]


class EventRecorder:
    """Collects (topic, payload) pairs in publish order."""

    def __init__(self) -> None:
        self.received: List[Tuple[str, Dict[str, Any]]] = []

    def attach(self, bus: EventBus) -> None:
        for topic in ALL_TOPICS:
            bus.subscribe(topic, self._make_handler(topic))

    def _make_handler(self, topic: str):
        def handler(payload: Dict[str, Any]) -> None:
            self.received.append((topic, payload))
        return handler

    def topics(self) -> List[str]:
        return [topic for topic, _ in self.received]

    def payloads(self, topic: str) -> List[Dict[str, Any]]:
        return [payload for t, payload in self.received if t == topic]


@pytest.fixture(autouse=True)
def _reset_globals():
    Store.reset()
    configuration._config_manager = None
    yield
    Store.reset()
    configuration._config_manager = None


@pytest.fixture()
def plants() -> List[Plant]:
    return demo_plants(TODAY)


@pytest.fixture()
def rosie(plants) -> Plant:
    return plants[0]


@pytest.fixture()
def spike(plants) -> Plant:
    return plants[1]


@pytest.fixture()
def fern() -> Plant:
    return Plant(id="3", name="Fernando", species="Nephrolepis exaltata", plant_type=PlantType.FERN, age=3, leaves=14)


@pytest.fixture()
def repository(plants) -> PlantRepository:
    return PlantRepository(plants)


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def recorder(bus) -> EventRecorder:
    rec = EventRecorder()
    rec.attach(bus)
    return rec


@pytest.fixture()
def controller(bus, repository) -> AppStateController:
    """Controller over the demo plants, already logged in."""
    app = AppStateController(bus, repository=repository)
    app.login()
    return app
