"""Closed set of user intents accepted by ``AppStateController.dispatch``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from growmate.shared.domain.plants.models import Plant

from .views import AuthView, MainView


@dataclass(frozen=True)
class Navigate:
    view: MainView


@dataclass(frozen=True)
class SelectPlant:
    plant: Plant


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class AddPlant:
    pass


@dataclass(frozen=True)
class EditPlant:
    plant: Plant


@dataclass(frozen=True)
class SavePlant:
    plant: Plant


@dataclass(frozen=True)
class RequestDelete:
    plant: Plant


@dataclass(frozen=True)
class ConfirmDelete:
    pass


@dataclass(frozen=True)
class CancelDelete:
    pass


@dataclass(frozen=True)
class Login:
    pass


@dataclass(frozen=True)
class Signup:
    pass


@dataclass(frozen=True)
class Logout:
    pass


@dataclass(frozen=True)
class SwitchAuthView:
    view: AuthView


Intent = Union[
    Navigate,
    SelectPlant,
    Back,
    AddPlant,
    EditPlant,
    SavePlant,
    RequestDelete,
    ConfirmDelete,
    CancelDelete,
    Login,
    Signup,
    Logout,
    SwitchAuthView,
]
