"""View variants for the navigation and session state machines."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class MainView(str, Enum):
    DASHBOARD = "dashboard"
    ADD = "add"
    ENCYCLOPAEDIA = "encyclopaedia"
    REELS = "reels"
    USER = "user"


class DashboardView(str, Enum):
    LIST = "list"
    DETAIL = "detail"


class AuthView(str, Enum):
    LOGIN = "login"
    SIGNUP = "signup"


class CreateMode(BaseModel):
    """The add form starts empty and saving appends a new plant."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["create"] = "create"


class EditMode(BaseModel):
    """The add form is seeded from an existing plant and saving replaces it."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["edit"] = "edit"
    plant_id: str


FormMode = Annotated[Union[CreateMode, EditMode], Field(discriminator="kind")]

CREATE = CreateMode()
