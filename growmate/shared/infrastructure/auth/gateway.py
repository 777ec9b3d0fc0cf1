"""
Authentication gateway contract.

The state controller only needs a yes/no outcome for login and signup; how a
gateway validates credentials is its own concern. Logout is purely local and
never reaches the gateway.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class AuthGateway(Protocol):
    """Outcome provider for the login and signup flows."""

    def login(self) -> bool:
        ...

    def signup(self) -> bool:
        ...


class LocalAuthGateway:
    """Gateway for the single-user client: every completed flow succeeds."""

    def __init__(self) -> None:
        self.login_count = 0
        self.signup_count = 0

    def login(self) -> bool:
        self.login_count += 1
        logger.info("Login flow completed")
        return True

    def signup(self) -> bool:
        self.signup_count += 1
        logger.info("Signup flow completed")
        return True
