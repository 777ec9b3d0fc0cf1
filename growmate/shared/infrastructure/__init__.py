"""
Shared Infrastructure Module
=============================

Adapters for external collaborators (authentication).
"""

from growmate.shared.infrastructure.auth.gateway import AuthGateway, LocalAuthGateway

__all__ = [
    # Auth
    "AuthGateway",
    "LocalAuthGateway",
]
