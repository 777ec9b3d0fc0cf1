"""
GrowMate Shared Kernel
======================

Business logic and infrastructure shared by GrowMate front ends.

Architecture:
- core: EventBus, configuration, logging setup
- infrastructure: Adapters for external collaborators (auth)
- domain: Plant entity and repository
"""

__version__ = "0.1.0"

__all__ = []
