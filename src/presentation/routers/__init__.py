"""Routers.

``api_router`` carries the ``/api`` resources; ``system_router`` the root
and health endpoints.
"""

from src.presentation.routers.api import api_router
from src.presentation.routers.system import system_router

__all__ = ["api_router", "system_router"]
