"""API routers.

All routes are generated from the Route Metadata Registry at startup.
See src/presentation/routers/api/routes/registry.py for the route catalog.

Resources:
    /api/restaurant                    - Restaurant listing and CRUD
    /api/restaurant/{id}/dish          - Dish sub-resource
    /api/account                       - Register, login, policy check
    /api/weatherforecast               - Weather forecast demo
"""

from fastapi import APIRouter

from src.presentation.routers.api.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY

api_router = APIRouter(prefix="/api")
register_routes_from_registry(api_router, ROUTE_REGISTRY)

__all__ = [
    "api_router",
]
