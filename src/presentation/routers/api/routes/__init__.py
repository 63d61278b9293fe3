"""API Route Registry package.

Modules:
    metadata: Core types (RouteMetadata, AuthPolicy, ErrorSpec, ...)
    registry: ROUTE_REGISTRY - List of all route definitions
    generator: register_routes_from_registry() - Generate FastAPI routes
"""

from src.presentation.routers.api.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)

__all__ = [
    "AuthLevel",
    "AuthPolicy",
    "ErrorSpec",
    "HTTPMethod",
    "IdempotencyLevel",
    "RouteMetadata",
]
