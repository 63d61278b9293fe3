"""Builds the ``/api`` routes from ``ROUTE_REGISTRY``.

Each RouteMetadata entry becomes one ``add_api_route`` call. Authenticated
routes get ``get_current_user`` as a route dependency, so a missing or bad
token is refused with 401 before the handler's own dependencies (database
session, handler factory) are resolved.

Usage:
    api_router = APIRouter(prefix="/api")
    register_routes_from_registry(api_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from src.presentation.routers.api.errors.problem_details import ProblemDetails
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
)
from src.presentation.routers.api.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Add every registry entry to ``router``.

    Raises:
        ValueError: If two entries share a method and path.
    """
    _check_unique(registry)

    for metadata in registry:
        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata.errors or []),
            dependencies=_build_dependencies(metadata.auth_policy),
            deprecated=metadata.deprecated,
        )


def _check_unique(registry: list[RouteMetadata]) -> None:
    seen: set[tuple[str, str]] = set()
    for metadata in registry:
        key = (metadata.method.value, metadata.path)
        if key in seen:
            msg = f"Duplicate route in registry: {key[0]} {key[1]}"
            raise ValueError(msg)
        seen.add(key)


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Route dependencies for an auth level (unknown levels fail closed)."""
    match auth_policy.level:
        case AuthLevel.PUBLIC:
            return []
        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_user)]
        case _:
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """OpenAPI error responses.

    A 403 is documented without content, every other error status with the
    Problem Details schema.

    Example:
        >>> _build_responses([ErrorSpec(status=403, description="Not the owner")])
        {403: {'description': 'Not the owner', 'content': {}}}
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for error in errors:
        if error.status == status.HTTP_403_FORBIDDEN:
            responses[error.status] = {"description": error.description, "content": {}}
        else:
            responses[error.status] = {
                "description": error.description,
                "model": ProblemDetails,
            }
    return responses
