"""Restaurant resource handlers.

Handler functions for restaurant endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_restaurants   - Search, sort and page restaurants (anonymous)
    get_restaurant     - Get one restaurant with its dishes (anonymous)
    create_restaurant  - Create restaurant owned by the caller
    update_restaurant  - Update name/description/delivery (owner or admin)
    delete_restaurant  - Delete restaurant and its dishes (owner or admin)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request, Response, status

from src.application.commands import (
    CreateRestaurant,
    DeleteRestaurant,
    UpdateRestaurant,
)
from src.application.commands.handlers.create_restaurant_handler import (
    CreateRestaurantHandler,
)
from src.application.commands.handlers.delete_restaurant_handler import (
    DeleteRestaurantHandler,
)
from src.application.commands.handlers.update_restaurant_handler import (
    UpdateRestaurantHandler,
)
from src.application.queries import GetRestaurant, ListRestaurants
from src.application.queries.handlers.get_restaurant_handler import (
    GetRestaurantHandler,
)
from src.application.queries.handlers.list_restaurants_handler import (
    ListRestaurantsHandler,
)
from src.core.container import (
    get_create_restaurant_handler,
    get_delete_restaurant_handler,
    get_get_restaurant_handler,
    get_list_restaurants_handler,
    get_update_restaurant_handler,
)
from src.core.result import Failure, Success
from src.domain.enums import SortDirection
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.schemas.restaurant_schemas import (
    RestaurantCreateRequest,
    RestaurantListResponse,
    RestaurantResponse,
    RestaurantUpdateRequest,
)


def restaurant_location(restaurant_id: UUID) -> str:
    return f"/api/restaurant/{restaurant_id}"


async def list_restaurants(
    request: Request,
    page_number: Annotated[
        int, Query(alias="pageNumber", description="1-based page number")
    ] = 0,
    page_size: Annotated[
        int, Query(alias="pageSize", description="Page size: 5, 10 or 15")
    ] = 0,
    search_phrase: Annotated[
        str | None,
        Query(alias="searchPhrase", description="Matches name or category"),
    ] = None,
    sort_by: Annotated[
        str | None,
        Query(alias="sortBy", description="Name, Description or Category"),
    ] = None,
    sort_direction: Annotated[
        SortDirection, Query(alias="sortDirection", description="ASC or DESC")
    ] = SortDirection.ASC,
    handler: ListRestaurantsHandler = Depends(get_list_restaurants_handler),
) -> RestaurantListResponse | Response:
    """List restaurants.

    GET /api/restaurant?pageSize=5&pageNumber=1 → 200 OK

    Missing paging parameters are not defaulted: an empty query string
    fails validation with 400.

    Returns:
        RestaurantListResponse with one page and paging totals.
        Problem Details 400 when the query is invalid.
    """
    query = ListRestaurants(
        page_number=page_number,
        page_size=page_size,
        search_phrase=search_phrase,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RestaurantListResponse.from_dto(result.value)


async def get_restaurant(
    request: Request,
    restaurant_id: Annotated[UUID, Path(description="Restaurant UUID")],
    handler: GetRestaurantHandler = Depends(get_get_restaurant_handler),
) -> RestaurantResponse | Response:
    """Get a single restaurant.

    GET /api/restaurant/{id} → 200 OK, 404 if absent
    """
    result = await handler.handle(GetRestaurant(restaurant_id=restaurant_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RestaurantResponse.from_dto(result.value)


async def create_restaurant(
    request: Request,
    principal: AuthenticatedUser,
    data: RestaurantCreateRequest,
    handler: CreateRestaurantHandler = Depends(get_create_restaurant_handler),
) -> Response:
    """Create a restaurant owned by the caller.

    POST /api/restaurant → 201 Created, Location: /api/restaurant/{id}

    Args:
        request: FastAPI request object.
        principal: Authenticated caller (becomes the creator).
        data: Restaurant fields with embedded address.
        handler: Create restaurant handler (injected).

    Returns:
        Empty 201 response with Location header.
        Problem Details 400 when the body is invalid.
    """
    command = CreateRestaurant(
        principal=principal,
        name=data.name,
        description=data.description,
        category=data.category,
        has_delivery=data.has_delivery,
        contact_email=data.contact_email,
        contact_number=data.contact_number,
        city=data.city,
        street=data.street,
        postal_code=data.postal_code,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=restaurant_id):
            return Response(
                status_code=status.HTTP_201_CREATED,
                headers={"Location": restaurant_location(restaurant_id)},
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


async def update_restaurant(
    request: Request,
    principal: AuthenticatedUser,
    restaurant_id: Annotated[UUID, Path(description="Restaurant UUID")],
    data: RestaurantUpdateRequest,
    handler: UpdateRestaurantHandler = Depends(get_update_restaurant_handler),
) -> Response:
    """Update a restaurant's name, description and delivery flag.

    PUT /api/restaurant/{id} → 200 OK

    Errors: 400 invalid body, 404 absent, 403 not owner (no body).
    """
    command = UpdateRestaurant(
        principal=principal,
        restaurant_id=restaurant_id,
        name=data.name,
        description=data.description,
        has_delivery=data.has_delivery,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_200_OK)


async def delete_restaurant(
    request: Request,
    principal: AuthenticatedUser,
    restaurant_id: Annotated[UUID, Path(description="Restaurant UUID")],
    handler: DeleteRestaurantHandler = Depends(get_delete_restaurant_handler),
) -> Response:
    """Delete a restaurant with its address and dishes.

    DELETE /api/restaurant/{id} → 204 No Content

    Existence is checked before ownership: an unknown id is 404 even for a
    caller who could never own it.
    """
    command = DeleteRestaurant(principal=principal, restaurant_id=restaurant_id)
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
