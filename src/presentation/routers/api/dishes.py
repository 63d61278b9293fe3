"""Dish sub-resource handlers.

Handlers:
    list_dishes    - All dishes of a restaurant (anonymous)
    get_dish       - One dish of a restaurant (anonymous)
    create_dish    - Add a dish (owner or admin)
    delete_dishes  - Remove every dish of a restaurant (owner or admin)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request, Response, status

from src.application.commands import CreateDish, DeleteDishes
from src.application.commands.handlers.create_dish_handler import CreateDishHandler
from src.application.commands.handlers.delete_dishes_handler import (
    DeleteDishesHandler,
)
from src.application.queries import GetDish, ListDishes
from src.application.queries.handlers.get_dish_handler import GetDishHandler
from src.application.queries.handlers.list_dishes_handler import ListDishesHandler
from src.core.container import (
    get_create_dish_handler,
    get_delete_dishes_handler,
    get_get_dish_handler,
    get_list_dishes_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.schemas.restaurant_schemas import DishCreateRequest, DishResponse


RestaurantId = Annotated[UUID, Path(description="Restaurant UUID")]


async def list_dishes(
    request: Request,
    restaurant_id: RestaurantId,
    handler: ListDishesHandler = Depends(get_list_dishes_handler),
) -> list[DishResponse] | Response:
    """GET /api/restaurant/{id}/dish → 200 OK, 404 if restaurant absent."""
    result = await handler.handle(ListDishes(restaurant_id=restaurant_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return [DishResponse.from_dto(dish) for dish in result.value]


async def get_dish(
    request: Request,
    restaurant_id: RestaurantId,
    dish_id: Annotated[UUID, Path(description="Dish UUID")],
    handler: GetDishHandler = Depends(get_get_dish_handler),
) -> DishResponse | Response:
    """Get one dish.

    GET /api/restaurant/{id}/dish/{dishId} → 200 OK

    404 when the restaurant is absent, the dish is absent, or the dish
    belongs to a different restaurant.
    """
    result = await handler.handle(
        GetDish(restaurant_id=restaurant_id, dish_id=dish_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return DishResponse.from_dto(result.value)


async def create_dish(
    request: Request,
    principal: AuthenticatedUser,
    restaurant_id: RestaurantId,
    data: DishCreateRequest,
    handler: CreateDishHandler = Depends(get_create_dish_handler),
) -> Response:
    """Add a dish to a restaurant.

    POST /api/restaurant/{id}/dish → 201 Created,
    Location: /api/restaurant/{id}/dish/{dishId}
    """
    command = CreateDish(
        principal=principal,
        restaurant_id=restaurant_id,
        name=data.name,
        description=data.description,
        price=data.price,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=dish_id):
            return Response(
                status_code=status.HTTP_201_CREATED,
                headers={
                    "Location": f"/api/restaurant/{restaurant_id}/dish/{dish_id}"
                },
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


async def delete_dishes(
    request: Request,
    principal: AuthenticatedUser,
    restaurant_id: RestaurantId,
    handler: DeleteDishesHandler = Depends(get_delete_dishes_handler),
) -> Response:
    """DELETE /api/restaurant/{id}/dish → 204 No Content."""
    command = DeleteDishes(principal=principal, restaurant_id=restaurant_id)
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
