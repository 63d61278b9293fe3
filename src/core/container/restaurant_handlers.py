"""Restaurant, dish and weather handler factories (request-scoped)."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.application.commands.handlers.create_dish_handler import (
        CreateDishHandler,
    )
    from src.application.commands.handlers.create_restaurant_handler import (
        CreateRestaurantHandler,
    )
    from src.application.commands.handlers.delete_dishes_handler import (
        DeleteDishesHandler,
    )
    from src.application.commands.handlers.delete_restaurant_handler import (
        DeleteRestaurantHandler,
    )
    from src.application.commands.handlers.update_restaurant_handler import (
        UpdateRestaurantHandler,
    )
    from src.application.queries.handlers.get_dish_handler import GetDishHandler
    from src.application.queries.handlers.get_restaurant_handler import (
        GetRestaurantHandler,
    )
    from src.application.queries.handlers.get_weather_forecast_handler import (
        GetWeatherForecastHandler,
    )
    from src.application.queries.handlers.list_dishes_handler import (
        ListDishesHandler,
    )
    from src.application.queries.handlers.list_restaurants_handler import (
        ListRestaurantsHandler,
    )
    from src.application.services.ownership_verifier import (
        RestaurantOwnershipVerifier,
    )
    from src.infrastructure.persistence.repositories import RestaurantRepository


def _ownership_verifier(
    restaurant_repo: "RestaurantRepository",
) -> "RestaurantOwnershipVerifier":
    from src.application.services.ownership_verifier import (
        RestaurantOwnershipVerifier,
    )

    return RestaurantOwnershipVerifier(
        restaurant_repo=restaurant_repo,
        event_bus=get_event_bus(),
    )


# ============================================================================
# Restaurant Handlers
# ============================================================================


async def get_list_restaurants_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListRestaurantsHandler":
    from src.application.queries.handlers.list_restaurants_handler import (
        ListRestaurantsHandler,
    )
    from src.infrastructure.persistence.repositories import RestaurantRepository

    return ListRestaurantsHandler(restaurant_repo=RestaurantRepository(session=session))


async def get_get_restaurant_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetRestaurantHandler":
    from src.application.queries.handlers.get_restaurant_handler import (
        GetRestaurantHandler,
    )
    from src.infrastructure.persistence.repositories import RestaurantRepository

    return GetRestaurantHandler(restaurant_repo=RestaurantRepository(session=session))


async def get_create_restaurant_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateRestaurantHandler":
    from src.application.commands.handlers.create_restaurant_handler import (
        CreateRestaurantHandler,
    )
    from src.infrastructure.persistence.repositories import RestaurantRepository

    return CreateRestaurantHandler(
        restaurant_repo=RestaurantRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_update_restaurant_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateRestaurantHandler":
    from src.application.commands.handlers.update_restaurant_handler import (
        UpdateRestaurantHandler,
    )
    from src.infrastructure.persistence.repositories import RestaurantRepository

    restaurant_repo = RestaurantRepository(session=session)
    return UpdateRestaurantHandler(
        restaurant_repo=restaurant_repo,
        ownership_verifier=_ownership_verifier(restaurant_repo),
        event_bus=get_event_bus(),
    )


async def get_delete_restaurant_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteRestaurantHandler":
    from src.application.commands.handlers.delete_restaurant_handler import (
        DeleteRestaurantHandler,
    )
    from src.infrastructure.persistence.repositories import RestaurantRepository

    restaurant_repo = RestaurantRepository(session=session)
    return DeleteRestaurantHandler(
        restaurant_repo=restaurant_repo,
        ownership_verifier=_ownership_verifier(restaurant_repo),
        event_bus=get_event_bus(),
    )


# ============================================================================
# Dish Handlers
# ============================================================================


async def get_list_dishes_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListDishesHandler":
    from src.application.queries.handlers.list_dishes_handler import (
        ListDishesHandler,
    )
    from src.infrastructure.persistence.repositories import (
        DishRepository,
        RestaurantRepository,
    )

    return ListDishesHandler(
        restaurant_repo=RestaurantRepository(session=session),
        dish_repo=DishRepository(session=session),
    )


async def get_get_dish_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetDishHandler":
    from src.application.queries.handlers.get_dish_handler import GetDishHandler
    from src.infrastructure.persistence.repositories import (
        DishRepository,
        RestaurantRepository,
    )

    return GetDishHandler(
        restaurant_repo=RestaurantRepository(session=session),
        dish_repo=DishRepository(session=session),
    )


async def get_create_dish_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateDishHandler":
    from src.application.commands.handlers.create_dish_handler import (
        CreateDishHandler,
    )
    from src.infrastructure.persistence.repositories import (
        DishRepository,
        RestaurantRepository,
    )

    return CreateDishHandler(
        dish_repo=DishRepository(session=session),
        ownership_verifier=_ownership_verifier(RestaurantRepository(session=session)),
        event_bus=get_event_bus(),
    )


async def get_delete_dishes_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteDishesHandler":
    from src.application.commands.handlers.delete_dishes_handler import (
        DeleteDishesHandler,
    )
    from src.infrastructure.persistence.repositories import (
        DishRepository,
        RestaurantRepository,
    )

    return DeleteDishesHandler(
        dish_repo=DishRepository(session=session),
        ownership_verifier=_ownership_verifier(RestaurantRepository(session=session)),
        event_bus=get_event_bus(),
    )


# ============================================================================
# Weather
# ============================================================================


def get_weather_forecast_handler() -> "GetWeatherForecastHandler":
    from src.application.queries.handlers.get_weather_forecast_handler import (
        GetWeatherForecastHandler,
    )

    return GetWeatherForecastHandler()
