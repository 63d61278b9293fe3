"""Unit tests for dish command and query handlers."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands import CreateDish, DeleteDishes
from src.application.commands.handlers.create_dish_handler import CreateDishHandler
from src.application.commands.handlers.delete_dishes_handler import (
    DeleteDishesHandler,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries import GetDish, ListDishes
from src.application.queries.handlers.get_dish_handler import GetDishHandler
from src.application.queries.handlers.list_dishes_handler import ListDishesHandler
from src.application.services import RestaurantOwnershipVerifier
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.events import DishCreated, DishesCleared
from tests.conftest import make_dish, make_restaurant


def _restaurant_repo(restaurant=None) -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = restaurant
    return repo


@pytest.mark.unit
class TestCreateDishHandler:
    def _handler(self, restaurant_repo, dish_repo, event_bus=None) -> CreateDishHandler:
        event_bus = event_bus or AsyncMock()
        return CreateDishHandler(
            dish_repo,
            RestaurantOwnershipVerifier(restaurant_repo, event_bus),
            event_bus,
        )

    async def test_owner_adds_dish(self, owner):
        restaurant = make_restaurant(created_by_id=owner.user_id)
        dish_repo = AsyncMock()
        event_bus = AsyncMock()
        handler = self._handler(_restaurant_repo(restaurant), dish_repo, event_bus)

        result = await handler.handle(
            CreateDish(
                principal=owner,
                restaurant_id=restaurant.id,
                name="Nashville Hot Chicken",
                price=Decimal("10.30"),
            )
        )

        assert isinstance(result, Success)
        saved = dish_repo.save.call_args.args[0]
        assert saved.id == result.value
        assert saved.restaurant_id == restaurant.id
        assert saved.price == Decimal("10.30")
        assert isinstance(event_bus.publish.call_args.args[0], DishCreated)

    async def test_stranger_cannot_add_dish(self, owner, stranger):
        restaurant = make_restaurant(created_by_id=owner.user_id)
        dish_repo = AsyncMock()
        handler = self._handler(_restaurant_repo(restaurant), dish_repo)

        result = await handler.handle(
            CreateDish(
                principal=stranger,
                restaurant_id=restaurant.id,
                name="Nuggets",
                price=Decimal("1"),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        dish_repo.save.assert_not_called()

    async def test_unknown_restaurant_is_not_found(self, owner):
        handler = self._handler(_restaurant_repo(None), AsyncMock())

        result = await handler.handle(
            CreateDish(
                principal=owner,
                restaurant_id=uuid7(),
                name="Nuggets",
                price=Decimal("1"),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND

    async def test_negative_price_is_validation_failure(self, owner):
        restaurant_repo = _restaurant_repo(None)
        handler = self._handler(restaurant_repo, AsyncMock())

        result = await handler.handle(
            CreateDish(
                principal=owner,
                restaurant_id=uuid7(),
                name="Nuggets",
                price=Decimal("-1"),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        restaurant_repo.find_by_id.assert_not_called()


@pytest.mark.unit
class TestDeleteDishesHandler:
    async def test_owner_clears_menu(self, owner):
        restaurant = make_restaurant(created_by_id=owner.user_id)
        restaurant_repo = _restaurant_repo(restaurant)
        dish_repo = AsyncMock()
        dish_repo.delete_by_restaurant_id.return_value = 3
        event_bus = AsyncMock()
        handler = DeleteDishesHandler(
            dish_repo, RestaurantOwnershipVerifier(restaurant_repo, event_bus), event_bus
        )

        result = await handler.handle(
            DeleteDishes(principal=owner, restaurant_id=restaurant.id)
        )

        assert result == Success(value=3)
        event = event_bus.publish.call_args.args[0]
        assert isinstance(event, DishesCleared)
        assert event.removed_count == 3

    async def test_stranger_cannot_clear_menu(self, owner, stranger):
        restaurant = make_restaurant(created_by_id=owner.user_id)
        dish_repo = AsyncMock()
        event_bus = AsyncMock()
        handler = DeleteDishesHandler(
            dish_repo,
            RestaurantOwnershipVerifier(_restaurant_repo(restaurant), event_bus),
            event_bus,
        )

        result = await handler.handle(
            DeleteDishes(principal=stranger, restaurant_id=restaurant.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        dish_repo.delete_by_restaurant_id.assert_not_called()


@pytest.mark.unit
class TestDishQueries:
    async def test_list_dishes_of_existing_restaurant(self):
        restaurant = make_restaurant()
        dish_repo = AsyncMock()
        dish_repo.find_by_restaurant_id.return_value = [
            make_dish(restaurant.id, "Nuggets"),
            make_dish(restaurant.id, "Wings"),
        ]
        handler = ListDishesHandler(_restaurant_repo(restaurant), dish_repo)

        result = await handler.handle(ListDishes(restaurant_id=restaurant.id))

        assert isinstance(result, Success)
        assert [dish.name for dish in result.value] == ["Nuggets", "Wings"]

    async def test_list_dishes_of_unknown_restaurant(self):
        dish_repo = AsyncMock()
        handler = ListDishesHandler(_restaurant_repo(None), dish_repo)

        result = await handler.handle(ListDishes(restaurant_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        dish_repo.find_by_restaurant_id.assert_not_called()

    async def test_get_dish(self):
        restaurant = make_restaurant()
        dish = make_dish(restaurant.id)
        dish_repo = AsyncMock()
        dish_repo.find_by_id.return_value = dish
        handler = GetDishHandler(_restaurant_repo(restaurant), dish_repo)

        result = await handler.handle(
            GetDish(restaurant_id=restaurant.id, dish_id=dish.id)
        )

        assert isinstance(result, Success)
        assert result.value.id == dish.id
        assert result.value.price == Decimal("5.30")

    async def test_dish_of_another_restaurant_is_not_found(self):
        restaurant = make_restaurant()
        foreign_dish = make_dish(uuid7())
        dish_repo = AsyncMock()
        dish_repo.find_by_id.return_value = foreign_dish
        handler = GetDishHandler(_restaurant_repo(restaurant), dish_repo)

        result = await handler.handle(
            GetDish(restaurant_id=restaurant.id, dish_id=foreign_dish.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.domain_error.code == ErrorCode.DISH_NOT_FOUND
