"""ListDishes query handler."""

from src.application.dtos.restaurant_dtos import DishResult
from src.application.errors import ApplicationError
from src.application.queries.dish_queries import ListDishes
from src.application.services.ownership_verifier import restaurant_not_found
from src.core.result import Failure, Result, Success
from src.domain.protocols.dish_repository import DishRepository
from src.domain.protocols.restaurant_repository import RestaurantRepository


class ListDishesHandler:
    """Handler for ListDishes query. Unknown restaurant is NOT_FOUND."""

    def __init__(
        self,
        restaurant_repo: RestaurantRepository,
        dish_repo: DishRepository,
    ) -> None:
        self._restaurant_repo = restaurant_repo
        self._dish_repo = dish_repo

    async def handle(
        self, query: ListDishes
    ) -> Result[list[DishResult], ApplicationError]:
        restaurant = await self._restaurant_repo.find_by_id(query.restaurant_id)
        if restaurant is None:
            return Failure(error=restaurant_not_found(query.restaurant_id))

        dishes = await self._dish_repo.find_by_restaurant_id(query.restaurant_id)
        return Success(value=[DishResult.from_entity(dish) for dish in dishes])
