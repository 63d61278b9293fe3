"""GetRestaurant query handler."""

from src.application.dtos.restaurant_dtos import RestaurantResult
from src.application.errors import ApplicationError
from src.application.queries.restaurant_queries import GetRestaurant
from src.application.services.ownership_verifier import restaurant_not_found
from src.core.result import Failure, Result, Success
from src.domain.protocols.restaurant_repository import RestaurantRepository


class GetRestaurantHandler:
    """Handler for GetRestaurant query (anonymous, no ownership check)."""

    def __init__(self, restaurant_repo: RestaurantRepository) -> None:
        self._restaurant_repo = restaurant_repo

    async def handle(
        self, query: GetRestaurant
    ) -> Result[RestaurantResult, ApplicationError]:
        restaurant = await self._restaurant_repo.find_by_id(query.restaurant_id)
        if restaurant is None:
            return Failure(error=restaurant_not_found(query.restaurant_id))
        return Success(value=RestaurantResult.from_entity(restaurant))
