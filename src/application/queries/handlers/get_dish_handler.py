"""GetDish query handler."""

from src.application.dtos.restaurant_dtos import DishResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.dish_queries import GetDish
from src.application.services.ownership_verifier import restaurant_not_found
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import RestaurantError
from src.domain.protocols.dish_repository import DishRepository
from src.domain.protocols.restaurant_repository import RestaurantRepository


class GetDishHandler:
    """Handler for GetDish query.

    The restaurant must exist and the dish must be on its menu; a dish of
    another restaurant is reported as not found.
    """

    def __init__(
        self,
        restaurant_repo: RestaurantRepository,
        dish_repo: DishRepository,
    ) -> None:
        self._restaurant_repo = restaurant_repo
        self._dish_repo = dish_repo

    async def handle(self, query: GetDish) -> Result[DishResult, ApplicationError]:
        restaurant = await self._restaurant_repo.find_by_id(query.restaurant_id)
        if restaurant is None:
            return Failure(error=restaurant_not_found(query.restaurant_id))

        dish = await self._dish_repo.find_by_id(query.dish_id)
        if dish is None or not dish.belongs_to(query.restaurant_id):
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=RestaurantError.DISH_NOT_FOUND,
                    domain_error=NotFoundError(
                        code=ErrorCode.DISH_NOT_FOUND,
                        message=RestaurantError.DISH_NOT_FOUND,
                        resource_type="Dish",
                        resource_id=str(query.dish_id),
                    ),
                )
            )

        return Success(value=DishResult.from_entity(dish))
