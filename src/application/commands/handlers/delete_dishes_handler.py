"""DeleteDishes command handler (clear a restaurant's menu)."""

from src.application.commands.dish_commands import DeleteDishes
from src.application.errors import ApplicationError
from src.application.services.ownership_verifier import RestaurantOwnershipVerifier
from src.core.result import Failure, Result, Success
from src.domain.events import DishesCleared
from src.domain.protocols.dish_repository import DishRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class DeleteDishesHandler:
    """Handler for DeleteDishes command.

    Returns the number of removed dishes. Clearing an empty menu succeeds.
    """

    def __init__(
        self,
        dish_repo: DishRepository,
        ownership_verifier: RestaurantOwnershipVerifier,
        event_bus: EventBusProtocol,
    ) -> None:
        self._dish_repo = dish_repo
        self._ownership_verifier = ownership_verifier
        self._event_bus = event_bus

    async def handle(self, cmd: DeleteDishes) -> Result[int, ApplicationError]:
        verification = await self._ownership_verifier.verify(
            cmd.restaurant_id, cmd.principal, operation="delete_dishes"
        )
        if isinstance(verification, Failure):
            return verification

        removed = await self._dish_repo.delete_by_restaurant_id(cmd.restaurant_id)

        await self._event_bus.publish(
            DishesCleared(restaurant_id=cmd.restaurant_id, removed_count=removed)
        )
        return Success(value=removed)
