"""DeleteRestaurant command handler.

Existence is checked before ownership, so deleting an unknown id is
NOT_FOUND even for a caller who would not be allowed to delete it.
"""

from src.application.commands.restaurant_commands import DeleteRestaurant
from src.application.errors import ApplicationError
from src.application.services.ownership_verifier import RestaurantOwnershipVerifier
from src.core.result import Failure, Result, Success
from src.domain.events import RestaurantDeleted
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.restaurant_repository import RestaurantRepository


class DeleteRestaurantHandler:
    """Handler for DeleteRestaurant command.

    Address and dishes go with the restaurant (cascade).
    """

    def __init__(
        self,
        restaurant_repo: RestaurantRepository,
        ownership_verifier: RestaurantOwnershipVerifier,
        event_bus: EventBusProtocol,
    ) -> None:
        self._restaurant_repo = restaurant_repo
        self._ownership_verifier = ownership_verifier
        self._event_bus = event_bus

    async def handle(self, cmd: DeleteRestaurant) -> Result[None, ApplicationError]:
        verification = await self._ownership_verifier.verify(
            cmd.restaurant_id, cmd.principal, operation="delete"
        )
        if isinstance(verification, Failure):
            return verification

        await self._restaurant_repo.delete(cmd.restaurant_id)

        await self._event_bus.publish(
            RestaurantDeleted(
                restaurant_id=cmd.restaurant_id,
                deleted_by_id=cmd.principal.user_id,
            )
        )
        return Success(value=None)
