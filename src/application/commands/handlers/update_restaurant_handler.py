"""UpdateRestaurant command handler.

Flow:
1. Validate input (rejected before any lookup)
2. Verify ownership (NOT_FOUND before FORBIDDEN)
3. Apply name/description/delivery flag and save
4. Emit RestaurantUpdated
"""

from typing import cast

from src.application.commands.restaurant_commands import UpdateRestaurant
from src.application.errors import ApplicationError
from src.application.services.ownership_verifier import RestaurantOwnershipVerifier
from src.application.validators import validate_update_restaurant
from src.core.result import Failure, Result, Success
from src.domain.events import RestaurantUpdated
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.restaurant_repository import RestaurantRepository


class UpdateRestaurantHandler:
    """Handler for UpdateRestaurant command."""

    def __init__(
        self,
        restaurant_repo: RestaurantRepository,
        ownership_verifier: RestaurantOwnershipVerifier,
        event_bus: EventBusProtocol,
    ) -> None:
        self._restaurant_repo = restaurant_repo
        self._ownership_verifier = ownership_verifier
        self._event_bus = event_bus

    async def handle(self, cmd: UpdateRestaurant) -> Result[None, ApplicationError]:
        errors = validate_update_restaurant(cmd)
        if errors:
            return Failure(error=ApplicationError.validation_failed(errors))

        verification = await self._ownership_verifier.verify(
            cmd.restaurant_id, cmd.principal, operation="update"
        )
        if isinstance(verification, Failure):
            return verification

        restaurant = verification.value
        restaurant.update_details(
            name=cast(str, cmd.name),
            description=cmd.description,
            has_delivery=cmd.has_delivery,
        )
        await self._restaurant_repo.update(restaurant)

        await self._event_bus.publish(
            RestaurantUpdated(
                restaurant_id=restaurant.id,
                updated_by_id=cmd.principal.user_id,
            )
        )
        return Success(value=None)
