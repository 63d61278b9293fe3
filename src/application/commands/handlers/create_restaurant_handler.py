"""CreateRestaurant command handler.

Flow:
1. Validate input (name, category, address, contact email)
2. Build the Restaurant aggregate with its Address, owned by the principal
3. Save
4. Emit RestaurantCreated
5. Return Success(restaurant_id)
"""

from typing import cast
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.restaurant_commands import CreateRestaurant
from src.application.errors import ApplicationError
from src.application.validators import validate_create_restaurant
from src.core.result import Failure, Result, Success
from src.domain.entities import Restaurant
from src.domain.events import RestaurantCreated
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.restaurant_repository import RestaurantRepository
from src.domain.value_objects import Address


class CreateRestaurantHandler:
    """Handler for CreateRestaurant command."""

    def __init__(
        self,
        restaurant_repo: RestaurantRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._restaurant_repo = restaurant_repo
        self._event_bus = event_bus

    async def handle(self, cmd: CreateRestaurant) -> Result[UUID, ApplicationError]:
        """Handle restaurant creation.

        Returns:
            Success(restaurant_id) on creation.
            Failure(ApplicationError) with every invalid field otherwise.
        """
        errors = validate_create_restaurant(cmd)
        if errors:
            return Failure(error=ApplicationError.validation_failed(errors))

        restaurant = Restaurant(
            id=uuid7(),
            name=cast(str, cmd.name),
            category=cast(str, cmd.category),
            description=cmd.description,
            has_delivery=cmd.has_delivery,
            contact_email=cmd.contact_email,
            contact_number=cmd.contact_number,
            address=Address(
                city=cast(str, cmd.city),
                street=cast(str, cmd.street),
                postal_code=cmd.postal_code,
            ),
            created_by_id=cmd.principal.user_id,
        )
        await self._restaurant_repo.save(restaurant)

        await self._event_bus.publish(
            RestaurantCreated(
                restaurant_id=restaurant.id,
                name=restaurant.name,
                created_by_id=restaurant.created_by_id,
            )
        )

        return Success(value=restaurant.id)
