"""CreateDish command handler."""

from typing import cast
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.dish_commands import CreateDish
from src.application.errors import ApplicationError
from src.application.services.ownership_verifier import RestaurantOwnershipVerifier
from src.application.validators import validate_create_dish
from src.core.result import Failure, Result, Success
from src.domain.entities import Dish
from src.domain.events import DishCreated
from src.domain.protocols.dish_repository import DishRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class CreateDishHandler:
    """Handler for CreateDish command.

    Only the restaurant's creator (or an Admin) may add dishes.
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

    async def handle(self, cmd: CreateDish) -> Result[UUID, ApplicationError]:
        """Handle dish creation.

        Returns:
            Success(dish_id) on creation.
            Failure(ApplicationError): validation failure, NOT_FOUND or FORBIDDEN.
        """
        errors = validate_create_dish(cmd)
        if errors:
            return Failure(error=ApplicationError.validation_failed(errors))

        verification = await self._ownership_verifier.verify(
            cmd.restaurant_id, cmd.principal, operation="create_dish"
        )
        if isinstance(verification, Failure):
            return verification

        dish = Dish(
            id=uuid7(),
            restaurant_id=cmd.restaurant_id,
            name=cast(str, cmd.name),
            description=cmd.description,
            price=cmd.price,
        )
        await self._dish_repo.save(dish)

        await self._event_bus.publish(
            DishCreated(dish_id=dish.id, restaurant_id=dish.restaurant_id, name=dish.name)
        )
        return Success(value=dish.id)
