"""Restaurant ownership verification service.

Centralizes the "may this principal modify this restaurant?" check shared
by the update, delete and dish command handlers.

Order of evaluation:
    1. Look the restaurant up -> NOT_FOUND when absent
    2. Creator or Admin -> allowed, otherwise FORBIDDEN

Returns the restaurant on success so handlers avoid a second fetch.

Usage:
    verifier = RestaurantOwnershipVerifier(restaurant_repo, event_bus)
    result = await verifier.verify(restaurant_id, principal, operation="delete")
"""

from uuid import UUID

from src.application.dtos.auth_dtos import Principal
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import Restaurant
from src.domain.errors import RestaurantError
from src.domain.events import RestaurantAccessDenied
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.restaurant_repository import RestaurantRepository


def restaurant_not_found(restaurant_id: UUID) -> ApplicationError:
    """NOT_FOUND error for a missing restaurant."""
    return ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message=RestaurantError.RESTAURANT_NOT_FOUND,
        domain_error=NotFoundError(
            code=ErrorCode.RESTAURANT_NOT_FOUND,
            message=RestaurantError.RESTAURANT_NOT_FOUND,
            resource_type="Restaurant",
            resource_id=str(restaurant_id),
        ),
    )


class RestaurantOwnershipVerifier:
    """Service for verifying restaurant ownership.

    Dependencies (injected via constructor):
        - RestaurantRepository: For restaurant retrieval
        - EventBusProtocol: For publishing RestaurantAccessDenied
    """

    def __init__(
        self,
        restaurant_repo: RestaurantRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._restaurant_repo = restaurant_repo
        self._event_bus = event_bus

    async def verify(
        self,
        restaurant_id: UUID,
        principal: Principal,
        *,
        operation: str,
    ) -> Result[Restaurant, ApplicationError]:
        """Verify the principal may modify a restaurant.

        Args:
            restaurant_id: The restaurant to verify.
            principal: The acting user.
            operation: Operation name, recorded when access is refused.

        Returns:
            Success(Restaurant): Restaurant exists and principal is its creator
                or an Admin.
            Failure(ApplicationError): NOT_FOUND or FORBIDDEN.
        """
        restaurant = await self._restaurant_repo.find_by_id(restaurant_id)

        if restaurant is None:
            return Failure(error=restaurant_not_found(restaurant_id))

        if not (restaurant.is_created_by(principal.user_id) or principal.is_admin):
            await self._event_bus.publish(
                RestaurantAccessDenied(
                    restaurant_id=restaurant_id,
                    user_id=principal.user_id,
                    operation=operation,
                )
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message=RestaurantError.NOT_OWNER,
                    domain_error=AuthorizationError(
                        code=ErrorCode.RESOURCE_NOT_OWNED,
                        message=RestaurantError.NOT_OWNER,
                        required_permission=operation,
                    ),
                )
            )

        return Success(value=restaurant)
