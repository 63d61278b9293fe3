"""Logging event handler for domain events.

Structured logging for the account and restaurant events.

Log Levels:
    - INFO: ATTEMPTED and SUCCEEDED events, restaurant/dish changes
    - WARNING: FAILED events and refused restaurant access

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(
    ...     RestaurantCreated, logging_handler.handle_restaurant_created
    ... )
"""

from src.domain.events import (
    DishCreated,
    DishesCleared,
    RestaurantAccessDenied,
    RestaurantCreated,
    RestaurantDeleted,
    RestaurantUpdated,
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    # =========================================================================
    # User Registration Event Handlers
    # =========================================================================

    async def handle_user_registration_attempted(
        self,
        event: UserRegistrationAttempted,
    ) -> None:
        self._logger.info(
            "user_registration_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
        )

    async def handle_user_registration_succeeded(
        self,
        event: UserRegistrationSucceeded,
    ) -> None:
        self._logger.info(
            "user_registration_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            email=event.email,
            role=event.role,
        )

    async def handle_user_registration_failed(
        self,
        event: UserRegistrationFailed,
    ) -> None:
        """Log failed user registration (WARNING level)."""
        self._logger.warning(
            "user_registration_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
            reason=event.reason,
        )

    # =========================================================================
    # User Login Event Handlers
    # =========================================================================

    async def handle_user_login_attempted(self, event: UserLoginAttempted) -> None:
        self._logger.info(
            "user_login_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
        )

    async def handle_user_login_succeeded(self, event: UserLoginSucceeded) -> None:
        self._logger.info(
            "user_login_succeeded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            email=event.email,
        )

    async def handle_user_login_failed(self, event: UserLoginFailed) -> None:
        """Log failed login (WARNING level).

        The reason (unknown email vs wrong password) is only ever written
        here, never returned to the caller.
        """
        self._logger.warning(
            "user_login_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            email=event.email,
            reason=event.reason,
        )

    # =========================================================================
    # Restaurant Event Handlers
    # =========================================================================

    async def handle_restaurant_created(self, event: RestaurantCreated) -> None:
        self._logger.info(
            "restaurant_created",
            event_id=str(event.event_id),
            restaurant_id=str(event.restaurant_id),
            name=event.name,
            created_by_id=str(event.created_by_id) if event.created_by_id else None,
        )

    async def handle_restaurant_updated(self, event: RestaurantUpdated) -> None:
        self._logger.info(
            "restaurant_updated",
            event_id=str(event.event_id),
            restaurant_id=str(event.restaurant_id),
            updated_by_id=str(event.updated_by_id),
        )

    async def handle_restaurant_deleted(self, event: RestaurantDeleted) -> None:
        self._logger.info(
            "restaurant_deleted",
            event_id=str(event.event_id),
            restaurant_id=str(event.restaurant_id),
            deleted_by_id=str(event.deleted_by_id),
        )

    async def handle_restaurant_access_denied(
        self,
        event: RestaurantAccessDenied,
    ) -> None:
        self._logger.warning(
            "restaurant_access_denied",
            event_id=str(event.event_id),
            restaurant_id=str(event.restaurant_id),
            user_id=str(event.user_id),
            operation=event.operation,
        )

    # =========================================================================
    # Dish Event Handlers
    # =========================================================================

    async def handle_dish_created(self, event: DishCreated) -> None:
        self._logger.info(
            "dish_created",
            event_id=str(event.event_id),
            dish_id=str(event.dish_id),
            restaurant_id=str(event.restaurant_id),
            name=event.name,
        )

    async def handle_dishes_cleared(self, event: DishesCleared) -> None:
        self._logger.info(
            "dishes_cleared",
            event_id=str(event.event_id),
            restaurant_id=str(event.restaurant_id),
            removed_count=event.removed_count,
        )
