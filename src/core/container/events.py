"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Handlers are
subscribed once, when the bus is first created.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns an InMemoryEventBus with the LoggingEventHandler subscribed to
    every account, restaurant and dish event.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(RestaurantCreated(...))
    """
    from src.core.container.infrastructure import get_logger
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
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus = InMemoryEventBus(logger=get_logger())
    logging_handler = LoggingEventHandler(logger=get_logger())

    subscriptions = (
        (UserRegistrationAttempted, logging_handler.handle_user_registration_attempted),
        (UserRegistrationSucceeded, logging_handler.handle_user_registration_succeeded),
        (UserRegistrationFailed, logging_handler.handle_user_registration_failed),
        (UserLoginAttempted, logging_handler.handle_user_login_attempted),
        (UserLoginSucceeded, logging_handler.handle_user_login_succeeded),
        (UserLoginFailed, logging_handler.handle_user_login_failed),
        (RestaurantCreated, logging_handler.handle_restaurant_created),
        (RestaurantUpdated, logging_handler.handle_restaurant_updated),
        (RestaurantDeleted, logging_handler.handle_restaurant_deleted),
        (RestaurantAccessDenied, logging_handler.handle_restaurant_access_denied),
        (DishCreated, logging_handler.handle_dish_created),
        (DishesCleared, logging_handler.handle_dishes_cleared),
    )
    for event_type, handler in subscriptions:
        event_bus.subscribe(event_type, handler)  # type: ignore[arg-type]

    return event_bus
