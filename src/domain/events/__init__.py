"""Domain events.

Immutable records of facts that happened, published on the event bus.
"""

from src.domain.events.authentication_events import (
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)
from src.domain.events.base_event import DomainEvent
from src.domain.events.restaurant_events import (
    DishCreated,
    DishesCleared,
    RestaurantAccessDenied,
    RestaurantCreated,
    RestaurantDeleted,
    RestaurantUpdated,
)

__all__ = [
    "DishCreated",
    "DishesCleared",
    "DomainEvent",
    "RestaurantAccessDenied",
    "RestaurantCreated",
    "RestaurantDeleted",
    "RestaurantUpdated",
    "UserLoginAttempted",
    "UserLoginFailed",
    "UserLoginSucceeded",
    "UserRegistrationAttempted",
    "UserRegistrationFailed",
    "UserRegistrationSucceeded",
]
