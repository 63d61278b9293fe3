"""Restaurant and dish domain events.

Published by the restaurant and dish command handlers after the change has
been persisted, and by the ownership verifier when access is refused.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class RestaurantCreated(DomainEvent):
    """A restaurant (with its address) was created."""

    restaurant_id: UUID
    name: str
    created_by_id: UUID | None


@dataclass(frozen=True, kw_only=True, slots=True)
class RestaurantUpdated(DomainEvent):
    """Name, description or delivery flag of a restaurant changed."""

    restaurant_id: UUID
    updated_by_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class RestaurantDeleted(DomainEvent):
    """A restaurant was deleted together with its address and dishes."""

    restaurant_id: UUID
    deleted_by_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class RestaurantAccessDenied(DomainEvent):
    """A user tried to modify a restaurant it does not own.

    Attributes:
        restaurant_id: Target restaurant.
        user_id: Acting user.
        operation: Attempted operation ("update", "delete", "create_dish", ...).
    """

    restaurant_id: UUID
    user_id: UUID
    operation: str


@dataclass(frozen=True, kw_only=True, slots=True)
class DishCreated(DomainEvent):
    """A dish was added to a restaurant's menu."""

    dish_id: UUID
    restaurant_id: UUID
    name: str


@dataclass(frozen=True, kw_only=True, slots=True)
class DishesCleared(DomainEvent):
    """Every dish of a restaurant was removed."""

    restaurant_id: UUID
    removed_count: int
