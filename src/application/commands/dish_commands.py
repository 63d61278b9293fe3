"""Dish commands (CQRS write operations)."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.application.dtos.auth_dtos import Principal


@dataclass(frozen=True, kw_only=True)
class CreateDish:
    """Add a dish to a restaurant's menu.

    Attributes:
        principal: Acting user (must own the restaurant or be an admin).
        restaurant_id: Target restaurant.
        name: Dish name.
        price: Non-negative price.
        description: Optional description.
    """

    principal: Principal
    restaurant_id: UUID
    name: str | None
    price: Decimal
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteDishes:
    """Remove every dish of a restaurant."""

    principal: Principal
    restaurant_id: UUID
