"""Dish queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetDish:
    """Get one dish of a restaurant.

    A dish that exists but belongs to another restaurant is not found.
    """

    restaurant_id: UUID
    dish_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListDishes:
    """List the dishes of a restaurant."""

    restaurant_id: UUID
