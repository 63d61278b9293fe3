"""Dish domain entity.

A dish always belongs to exactly one restaurant and is removed together with
it, or in bulk when the restaurant's menu is cleared.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass
class Dish:
    """Menu item offered by a restaurant.

    Attributes:
        id: Unique dish identifier.
        restaurant_id: Owning restaurant.
        name: Dish name.
        description: Optional free-text description.
        price: Non-negative price.
    """

    id: UUID
    restaurant_id: UUID
    name: str
    price: Decimal
    description: str | None = None

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("Dish price cannot be negative")

    def belongs_to(self, restaurant_id: UUID) -> bool:
        """Check whether this dish is on the given restaurant's menu."""
        return self.restaurant_id == restaurant_id
