"""DishRepository protocol for dish persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.dish import Dish


class DishRepository(Protocol):
    """Dish repository protocol (port).

    Methods:
        find_by_id: Retrieve dish by ID
        find_by_restaurant_id: All dishes on a restaurant's menu
        save: Create new dish
        delete_by_restaurant_id: Remove every dish of a restaurant
    """

    async def find_by_id(self, dish_id: UUID) -> Dish | None:
        """Find dish by ID.

        Returns:
            Dish if found, None otherwise. Callers check the dish belongs to
            the restaurant in the URL.
        """
        ...

    async def find_by_restaurant_id(self, restaurant_id: UUID) -> list[Dish]:
        """List dishes of a restaurant ordered by name."""
        ...

    async def save(self, dish: Dish) -> None:
        """Create new dish."""
        ...

    async def delete_by_restaurant_id(self, restaurant_id: UUID) -> int:
        """Delete all dishes of a restaurant.

        Returns:
            Number of dishes removed.
        """
        ...
