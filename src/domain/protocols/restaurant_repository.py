"""RestaurantRepository protocol for restaurant persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.restaurant import Restaurant
from src.domain.enums import RestaurantSortColumn, SortDirection


class RestaurantRepository(Protocol):
    """Restaurant repository protocol (port).

    Restaurants are always loaded together with their address and dishes.

    Methods:
        find_by_id: Retrieve restaurant by ID
        search: Filter, sort and page the restaurant collection
        count_by_creator: Count restaurants created by a user
        save: Create new restaurant (with address)
        update: Persist changes to name/description/delivery flag
        delete: Delete restaurant, cascading to address and dishes
    """

    async def find_by_id(self, restaurant_id: UUID) -> Restaurant | None:
        """Find restaurant by ID.

        Args:
            restaurant_id: Restaurant's unique identifier.

        Returns:
            Restaurant (with address and dishes) if found, None otherwise.
        """
        ...

    async def search(
        self,
        *,
        search_phrase: str | None,
        sort_by: RestaurantSortColumn | None,
        sort_direction: SortDirection,
        offset: int,
        limit: int,
    ) -> tuple[list[Restaurant], int]:
        """Filter, sort and page restaurants.

        Args:
            search_phrase: Case-insensitive substring matched against name
                or category. None or blank disables filtering.
            sort_by: Column to order by. None falls back to a stable order.
            sort_direction: Ascending or descending.
            offset: Number of matching rows to skip.
            limit: Maximum number of rows to return.

        Returns:
            Tuple of (page of restaurants, total number of matching rows
            before paging).
        """
        ...

    async def count_by_creator(self, user_id: UUID) -> int:
        """Count restaurants whose creator is ``user_id``."""
        ...

    async def save(self, restaurant: Restaurant) -> None:
        """Create new restaurant together with its address."""
        ...

    async def update(self, restaurant: Restaurant) -> None:
        """Persist name, description and delivery flag of an existing restaurant."""
        ...

    async def delete(self, restaurant_id: UUID) -> None:
        """Delete restaurant. Address and dishes are removed with it."""
        ...
