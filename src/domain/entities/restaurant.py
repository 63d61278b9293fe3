"""Restaurant domain entity.

Pure business logic, no framework dependencies.

Ownership:
    ``created_by_id`` records the user that created the restaurant. It is
    ``None`` for restaurants inserted by the seeder. Ownership decides who may
    update or delete the restaurant and manage its menu (see
    ``RestaurantOwnershipVerifier``).
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.entities.dish import Dish
from src.domain.value_objects.address import Address


@dataclass
class Restaurant:
    """Restaurant aggregate (restaurant + address + dishes).

    Attributes:
        id: Unique restaurant identifier.
        name: Display name (at most 25 characters).
        description: Optional free-text description.
        category: Cuisine category used by search (e.g. "Fast Food").
        has_delivery: Whether the restaurant delivers.
        contact_email: Optional contact email.
        contact_number: Optional contact phone number.
        address: Owned postal address (1:1).
        created_by_id: Creating user, or None for system-created rows.
        dishes: Menu items (1:N).
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> restaurant = Restaurant(
        ...     id=uuid7(),
        ...     name="KFC",
        ...     category="Fast Food",
        ...     has_delivery=True,
        ...     address=Address(city="Kraków", street="Długa 5", postal_code="30-001"),
        ...     created_by_id=user_id,
        ... )
        >>> restaurant.is_created_by(user_id)
        True
    """

    id: UUID
    name: str
    category: str
    address: Address
    description: str | None = None
    has_delivery: bool = False
    contact_email: str | None = None
    contact_number: str | None = None
    created_by_id: UUID | None = None
    dishes: list[Dish] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_created_by(self, user_id: UUID) -> bool:
        """Check whether ``user_id`` created this restaurant.

        System-created restaurants (no creator) are owned by nobody.
        """
        return self.created_by_id is not None and self.created_by_id == user_id

    def update_details(
        self,
        name: str,
        description: str | None,
        has_delivery: bool,
    ) -> None:
        """Apply an update. Only these three fields are mutable."""
        self.name = name
        self.description = description
        self.has_delivery = has_delivery
