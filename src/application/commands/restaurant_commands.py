"""Restaurant commands (CQRS write operations).

Every mutating command carries the acting ``Principal`` explicitly.
"""

from dataclasses import dataclass
from uuid import UUID

from src.application.dtos.auth_dtos import Principal


@dataclass(frozen=True, kw_only=True)
class CreateRestaurant:
    """Create a restaurant together with its address.

    The principal becomes the restaurant's creator (owner).

    Example:
        >>> command = CreateRestaurant(
        ...     principal=principal,
        ...     name="Kfc",
        ...     category="Fast Food",
        ...     city="Kraków",
        ...     street="Długa 5",
        ...     postal_code="30-001",
        ... )
    """

    principal: Principal
    name: str | None
    category: str | None
    city: str | None
    street: str | None
    description: str | None = None
    has_delivery: bool = False
    contact_email: str | None = None
    contact_number: str | None = None
    postal_code: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateRestaurant:
    """Change name, description and delivery flag of a restaurant."""

    principal: Principal
    restaurant_id: UUID
    name: str | None
    description: str | None = None
    has_delivery: bool = False


@dataclass(frozen=True, kw_only=True)
class DeleteRestaurant:
    """Delete a restaurant with its address and dishes."""

    principal: Principal
    restaurant_id: UUID
