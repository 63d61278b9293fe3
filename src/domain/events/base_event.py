"""Base domain event class.

Domain events represent "things that happened" in the business domain and are
always named in past tense (e.g., RestaurantCreated, UserRegistrationSucceeded).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class RestaurantDeleted(DomainEvent):
    ...     restaurant_id: UUID
    >>>
    >>> event = RestaurantDeleted(restaurant_id=restaurant.id, deleted_by=user_id)
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (RestaurantCreated, NOT CreateRestaurant)
        3. Be frozen dataclasses with kw_only=True

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
