"""Event bus protocol (port) for domain events.

The domain defines the port, infrastructure provides the adapter
(``InMemoryEventBus``) and the container wires handlers at startup.

Usage:
    >>> event_bus = get_event_bus()
    >>> await event_bus.publish(RestaurantCreated(restaurant_id=..., ...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

# Type alias for event handler functions
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, nor fail the publishing request.
        2. **Async support**: All handlers are async.
        3. **Exact type routing**: Handlers registered for an event type only
           receive events of that exact type.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (e.g., RestaurantCreated).
            handler: Async function to call when event is published.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers (fail-open)."""
        ...
