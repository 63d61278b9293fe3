"""In-memory event bus implementation.

Implements the EventBusProtocol with a dictionary-based handler registry.
Handlers run concurrently and fail open: a failing handler is logged and
never breaks the other handlers or the publishing request.

Usage:
    >>> event_bus = InMemoryEventBus(logger=get_logger())
    >>> event_bus.subscribe(RestaurantCreated, log_restaurant_created)
    >>> await event_bus.publish(RestaurantCreated(restaurant_id=..., name="Kfc", created_by_id=None))
"""

import asyncio
from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Not thread-safe; designed for a single-process async server.

    Attributes:
        _handlers: Event class -> list of async handlers (exact type match).
        _logger: Logger for handler failures and event publishing.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (no inheritance matching).
            handler: Async function accepting the event.
        """
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        No handlers registered is a no-op. Handler exceptions are logged at
        warning level and never propagated.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handlers[idx], "__name__", repr(handlers[idx])),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
