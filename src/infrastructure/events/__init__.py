"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: fail-open in-process event bus

Event Handlers (see ``handlers``):
    - LoggingEventHandler: structured logging for domain events
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
