"""Port for publishing domain events after a unit of work commits.

Command handlers publish; infrastructure subscribers react (logging, cache
eviction). The adapter is ``InMemoryEventBus``.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from seatwise.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """What command handlers need from an event bus.

    Delivery is by exact event class and subscribers may run concurrently.
    A failing subscriber must not affect the others or the publisher; the
    booking it describes is already committed.
    """

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver ``event`` to every subscriber of its class."""
        ...
