"""In-process event bus.

Subscribers are looked up by the exact class of the published event and run
concurrently. The bus is fail-open: a subscriber that raises is logged and
skipped, and ``publish`` still returns normally, because the write that
produced the event has already committed.

    bus = InMemoryEventBus(logger=get_logger())
    bus.subscribe(RegistrationCancelled, invalidation.handle_registration_changed)
    await bus.publish(RegistrationCancelled(...))
"""

import asyncio
from collections import defaultdict

from seatwise.domain.events.base_event import DomainEvent
from seatwise.domain.protocols.event_bus_protocol import EventHandler
from seatwise.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """EventBusProtocol adapter backed by a dict of subscriber lists.

    Single event loop only; not thread-safe.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._subscribers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Add ``handler`` for events of exactly ``event_type``.

        Subclasses of ``event_type`` are not delivered. Subscribing the same
        handler twice delivers twice.
        """
        self._subscribers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Deliver ``event`` to its subscribers; never raises."""
        event_name = type(event).__name__
        subscribers = self._subscribers.get(type(event), [])
        if not subscribers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_name,
            event_id=str(event.event_id),
            organization_id=str(event.organization_id),
            handler_count=len(subscribers),
        )

        outcomes = await asyncio.gather(
            *(subscriber(event) for subscriber in subscribers),
            return_exceptions=True,
        )

        for subscriber, outcome in zip(subscribers, outcomes, strict=True):
            if not isinstance(outcome, Exception):
                continue
            self._logger.warning(
                "event_handler_failed",
                event_type=event_name,
                event_id=str(event.event_id),
                aggregate_id=str(event.aggregate_id),
                handler_name=getattr(subscriber, "__name__", repr(subscriber)),
                error_type=type(outcome).__name__,
                error_message=str(outcome),
            )
