"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscribes the
logging and cache-invalidation handlers at startup.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seatwise.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns correct adapter based on SEATWISE_EVENT_BUS_TYPE:
        - 'in-memory': InMemoryEventBus (single process)

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        ValueError: If the configured bus type is unsupported.
    """
    from seatwise.core.config import get_settings
    from seatwise.core.container.infrastructure import (
        get_cache,
        get_cache_keys,
        get_logger,
    )
    from seatwise.domain.events import (
        EventCreated,
        EventDeleted,
        EventUpdated,
        RegistrationCancelled,
        RegistrationCreated,
        RegistrationReactivated,
    )
    from seatwise.infrastructure.events.handlers import (
        CacheInvalidationEventHandler,
        LoggingEventHandler,
    )
    from seatwise.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus_type = get_settings().event_bus_type

    if event_bus_type == "in-memory":
        event_bus = InMemoryEventBus(logger=get_logger())
    else:
        raise ValueError(
            f"Unsupported EVENT_BUS_TYPE: {event_bus_type}. Supported: 'in-memory'"
        )

    logging_handler = LoggingEventHandler(logger=get_logger())
    cache_handler = CacheInvalidationEventHandler(
        cache=get_cache(),
        cache_keys=get_cache_keys(),
        logger=get_logger(),
    )

    # Event lifecycle
    event_bus.subscribe(EventCreated, logging_handler.handle_event_created)
    event_bus.subscribe(EventUpdated, logging_handler.handle_event_updated)
    event_bus.subscribe(EventDeleted, logging_handler.handle_event_deleted)
    for event_class in (EventCreated, EventUpdated, EventDeleted):
        event_bus.subscribe(event_class, cache_handler.handle_event_changed)

    # Registration
    event_bus.subscribe(RegistrationCreated, logging_handler.handle_registration_created)
    event_bus.subscribe(
        RegistrationCancelled, logging_handler.handle_registration_cancelled
    )
    event_bus.subscribe(
        RegistrationReactivated, logging_handler.handle_registration_reactivated
    )
    for event_class in (
        RegistrationCreated,
        RegistrationCancelled,
        RegistrationReactivated,
    ):
        event_bus.subscribe(event_class, cache_handler.handle_registration_changed)

    return event_bus
