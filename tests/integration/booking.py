"""Handler wiring shared by the integration tests.

``build_booking`` wires every handler to one storage backend, a MemoryCache
and an InMemoryEventBus carrying the cache-invalidation subscribers,
mirroring the container without its global state.
"""

from dataclasses import dataclass
from unittest.mock import MagicMock

from seatwise.application.commands.handlers import (
    CancelRegistrationHandler,
    CreateEventHandler,
    DeleteEventHandler,
    RegisterForOccurrenceHandler,
    UpdateEventHandler,
)
from seatwise.application.queries.handlers import (
    GetEventsHandler,
    GetOccurrencesHandler,
    GetRegistrationsHandler,
)
from seatwise.domain.events import (
    EventCreated,
    EventDeleted,
    EventUpdated,
    RegistrationCancelled,
    RegistrationCreated,
    RegistrationReactivated,
)
from seatwise.infrastructure.cache import CacheKeys, MemoryCache
from seatwise.infrastructure.events import InMemoryEventBus
from seatwise.infrastructure.events.handlers import CacheInvalidationEventHandler


@dataclass
class Booking:
    """Handlers sharing one storage backend, cache and event bus."""

    create_event: CreateEventHandler
    update_event: UpdateEventHandler
    delete_event: DeleteEventHandler
    register: RegisterForOccurrenceHandler
    cancel: CancelRegistrationHandler
    get_events: GetEventsHandler
    get_occurrences: GetOccurrencesHandler
    get_registrations: GetRegistrationsHandler


def build_booking(event_uow_factory, registration_uow_factory, clock) -> Booking:
    logger = MagicMock()
    logger.bind.return_value = logger
    cache = MemoryCache()
    keys = CacheKeys(prefix="seatwise")
    bus = InMemoryEventBus(logger=logger)

    invalidation = CacheInvalidationEventHandler(cache, keys, logger)
    for event_class in (EventCreated, EventUpdated, EventDeleted):
        bus.subscribe(event_class, invalidation.handle_event_changed)
    for event_class in (
        RegistrationCreated,
        RegistrationCancelled,
        RegistrationReactivated,
    ):
        bus.subscribe(event_class, invalidation.handle_registration_changed)

    return Booking(
        create_event=CreateEventHandler(event_uow_factory, clock, bus, logger),
        update_event=UpdateEventHandler(event_uow_factory, clock, bus, logger),
        delete_event=DeleteEventHandler(event_uow_factory, clock, bus, logger),
        register=RegisterForOccurrenceHandler(registration_uow_factory, clock, bus, logger),
        cancel=CancelRegistrationHandler(registration_uow_factory, clock, bus, logger),
        get_events=GetEventsHandler(event_uow_factory, cache, keys, logger),
        get_occurrences=GetOccurrencesHandler(event_uow_factory, cache, keys, logger),
        get_registrations=GetRegistrationsHandler(
            registration_uow_factory, cache, keys, logger
        ),
    )


