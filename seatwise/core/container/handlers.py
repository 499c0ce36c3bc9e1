"""Command and query handler factories.

Each call builds a handler wired to the application-scoped singletons
(units of work on the configured database, event bus, cache, logger).

Usage:
    handler = get_register_for_occurrence_handler()
    result = await handler.handle(RegisterForOccurrence(...))
"""

from typing import TYPE_CHECKING

from seatwise.core.config import get_settings
from seatwise.core.container.events import get_event_bus
from seatwise.core.container.infrastructure import (
    get_cache,
    get_cache_keys,
    get_clock,
    get_event_uow_factory,
    get_logger,
    get_registration_uow_factory,
)

if TYPE_CHECKING:
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


# ============================================================================
# Event Lifecycle
# ============================================================================


def get_create_event_handler() -> "CreateEventHandler":
    from seatwise.application.commands.handlers import CreateEventHandler

    return CreateEventHandler(
        uow_factory=get_event_uow_factory(),
        clock=get_clock(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_update_event_handler() -> "UpdateEventHandler":
    from seatwise.application.commands.handlers import UpdateEventHandler

    return UpdateEventHandler(
        uow_factory=get_event_uow_factory(),
        clock=get_clock(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_delete_event_handler() -> "DeleteEventHandler":
    from seatwise.application.commands.handlers import DeleteEventHandler

    return DeleteEventHandler(
        uow_factory=get_event_uow_factory(),
        clock=get_clock(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


# ============================================================================
# Registration
# ============================================================================


def get_register_for_occurrence_handler() -> "RegisterForOccurrenceHandler":
    """Get RegisterForOccurrence command handler.

    Wires:
    - Registration unit of work (registrations + event module, one transaction)
    - Clock, EventBus, Logger (app-scoped singletons)
    """
    from seatwise.application.commands.handlers import RegisterForOccurrenceHandler

    return RegisterForOccurrenceHandler(
        uow_factory=get_registration_uow_factory(),
        clock=get_clock(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_cancel_registration_handler() -> "CancelRegistrationHandler":
    from seatwise.application.commands.handlers import CancelRegistrationHandler

    return CancelRegistrationHandler(
        uow_factory=get_registration_uow_factory(),
        clock=get_clock(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


# ============================================================================
# Queries
# ============================================================================


def get_get_registrations_handler() -> "GetRegistrationsHandler":
    from seatwise.application.queries.handlers import GetRegistrationsHandler

    return GetRegistrationsHandler(
        uow_factory=get_registration_uow_factory(),
        cache=get_cache(),
        cache_keys=get_cache_keys(),
        logger=get_logger(),
        ttl_seconds=get_settings().registration_cache_ttl_seconds,
    )


def get_get_occurrences_handler() -> "GetOccurrencesHandler":
    from seatwise.application.queries.handlers import GetOccurrencesHandler

    return GetOccurrencesHandler(
        uow_factory=get_event_uow_factory(),
        cache=get_cache(),
        cache_keys=get_cache_keys(),
        logger=get_logger(),
        ttl_seconds=get_settings().occurrence_cache_ttl_seconds,
    )


def get_get_events_handler() -> "GetEventsHandler":
    from seatwise.application.queries.handlers import GetEventsHandler

    return GetEventsHandler(
        uow_factory=get_event_uow_factory(),
        cache=get_cache(),
        cache_keys=get_cache_keys(),
        logger=get_logger(),
        ttl_seconds=get_settings().event_cache_ttl_seconds,
    )
