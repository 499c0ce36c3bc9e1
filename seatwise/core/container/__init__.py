"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from seatwise.core.container import get_register_for_occurrence_handler

The container is organized into modules:
- infrastructure: Core services (database, cache, logging, clock, units of work)
- events: Event bus and subscriptions
- handlers: Command and query handler factories
"""

from seatwise.core.container.events import get_event_bus
from seatwise.core.container.handlers import (
    get_cancel_registration_handler,
    get_create_event_handler,
    get_delete_event_handler,
    get_get_events_handler,
    get_get_occurrences_handler,
    get_get_registrations_handler,
    get_register_for_occurrence_handler,
    get_update_event_handler,
)
from seatwise.core.container.infrastructure import (
    get_cache,
    get_cache_keys,
    get_clock,
    get_database,
    get_event_uow_factory,
    get_logger,
    get_registration_uow_factory,
)

__all__ = [
    # Infrastructure
    "get_cache",
    "get_cache_keys",
    "get_clock",
    "get_database",
    "get_event_uow_factory",
    "get_logger",
    "get_registration_uow_factory",
    # Events
    "get_event_bus",
    # Handlers
    "get_cancel_registration_handler",
    "get_create_event_handler",
    "get_delete_event_handler",
    "get_get_events_handler",
    "get_get_occurrences_handler",
    "get_get_registrations_handler",
    "get_register_for_occurrence_handler",
    "get_update_event_handler",
]
