"""Query handlers."""

from seatwise.application.queries.handlers.get_events_handler import (
    EventListResult,
    EventResult,
    GetEventsHandler,
    GetOccurrencesHandler,
    OccurrenceListResult,
    OccurrenceResult,
)
from seatwise.application.queries.handlers.get_registrations_handler import (
    GetRegistrationsHandler,
    RegistrationListResult,
    RegistrationResult,
)

__all__ = [
    "EventListResult",
    "EventResult",
    "GetEventsHandler",
    "GetOccurrencesHandler",
    "GetRegistrationsHandler",
    "OccurrenceListResult",
    "OccurrenceResult",
    "RegistrationListResult",
    "RegistrationResult",
]
