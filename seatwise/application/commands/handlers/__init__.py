"""Command handlers."""

from seatwise.application.commands.handlers.cancel_registration_handler import (
    CancelRegistrationHandler,
    CancelRegistrationResponse,
)
from seatwise.application.commands.handlers.create_event_handler import (
    CreateEventHandler,
    CreateEventResponse,
)
from seatwise.application.commands.handlers.delete_event_handler import (
    DeleteEventHandler,
)
from seatwise.application.commands.handlers.register_for_occurrence_handler import (
    RegisterForOccurrenceHandler,
    RegisterForOccurrenceResponse,
)
from seatwise.application.commands.handlers.update_event_handler import (
    UpdateEventHandler,
    UpdateEventResponse,
)

__all__ = [
    "CancelRegistrationHandler",
    "CancelRegistrationResponse",
    "CreateEventHandler",
    "CreateEventResponse",
    "DeleteEventHandler",
    "RegisterForOccurrenceHandler",
    "RegisterForOccurrenceResponse",
    "UpdateEventHandler",
    "UpdateEventResponse",
]
