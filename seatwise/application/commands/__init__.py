"""Commands (CQRS write operations)."""

from seatwise.application.commands.event_commands import (
    CreateEvent,
    DeleteEvent,
    UpdateEvent,
)
from seatwise.application.commands.registration_commands import (
    CancelRegistration,
    RegisterForOccurrence,
)

__all__ = [
    "CreateEvent",
    "UpdateEvent",
    "DeleteEvent",
    "RegisterForOccurrence",
    "CancelRegistration",
]
