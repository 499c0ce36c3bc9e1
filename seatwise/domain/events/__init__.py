"""Domain events package.

Usage:
    from seatwise.domain.events import DomainEvent, RegistrationCreated
"""

from seatwise.domain.events.base_event import DomainEvent
from seatwise.domain.events.event_events import (
    EventCreated,
    EventDeleted,
    EventUpdated,
)
from seatwise.domain.events.registration_events import (
    RegistrationCancelled,
    RegistrationCreated,
    RegistrationReactivated,
)

__all__ = [
    "DomainEvent",
    # Event lifecycle
    "EventCreated",
    "EventUpdated",
    "EventDeleted",
    # Registration
    "RegistrationCreated",
    "RegistrationCancelled",
    "RegistrationReactivated",
]
