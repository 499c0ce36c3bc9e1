"""Domain errors package.

Usage:
    from seatwise.domain.errors import EventNotFoundError, CapacityExceededError
"""

from seatwise.domain.errors.event_error import (
    EventNotFoundError,
    InvalidRecurrencePatternError,
)
from seatwise.domain.errors.registration_error import (
    AlreadyRegisteredError,
    CapacityExceededError,
    ConflictDetectedError,
    EventCancelledError,
    OccurrenceInPastError,
    OccurrenceNotFoundError,
    RegistrationNotFoundError,
    SeatDecrementBelowZeroError,
)

__all__ = [
    # Event lifecycle
    "EventNotFoundError",
    "InvalidRecurrencePatternError",
    # Registration workflow
    "OccurrenceNotFoundError",
    "EventCancelledError",
    "OccurrenceInPastError",
    "AlreadyRegisteredError",
    "ConflictDetectedError",
    "CapacityExceededError",
    "RegistrationNotFoundError",
    # Invariant violations (raised)
    "SeatDecrementBelowZeroError",
]
