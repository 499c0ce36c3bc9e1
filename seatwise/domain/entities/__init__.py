"""Domain entities.

Usage:
    from seatwise.domain.entities import Event, Occurrence, Registration
"""

from seatwise.domain.entities.event import Event
from seatwise.domain.entities.occurrence import Occurrence, OccurrenceChanges
from seatwise.domain.entities.registration import (
    MAX_SEATS_PER_REGISTRATION,
    MIN_SEATS_PER_REGISTRATION,
    Registration,
)

__all__ = [
    "Event",
    "Occurrence",
    "OccurrenceChanges",
    "Registration",
    "MIN_SEATS_PER_REGISTRATION",
    "MAX_SEATS_PER_REGISTRATION",
]
