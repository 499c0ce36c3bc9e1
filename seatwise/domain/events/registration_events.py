"""Registration domain events.

Emitted by the registration and cancellation handlers after commit.
Subscribers: structured logging and cache invalidation of the tenant's
registration and occurrence listings (seat counters changed).
"""

from dataclasses import dataclass
from uuid import UUID

from seatwise.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class RegistrationCreated(DomainEvent):
    """Emitted when a new registration has been booked.

    Attributes:
        aggregate_id: The registration's ID.
        organization_id: Tenant of the booking.
        occurrence_id: Booked occurrence.
        user_id: Booking user.
        seat_count: Seats reserved.
    """

    occurrence_id: UUID
    user_id: str
    seat_count: int


@dataclass(frozen=True, kw_only=True, slots=True)
class RegistrationCancelled(DomainEvent):
    """Emitted when a registration released seats.

    Covers both full cancellation (remaining_seat_count == 0) and partial
    reduction (remaining_seat_count > 0, registration stays active).

    Attributes:
        aggregate_id: The registration's ID.
        organization_id: Tenant of the booking.
        occurrence_id: Occurrence whose seats were released.
        seats_released: Seats given back to the occurrence.
        remaining_seat_count: Seats the registration still holds.
    """

    occurrence_id: UUID
    seats_released: int
    remaining_seat_count: int = 0


@dataclass(frozen=True, kw_only=True, slots=True)
class RegistrationReactivated(DomainEvent):
    """Emitted when a cancelled registration has been reactivated in place.

    Attributes:
        aggregate_id: The registration's ID (unchanged).
        organization_id: Tenant of the booking.
        occurrence_id: Booked occurrence.
        seat_count: Seats reserved by the reactivation.
    """

    occurrence_id: UUID
    seat_count: int
