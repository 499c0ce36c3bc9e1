"""Registration commands (CQRS write operations).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterForOccurrence:
    """Book seats on an occurrence for a user.

    Attributes:
        occurrence_id: Occurrence to book.
        user_id: Opaque user id from the identity system.
        seat_count: Seats requested (1-10).
        organization_id: Tenant the booking is made in.
        registration_id: Caller-chosen id for a new registration (generated
            if omitted; ignored on reactivation, which keeps the old id).

    Example:
        >>> command = RegisterForOccurrence(
        ...     occurrence_id=occurrence.id,
        ...     user_id="user-123",
        ...     seat_count=2,
        ...     organization_id=org_id,
        ... )
        >>> result = await handler.handle(command)
    """

    occurrence_id: UUID
    user_id: str
    seat_count: int
    organization_id: UUID
    registration_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class CancelRegistration:
    """Cancel a registration fully or reduce its seats.

    Attributes:
        registration_id: Registration to cancel.
        new_seat_count: None or 0 for full cancellation; a positive value
            below the current seat count for a partial reduction.
    """

    registration_id: UUID
    new_seat_count: int | None = None
