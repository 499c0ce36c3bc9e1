"""Occurrence domain entity.

One concrete time slot of an Event. Occurrences are created in batches by the
materializer and carry the running seat counter that the registration
workflow moves.

Invariant:
    0 <= registered_seats <= max_capacity whenever max_capacity is set.
    An unset max_capacity means unlimited.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

from seatwise.core.result import Failure, Result, Success
from seatwise.domain.errors import CapacityExceededError, SeatDecrementBelowZeroError


@dataclass(frozen=True, slots=True, kw_only=True)
class OccurrenceChanges:
    """Event fields propagated onto future occurrences.

    None means "leave unchanged". ``duration`` replaces the end date of each
    occurrence with ``start_date + duration``.
    """

    title: str | None = None
    location: str | None = None
    max_capacity: int | None = None
    duration: timedelta | None = None

    def is_empty(self) -> bool:
        """True when nothing would be propagated."""
        return (
            self.title is None
            and self.location is None
            and self.max_capacity is None
            and self.duration is None
        )


@dataclass(slots=True, kw_only=True)
class Occurrence:
    """Concrete time slot of an Event.

    Attributes:
        id: Unique occurrence identifier.
        event_id: Parent event (back-reference).
        organization_id: Owning tenant.
        start_date: Slot start.
        end_date: Slot end.
        title: Optional title override.
        location: Optional location override.
        max_capacity: Optional capacity override (None = unlimited).
        registered_seats: Seats held by active registrations.
        deleted_at: Soft-delete timestamp.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    event_id: UUID
    organization_id: UUID
    start_date: datetime
    end_date: datetime
    title: str | None = None
    location: str | None = None
    max_capacity: int | None = None
    registered_seats: int = 0
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate the seat invariant.

        Raises:
            ValueError: If the counter is negative or above capacity.
        """
        if self.registered_seats < 0:
            raise ValueError("registered_seats cannot be negative")
        if self.max_capacity is not None and self.registered_seats > self.max_capacity:
            raise ValueError("registered_seats cannot exceed max_capacity")

    @property
    def is_deleted(self) -> bool:
        """True once the occurrence has been soft-deleted."""
        return self.deleted_at is not None

    @property
    def available_seats(self) -> int | None:
        """Free seats, or None when capacity is unlimited."""
        if self.max_capacity is None:
            return None
        return self.max_capacity - self.registered_seats

    def effective_title(self, event_title: str) -> str:
        """Override title if set, otherwise the parent event's title."""
        return self.title if self.title is not None else event_title

    def increment_registered_seats(
        self, count: int, now: datetime
    ) -> Result[None, CapacityExceededError]:
        """Reserve seats on this occurrence.

        Args:
            count: Seats to reserve (must be positive).
            now: Current time, becomes updated_at.

        Returns:
            Success(None) if the seats fit.
            Failure(CapacityExceededError) if capacity would be exceeded;
            the counter is left untouched.

        Raises:
            ValueError: If count is not positive.
        """
        if count <= 0:
            raise ValueError("count must be positive")

        available = self.available_seats
        if available is not None and count > available:
            return Failure(
                error=CapacityExceededError.for_request(
                    self.id, requested=count, available=available
                )
            )

        self.registered_seats += count
        self.updated_at = now
        return Success(value=None)

    def decrement_registered_seats(self, count: int, now: datetime) -> None:
        """Release seats on this occurrence.

        Args:
            count: Seats to release (must be positive).
            now: Current time, becomes updated_at.

        Raises:
            ValueError: If count is not positive.
            SeatDecrementBelowZeroError: If the counter would go negative.
        """
        if count <= 0:
            raise ValueError("count must be positive")
        if count > self.registered_seats:
            raise SeatDecrementBelowZeroError(self.id, self.registered_seats, count)

        self.registered_seats -= count
        self.updated_at = now

    def apply_event_changes(self, changes: OccurrenceChanges, now: datetime) -> None:
        """Copy propagated event fields onto this occurrence.

        A propagated capacity never drops below the seats already held, so
        existing registrations stay valid. A capacity of 0 lifts the limit.

        Args:
            changes: Fields to propagate.
            now: Current time, becomes updated_at.
        """
        if changes.title is not None:
            self.title = changes.title
        if changes.location is not None:
            self.location = changes.location
        if changes.max_capacity == 0:
            self.max_capacity = None
        elif changes.max_capacity is not None:
            self.max_capacity = max(changes.max_capacity, self.registered_seats)
        if changes.duration is not None:
            self.end_date = self.start_date + changes.duration
        self.updated_at = now

    def soft_delete(self, now: datetime) -> None:
        """Mark the occurrence deleted (cascade from its event)."""
        self.deleted_at = now
        self.updated_at = now
