"""Cross-module port from the registration side into the event module.

The registration workflow never touches event storage directly. It sees
occurrences and events only through the read models below, and it moves seat
counters only through reserve_seats/release_seats. An implementation is
bound to the caller's unit of work so reads and writes share its
transaction.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class OccurrenceReadModel:
    """Occurrence as seen by the registration workflow.

    Attributes:
        id: Occurrence ID.
        event_id: Parent event ID.
        organization_id: Owning tenant.
        start_date: Slot start.
        end_date: Slot end.
        title: Title override, if any.
        max_capacity: Capacity override (None = unlimited).
        registered_seats: Seats currently held.
        deleted_at: Soft-delete timestamp.
    """

    id: UUID
    event_id: UUID
    organization_id: UUID
    start_date: datetime
    end_date: datetime
    title: str | None
    max_capacity: int | None
    registered_seats: int
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def available_seats(self) -> int | None:
        if self.max_capacity is None:
            return None
        return self.max_capacity - self.registered_seats


@dataclass(frozen=True, slots=True, kw_only=True)
class EventReadModel:
    """Event as seen by the registration workflow."""

    id: UUID
    organization_id: UUID
    title: str
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class EventModuleProtocol(Protocol):
    """Read/seat-accounting access to the event module."""

    async def find_occurrence_by_id(
        self, occurrence_id: UUID
    ) -> OccurrenceReadModel | None:
        """Load an occurrence (including soft-deleted ones)."""
        ...

    async def find_event_by_id(self, event_id: UUID) -> EventReadModel | None:
        """Load an event (including soft-deleted ones)."""
        ...

    async def reserve_seats(
        self, occurrence_id: UUID, count: int, now: datetime
    ) -> bool:
        """Atomically reserve seats.

        Returns:
            False when a concurrent booking took the remaining seats.
        """
        ...

    async def release_seats(
        self, occurrence_id: UUID, count: int, now: datetime
    ) -> None:
        """Atomically release seats.

        Raises:
            SeatDecrementBelowZeroError: If more seats are released than held.
        """
        ...
