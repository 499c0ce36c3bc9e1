"""Occurrence repository protocol for persistence abstraction.

Port for Occurrence persistence, including the bulk operations the event
lifecycle needs (cascade soft-delete, wholesale regeneration, propagation of
event changes) and the seat-counter primitives used by the registration
workflow.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from seatwise.domain.entities import Occurrence, OccurrenceChanges
from seatwise.domain.protocols.pagination import CursorPage, PageRequest


class OccurrenceRepository(Protocol):
    """Persistence port for Occurrence entities."""

    async def find_by_id(self, occurrence_id: UUID) -> Occurrence | None:
        """Find an occurrence by id, including soft-deleted ones."""
        ...

    async def save(self, occurrence: Occurrence) -> None:
        """Insert or update a single occurrence."""
        ...

    async def save_many(self, occurrences: list[Occurrence]) -> None:
        """Insert a batch of occurrences."""
        ...

    async def find_by_event(
        self,
        event_id: UUID,
        organization_id: UUID,
        page: PageRequest,
        *,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> CursorPage[Occurrence]:
        """List an event's non-deleted occurrences in one tenant, ordered by id."""
        ...

    async def soft_delete_by_event(self, event_id: UUID, now: datetime) -> int:
        """Soft-delete every non-deleted occurrence of an event.

        Returns:
            Number of occurrences soft-deleted.
        """
        ...

    async def delete_all_by_event(self, event_id: UUID) -> int:
        """Hard-delete every occurrence of an event (recurrence rewrite).

        Returns:
            Number of occurrences removed.
        """
        ...

    async def update_future_by_event(
        self,
        event_id: UUID,
        since: datetime,
        changes: OccurrenceChanges,
        now: datetime,
    ) -> int:
        """Apply propagated event changes to upcoming occurrences.

        Only non-deleted occurrences with ``start_date >= since`` are touched.

        Returns:
            Number of occurrences updated.
        """
        ...

    async def reserve_seats(
        self, occurrence_id: UUID, count: int, now: datetime
    ) -> bool:
        """Atomically add seats if they fit within max_capacity.

        Returns:
            True if the counter was incremented, False if the occurrence is
            missing, deleted or does not have room.
        """
        ...

    async def release_seats(
        self, occurrence_id: UUID, count: int, now: datetime
    ) -> None:
        """Atomically subtract seats.

        Raises:
            SeatDecrementBelowZeroError: If the counter would go negative.
        """
        ...
