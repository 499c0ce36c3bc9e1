"""In-process implementation of EventModuleProtocol.

Exposes the event module's repositories to the registration workflow as
read models plus the two seat-counter operations. It is built per unit of
work from repositories bound to that unit's transaction, so it works the
same over SQLAlchemy and in-memory storage.
"""

from datetime import datetime
from uuid import UUID

from seatwise.domain.protocols import (
    EventReadModel,
    EventRepository,
    OccurrenceReadModel,
    OccurrenceRepository,
)


class EventModuleAdapter:
    """Read and seat-accounting access to events and occurrences."""

    def __init__(
        self,
        events: EventRepository,
        occurrences: OccurrenceRepository,
    ) -> None:
        self._events = events
        self._occurrences = occurrences

    async def find_occurrence_by_id(
        self, occurrence_id: UUID
    ) -> OccurrenceReadModel | None:
        occurrence = await self._occurrences.find_by_id(occurrence_id)
        if occurrence is None:
            return None
        return OccurrenceReadModel(
            id=occurrence.id,
            event_id=occurrence.event_id,
            organization_id=occurrence.organization_id,
            start_date=occurrence.start_date,
            end_date=occurrence.end_date,
            title=occurrence.title,
            max_capacity=occurrence.max_capacity,
            registered_seats=occurrence.registered_seats,
            deleted_at=occurrence.deleted_at,
        )

    async def find_event_by_id(self, event_id: UUID) -> EventReadModel | None:
        event = await self._events.find_by_id(event_id)
        if event is None:
            return None
        return EventReadModel(
            id=event.id,
            organization_id=event.organization_id,
            title=event.title,
            deleted_at=event.deleted_at,
        )

    async def reserve_seats(
        self, occurrence_id: UUID, count: int, now: datetime
    ) -> bool:
        return await self._occurrences.reserve_seats(occurrence_id, count, now)

    async def release_seats(
        self, occurrence_id: UUID, count: int, now: datetime
    ) -> None:
        await self._occurrences.release_seats(occurrence_id, count, now)
