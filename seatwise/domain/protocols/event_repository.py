"""Event repository protocol for persistence abstraction.

Port for Event persistence. Implementations never commit: writes become
durable only when the enclosing unit of work commits.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from seatwise.domain.entities import Event
from seatwise.domain.protocols.pagination import CursorPage, PageRequest


class EventRepository(Protocol):
    """Persistence port for Event entities."""

    async def save(self, event: Event) -> None:
        """Insert or update an event."""
        ...

    async def find_by_id(self, event_id: UUID) -> Event | None:
        """Find an event by id, including soft-deleted ones.

        Callers decide how to treat ``event.is_deleted``.
        """
        ...

    async def find_by_organization(
        self,
        organization_id: UUID,
        page: PageRequest,
        *,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> CursorPage[Event]:
        """List non-deleted events of a tenant.

        Args:
            organization_id: Tenant to list.
            page: Cursor window.
            start_date: Only events starting at or after this instant.
            end_date: Only events ending at or before this instant.

        Returns:
            One page of events ordered by id.
        """
        ...
