"""Registration repository protocol for persistence abstraction.

Port for Registration persistence. ``save`` reports a uniqueness violation
(second active registration for the same user and occurrence) by returning
False so handlers can turn it into AlreadyRegisteredError instead of
crashing.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from seatwise.domain.entities import Registration
from seatwise.domain.protocols.pagination import CursorPage, PageRequest


class RegistrationRepository(Protocol):
    """Persistence port for Registration entities."""

    async def save(self, registration: Registration) -> bool:
        """Insert or update a registration.

        Returns:
            True if stored, False if the active (user, occurrence)
            uniqueness constraint rejected it.
        """
        ...

    async def find_by_id(
        self, registration_id: UUID, *, for_update: bool = False
    ) -> Registration | None:
        """Find a registration by id (any status).

        Args:
            registration_id: Registration ID.
            for_update: Lock the row until the unit of work ends.
        """
        ...

    async def find_by_user_and_occurrence(
        self, user_id: str, occurrence_id: UUID, *, for_update: bool = False
    ) -> Registration | None:
        """Find the user's registration on an occurrence (any status).

        Prefers the active one if several exist. With ``for_update`` the
        matched row stays locked until the unit of work ends.
        """
        ...

    async def find_overlapping_registrations(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
        *,
        exclude_registration_id: UUID | None = None,
    ) -> list[Registration]:
        """Find the user's active registrations overlapping ``[start, end)``.

        Searches every organization, not only the caller's. Overlap is
        strict: ``existing.start < end and existing.end > start``.

        Returns:
            Overlapping registrations ordered by snapshot start date.
        """
        ...

    async def find_by_user_in_organization(
        self,
        user_id: str,
        organization_id: UUID,
        page: PageRequest,
        *,
        include_cancelled: bool = False,
    ) -> CursorPage[Registration]:
        """List a user's registrations within one tenant, ordered by id."""
        ...
