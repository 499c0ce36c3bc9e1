"""Cache keys protocol for key generation.

All keys are scoped by tenant so one organization's writes can evict its
listings with a single pattern delete:

    {prefix}:{organization_id}:{resource}:...
"""

from typing import Protocol
from uuid import UUID


class CacheKeysProtocol(Protocol):
    """Protocol for generating cache keys and invalidation patterns."""

    def registration_list(
        self, organization_id: UUID, user_id: str, params_digest: str
    ) -> str:
        """Key of one page of a user's registrations."""
        ...

    def occurrence_list(
        self, organization_id: UUID, event_id: UUID, params_digest: str
    ) -> str:
        """Key of one page of an event's occurrences."""
        ...

    def event_list(self, organization_id: UUID, params_digest: str) -> str:
        """Key of one page of a tenant's events."""
        ...

    def registrations_pattern(self, organization_id: UUID) -> str:
        """Glob matching every registration listing of a tenant."""
        ...

    def occurrences_pattern(self, organization_id: UUID) -> str:
        """Glob matching every occurrence listing of a tenant."""
        ...

    def events_pattern(self, organization_id: UUID) -> str:
        """Glob matching every event listing of a tenant."""
        ...
