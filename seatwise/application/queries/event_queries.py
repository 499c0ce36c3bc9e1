"""Event and occurrence queries (CQRS read operations)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetEvents:
    """List non-deleted events of an organization.

    Attributes:
        organization_id: Tenant scope.
        start_date: Only events starting at or after this instant.
        end_date: Only events ending at or before this instant.
        first: Page size.
        after: Opaque cursor from a previous page.
    """

    organization_id: UUID
    start_date: datetime | None = None
    end_date: datetime | None = None
    first: int = 20
    after: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetOccurrences:
    """List non-deleted occurrences of an event.

    Attributes:
        event_id: Parent event.
        organization_id: Tenant scope; occurrences of other tenants are never listed.
        start_date: Only occurrences starting at or after this instant.
        end_date: Only occurrences ending at or before this instant.
        first: Page size.
        after: Opaque cursor from a previous page.
    """

    event_id: UUID
    organization_id: UUID
    start_date: datetime | None = None
    end_date: datetime | None = None
    first: int = 20
    after: str | None = None
