"""Registration queries (CQRS read operations).

Queries are immutable, keyword-only data containers. Handlers return Result
types and have no side effects beyond populating the read cache.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetRegistrations:
    """List a user's registrations within one organization.

    Attributes:
        user_id: User whose registrations to list.
        organization_id: Tenant scope.
        include_cancelled: Include cancelled registrations.
        first: Page size.
        after: Opaque cursor from a previous page.
    """

    user_id: str
    organization_id: UUID
    include_cancelled: bool = False
    first: int = 20
    after: str | None = None
