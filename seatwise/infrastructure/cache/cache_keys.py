"""Cache key construction utilities.

Centralized cache key construction so readers and the invalidation
subscriber always agree. All keys follow the pattern:
{prefix}:{organization_id}:{resource}:list:...

Usage:
    keys = CacheKeys(prefix=settings.cache_key_prefix)
    key = keys.registration_list(org_id, "user-1", digest)
    await cache.delete_pattern(keys.registrations_pattern(org_id))
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class CacheKeys:
    """Centralized cache key construction utilities.

    Attributes:
        prefix: Cache key prefix (typically "seatwise").

    Example:
        keys = CacheKeys(prefix="seatwise")
        keys.events_pattern(org_id)  # "seatwise:{org_id}:events:*"
    """

    prefix: str

    def registration_list(
        self, organization_id: UUID, user_id: str, params_digest: str
    ) -> str:
        """Registration listing cache key.

        Pattern: {prefix}:{organization_id}:registrations:list:{user_id}:{digest}
        """
        return (
            f"{self.prefix}:{organization_id}:registrations:list:"
            f"{user_id}:{params_digest}"
        )

    def occurrence_list(
        self, organization_id: UUID, event_id: UUID, params_digest: str
    ) -> str:
        """Occurrence listing cache key.

        Pattern: {prefix}:{organization_id}:occurrences:list:{event_id}:{digest}
        """
        return (
            f"{self.prefix}:{organization_id}:occurrences:list:"
            f"{event_id}:{params_digest}"
        )

    def event_list(self, organization_id: UUID, params_digest: str) -> str:
        """Event listing cache key.

        Pattern: {prefix}:{organization_id}:events:list:{digest}
        """
        return f"{self.prefix}:{organization_id}:events:list:{params_digest}"

    def registrations_pattern(self, organization_id: UUID) -> str:
        return f"{self.prefix}:{organization_id}:registrations:*"

    def occurrences_pattern(self, organization_id: UUID) -> str:
        return f"{self.prefix}:{organization_id}:occurrences:*"

    def events_pattern(self, organization_id: UUID) -> str:
        return f"{self.prefix}:{organization_id}:events:*"
