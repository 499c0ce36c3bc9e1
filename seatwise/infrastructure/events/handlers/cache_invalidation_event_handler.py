"""Cache invalidation handler for domain events.

Evicts the tenant's cached listings after writes commit:

- Event created/updated/deleted → event and occurrence listings
- Registration created/cancelled/reactivated → registration and occurrence
  listings (occurrence seat counters moved)

Cache failures are logged and swallowed here; stale pages expire by TTL.
"""

from uuid import UUID

from seatwise.core.result import Failure
from seatwise.domain.events import (
    EventCreated,
    EventDeleted,
    EventUpdated,
    RegistrationCancelled,
    RegistrationCreated,
    RegistrationReactivated,
)
from seatwise.domain.protocols import CacheKeysProtocol, CacheProtocol, LoggerProtocol


class CacheInvalidationEventHandler:
    """Evicts tenant-scoped listing caches in response to domain events."""

    def __init__(
        self,
        cache: CacheProtocol,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._cache = cache
        self._keys = cache_keys
        self._logger = logger

    async def handle_event_changed(
        self, event: EventCreated | EventUpdated | EventDeleted
    ) -> None:
        """Evict event and occurrence listings of the event's tenant."""
        await self._evict(
            event.organization_id,
            self._keys.events_pattern(event.organization_id),
            self._keys.occurrences_pattern(event.organization_id),
        )

    async def handle_registration_changed(
        self,
        event: RegistrationCreated | RegistrationCancelled | RegistrationReactivated,
    ) -> None:
        """Evict registration and occurrence listings of the booking's tenant."""
        await self._evict(
            event.organization_id,
            self._keys.registrations_pattern(event.organization_id),
            self._keys.occurrences_pattern(event.organization_id),
        )

    async def _evict(self, organization_id: UUID, *patterns: str) -> None:
        for pattern in patterns:
            result = await self._cache.delete_pattern(pattern)
            if isinstance(result, Failure):
                self._logger.warning(
                    "cache_invalidation_failed",
                    organization_id=str(organization_id),
                    pattern=pattern,
                    error=str(result.error),
                )
            else:
                self._logger.debug(
                    "cache_invalidated",
                    organization_id=str(organization_id),
                    pattern=pattern,
                    keys_deleted=result.value,
                )
