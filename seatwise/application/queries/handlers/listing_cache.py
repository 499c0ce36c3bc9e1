"""Read-through cache shared by listing query handlers.

Listings are cached as JSON under tenant-scoped keys with a per-listing TTL.
Cache failures are logged and treated as misses; a listing never fails
because Redis is down.
"""

from typing import TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from seatwise.core.result import Failure
from seatwise.domain.protocols import CacheProtocol, LoggerProtocol

T = TypeVar("T")


class ListingCache:
    """JSON read-through cache for one listing result type.

    Args:
        cache: Cache adapter.
        result_type: Dataclass type of the cached listing.
        ttl_seconds: Time to live of cached pages.
        logger: Structured logger for cache failures.
    """

    def __init__(
        self,
        cache: CacheProtocol,
        result_type: type[T],
        ttl_seconds: int,
        logger: LoggerProtocol,
    ) -> None:
        self._cache = cache
        self._adapter: TypeAdapter[T] = TypeAdapter(result_type)
        self._ttl = ttl_seconds
        self._logger = logger

    async def get(self, key: str) -> T | None:
        """Return the cached listing, or None on miss or cache failure."""
        result = await self._cache.get_json(key)
        if isinstance(result, Failure):
            self._logger.warning("listing_cache_get_failed", cache_key=key, error=str(result.error))
            return None
        if result.value is None:
            return None
        try:
            return self._adapter.validate_python(result.value)
        except PydanticValidationError:
            # Stale shape from an older release; rebuild it
            self._logger.warning("listing_cache_entry_invalid", cache_key=key)
            return None

    async def set(self, key: str, value: T) -> None:
        """Store a listing; failures are logged and ignored."""
        payload = self._adapter.dump_python(value, mode="json")
        result = await self._cache.set_json(key, payload, ttl=self._ttl)
        if isinstance(result, Failure):
            self._logger.warning("listing_cache_set_failed", cache_key=key, error=str(result.error))
