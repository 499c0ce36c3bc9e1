"""Cache port behind the listing queries.

Every call returns a Result so a cache outage shows up as ``Failure``
instead of an exception. Query handlers treat any Failure as a miss.
Implemented by ``RedisAdapter`` and ``MemoryCache``.
"""

from typing import Any, Protocol

from seatwise.core.errors import DomainError
from seatwise.core.result import Result


class CacheProtocol(Protocol):
    """JSON key/value cache with TTLs and glob eviction."""

    async def get_json(self, key: str) -> Result[dict[str, Any] | None, DomainError]:
        """Return ``Success(None)`` on a miss."""
        ...

    async def set_json(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Store ``value``; ``ttl`` in seconds, None keeps it until evicted."""
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Return ``Success(True)`` if the key existed."""
        ...

    async def delete_pattern(self, pattern: str) -> Result[int, DomainError]:
        """Evict keys matching a glob such as ``seatwise:{org}:occurrences:*``.

        Returns:
            Success(number of keys removed).
        """
        ...
