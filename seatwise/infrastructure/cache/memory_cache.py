"""Process-local cache implementing CacheProtocol.

Used when no Redis URL is configured (embedded use and tests). Entries
expire lazily on read. Patterns use the same glob syntax as Redis.
"""

import copy
import time
from collections.abc import Callable
from fnmatch import fnmatchcase
from typing import Any

from seatwise.core.result import Result, Success
from seatwise.infrastructure.errors import CacheError


class MemoryCache:
    """Dictionary-backed cache with per-key TTL.

    Note: Does NOT inherit from CacheProtocol (uses structural typing).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[dict[str, Any], float | None]] = {}

    def _live(self, key: str) -> dict[str, Any] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and expires_at <= self._clock():
            del self._entries[key]
            return None
        return value

    async def get_json(self, key: str) -> Result[dict[str, Any] | None, CacheError]:
        value = self._live(key)
        return Success(value=copy.deepcopy(value) if value is not None else None)

    async def set_json(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        expires_at = self._clock() + ttl if ttl is not None else None
        self._entries[key] = (copy.deepcopy(value), expires_at)
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        existed = self._live(key) is not None
        self._entries.pop(key, None)
        return Success(value=existed)

    async def delete_pattern(self, pattern: str) -> Result[int, CacheError]:
        matched = [key for key in self._entries if fnmatchcase(key, pattern)]
        for key in matched:
            del self._entries[key]
        return Success(value=len(matched))
