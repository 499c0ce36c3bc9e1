"""Redis-backed CacheProtocol adapter.

Values are stored as JSON strings. Every Redis or decoding failure comes back
as ``Failure(CacheError)``; the listing handlers treat that as a miss, so a
Redis outage slows reads down but never fails them.
"""

import json
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from seatwise.core.enums import ErrorCode
from seatwise.core.result import Failure, Result, Success
from seatwise.infrastructure.enums import InfrastructureErrorCode
from seatwise.infrastructure.errors import CacheError

_SCAN_BATCH = 100


def _cache_failure(
    code: ErrorCode,
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    **details: Any,
) -> Failure[CacheError]:
    return Failure(
        error=CacheError(
            code=code,
            infrastructure_code=infrastructure_code,
            message=message,
            details=details,
        )
    )


class RedisAdapter:
    """CacheProtocol over an async Redis client (structural, no inheritance)."""

    def __init__(self, redis_client: Redis) -> None:
        self._redis = redis_client

    async def get_json(self, key: str) -> Result[dict[str, Any] | None, CacheError]:
        try:
            raw = await self._redis.get(key)
        except RedisError as e:
            return _cache_failure(
                ErrorCode.CACHE_GET_FAILED,
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to read cache key '{key}'",
                key=key,
                error=str(e),
            )
        if raw is None:
            return Success(value=None)

        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        try:
            return Success(value=json.loads(text))
        except json.JSONDecodeError as e:
            return _cache_failure(
                ErrorCode.CACHE_GET_FAILED,
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Cache key '{key}' does not hold JSON",
                key=key,
                error=str(e),
            )

    async def set_json(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Store ``value``; SETEX when a TTL is given, plain SET otherwise."""
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            return _cache_failure(
                ErrorCode.CACHE_SET_FAILED,
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Value for cache key '{key}' is not JSON serializable",
                key=key,
                error=str(e),
            )

        try:
            if ttl is None:
                await self._redis.set(key, payload)
            else:
                await self._redis.setex(key, ttl, payload)
        except RedisError as e:
            return _cache_failure(
                ErrorCode.CACHE_SET_FAILED,
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to write cache key '{key}'",
                key=key,
                ttl=ttl,
                error=str(e),
            )
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        try:
            removed = await self._redis.delete(key)
        except RedisError as e:
            return _cache_failure(
                ErrorCode.CACHE_DELETE_FAILED,
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete cache key '{key}'",
                key=key,
                error=str(e),
            )
        return Success(value=removed > 0)

    async def delete_pattern(self, pattern: str) -> Result[int, CacheError]:
        """Evict every key matching ``pattern``.

        Keys are collected with SCAN so eviction never blocks Redis the way
        KEYS would on a large keyspace.
        """
        try:
            matched = [
                key async for key in self._redis.scan_iter(match=pattern, count=_SCAN_BATCH)
            ]
            removed = await self._redis.delete(*matched) if matched else 0
        except RedisError as e:
            return _cache_failure(
                ErrorCode.CACHE_DELETE_FAILED,
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to evict cache keys matching '{pattern}'",
                pattern=pattern,
                error=str(e),
            )
        return Success(value=removed)
