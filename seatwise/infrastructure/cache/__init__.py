"""Cache infrastructure.

Usage:
    from seatwise.infrastructure.cache import CacheKeys, RedisAdapter
"""

from seatwise.infrastructure.cache.cache_keys import CacheKeys
from seatwise.infrastructure.cache.memory_cache import MemoryCache
from seatwise.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = ["CacheKeys", "MemoryCache", "RedisAdapter"]
