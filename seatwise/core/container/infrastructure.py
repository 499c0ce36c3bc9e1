"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL via asyncpg, or SQLite via aiosqlite)
- Cache (Redis, or process-local when no Redis URL is configured)
- Logging (structlog console adapter)
- Clock
- Unit of work factories bound to the database
"""

from functools import lru_cache, partial
from typing import TYPE_CHECKING

from seatwise.core.config import get_settings
from seatwise.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from seatwise.domain.protocols import (
        CacheKeysProtocol,
        CacheProtocol,
        ClockProtocol,
        EventUnitOfWorkFactory,
        LoggerProtocol,
        RegistrationUnitOfWorkFactory,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from seatwise.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_clock() -> "ClockProtocol":
    """Get the wall clock singleton."""
    from seatwise.infrastructure.clock.system_clock import SystemClock

    return SystemClock()


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager instance.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Returns RedisAdapter with connection pooling when SEATWISE_REDIS_URL is
    set, MemoryCache otherwise.

    Returns:
        Cache client implementing CacheProtocol.
    """
    settings = get_settings()

    if settings.redis_url is None:
        from seatwise.infrastructure.cache.memory_cache import MemoryCache

        return MemoryCache()

    from redis.asyncio import ConnectionPool, Redis

    from seatwise.infrastructure.cache.redis_adapter import RedisAdapter

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return RedisAdapter(redis_client=Redis(connection_pool=pool))


@lru_cache()
def get_cache_keys() -> "CacheKeysProtocol":
    """Get cache key builder singleton."""
    from seatwise.infrastructure.cache.cache_keys import CacheKeys

    return CacheKeys(prefix=get_settings().cache_key_prefix)


@lru_cache()
def get_event_uow_factory() -> "EventUnitOfWorkFactory":
    """Get the factory that opens event units of work on the database."""
    from seatwise.infrastructure.persistence.unit_of_work import (
        SqlAlchemyEventUnitOfWork,
    )

    return partial(SqlAlchemyEventUnitOfWork, get_database().async_session)


@lru_cache()
def get_registration_uow_factory() -> "RegistrationUnitOfWorkFactory":
    """Get the factory that opens registration units of work on the database."""
    from seatwise.infrastructure.persistence.unit_of_work import (
        SqlAlchemyRegistrationUnitOfWork,
    )

    return partial(SqlAlchemyRegistrationUnitOfWork, get_database().async_session)
