"""Domain event subscribers."""

from seatwise.infrastructure.events.handlers.cache_invalidation_event_handler import (
    CacheInvalidationEventHandler,
)
from seatwise.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["CacheInvalidationEventHandler", "LoggingEventHandler"]
