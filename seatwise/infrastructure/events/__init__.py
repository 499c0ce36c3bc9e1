"""Event bus adapters and subscribers."""

from seatwise.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
