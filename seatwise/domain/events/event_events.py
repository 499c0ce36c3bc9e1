"""Event lifecycle domain events.

Emitted by the create/update/delete event handlers after commit. The
cache-invalidation subscriber uses them to evict event and occurrence
listings for the tenant.
"""

from dataclasses import dataclass

from seatwise.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class EventCreated(DomainEvent):
    """Emitted when an event (and its occurrences) has been created.

    Attributes:
        aggregate_id: The new event's ID.
        organization_id: Owning tenant.
        title: Event title.
        is_recurring: Whether occurrences were materialized.
        occurrence_count: Number of occurrences created.
    """

    title: str
    is_recurring: bool
    occurrence_count: int


@dataclass(frozen=True, kw_only=True, slots=True)
class EventUpdated(DomainEvent):
    """Emitted when an event has been updated.

    Attributes:
        aggregate_id: The event's ID.
        organization_id: Owning tenant.
        recurrence_changed: True if occurrences were regenerated.
        occurrences_propagated: True if future occurrences received
            propagated field changes.
    """

    recurrence_changed: bool = False
    occurrences_propagated: bool = False


@dataclass(frozen=True, kw_only=True, slots=True)
class EventDeleted(DomainEvent):
    """Emitted when an event has been soft-deleted with its occurrences.

    Attributes:
        aggregate_id: The event's ID.
        organization_id: Owning tenant.
        occurrences_deleted: Occurrences soft-deleted in cascade.
    """

    occurrences_deleted: int = 0
