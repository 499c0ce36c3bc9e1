"""Event lifecycle commands (CQRS write operations).

Commands represent intent to change event state. All commands are immutable
(frozen=True) and keyword-only (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from seatwise.domain.value_objects import RecurrencePattern

PatternInput = Mapping[str, Any] | RecurrencePattern


@dataclass(frozen=True, kw_only=True)
class CreateEvent:
    """Create an event and, if recurring, its occurrences.

    Attributes:
        organization_id: Owning tenant.
        title: Event title.
        start_date: Template start.
        end_date: Template end.
        max_capacity: Seat capacity (>= 0).
        description: Free-form description.
        location: Optional venue.
        recurrence_pattern: Raw or validated pattern; None for a one-off.
        event_id: Caller-chosen id (generated if omitted).

    Example:
        >>> command = CreateEvent(
        ...     organization_id=org_id,
        ...     title="Morning Yoga",
        ...     start_date=datetime(2026, 3, 2, 9, tzinfo=UTC),
        ...     end_date=datetime(2026, 3, 2, 10, tzinfo=UTC),
        ...     max_capacity=20,
        ...     recurrence_pattern={"frequency": "WEEKLY", "count": 4},
        ... )
        >>> result = await handler.handle(command)
    """

    organization_id: UUID
    title: str
    start_date: datetime
    end_date: datetime
    max_capacity: int
    description: str = ""
    location: str | None = None
    recurrence_pattern: PatternInput | None = None
    event_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateEvent:
    """Apply a partial update to an event.

    Every field except event_id is optional; None means "leave unchanged".
    Set ``remove_recurrence`` to turn a recurring event into a one-off.

    Attributes:
        event_id: Event to update.
        title: New title.
        description: New description.
        location: New location.
        start_date: New template start.
        end_date: New template end.
        max_capacity: New capacity.
        recurrence_pattern: Replacement pattern.
        remove_recurrence: Drop the pattern (and all occurrences).
    """

    event_id: UUID
    title: str | None = None
    description: str | None = None
    location: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    max_capacity: int | None = None
    recurrence_pattern: PatternInput | None = None
    remove_recurrence: bool = False


@dataclass(frozen=True, kw_only=True)
class DeleteEvent:
    """Soft-delete an event and cascade to its occurrences.

    Attributes:
        event_id: Event to delete.
    """

    event_id: UUID
