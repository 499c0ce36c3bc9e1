"""Event domain entity.

An Event is the template of a schedulable activity. Recurring events carry a
RecurrencePattern and own a batch of materialized Occurrences.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Mutated only through update() and soft_delete(), both of which advance
      updated_at
    - Soft-deleted events are treated as absent by every workflow

Usage:
    from uuid_extensions import uuid7
    from seatwise.domain.entities import Event

    event = Event(
        id=uuid7(),
        organization_id=org_id,
        title="Morning Yoga",
        start_date=datetime(2026, 3, 2, 9, tzinfo=UTC),
        end_date=datetime(2026, 3, 2, 10, tzinfo=UTC),
        max_capacity=20,
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

from seatwise.domain.value_objects import RecurrencePattern


@dataclass(slots=True, kw_only=True)
class Event:
    """Schedulable activity, possibly recurring.

    Attributes:
        id: Unique event identifier.
        organization_id: Owning tenant.
        title: Display title.
        description: Free-form description.
        location: Optional venue.
        start_date: Start of the template occurrence.
        end_date: End of the template occurrence (defines duration).
        max_capacity: Seat capacity of the event (>= 0).
        recurrence_pattern: Set exactly when the event is recurring.
        deleted_at: Soft-delete timestamp.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    organization_id: UUID
    title: str
    start_date: datetime
    end_date: datetime
    max_capacity: int
    description: str = ""
    location: str | None = None
    recurrence_pattern: RecurrencePattern | None = None
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate event after initialization.

        Raises:
            ValueError: If the title is blank, the dates are inverted or
                capacity is negative.
        """
        if not self.title or not self.title.strip():
            raise ValueError("Event title cannot be empty")
        if self.end_date < self.start_date:
            raise ValueError("Event end_date must not precede start_date")
        if self.max_capacity < 0:
            raise ValueError("Event max_capacity cannot be negative")

    @property
    def is_recurring(self) -> bool:
        """True when the event has a recurrence pattern."""
        return self.recurrence_pattern is not None

    @property
    def is_deleted(self) -> bool:
        """True once the event has been soft-deleted."""
        return self.deleted_at is not None

    @property
    def duration(self) -> timedelta:
        """Length of each occurrence (end_date - start_date)."""
        return self.end_date - self.start_date

    def update(
        self,
        *,
        now: datetime,
        title: str | None = None,
        description: str | None = None,
        location: str | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        max_capacity: int | None = None,
        recurrence_pattern: RecurrencePattern | None = None,
        remove_recurrence: bool = False,
    ) -> None:
        """Apply the provided changes and advance updated_at.

        None means "not provided" for every field. Removing the recurrence
        pattern therefore needs the explicit ``remove_recurrence`` flag.

        Args:
            now: Current time, becomes updated_at.
            title: New title.
            description: New description.
            location: New location.
            start_date: New template start.
            end_date: New template end.
            max_capacity: New capacity.
            recurrence_pattern: Replacement pattern.
            remove_recurrence: Turn the event into a one-off.

        Raises:
            ValueError: If the resulting date range is inverted or a field
                is invalid.
        """
        new_start = start_date if start_date is not None else self.start_date
        new_end = end_date if end_date is not None else self.end_date
        if new_end < new_start:
            raise ValueError("Event end_date must not precede start_date")
        if title is not None and not title.strip():
            raise ValueError("Event title cannot be empty")
        if max_capacity is not None and max_capacity < 0:
            raise ValueError("Event max_capacity cannot be negative")

        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if location is not None:
            self.location = location
        self.start_date = new_start
        self.end_date = new_end
        if max_capacity is not None:
            self.max_capacity = max_capacity
        if remove_recurrence:
            self.recurrence_pattern = None
        elif recurrence_pattern is not None:
            self.recurrence_pattern = recurrence_pattern
        self.updated_at = now

    def soft_delete(self, now: datetime) -> None:
        """Mark the event deleted.

        Args:
            now: Deletion timestamp (also becomes updated_at).
        """
        self.deleted_at = now
        self.updated_at = now
