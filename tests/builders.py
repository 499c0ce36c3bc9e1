"""Test clock and entity builders shared by unit and integration tests."""

import copy
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from seatwise.domain.entities import Event, Occurrence, Registration
from seatwise.domain.value_objects import RecurrencePattern
from seatwise.infrastructure.persistence.memory import InMemoryStore

# Monday, 5 January 2026, 08:00 UTC
NOW = datetime(2026, 1, 5, 8, 0, tzinfo=UTC)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = NOW) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


def make_event(
    *,
    organization_id: UUID | None = None,
    title: str = "Morning Yoga",
    start_date: datetime = NOW + timedelta(hours=1),
    duration: timedelta = timedelta(hours=1),
    max_capacity: int = 10,
    location: str | None = None,
    recurrence_pattern: RecurrencePattern | None = None,
) -> Event:
    """Build an Event stamped at NOW."""
    return Event(
        id=uuid7(),
        organization_id=organization_id or uuid7(),
        title=title,
        start_date=start_date,
        end_date=start_date + duration,
        max_capacity=max_capacity,
        location=location,
        recurrence_pattern=recurrence_pattern,
        created_at=NOW,
        updated_at=NOW,
    )


def make_occurrence(
    event: Event,
    *,
    start_date: datetime | None = None,
    max_capacity: int | None = None,
    registered_seats: int = 0,
) -> Occurrence:
    """Build an Occurrence of ``event`` (defaults to the event's own window)."""
    start = start_date or event.start_date
    return Occurrence(
        id=uuid7(),
        event_id=event.id,
        organization_id=event.organization_id,
        start_date=start,
        end_date=start + event.duration,
        max_capacity=max_capacity,
        registered_seats=registered_seats,
        created_at=NOW,
        updated_at=NOW,
    )


def make_registration(
    occurrence: Occurrence,
    *,
    user_id: str = "user-1",
    seat_count: int = 1,
    event_title: str = "Morning Yoga",
) -> Registration:
    """Build an active Registration snapshotting ``occurrence``."""
    return Registration.create_new(
        id=uuid7(),
        occurrence_id=occurrence.id,
        organization_id=occurrence.organization_id,
        user_id=user_id,
        seat_count=seat_count,
        occurrence_start_date=occurrence.start_date,
        occurrence_end_date=occurrence.end_date,
        event_title=event_title,
        now=NOW,
    )


def seed(store: InMemoryStore, *entities: Event | Occurrence | Registration) -> None:
    """Put copies of entities straight into the in-memory tables."""
    for entity in entities:
        if isinstance(entity, Event):
            store.tables.events[entity.id] = copy.deepcopy(entity)
        elif isinstance(entity, Occurrence):
            store.tables.occurrences[entity.id] = copy.deepcopy(entity)
        else:
            store.tables.registrations[entity.id] = copy.deepcopy(entity)
