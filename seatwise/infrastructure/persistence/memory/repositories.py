"""In-memory repository implementations.

Mirror the SQLAlchemy repositories' semantics (ordering, soft-delete
filtering, uniqueness, conditional seat updates) over InMemoryStore.
"""

import copy
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TypeVar
from uuid import UUID

from seatwise.core.result import Success
from seatwise.domain.entities import Event, Occurrence, OccurrenceChanges, Registration
from seatwise.domain.errors import SeatDecrementBelowZeroError
from seatwise.domain.protocols.pagination import CursorPage, PageRequest
from seatwise.infrastructure.persistence.memory.store import InMemoryStore

T = TypeVar("T", Event, Occurrence, Registration)


def _paginate(items: Iterable[T], page: PageRequest) -> CursorPage[T]:
    matching = sorted(items, key=lambda item: item.id)
    window = [item for item in matching if page.after is None or item.id > page.after]
    return CursorPage(
        items=[copy.deepcopy(item) for item in window[: page.first]],
        has_next_page=len(window) > page.first,
        total_count=len(matching),
    )


def _in_range(
    start: datetime,
    end: datetime,
    start_date: datetime | None,
    end_date: datetime | None,
) -> bool:
    if start_date is not None and start < start_date:
        return False
    if end_date is not None and end > end_date:
        return False
    return True


class InMemoryEventRepository:
    """EventRepository over InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, event: Event) -> None:
        self._store.tables.events[event.id] = copy.deepcopy(event)

    async def find_by_id(self, event_id: UUID) -> Event | None:
        event = self._store.tables.events.get(event_id)
        return copy.deepcopy(event) if event is not None else None

    async def find_by_organization(
        self,
        organization_id: UUID,
        page: PageRequest,
        *,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> CursorPage[Event]:
        return _paginate(
            (
                e
                for e in self._store.tables.events.values()
                if e.organization_id == organization_id
                and not e.is_deleted
                and _in_range(e.start_date, e.end_date, start_date, end_date)
            ),
            page,
        )


class InMemoryOccurrenceRepository:
    """OccurrenceRepository over InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @property
    def _rows(self) -> dict[UUID, Occurrence]:
        return self._store.tables.occurrences

    async def find_by_id(self, occurrence_id: UUID) -> Occurrence | None:
        occurrence = self._rows.get(occurrence_id)
        return copy.deepcopy(occurrence) if occurrence is not None else None

    async def save(self, occurrence: Occurrence) -> None:
        self._rows[occurrence.id] = copy.deepcopy(occurrence)

    async def save_many(self, occurrences: list[Occurrence]) -> None:
        for occurrence in occurrences:
            self._rows[occurrence.id] = copy.deepcopy(occurrence)

    async def find_by_event(
        self,
        event_id: UUID,
        organization_id: UUID,
        page: PageRequest,
        *,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> CursorPage[Occurrence]:
        return _paginate(
            (
                o
                for o in self._rows.values()
                if o.event_id == event_id
                and o.organization_id == organization_id
                and not o.is_deleted
                and _in_range(o.start_date, o.end_date, start_date, end_date)
            ),
            page,
        )

    async def soft_delete_by_event(self, event_id: UUID, now: datetime) -> int:
        return self._apply(
            lambda o: o.event_id == event_id and not o.is_deleted,
            lambda o: o.soft_delete(now),
        )

    async def delete_all_by_event(self, event_id: UUID) -> int:
        doomed = [o.id for o in self._rows.values() if o.event_id == event_id]
        for occurrence_id in doomed:
            del self._rows[occurrence_id]
        return len(doomed)

    async def update_future_by_event(
        self,
        event_id: UUID,
        since: datetime,
        changes: OccurrenceChanges,
        now: datetime,
    ) -> int:
        return self._apply(
            lambda o: o.event_id == event_id and not o.is_deleted and o.start_date >= since,
            lambda o: o.apply_event_changes(changes, now),
        )

    async def reserve_seats(
        self, occurrence_id: UUID, count: int, now: datetime
    ) -> bool:
        occurrence = self._rows.get(occurrence_id)
        if occurrence is None or occurrence.is_deleted:
            return False
        result = occurrence.increment_registered_seats(count, now)
        return isinstance(result, Success)

    async def release_seats(
        self, occurrence_id: UUID, count: int, now: datetime
    ) -> None:
        occurrence = self._rows.get(occurrence_id)
        if occurrence is None:
            return
        if count > occurrence.registered_seats:
            raise SeatDecrementBelowZeroError(
                occurrence_id, occurrence.registered_seats, count
            )
        occurrence.decrement_registered_seats(count, now)

    def _apply(
        self,
        predicate: Callable[[Occurrence], bool],
        change: Callable[[Occurrence], None],
    ) -> int:
        touched = 0
        for occurrence in self._rows.values():
            if predicate(occurrence):
                change(occurrence)
                touched += 1
        return touched


class InMemoryRegistrationRepository:
    """RegistrationRepository over InMemoryStore.

    Enforces the one-active-registration-per-(user, occurrence) rule the
    database enforces with a partial unique index. ``for_update`` is
    accepted and ignored: the unit of work holds the store lock.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @property
    def _rows(self) -> dict[UUID, Registration]:
        return self._store.tables.registrations

    async def save(self, registration: Registration) -> bool:
        if registration.is_active:
            for other in self._rows.values():
                if (
                    other.id != registration.id
                    and other.is_active
                    and other.user_id == registration.user_id
                    and other.occurrence_id == registration.occurrence_id
                ):
                    return False
        self._rows[registration.id] = copy.deepcopy(registration)
        return True

    async def find_by_id(
        self, registration_id: UUID, *, for_update: bool = False
    ) -> Registration | None:
        registration = self._rows.get(registration_id)
        return copy.deepcopy(registration) if registration is not None else None

    async def find_by_user_and_occurrence(
        self, user_id: str, occurrence_id: UUID, *, for_update: bool = False
    ) -> Registration | None:
        matches = [
            r
            for r in self._rows.values()
            if r.user_id == user_id and r.occurrence_id == occurrence_id
        ]
        if not matches:
            return None
        best = min(matches, key=lambda r: (not r.is_active, -r.updated_at.timestamp()))
        return copy.deepcopy(best)

    async def find_overlapping_registrations(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
        *,
        exclude_registration_id: UUID | None = None,
    ) -> list[Registration]:
        overlapping = [
            r
            for r in self._rows.values()
            if r.user_id == user_id
            and r.is_active
            and r.id != exclude_registration_id
            and r.overlaps(start, end)
        ]
        overlapping.sort(key=lambda r: r.occurrence_start_date)
        return [copy.deepcopy(r) for r in overlapping]

    async def find_by_user_in_organization(
        self,
        user_id: str,
        organization_id: UUID,
        page: PageRequest,
        *,
        include_cancelled: bool = False,
    ) -> CursorPage[Registration]:
        return _paginate(
            (
                r
                for r in self._rows.values()
                if r.user_id == user_id
                and r.organization_id == organization_id
                and (include_cancelled or r.is_active)
            ),
            page,
        )
