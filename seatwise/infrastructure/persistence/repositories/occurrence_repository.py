"""OccurrenceRepository - SQLAlchemy implementation of OccurrenceRepository protocol.

Seat counters are moved with single conditional UPDATE statements so that
concurrent bookings serialize in the database rather than in Python:

    UPDATE occurrences
       SET registered_seats = registered_seats + :n
     WHERE id = :id AND deleted_at IS NULL
       AND (max_capacity IS NULL OR registered_seats + :n <= max_capacity)

A rowcount of 0 means the reservation lost.
"""

from datetime import datetime
from typing import Any, cast
from uuid import UUID

from sqlalchemy import ColumnElement, delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from seatwise.domain.entities import Occurrence, OccurrenceChanges
from seatwise.domain.errors import SeatDecrementBelowZeroError
from seatwise.domain.protocols.pagination import CursorPage, PageRequest
from seatwise.infrastructure.persistence.mappers import as_utc, as_utc_or_none
from seatwise.infrastructure.persistence.models.occurrence import OccurrenceModel
from seatwise.infrastructure.persistence.pagination import paginate


class OccurrenceRepository:
    """SQLAlchemy implementation of OccurrenceRepository protocol.

    Reads use populate_existing so a row re-read after a counter UPDATE
    reflects the new value instead of the session's identity map.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, occurrence_id: UUID) -> Occurrence | None:
        model = await self._load(occurrence_id)
        return self._to_entity(model) if model is not None else None

    async def save(self, occurrence: Occurrence) -> None:
        existing = await self._load(occurrence.id)
        if existing is None:
            self._session.add(self._to_model(occurrence))
        else:
            self._update_model(existing, occurrence)
        await self._session.flush()

    async def save_many(self, occurrences: list[Occurrence]) -> None:
        self._session.add_all([self._to_model(o) for o in occurrences])
        await self._session.flush()

    async def find_by_event(
        self,
        event_id: UUID,
        organization_id: UUID,
        page: PageRequest,
        *,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> CursorPage[Occurrence]:
        conditions: list[ColumnElement[bool]] = [
            OccurrenceModel.event_id == event_id,
            OccurrenceModel.organization_id == organization_id,
            OccurrenceModel.deleted_at.is_(None),
        ]
        if start_date is not None:
            conditions.append(OccurrenceModel.start_date >= start_date)
        if end_date is not None:
            conditions.append(OccurrenceModel.end_date <= end_date)

        return await paginate(
            self._session, OccurrenceModel, conditions, page, self._to_entity
        )

    async def soft_delete_by_event(self, event_id: UUID, now: datetime) -> int:
        """Soft-delete every live occurrence of an event.

        Returns:
            Number of occurrences soft-deleted.
        """
        stmt = (
            update(OccurrenceModel)
            .where(
                OccurrenceModel.event_id == event_id,
                OccurrenceModel.deleted_at.is_(None),
            )
            .values(deleted_at=now, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return cast(Any, result).rowcount or 0

    async def delete_all_by_event(self, event_id: UUID) -> int:
        """Hard-delete every occurrence of an event.

        Returns:
            Number of occurrences removed.
        """
        stmt = (
            delete(OccurrenceModel)
            .where(OccurrenceModel.event_id == event_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return cast(Any, result).rowcount or 0

    async def update_future_by_event(
        self,
        event_id: UUID,
        since: datetime,
        changes: OccurrenceChanges,
        now: datetime,
    ) -> int:
        """Apply propagated event changes to occurrences starting at or after ``since``.

        Rows are updated through the entity so the capacity clamp and the
        duration rule live in one place.

        Returns:
            Number of occurrences updated.
        """
        stmt = (
            select(OccurrenceModel)
            .where(
                OccurrenceModel.event_id == event_id,
                OccurrenceModel.deleted_at.is_(None),
                OccurrenceModel.start_date >= since,
            )
            .execution_options(populate_existing=True)
        )
        models = (await self._session.execute(stmt)).scalars().all()

        for model in models:
            occurrence = self._to_entity(model)
            occurrence.apply_event_changes(changes, now)
            self._update_model(model, occurrence)

        await self._session.flush()
        return len(models)

    async def reserve_seats(
        self, occurrence_id: UUID, count: int, now: datetime
    ) -> bool:
        """Conditionally add seats.

        Returns:
            True if the counter moved, False if the occurrence is missing,
            soft-deleted or full.
        """
        stmt = (
            update(OccurrenceModel)
            .where(
                OccurrenceModel.id == occurrence_id,
                OccurrenceModel.deleted_at.is_(None),
                or_(
                    OccurrenceModel.max_capacity.is_(None),
                    OccurrenceModel.registered_seats + count
                    <= OccurrenceModel.max_capacity,
                ),
            )
            .values(
                registered_seats=OccurrenceModel.registered_seats + count,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return (cast(Any, result).rowcount or 0) == 1

    async def release_seats(
        self, occurrence_id: UUID, count: int, now: datetime
    ) -> None:
        """Conditionally subtract seats.

        An occurrence that no longer exists (removed when its event's
        recurrence was rewritten) has no counter left; the call is a no-op.

        Raises:
            SeatDecrementBelowZeroError: If the counter holds fewer than
                ``count`` seats.
        """
        stmt = (
            update(OccurrenceModel)
            .where(
                OccurrenceModel.id == occurrence_id,
                OccurrenceModel.registered_seats >= count,
            )
            .values(
                registered_seats=OccurrenceModel.registered_seats - count,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if (cast(Any, result).rowcount or 0) == 1:
            return

        model = await self._load(occurrence_id)
        if model is None:
            return
        raise SeatDecrementBelowZeroError(occurrence_id, model.registered_seats, count)

    async def _load(self, occurrence_id: UUID) -> OccurrenceModel | None:
        stmt = (
            select(OccurrenceModel)
            .where(OccurrenceModel.id == occurrence_id)
            .execution_options(populate_existing=True)
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    @staticmethod
    def _to_model(occurrence: Occurrence) -> OccurrenceModel:
        return OccurrenceModel(
            id=occurrence.id,
            event_id=occurrence.event_id,
            organization_id=occurrence.organization_id,
            start_date=occurrence.start_date,
            end_date=occurrence.end_date,
            title=occurrence.title,
            location=occurrence.location,
            max_capacity=occurrence.max_capacity,
            registered_seats=occurrence.registered_seats,
            deleted_at=occurrence.deleted_at,
            created_at=occurrence.created_at,
            updated_at=occurrence.updated_at,
        )

    @staticmethod
    def _update_model(model: OccurrenceModel, occurrence: Occurrence) -> None:
        model.start_date = occurrence.start_date
        model.end_date = occurrence.end_date
        model.title = occurrence.title
        model.location = occurrence.location
        model.max_capacity = occurrence.max_capacity
        model.registered_seats = occurrence.registered_seats
        model.deleted_at = occurrence.deleted_at
        model.updated_at = occurrence.updated_at

    @staticmethod
    def _to_entity(model: OccurrenceModel) -> Occurrence:
        return Occurrence(
            id=model.id,
            event_id=model.event_id,
            organization_id=model.organization_id,
            start_date=as_utc(model.start_date),
            end_date=as_utc(model.end_date),
            title=model.title,
            location=model.location,
            max_capacity=model.max_capacity,
            registered_seats=model.registered_seats,
            deleted_at=as_utc_or_none(model.deleted_at),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
