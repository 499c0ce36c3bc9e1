"""EventRepository - SQLAlchemy implementation of EventRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Event entities and database EventModel rows.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from seatwise.domain.entities import Event
from seatwise.domain.protocols.pagination import CursorPage, PageRequest
from seatwise.domain.value_objects import RecurrencePattern
from seatwise.infrastructure.persistence.mappers import as_utc, as_utc_or_none
from seatwise.infrastructure.persistence.models.event import EventModel
from seatwise.infrastructure.persistence.pagination import paginate


class EventRepository:
    """SQLAlchemy implementation of EventRepository protocol.

    This class does NOT inherit from EventRepository protocol
    (Protocol uses structural typing).

    Example:
        >>> async with db.transaction() as session:
        ...     repo = EventRepository(session)
        ...     event = await repo.find_by_id(event_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def save(self, event: Event) -> None:
        """Insert or update an event.

        Args:
            event: Event entity to persist.
        """
        existing = await self._session.get(EventModel, event.id)

        if existing is None:
            self._session.add(self._to_model(event))
        else:
            self._update_model(existing, event)

        await self._session.flush()

    async def find_by_id(self, event_id: UUID) -> Event | None:
        """Find event by ID (soft-deleted included).

        Args:
            event_id: Event identifier.

        Returns:
            Event if found, None otherwise.
        """
        stmt = (
            select(EventModel)
            .where(EventModel.id == event_id)
            .execution_options(populate_existing=True)
        )
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    async def find_by_organization(
        self,
        organization_id: UUID,
        page: PageRequest,
        *,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> CursorPage[Event]:
        """List non-deleted events of a tenant, ordered by id."""
        conditions: list[ColumnElement[bool]] = [
            EventModel.organization_id == organization_id,
            EventModel.deleted_at.is_(None),
        ]
        if start_date is not None:
            conditions.append(EventModel.start_date >= start_date)
        if end_date is not None:
            conditions.append(EventModel.end_date <= end_date)

        return await paginate(self._session, EventModel, conditions, page, self._to_entity)

    @staticmethod
    def _to_model(event: Event) -> EventModel:
        return EventModel(
            id=event.id,
            organization_id=event.organization_id,
            title=event.title,
            description=event.description,
            location=event.location,
            start_date=event.start_date,
            end_date=event.end_date,
            max_capacity=event.max_capacity,
            recurrence_pattern=(
                event.recurrence_pattern.model_dump(mode="json")
                if event.recurrence_pattern is not None
                else None
            ),
            deleted_at=event.deleted_at,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )

    @staticmethod
    def _update_model(model: EventModel, event: Event) -> None:
        model.title = event.title
        model.description = event.description
        model.location = event.location
        model.start_date = event.start_date
        model.end_date = event.end_date
        model.max_capacity = event.max_capacity
        model.recurrence_pattern = (
            event.recurrence_pattern.model_dump(mode="json")
            if event.recurrence_pattern is not None
            else None
        )
        model.deleted_at = event.deleted_at
        model.updated_at = event.updated_at

    @staticmethod
    def _to_entity(model: EventModel) -> Event:
        return Event(
            id=model.id,
            organization_id=model.organization_id,
            title=model.title,
            description=model.description,
            location=model.location,
            start_date=as_utc(model.start_date),
            end_date=as_utc(model.end_date),
            max_capacity=model.max_capacity,
            recurrence_pattern=(
                RecurrencePattern.model_validate(model.recurrence_pattern)
                if model.recurrence_pattern is not None
                else None
            ),
            deleted_at=as_utc_or_none(model.deleted_at),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
