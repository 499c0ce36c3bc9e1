"""RegistrationRepository - SQLAlchemy implementation of RegistrationRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Registration entities and database RegistrationModel rows.

Writes run inside a SAVEPOINT so that a violation of the active
(user_id, occurrence_id) unique index rolls back only the failed insert and
surfaces as ``save() -> False``; the surrounding unit of work stays usable.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import ColumnElement, case, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from seatwise.domain.entities import Registration
from seatwise.domain.enums import RegistrationStatus
from seatwise.domain.protocols.pagination import CursorPage, PageRequest
from seatwise.infrastructure.persistence.mappers import as_utc, as_utc_or_none
from seatwise.infrastructure.persistence.models.registration import RegistrationModel
from seatwise.infrastructure.persistence.pagination import paginate

_ACTIVE = RegistrationStatus.ACTIVE.value


class RegistrationRepository:
    """SQLAlchemy implementation of RegistrationRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def save(self, registration: Registration) -> bool:
        """Insert or update a registration.

        Args:
            registration: Registration entity to persist.

        Returns:
            True if stored, False if the active-registration unique index
            rejected it.
        """
        existing = await self._session.get(RegistrationModel, registration.id)

        try:
            async with self._session.begin_nested():
                if existing is None:
                    self._session.add(self._to_model(registration))
                else:
                    self._update_model(existing, registration)
                await self._session.flush()
        except IntegrityError:
            return False

        return True

    async def find_by_id(
        self, registration_id: UUID, *, for_update: bool = False
    ) -> Registration | None:
        """Find registration by ID (any status).

        ``for_update`` adds SELECT ... FOR UPDATE. SQLite has no row locks
        and relies on the IMMEDIATE transaction the database opens instead.
        """
        stmt = (
            select(RegistrationModel)
            .where(RegistrationModel.id == registration_id)
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    async def find_by_user_and_occurrence(
        self, user_id: str, occurrence_id: UUID, *, for_update: bool = False
    ) -> Registration | None:
        """Find the user's registration on an occurrence, active first.

        A user can collect several cancelled rows for one occurrence only
        through races; the most recently touched one wins.
        """
        stmt = (
            select(RegistrationModel)
            .where(
                RegistrationModel.user_id == user_id,
                RegistrationModel.occurrence_id == occurrence_id,
            )
            .order_by(
                case((RegistrationModel.status == _ACTIVE, 0), else_=1),
                RegistrationModel.updated_at.desc(),
            )
            .limit(1)
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    async def find_overlapping_registrations(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
        *,
        exclude_registration_id: UUID | None = None,
    ) -> list[Registration]:
        """Find the user's active registrations strictly overlapping ``[start, end)``.

        Not filtered by organization.
        """
        stmt = select(RegistrationModel).where(
            RegistrationModel.user_id == user_id,
            RegistrationModel.status == _ACTIVE,
            RegistrationModel.occurrence_start_date < end,
            RegistrationModel.occurrence_end_date > start,
        )
        if exclude_registration_id is not None:
            stmt = stmt.where(RegistrationModel.id != exclude_registration_id)
        stmt = stmt.order_by(RegistrationModel.occurrence_start_date)

        models = (await self._session.execute(stmt)).scalars().all()
        return [self._to_entity(model) for model in models]

    async def find_by_user_in_organization(
        self,
        user_id: str,
        organization_id: UUID,
        page: PageRequest,
        *,
        include_cancelled: bool = False,
    ) -> CursorPage[Registration]:
        """List a user's registrations in one tenant, ordered by id."""
        conditions: list[ColumnElement[bool]] = [
            RegistrationModel.user_id == user_id,
            RegistrationModel.organization_id == organization_id,
        ]
        if not include_cancelled:
            conditions.append(RegistrationModel.status == _ACTIVE)

        return await paginate(
            self._session, RegistrationModel, conditions, page, self._to_entity
        )

    @staticmethod
    def _to_model(registration: Registration) -> RegistrationModel:
        return RegistrationModel(
            id=registration.id,
            occurrence_id=registration.occurrence_id,
            organization_id=registration.organization_id,
            user_id=registration.user_id,
            seat_count=registration.seat_count,
            status=registration.status.value,
            occurrence_start_date=registration.occurrence_start_date,
            occurrence_end_date=registration.occurrence_end_date,
            event_title=registration.event_title,
            deleted_at=registration.deleted_at,
            created_at=registration.created_at,
            updated_at=registration.updated_at,
        )

    @staticmethod
    def _update_model(model: RegistrationModel, registration: Registration) -> None:
        model.seat_count = registration.seat_count
        model.status = registration.status.value
        model.deleted_at = registration.deleted_at
        model.updated_at = registration.updated_at

    @staticmethod
    def _to_entity(model: RegistrationModel) -> Registration:
        return Registration(
            id=model.id,
            occurrence_id=model.occurrence_id,
            organization_id=model.organization_id,
            user_id=model.user_id,
            seat_count=model.seat_count,
            status=RegistrationStatus(model.status),
            occurrence_start_date=as_utc(model.occurrence_start_date),
            occurrence_end_date=as_utc(model.occurrence_end_date),
            event_title=model.event_title,
            deleted_at=as_utc_or_none(model.deleted_at),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
