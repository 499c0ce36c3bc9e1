"""SQLAlchemy units of work.

Each unit of work opens one AsyncSession, binds fresh repositories to it and
owns its transaction:

    async with SqlAlchemyRegistrationUnitOfWork(db.async_session) as uow:
        ...
        await uow.commit()

Exiting without commit() rolls back, so an early ``return Failure(...)``
inside the block discards every write made so far.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from seatwise.infrastructure.persistence.event_module_adapter import EventModuleAdapter
from seatwise.infrastructure.persistence.repositories import (
    EventRepository,
    OccurrenceRepository,
    RegistrationRepository,
)


class _SqlAlchemyUnitOfWork(ABC):
    """Session lifecycle shared by the concrete units of work."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None
        self._committed = False

    @abstractmethod
    def _bind(self, session: AsyncSession) -> None:
        """Attach repositories to a freshly opened session."""

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("unit of work used outside its async with block")
        return self._session

    async def __aenter__(self) -> Self:
        self._session = self._session_factory()
        self._committed = False
        self._bind(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self.session
        try:
            if not self._committed:
                await session.rollback()
        finally:
            await session.close()
            self._session = None

    async def commit(self) -> None:
        await self.session.commit()
        self._committed = True

    async def rollback(self) -> None:
        await self.session.rollback()


class SqlAlchemyEventUnitOfWork(_SqlAlchemyUnitOfWork):
    """EventUnitOfWork over one SQLAlchemy session."""

    events: EventRepository
    occurrences: OccurrenceRepository

    def _bind(self, session: AsyncSession) -> None:
        self.events = EventRepository(session)
        self.occurrences = OccurrenceRepository(session)


class SqlAlchemyRegistrationUnitOfWork(_SqlAlchemyUnitOfWork):
    """RegistrationUnitOfWork over one SQLAlchemy session.

    The event module adapter shares the session, so seat reservations
    commit or roll back together with the registration.
    """

    registrations: RegistrationRepository
    event_module: EventModuleAdapter

    def _bind(self, session: AsyncSession) -> None:
        self.registrations = RegistrationRepository(session)
        self.event_module = EventModuleAdapter(
            EventRepository(session), OccurrenceRepository(session)
        )
