"""Unit of work protocols (transaction boundary).

A unit of work groups repository calls into one atomic transaction:

    async with uow_factory() as uow:
        await uow.events.save(event)
        await uow.commit()

Leaving the ``async with`` block without calling ``commit()`` (early
return of a Failure, or an exception) rolls back every write made inside
it. Handlers publish domain events only after ``commit()`` returned.
"""

from collections.abc import Callable
from types import TracebackType
from typing import Protocol, Self

from seatwise.domain.protocols.event_module_protocol import EventModuleProtocol
from seatwise.domain.protocols.event_repository import EventRepository
from seatwise.domain.protocols.occurrence_repository import OccurrenceRepository
from seatwise.domain.protocols.registration_repository import RegistrationRepository


class UnitOfWork(Protocol):
    """Transaction boundary shared by all units of work."""

    async def __aenter__(self) -> Self: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def commit(self) -> None:
        """Make every write performed in this unit of work durable."""
        ...

    async def rollback(self) -> None:
        """Discard every write performed in this unit of work."""
        ...


class EventUnitOfWork(UnitOfWork, Protocol):
    """Unit of work for the event lifecycle workflow."""

    events: EventRepository
    occurrences: OccurrenceRepository


class RegistrationUnitOfWork(UnitOfWork, Protocol):
    """Unit of work for the registration workflow.

    ``event_module`` is bound to the same transaction as ``registrations``.
    """

    registrations: RegistrationRepository
    event_module: EventModuleProtocol


EventUnitOfWorkFactory = Callable[[], EventUnitOfWork]
RegistrationUnitOfWorkFactory = Callable[[], RegistrationUnitOfWork]
