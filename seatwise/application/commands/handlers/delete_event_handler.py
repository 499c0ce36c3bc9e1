"""Delete event handler.

Soft-deletes an event and cascades the soft-delete to every non-deleted
occurrence, in one unit of work. Deleting twice is not idempotent: the
second call reports EventNotFoundError.
"""

from uuid import UUID

from seatwise.application.commands.event_commands import DeleteEvent
from seatwise.core.errors import DomainError
from seatwise.core.result import Failure, Result, Success
from seatwise.domain.errors import EventNotFoundError
from seatwise.domain.events import EventDeleted
from seatwise.domain.protocols import (
    ClockProtocol,
    EventBusProtocol,
    EventUnitOfWorkFactory,
    LoggerProtocol,
)


class DeleteEventHandler:
    """Handler for DeleteEvent command."""

    def __init__(
        self,
        uow_factory: EventUnitOfWorkFactory,
        clock: ClockProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: DeleteEvent) -> Result[UUID, DomainError]:
        """Handle DeleteEvent command.

        Args:
            cmd: DeleteEvent command.

        Returns:
            Success(event_id) once the event and its occurrences are deleted.
            Failure(EventNotFoundError) if absent or already deleted.
        """
        now = self._clock.now()

        async with self._uow_factory() as uow:
            # Re-read inside the transaction for a consistent view
            event = await uow.events.find_by_id(cmd.event_id)
            if event is None or event.is_deleted:
                return Failure(error=EventNotFoundError.for_event(cmd.event_id))

            event.soft_delete(now)
            await uow.events.save(event)
            cascaded = await uow.occurrences.soft_delete_by_event(event.id, now)
            await uow.commit()

        self._logger.info(
            "event_deleted",
            event_id=str(event.id),
            organization_id=str(event.organization_id),
            occurrences_deleted=cascaded,
        )

        await self._event_bus.publish(
            EventDeleted(
                aggregate_id=event.id,
                organization_id=event.organization_id,
                occurrences_deleted=cascaded,
            )
        )

        return Success(value=event.id)
