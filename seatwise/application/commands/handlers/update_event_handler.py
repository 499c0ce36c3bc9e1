"""Update event handler.

Flow:
1. Validate the replacement recurrence pattern (if any)
2. Load the event (absent or soft-deleted → EventNotFoundError)
3. Validate the resulting date range
4. Apply the provided changes (updated_at always advances)
5. Compare canonical pattern JSON before and after, then either:
   A. pattern changed → delete all occurrences and regenerate
   B. pattern unchanged, recurring → propagate changes to future occurrences
   C. one-off event → save the event only
6. Commit, then publish EventUpdated

Propagation rules (case B):
- title, location and max_capacity are copied when provided. A location
  is propagated even if the event previously had none.
- A new start or end date changes the template duration; future
  occurrences keep their start and get ``start + duration`` as end.
"""

from dataclasses import dataclass
from uuid import UUID

from seatwise.application.commands.event_commands import UpdateEvent
from seatwise.application.services.occurrence_materializer import build_occurrences
from seatwise.core.enums import ErrorCode
from seatwise.core.errors import DomainError, ValidationError
from seatwise.core.result import Failure, Result, Success
from seatwise.domain.entities import OccurrenceChanges
from seatwise.domain.errors import EventNotFoundError
from seatwise.domain.events import EventUpdated
from seatwise.domain.protocols import (
    ClockProtocol,
    EventBusProtocol,
    EventUnitOfWorkFactory,
    LoggerProtocol,
)
from seatwise.domain.value_objects import RecurrencePattern, serialize_pattern


@dataclass
class UpdateEventResponse:
    """Response data for a successful event update.

    Attributes:
        event_id: Updated event.
        recurrence_changed: True if occurrences were regenerated.
        occurrences_regenerated: Occurrences created by regeneration.
        occurrences_updated: Future occurrences that received propagated
            changes.
    """

    event_id: UUID
    recurrence_changed: bool
    occurrences_regenerated: int = 0
    occurrences_updated: int = 0


class UpdateEventHandler:
    """Handler for UpdateEvent command."""

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

    async def handle(self, cmd: UpdateEvent) -> Result[UpdateEventResponse, DomainError]:
        """Handle UpdateEvent command.

        Args:
            cmd: UpdateEvent command.

        Returns:
            Success(UpdateEventResponse) describing what was touched.
            Failure(EventNotFoundError) if the event is absent or deleted.
            Failure(InvalidRecurrencePatternError) on a malformed pattern.
            Failure(ValidationError) on an inverted date range.
        """
        # Step 1: Validate replacement pattern
        pattern_result = RecurrencePattern.parse(cmd.recurrence_pattern)
        if isinstance(pattern_result, Failure):
            return pattern_result
        new_pattern = pattern_result.value

        now = self._clock.now()
        regenerated = 0
        propagated = 0

        async with self._uow_factory() as uow:
            # Step 2: Load event
            event = await uow.events.find_by_id(cmd.event_id)
            if event is None or event.is_deleted:
                return Failure(error=EventNotFoundError.for_event(cmd.event_id))

            # Step 3: Validate resulting date range
            start = cmd.start_date or event.start_date
            end = cmd.end_date or event.end_date
            if end < start:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_DATE_RANGE,
                        message="end_date must not precede start_date",
                        field="end_date",
                    )
                )
            if cmd.max_capacity is not None and cmd.max_capacity < 0:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message="max_capacity cannot be negative",
                        field="max_capacity",
                    )
                )
            if cmd.title is not None and not cmd.title.strip():
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message="title cannot be empty",
                        field="title",
                    )
                )

            # Step 4: Apply changes
            previous_pattern_json = serialize_pattern(event.recurrence_pattern)
            event.update(
                now=now,
                title=cmd.title,
                description=cmd.description,
                location=cmd.location,
                start_date=cmd.start_date,
                end_date=cmd.end_date,
                max_capacity=cmd.max_capacity,
                recurrence_pattern=new_pattern,
                remove_recurrence=cmd.remove_recurrence,
            )
            recurrence_changed = previous_pattern_json != serialize_pattern(
                event.recurrence_pattern
            )

            # Step 5: Save and reconcile occurrences
            await uow.events.save(event)

            if recurrence_changed:
                # Case A: rewrite the whole occurrence set
                await uow.occurrences.delete_all_by_event(event.id)
                occurrences = build_occurrences(event, now=now)
                if occurrences:
                    await uow.occurrences.save_many(occurrences)
                regenerated = len(occurrences)
            elif event.is_recurring:
                # Case B: propagate to upcoming occurrences only
                changes = OccurrenceChanges(
                    title=cmd.title,
                    location=cmd.location,
                    max_capacity=cmd.max_capacity,
                    duration=(
                        event.duration
                        if cmd.start_date is not None or cmd.end_date is not None
                        else None
                    ),
                )
                if not changes.is_empty():
                    propagated = await uow.occurrences.update_future_by_event(
                        event.id, now, changes, now
                    )
            # Case C: one-off event, nothing else to do

            await uow.commit()

        self._logger.info(
            "event_updated",
            event_id=str(event.id),
            organization_id=str(event.organization_id),
            recurrence_changed=recurrence_changed,
            occurrences_regenerated=regenerated,
            occurrences_updated=propagated,
        )

        # Step 6: Publish event (after commit)
        await self._event_bus.publish(
            EventUpdated(
                aggregate_id=event.id,
                organization_id=event.organization_id,
                recurrence_changed=recurrence_changed,
                occurrences_propagated=propagated > 0,
            )
        )

        return Success(
            value=UpdateEventResponse(
                event_id=event.id,
                recurrence_changed=recurrence_changed,
                occurrences_regenerated=regenerated,
                occurrences_updated=propagated,
            )
        )
