"""Create event handler.

Flow:
1. Validate the recurrence pattern
2. Validate dates and capacity
3. Build the Event entity
4. Materialize occurrences (recurring events only)
5. Persist event and occurrences in one unit of work
6. Publish EventCreated
7. Return the event id and occurrence count

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (unit of work is injected via protocols)
"""

from dataclasses import dataclass
from uuid import UUID

from uuid_extensions import uuid7

from seatwise.application.commands.event_commands import CreateEvent
from seatwise.application.services.occurrence_materializer import build_occurrences
from seatwise.core.enums import ErrorCode
from seatwise.core.errors import DomainError, ValidationError
from seatwise.core.result import Failure, Result, Success
from seatwise.domain.entities import Event
from seatwise.domain.events import EventCreated
from seatwise.domain.protocols import (
    ClockProtocol,
    EventBusProtocol,
    EventUnitOfWorkFactory,
    LoggerProtocol,
)
from seatwise.domain.value_objects import RecurrencePattern


@dataclass
class CreateEventResponse:
    """Response data for successful event creation."""

    event_id: UUID
    occurrence_count: int


class CreateEventHandler:
    """Handler for CreateEvent command."""

    def __init__(
        self,
        uow_factory: EventUnitOfWorkFactory,
        clock: ClockProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize create event handler with dependencies.

        Args:
            uow_factory: Opens an event unit of work.
            clock: Source of the current time.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._uow_factory = uow_factory
        self._clock = clock
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: CreateEvent) -> Result[CreateEventResponse, DomainError]:
        """Handle CreateEvent command.

        Args:
            cmd: CreateEvent command.

        Returns:
            Success(CreateEventResponse) with the new event id.
            Failure(InvalidRecurrencePatternError) on a malformed pattern.
            Failure(ValidationError) on inverted dates or negative capacity.
        """
        # Step 1: Validate recurrence pattern
        pattern_result = RecurrencePattern.parse(cmd.recurrence_pattern)
        if isinstance(pattern_result, Failure):
            self._logger.warning(
                "event_create_invalid_recurrence",
                organization_id=str(cmd.organization_id),
                issue_count=len(pattern_result.error.issues),
            )
            return pattern_result
        pattern = pattern_result.value

        # Step 2: Validate dates and capacity
        if cmd.end_date < cmd.start_date:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_DATE_RANGE,
                    message="end_date must not precede start_date",
                    field="end_date",
                )
            )
        if cmd.max_capacity < 0:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="max_capacity cannot be negative",
                    field="max_capacity",
                )
            )
        if not cmd.title.strip():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="title cannot be empty",
                    field="title",
                )
            )

        # Step 3: Build event
        now = self._clock.now()
        event = Event(
            id=cmd.event_id or uuid7(),
            organization_id=cmd.organization_id,
            title=cmd.title,
            description=cmd.description,
            location=cmd.location,
            start_date=cmd.start_date,
            end_date=cmd.end_date,
            max_capacity=cmd.max_capacity,
            recurrence_pattern=pattern,
            created_at=now,
            updated_at=now,
        )

        # Step 4: Materialize occurrences
        occurrences = build_occurrences(event, now=now)

        # Step 5: Persist (one-off events are a single write)
        async with self._uow_factory() as uow:
            await uow.events.save(event)
            if occurrences:
                await uow.occurrences.save_many(occurrences)
            await uow.commit()

        self._logger.info(
            "event_created",
            event_id=str(event.id),
            organization_id=str(event.organization_id),
            is_recurring=event.is_recurring,
            occurrence_count=len(occurrences),
        )

        # Step 6: Publish event (after commit)
        await self._event_bus.publish(
            EventCreated(
                aggregate_id=event.id,
                organization_id=event.organization_id,
                title=event.title,
                is_recurring=event.is_recurring,
                occurrence_count=len(occurrences),
            )
        )

        # Step 7: Return success
        return Success(
            value=CreateEventResponse(
                event_id=event.id,
                occurrence_count=len(occurrences),
            )
        )
