"""Register for occurrence handler.

Flow (one unit of work, every Failure rolls everything back):
1. Validate the seat count
2. Load the occurrence (absent or owned by another organization →
   OccurrenceNotFoundError)
3. Soft-deleted occurrence → EventCancelledError
4. Occurrence already ended → OccurrenceInPastError
5. Parent event absent or deleted → EventCancelledError
6. Existing registration for (user, occurrence), locked for the rest of
   the unit of work:
   - active → AlreadyRegisteredError
   - cancelled → capacity check, reserve seats, reactivate in place
7. Overlap with any active registration of the user, in any
   organization → ConflictDetectedError
8. Capacity check and atomic seat reservation → CapacityExceededError
9. Create the registration with its snapshot and save it
10. Commit, then publish RegistrationCreated / RegistrationReactivated

The capacity check in step 8 is advisory. The seat reservation is a
conditional increment in storage, so two concurrent bookings for the last
seat cannot both succeed.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from uuid_extensions import uuid7

from seatwise.application.commands.registration_commands import RegisterForOccurrence
from seatwise.core.enums import ErrorCode
from seatwise.core.errors import DomainError, ValidationError
from seatwise.core.result import Failure, Result, Success
from seatwise.domain.entities import (
    MAX_SEATS_PER_REGISTRATION,
    MIN_SEATS_PER_REGISTRATION,
    Registration,
)
from seatwise.domain.errors import (
    AlreadyRegisteredError,
    CapacityExceededError,
    ConflictDetectedError,
    EventCancelledError,
    OccurrenceInPastError,
    OccurrenceNotFoundError,
)
from seatwise.domain.events import RegistrationCreated, RegistrationReactivated
from seatwise.domain.protocols import (
    ClockProtocol,
    EventBusProtocol,
    LoggerProtocol,
    OccurrenceReadModel,
    RegistrationUnitOfWork,
    RegistrationUnitOfWorkFactory,
)


@dataclass
class RegisterForOccurrenceResponse:
    """Response data for a successful booking.

    Attributes:
        registration_id: New or reactivated registration.
        seat_count: Seats now held.
        reactivated: True if a cancelled registration was reused.
    """

    registration_id: UUID
    seat_count: int
    reactivated: bool = False


class RegisterForOccurrenceHandler:
    """Handler for RegisterForOccurrence command.

    Orchestrates:
    - Occurrence/event visibility checks through the event module port
    - Duplicate, overlap and capacity rules
    - Atomic seat reservation and registration persistence
    - Domain event publishing after commit
    """

    def __init__(
        self,
        uow_factory: RegistrationUnitOfWorkFactory,
        clock: ClockProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize register handler with dependencies.

        Args:
            uow_factory: Opens a registration unit of work.
            clock: Source of the current time.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._uow_factory = uow_factory
        self._clock = clock
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: RegisterForOccurrence
    ) -> Result[RegisterForOccurrenceResponse, DomainError]:
        """Handle RegisterForOccurrence command.

        Args:
            cmd: RegisterForOccurrence command.

        Returns:
            Success(RegisterForOccurrenceResponse) with the registration id.
            Failure(DomainError) for every business-rule violation listed in
            the module docstring.
        """
        # Step 1: Validate seat count
        if not MIN_SEATS_PER_REGISTRATION <= cmd.seat_count <= MAX_SEATS_PER_REGISTRATION:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_SEAT_COUNT,
                    message=(
                        f"seat_count must be between {MIN_SEATS_PER_REGISTRATION} "
                        f"and {MAX_SEATS_PER_REGISTRATION}"
                    ),
                    field="seat_count",
                )
            )
        if not cmd.user_id.strip():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="user_id cannot be empty",
                    field="user_id",
                )
            )

        logger = self._logger.bind(
            occurrence_id=str(cmd.occurrence_id),
            user_id=cmd.user_id,
            organization_id=str(cmd.organization_id),
        )
        now = self._clock.now()

        async with self._uow_factory() as uow:
            # Step 2: Load occurrence
            occurrence = await uow.event_module.find_occurrence_by_id(cmd.occurrence_id)
            if occurrence is None or occurrence.organization_id != cmd.organization_id:
                return Failure(
                    error=OccurrenceNotFoundError.for_occurrence(cmd.occurrence_id)
                )

            # Step 3: Soft-deleted occurrence
            if occurrence.is_deleted:
                return Failure(error=EventCancelledError.for_occurrence(occurrence.id))

            # Step 4: Past occurrence
            if occurrence.end_date <= now:
                return Failure(
                    error=OccurrenceInPastError.for_occurrence(
                        occurrence.id, occurrence.end_date
                    )
                )

            # Step 5: Parent event visibility
            event = await uow.event_module.find_event_by_id(occurrence.event_id)
            if event is None or event.is_deleted:
                return Failure(error=EventCancelledError.for_occurrence(occurrence.id))

            # Step 6: Existing registration
            existing = await uow.registrations.find_by_user_and_occurrence(
                cmd.user_id, occurrence.id, for_update=True
            )
            if existing is not None:
                if existing.is_active:
                    return Failure(
                        error=AlreadyRegisteredError.for_user(cmd.user_id, occurrence.id)
                    )

                reserve_result = await self._reserve_seats(
                    uow, occurrence, cmd.seat_count, now
                )
                if isinstance(reserve_result, Failure):
                    logger.info(
                        "registration_capacity_exceeded",
                        requested=cmd.seat_count,
                        available=reserve_result.error.available,
                    )
                    return reserve_result

                existing.reactivate(cmd.seat_count, now)
                if not await uow.registrations.save(existing):
                    return Failure(
                        error=AlreadyRegisteredError.for_user(cmd.user_id, occurrence.id)
                    )
                await uow.commit()

                logger.info(
                    "registration_reactivated",
                    registration_id=str(existing.id),
                    seat_count=existing.seat_count,
                )
                await self._event_bus.publish(
                    RegistrationReactivated(
                        aggregate_id=existing.id,
                        organization_id=existing.organization_id,
                        occurrence_id=existing.occurrence_id,
                        seat_count=existing.seat_count,
                    )
                )
                return Success(
                    value=RegisterForOccurrenceResponse(
                        registration_id=existing.id,
                        seat_count=existing.seat_count,
                        reactivated=True,
                    )
                )

            # Step 7: Overlap detection (all organizations)
            overlapping = await uow.registrations.find_overlapping_registrations(
                cmd.user_id, occurrence.start_date, occurrence.end_date
            )
            if overlapping:
                conflict = overlapping[0]
                logger.info(
                    "registration_conflict_detected",
                    conflicting_occurrence_id=str(conflict.occurrence_id),
                )
                return Failure(
                    error=ConflictDetectedError.for_conflict(
                        conflicting_occurrence_id=conflict.occurrence_id,
                        event_title=conflict.event_title,
                        start_date=conflict.occurrence_start_date,
                        end_date=conflict.occurrence_end_date,
                    )
                )

            # Step 8: Capacity check and reservation
            reserve_result = await self._reserve_seats(
                uow, occurrence, cmd.seat_count, now
            )
            if isinstance(reserve_result, Failure):
                logger.info(
                    "registration_capacity_exceeded",
                    requested=cmd.seat_count,
                    available=reserve_result.error.available,
                )
                return reserve_result

            # Step 9: Create registration with snapshot
            registration = Registration.create_new(
                id=cmd.registration_id or uuid7(),
                occurrence_id=occurrence.id,
                organization_id=cmd.organization_id,
                user_id=cmd.user_id,
                seat_count=cmd.seat_count,
                occurrence_start_date=occurrence.start_date,
                occurrence_end_date=occurrence.end_date,
                event_title=event.title,
                now=now,
            )
            if not await uow.registrations.save(registration):
                # Lost a race against a concurrent booking by the same user
                return Failure(
                    error=AlreadyRegisteredError.for_user(cmd.user_id, occurrence.id)
                )

            # Step 10: Commit
            await uow.commit()

        logger.info(
            "registration_created",
            registration_id=str(registration.id),
            seat_count=registration.seat_count,
        )
        await self._event_bus.publish(
            RegistrationCreated(
                aggregate_id=registration.id,
                organization_id=registration.organization_id,
                occurrence_id=registration.occurrence_id,
                user_id=registration.user_id,
                seat_count=registration.seat_count,
            )
        )

        return Success(
            value=RegisterForOccurrenceResponse(
                registration_id=registration.id,
                seat_count=registration.seat_count,
            )
        )

    async def _reserve_seats(
        self,
        uow: RegistrationUnitOfWork,
        occurrence: OccurrenceReadModel,
        seat_count: int,
        now: datetime,
    ) -> Result[None, CapacityExceededError]:
        """Check capacity and atomically reserve seats.

        Args:
            uow: Current registration unit of work.
            occurrence: Occurrence as read at the start of the workflow.
            seat_count: Seats to reserve.
            now: Timestamp stamped on the occurrence.

        Returns:
            Success(None) if the seats were reserved.
            Failure(CapacityExceededError) if they do not fit, either by the
            snapshot or because a concurrent booking took them first.
        """
        available = occurrence.available_seats
        if available is not None and seat_count > available:
            return Failure(
                error=CapacityExceededError.for_request(
                    occurrence.id, requested=seat_count, available=available
                )
            )

        if not await uow.event_module.reserve_seats(occurrence.id, seat_count, now):
            fresh = await uow.event_module.find_occurrence_by_id(occurrence.id)
            remaining = fresh.available_seats if fresh is not None else None
            return Failure(
                error=CapacityExceededError.for_request(
                    occurrence.id,
                    requested=seat_count,
                    available=max(remaining or 0, 0),
                )
            )

        return Success(value=None)
