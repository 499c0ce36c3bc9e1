"""Cancel registration handler.

Full cancellation (new_seat_count None or 0) releases every seat and flips
the registration to cancelled. Partial cancellation (0 < new_seat_count <
seat_count) releases only the difference and keeps the registration active.

Idempotency:
- Cancelling an already-cancelled registration succeeds without releasing
  seats again.
- Asking for a seat count not below the current one succeeds as a no-op.
- A partial reduction on a cancelled registration is a no-op as well (it
  holds no seats to release).

A SeatDecrementBelowZeroError from the seat release means seat accounting is
already broken. It is logged at CRITICAL and propagates; the unit of work
rolls back.

The registration row is read with a lock so two concurrent cancellations of
the same registration cannot both release its seats.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from seatwise.application.commands.registration_commands import CancelRegistration
from seatwise.core.enums import ErrorCode
from seatwise.core.errors import DomainError, ValidationError
from seatwise.core.result import Failure, Result, Success
from seatwise.domain.entities import Registration
from seatwise.domain.enums import RegistrationStatus
from seatwise.domain.errors import RegistrationNotFoundError, SeatDecrementBelowZeroError
from seatwise.domain.events import RegistrationCancelled
from seatwise.domain.protocols import (
    ClockProtocol,
    EventBusProtocol,
    LoggerProtocol,
    RegistrationUnitOfWork,
    RegistrationUnitOfWorkFactory,
)


@dataclass
class CancelRegistrationResponse:
    """Response data for a cancellation.

    Attributes:
        registration_id: Registration affected.
        seats_released: Seats given back (0 for a no-op).
        seat_count: Seats the registration still holds (0 if cancelled).
        status: Registration status afterwards.
    """

    registration_id: UUID
    seats_released: int
    seat_count: int
    status: RegistrationStatus


class CancelRegistrationHandler:
    """Handler for CancelRegistration command."""

    def __init__(
        self,
        uow_factory: RegistrationUnitOfWorkFactory,
        clock: ClockProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: CancelRegistration
    ) -> Result[CancelRegistrationResponse, DomainError]:
        """Handle CancelRegistration command.

        Args:
            cmd: CancelRegistration command.

        Returns:
            Success(CancelRegistrationResponse), including for no-ops.
            Failure(RegistrationNotFoundError) if the registration is absent.
            Failure(ValidationError) for a negative seat count.

        Raises:
            SeatDecrementBelowZeroError: If releasing seats would drive the
                occurrence counter negative.
        """
        if cmd.new_seat_count is not None and cmd.new_seat_count < 0:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_SEAT_COUNT,
                    message="new_seat_count cannot be negative",
                    field="new_seat_count",
                )
            )

        now = self._clock.now()
        new_seat_count = cmd.new_seat_count or 0
        full = new_seat_count == 0

        async with self._uow_factory() as uow:
            registration = await uow.registrations.find_by_id(
                cmd.registration_id, for_update=True
            )
            if registration is None:
                return Failure(
                    error=RegistrationNotFoundError.for_registration(cmd.registration_id)
                )

            if not registration.is_active:
                # Nothing is held; both full and partial requests are no-ops
                return Success(value=self._no_op(registration))

            if full:
                released = registration.seat_count
                await self._release_seats(uow, registration, released, now)
                registration.cancel(now)
                remaining = 0
            else:
                if new_seat_count >= registration.seat_count:
                    return Success(value=self._no_op(registration))
                released = registration.seat_count - new_seat_count
                await self._release_seats(uow, registration, released, now)
                registration.update_seat_count(new_seat_count, now)
                remaining = registration.seat_count

            await uow.registrations.save(registration)
            await uow.commit()

        self._logger.info(
            "registration_cancelled",
            registration_id=str(registration.id),
            occurrence_id=str(registration.occurrence_id),
            seats_released=released,
            remaining_seat_count=remaining,
            partial=not full,
        )
        await self._event_bus.publish(
            RegistrationCancelled(
                aggregate_id=registration.id,
                organization_id=registration.organization_id,
                occurrence_id=registration.occurrence_id,
                seats_released=released,
                remaining_seat_count=remaining,
            )
        )

        return Success(
            value=CancelRegistrationResponse(
                registration_id=registration.id,
                seats_released=released,
                seat_count=remaining,
                status=registration.status,
            )
        )

    async def _release_seats(
        self,
        uow: RegistrationUnitOfWork,
        registration: Registration,
        count: int,
        now: datetime,
    ) -> None:
        try:
            await uow.event_module.release_seats(
                registration.occurrence_id, count, now
            )
        except SeatDecrementBelowZeroError as e:
            self._logger.critical(
                "seat_accounting_invariant_broken",
                error=e,
                registration_id=str(registration.id),
                occurrence_id=str(e.occurrence_id),
                registered_seats=e.registered_seats,
                requested=e.requested,
            )
            raise

    @staticmethod
    def _no_op(registration: Registration) -> CancelRegistrationResponse:
        return CancelRegistrationResponse(
            registration_id=registration.id,
            seats_released=0,
            seat_count=registration.seat_count if registration.is_active else 0,
            status=registration.status,
        )
