"""Registration workflow errors.

Every business-rule failure of the registration and cancellation workflows
has a dedicated error type carrying the structured data (ids, counts, dates)
needed to render a precise message.

Architecture:
- Domain layer errors (inherit from core error classes)
- Used in Result types (railway-oriented programming)
- Returned as Failure(error); the unit of work is left without commit,
  so any partial write is rolled back

SeatDecrementBelowZeroError is the exception: it signals a broken seat
accounting invariant (a defect, not a user error) and is raised.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from seatwise.core.enums import ErrorCode
from seatwise.core.errors import ConflictError, DomainError, NotFoundError


@dataclass(frozen=True, slots=True, kw_only=True)
class OccurrenceNotFoundError(NotFoundError):
    """Occurrence does not exist.

    Attributes:
        occurrence_id: ID that was looked up.
    """

    occurrence_id: UUID

    @classmethod
    def for_occurrence(cls, occurrence_id: UUID) -> "OccurrenceNotFoundError":
        """Build the error for a missing occurrence."""
        return cls(
            code=ErrorCode.OCCURRENCE_NOT_FOUND,
            message=f"Occurrence {occurrence_id} not found",
            resource_type="Occurrence",
            resource_id=str(occurrence_id),
            occurrence_id=occurrence_id,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class RegistrationNotFoundError(NotFoundError):
    """Registration does not exist.

    Attributes:
        registration_id: ID that was looked up.
    """

    registration_id: UUID

    @classmethod
    def for_registration(cls, registration_id: UUID) -> "RegistrationNotFoundError":
        """Build the error for a missing registration."""
        return cls(
            code=ErrorCode.REGISTRATION_NOT_FOUND,
            message=f"Registration {registration_id} not found",
            resource_type="Registration",
            resource_id=str(registration_id),
            registration_id=registration_id,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class EventCancelledError(DomainError):
    """Occurrence or its parent event has been soft-deleted.

    Attributes:
        occurrence_id: Occurrence the user tried to book.
    """

    occurrence_id: UUID

    @classmethod
    def for_occurrence(cls, occurrence_id: UUID) -> "EventCancelledError":
        """Build the error for a cancelled occurrence."""
        return cls(
            code=ErrorCode.EVENT_CANCELLED,
            message=f"Event for occurrence {occurrence_id} has been cancelled",
            occurrence_id=occurrence_id,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class OccurrenceInPastError(DomainError):
    """Occurrence has already ended.

    Attributes:
        occurrence_id: Occurrence the user tried to book.
        end_date: When the occurrence ended.
    """

    occurrence_id: UUID
    end_date: datetime

    @classmethod
    def for_occurrence(
        cls, occurrence_id: UUID, end_date: datetime
    ) -> "OccurrenceInPastError":
        """Build the error for an occurrence that already ended."""
        return cls(
            code=ErrorCode.OCCURRENCE_IN_PAST,
            message=f"Occurrence {occurrence_id} ended at {end_date.isoformat()}",
            occurrence_id=occurrence_id,
            end_date=end_date,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class AlreadyRegisteredError(ConflictError):
    """User already holds an active registration on the occurrence.

    Attributes:
        user_id: User attempting to register.
        occurrence_id: Occurrence already booked.
    """

    user_id: str
    occurrence_id: UUID

    @classmethod
    def for_user(cls, user_id: str, occurrence_id: UUID) -> "AlreadyRegisteredError":
        """Build the error for a duplicate active registration."""
        return cls(
            code=ErrorCode.ALREADY_REGISTERED,
            message=f"User {user_id} is already registered for occurrence {occurrence_id}",
            resource_type="Registration",
            conflicting_field="occurrence_id",
            user_id=user_id,
            occurrence_id=occurrence_id,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictDetectedError(ConflictError):
    """User already holds an active registration overlapping this time window.

    Attributes:
        conflicting_occurrence_id: Occurrence of the overlapping registration.
        event_title: Event title captured on the overlapping registration.
        start_date: Start of the overlapping window.
        end_date: End of the overlapping window.
    """

    conflicting_occurrence_id: UUID
    event_title: str
    start_date: datetime
    end_date: datetime

    @classmethod
    def for_conflict(
        cls,
        *,
        conflicting_occurrence_id: UUID,
        event_title: str,
        start_date: datetime,
        end_date: datetime,
    ) -> "ConflictDetectedError":
        """Build the error describing the first conflicting booking."""
        return cls(
            code=ErrorCode.CONFLICT_DETECTED,
            message=(
                f"Overlaps with '{event_title}' "
                f"({start_date.isoformat()} - {end_date.isoformat()})"
            ),
            resource_type="Registration",
            conflicting_field="time_window",
            conflicting_occurrence_id=conflicting_occurrence_id,
            event_title=event_title,
            start_date=start_date,
            end_date=end_date,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class CapacityExceededError(DomainError):
    """Not enough free seats on the occurrence.

    Attributes:
        occurrence_id: Occurrence that is full.
        requested: Seats requested.
        available: Seats still free when the request was evaluated.
    """

    occurrence_id: UUID
    requested: int
    available: int

    @classmethod
    def for_request(
        cls, occurrence_id: UUID, *, requested: int, available: int
    ) -> "CapacityExceededError":
        """Build the error for a request that does not fit."""
        return cls(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message=(
                f"Occurrence {occurrence_id} has {available} seat(s) left, "
                f"{requested} requested"
            ),
            occurrence_id=occurrence_id,
            requested=requested,
            available=available,
        )


class SeatDecrementBelowZeroError(Exception):
    """Releasing seats would drive an occurrence's counter below zero.

    Seat accounting is broken when this fires: more seats are being released
    than the occurrence ever had registered. Callers log it at CRITICAL and
    let it propagate.

    Attributes:
        occurrence_id: Occurrence whose counter would go negative.
        registered_seats: Counter value at the time of the attempt.
        requested: Seats the caller tried to release.
    """

    def __init__(
        self, occurrence_id: UUID, registered_seats: int, requested: int
    ) -> None:
        self.occurrence_id = occurrence_id
        self.registered_seats = registered_seats
        self.requested = requested
        super().__init__(
            f"Cannot release {requested} seat(s) from occurrence {occurrence_id}: "
            f"only {registered_seats} registered"
        )
