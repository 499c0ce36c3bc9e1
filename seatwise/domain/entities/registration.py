"""Registration domain entity.

One user's seat claim on one Occurrence, with a snapshot of the occurrence
window and event title taken at booking time. The snapshot is not kept in
sync afterwards; overlap detection reads it directly.

Lifecycle:
    created ACTIVE → partially reduced (seat_count shrinks, stays ACTIVE)
    → CANCELLED (deleted_at set) → reactivated in place (same id)

Usage:
    registration = Registration.create_new(
        id=uuid7(),
        occurrence_id=occurrence.id,
        organization_id=org_id,
        user_id="user-123",
        seat_count=2,
        occurrence_start_date=occurrence.start_date,
        occurrence_end_date=occurrence.end_date,
        event_title=event.title,
        now=clock.now(),
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from seatwise.domain.enums import RegistrationStatus

MIN_SEATS_PER_REGISTRATION = 1
MAX_SEATS_PER_REGISTRATION = 10


def _validate_seat_count(seat_count: int) -> None:
    if not MIN_SEATS_PER_REGISTRATION <= seat_count <= MAX_SEATS_PER_REGISTRATION:
        raise ValueError(
            f"seat_count must be between {MIN_SEATS_PER_REGISTRATION} "
            f"and {MAX_SEATS_PER_REGISTRATION}"
        )


@dataclass(slots=True, kw_only=True)
class Registration:
    """User's booking on an occurrence.

    Attributes:
        id: Unique registration identifier.
        occurrence_id: Booked occurrence.
        organization_id: Tenant the booking was made in.
        user_id: Opaque user identifier from the identity system.
        seat_count: Seats held (1-10).
        status: ACTIVE or CANCELLED.
        occurrence_start_date: Snapshot of the occurrence start.
        occurrence_end_date: Snapshot of the occurrence end.
        event_title: Snapshot of the event title.
        deleted_at: Set while cancelled.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    occurrence_id: UUID
    organization_id: UUID
    user_id: str
    seat_count: int
    occurrence_start_date: datetime
    occurrence_end_date: datetime
    event_title: str
    status: RegistrationStatus = RegistrationStatus.ACTIVE
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate registration after initialization.

        Raises:
            ValueError: If user_id is blank or seat_count is out of range.
        """
        if not self.user_id or not self.user_id.strip():
            raise ValueError("user_id cannot be empty")
        _validate_seat_count(self.seat_count)

    @classmethod
    def create_new(
        cls,
        *,
        id: UUID,
        occurrence_id: UUID,
        organization_id: UUID,
        user_id: str,
        seat_count: int,
        occurrence_start_date: datetime,
        occurrence_end_date: datetime,
        event_title: str,
        now: datetime,
    ) -> "Registration":
        """Create an active registration stamped with ``now``."""
        return cls(
            id=id,
            occurrence_id=occurrence_id,
            organization_id=organization_id,
            user_id=user_id,
            seat_count=seat_count,
            occurrence_start_date=occurrence_start_date,
            occurrence_end_date=occurrence_end_date,
            event_title=event_title,
            status=RegistrationStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_active(self) -> bool:
        """True while the registration holds seats."""
        return self.status == RegistrationStatus.ACTIVE

    @property
    def is_deleted(self) -> bool:
        """True while cancelled (deleted_at set)."""
        return self.deleted_at is not None

    def cancel(self, now: datetime) -> None:
        """Cancel the registration, releasing all of its seats logically."""
        self.status = RegistrationStatus.CANCELLED
        self.deleted_at = now
        self.updated_at = now

    def reactivate(self, seat_count: int, now: datetime) -> None:
        """Bring a cancelled registration back with a new seat count.

        Args:
            seat_count: Seats requested by the new booking.
            now: Current time, becomes updated_at.

        Raises:
            ValueError: If seat_count is out of range.
        """
        _validate_seat_count(seat_count)
        self.status = RegistrationStatus.ACTIVE
        self.deleted_at = None
        self.seat_count = seat_count
        self.updated_at = now

    def update_seat_count(self, seat_count: int, now: datetime) -> None:
        """Change the seats held without changing status."""
        _validate_seat_count(seat_count)
        self.seat_count = seat_count
        self.updated_at = now

    def overlaps(self, start: datetime, end: datetime) -> bool:
        """Strict overlap with ``[start, end)``; touching windows do not overlap."""
        return self.occurrence_start_date < end and self.occurrence_end_date > start
