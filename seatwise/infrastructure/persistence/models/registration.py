"""Registration database model.

occurrence_id has no foreign key: registrations belong to the
registration module and must survive regeneration of an event's occurrences.

A partial unique index allows at most one ACTIVE registration per
(user_id, occurrence_id); cancelled rows are kept for reactivation.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Index, Integer, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from seatwise.infrastructure.persistence.base import BaseMutableModel

_ACTIVE = text("status = 'active'")


class RegistrationModel(BaseMutableModel):
    """User booking with an occurrence snapshot.

    Indexes:
        - uq_registrations_active_user_occurrence: unique (user_id, occurrence_id)
          WHERE status = 'active'
        - idx_registrations_user_window: (user_id, occurrence_start_date,
          occurrence_end_date) overlap detection
        - idx_registrations_user_org: (user_id, organization_id) listings
    """

    __tablename__ = "registrations"

    occurrence_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    organization_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)

    seat_count: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")

    occurrence_start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    occurrence_end_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    event_title: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        Index(
            "uq_registrations_active_user_occurrence",
            "user_id",
            "occurrence_id",
            unique=True,
            postgresql_where=_ACTIVE,
            sqlite_where=_ACTIVE,
        ),
        Index(
            "idx_registrations_user_window",
            "user_id",
            "occurrence_start_date",
            "occurrence_end_date",
        ),
        Index("idx_registrations_user_org", "user_id", "organization_id"),
    )
