"""Occurrence database model.

registered_seats is only ever moved by conditional UPDATE statements in
OccurrenceRepository; the check constraints are the last line of defence for
the seat invariant.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from seatwise.infrastructure.persistence.base import BaseMutableModel


class OccurrenceModel(BaseMutableModel):
    """Materialized time slot of an event.

    Indexes:
        - ix_occurrences_event_id: (event_id) cascade and listings
        - idx_occurrences_event_start: (event_id, start_date) future propagation

    Foreign Keys:
        - event_id: References events(id) ON DELETE CASCADE
    """

    __tablename__ = "occurrences"

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    organization_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)

    max_capacity: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="NULL = unlimited",
    )
    registered_seats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("registered_seats >= 0", name="ck_occurrences_seats_non_negative"),
        CheckConstraint(
            "max_capacity IS NULL OR registered_seats <= max_capacity",
            name="ck_occurrences_seats_within_capacity",
        ),
        Index("idx_occurrences_event_start", "event_id", "start_date"),
    )
