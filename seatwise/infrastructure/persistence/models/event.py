"""Event database model.

The recurrence pattern is stored as JSON in its canonical form (the same
form used to detect pattern changes), NULL for one-off events.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, DateTime, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from seatwise.infrastructure.persistence.base import BaseMutableModel


class EventModel(BaseMutableModel):
    """Event template of a tenant.

    Indexes:
        - ix_events_organization_id: (organization_id) tenant listings
        - idx_events_org_start: (organization_id, start_date) date filters
    """

    __tablename__ = "events"

    organization_id: Mapped[UUID] = mapped_column(
        Uuid,
        nullable=False,
        index=True,
        comment="Owning tenant",
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)

    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)

    recurrence_pattern: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
        comment="Canonical recurrence pattern (NULL = one-off)",
    )

    __table_args__ = (Index("idx_events_org_start", "organization_id", "start_date"),)
