"""Declarative base for the booking tables.

Events, occurrences and registrations share the same bookkeeping columns:
a domain-assigned UUIDv7 primary key, created/updated timestamps and a
nullable ``deleted_at`` for soft deletion. The generic ``Uuid`` type keeps
the schema portable between PostgreSQL and SQLite.

These models are persistence details; repositories map them to and from the
domain entities.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Registry and metadata shared by every table."""


class BaseMutableModel(BaseModel):
    """Columns common to all booking tables.

    Timestamps are written by the domain; the server defaults only cover
    rows inserted by hand.
    """

    __abstract__ = True

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"
