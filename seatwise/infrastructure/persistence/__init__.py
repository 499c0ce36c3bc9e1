"""Persistence adapters (SQLAlchemy and in-memory)."""

from seatwise.infrastructure.persistence.database import Database
from seatwise.infrastructure.persistence.unit_of_work import (
    SqlAlchemyEventUnitOfWork,
    SqlAlchemyRegistrationUnitOfWork,
)

__all__ = [
    "Database",
    "SqlAlchemyEventUnitOfWork",
    "SqlAlchemyRegistrationUnitOfWork",
]
