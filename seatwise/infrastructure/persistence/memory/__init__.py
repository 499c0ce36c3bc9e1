"""In-memory storage backend.

Same repository and unit-of-work contracts as the SQLAlchemy backend, kept in
process memory. Used for embedding and for the scenario tests.
"""

from seatwise.infrastructure.persistence.memory.store import InMemoryStore
from seatwise.infrastructure.persistence.memory.unit_of_work import (
    InMemoryEventUnitOfWork,
    InMemoryRegistrationUnitOfWork,
)

__all__ = [
    "InMemoryEventUnitOfWork",
    "InMemoryRegistrationUnitOfWork",
    "InMemoryStore",
]
