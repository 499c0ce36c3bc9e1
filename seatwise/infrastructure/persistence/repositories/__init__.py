"""SQLAlchemy repository implementations.

Repositories never commit; the unit of work that owns their session does.
"""

from seatwise.infrastructure.persistence.repositories.event_repository import (
    EventRepository,
)
from seatwise.infrastructure.persistence.repositories.occurrence_repository import (
    OccurrenceRepository,
)
from seatwise.infrastructure.persistence.repositories.registration_repository import (
    RegistrationRepository,
)

__all__ = ["EventRepository", "OccurrenceRepository", "RegistrationRepository"]
