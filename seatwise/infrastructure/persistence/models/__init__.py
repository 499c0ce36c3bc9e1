"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from seatwise.infrastructure.persistence.models.event import EventModel
from seatwise.infrastructure.persistence.models.occurrence import OccurrenceModel
from seatwise.infrastructure.persistence.models.registration import RegistrationModel

__all__ = ["EventModel", "OccurrenceModel", "RegistrationModel"]
