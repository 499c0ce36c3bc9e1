"""Domain protocols (ports).

Infrastructure adapters implement these structurally (no inheritance).
"""

from seatwise.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from seatwise.domain.protocols.cache_protocol import CacheProtocol
from seatwise.domain.protocols.clock_protocol import ClockProtocol
from seatwise.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from seatwise.domain.protocols.event_module_protocol import (
    EventModuleProtocol,
    EventReadModel,
    OccurrenceReadModel,
)
from seatwise.domain.protocols.event_repository import EventRepository
from seatwise.domain.protocols.logger_protocol import LoggerProtocol
from seatwise.domain.protocols.occurrence_repository import OccurrenceRepository
from seatwise.domain.protocols.pagination import CursorPage, PageRequest
from seatwise.domain.protocols.registration_repository import RegistrationRepository
from seatwise.domain.protocols.unit_of_work import (
    EventUnitOfWork,
    EventUnitOfWorkFactory,
    RegistrationUnitOfWork,
    RegistrationUnitOfWorkFactory,
    UnitOfWork,
)

__all__ = [
    "CacheKeysProtocol",
    "CacheProtocol",
    "ClockProtocol",
    "CursorPage",
    "EventBusProtocol",
    "EventHandler",
    "EventModuleProtocol",
    "EventReadModel",
    "EventRepository",
    "EventUnitOfWork",
    "EventUnitOfWorkFactory",
    "LoggerProtocol",
    "OccurrenceReadModel",
    "OccurrenceRepository",
    "PageRequest",
    "RegistrationRepository",
    "RegistrationUnitOfWork",
    "RegistrationUnitOfWorkFactory",
    "UnitOfWork",
]
