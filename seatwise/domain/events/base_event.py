"""Base domain event.

Domain events record something that already happened to an aggregate
(EventCreated, RegistrationCancelled). Handlers publish them only after
their unit of work commits, so a subscriber never sees a rolled-back change.

Every event names the aggregate it concerns and the tenant that owns it;
subscribers scope their work (cache keys, log context) by organization.

    @dataclass(frozen=True, kw_only=True, slots=True)
    class RegistrationCancelled(DomainEvent):
        seats_released: int

    RegistrationCancelled(
        aggregate_id=registration.id,
        organization_id=registration.organization_id,
        seats_released=2,
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        aggregate_id: Event or registration the change happened to.
        organization_id: Tenant owning the aggregate.
        event_id: Identifier of this event instance.
        occurred_at: Publication timestamp (UTC).
    """

    aggregate_id: UUID
    organization_id: UUID
    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
