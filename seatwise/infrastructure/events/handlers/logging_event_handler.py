"""Logging event handler for domain events.

Structured INFO logs for every booking domain event, so the event stream is
observable without a broker.

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - aggregate_id / organization_id: what the event concerns
    - event-specific counts (seats, occurrences)
"""

from seatwise.domain.events import (
    EventCreated,
    EventDeleted,
    EventUpdated,
    RegistrationCancelled,
    RegistrationCreated,
    RegistrationReactivated,
)
from seatwise.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> event_bus.subscribe(EventCreated, handler.handle_event_created)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    # =========================================================================
    # Event Lifecycle
    # =========================================================================

    async def handle_event_created(self, event: EventCreated) -> None:
        """Log event creation (INFO level)."""
        self._logger.info(
            "domain_event_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            aggregate_id=str(event.aggregate_id),
            organization_id=str(event.organization_id),
            is_recurring=event.is_recurring,
            occurrence_count=event.occurrence_count,
        )

    async def handle_event_updated(self, event: EventUpdated) -> None:
        """Log event update (INFO level)."""
        self._logger.info(
            "domain_event_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            aggregate_id=str(event.aggregate_id),
            organization_id=str(event.organization_id),
            recurrence_changed=event.recurrence_changed,
            occurrences_propagated=event.occurrences_propagated,
        )

    async def handle_event_deleted(self, event: EventDeleted) -> None:
        """Log event deletion (INFO level)."""
        self._logger.info(
            "domain_event_deleted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            aggregate_id=str(event.aggregate_id),
            organization_id=str(event.organization_id),
            occurrences_deleted=event.occurrences_deleted,
        )

    # =========================================================================
    # Registration
    # =========================================================================

    async def handle_registration_created(self, event: RegistrationCreated) -> None:
        """Log new booking (INFO level)."""
        self._logger.info(
            "domain_registration_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            aggregate_id=str(event.aggregate_id),
            organization_id=str(event.organization_id),
            occurrence_id=str(event.occurrence_id),
            seat_count=event.seat_count,
        )

    async def handle_registration_cancelled(self, event: RegistrationCancelled) -> None:
        """Log full or partial cancellation (INFO level)."""
        self._logger.info(
            "domain_registration_cancelled",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            aggregate_id=str(event.aggregate_id),
            organization_id=str(event.organization_id),
            occurrence_id=str(event.occurrence_id),
            seats_released=event.seats_released,
            remaining_seat_count=event.remaining_seat_count,
        )

    async def handle_registration_reactivated(
        self, event: RegistrationReactivated
    ) -> None:
        """Log reactivation (INFO level)."""
        self._logger.info(
            "domain_registration_reactivated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            aggregate_id=str(event.aggregate_id),
            organization_id=str(event.organization_id),
            occurrence_id=str(event.occurrence_id),
            seat_count=event.seat_count,
        )
