"""Unit tests for InMemoryEventBus and the domain event subscribers.

Tests cover:
- Subscribe/publish basic flow and exact-type dispatch
- Fail-open behavior (one failing handler doesn't break others)
- Structured logging of every domain event
- Tenant-scoped cache invalidation (and its own fail-open handling)
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from seatwise.core.enums import ErrorCode
from seatwise.core.result import Failure, Success
from seatwise.domain.events import (
    DomainEvent,
    EventCreated,
    EventDeleted,
    EventUpdated,
    RegistrationCancelled,
    RegistrationCreated,
    RegistrationReactivated,
)
from seatwise.infrastructure.cache import CacheKeys
from seatwise.infrastructure.errors import CacheError
from seatwise.infrastructure.events import InMemoryEventBus
from seatwise.infrastructure.events.handlers import (
    CacheInvalidationEventHandler,
    LoggingEventHandler,
)


def registration_created(org_id=None) -> RegistrationCreated:
    return RegistrationCreated(
        aggregate_id=uuid7(),
        organization_id=org_id or uuid7(),
        occurrence_id=uuid7(),
        user_id="user-1",
        seat_count=2,
    )


@pytest.mark.unit
class TestInMemoryEventBusBasicFlow:
    """Test basic subscribe/publish flow."""

    @pytest.mark.asyncio
    async def test_subscribe_and_publish_single_handler(self):
        # Arrange
        event_bus = InMemoryEventBus(logger=MagicMock())
        received = []

        async def handler(event: DomainEvent) -> None:
            received.append(event)

        event = registration_created()

        # Act
        event_bus.subscribe(RegistrationCreated, handler)
        await event_bus.publish(event)

        # Assert
        assert received == [event]

    @pytest.mark.asyncio
    async def test_dispatch_is_by_exact_type(self):
        event_bus = InMemoryEventBus(logger=MagicMock())
        handler = AsyncMock()
        event_bus.subscribe(RegistrationCancelled, handler)

        await event_bus.publish(registration_created())

        handler.assert_not_called()

    @pytest.mark.asyncio
    async def test_publish_with_no_handlers_registered(self):
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)

        await event_bus.publish(registration_created())

        mock_logger.debug.assert_not_called()


@pytest.mark.unit
class TestInMemoryEventBusFailOpen:
    """Test fail-open behavior."""

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        # Arrange
        mock_logger = MagicMock()
        event_bus = InMemoryEventBus(logger=mock_logger)
        calls = []

        async def failing_handler(event: DomainEvent) -> None:
            raise RuntimeError("boom")

        async def healthy_handler(event: DomainEvent) -> None:
            calls.append("healthy")

        event_bus.subscribe(RegistrationCreated, failing_handler)
        event_bus.subscribe(RegistrationCreated, healthy_handler)

        # Act - must not raise
        await event_bus.publish(registration_created())

        # Assert
        assert calls == ["healthy"]
        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args[0] == "event_handler_failed"
        assert kwargs["handler_name"] == "failing_handler"
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error_message"] == "boom"


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test structured logging of domain events."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "event", "message"),
        [
            (
                "handle_event_created",
                EventCreated(
                    aggregate_id=uuid7(),
                    organization_id=uuid7(),
                    title="Yoga",
                    is_recurring=True,
                    occurrence_count=4,
                ),
                "domain_event_created",
            ),
            (
                "handle_event_updated",
                EventUpdated(aggregate_id=uuid7(), organization_id=uuid7()),
                "domain_event_updated",
            ),
            (
                "handle_event_deleted",
                EventDeleted(aggregate_id=uuid7(), organization_id=uuid7()),
                "domain_event_deleted",
            ),
            (
                "handle_registration_created",
                registration_created(),
                "domain_registration_created",
            ),
            (
                "handle_registration_cancelled",
                RegistrationCancelled(
                    aggregate_id=uuid7(),
                    organization_id=uuid7(),
                    occurrence_id=uuid7(),
                    seats_released=2,
                ),
                "domain_registration_cancelled",
            ),
            (
                "handle_registration_reactivated",
                RegistrationReactivated(
                    aggregate_id=uuid7(),
                    organization_id=uuid7(),
                    occurrence_id=uuid7(),
                    seat_count=3,
                ),
                "domain_registration_reactivated",
            ),
        ],
    )
    async def test_logs_event_at_info(self, method, event, message):
        mock_logger = MagicMock()
        handler = LoggingEventHandler(logger=mock_logger)

        await getattr(handler, method)(event)

        mock_logger.info.assert_called_once()
        args, kwargs = mock_logger.info.call_args
        assert args[0] == message
        assert kwargs["event_id"] == str(event.event_id)
        assert kwargs["aggregate_id"] == str(event.aggregate_id)
        assert kwargs["organization_id"] == str(event.organization_id)


@pytest.mark.unit
class TestCacheInvalidationEventHandler:
    """Test tenant-scoped cache eviction."""

    @pytest.fixture
    def keys(self):
        return CacheKeys(prefix="seatwise")

    @pytest.mark.asyncio
    async def test_event_change_evicts_event_and_occurrence_listings(self, keys):
        cache = AsyncMock()
        cache.delete_pattern.return_value = Success(value=2)
        handler = CacheInvalidationEventHandler(cache, keys, MagicMock())
        org_id = uuid7()

        await handler.handle_event_changed(
            EventDeleted(aggregate_id=uuid7(), organization_id=org_id)
        )

        patterns = [c.args[0] for c in cache.delete_pattern.await_args_list]
        assert patterns == [keys.events_pattern(org_id), keys.occurrences_pattern(org_id)]

    @pytest.mark.asyncio
    async def test_registration_change_evicts_registration_and_occurrence_listings(
        self, keys
    ):
        cache = AsyncMock()
        cache.delete_pattern.return_value = Success(value=0)
        handler = CacheInvalidationEventHandler(cache, keys, MagicMock())
        org_id = uuid7()

        await handler.handle_registration_changed(registration_created(org_id))

        patterns = [c.args[0] for c in cache.delete_pattern.await_args_list]
        assert patterns == [
            keys.registrations_pattern(org_id),
            keys.occurrences_pattern(org_id),
        ]

    @pytest.mark.asyncio
    async def test_cache_failure_is_logged_not_raised(self, keys):
        cache = AsyncMock()
        cache.delete_pattern.return_value = Failure(
            error=CacheError(code=ErrorCode.CACHE_DELETE_FAILED, message="down")
        )
        mock_logger = MagicMock()
        handler = CacheInvalidationEventHandler(cache, keys, mock_logger)

        await handler.handle_registration_changed(registration_created())

        assert mock_logger.warning.call_count == 2
        assert mock_logger.warning.call_args.args[0] == "cache_invalidation_failed"
