"""Unit tests for Settings, the dependency container and logging/clock adapters.

Tests cover:
- Settings defaults, env overrides and validation
- Event bus wiring (subscribers evict the tenant's cached listings)
- Unsupported event bus type
- Handler factories build handlers on the configured database
- ConsoleAdapter JSON output and level filtering
- SystemClock returns aware UTC datetimes
"""

import json
from datetime import UTC

import pytest
from pydantic import ValidationError as PydanticValidationError
from uuid_extensions import uuid7

from seatwise.application.commands.handlers import (
    CancelRegistrationHandler,
    CreateEventHandler,
)
from seatwise.application.queries.handlers import GetRegistrationsHandler
from seatwise.core import container
from seatwise.core.config import Settings, get_settings
from seatwise.core.container import infrastructure
from seatwise.core.enums import Environment
from seatwise.domain.events import EventCreated
from seatwise.infrastructure.cache import MemoryCache
from seatwise.infrastructure.clock.system_clock import SystemClock
from seatwise.infrastructure.logging.console_adapter import ConsoleAdapter

_CACHED_FACTORIES = (
    get_settings,
    container.get_event_bus,
    infrastructure.get_logger,
    infrastructure.get_clock,
    infrastructure.get_database,
    infrastructure.get_cache,
    infrastructure.get_cache_keys,
    infrastructure.get_event_uow_factory,
    infrastructure.get_registration_uow_factory,
)


@pytest.fixture
def fresh_container(monkeypatch, tmp_path):
    """Point the container at a throwaway database and clear singletons."""
    monkeypatch.setenv("SEATWISE_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path}/app.db")
    monkeypatch.delenv("SEATWISE_REDIS_URL", raising=False)
    for factory in _CACHED_FACTORIES:
        factory.cache_clear()
    yield
    for factory in _CACHED_FACTORIES:
        factory.cache_clear()


@pytest.mark.unit
class TestSettings:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SEATWISE_REDIS_URL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.redis_url is None
        assert settings.registration_cache_ttl_seconds == 30
        assert settings.occurrence_cache_ttl_seconds == 120
        assert settings.event_cache_ttl_seconds == 120
        assert settings.cache_key_prefix == "seatwise"
        assert settings.use_json_logs is False

    def test_env_overrides_and_normalizes(self, monkeypatch):
        monkeypatch.setenv("SEATWISE_LOG_LEVEL", "debug")
        monkeypatch.setenv("SEATWISE_ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.use_json_logs is True
        assert settings.is_development is False

    def test_rejects_unknown_log_level(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_rejects_non_positive_ttl(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, registration_cache_ttl_seconds=0)


@pytest.mark.unit
class TestContainer:
    """Test container wiring."""

    @pytest.mark.asyncio
    async def test_event_bus_evicts_tenant_listings(self, fresh_container):
        # Arrange
        cache = container.get_cache()
        keys = container.get_cache_keys()
        org_id = uuid7()
        other_org = uuid7()
        await cache.set_json(keys.event_list(org_id, "d"), {"items": []})
        await cache.set_json(keys.event_list(other_org, "d"), {"items": []})

        # Act
        await container.get_event_bus().publish(
            EventCreated(
                aggregate_id=uuid7(),
                organization_id=org_id,
                title="Yoga",
                is_recurring=False,
                occurrence_count=0,
            )
        )

        # Assert
        assert (await cache.get_json(keys.event_list(org_id, "d"))).value is None
        assert (await cache.get_json(keys.event_list(other_org, "d"))).value is not None

    def test_memory_cache_without_redis_url(self, fresh_container):
        assert isinstance(container.get_cache(), MemoryCache)

    def test_singletons(self, fresh_container):
        assert container.get_event_bus() is container.get_event_bus()
        assert container.get_database() is container.get_database()

    def test_unsupported_event_bus(self, fresh_container, monkeypatch):
        monkeypatch.setenv("SEATWISE_EVENT_BUS_TYPE", "kafka")
        get_settings.cache_clear()

        with pytest.raises(ValueError, match="kafka"):
            container.get_event_bus()

    def test_handler_factories(self, fresh_container):
        assert isinstance(container.get_create_event_handler(), CreateEventHandler)
        assert isinstance(
            container.get_cancel_registration_handler(), CancelRegistrationHandler
        )
        assert isinstance(
            container.get_get_registrations_handler(), GetRegistrationsHandler
        )


@pytest.mark.unit
class TestConsoleAdapter:
    """Test structlog console adapter."""

    def test_json_output_with_context(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="INFO")

        logger.bind(request="r-1").info("registration_created", seat_count=2)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "registration_created"
        assert record["seat_count"] == 2
        assert record["request"] == "r-1"
        assert record["level"] == "info"

    def test_level_filtering(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.info("quiet")
        logger.warning("loud")

        out = capsys.readouterr().out
        assert "quiet" not in out
        assert "loud" in out

    def test_error_details(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="INFO")

        logger.critical("seat_accounting_invariant_broken", error=ValueError("bad"))

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["error_type"] == "ValueError"
        assert record["error_message"] == "bad"


@pytest.mark.unit
def test_system_clock_is_utc():
    now = SystemClock().now()

    assert now.tzinfo is not None
    assert now.utcoffset() == UTC.utcoffset(now)
