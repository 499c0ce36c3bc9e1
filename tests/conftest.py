"""Shared pytest fixtures.

Provides:
- A controllable clock (every handler reads "now" from it)
- Fresh in-memory storage with unit-of-work factories per test
- Mocked logger and event bus for handler unit tests

Entity builders live in tests/builders.py.
"""

import inspect
from functools import partial
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from seatwise.infrastructure.persistence.memory import (
    InMemoryEventUnitOfWork,
    InMemoryRegistrationUnitOfWork,
    InMemoryStore,
)
from tests.builders import FixedClock


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def org_id() -> UUID:
    return uuid7()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def event_uow_factory(store):
    return partial(InMemoryEventUnitOfWork, store)


@pytest.fixture
def registration_uow_factory(store):
    return partial(InMemoryRegistrationUnitOfWork, store)


@pytest.fixture
def mock_logger() -> MagicMock:
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def mock_event_bus() -> AsyncMock:
    return AsyncMock()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real storage adapters"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
