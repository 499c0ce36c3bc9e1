"""Integration fixtures: real handlers wired to real adapters."""

import pytest

from seatwise.infrastructure.persistence import Database
from tests.integration.booking import Booking, build_booking


@pytest.fixture
def booking(event_uow_factory, registration_uow_factory, clock) -> Booking:
    return build_booking(event_uow_factory, registration_uow_factory, clock)


@pytest.fixture
async def database(tmp_path):
    """File-backed SQLite database with the schema created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path}/seatwise.db")
    await db.create_all()
    yield db
    await db.close()
