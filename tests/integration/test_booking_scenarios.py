"""End-to-end booking scenarios over in-memory storage.

Every handler runs for real against one store; the event bus evicts cached
listings after each write.
"""

import asyncio
from datetime import timedelta

import pytest
from uuid_extensions import uuid7

from seatwise.application.commands import (
    CancelRegistration,
    CreateEvent,
    DeleteEvent,
    RegisterForOccurrence,
    UpdateEvent,
)
from seatwise.application.queries import GetOccurrences, GetRegistrations
from seatwise.core.result import Failure, Success
from seatwise.domain.errors import (
    CapacityExceededError,
    ConflictDetectedError,
    EventCancelledError,
    OccurrenceNotFoundError,
)
from tests.builders import NOW


async def create_event(booking, org_id, *, max_capacity=10, pattern=None, start=None):
    start = start or NOW + timedelta(hours=1)
    result = await booking.create_event.handle(
        CreateEvent(
            organization_id=org_id,
            title="Morning Yoga",
            start_date=start,
            end_date=start + timedelta(hours=1),
            max_capacity=max_capacity,
            recurrence_pattern=pattern,
        )
    )
    assert isinstance(result, Success)
    return result.value.event_id


async def list_occurrences(booking, org_id, event_id):
    result = await booking.get_occurrences.handle(
        GetOccurrences(event_id=event_id, organization_id=org_id, first=100)
    )
    assert isinstance(result, Success)
    return sorted(result.value.items, key=lambda o: o.start_date)


def book(occurrence, user_id, seat_count=1, organization_id=None):
    return RegisterForOccurrence(
        occurrence_id=occurrence.id,
        user_id=user_id,
        seat_count=seat_count,
        organization_id=organization_id or occurrence.organization_id,
    )


@pytest.mark.integration
class TestBookingScenarios:
    """Booking workflows end to end."""

    @pytest.mark.asyncio
    async def test_concurrent_bookings_for_last_seat(self, booking, org_id):
        # Arrange
        event_id = await create_event(
            booking, org_id, max_capacity=1, pattern={"frequency": "DAILY", "count": 1}
        )
        (occurrence,) = await list_occurrences(booking, org_id, event_id)

        # Act - five users race for one seat
        results = await asyncio.gather(
            *(booking.register.handle(book(occurrence, f"user-{i}")) for i in range(5))
        )

        # Assert
        successes = [r for r in results if isinstance(r, Success)]
        failures = [r for r in results if isinstance(r, Failure)]
        assert len(successes) == 1
        assert len(failures) == 4
        assert all(isinstance(f.error, CapacityExceededError) for f in failures)
        (occurrence,) = await list_occurrences(booking, org_id, event_id)
        assert occurrence.registered_seats == 1

    @pytest.mark.asyncio
    async def test_back_to_back_occurrences(self, booking, org_id):
        first_id = await create_event(
            booking, org_id, pattern={"frequency": "DAILY", "count": 1}
        )
        second_id = await create_event(
            booking,
            org_id,
            pattern={"frequency": "DAILY", "count": 1},
            start=NOW + timedelta(hours=2),
        )
        (first,) = await list_occurrences(booking, org_id, first_id)
        (second,) = await list_occurrences(booking, org_id, second_id)

        assert isinstance(await booking.register.handle(book(first, "alice")), Success)
        assert isinstance(await booking.register.handle(book(second, "alice")), Success)

    @pytest.mark.asyncio
    async def test_overlap_detected_across_organizations(self, booking):
        org_a, org_b = uuid7(), uuid7()
        event_a = await create_event(booking, org_a, pattern={"frequency": "DAILY", "count": 1})
        event_b = await create_event(
            booking,
            org_b,
            pattern={"frequency": "DAILY", "count": 1},
            start=NOW + timedelta(hours=1, minutes=30),
        )
        (slot_a,) = await list_occurrences(booking, org_a, event_a)
        (slot_b,) = await list_occurrences(booking, org_b, event_b)
        await booking.register.handle(book(slot_a, "alice"))

        result = await booking.register.handle(book(slot_b, "alice"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictDetectedError)
        assert result.error.conflicting_occurrence_id == slot_a.id

    @pytest.mark.asyncio
    async def test_cancel_then_reactivate_keeps_registration_id(self, booking, org_id):
        event_id = await create_event(booking, org_id, pattern={"frequency": "DAILY", "count": 1})
        (slot,) = await list_occurrences(booking, org_id, event_id)

        created = await booking.register.handle(book(slot, "alice", seat_count=2))
        await booking.cancel.handle(
            CancelRegistration(registration_id=created.value.registration_id)
        )
        reactivated = await booking.register.handle(book(slot, "alice", seat_count=5))

        assert reactivated.value.registration_id == created.value.registration_id
        assert reactivated.value.reactivated is True
        (slot,) = await list_occurrences(booking, org_id, event_id)
        assert slot.registered_seats == 5

    @pytest.mark.asyncio
    async def test_partial_cancellation_releases_difference(self, booking, org_id):
        event_id = await create_event(booking, org_id, pattern={"frequency": "DAILY", "count": 1})
        (slot,) = await list_occurrences(booking, org_id, event_id)
        created = await booking.register.handle(book(slot, "alice", seat_count=7))

        result = await booking.cancel.handle(
            CancelRegistration(
                registration_id=created.value.registration_id, new_seat_count=5
            )
        )

        assert result.value.seats_released == 2
        (slot,) = await list_occurrences(booking, org_id, event_id)
        assert slot.registered_seats == 5

    @pytest.mark.asyncio
    async def test_pattern_change_regenerates_occurrences(self, booking, org_id):
        event_id = await create_event(
            booking, org_id, pattern={"frequency": "WEEKLY", "count": 4}
        )
        assert len(await list_occurrences(booking, org_id, event_id)) == 4

        result = await booking.update_event.handle(
            UpdateEvent(
                event_id=event_id,
                recurrence_pattern={"frequency": "WEEKLY", "count": 2},
            )
        )

        assert result.value.recurrence_changed is True
        assert len(await list_occurrences(booking, org_id, event_id)) == 2

    @pytest.mark.asyncio
    async def test_registration_listing_refreshes_after_booking(self, booking, org_id):
        event_id = await create_event(
            booking, org_id, pattern={"frequency": "DAILY", "count": 2}
        )
        first, second = await list_occurrences(booking, org_id, event_id)
        query = GetRegistrations(user_id="alice", organization_id=org_id)
        await booking.register.handle(book(first, "alice"))
        assert (await booking.get_registrations.handle(query)).value.total_count == 1

        await booking.register.handle(book(second, "alice"))

        assert (await booking.get_registrations.handle(query)).value.total_count == 2

    @pytest.mark.asyncio
    async def test_deleted_event_cannot_be_booked(self, booking, org_id):
        event_id = await create_event(booking, org_id, pattern={"frequency": "DAILY", "count": 1})
        (slot,) = await list_occurrences(booking, org_id, event_id)

        await booking.delete_event.handle(DeleteEvent(event_id=event_id))
        result = await booking.register.handle(book(slot, "alice"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, EventCancelledError)
        assert await list_occurrences(booking, org_id, event_id) == []

    @pytest.mark.asyncio
    async def test_other_tenant_can_neither_list_nor_book(self, booking, org_id):
        event_id = await create_event(booking, org_id, pattern={"frequency": "DAILY", "count": 1})
        (slot,) = await list_occurrences(booking, org_id, event_id)
        intruder = uuid7()

        listing = await list_occurrences(booking, intruder, event_id)
        result = await booking.register.handle(
            book(slot, "mallory", organization_id=intruder)
        )

        assert listing == []
        assert isinstance(result, Failure)
        assert isinstance(result.error, OccurrenceNotFoundError)
        (slot,) = await list_occurrences(booking, org_id, event_id)
        assert slot.registered_seats == 0

    @pytest.mark.asyncio
    async def test_zero_capacity_event_books_without_limit(self, booking, org_id):
        event_id = await create_event(
            booking, org_id, max_capacity=0, pattern={"frequency": "DAILY", "count": 1}
        )
        (slot,) = await list_occurrences(booking, org_id, event_id)

        results = [
            await booking.register.handle(book(slot, f"user-{i}", seat_count=10))
            for i in range(3)
        ]

        assert slot.max_capacity is None
        assert all(isinstance(r, Success) for r in results)
        (slot,) = await list_occurrences(booking, org_id, event_id)
        assert slot.registered_seats == 30
