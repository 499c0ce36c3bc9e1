"""Unit tests for Event, Occurrence and Registration entities.

Tests cover:
- Construction-time validation (ValueError)
- Event partial updates and soft delete
- Occurrence seat counter (increment/decrement, capacity, unlimited)
- Propagated event changes (capacity clamp, zero capacity, duration)
- Registration lifecycle (cancel, reactivate, partial reduction, overlap)
"""

from datetime import timedelta

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from uuid_extensions import uuid7

from seatwise.core.result import Failure, Success
from seatwise.domain.entities import Event, OccurrenceChanges, Registration
from seatwise.domain.enums import Frequency, RegistrationStatus
from seatwise.domain.errors import CapacityExceededError, SeatDecrementBelowZeroError
from seatwise.domain.value_objects import RecurrencePattern
from tests.builders import NOW, make_event, make_occurrence, make_registration


@pytest.mark.unit
class TestEventValidation:
    """Test Event construction rules."""

    def test_rejects_blank_title(self):
        with pytest.raises(ValueError, match="title"):
            make_event(title="   ")

    def test_rejects_end_before_start(self):
        with pytest.raises(ValueError, match="end_date"):
            Event(
                id=uuid7(),
                organization_id=uuid7(),
                title="Yoga",
                start_date=NOW,
                end_date=NOW - timedelta(minutes=1),
                max_capacity=5,
            )

    def test_rejects_negative_capacity(self):
        with pytest.raises(ValueError, match="max_capacity"):
            make_event(max_capacity=-1)

    def test_zero_length_event_is_allowed(self):
        event = make_event(duration=timedelta(0))

        assert event.duration == timedelta(0)

    def test_is_recurring_follows_pattern(self):
        one_off = make_event()
        weekly = make_event(
            recurrence_pattern=RecurrencePattern(frequency=Frequency.WEEKLY)
        )

        assert one_off.is_recurring is False
        assert weekly.is_recurring is True


@pytest.mark.unit
class TestEventUpdate:
    """Test Event.update() partial semantics."""

    def test_only_provided_fields_change(self):
        # Arrange
        event = make_event(location="Studio A")
        later = NOW + timedelta(minutes=5)

        # Act
        event.update(now=later, title="Evening Yoga")

        # Assert
        assert event.title == "Evening Yoga"
        assert event.location == "Studio A"
        assert event.max_capacity == 10
        assert event.updated_at == later

    def test_updated_at_advances_even_without_changes(self):
        event = make_event()
        later = NOW + timedelta(hours=2)

        event.update(now=later)

        assert event.updated_at == later

    def test_remove_recurrence_clears_pattern(self):
        event = make_event(
            recurrence_pattern=RecurrencePattern(frequency=Frequency.DAILY, count=3)
        )

        event.update(now=NOW, remove_recurrence=True)

        assert event.recurrence_pattern is None
        assert event.is_recurring is False

    def test_rejects_inverted_range_without_mutating(self):
        event = make_event()
        original_end = event.end_date

        with pytest.raises(ValueError):
            event.update(now=NOW, end_date=event.start_date - timedelta(hours=1))

        assert event.end_date == original_end

    def test_soft_delete_sets_timestamps(self):
        event = make_event()

        event.soft_delete(NOW)

        assert event.is_deleted is True
        assert event.deleted_at == NOW
        assert event.updated_at == NOW


@pytest.mark.unit
class TestOccurrenceSeats:
    """Test the occurrence seat counter."""

    def test_increment_within_capacity(self):
        occurrence = make_occurrence(make_event(), max_capacity=5)

        result = occurrence.increment_registered_seats(3, NOW)

        assert isinstance(result, Success)
        assert occurrence.registered_seats == 3
        assert occurrence.available_seats == 2

    def test_increment_beyond_capacity_fails_without_change(self):
        occurrence = make_occurrence(make_event(), max_capacity=5, registered_seats=4)

        result = occurrence.increment_registered_seats(2, NOW)

        assert isinstance(result, Failure)
        assert isinstance(result.error, CapacityExceededError)
        assert result.error.requested == 2
        assert result.error.available == 1
        assert occurrence.registered_seats == 4

    def test_unlimited_capacity_never_fills(self):
        occurrence = make_occurrence(make_event(), max_capacity=None, registered_seats=500)

        result = occurrence.increment_registered_seats(10, NOW)

        assert isinstance(result, Success)
        assert occurrence.available_seats is None

    def test_zero_capacity_rejects_any_booking(self):
        occurrence = make_occurrence(make_event(), max_capacity=0)

        result = occurrence.increment_registered_seats(1, NOW)

        assert isinstance(result, Failure)

    def test_decrement_below_zero_raises(self):
        occurrence = make_occurrence(make_event(), max_capacity=5, registered_seats=1)

        with pytest.raises(SeatDecrementBelowZeroError) as exc_info:
            occurrence.decrement_registered_seats(2, NOW)

        assert exc_info.value.registered_seats == 1
        assert exc_info.value.requested == 2
        assert occurrence.registered_seats == 1

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_counts_rejected(self, count):
        occurrence = make_occurrence(make_event(), max_capacity=5, registered_seats=2)

        with pytest.raises(ValueError):
            occurrence.increment_registered_seats(count, NOW)
        with pytest.raises(ValueError):
            occurrence.decrement_registered_seats(count, NOW)

    def test_constructor_enforces_counter_bounds(self):
        event = make_event()

        with pytest.raises(ValueError):
            make_occurrence(event, max_capacity=2, registered_seats=3)
        with pytest.raises(ValueError):
            make_occurrence(event, registered_seats=-1)


@pytest.mark.unit
class TestOccurrenceApplyEventChanges:
    """Test propagation of event edits onto an occurrence."""

    def test_copies_title_and_location(self):
        occurrence = make_occurrence(make_event(), max_capacity=5)

        occurrence.apply_event_changes(
            OccurrenceChanges(title="Power Yoga", location="Studio B"), NOW
        )

        assert occurrence.title == "Power Yoga"
        assert occurrence.location == "Studio B"
        assert occurrence.effective_title("Morning Yoga") == "Power Yoga"

    def test_capacity_never_drops_below_registered_seats(self):
        occurrence = make_occurrence(make_event(), max_capacity=10, registered_seats=6)

        occurrence.apply_event_changes(OccurrenceChanges(max_capacity=4), NOW)

        assert occurrence.max_capacity == 6

    def test_zero_capacity_lifts_the_limit(self):
        occurrence = make_occurrence(make_event(), max_capacity=10, registered_seats=6)

        occurrence.apply_event_changes(OccurrenceChanges(max_capacity=0), NOW)

        assert occurrence.max_capacity is None
        assert occurrence.available_seats is None

    def test_duration_moves_end_date_only(self):
        occurrence = make_occurrence(make_event())
        start = occurrence.start_date

        occurrence.apply_event_changes(
            OccurrenceChanges(duration=timedelta(minutes=90)), NOW
        )

        assert occurrence.start_date == start
        assert occurrence.end_date == start + timedelta(minutes=90)

    def test_empty_changes(self):
        assert OccurrenceChanges().is_empty() is True
        assert OccurrenceChanges(location="Hall").is_empty() is False


@pytest.mark.unit
class TestRegistrationLifecycle:
    """Test Registration state transitions."""

    def test_create_new_is_active(self):
        registration = make_registration(make_occurrence(make_event()), seat_count=2)

        assert registration.status == RegistrationStatus.ACTIVE
        assert registration.is_active is True
        assert registration.deleted_at is None
        assert registration.created_at == NOW

    @pytest.mark.parametrize("seat_count", [0, 11, -3])
    def test_seat_count_out_of_range(self, seat_count):
        with pytest.raises(ValueError, match="seat_count"):
            make_registration(make_occurrence(make_event()), seat_count=seat_count)

    def test_rejects_blank_user(self):
        with pytest.raises(ValueError, match="user_id"):
            make_registration(make_occurrence(make_event()), user_id=" ")

    def test_cancel_then_reactivate_keeps_identity(self):
        # Arrange
        registration = make_registration(make_occurrence(make_event()), seat_count=2)
        original_id = registration.id
        later = NOW + timedelta(minutes=10)

        # Act
        registration.cancel(NOW)
        assert registration.is_deleted is True
        registration.reactivate(5, later)

        # Assert
        assert registration.id == original_id
        assert registration.status == RegistrationStatus.ACTIVE
        assert registration.deleted_at is None
        assert registration.seat_count == 5
        assert registration.updated_at == later

    def test_update_seat_count_keeps_status(self):
        registration = make_registration(make_occurrence(make_event()), seat_count=7)

        registration.update_seat_count(5, NOW)

        assert registration.seat_count == 5
        assert registration.is_active is True

    def test_touching_windows_do_not_overlap(self):
        occurrence = make_occurrence(make_event())
        registration = make_registration(occurrence)

        assert registration.overlaps(occurrence.end_date, occurrence.end_date + timedelta(hours=1)) is False
        assert registration.overlaps(occurrence.start_date - timedelta(hours=1), occurrence.start_date) is False
        assert registration.overlaps(
            occurrence.start_date + timedelta(minutes=30),
            occurrence.end_date + timedelta(minutes=30),
        ) is True


@pytest.mark.unit
class TestRegistrationDirectConstruction:
    """Registration built without create_new keeps explicit fields."""

    def test_explicit_cancelled_status(self):
        registration = Registration(
            id=uuid7(),
            occurrence_id=uuid7(),
            organization_id=uuid7(),
            user_id="user-9",
            seat_count=1,
            occurrence_start_date=NOW,
            occurrence_end_date=NOW + timedelta(hours=1),
            event_title="Pilates",
            status=RegistrationStatus.CANCELLED,
            deleted_at=NOW,
        )

        assert registration.is_active is False
        assert registration.is_deleted is True


@pytest.mark.unit
class TestOccurrenceSeatProperties:
    """The counter stays within [0, max_capacity] under any operation sequence."""

    @settings(max_examples=100, deadline=None)
    @given(
        capacity=st.integers(min_value=0, max_value=30),
        operations=st.lists(
            st.tuples(st.booleans(), st.integers(min_value=1, max_value=10)),
            max_size=40,
        ),
    )
    def test_counter_stays_in_bounds(self, capacity, operations):
        occurrence = make_occurrence(make_event(), max_capacity=capacity)

        for reserve, count in operations:
            before = occurrence.registered_seats
            if reserve:
                result = occurrence.increment_registered_seats(count, NOW)
                if isinstance(result, Failure):
                    assert occurrence.registered_seats == before
                    assert before + count > capacity
            elif count <= before:
                occurrence.decrement_registered_seats(count, NOW)
            else:
                with pytest.raises(SeatDecrementBelowZeroError):
                    occurrence.decrement_registered_seats(count, NOW)
                assert occurrence.registered_seats == before

            assert 0 <= occurrence.registered_seats <= capacity
