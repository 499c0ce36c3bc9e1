"""Unit tests for RecurrencePattern parsing and canonical serialization."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from seatwise.core.enums import ErrorCode
from seatwise.core.result import Failure, Success
from seatwise.domain.enums import Frequency, Weekday
from seatwise.domain.errors import InvalidRecurrencePatternError
from seatwise.domain.value_objects import RecurrencePattern, serialize_pattern


@pytest.mark.unit
class TestRecurrencePatternParse:
    """Test RecurrencePattern.parse() on untrusted input."""

    def test_none_means_one_off(self):
        result = RecurrencePattern.parse(None)

        assert isinstance(result, Success)
        assert result.value is None

    def test_existing_pattern_passes_through(self):
        pattern = RecurrencePattern(frequency=Frequency.DAILY)

        result = RecurrencePattern.parse(pattern)

        assert isinstance(result, Success)
        assert result.value is pattern

    def test_valid_mapping(self):
        result = RecurrencePattern.parse(
            {"frequency": "WEEKLY", "interval": 2, "by_day": ["MO", "WE"], "count": 6}
        )

        assert isinstance(result, Success)
        pattern = result.value
        assert pattern.frequency == Frequency.WEEKLY
        assert pattern.interval == 2
        assert pattern.by_day == (Weekday.MO, Weekday.WE)
        assert pattern.count == 6

    def test_collects_every_issue(self):
        # Arrange - three independent problems
        raw = {"frequency": "HOURLY", "interval": 0, "by_month_day": [32]}

        # Act
        result = RecurrencePattern.parse(raw)

        # Assert
        assert isinstance(result, Failure)
        error = result.error
        assert isinstance(error, InvalidRecurrencePatternError)
        assert error.code == ErrorCode.INVALID_RECURRENCE_PATTERN
        assert error.field == "recurrence_pattern"
        paths = {issue["path"] for issue in error.issues}
        assert "frequency" in paths
        assert "interval" in paths
        assert any(path.startswith("by_month_day") for path in paths)

    def test_empty_filter_list_rejected(self):
        result = RecurrencePattern.parse({"frequency": "WEEKLY", "by_day": []})

        assert isinstance(result, Failure)
        assert result.error.issues[0]["path"] == "by_day"

    def test_unknown_field_rejected(self):
        result = RecurrencePattern.parse({"frequency": "DAILY", "byday": ["MO"]})

        assert isinstance(result, Failure)

    def test_missing_frequency_rejected(self):
        result = RecurrencePattern.parse({"interval": 1})

        assert isinstance(result, Failure)
        assert result.error.issues[0]["path"] == "frequency"

    def test_naive_until_treated_as_utc(self):
        result = RecurrencePattern.parse(
            {"frequency": "DAILY", "until": datetime(2026, 2, 1, 12, 0)}
        )

        assert isinstance(result, Success)
        assert result.value.until == datetime(2026, 2, 1, 12, 0, tzinfo=UTC)

    def test_pattern_is_immutable(self):
        pattern = RecurrencePattern(frequency=Frequency.DAILY)

        with pytest.raises(PydanticValidationError):
            pattern.interval = 3


@pytest.mark.unit
class TestSerializePattern:
    """Test canonical JSON used for change detection."""

    def test_equal_patterns_serialize_identically(self):
        a = RecurrencePattern.parse({"frequency": "WEEKLY", "by_day": ["FR"]}).value
        b = RecurrencePattern(frequency=Frequency.WEEKLY, by_day=(Weekday.FR,))

        assert serialize_pattern(a) == serialize_pattern(b)

    def test_different_count_changes_serialization(self):
        a = RecurrencePattern(frequency=Frequency.DAILY, count=4)
        b = RecurrencePattern(frequency=Frequency.DAILY, count=2)

        assert serialize_pattern(a) != serialize_pattern(b)

    def test_none_serializes_to_none(self):
        assert serialize_pattern(None) is None


@pytest.mark.unit
def test_weekday_index_is_monday_first():
    assert Weekday.MO.index == 0
    assert Weekday.SU.index == 6
