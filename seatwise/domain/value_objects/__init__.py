"""Domain value objects.

Available Value Objects:
    - RecurrencePattern: How a recurring event repeats
"""

from seatwise.domain.value_objects.recurrence_pattern import (
    RecurrencePattern,
    serialize_pattern,
)

__all__ = ["RecurrencePattern", "serialize_pattern"]
