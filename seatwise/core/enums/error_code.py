"""Machine-readable error codes.

Codes follow the ENTITY_REASON naming convention and travel inside
DomainError instances returned through Result types.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Booking rule violations (ALREADY_REGISTERED, CAPACITY_EXCEEDED, ...)
- Cache failures (CACHE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_DATE_RANGE = "invalid_date_range"
    INVALID_RECURRENCE_PATTERN = "invalid_recurrence_pattern"
    INVALID_SEAT_COUNT = "invalid_seat_count"
    INVALID_CURSOR = "invalid_cursor"

    # Resource errors
    EVENT_NOT_FOUND = "event_not_found"
    OCCURRENCE_NOT_FOUND = "occurrence_not_found"
    REGISTRATION_NOT_FOUND = "registration_not_found"

    # Booking rule violations
    EVENT_CANCELLED = "event_cancelled"
    OCCURRENCE_IN_PAST = "occurrence_in_past"
    ALREADY_REGISTERED = "already_registered"
    CONFLICT_DETECTED = "conflict_detected"
    CAPACITY_EXCEEDED = "capacity_exceeded"

    # Cache failures
    CACHE_GET_FAILED = "cache_get_failed"
    CACHE_SET_FAILED = "cache_set_failed"
    CACHE_DELETE_FAILED = "cache_delete_failed"
