"""Event lifecycle errors.

Failure cases returned by the event lifecycle handlers and by recurrence
pattern parsing.

Architecture:
- Domain layer errors (inherit from core error classes)
- Used in Result types (railway-oriented programming)
- Never raised; handlers return Failure(error)

Usage:
    from seatwise.domain.errors import EventNotFoundError
    from seatwise.core.result import Failure

    if event is None or event.is_deleted:
        return Failure(EventNotFoundError.for_event(event_id))
"""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from seatwise.core.enums import ErrorCode
from seatwise.core.errors import NotFoundError, ValidationError


@dataclass(frozen=True, slots=True, kw_only=True)
class EventNotFoundError(NotFoundError):
    """Event does not exist or has been soft-deleted.

    Attributes:
        event_id: ID that was looked up.
    """

    event_id: UUID

    @classmethod
    def for_event(cls, event_id: UUID) -> "EventNotFoundError":
        """Build the error for a missing event."""
        return cls(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"Event {event_id} not found",
            resource_type="Event",
            resource_id=str(event_id),
            event_id=event_id,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidRecurrencePatternError(ValidationError):
    """Recurrence pattern failed validation.

    Attributes:
        issues: One entry per validation problem, each with ``path`` (dotted
            field location) and ``message`` keys.
    """

    issues: tuple[dict[str, Any], ...] = ()

    @classmethod
    def from_issues(
        cls, issues: list[dict[str, Any]]
    ) -> "InvalidRecurrencePatternError":
        """Build the error from a list of validation issues."""
        return cls(
            code=ErrorCode.INVALID_RECURRENCE_PATTERN,
            message=f"Invalid recurrence pattern ({len(issues)} issue(s))",
            field="recurrence_pattern",
            issues=tuple(issues),
        )
