"""Recurrence pattern value object.

Describes how an event repeats, using the RFC 5545 rule vocabulary
(frequency, interval, by-weekday, by-month-day, by-month, until, count).
Validated with Pydantic so malformed input is rejected with one issue per
problem instead of failing on the first.

Usage:
    from seatwise.domain.value_objects import RecurrencePattern

    match RecurrencePattern.parse({"frequency": "WEEKLY", "by_day": ["MO"]}):
        case Success(value=pattern):
            ...
        case Failure(error=error):
            print(error.issues)
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator
from pydantic import ValidationError as PydanticValidationError

from seatwise.core.result import Failure, Result, Success
from seatwise.domain.enums import Frequency, Weekday
from seatwise.domain.errors import InvalidRecurrencePatternError

MonthDay = Annotated[int, Field(ge=1, le=31)]
Month = Annotated[int, Field(ge=1, le=12)]


class RecurrencePattern(BaseModel):
    """Immutable recurrence rule attached to a recurring event.

    Attributes:
        frequency: Base repetition unit.
        interval: Repeat every N units (default 1).
        by_day: Restrict to these weekdays.
        by_month_day: Restrict to these days of the month (1-31).
        by_month: Restrict to these months (1-12).
        until: Last instant a start date may fall on (inclusive).
        count: Maximum number of occurrences the rule produces.

    Note:
        ``model_dump_json()`` is the canonical serialization. Two patterns
        are "the same recurrence" exactly when their JSON is equal.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    frequency: Frequency
    interval: PositiveInt = 1
    by_day: tuple[Weekday, ...] | None = None
    by_month_day: tuple[MonthDay, ...] | None = None
    by_month: tuple[Month, ...] | None = None
    until: datetime | None = None
    count: PositiveInt | None = None

    @field_validator("until")
    @classmethod
    def ensure_utc(cls, v: datetime | None) -> datetime | None:
        """Treat naive datetimes as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @field_validator("by_day", "by_month_day", "by_month")
    @classmethod
    def reject_empty(cls, v: tuple[Any, ...] | None) -> tuple[Any, ...] | None:
        """An empty filter list would match nothing; require at least one entry."""
        if v is not None and len(v) == 0:
            raise ValueError("must contain at least one value when provided")
        return v

    @classmethod
    def parse(
        cls, raw: "Mapping[str, Any] | RecurrencePattern | None"
    ) -> Result["RecurrencePattern | None", InvalidRecurrencePatternError]:
        """Validate untrusted input into a pattern.

        Args:
            raw: Mapping of pattern fields, an existing pattern, or None
                (non-recurring).

        Returns:
            Success(pattern or None) if valid.
            Failure(InvalidRecurrencePatternError) listing every issue.
        """
        if raw is None or isinstance(raw, RecurrencePattern):
            return Success(value=raw)

        try:
            return Success(value=cls.model_validate(raw))
        except PydanticValidationError as e:
            issues = [
                {
                    "path": ".".join(str(part) for part in err["loc"]),
                    "message": err["msg"],
                }
                for err in e.errors()
            ]
            return Failure(error=InvalidRecurrencePatternError.from_issues(issues))


def serialize_pattern(pattern: RecurrencePattern | None) -> str | None:
    """Canonical JSON form of a pattern, used for change detection."""
    return pattern.model_dump_json() if pattern is not None else None
