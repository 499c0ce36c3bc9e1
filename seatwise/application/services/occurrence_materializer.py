"""Recurrence materializer.

Turns a RecurrencePattern plus an anchor start into the concrete start
dates of an event's occurrences, using dateutil's RFC 5545 rule engine.

Output is hard-capped at MAX_OCCURRENCES (roughly six months of a daily
event) whatever the pattern says, so an open-ended rule can never
materialize an unbounded batch.

Usage:
    dates = materialize_occurrence_dates(event.recurrence_pattern, event.start_date)
    occurrences = build_occurrences(event, now=clock.now())
"""

from datetime import UTC, datetime
from itertools import islice, takewhile

from dateutil.rrule import DAILY, FR, MO, MONTHLY, SA, SU, TH, TU, WE, WEEKLY, YEARLY, rrule
from uuid_extensions import uuid7

from seatwise.domain.entities import Event, Occurrence
from seatwise.domain.enums import Frequency, Weekday
from seatwise.domain.value_objects import RecurrencePattern

MAX_OCCURRENCES = 183

_FREQUENCIES = {
    Frequency.DAILY: DAILY,
    Frequency.WEEKLY: WEEKLY,
    Frequency.MONTHLY: MONTHLY,
    Frequency.YEARLY: YEARLY,
}

_WEEKDAYS = {
    Weekday.MO: MO,
    Weekday.TU: TU,
    Weekday.WE: WE,
    Weekday.TH: TH,
    Weekday.FR: FR,
    Weekday.SA: SA,
    Weekday.SU: SU,
}


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def materialize_occurrence_dates(
    pattern: RecurrencePattern, anchor_start: datetime
) -> list[datetime]:
    """Expand a recurrence pattern into occurrence start dates.

    Args:
        pattern: Validated recurrence pattern.
        anchor_start: First instant the rule may produce (the event's
            start date). Naive values are treated as UTC. Sub-second
            precision is dropped by the rule engine.

    Returns:
        At most MAX_OCCURRENCES start dates, ascending. The first one is the
        earliest rule-satisfying instant at or after ``anchor_start``.
        Empty if ``until`` precedes the anchor.

    Example:
        >>> pattern = RecurrencePattern(frequency=Frequency.DAILY, count=3)
        >>> materialize_occurrence_dates(pattern, datetime(2026, 1, 1, 9, tzinfo=UTC))
        [2026-01-01 09:00, 2026-01-02 09:00, 2026-01-03 09:00]
    """
    anchor = _as_utc(anchor_start)
    until = _as_utc(pattern.until) if pattern.until is not None else None

    # dateutil rejects count + until together; apply until as a cutoff instead
    rule = rrule(
        _FREQUENCIES[pattern.frequency],
        dtstart=anchor,
        interval=pattern.interval,
        byweekday=[_WEEKDAYS[d] for d in pattern.by_day] if pattern.by_day else None,
        bymonthday=list(pattern.by_month_day) if pattern.by_month_day else None,
        bymonth=list(pattern.by_month) if pattern.by_month else None,
        count=pattern.count,
        until=until if pattern.count is None else None,
    )

    dates = iter(rule)
    if pattern.count is not None and until is not None:
        dates = takewhile(lambda d: d <= until, dates)
    return list(islice(dates, MAX_OCCURRENCES))


def build_occurrences(event: Event, *, now: datetime) -> list[Occurrence]:
    """Build one Occurrence per materialized date of a recurring event.

    Each occurrence keeps the template duration (end_date - start_date) and
    starts with the event's capacity and zero registered seats. An event
    capacity of 0 means unlimited, so those occurrences get no capacity.

    Args:
        event: Recurring event (non-recurring events yield no occurrences).
        now: Creation timestamp for the batch.

    Returns:
        New occurrences in chronological order.
    """
    if event.recurrence_pattern is None:
        return []

    duration = event.duration
    return [
        Occurrence(
            id=uuid7(),
            event_id=event.id,
            organization_id=event.organization_id,
            start_date=start,
            end_date=start + duration,
            max_capacity=event.max_capacity or None,
            created_at=now,
            updated_at=now,
        )
        for start in materialize_occurrence_dates(
            event.recurrence_pattern, event.start_date
        )
    ]
