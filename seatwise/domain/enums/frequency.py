"""Recurrence frequency enum."""

from enum import Enum


class Frequency(str, Enum):
    """How often a recurring event repeats.

    Values mirror the RFC 5545 FREQ names so a pattern can be handed to any
    iCalendar-aware consumer unchanged.
    """

    DAILY = "DAILY"
    """Repeat every N days."""

    WEEKLY = "WEEKLY"
    """Repeat every N weeks (optionally on specific weekdays)."""

    MONTHLY = "MONTHLY"
    """Repeat every N months (optionally on specific days of month)."""

    YEARLY = "YEARLY"
    """Repeat every N years (optionally in specific months)."""
