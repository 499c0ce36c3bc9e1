"""Weekday enum used by recurrence patterns."""

from enum import Enum


class Weekday(str, Enum):
    """Two-letter iCalendar weekday codes (Monday first)."""

    MO = "MO"
    TU = "TU"
    WE = "WE"
    TH = "TH"
    FR = "FR"
    SA = "SA"
    SU = "SU"

    @property
    def index(self) -> int:
        """Zero-based position of the weekday, Monday = 0."""
        return list(Weekday).index(self)
