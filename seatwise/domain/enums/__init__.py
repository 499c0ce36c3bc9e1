"""Domain enums for booking logic.

Available Enums:
    - Frequency: Recurrence frequency (DAILY, WEEKLY, MONTHLY, YEARLY)
    - Weekday: iCalendar weekday codes (MO..SU)
    - RegistrationStatus: Registration lifecycle (active, cancelled)
"""

from seatwise.domain.enums.frequency import Frequency
from seatwise.domain.enums.registration_status import RegistrationStatus
from seatwise.domain.enums.weekday import Weekday

__all__ = [
    "Frequency",
    "RegistrationStatus",
    "Weekday",
]
