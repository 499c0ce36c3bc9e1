"""Registration status enum.

A registration is either holding seats (ACTIVE) or has released them
(CANCELLED). Cancelled registrations are kept so the same user can be
reactivated in place on the same occurrence.
"""

from enum import Enum


class RegistrationStatus(str, Enum):
    """Registration lifecycle states.

    State Transitions:
        ACTIVE → CANCELLED (full cancellation)
        CANCELLED → ACTIVE (reactivation with a new seat count)
    """

    ACTIVE = "active"
    """Registration holds seats on its occurrence."""

    CANCELLED = "cancelled"
    """Registration released its seats. Can be reactivated."""
