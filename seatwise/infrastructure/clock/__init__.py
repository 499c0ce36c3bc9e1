"""Clock adapters."""

from seatwise.infrastructure.clock.system_clock import SystemClock

__all__ = ["SystemClock"]
