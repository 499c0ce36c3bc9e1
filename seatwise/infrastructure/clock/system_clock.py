"""Wall-clock implementation of ClockProtocol."""

from datetime import UTC, datetime


class SystemClock:
    """Returns the current UTC time."""

    def now(self) -> datetime:
        return datetime.now(UTC)
