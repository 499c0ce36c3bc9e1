"""Clock protocol.

Every "now" in the domain comes from an injected clock so time-dependent
rules (past occurrences, future propagation) are deterministic in tests.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
