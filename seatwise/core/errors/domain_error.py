"""Root of every error value a Seatwise handler can return.

Errors are plain frozen dataclasses carried inside ``Failure``. They are not
exceptions: a refused booking is an ordinary outcome, so nothing is raised
and callers branch on the error type instead.

Subclasses add the fields a caller needs to react, e.g.
``CapacityExceededError.available`` or
``ConflictDetectedError.conflicting_occurrence_id``.
"""

from dataclasses import dataclass
from typing import Any

from seatwise.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error value returned in ``Failure``.

    Attributes:
        code: Stable machine-readable code.
        message: Human-readable explanation.
        details: Extra context for logs (adapter errors put the failing
            key and driver message here).
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
