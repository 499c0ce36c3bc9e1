"""Success/Failure values returned by every command and query handler.

Expected outcomes of a booking request (a full occurrence, an overlapping
booking, a missing event) come back as ``Failure``; only broken invariants
raise.

    match await register.handle(cmd):
        case Success(value=booked):
            ...  # booked.registration_id
        case Failure(error=CapacityExceededError() as full):
            ...  # full.available
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Handler completed; ``value`` is its response DTO."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Handler refused the request; ``error`` says why."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
