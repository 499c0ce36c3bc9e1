"""Errors raised by external systems, translated into error values.

Adapters catch driver exceptions at the boundary and hand back
``Failure(CacheError(...))`` so callers can decide to fail open.
"""

from dataclasses import dataclass

from seatwise.core.errors import DomainError
from seatwise.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base for adapter failures.

    Attributes:
        infrastructure_code: Which adapter operation failed.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Redis call failed; ``details`` holds the key or pattern and the cause."""
