"""Core errors package.

Usage:
    from seatwise.core.errors import DomainError, ValidationError, NotFoundError
"""

from seatwise.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from seatwise.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
