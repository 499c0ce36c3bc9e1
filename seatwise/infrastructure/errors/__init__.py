"""Infrastructure errors."""

from seatwise.infrastructure.errors.infrastructure_error import (
    CacheError,
    InfrastructureError,
)

__all__ = ["CacheError", "InfrastructureError"]
