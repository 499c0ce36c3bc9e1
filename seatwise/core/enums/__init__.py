"""Core enums package.

Usage:
    from seatwise.core.enums import ErrorCode, Environment
"""

from seatwise.core.enums.environment import Environment
from seatwise.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
