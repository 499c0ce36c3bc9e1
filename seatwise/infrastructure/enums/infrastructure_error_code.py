"""Adapter-level failure codes.

Finer grained than ``ErrorCode``: they say which cache operation broke and
end up in log context, while callers only look at the domain code.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Cache operation that failed."""

    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
