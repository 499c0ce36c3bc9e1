"""Opaque cursor helpers for paginated queries.

A cursor is the URL-safe base64 of the last item's id. Clients treat it as
opaque and pass it back as ``after``.
"""

import base64
import binascii
import hashlib
import json
from typing import Any
from uuid import UUID

from seatwise.core.enums import ErrorCode
from seatwise.core.errors import ValidationError
from seatwise.core.result import Failure, Result, Success

MAX_PAGE_SIZE = 100


def encode_cursor(item_id: UUID) -> str:
    """Encode an item id as an opaque cursor."""
    return base64.urlsafe_b64encode(str(item_id).encode()).decode()


def decode_cursor(cursor: str | None) -> Result[UUID | None, ValidationError]:
    """Decode a cursor produced by encode_cursor.

    Returns:
        Success(UUID) for a valid cursor, Success(None) when no cursor was
        given, Failure(ValidationError) for anything else.
    """
    if cursor is None:
        return Success(value=None)
    try:
        return Success(value=UUID(base64.urlsafe_b64decode(cursor.encode()).decode()))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_CURSOR,
                message="Invalid pagination cursor",
                field="after",
            )
        )


def params_digest(**params: Any) -> str:
    """Stable short digest of query parameters for cache keys."""
    payload = json.dumps(params, sort_keys=True, default=str)
    return hashlib.sha256(payload.encode()).hexdigest()[:16]


def validate_page_size(first: int) -> Result[int, ValidationError]:
    """Reject page sizes outside 1..MAX_PAGE_SIZE."""
    if not 1 <= first <= MAX_PAGE_SIZE:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"first must be between 1 and {MAX_PAGE_SIZE}",
                field="first",
            )
        )
    return Success(value=first)
