"""Error families shared by the event and registration modules.

- ValidationError: a command field is out of range or malformed
- NotFoundError: an event, occurrence or registration id resolves to nothing
- ConflictError: the request clashes with existing bookings

Module errors subclass these so callers can handle a whole family at once:

    if isinstance(result.error, NotFoundError):
        ...  # 404-style response for any missing resource
"""

from dataclasses import dataclass

from seatwise.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Rejected input. ``field`` names the offending command attribute."""

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Lookup by id came back empty.

    Attributes:
        resource_type: "Event", "Occurrence" or "Registration".
        resource_id: The id as a string.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Request conflicts with state already stored.

    Attributes:
        resource_type: Resource the conflict is about.
        conflicting_field: Attribute that clashes, when there is one.
    """

    resource_type: str
    conflicting_field: str | None = None
