"""Queries (CQRS read operations)."""

from seatwise.application.queries.event_queries import GetEvents, GetOccurrences
from seatwise.application.queries.registration_queries import GetRegistrations

__all__ = ["GetEvents", "GetOccurrences", "GetRegistrations"]
