"""Shared in-memory tables.

Entities are stored as private copies: callers only ever get copies back,
so mutating a loaded entity has no effect until it is saved.

Transactions are serialized by one asyncio.Lock held for the whole unit of
work. A unit of work snapshots the tables on entry and restores the snapshot
unless it commits, which gives the same all-or-nothing behaviour as a
database transaction.
"""

import asyncio
import copy
from dataclasses import dataclass, field
from uuid import UUID

from seatwise.domain.entities import Event, Occurrence, Registration


@dataclass
class StoreTables:
    """Entity tables keyed by id."""

    events: dict[UUID, Event] = field(default_factory=dict)
    occurrences: dict[UUID, Occurrence] = field(default_factory=dict)
    registrations: dict[UUID, Registration] = field(default_factory=dict)


class InMemoryStore:
    """Process-local tables plus the lock that serializes units of work."""

    def __init__(self) -> None:
        self.tables = StoreTables()
        self.lock = asyncio.Lock()

    def snapshot(self) -> StoreTables:
        return copy.deepcopy(self.tables)

    def restore(self, snapshot: StoreTables) -> None:
        self.tables = snapshot
