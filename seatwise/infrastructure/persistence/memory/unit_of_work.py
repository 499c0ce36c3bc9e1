"""In-memory units of work.

Entering acquires the store lock and snapshots the tables; leaving without
commit() restores the snapshot. Holding the lock for the whole block makes
every unit of work serializable, so check-then-act sequences (capacity,
duplicate registration) cannot interleave.
"""

from types import TracebackType
from typing import Self

from seatwise.infrastructure.persistence.event_module_adapter import EventModuleAdapter
from seatwise.infrastructure.persistence.memory.repositories import (
    InMemoryEventRepository,
    InMemoryOccurrenceRepository,
    InMemoryRegistrationRepository,
)
from seatwise.infrastructure.persistence.memory.store import InMemoryStore, StoreTables


class _InMemoryUnitOfWork:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._snapshot: StoreTables | None = None
        self._committed = False

    async def __aenter__(self) -> Self:
        await self._store.lock.acquire()
        self._snapshot = self._store.snapshot()
        self._committed = False
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if not self._committed:
                await self.rollback()
        finally:
            self._snapshot = None
            self._store.lock.release()

    async def commit(self) -> None:
        self._snapshot = self._store.snapshot()
        self._committed = True

    async def rollback(self) -> None:
        if self._snapshot is not None:
            self._store.restore(self._snapshot)
            self._snapshot = self._store.snapshot()


class InMemoryEventUnitOfWork(_InMemoryUnitOfWork):
    """EventUnitOfWork over InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store)
        self.events = InMemoryEventRepository(store)
        self.occurrences = InMemoryOccurrenceRepository(store)


class InMemoryRegistrationUnitOfWork(_InMemoryUnitOfWork):
    """RegistrationUnitOfWork over InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store)
        self.registrations = InMemoryRegistrationRepository(store)
        self.event_module = EventModuleAdapter(
            InMemoryEventRepository(store), InMemoryOccurrenceRepository(store)
        )
