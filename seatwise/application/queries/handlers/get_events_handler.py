"""GetEvents and GetOccurrences query handlers.

Paginated, cached listings of an organization's events and of an event's
occurrences. Soft-deleted rows are never listed.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from seatwise.application.queries.cursor import (
    decode_cursor,
    encode_cursor,
    params_digest,
    validate_page_size,
)
from seatwise.application.queries.event_queries import GetEvents, GetOccurrences
from seatwise.application.queries.handlers.listing_cache import ListingCache
from seatwise.core.errors import DomainError
from seatwise.core.result import Failure, Result, Success
from seatwise.domain.entities import Event, Occurrence
from seatwise.domain.protocols import (
    CacheKeysProtocol,
    CacheProtocol,
    EventUnitOfWorkFactory,
    LoggerProtocol,
    PageRequest,
)


@dataclass
class EventResult:
    """Single event DTO."""

    id: UUID
    organization_id: UUID
    title: str
    description: str
    location: str | None
    start_date: datetime
    end_date: datetime
    max_capacity: int
    is_recurring: bool
    recurrence_pattern: dict | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, event: Event) -> "EventResult":
        return cls(
            id=event.id,
            organization_id=event.organization_id,
            title=event.title,
            description=event.description,
            location=event.location,
            start_date=event.start_date,
            end_date=event.end_date,
            max_capacity=event.max_capacity,
            is_recurring=event.is_recurring,
            recurrence_pattern=(
                event.recurrence_pattern.model_dump(mode="json")
                if event.recurrence_pattern is not None
                else None
            ),
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


@dataclass
class EventListResult:
    """One page of events."""

    items: list[EventResult] = field(default_factory=list)
    has_next_page: bool = False
    total_count: int = 0
    end_cursor: str | None = None


@dataclass
class OccurrenceResult:
    """Single occurrence DTO."""

    id: UUID
    event_id: UUID
    organization_id: UUID
    start_date: datetime
    end_date: datetime
    title: str | None
    location: str | None
    max_capacity: int | None
    registered_seats: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, occurrence: Occurrence) -> "OccurrenceResult":
        return cls(
            id=occurrence.id,
            event_id=occurrence.event_id,
            organization_id=occurrence.organization_id,
            start_date=occurrence.start_date,
            end_date=occurrence.end_date,
            title=occurrence.title,
            location=occurrence.location,
            max_capacity=occurrence.max_capacity,
            registered_seats=occurrence.registered_seats,
            created_at=occurrence.created_at,
            updated_at=occurrence.updated_at,
        )


@dataclass
class OccurrenceListResult:
    """One page of occurrences."""

    items: list[OccurrenceResult] = field(default_factory=list)
    has_next_page: bool = False
    total_count: int = 0
    end_cursor: str | None = None


class GetEventsHandler:
    """Handler for GetEvents query."""

    def __init__(
        self,
        uow_factory: EventUnitOfWorkFactory,
        cache: CacheProtocol,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
        ttl_seconds: int = 120,
    ) -> None:
        self._uow_factory = uow_factory
        self._cache_keys = cache_keys
        self._listing_cache = ListingCache(cache, EventListResult, ttl_seconds, logger)

    async def handle(self, query: GetEvents) -> Result[EventListResult, DomainError]:
        """Handle GetEvents query.

        Returns:
            Success(EventListResult) for the requested page.
            Failure(ValidationError) for a bad page size or cursor.
        """
        size_result = validate_page_size(query.first)
        if isinstance(size_result, Failure):
            return size_result
        cursor_result = decode_cursor(query.after)
        if isinstance(cursor_result, Failure):
            return cursor_result

        key = self._cache_keys.event_list(
            query.organization_id,
            params_digest(
                start_date=query.start_date,
                end_date=query.end_date,
                first=query.first,
                after=query.after,
            ),
        )
        cached = await self._listing_cache.get(key)
        if cached is not None:
            return Success(value=cached)

        async with self._uow_factory() as uow:
            page = await uow.events.find_by_organization(
                query.organization_id,
                PageRequest(first=query.first, after=cursor_result.value),
                start_date=query.start_date,
                end_date=query.end_date,
            )

        items = [EventResult.from_entity(e) for e in page.items]
        result = EventListResult(
            items=items,
            has_next_page=page.has_next_page,
            total_count=page.total_count,
            end_cursor=encode_cursor(items[-1].id) if items else None,
        )
        await self._listing_cache.set(key, result)
        return Success(value=result)


class GetOccurrencesHandler:
    """Handler for GetOccurrences query."""

    def __init__(
        self,
        uow_factory: EventUnitOfWorkFactory,
        cache: CacheProtocol,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
        ttl_seconds: int = 120,
    ) -> None:
        self._uow_factory = uow_factory
        self._cache_keys = cache_keys
        self._listing_cache = ListingCache(cache, OccurrenceListResult, ttl_seconds, logger)

    async def handle(
        self, query: GetOccurrences
    ) -> Result[OccurrenceListResult, DomainError]:
        """Handle GetOccurrences query.

        Returns:
            Success(OccurrenceListResult) for the requested page.
            Failure(ValidationError) for a bad page size or cursor.
        """
        size_result = validate_page_size(query.first)
        if isinstance(size_result, Failure):
            return size_result
        cursor_result = decode_cursor(query.after)
        if isinstance(cursor_result, Failure):
            return cursor_result

        key = self._cache_keys.occurrence_list(
            query.organization_id,
            query.event_id,
            params_digest(
                start_date=query.start_date,
                end_date=query.end_date,
                first=query.first,
                after=query.after,
            ),
        )
        cached = await self._listing_cache.get(key)
        if cached is not None:
            return Success(value=cached)

        async with self._uow_factory() as uow:
            page = await uow.occurrences.find_by_event(
                query.event_id,
                query.organization_id,
                PageRequest(first=query.first, after=cursor_result.value),
                start_date=query.start_date,
                end_date=query.end_date,
            )

        items = [OccurrenceResult.from_entity(o) for o in page.items]
        result = OccurrenceListResult(
            items=items,
            has_next_page=page.has_next_page,
            total_count=page.total_count,
            end_cursor=encode_cursor(items[-1].id) if items else None,
        )
        await self._listing_cache.set(key, result)
        return Success(value=result)
