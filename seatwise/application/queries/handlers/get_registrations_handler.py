"""GetRegistrations query handler.

Lists a user's registrations inside one organization, newest id last,
with cursor pagination and a short-lived read-through cache (bookings
change often).

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, DomainError]
- NO domain events (queries are side-effect free)
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
from seatwise.application.queries.handlers.listing_cache import ListingCache
from seatwise.application.queries.registration_queries import GetRegistrations
from seatwise.core.errors import DomainError
from seatwise.core.result import Failure, Result, Success
from seatwise.domain.entities import Registration
from seatwise.domain.protocols import (
    CacheKeysProtocol,
    CacheProtocol,
    LoggerProtocol,
    PageRequest,
    RegistrationUnitOfWorkFactory,
)


@dataclass
class RegistrationResult:
    """Single registration DTO."""

    id: UUID
    occurrence_id: UUID
    organization_id: UUID
    user_id: str
    seat_count: int
    status: str
    occurrence_start_date: datetime
    occurrence_end_date: datetime
    event_title: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, registration: Registration) -> "RegistrationResult":
        return cls(
            id=registration.id,
            occurrence_id=registration.occurrence_id,
            organization_id=registration.organization_id,
            user_id=registration.user_id,
            seat_count=registration.seat_count,
            status=registration.status.value,
            occurrence_start_date=registration.occurrence_start_date,
            occurrence_end_date=registration.occurrence_end_date,
            event_title=registration.event_title,
            created_at=registration.created_at,
            updated_at=registration.updated_at,
        )


@dataclass
class RegistrationListResult:
    """One page of registrations.

    Attributes:
        items: Registrations on this page.
        has_next_page: True if another page follows.
        total_count: Matching registrations across all pages.
        end_cursor: Cursor of the last item (pass as ``after``).
    """

    items: list[RegistrationResult] = field(default_factory=list)
    has_next_page: bool = False
    total_count: int = 0
    end_cursor: str | None = None


class GetRegistrationsHandler:
    """Handler for GetRegistrations query.

    Dependencies (injected via constructor):
        - RegistrationUnitOfWorkFactory: read access to registrations
        - CacheProtocol / CacheKeysProtocol: read-through cache
    """

    def __init__(
        self,
        uow_factory: RegistrationUnitOfWorkFactory,
        cache: CacheProtocol,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
        ttl_seconds: int = 30,
    ) -> None:
        self._uow_factory = uow_factory
        self._cache_keys = cache_keys
        self._listing_cache = ListingCache(cache, RegistrationListResult, ttl_seconds, logger)

    async def handle(
        self, query: GetRegistrations
    ) -> Result[RegistrationListResult, DomainError]:
        """Handle GetRegistrations query.

        Returns:
            Success(RegistrationListResult) for the requested page.
            Failure(ValidationError) for a bad page size or cursor.
        """
        size_result = validate_page_size(query.first)
        if isinstance(size_result, Failure):
            return size_result
        cursor_result = decode_cursor(query.after)
        if isinstance(cursor_result, Failure):
            return cursor_result

        key = self._cache_keys.registration_list(
            query.organization_id,
            query.user_id,
            params_digest(
                include_cancelled=query.include_cancelled,
                first=query.first,
                after=query.after,
            ),
        )
        cached = await self._listing_cache.get(key)
        if cached is not None:
            return Success(value=cached)

        async with self._uow_factory() as uow:
            page = await uow.registrations.find_by_user_in_organization(
                query.user_id,
                query.organization_id,
                PageRequest(first=query.first, after=cursor_result.value),
                include_cancelled=query.include_cancelled,
            )

        items = [RegistrationResult.from_entity(r) for r in page.items]
        result = RegistrationListResult(
            items=items,
            has_next_page=page.has_next_page,
            total_count=page.total_count,
            end_cursor=encode_cursor(items[-1].id) if items else None,
        )
        await self._listing_cache.set(key, result)
        return Success(value=result)
