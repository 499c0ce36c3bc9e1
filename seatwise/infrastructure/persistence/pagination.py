"""Cursor pagination over SQLAlchemy selects.

Applies the id-ordered ``id > after`` window, fetches ``first + 1`` rows to
detect a following page and counts the full filtered set.
"""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from seatwise.domain.protocols.pagination import CursorPage, PageRequest

T = TypeVar("T")


async def paginate(
    session: AsyncSession,
    model: Any,
    conditions: Sequence[ColumnElement[bool]],
    page: PageRequest,
    to_entity: Callable[[Any], T],
) -> CursorPage[T]:
    """Run one page of a filtered listing.

    Args:
        session: Session to query with.
        model: Mapped model class (must have an ``id`` column).
        conditions: Filter applied to both the page and the count.
        page: Cursor window.
        to_entity: Maps a model row to the domain entity.

    Returns:
        CursorPage of mapped entities.
    """
    count_stmt = select(func.count()).select_from(model).where(*conditions)
    total_count = (await session.execute(count_stmt)).scalar_one()

    stmt = select(model).where(*conditions)
    if page.after is not None:
        stmt = stmt.where(model.id > page.after)
    stmt = stmt.order_by(model.id).limit(page.first + 1)

    rows = list((await session.execute(stmt)).scalars().all())
    has_next_page = len(rows) > page.first

    return CursorPage(
        items=[to_entity(row) for row in rows[: page.first]],
        has_next_page=has_next_page,
        total_count=total_count,
    )
