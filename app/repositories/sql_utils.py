"""Shared helpers for SQLAlchemy Core repositories."""

from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy import Table, and_, func, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.pagination import Page, Pageable, SortDirection

ModelT = TypeVar("ModelT", bound=BaseModel)


def order_by_clauses(table: Table, pageable: Pageable) -> list[Any]:
    """Translate the pageable's sort orders into ORDER BY clauses, ``id`` last for stability."""
    clauses = []
    for order in pageable.sort:
        column = table.c[order.field]
        clauses.append(column.desc() if order.direction == SortDirection.DESC else column.asc())
    clauses.append(table.c.id.asc())
    return clauses


async def fetch_page(
    db: AsyncSession,
    table: Table,
    conditions: list[Any],
    pageable: Pageable,
    model: type[ModelT],
) -> Page[ModelT]:
    """
    Run a filtered, sorted, paginated query.

    Args:
        db: Database session
        table: Table to query
        conditions: WHERE conditions, combined with AND
        pageable: Page request
        model: Schema each row is validated into

    Returns:
        Page of validated rows with the total match count
    """
    where = and_(true(), *conditions)

    count_stmt = select(func.count()).select_from(table).where(where)
    total = (await db.execute(count_stmt)).scalar() or 0

    stmt = (
        select(table)
        .where(where)
        .order_by(*order_by_clauses(table, pageable))
        .limit(pageable.size)
        .offset(pageable.offset)
    )
    rows = (await db.execute(stmt)).mappings().all()

    return Page[model](  # type: ignore[valid-type]
        items=[model.model_validate(dict(row)) for row in rows],
        total=total,
        page=pageable.page,
        size=pageable.size,
    )
