"""SQLAlchemy Core repository for comments."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.comments import comments
from app.repositories.sql_utils import fetch_page
from app.schemas.comments import CommentInDB
from app.schemas.pagination import Page, Pageable


class SqlCommentRepository:
    """Comment persistence backed by the ``comment`` table."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def get_by_id(self, comment_id: UUID) -> CommentInDB | None:
        """Get comment by ID."""
        result = await self.db.execute(select(comments).where(comments.c.id == comment_id))
        row = result.mappings().first()
        return CommentInDB.model_validate(dict(row)) if row else None

    async def add(self, comment: CommentInDB) -> CommentInDB:
        """Insert a new comment."""
        stmt = insert(comments).values(**comment.model_dump()).returning(comments)
        result = await self.db.execute(stmt)
        await self.db.commit()
        return CommentInDB.model_validate(dict(result.mappings().one()))

    async def update(self, comment: CommentInDB) -> CommentInDB:
        """Persist the text of an existing comment."""
        stmt = (
            update(comments)
            .where(comments.c.id == comment.id)
            .values(text=comment.text, updated_at=comment.updated_at)
            .returning(comments)
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        return CommentInDB.model_validate(dict(result.mappings().one()))

    async def delete(self, comment_id: UUID) -> None:
        """Delete a comment."""
        await self.db.execute(delete(comments).where(comments.c.id == comment_id))
        await self.db.commit()

    async def find_by_review(self, review_id: UUID, pageable: Pageable) -> Page[CommentInDB]:
        """List comments on one review."""
        conditions = [comments.c.review_id == review_id]
        return await fetch_page(self.db, comments, conditions, pageable, CommentInDB)

    async def find_by_author(self, author_id: UUID, pageable: Pageable) -> Page[CommentInDB]:
        """List comments written by one user."""
        conditions = [comments.c.author_id == author_id]
        return await fetch_page(self.db, comments, conditions, pageable, CommentInDB)

    async def count_by_review(self, review_id: UUID) -> int:
        """Count comments on one review."""
        stmt = select(func.count()).select_from(comments).where(comments.c.review_id == review_id)
        return (await self.db.execute(stmt)).scalar() or 0

    async def count_by_reviews(self, review_ids: Iterable[UUID]) -> dict[UUID, int]:
        """Count comments for several reviews in one query; reviews without comments map to 0."""
        ids = set(review_ids)
        if not ids:
            return {}

        stmt = (
            select(comments.c.review_id, func.count())
            .where(comments.c.review_id.in_(ids))
            .group_by(comments.c.review_id)
        )
        counts = {review_id: 0 for review_id in ids}
        for review_id, count in (await self.db.execute(stmt)).all():
            counts[review_id] = count
        return counts
