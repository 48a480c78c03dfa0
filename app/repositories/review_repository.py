"""SQLAlchemy Core repository for reviews."""

from uuid import UUID

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.reviews import reviews
from app.repositories.sql_utils import fetch_page
from app.schemas.pagination import Page, Pageable
from app.schemas.reviews import ReviewInDB


class SqlReviewRepository:
    """Review persistence backed by the ``review`` table."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def get_by_id(self, review_id: UUID) -> ReviewInDB | None:
        """Get review by ID."""
        result = await self.db.execute(select(reviews).where(reviews.c.id == review_id))
        row = result.mappings().first()
        return ReviewInDB.model_validate(dict(row)) if row else None

    async def add(self, review: ReviewInDB) -> ReviewInDB:
        """Insert a new review."""
        stmt = insert(reviews).values(**review.model_dump()).returning(reviews)
        result = await self.db.execute(stmt)
        await self.db.commit()
        return ReviewInDB.model_validate(dict(result.mappings().one()))

    async def update(self, review: ReviewInDB) -> ReviewInDB:
        """Persist the mutable fields of an existing review."""
        stmt = (
            update(reviews)
            .where(reviews.c.id == review.id)
            .values(
                rating=review.rating,
                notes=review.notes,
                image_url=review.image_url,
                updated_at=review.updated_at,
            )
            .returning(reviews)
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        return ReviewInDB.model_validate(dict(result.mappings().one()))

    async def delete(self, review_id: UUID) -> None:
        """Delete a review; its comments go with it through the FK cascade."""
        await self.db.execute(delete(reviews).where(reviews.c.id == review_id))
        await self.db.commit()

    async def find_all(self, pageable: Pageable) -> Page[ReviewInDB]:
        """List all reviews."""
        return await fetch_page(self.db, reviews, [], pageable, ReviewInDB)

    async def find_by_wine(self, wine_id: UUID, pageable: Pageable) -> Page[ReviewInDB]:
        """List reviews of one wine."""
        conditions = [reviews.c.wine_id == wine_id]
        return await fetch_page(self.db, reviews, conditions, pageable, ReviewInDB)

    async def find_by_user(self, user_id: UUID, pageable: Pageable) -> Page[ReviewInDB]:
        """List reviews written by one user."""
        conditions = [reviews.c.author_id == user_id]
        return await fetch_page(self.db, reviews, conditions, pageable, ReviewInDB)

    async def find_by_wine_and_user(
        self, wine_id: UUID, user_id: UUID, pageable: Pageable
    ) -> Page[ReviewInDB]:
        """List reviews of one wine written by one user."""
        conditions = [reviews.c.wine_id == wine_id, reviews.c.author_id == user_id]
        return await fetch_page(self.db, reviews, conditions, pageable, ReviewInDB)
