"""SQLAlchemy Core repository for users."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.users import users
from app.schemas.users import UserInDB


class SqlUserRepository:
    """User persistence backed by the ``app_user`` table."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def get_by_id(self, user_id: UUID) -> UserInDB | None:
        """Get user by internal ID."""
        result = await self.db.execute(select(users).where(users.c.id == user_id))
        row = result.mappings().first()
        return UserInDB.model_validate(dict(row)) if row else None

    async def get_by_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, UserInDB]:
        """Get several users at once, keyed by ID."""
        ids = set(user_ids)
        if not ids:
            return {}

        result = await self.db.execute(select(users).where(users.c.id.in_(ids)))
        found = [UserInDB.model_validate(dict(row)) for row in result.mappings().all()]
        return {user.id: user for user in found}

    async def get_by_external_subject_id(self, external_subject_id: str) -> UserInDB | None:
        """Get user by identity provider subject."""
        query = select(users).where(users.c.external_subject_id == external_subject_id)
        result = await self.db.execute(query)
        row = result.mappings().first()
        return UserInDB.model_validate(dict(row)) if row else None

    async def add(self, user: UserInDB) -> UserInDB:
        """Insert a new user."""
        stmt = insert(users).values(**user.model_dump()).returning(users)
        result = await self.db.execute(stmt)
        await self.db.commit()
        return UserInDB.model_validate(dict(result.mappings().one()))

    async def update(self, user: UserInDB) -> UserInDB:
        """Persist the mutable profile fields of an existing user."""
        stmt = (
            update(users)
            .where(users.c.id == user.id)
            .values(
                display_name=user.display_name,
                email=user.email,
                avatar_url=user.avatar_url,
                updated_at=user.updated_at,
            )
            .returning(users)
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        return UserInDB.model_validate(dict(result.mappings().one()))
