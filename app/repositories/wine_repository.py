"""SQLAlchemy Core repository for the wine catalogue."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.wines import wines
from app.schemas.wines import WineInDB


class SqlWineRepository:
    """Read-only wine lookups."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def get_by_id(self, wine_id: UUID) -> WineInDB | None:
        """Get wine by ID."""
        result = await self.db.execute(select(wines).where(wines.c.id == wine_id))
        row = result.mappings().first()
        return WineInDB.model_validate(dict(row)) if row else None

    async def get_by_ids(self, wine_ids: Iterable[UUID]) -> dict[UUID, WineInDB]:
        """Get several wines at once, keyed by ID."""
        ids = set(wine_ids)
        if not ids:
            return {}

        result = await self.db.execute(select(wines).where(wines.c.id.in_(ids)))
        found = [WineInDB.model_validate(dict(row)) for row in result.mappings().all()]
        return {wine.id: wine for wine in found}
