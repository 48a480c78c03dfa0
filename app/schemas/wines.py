"""Wine schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class WineInDB(BaseModel):
    """Wine record as stored in database."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    winery: str | None = None
    country: str | None = None
    grape: str | None = None
    year: int | None = None
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime


class WineSummary(BaseModel):
    """Wine summary embedded in review views."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    winery: str | None = None
    country: str | None = None
    year: int | None = None
    image_url: str | None = None
