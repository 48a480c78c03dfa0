"""Review schemas for request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.users import UserSummary
from app.schemas.wines import WineSummary

REVIEW_SORT_FIELDS = {"created_at", "updated_at", "rating"}


class ReviewCreate(BaseModel):
    """Schema for creating a new review."""

    wine_id: UUID
    rating: int
    notes: str | None = Field(None, max_length=1000)
    image_url: str | None = None


class ReviewUpdate(BaseModel):
    """Schema for a partial review update; absent fields are left untouched."""

    rating: int | None = None
    notes: str | None = Field(None, max_length=1000)
    image_url: str | None = None


class ReviewInDB(BaseModel):
    """Review record as stored in database."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    author_id: UUID
    wine_id: UUID
    rating: int
    notes: str | None = None
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime


class ReviewResponse(BaseModel):
    """Schema for review response."""

    id: UUID
    rating: int
    notes: str | None = None
    image_url: str | None = None
    created_at: datetime
    updated_at: datetime
    author: UserSummary
    wine: WineSummary
    comment_count: int = 0
