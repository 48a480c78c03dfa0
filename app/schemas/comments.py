"""Comment schemas for request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.users import UserSummary

COMMENT_SORT_FIELDS = {"created_at", "updated_at"}


class CommentCreate(BaseModel):
    """Schema for creating a comment on a review."""

    text: str = Field(..., min_length=1, max_length=500)


class CommentUpdate(BaseModel):
    """Schema for replacing a comment's text."""

    text: str = Field(..., min_length=1, max_length=500)


class CommentInDB(BaseModel):
    """Comment record as stored in database."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    review_id: UUID
    author_id: UUID
    text: str
    created_at: datetime
    updated_at: datetime


class CommentResponse(BaseModel):
    """Schema for comment response."""

    id: UUID
    review_id: UUID
    text: str
    created_at: datetime
    updated_at: datetime
    author: UserSummary
