"""User schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class UserInDB(BaseModel):
    """User record as stored in database."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    external_subject_id: str
    display_name: str
    email: str
    avatar_url: str | None = None
    created_at: datetime
    updated_at: datetime


class UserSummary(BaseModel):
    """Public author summary embedded in review and comment views."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    display_name: str
    avatar_url: str | None = None
