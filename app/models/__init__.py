"""Database models."""

from app.models.base import metadata
from app.models.comments import comments
from app.models.reviews import reviews
from app.models.users import users
from app.models.wines import wines

__all__ = [
    "comments",
    "metadata",
    "reviews",
    "users",
    "wines",
]
