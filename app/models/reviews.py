"""Reviews table model using SQLAlchemy Core."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import UUID

from app.models.base import metadata

reviews = Table(
    "review",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    # Ownership / references (immutable after creation)
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "wine_id",
        UUID(as_uuid=True),
        ForeignKey("wine.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("rating", Integer, nullable=False),
    Column("notes", Text),
    Column("image_url", Text),
    # Audit fields
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    CheckConstraint("rating >= 1 AND rating <= 5", name="review_rating_check"),
    Index("idx_review_wine_created", "wine_id", "created_at"),
    Index("idx_review_author_created", "author_id", "created_at"),
    Index("idx_review_created", "created_at"),
)
