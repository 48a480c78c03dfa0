"""User model definition using SQLAlchemy Core."""

from sqlalchemy import (
    Column,
    DateTime,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import UUID

from app.models.base import metadata

DISPLAY_NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 180

users = Table(
    "app_user",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    # Identity provider subject (immutable once set)
    Column("external_subject_id", String(255), nullable=False, unique=True, index=True),
    # Profile info (mirrored from the identity provider)
    Column("display_name", String(DISPLAY_NAME_MAX_LENGTH), nullable=False),
    Column("email", String(EMAIL_MAX_LENGTH), nullable=False, index=True),
    Column("avatar_url", Text),
    # Audit
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
)
