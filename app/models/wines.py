"""Wine catalogue table (read-only for this service)."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Integer,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import UUID

from app.models.base import metadata

wines = Table(
    "wine",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(160), nullable=False, index=True),
    Column("winery", String(160), index=True),
    Column("country", String(80), index=True),
    Column("grape", String(80)),
    Column("year", Integer),
    Column("image_url", Text),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    CheckConstraint("year >= 1900 AND year <= 2100", name="wine_year_check"),
)
