"""StarRating ORM Mapping."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.identity.infrastructure.persistence_postgres.registry import mapper_registry

star_ratings_table = Table(
    "star_ratings",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("identity.users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("item_id", Text, nullable=False),
    Column("score", Float, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Index("idx_star_ratings_user_created", "user_id", "created_at"),
)


def start_star_ratings_mapper() -> None:
    """StarRating 매퍼 시작."""
    from apps.identity.domain.entities.star_rating import StarRating

    if hasattr(StarRating, "__mapper__"):
        return

    mapper_registry.map_imperatively(StarRating, star_ratings_table)
