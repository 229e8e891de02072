"""SQLAlchemy implementation of star rating gateway."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.identity.application.common.exceptions import DataMapperError
from apps.identity.domain.entities.star_rating import StarRating
from apps.identity.domain.value_objects.page_request import PageRequest
from apps.identity.infrastructure.persistence_postgres.mappings.star_ratings import (
    star_ratings_table,
)


class SqlaStarRatingQueryGateway:
    """별점 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_by_user_id(self, user_id: UUID, page: PageRequest) -> list[StarRating]:
        """사용자의 별점 목록을 최신순으로 조회합니다."""
        stmt = (
            select(StarRating)
            .where(star_ratings_table.c.user_id == user_id)
            .order_by(star_ratings_table.c.created_at.desc(), star_ratings_table.c.id)
            .offset(page.offset)
            .limit(page.size)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise DataMapperError(f"Failed to load star ratings: {e}") from e
        return list(result.scalars().all())
