"""Star rating Queries.

Architecture:
    - Query(지휘자): GetStarRatingsQuery
    - Ports(인프라): StarRatingQueryGateway
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.identity.application.rating.dto import StarRatingDTO

if TYPE_CHECKING:
    from apps.identity.application.rating.ports import StarRatingQueryGateway
    from apps.identity.domain.entities.star_rating import StarRating
    from apps.identity.domain.value_objects.page_request import PageRequest

logger = logging.getLogger(__name__)


def _to_star_rating_dto(rating: "StarRating") -> StarRatingDTO:
    """도메인 엔티티를 DTO로 변환합니다."""
    return StarRatingDTO(
        id=rating.id,
        user_id=rating.user_id,
        item_id=rating.item_id,
        score=rating.score,
        created_at=rating.created_at,
    )


class GetStarRatingsQuery:
    """사용자 별점 목록 조회 Query (읽기 전용).

    계정 존재 여부는 확인하지 않습니다. 알 수 없는 ID는 빈 목록을 반환합니다.
    """

    def __init__(self, star_rating_gateway: "StarRatingQueryGateway") -> None:
        self._star_rating_gateway = star_rating_gateway

    async def execute(self, user_id: UUID, page: "PageRequest") -> list[StarRatingDTO]:
        """사용자의 별점 목록을 조회합니다.

        Args:
            user_id: 사용자 ID
            page: 페이지 요청

        Returns:
            저장소 정렬 순서의 별점 DTO 목록
        """
        logger.info(
            "Star ratings query executed",
            extra={"user_id": str(user_id), "page": page.page, "size": page.size},
        )
        ratings = await self._star_rating_gateway.list_by_user_id(user_id, page)
        return [_to_star_rating_dto(rating) for rating in ratings]
