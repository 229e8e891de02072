"""Star rating gateway port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from apps.identity.domain.entities.star_rating import StarRating
    from apps.identity.domain.value_objects.page_request import PageRequest


class StarRatingQueryGateway(Protocol):
    """별점 조회 포트."""

    async def list_by_user_id(
        self, user_id: UUID, page: "PageRequest"
    ) -> list["StarRating"]:
        """사용자의 별점 목록을 페이지 단위로 조회합니다."""
        ...
