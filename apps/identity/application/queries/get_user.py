"""GetUser Query - 내부 ID로 계정 조회."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from apps.identity.application.identity.dto import UserResult
from apps.identity.domain.exceptions import UserNotFoundError

if TYPE_CHECKING:
    from apps.identity.application.identity.ports import UserQueryGateway


class GetUserQuery:
    """계정 조회 Query."""

    def __init__(self, user_query_gateway: "UserQueryGateway") -> None:
        self._user_query_gateway = user_query_gateway

    async def execute(self, user_id: UUID) -> UserResult:
        """계정을 조회합니다.

        Raises:
            UserNotFoundError: 계정 없음
        """
        user = await self._user_query_gateway.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserResult.from_entity(user)
