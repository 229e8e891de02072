"""ValidateUserId Query - 로컬 가입 전 아이디 중복 확인."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.identity.domain.exceptions import UserAlreadyExistsError

if TYPE_CHECKING:
    from apps.identity.application.identity.ports import UserQueryGateway

logger = logging.getLogger(__name__)


class ValidateUserIdQuery:
    """외부 ID 사용 가능 여부 확인 Query.

    로컬 가입 직전에만 사용합니다. 동시 가입 경쟁은 저장소 유니크 제약이 최종 판정합니다.
    """

    def __init__(self, user_query_gateway: "UserQueryGateway") -> None:
        self._user_query_gateway = user_query_gateway

    async def execute(self, external_id: str) -> None:
        """이미 사용 중이면 예외를 던집니다.

        Raises:
            UserAlreadyExistsError: 사용 중인 외부 ID
        """
        if await self._user_query_gateway.exists_by_external_id(external_id):
            logger.info("External id already taken")
            raise UserAlreadyExistsError(external_id)
