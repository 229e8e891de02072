"""UpdateUser Command - 프로필 교체."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.identity.application.identity.dto import UserResult, UserUpdate
from apps.identity.domain.exceptions import UserNotFoundError

if TYPE_CHECKING:
    from apps.identity.application.common.ports import TransactionManager
    from apps.identity.application.identity.ports import (
        UserCommandGateway,
        UserQueryGateway,
    )

logger = logging.getLogger(__name__)


class UpdateUserInteractor:
    """프로필 업데이트 유스케이스.

    닉네임, 나이, 성별, 전화번호, 프로필 이미지를 한 트랜잭션에서 통째로 교체합니다.
    외부 ID, 출처, 비밀번호 해시는 변경하지 않습니다.
    """

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query_gateway = user_query_gateway
        self._user_command_gateway = user_command_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: UUID, update: UserUpdate) -> UserResult:
        """프로필을 업데이트합니다.

        Raises:
            UserNotFoundError: 계정 없음
        """
        logger.info("User update requested", extra={"user_id": str(user_id)})

        async with self._tx.begin():
            user = await self._user_query_gateway.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)

            user.update_profile(
                nickname=update.nickname,
                age=update.age,
                gender=update.gender,
                phone_number=update.phone_number,
                profile_image_url=update.profile_image_url,
            )
            updated_user = await self._user_command_gateway.update(user)

        return UserResult.from_entity(updated_user)
