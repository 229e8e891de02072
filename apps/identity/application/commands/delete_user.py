"""DeleteUser Command - 계정 삭제."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.identity.domain.exceptions import UserNotFoundError

if TYPE_CHECKING:
    from apps.identity.application.common.ports import TransactionManager
    from apps.identity.application.identity.ports import (
        UserCommandGateway,
        UserQueryGateway,
    )

logger = logging.getLogger(__name__)


class DeleteUserInteractor:
    """계정 삭제 유스케이스.

    Note:
        CASCADE 삭제로 star_ratings도 함께 삭제됩니다.
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

    async def execute(self, user_id: UUID) -> None:
        """계정을 삭제합니다.

        Raises:
            UserNotFoundError: 계정 없음
        """
        logger.info("User deletion requested", extra={"user_id": str(user_id)})

        async with self._tx.begin():
            user = await self._user_query_gateway.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            await self._user_command_gateway.delete(user)

        logger.info("User deleted", extra={"user_id": str(user_id)})
