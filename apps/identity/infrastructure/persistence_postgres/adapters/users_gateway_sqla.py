"""SQLAlchemy implementation of users gateways."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.identity.application.common.exceptions import DataMapperError, UniqueViolationError
from apps.identity.domain.entities.user import User
from apps.identity.infrastructure.persistence_postgres.mappings.users import (
    USERS_EXTERNAL_ID_CONSTRAINT,
    users_table,
)

logger = logging.getLogger(__name__)


def translate_integrity_error(exc: IntegrityError) -> DataMapperError:
    """IntegrityError를 게이트웨이 예외로 변환합니다."""
    if USERS_EXTERNAL_ID_CONSTRAINT in str(exc.orig):
        return UniqueViolationError(USERS_EXTERNAL_ID_CONSTRAINT)
    return DataMapperError(f"Integrity error: {exc.orig}")


class SqlaUsersQueryGateway:
    """계정 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        """내부 ID로 조회합니다."""
        try:
            result = await self._session.execute(select(User).where(users_table.c.id == user_id))
        except SQLAlchemyError as e:
            raise DataMapperError(f"Failed to load user: {e}") from e
        return result.scalar_one_or_none()

    async def get_by_external_id(self, external_id: str) -> User | None:
        """외부 ID로 조회합니다."""
        try:
            result = await self._session.execute(
                select(User).where(users_table.c.external_id == external_id)
            )
        except SQLAlchemyError as e:
            raise DataMapperError(f"Failed to load user: {e}") from e
        return result.scalar_one_or_none()

    async def exists_by_external_id(self, external_id: str) -> bool:
        """외부 ID 사용 여부를 확인합니다."""
        try:
            result = await self._session.execute(
                select(exists().where(users_table.c.external_id == external_id))
            )
        except SQLAlchemyError as e:
            raise DataMapperError(f"Failed to check user: {e}") from e
        return bool(result.scalar())


class SqlaUsersCommandGateway:
    """계정 수정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user: User) -> User:
        """새 계정을 저장합니다."""
        self._session.add(user)
        await self._flush()
        return user

    async def update(self, user: User) -> User:
        """계정 정보를 저장합니다."""
        merged = await self._session.merge(user)
        await self._flush()
        return merged

    async def delete(self, user: User) -> None:
        """계정을 삭제합니다."""
        await self._session.delete(user)
        await self._flush()

    async def _flush(self) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning("Integrity error on flush", extra={"error": str(e.orig)})
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            raise DataMapperError(f"Failed to flush: {e}") from e
