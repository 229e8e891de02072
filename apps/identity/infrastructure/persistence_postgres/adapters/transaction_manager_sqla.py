"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.identity.application.common.exceptions import DataMapperError
from apps.identity.infrastructure.persistence_postgres.adapters.users_gateway_sqla import (
    translate_integrity_error,
)


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        """블록 종료 시 커밋, 예외 시 롤백합니다."""
        try:
            yield
            await self.commit()
        except Exception:
            await self.rollback()
            raise

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다."""
        try:
            await self._session.commit()
        except IntegrityError as e:
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            raise DataMapperError(f"Failed to commit: {e}") from e

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        await self._session.rollback()
