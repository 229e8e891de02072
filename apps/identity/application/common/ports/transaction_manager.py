"""Transaction manager port."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class TransactionManager(Protocol):
    """트랜잭션 관리 포트."""

    def begin(self) -> AbstractAsyncContextManager[None]:
        """트랜잭션 블록을 엽니다.

        블록이 정상 종료되면 커밋하고, 예외가 발생하면 롤백 후 다시 던집니다.
        """
        ...

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다."""
        ...

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        ...
