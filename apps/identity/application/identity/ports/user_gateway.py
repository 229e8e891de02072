"""User gateway ports.

계정 저장소 CRUD 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from apps.identity.domain.entities.user import User


class UserQueryGateway(Protocol):
    """계정 조회 포트."""

    async def get_by_id(self, user_id: UUID) -> "User | None":
        """내부 ID로 조회합니다."""
        ...

    async def get_by_external_id(self, external_id: str) -> "User | None":
        """외부 ID(로그인 아이디/소셜 ID)로 조회합니다."""
        ...

    async def exists_by_external_id(self, external_id: str) -> bool:
        """외부 ID 사용 여부를 확인합니다."""
        ...


class UserCommandGateway(Protocol):
    """계정 수정 포트.

    Raises:
        UniqueViolationError: external_id 유니크 제약 위반
        DataMapperError: 그 외 저장소 오류
    """

    async def create(self, user: "User") -> "User":
        """새 계정을 저장합니다."""
        ...

    async def update(self, user: "User") -> "User":
        """계정 정보를 저장합니다."""
        ...

    async def delete(self, user: "User") -> None:
        """계정을 삭제합니다."""
        ...
