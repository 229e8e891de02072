"""User domain exceptions."""

from __future__ import annotations

from uuid import UUID

from apps.identity.domain.exceptions.base import DomainError


class UserNotFoundError(DomainError):
    """사용자를 찾을 수 없음."""

    def __init__(self, user_id: UUID | None = None) -> None:
        self.user_id = user_id
        super().__init__("Invalid user id")


class UserAlreadyExistsError(DomainError):
    """이미 사용 중인 외부 ID.

    로컬 가입 사전 검사와 저장소 유니크 제약 위반 모두 이 예외로 표현됩니다.
    """

    def __init__(self, external_id: str | None = None) -> None:
        self.external_id = external_id
        super().__init__("user id already exists")
