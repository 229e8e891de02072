"""User entity - Core domain object for identity.

ORM과 분리된 순수 도메인 엔티티입니다.
SQLAlchemy 매핑은 infrastructure/persistence_postgres/mappings/users.py에서 정의합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from apps.identity.domain.enums.auth_provider import AuthProvider
from apps.identity.domain.value_objects.origin import Origin, parse_origin


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """사용자(계정) 엔티티.

    Attributes:
        id: 내부 식별자 (시스템 발급, 불변)
        external_id: 로컬 계정의 로그인 아이디 또는 소셜 프로바이더의 subject id
        provider: 계정 출처 (생성 후 불변)
        password_hash: 로컬 계정의 비밀번호 해시 (소셜 계정은 None)
        nickname: 닉네임
        age: 나이 (선택)
        gender: 성별 (선택)
        phone_number: 전화번호 (선택)
        profile_image_url: 프로필 이미지 URL (선택)
        push_token: 푸시 알림 토큰 (선택)
    """

    id: UUID
    external_id: str
    provider: AuthProvider
    nickname: str
    password_hash: str | None = None
    age: int | None = None
    gender: str | None = None
    phone_number: str | None = None
    profile_image_url: str | None = None
    push_token: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def origin(self) -> Origin:
        return parse_origin(self.provider)

    @property
    def is_local(self) -> bool:
        return self.provider is AuthProvider.LOCAL

    def update_profile(
        self,
        *,
        nickname: str,
        age: int | None,
        gender: str | None,
        phone_number: str | None,
        profile_image_url: str | None,
    ) -> None:
        """프로필 필드를 통째로 교체합니다.

        external_id, provider, password_hash, push_token은 변경하지 않습니다.
        """
        self.nickname = nickname
        self.age = age
        self.gender = gender
        self.phone_number = phone_number
        self.profile_image_url = profile_image_url
        self.updated_at = _utcnow()

    def __repr__(self) -> str:
        return f"User(id={self.id}, external_id={self.external_id!r}, provider={self.provider.value})"
