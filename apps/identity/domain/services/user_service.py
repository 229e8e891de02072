"""User Domain Service.

계정 생성 규칙을 담당합니다.
외부 시스템 접근(DB, 해싱, 소셜 API)은 Application Layer에서 처리합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable
from uuid import UUID, uuid4

from apps.identity.domain.entities.user import User
from apps.identity.domain.enums.auth_provider import AuthProvider
from apps.identity.domain.value_objects.origin import SocialOrigin


@dataclass(frozen=True, slots=True)
class ProfileFields:
    """가입 시 입력받는 프로필 정보."""

    nickname: str
    age: int | None = None
    gender: str | None = None
    phone_number: str | None = None
    profile_image_url: str | None = None
    push_token: str | None = None


class UserService:
    """사용자 도메인 서비스.

    순수 도메인 로직만 포함합니다.
    """

    def __init__(self, user_id_generator: Callable[[], UUID] = uuid4) -> None:
        self._user_id_generator = user_id_generator

    def create_local_user(
        self,
        *,
        external_id: str,
        password_hash: str,
        profile: ProfileFields,
    ) -> User:
        """로컬(아이디/비밀번호) 계정 생성.

        Args:
            external_id: 로그인 아이디
            password_hash: 해시된 비밀번호 (평문 금지)
            profile: 프로필 정보

        Returns:
            저장 전 User
        """
        return self._build(
            external_id=external_id,
            provider=AuthProvider.LOCAL,
            password_hash=password_hash,
            profile=profile,
        )

    def create_social_user(
        self,
        *,
        origin: SocialOrigin,
        social_id: str,
        profile: ProfileFields,
    ) -> User:
        """소셜 계정 생성.

        Args:
            origin: 소셜 프로바이더
            social_id: 프로바이더가 발급한 subject id
            profile: 프로필 정보

        Returns:
            저장 전 User (password_hash 없음)
        """
        return self._build(
            external_id=social_id,
            provider=origin.provider,
            password_hash=None,
            profile=profile,
        )

    def _build(
        self,
        *,
        external_id: str,
        provider: AuthProvider,
        password_hash: str | None,
        profile: ProfileFields,
    ) -> User:
        now = datetime.now(timezone.utc)
        return User(
            id=self._user_id_generator(),
            external_id=external_id,
            provider=provider,
            password_hash=password_hash,
            nickname=profile.nickname,
            age=profile.age,
            gender=profile.gender,
            phone_number=profile.phone_number,
            profile_image_url=profile.profile_image_url,
            push_token=profile.push_token,
            created_at=now,
            updated_at=now,
        )
