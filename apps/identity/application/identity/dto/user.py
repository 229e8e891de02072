"""Identity DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from apps.identity.domain.entities.user import User


@dataclass(frozen=True, slots=True)
class UserCreateRequest:
    """가입 요청.

    provider가 local이면 external_id/password, 소셜이면 access_token을 사용합니다.
    """

    provider: str
    nickname: str
    external_id: str | None = None
    password: str | None = None
    access_token: str | None = None
    age: int | None = None
    gender: str | None = None
    phone_number: str | None = None
    profile_image_url: str | None = None
    push_token: str | None = None


@dataclass(frozen=True, slots=True)
class UserSignInRequest:
    """로그인 요청."""

    provider: str
    external_id: str | None = None
    password: str | None = None
    access_token: str | None = None


@dataclass(frozen=True, slots=True)
class UserUpdate:
    """프로필 교체 요청 (전체 교체)."""

    nickname: str
    age: int | None = None
    gender: str | None = None
    phone_number: str | None = None
    profile_image_url: str | None = None


@dataclass(frozen=True, slots=True)
class UserResult:
    """계정 조회 결과 (비밀번호 해시 제외)."""

    id: UUID
    external_id: str
    provider: str
    nickname: str
    age: int | None
    gender: str | None
    phone_number: str | None
    profile_image_url: str | None
    push_token: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: "User") -> "UserResult":
        return cls(
            id=user.id,
            external_id=user.external_id,
            provider=user.provider.value,
            nickname=user.nickname,
            age=user.age,
            gender=user.gender,
            phone_number=user.phone_number,
            profile_image_url=user.profile_image_url,
            push_token=user.push_token,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True, slots=True)
class SignInResult:
    """로그인 결과."""

    user: UserResult
    access_token: str
    token_type: str = "Bearer"
