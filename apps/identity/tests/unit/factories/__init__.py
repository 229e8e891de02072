"""Test Factories.

테스트용 객체 생성 팩토리와 포트 대역(in-memory) 구현.
"""

from __future__ import annotations

import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import AsyncIterator

from apps.identity.application.common.exceptions import UniqueViolationError
from apps.identity.application.social.exceptions import SocialProviderError
from apps.identity.domain.entities.star_rating import StarRating
from apps.identity.domain.entities.user import User
from apps.identity.domain.enums import AuthProvider
from apps.identity.domain.value_objects import PageRequest
from apps.identity.infrastructure.persistence_postgres.mappings.users import (
    USERS_EXTERNAL_ID_CONSTRAINT,
)


def create_user(
    *,
    user_id: uuid.UUID | None = None,
    external_id: str = "cocoman",
    provider: AuthProvider = AuthProvider.LOCAL,
    password_hash: str | None = "hashed:secret",
    nickname: str = "코코맨",
) -> User:
    """테스트용 User 생성."""
    now = datetime.now(timezone.utc)
    return User(
        id=user_id or uuid.uuid4(),
        external_id=external_id,
        provider=provider,
        password_hash=password_hash if provider is AuthProvider.LOCAL else None,
        nickname=nickname,
        created_at=now,
        updated_at=now,
    )


def create_star_rating(
    *,
    user_id: uuid.UUID,
    item_id: str = "item-1",
    score: float = 4.5,
    created_at: datetime | None = None,
) -> StarRating:
    """테스트용 StarRating 생성."""
    return StarRating(
        id=uuid.uuid4(),
        user_id=user_id,
        item_id=item_id,
        score=score,
        created_at=created_at or datetime.now(timezone.utc),
    )


class InMemoryUsersGateway:
    """UserQueryGateway + UserCommandGateway in-memory 구현.

    external_id 유일성은 저장소 유니크 제약처럼 create 시점에 검사합니다.
    """

    def __init__(self, users: list[User] | None = None) -> None:
        self.users: dict[uuid.UUID, User] = {user.id: user for user in users or []}

    async def get_by_id(self, user_id: uuid.UUID) -> User | None:
        return self.users.get(user_id)

    async def get_by_external_id(self, external_id: str) -> User | None:
        return next((u for u in self.users.values() if u.external_id == external_id), None)

    async def exists_by_external_id(self, external_id: str) -> bool:
        return await self.get_by_external_id(external_id) is not None

    async def create(self, user: User) -> User:
        if await self.exists_by_external_id(user.external_id):
            raise UniqueViolationError(USERS_EXTERNAL_ID_CONSTRAINT)
        self.users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        self.users[user.id] = user
        return user

    async def delete(self, user: User) -> None:
        self.users.pop(user.id, None)


class InMemoryStarRatingGateway:
    """StarRatingQueryGateway in-memory 구현."""

    def __init__(self, ratings: list[StarRating] | None = None) -> None:
        self.ratings = list(ratings or [])

    async def list_by_user_id(self, user_id: uuid.UUID, page: PageRequest) -> list[StarRating]:
        owned = sorted(
            (r for r in self.ratings if r.user_id == user_id),
            key=lambda r: r.created_at,
            reverse=True,
        )
        return owned[page.offset : page.offset + page.size]


class FakeTransactionManager:
    """블록 종료 시 커밋, 예외 시 롤백 횟수를 기록합니다."""

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        try:
            yield
            await self.commit()
        except Exception:
            await self.rollback()
            raise

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


class FakePasswordHasher:
    """접두사 기반 PasswordHasher 대역."""

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


class FakeSocialInfoService:
    """토큰 → 소셜 ID 매핑을 가진 SocialInfoService 대역.

    매핑에 없는 토큰은 프로바이더 실패로 처리합니다.
    """

    def __init__(self, provider: AuthProvider, tokens: dict[str, str] | None = None) -> None:
        self.provider = provider
        self.tokens = dict(tokens or {})
        self.calls: list[str] = []

    async def get_social_id(self, access_token: str) -> str:
        self.calls.append(access_token)
        try:
            return self.tokens[access_token]
        except KeyError:
            raise SocialProviderError(self.provider.value, "invalid token") from None


class FakeTokenIssuer:
    """호출마다 다른 토큰을 발급하는 TokenIssuer 대역."""

    def __init__(self) -> None:
        self.issued: list[str] = []

    def create_token(self, user_id: uuid.UUID) -> str:
        token = f"token-{user_id}-{len(self.issued)}"
        self.issued.append(token)
        return token


def minutes_ago(minutes: int) -> datetime:
    """현재 시각 기준 n분 전."""
    return datetime.now(timezone.utc) - timedelta(minutes=minutes)
