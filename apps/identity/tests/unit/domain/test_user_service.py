"""UserService Tests."""

from __future__ import annotations

import uuid

from apps.identity.domain.enums import AuthProvider
from apps.identity.domain.services import ProfileFields, UserService
from apps.identity.domain.value_objects import SocialOrigin


class TestUserService:
    """UserService 테스트."""

    def test_create_local_user(self) -> None:
        fixed_id = uuid.uuid4()
        service = UserService(user_id_generator=lambda: fixed_id)

        user = service.create_local_user(
            external_id="cocoman",
            password_hash="hashed:pw",
            profile=ProfileFields(nickname="코코맨", age=20, push_token="push-1"),
        )

        assert user.id == fixed_id
        assert user.external_id == "cocoman"
        assert user.provider is AuthProvider.LOCAL
        assert user.password_hash == "hashed:pw"
        assert user.age == 20
        assert user.push_token == "push-1"
        assert user.created_at == user.updated_at

    def test_create_social_user(self) -> None:
        service = UserService()

        user = service.create_social_user(
            origin=SocialOrigin(AuthProvider.KAKAO),
            social_id="12345",
            profile=ProfileFields(nickname="카카오유저"),
        )

        assert user.external_id == "12345"
        assert user.provider is AuthProvider.KAKAO
        assert user.password_hash is None

    def test_generates_distinct_ids(self) -> None:
        service = UserService()
        profile = ProfileFields(nickname="n")

        first = service.create_local_user(external_id="a", password_hash="h", profile=profile)
        second = service.create_local_user(external_id="b", password_hash="h", profile=profile)

        assert first.id != second.id
