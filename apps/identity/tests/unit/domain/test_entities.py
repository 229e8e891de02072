"""Domain Entity Tests."""

from __future__ import annotations

from datetime import timedelta

from apps.identity.domain.enums import AuthProvider
from apps.identity.domain.value_objects import LocalOrigin, SocialOrigin
from apps.identity.tests.unit.factories import create_user


class TestUser:
    """User 엔티티 테스트."""

    def test_origin_of_local_user(self) -> None:
        user = create_user()
        assert user.origin == LocalOrigin()
        assert user.is_local

    def test_origin_of_social_user(self) -> None:
        user = create_user(provider=AuthProvider.NAVER, external_id="naver-1")
        assert user.origin == SocialOrigin(AuthProvider.NAVER)
        assert not user.is_local
        assert user.password_hash is None

    def test_update_profile_replaces_all_fields(self) -> None:
        """선택 필드는 None으로도 교체된다."""
        user = create_user()
        user.age = 30
        user.gender = "F"
        user.push_token = "push-1"
        user.updated_at -= timedelta(minutes=5)
        before = user.updated_at

        user.update_profile(
            nickname="새닉네임",
            age=None,
            gender=None,
            phone_number="010-0000-0000",
            profile_image_url=None,
        )

        assert user.nickname == "새닉네임"
        assert user.age is None
        assert user.gender is None
        assert user.phone_number == "010-0000-0000"
        assert user.updated_at > before

    def test_update_profile_keeps_identity_fields(self) -> None:
        user = create_user(external_id="cocoman", password_hash="hashed:pw")
        user.push_token = "push-1"

        user.update_profile(
            nickname="x", age=1, gender=None, phone_number=None, profile_image_url=None
        )

        assert user.external_id == "cocoman"
        assert user.provider is AuthProvider.LOCAL
        assert user.password_hash == "hashed:pw"
        assert user.push_token == "push-1"

    def test_repr_hides_password_hash(self) -> None:
        user = create_user(password_hash="hashed:pw")
        assert "hashed:pw" not in repr(user)
