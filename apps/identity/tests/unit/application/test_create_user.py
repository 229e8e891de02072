"""CreateUserInteractor Tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from apps.identity.application.commands import CreateUserInteractor
from apps.identity.application.common.exceptions import UniqueViolationError
from apps.identity.application.identity.dto import UserCreateRequest
from apps.identity.application.identity.exceptions import MissingCredentialError
from apps.identity.application.queries import GetUserQuery, ValidateUserIdQuery
from apps.identity.application.social.exceptions import (
    SocialProviderError,
    SocialProviderNotConfiguredError,
)
from apps.identity.application.social.services import SocialIdentityResolver
from apps.identity.domain.enums import AuthProvider
from apps.identity.domain.exceptions import UnsupportedProviderError, UserAlreadyExistsError
from apps.identity.domain.services import UserService
from apps.identity.tests.unit.factories import (
    FakePasswordHasher,
    FakeSocialInfoService,
    FakeTransactionManager,
    InMemoryUsersGateway,
    create_user,
)


def local_request(**overrides) -> UserCreateRequest:
    fields = {
        "provider": "local",
        "external_id": "cocoman",
        "password": "secret",
        "nickname": "코코맨",
        "age": 27,
        "push_token": "push-1",
    }
    fields.update(overrides)
    return UserCreateRequest(**fields)


class TestCreateLocalUser:
    """로컬 가입 테스트."""

    @pytest.mark.asyncio
    async def test_creates_user_with_hashed_password(
        self,
        create_interactor: CreateUserInteractor,
        users_gateway: InMemoryUsersGateway,
        transaction_manager: FakeTransactionManager,
    ) -> None:
        result = await create_interactor.execute(local_request())

        assert result.external_id == "cocoman"
        assert result.provider == "local"
        assert result.nickname == "코코맨"
        assert result.push_token == "push-1"
        assert not hasattr(result, "password_hash")

        stored = users_gateway.users[result.id]
        assert stored.password_hash == "hashed:secret"
        assert transaction_manager.commits == 1

    @pytest.mark.asyncio
    async def test_duplicate_external_id(
        self,
        create_interactor: CreateUserInteractor,
        users_gateway: InMemoryUsersGateway,
        transaction_manager: FakeTransactionManager,
    ) -> None:
        await create_interactor.execute(local_request())

        with pytest.raises(UserAlreadyExistsError):
            await create_interactor.execute(local_request(nickname="다른사람"))

        assert len(users_gateway.users) == 1
        assert transaction_manager.rollbacks == 1

    @pytest.mark.asyncio
    async def test_duplicate_of_social_external_id(
        self,
        create_interactor: CreateUserInteractor,
        users_gateway: InMemoryUsersGateway,
    ) -> None:
        """출처가 달라도 external_id는 전역 유일."""
        social = create_user(external_id="kakao-42", provider=AuthProvider.KAKAO)
        users_gateway.users[social.id] = social

        with pytest.raises(UserAlreadyExistsError):
            await create_interactor.execute(local_request(external_id="kakao-42"))

    @pytest.mark.asyncio
    async def test_lost_uniqueness_race_is_already_exists(
        self,
        users_gateway: InMemoryUsersGateway,
        transaction_manager: FakeTransactionManager,
    ) -> None:
        """사전 확인을 통과해도 저장 시 유니크 위반이면 ALREADY_EXISTS."""
        command_gateway = AsyncMock()
        command_gateway.create.side_effect = UniqueViolationError("uq_identity_users_external_id")
        interactor = CreateUserInteractor(
            user_service=UserService(),
            user_command_gateway=command_gateway,
            validate_user_id=ValidateUserIdQuery(users_gateway),
            password_hasher=FakePasswordHasher(),
            social_identity_resolver=SocialIdentityResolver([]),
            transaction_manager=transaction_manager,
        )

        with pytest.raises(UserAlreadyExistsError):
            await interactor.execute(local_request())

        assert transaction_manager.rollbacks == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["external_id", "password"])
    async def test_missing_credentials(
        self,
        create_interactor: CreateUserInteractor,
        missing: str,
    ) -> None:
        with pytest.raises(MissingCredentialError):
            await create_interactor.execute(local_request(**{missing: None}))


class TestCreateSocialUser:
    """소셜 가입 테스트."""

    @pytest.mark.asyncio
    async def test_creates_user_keyed_by_social_id(
        self,
        create_interactor: CreateUserInteractor,
        users_gateway: InMemoryUsersGateway,
        kakao_service: FakeSocialInfoService,
    ) -> None:
        result = await create_interactor.execute(
            UserCreateRequest(provider="kakao", access_token="kakao-token", nickname="카카오")
        )

        assert result.external_id == "kakao-42"
        assert result.provider == "kakao"
        assert users_gateway.users[result.id].password_hash is None
        assert kakao_service.calls == ["kakao-token"]

    @pytest.mark.asyncio
    async def test_ignores_supplied_external_id(
        self,
        create_interactor: CreateUserInteractor,
    ) -> None:
        """소셜 가입의 외부 ID는 항상 프로바이더가 정한다."""
        result = await create_interactor.execute(
            UserCreateRequest(
                provider="naver",
                access_token="naver-token",
                external_id="my-own-id",
                password="ignored",
                nickname="네이버",
            )
        )

        assert result.external_id == "naver-7"

    @pytest.mark.asyncio
    async def test_second_signup_with_same_social_id(
        self,
        create_interactor: CreateUserInteractor,
    ) -> None:
        request = UserCreateRequest(provider="kakao", access_token="kakao-token", nickname="n")
        await create_interactor.execute(request)

        with pytest.raises(UserAlreadyExistsError):
            await create_interactor.execute(request)

    @pytest.mark.asyncio
    async def test_provider_failure_creates_nothing(
        self,
        create_interactor: CreateUserInteractor,
        users_gateway: InMemoryUsersGateway,
        transaction_manager: FakeTransactionManager,
    ) -> None:
        with pytest.raises(SocialProviderError):
            await create_interactor.execute(
                UserCreateRequest(provider="kakao", access_token="bad", nickname="n")
            )

        assert users_gateway.users == {}
        assert transaction_manager.commits == 0

    @pytest.mark.asyncio
    async def test_missing_access_token(self, create_interactor: CreateUserInteractor) -> None:
        with pytest.raises(MissingCredentialError):
            await create_interactor.execute(UserCreateRequest(provider="kakao", nickname="n"))

    @pytest.mark.asyncio
    async def test_provider_not_configured(self, create_interactor: CreateUserInteractor) -> None:
        with pytest.raises(SocialProviderNotConfiguredError):
            await create_interactor.execute(
                UserCreateRequest(provider="google", access_token="t", nickname="n")
            )

    @pytest.mark.asyncio
    async def test_unsupported_provider(
        self,
        create_interactor: CreateUserInteractor,
        users_gateway: InMemoryUsersGateway,
    ) -> None:
        with pytest.raises(UnsupportedProviderError):
            await create_interactor.execute(
                UserCreateRequest(provider="facebook", access_token="t", nickname="n")
            )

        assert users_gateway.users == {}


class TestCreateThenLookup:
    """가입 후 조회 결과 일치."""

    @pytest.mark.asyncio
    async def test_local_create_then_get(
        self,
        create_interactor: CreateUserInteractor,
        users_gateway: InMemoryUsersGateway,
    ) -> None:
        created = await create_interactor.execute(
            local_request(gender="M", phone_number="010-1234-5678", profile_image_url="https://img")
        )

        found = await GetUserQuery(users_gateway).execute(created.id)

        assert found == created
        assert (found.nickname, found.age, found.gender) == ("코코맨", 27, "M")
        assert found.phone_number == "010-1234-5678"
        assert found.profile_image_url == "https://img"
        assert found.push_token == "push-1"
        stored_hash = users_gateway.users[created.id].password_hash
        assert stored_hash is not None
        assert stored_hash != "secret"
