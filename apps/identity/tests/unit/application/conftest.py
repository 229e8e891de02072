"""Application layer fixtures."""

from __future__ import annotations

import pytest

from apps.identity.application.commands import (
    CreateUserInteractor,
    DeleteUserInteractor,
    SignInInteractor,
    UpdateUserInteractor,
)
from apps.identity.application.identity.services import PasswordValidator
from apps.identity.application.queries import ValidateUserIdQuery
from apps.identity.application.social.services import SocialIdentityResolver
from apps.identity.domain.enums import AuthProvider
from apps.identity.domain.services import UserService
from apps.identity.tests.unit.factories import (
    FakePasswordHasher,
    FakeSocialInfoService,
    FakeTokenIssuer,
    FakeTransactionManager,
    InMemoryUsersGateway,
)


@pytest.fixture
def users_gateway() -> InMemoryUsersGateway:
    return InMemoryUsersGateway()


@pytest.fixture
def transaction_manager() -> FakeTransactionManager:
    return FakeTransactionManager()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def kakao_service() -> FakeSocialInfoService:
    return FakeSocialInfoService(AuthProvider.KAKAO, {"kakao-token": "kakao-42"})


@pytest.fixture
def naver_service() -> FakeSocialInfoService:
    return FakeSocialInfoService(AuthProvider.NAVER, {"naver-token": "naver-7"})


@pytest.fixture
def resolver(
    kakao_service: FakeSocialInfoService,
    naver_service: FakeSocialInfoService,
) -> SocialIdentityResolver:
    """google은 등록하지 않음."""
    return SocialIdentityResolver([kakao_service, naver_service])


@pytest.fixture
def token_issuer() -> FakeTokenIssuer:
    return FakeTokenIssuer()


@pytest.fixture
def create_interactor(
    users_gateway: InMemoryUsersGateway,
    password_hasher: FakePasswordHasher,
    resolver: SocialIdentityResolver,
    transaction_manager: FakeTransactionManager,
) -> CreateUserInteractor:
    return CreateUserInteractor(
        user_service=UserService(),
        user_command_gateway=users_gateway,
        validate_user_id=ValidateUserIdQuery(users_gateway),
        password_hasher=password_hasher,
        social_identity_resolver=resolver,
        transaction_manager=transaction_manager,
    )


@pytest.fixture
def sign_in_interactor(
    users_gateway: InMemoryUsersGateway,
    password_hasher: FakePasswordHasher,
    resolver: SocialIdentityResolver,
    token_issuer: FakeTokenIssuer,
) -> SignInInteractor:
    return SignInInteractor(
        user_query_gateway=users_gateway,
        password_validator=PasswordValidator(password_hasher),
        social_identity_resolver=resolver,
        token_issuer=token_issuer,
    )


@pytest.fixture
def update_interactor(
    users_gateway: InMemoryUsersGateway,
    transaction_manager: FakeTransactionManager,
) -> UpdateUserInteractor:
    return UpdateUserInteractor(
        user_query_gateway=users_gateway,
        user_command_gateway=users_gateway,
        transaction_manager=transaction_manager,
    )


@pytest.fixture
def delete_interactor(
    users_gateway: InMemoryUsersGateway,
    transaction_manager: FakeTransactionManager,
) -> DeleteUserInteractor:
    return DeleteUserInteractor(
        user_query_gateway=users_gateway,
        user_command_gateway=users_gateway,
        transaction_manager=transaction_manager,
    )
