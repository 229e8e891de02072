"""Dependency injection setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from apps.identity.application.commands import (
    CreateUserInteractor,
    DeleteUserInteractor,
    SignInInteractor,
    UpdateUserInteractor,
)
from apps.identity.application.identity.services import PasswordValidator
from apps.identity.application.queries import (
    GetStarRatingsQuery,
    GetUserQuery,
    ValidateUserIdQuery,
)
from apps.identity.application.social.services import SocialIdentityResolver
from apps.identity.domain.services import UserService
from apps.identity.infrastructure.persistence_postgres.adapters import (
    SqlaStarRatingQueryGateway,
    SqlaTransactionManager,
    SqlaUsersCommandGateway,
    SqlaUsersQueryGateway,
)
from apps.identity.infrastructure.persistence_postgres.session import get_db_session
from apps.identity.infrastructure.security import JwtTokenService, PasslibPasswordHasher
from apps.identity.setup.config import Settings, get_settings

# Type alias for dependency injection
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# ============================================================
# Service Dependencies
# ============================================================


def get_user_service() -> UserService:
    """UserService 인스턴스를 반환합니다."""
    return UserService()


def get_password_hasher() -> PasslibPasswordHasher:
    """PasswordHasher 인스턴스를 반환합니다."""
    return PasslibPasswordHasher()


@lru_cache
def get_password_validator() -> PasswordValidator:
    """PasswordValidator 인스턴스를 반환합니다.

    더미 해시 생성 비용 때문에 프로세스당 한 번만 만듭니다.
    """
    return PasswordValidator(get_password_hasher())


def get_token_issuer(settings: SettingsDep) -> JwtTokenService:
    """TokenIssuer 인스턴스를 반환합니다."""
    return JwtTokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        access_token_expire_minutes=settings.access_token_exp_minutes,
    )


def get_social_identity_resolver(request: Request) -> SocialIdentityResolver:
    """애플리케이션 시작 시 구성된 SocialIdentityResolver를 반환합니다."""
    return request.app.state.social_identity_resolver


# ============================================================
# Queries
# ============================================================


def get_validate_user_id_query(session: SessionDep) -> ValidateUserIdQuery:
    """ValidateUserIdQuery 인스턴스를 반환합니다."""
    return ValidateUserIdQuery(user_query_gateway=SqlaUsersQueryGateway(session))


def get_get_user_query(session: SessionDep) -> GetUserQuery:
    """GetUserQuery 인스턴스를 반환합니다."""
    return GetUserQuery(user_query_gateway=SqlaUsersQueryGateway(session))


def get_get_star_ratings_query(session: SessionDep) -> GetStarRatingsQuery:
    """GetStarRatingsQuery 인스턴스를 반환합니다."""
    return GetStarRatingsQuery(star_rating_gateway=SqlaStarRatingQueryGateway(session))


# ============================================================
# Commands
# ============================================================


def get_create_user_interactor(
    session: SessionDep,
    user_service: UserService = Depends(get_user_service),
    password_hasher: PasslibPasswordHasher = Depends(get_password_hasher),
    resolver: SocialIdentityResolver = Depends(get_social_identity_resolver),
) -> CreateUserInteractor:
    """CreateUserInteractor 인스턴스를 반환합니다."""
    return CreateUserInteractor(
        user_service=user_service,
        user_command_gateway=SqlaUsersCommandGateway(session),
        validate_user_id=ValidateUserIdQuery(user_query_gateway=SqlaUsersQueryGateway(session)),
        password_hasher=password_hasher,
        social_identity_resolver=resolver,
        transaction_manager=SqlaTransactionManager(session),
    )


def get_sign_in_interactor(
    session: SessionDep,
    password_validator: PasswordValidator = Depends(get_password_validator),
    resolver: SocialIdentityResolver = Depends(get_social_identity_resolver),
    token_issuer: JwtTokenService = Depends(get_token_issuer),
) -> SignInInteractor:
    """SignInInteractor 인스턴스를 반환합니다."""
    return SignInInteractor(
        user_query_gateway=SqlaUsersQueryGateway(session),
        password_validator=password_validator,
        social_identity_resolver=resolver,
        token_issuer=token_issuer,
    )


def get_update_user_interactor(session: SessionDep) -> UpdateUserInteractor:
    """UpdateUserInteractor 인스턴스를 반환합니다."""
    return UpdateUserInteractor(
        user_query_gateway=SqlaUsersQueryGateway(session),
        user_command_gateway=SqlaUsersCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_delete_user_interactor(session: SessionDep) -> DeleteUserInteractor:
    """DeleteUserInteractor 인스턴스를 반환합니다."""
    return DeleteUserInteractor(
        user_query_gateway=SqlaUsersQueryGateway(session),
        user_command_gateway=SqlaUsersCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )
