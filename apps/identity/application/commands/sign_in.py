"""SignIn Command.

로그인 Use Case입니다. 성공 시 매번 새 액세스 토큰을 발급합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, assert_never

from apps.identity.application.identity.dto import SignInResult, UserResult, UserSignInRequest
from apps.identity.application.identity.exceptions import (
    MissingCredentialError,
    SignInMismatchError,
)
from apps.identity.domain.value_objects import LocalOrigin, SocialOrigin, parse_origin

if TYPE_CHECKING:
    from apps.identity.application.identity.ports import TokenIssuer, UserQueryGateway
    from apps.identity.application.identity.services import PasswordValidator
    from apps.identity.application.social.services import SocialIdentityResolver
    from apps.identity.domain.entities.user import User

logger = logging.getLogger(__name__)


class SignInInteractor:
    """로그인 Interactor.

    1. 조회 키 결정 (로컬: 아이디, 소셜: 액세스 토큰 → 소셜 ID)
    2. 외부 ID로 계정 조회
    3. 로컬이면 비밀번호 검증
    4. 토큰 발급

    계정 없음과 비밀번호 불일치는 모두 SignInMismatchError입니다.
    """

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        password_validator: "PasswordValidator",
        social_identity_resolver: "SocialIdentityResolver",
        token_issuer: "TokenIssuer",
    ) -> None:
        self._user_query_gateway = user_query_gateway
        self._password_validator = password_validator
        self._social_identity_resolver = social_identity_resolver
        self._token_issuer = token_issuer

    async def execute(self, request: UserSignInRequest) -> SignInResult:
        """로그인을 처리합니다.

        Raises:
            UnsupportedProviderError: 알 수 없는 프로바이더
            MissingCredentialError: 출처별 필수 입력 누락
            SignInMismatchError: 계정 없음 또는 비밀번호 불일치
            SocialProviderNotConfiguredError: 프로바이더 미등록
            SocialProviderError: 프로바이더 통신 실패
        """
        origin = parse_origin(request.provider)

        match origin:
            case LocalOrigin():
                user = await self._authenticate_local(request)
            case SocialOrigin():
                user = await self._authenticate_social(origin, request)
            case _:
                assert_never(origin)

        access_token = self._token_issuer.create_token(user.id)

        logger.info(
            "Sign-in successful",
            extra={"user_id": str(user.id), "provider": user.provider.value},
        )
        return SignInResult(user=UserResult.from_entity(user), access_token=access_token)

    async def _authenticate_local(self, request: UserSignInRequest) -> "User":
        if not request.external_id:
            raise MissingCredentialError("external_id")
        if request.password is None:
            raise MissingCredentialError("password")

        user = await self._user_query_gateway.get_by_external_id(request.external_id)
        if user is None or not user.is_local:
            self._password_validator.reject(request.password)
        self._password_validator.validate(user, request.password)
        return user

    async def _authenticate_social(
        self, origin: SocialOrigin, request: UserSignInRequest
    ) -> "User":
        if not request.access_token:
            raise MissingCredentialError("access_token")

        social_id = await self._social_identity_resolver.resolve(
            origin.provider, request.access_token
        )
        # 출처가 다른 계정(예: 같은 ID의 로컬 계정)으로는 로그인할 수 없음
        user = await self._user_query_gateway.get_by_external_id(social_id)
        if user is None or user.origin != origin:
            raise SignInMismatchError()
        return user
