"""CreateUser Command.

가입 Use Case입니다. 계정 출처(로컬/소셜)에 따라 분기합니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator, assert_never

from apps.identity.application.common.exceptions import UniqueViolationError
from apps.identity.application.identity.dto import UserCreateRequest, UserResult
from apps.identity.application.identity.exceptions import MissingCredentialError
from apps.identity.domain.exceptions import UserAlreadyExistsError
from apps.identity.domain.services import ProfileFields
from apps.identity.domain.value_objects import LocalOrigin, SocialOrigin, parse_origin

if TYPE_CHECKING:
    from apps.identity.application.common.ports import TransactionManager
    from apps.identity.application.identity.ports import PasswordHasher, UserCommandGateway
    from apps.identity.application.queries import ValidateUserIdQuery
    from apps.identity.application.social.services import SocialIdentityResolver
    from apps.identity.domain.entities.user import User
    from apps.identity.domain.services import UserService

logger = logging.getLogger(__name__)


class CreateUserInteractor:
    """가입 Interactor.

    로컬:
        1. 아이디 중복 확인
        2. 비밀번호 해시
        3. 계정 저장
    소셜:
        1. 액세스 토큰 → 소셜 ID 교환 (트랜잭션 밖)
        2. 계정 저장 (중복은 저장소 유니크 제약에 맡김)
    """

    def __init__(
        self,
        user_service: "UserService",
        user_command_gateway: "UserCommandGateway",
        validate_user_id: "ValidateUserIdQuery",
        password_hasher: "PasswordHasher",
        social_identity_resolver: "SocialIdentityResolver",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_service = user_service
        self._user_command_gateway = user_command_gateway
        self._validate_user_id = validate_user_id
        self._password_hasher = password_hasher
        self._social_identity_resolver = social_identity_resolver
        self._tx = transaction_manager

    async def execute(self, request: UserCreateRequest) -> UserResult:
        """계정을 생성합니다.

        Raises:
            UnsupportedProviderError: 알 수 없는 프로바이더
            MissingCredentialError: 출처별 필수 입력 누락
            UserAlreadyExistsError: 외부 ID 중복
            SocialProviderNotConfiguredError: 프로바이더 미등록
            SocialProviderError: 프로바이더 통신 실패
        """
        origin = parse_origin(request.provider)
        profile = ProfileFields(
            nickname=request.nickname,
            age=request.age,
            gender=request.gender,
            phone_number=request.phone_number,
            profile_image_url=request.profile_image_url,
            push_token=request.push_token,
        )

        match origin:
            case LocalOrigin():
                user = await self._create_local(request, profile)
            case SocialOrigin():
                user = await self._create_social(origin, request, profile)
            case _:
                assert_never(origin)

        logger.info(
            "User created",
            extra={"user_id": str(user.id), "provider": user.provider.value},
        )
        return UserResult.from_entity(user)

    async def _create_local(self, request: UserCreateRequest, profile: ProfileFields) -> "User":
        if not request.external_id:
            raise MissingCredentialError("external_id")
        if not request.password:
            raise MissingCredentialError("password")

        async with self._creating(request.external_id):
            await self._validate_user_id.execute(request.external_id)
            user = self._user_service.create_local_user(
                external_id=request.external_id,
                password_hash=self._password_hasher.hash(request.password),
                profile=profile,
            )
            return await self._user_command_gateway.create(user)

    async def _create_social(
        self,
        origin: SocialOrigin,
        request: UserCreateRequest,
        profile: ProfileFields,
    ) -> "User":
        if not request.access_token:
            raise MissingCredentialError("access_token")

        social_id = await self._social_identity_resolver.resolve(
            origin.provider, request.access_token
        )

        async with self._creating(social_id):
            user = self._user_service.create_social_user(
                origin=origin,
                social_id=social_id,
                profile=profile,
            )
            return await self._user_command_gateway.create(user)

    @asynccontextmanager
    async def _creating(self, external_id: str) -> AsyncIterator[None]:
        """저장 트랜잭션. 유니크 제약 위반은 UserAlreadyExistsError로 바꿉니다."""
        try:
            async with self._tx.begin():
                yield
        except UniqueViolationError as e:
            logger.info("User creation lost uniqueness race", extra={"constraint": e.constraint})
            raise UserAlreadyExistsError(external_id) from e
