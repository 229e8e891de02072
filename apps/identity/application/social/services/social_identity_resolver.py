"""SocialIdentityResolver - 소셜 프로바이더 선택 및 소셜 ID 조회 서비스.

"연주자" 역할: 프로바이더 태그로 구현체를 골라 액세스 토큰을 소셜 ID로 교환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Mapping

from apps.identity.application.social.exceptions import SocialProviderNotConfiguredError

if TYPE_CHECKING:
    from apps.identity.application.social.ports import SocialInfoService
    from apps.identity.domain.enums.auth_provider import AuthProvider

logger = logging.getLogger(__name__)


class SocialIdentityResolver:
    """프로바이더별 SocialInfoService 레지스트리.

    애플리케이션 시작 시 한 번 구성되며, 호출 시점에 태그로 구현체를 선택합니다.
    """

    def __init__(self, services: Iterable["SocialInfoService"]) -> None:
        self._services: Mapping["AuthProvider", "SocialInfoService"] = {
            service.provider: service for service in services
        }

    @property
    def providers(self) -> frozenset["AuthProvider"]:
        return frozenset(self._services)

    def supply(self, provider: "AuthProvider") -> "SocialInfoService":
        """프로바이더 구현체를 반환합니다.

        Raises:
            SocialProviderNotConfiguredError: 등록되지 않은 프로바이더
        """
        service = self._services.get(provider)
        if service is None:
            logger.error(
                "Social provider requested but not registered",
                extra={"provider": provider.value},
            )
            raise SocialProviderNotConfiguredError(provider.value)
        return service

    async def resolve(self, provider: "AuthProvider", access_token: str) -> str:
        """액세스 토큰을 소셜 ID로 교환합니다.

        Raises:
            SocialProviderNotConfiguredError: 등록되지 않은 프로바이더
            SocialProviderError: 프로바이더 통신 실패
        """
        service = self.supply(provider)
        social_id = await service.get_social_id(access_token)
        logger.debug("Social identity resolved", extra={"provider": provider.value})
        return social_id
