"""Social provider registry.

설정에 활성화된 프로바이더만 SocialIdentityResolver에 등록합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.identity.application.social.services import SocialIdentityResolver
from apps.identity.domain.enums.auth_provider import AuthProvider
from apps.identity.domain.exceptions import UnsupportedProviderError
from apps.identity.infrastructure.social.providers import (
    GoogleSocialInfoService,
    KakaoSocialInfoService,
    NaverSocialInfoService,
    SocialInfoProvider,
)

if TYPE_CHECKING:
    from apps.identity.setup.config import Settings

logger = logging.getLogger(__name__)

PROVIDER_CLASSES: dict[AuthProvider, type[SocialInfoProvider]] = {
    AuthProvider.KAKAO: KakaoSocialInfoService,
    AuthProvider.NAVER: NaverSocialInfoService,
    AuthProvider.GOOGLE: GoogleSocialInfoService,
}


def build_social_identity_resolver(settings: "Settings") -> SocialIdentityResolver:
    """설정으로부터 SocialIdentityResolver를 구성합니다.

    Raises:
        UnsupportedProviderError: 설정에 알 수 없는 프로바이더가 있음
    """
    services: list[SocialInfoProvider] = []
    for tag in settings.enabled_social_providers:
        try:
            provider = AuthProvider(tag)
        except ValueError:
            raise UnsupportedProviderError(tag) from None
        provider_class = PROVIDER_CLASSES.get(provider)
        if provider_class is None:
            raise UnsupportedProviderError(tag)
        services.append(provider_class(timeout_seconds=settings.social_timeout_seconds))

    logger.info(
        "Social providers registered",
        extra={"providers": [service.provider.value for service in services]},
    )
    return SocialIdentityResolver(services)
