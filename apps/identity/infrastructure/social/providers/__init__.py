"""Social Providers.

각 소셜 프로바이더 구현체입니다.
"""

from apps.identity.infrastructure.social.providers.base import SocialInfoProvider
from apps.identity.infrastructure.social.providers.google import GoogleSocialInfoService
from apps.identity.infrastructure.social.providers.kakao import KakaoSocialInfoService
from apps.identity.infrastructure.social.providers.naver import NaverSocialInfoService

__all__ = [
    "SocialInfoProvider",
    "GoogleSocialInfoService",
    "KakaoSocialInfoService",
    "NaverSocialInfoService",
]
