"""SocialInfoService Port.

소셜 프로바이더 액세스 토큰을 subject id로 교환하는 인터페이스입니다.
"""

from typing import Protocol

from apps.identity.domain.enums.auth_provider import AuthProvider


class SocialInfoService(Protocol):
    """프로바이더별 소셜 ID 조회 인터페이스.

    구현체:
        - KakaoSocialInfoService
        - NaverSocialInfoService
        - GoogleSocialInfoService
    """

    provider: AuthProvider

    async def get_social_id(self, access_token: str) -> str:
        """액세스 토큰으로 프로바이더의 사용자 식별자를 조회합니다.

        Raises:
            SocialProviderError: 프로바이더 통신 실패
        """
        ...
