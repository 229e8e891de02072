"""Kakao Social Provider."""

from __future__ import annotations

from apps.identity.domain.enums.auth_provider import AuthProvider
from apps.identity.infrastructure.social.providers.base import SocialInfoProvider

KAKAO_PROFILE_URL = "https://kapi.kakao.com/v2/user/me"


class KakaoSocialInfoService(SocialInfoProvider):
    """Kakao 소셜 ID 조회."""

    provider = AuthProvider.KAKAO
    profile_url = KAKAO_PROFILE_URL

    def extract_social_id(self, payload: dict) -> object:
        # 카카오 회원번호는 정수
        return payload.get("id")
