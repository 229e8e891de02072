"""Naver Social Provider."""

from __future__ import annotations

from apps.identity.domain.enums.auth_provider import AuthProvider
from apps.identity.infrastructure.social.providers.base import SocialInfoProvider

NAVER_PROFILE_URL = "https://openapi.naver.com/v1/nid/me"


class NaverSocialInfoService(SocialInfoProvider):
    """Naver 소셜 ID 조회."""

    provider = AuthProvider.NAVER
    profile_url = NAVER_PROFILE_URL

    def extract_social_id(self, payload: dict) -> object:
        response_data = payload.get("response")
        if not isinstance(response_data, dict):
            return None
        return response_data.get("id")
