"""Google Social Provider."""

from __future__ import annotations

from apps.identity.domain.enums.auth_provider import AuthProvider
from apps.identity.infrastructure.social.providers.base import SocialInfoProvider

GOOGLE_PROFILE_URL = "https://openidconnect.googleapis.com/v1/userinfo"


class GoogleSocialInfoService(SocialInfoProvider):
    """Google 소셜 ID 조회."""

    provider = AuthProvider.GOOGLE
    profile_url = GOOGLE_PROFILE_URL

    def extract_social_id(self, payload: dict) -> object:
        return payload.get("sub")
