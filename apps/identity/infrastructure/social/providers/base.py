"""Social Provider Base Class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import httpx

from apps.identity.application.social.exceptions import SocialProviderError

if TYPE_CHECKING:
    from apps.identity.domain.enums.auth_provider import AuthProvider

logger = logging.getLogger(__name__)


class SocialInfoProvider(ABC):
    """소셜 프로바이더 추상 클래스.

    SocialInfoService 구현체의 공통 부분(HTTP 클라이언트, 오류 변환)을 담당합니다.
    """

    provider: "AuthProvider"
    profile_url: str

    def __init__(
        self,
        *,
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            timeout_seconds: HTTP 클라이언트 타임아웃 (설정에서 주입)
            transport: 테스트용 httpx 트랜스포트 (선택)
        """
        self._timeout = timeout_seconds
        self._transport = transport

    async def get_social_id(self, access_token: str) -> str:
        """액세스 토큰으로 소셜 ID 조회.

        Raises:
            SocialProviderError: 네트워크 오류, 비정상 응답, ID 누락
        """
        name = self.provider.value
        headers = {"Authorization": f"Bearer {access_token}"}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(self.profile_url, headers=headers)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Social API error: {name} {e.response.status_code}")
            raise SocialProviderError(name, f"API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Social request failed: {name} {e}")
            raise SocialProviderError(name, str(e)) from e
        except ValueError as e:
            raise SocialProviderError(name, "Invalid JSON response") from e

        if not isinstance(payload, dict):
            raise SocialProviderError(name, "Unexpected profile response")

        social_id = self.extract_social_id(payload)
        if social_id is None:
            raise SocialProviderError(name, "Missing subject id in profile response")
        # bool은 int의 하위 타입이므로 따로 거름
        if isinstance(social_id, bool) or not isinstance(social_id, (str, int)):
            raise SocialProviderError(name, "Unexpected profile response")
        social_id = str(social_id).strip()
        if not social_id:
            raise SocialProviderError(name, "Missing subject id in profile response")
        return social_id

    @abstractmethod
    def extract_social_id(self, payload: dict) -> object:
        """프로필 응답에서 사용자 식별자 추출.

        문자열 또는 정수가 아닌 값은 호출 측에서 실패로 처리합니다.
        """
        raise NotImplementedError
