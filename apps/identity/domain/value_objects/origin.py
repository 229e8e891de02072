"""Origin Value Object.

계정 출처를 닫힌 변형 집합 {LocalOrigin, SocialOrigin(provider)}으로 표현합니다.
가입/로그인 분기는 이 타입에 대한 match 문으로만 이루어집니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from apps.identity.domain.enums.auth_provider import AuthProvider
from apps.identity.domain.exceptions.provider import UnsupportedProviderError


@dataclass(frozen=True, slots=True)
class LocalOrigin:
    """아이디/비밀번호 기반 계정."""

    @property
    def provider(self) -> AuthProvider:
        return AuthProvider.LOCAL


@dataclass(frozen=True, slots=True)
class SocialOrigin:
    """소셜 프로바이더 위임 계정."""

    provider: AuthProvider

    def __post_init__(self) -> None:
        if not self.provider.is_social:
            raise UnsupportedProviderError(self.provider.value)


Origin: TypeAlias = LocalOrigin | SocialOrigin


def parse_origin(tag: str | AuthProvider | None) -> Origin:
    """프로바이더 태그를 Origin으로 변환합니다.

    Raises:
        UnsupportedProviderError: 알 수 없는 태그
    """
    if isinstance(tag, AuthProvider):
        provider = tag
    else:
        try:
            provider = AuthProvider((tag or "").strip().lower())
        except ValueError:
            raise UnsupportedProviderError(tag) from None

    if provider is AuthProvider.LOCAL:
        return LocalOrigin()
    return SocialOrigin(provider=provider)
