"""AuthProvider Enum."""

from __future__ import annotations

from enum import Enum


class AuthProvider(str, Enum):
    """계정 출처 (인증 프로바이더).

    LOCAL은 아이디/비밀번호 기반 계정이고,
    나머지는 소셜 프로바이더에 인증을 위임하는 계정입니다.
    """

    LOCAL = "local"
    KAKAO = "kakao"
    NAVER = "naver"
    GOOGLE = "google"

    @property
    def is_social(self) -> bool:
        return self is not AuthProvider.LOCAL
