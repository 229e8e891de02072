"""TokenIssuer Port.

인증된 계정에 대한 Bearer 토큰 발급 인터페이스입니다.
"""

from typing import Protocol
from uuid import UUID


class TokenIssuer(Protocol):
    """토큰 발급자 인터페이스.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    def create_token(self, user_id: UUID) -> str:
        """액세스 토큰 발급.

        Args:
            user_id: 계정 내부 ID

        Returns:
            불투명 Bearer 토큰 (호출마다 새로 발급)
        """
        ...
