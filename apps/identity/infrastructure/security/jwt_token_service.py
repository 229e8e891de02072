"""JWT Token Service.

TokenIssuer 포트의 구현체입니다.
"""

from __future__ import annotations

import time
import uuid
from datetime import timedelta
from typing import Any

from jose import jwt


class JwtTokenService:
    """JWT 토큰 서비스.

    TokenIssuer 구현체. 호출마다 새 jti를 발급하므로 같은 사용자라도 토큰이 매번 다릅니다.
    """

    token_type = "access"

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "identity-api",
        audience: str = "api",
        access_token_expire_minutes: int = 60 * 24,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._access_token_expire = timedelta(minutes=access_token_expire_minutes)

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def create_token(self, user_id: uuid.UUID) -> str:
        """액세스 토큰 발급."""
        now = self._now_timestamp()
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "jti": str(uuid.uuid4()),
            "type": self.token_type,
            "exp": now + int(self._access_token_expire.total_seconds()),
            "iat": now,
            "nbf": now,
            "iss": self._issuer,
            "aud": self._audience,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
