"""PasswordValidator - 로컬 계정 비밀번호 검증 서비스."""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING, NoReturn

from apps.identity.application.identity.exceptions import SignInMismatchError

if TYPE_CHECKING:
    from apps.identity.application.identity.ports import PasswordHasher
    from apps.identity.domain.entities.user import User


class PasswordValidator:
    """저장된 해시와 입력 비밀번호를 비교합니다.

    비교는 항상 PasswordHasher.verify에 위임합니다.
    검증할 계정이 없을 때도 더미 해시로 verify를 수행해
    계정 존재 여부가 응답 시간으로 드러나지 않게 합니다.
    """

    def __init__(self, password_hasher: "PasswordHasher") -> None:
        self._password_hasher = password_hasher
        self._dummy_hash = password_hasher.hash(secrets.token_urlsafe(32))

    def validate(self, user: "User", password: str) -> None:
        """비밀번호를 검증합니다.

        Raises:
            SignInMismatchError: 해시가 없거나 비밀번호 불일치
        """
        if not user.password_hash:
            self.reject(password)
        if not self._password_hasher.verify(password, user.password_hash):
            raise SignInMismatchError()

    def reject(self, password: str) -> NoReturn:
        """더미 해시로 검증한 뒤 SignInMismatchError를 발생시킵니다."""
        self._password_hasher.verify(password, self._dummy_hash)
        raise SignInMismatchError()
