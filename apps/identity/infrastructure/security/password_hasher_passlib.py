"""Passlib Password Hasher.

PasswordHasher 포트의 구현체입니다. Argon2를 사용합니다.
"""

from __future__ import annotations

from passlib.context import CryptContext
from passlib.exc import UnknownHashError


class PasslibPasswordHasher:
    """Passlib 기반 비밀번호 해셔.

    PasswordHasher 구현체.
    """

    def __init__(self, schemes: tuple[str, ...] = ("argon2",)) -> None:
        self._context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, password: str) -> str:
        """비밀번호 해시."""
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """비밀번호 검증.

        알 수 없는 해시 형식은 불일치로 처리합니다.
        """
        try:
            return self._context.verify(password, password_hash)
        except (UnknownHashError, ValueError):
            return False
