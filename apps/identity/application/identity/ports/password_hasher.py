"""PasswordHasher Port."""

from typing import Protocol


class PasswordHasher(Protocol):
    """단방향 비밀번호 해시 인터페이스.

    구현체:
        - PasslibPasswordHasher (infrastructure/security/)
    """

    def hash(self, password: str) -> str:
        """평문 비밀번호를 해시합니다."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """평문 비밀번호와 저장된 해시를 비교합니다."""
        ...
