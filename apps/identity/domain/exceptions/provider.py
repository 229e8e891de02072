"""Provider domain exceptions."""

from __future__ import annotations

from apps.identity.domain.exceptions.base import DomainError


class UnsupportedProviderError(DomainError):
    """알 수 없는 프로바이더 태그."""

    def __init__(self, provider: str | None) -> None:
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")
