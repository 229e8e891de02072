"""Domain enums."""

from apps.identity.domain.enums.auth_provider import AuthProvider

__all__ = ["AuthProvider"]
