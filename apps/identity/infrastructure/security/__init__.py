"""Security adapters."""

from apps.identity.infrastructure.security.jwt_token_service import JwtTokenService
from apps.identity.infrastructure.security.password_hasher_passlib import PasslibPasswordHasher

__all__ = ["JwtTokenService", "PasslibPasswordHasher"]
