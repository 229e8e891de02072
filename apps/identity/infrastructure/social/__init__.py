"""Social provider adapters."""

from apps.identity.infrastructure.social.registry import build_social_identity_resolver

__all__ = ["build_social_identity_resolver"]
