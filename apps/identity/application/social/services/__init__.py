"""Social application services."""

from apps.identity.application.social.services.social_identity_resolver import (
    SocialIdentityResolver,
)

__all__ = ["SocialIdentityResolver"]
