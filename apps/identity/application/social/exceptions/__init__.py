"""Social exceptions."""

from apps.identity.application.social.exceptions.social import (
    SocialProviderError,
    SocialProviderNotConfiguredError,
)

__all__ = ["SocialProviderError", "SocialProviderNotConfiguredError"]
