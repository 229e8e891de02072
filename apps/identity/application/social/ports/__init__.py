"""Social ports."""

from apps.identity.application.social.ports.social_info import SocialInfoService

__all__ = ["SocialInfoService"]
