"""Domain services."""

from apps.identity.domain.services.user_service import ProfileFields, UserService

__all__ = ["UserService", "ProfileFields"]
