"""Identity application services."""

from apps.identity.application.identity.services.password_validator import PasswordValidator

__all__ = ["PasswordValidator"]
