"""Domain Exceptions."""

from apps.identity.domain.exceptions.base import DomainError
from apps.identity.domain.exceptions.provider import UnsupportedProviderError
from apps.identity.domain.exceptions.user import UserAlreadyExistsError, UserNotFoundError

__all__ = [
    "DomainError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "UnsupportedProviderError",
]
