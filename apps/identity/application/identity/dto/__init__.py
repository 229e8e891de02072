"""Identity DTOs."""

from apps.identity.application.identity.dto.user import (
    SignInResult,
    UserCreateRequest,
    UserResult,
    UserSignInRequest,
    UserUpdate,
)

__all__ = [
    "UserCreateRequest",
    "UserSignInRequest",
    "UserUpdate",
    "UserResult",
    "SignInResult",
]
