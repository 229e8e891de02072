"""HTTP schemas."""

from apps.identity.presentation.http.schemas.user import (
    CreateUserRequest,
    SignInRequest,
    SignInResponse,
    StarRatingResponse,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "CreateUserRequest",
    "SignInRequest",
    "UpdateUserRequest",
    "UserResponse",
    "SignInResponse",
    "StarRatingResponse",
]
