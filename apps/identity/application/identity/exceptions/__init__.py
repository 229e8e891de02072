"""Identity exceptions."""

from apps.identity.application.identity.exceptions.identity import (
    MissingCredentialError,
    SignInMismatchError,
)

__all__ = ["SignInMismatchError", "MissingCredentialError"]
