"""Identity ports."""

from apps.identity.application.identity.ports.password_hasher import PasswordHasher
from apps.identity.application.identity.ports.token_issuer import TokenIssuer
from apps.identity.application.identity.ports.user_gateway import (
    UserCommandGateway,
    UserQueryGateway,
)

__all__ = [
    "UserQueryGateway",
    "UserCommandGateway",
    "PasswordHasher",
    "TokenIssuer",
]
