"""Application commands (write operations)."""

from apps.identity.application.commands.create_user import CreateUserInteractor
from apps.identity.application.commands.delete_user import DeleteUserInteractor
from apps.identity.application.commands.sign_in import SignInInteractor
from apps.identity.application.commands.update_user import UpdateUserInteractor

__all__ = [
    "CreateUserInteractor",
    "SignInInteractor",
    "UpdateUserInteractor",
    "DeleteUserInteractor",
]
