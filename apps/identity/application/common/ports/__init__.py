"""Common application ports."""

from apps.identity.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
