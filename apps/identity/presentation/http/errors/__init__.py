"""HTTP error handling."""

from apps.identity.presentation.http.errors.handlers import register_exception_handlers

__all__ = ["register_exception_handlers"]
