"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.identity.application.common.exceptions import ApplicationError, DataMapperError
from apps.identity.application.identity.exceptions import (
    MissingCredentialError,
    SignInMismatchError,
)
from apps.identity.application.social.exceptions import (
    SocialProviderError,
    SocialProviderNotConfiguredError,
)
from apps.identity.domain.exceptions import (
    DomainError,
    UnsupportedProviderError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: Exception, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": getattr(exc, "message", str(exc)), "code": code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(UserAlreadyExistsError)
    async def already_exists_handler(request: Request, exc: UserAlreadyExistsError):
        return _error_response(409, exc, "ALREADY_EXISTS")

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return _error_response(404, exc, "NOT_FOUND")

    @app.exception_handler(SignInMismatchError)
    async def signin_mismatch_handler(request: Request, exc: SignInMismatchError):
        return _error_response(401, exc, "SIGNIN_MISMATCH")

    @app.exception_handler(UnsupportedProviderError)
    async def unsupported_provider_handler(request: Request, exc: UnsupportedProviderError):
        return _error_response(400, exc, "UNSUPPORTED_PROVIDER")

    @app.exception_handler(MissingCredentialError)
    async def missing_credential_handler(request: Request, exc: MissingCredentialError):
        return _error_response(422, exc, "MISSING_CREDENTIAL")

    @app.exception_handler(SocialProviderError)
    async def provider_failure_handler(request: Request, exc: SocialProviderError):
        logger.warning("Social provider failure: %s", exc.message)
        return _error_response(502, exc, "PROVIDER_FAILURE")

    @app.exception_handler(SocialProviderNotConfiguredError)
    async def provider_not_configured_handler(
        request: Request, exc: SocialProviderNotConfiguredError
    ):
        logger.error("Social provider not configured: %s", exc.message)
        return _error_response(500, exc, "PROVIDER_NOT_CONFIGURED")

    @app.exception_handler(DataMapperError)
    async def storage_failure_handler(request: Request, exc: DataMapperError):
        logger.exception("Storage failure: %s", exc.message)
        return _error_response(503, exc, "STORAGE_FAILURE")

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error_response(400, exc, "DOMAIN_ERROR")

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error_response(400, exc, "APPLICATION_ERROR")
