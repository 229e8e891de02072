"""Social Provider Exceptions."""

from apps.identity.application.common.exceptions.base import ApplicationError


class SocialProviderError(ApplicationError):
    """소셜 프로바이더 통신 실패.

    네트워크 오류, 타임아웃, 비정상 응답을 포함합니다.
    로그인 정보 불일치(SignInMismatchError)와 구분됩니다.
    """

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"Social provider error ({provider}): {reason}")


class SocialProviderNotConfiguredError(ApplicationError):
    """지원하는 프로바이더지만 구현체가 등록되지 않음 (설정 오류)."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Social provider not configured: {provider}")
