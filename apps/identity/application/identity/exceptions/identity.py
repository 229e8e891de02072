"""Identity Exceptions."""

from apps.identity.application.common.exceptions.base import ApplicationError


class SignInMismatchError(ApplicationError):
    """로그인 정보 불일치.

    존재하지 않는 계정과 틀린 비밀번호를 같은 예외, 같은 메시지로 표현합니다.
    둘을 나누면 가입 여부가 노출되므로 분리하지 마세요.
    """

    def __init__(self) -> None:
        super().__init__("invalid user data")


class MissingCredentialError(ApplicationError):
    """출처별 필수 입력값 누락 (예: 로컬 가입 시 비밀번호)."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")
