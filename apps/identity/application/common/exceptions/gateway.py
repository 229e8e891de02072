"""Gateway Exceptions.

저장소 어댑터가 인프라 예외(SQLAlchemy 등)를 감싸서 던지는 예외입니다.
"""

from apps.identity.application.common.exceptions.base import ApplicationError


class GatewayError(ApplicationError):
    """외부 시스템 통신 실패."""

    def __init__(self, message: str = "Gateway error") -> None:
        super().__init__(message)


class DataMapperError(GatewayError):
    """저장소 읽기/쓰기 실패."""

    def __init__(self, message: str = "Data mapper error") -> None:
        super().__init__(message)


class UniqueViolationError(DataMapperError):
    """저장소 유니크 제약 위반."""

    def __init__(self, constraint: str | None = None) -> None:
        self.constraint = constraint
        super().__init__(f"Unique constraint violated: {constraint}")
