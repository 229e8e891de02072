"""Application Exceptions.

공통 예외만 포함합니다. 도메인별 예외는 각 도메인에서 직접 import하세요:
  - apps.identity.application.identity.exceptions.*
  - apps.identity.application.social.exceptions.*
"""

from apps.identity.application.common.exceptions.base import ApplicationError
from apps.identity.application.common.exceptions.gateway import (
    DataMapperError,
    GatewayError,
    UniqueViolationError,
)

__all__ = [
    "ApplicationError",
    "GatewayError",
    "DataMapperError",
    "UniqueViolationError",
]
