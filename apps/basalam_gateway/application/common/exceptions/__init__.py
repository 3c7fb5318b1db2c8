"""Application Exceptions.

공통 예외만 포함합니다. 도메인별 예외는 각 도메인에서 직접 import하세요:
  - apps.basalam_gateway.application.oauth.exceptions.*
  - apps.basalam_gateway.application.catalog.exceptions.*
"""

from apps.basalam_gateway.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
