"""Catalog Exceptions."""

from __future__ import annotations

from typing import Iterable

from apps.basalam_gateway.application.catalog.dto import EndpointAttempt
from apps.basalam_gateway.application.common.exceptions.base import ApplicationError


class AllEndpointsFailedError(ApplicationError):
    """모든 후보 엔드포인트 실패.

    호출자가 "카탈로그 권한 없음"과 "전부 404"를 구분할 수 있도록
    시도별 진단 기록을 함께 전달합니다.
    """

    def __init__(self, diagnostics: Iterable[EndpointAttempt]) -> None:
        self.diagnostics = tuple(diagnostics)
        super().__init__(
            f"All catalog endpoints failed ({len(self.diagnostics)} attempted)"
        )

    @property
    def statuses(self) -> list[int | None]:
        return [attempt.status for attempt in self.diagnostics]
