"""Catalog DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

VENDOR_ID_PLACEHOLDER = "{vendor_id}"


@dataclass(frozen=True, slots=True)
class CatalogQuery:
    """카탈로그 조회 요청."""

    access_token: str = field(repr=False)
    vendor_id: str | None = None


@dataclass(frozen=True, slots=True)
class CandidateEndpoint:
    """후보 엔드포인트 템플릿."""

    name: str
    template: str

    @property
    def requires_vendor_id(self) -> bool:
        return VENDOR_ID_PLACEHOLDER in self.template

    def render(self, vendor_id: str | None) -> str | None:
        """vendor_id를 치환한 경로. vendor_id가 필요한데 없으면 None."""
        if not self.requires_vendor_id:
            return self.template
        if vendor_id is None or str(vendor_id) == "":
            return None
        return self.template.replace(VENDOR_ID_PLACEHOLDER, str(vendor_id))


@dataclass(frozen=True, slots=True)
class EndpointAttempt:
    """후보 엔드포인트 1회 시도 기록.

    status가 None이면 응답을 받지 못한 전송 오류입니다.
    """

    endpoint: str
    status: int | None
    status_text: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is not None and 200 <= self.status < 300 and self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "endpoint": self.endpoint,
            "status": self.status,
            "status_text": self.status_text,
            "error": self.error,
        }


@dataclass(frozen=True, slots=True)
class CatalogResult:
    """카탈로그 조회 결과.

    normalized_payload는 성공한 응답 본문 그대로입니다 (배열/래핑 객체 해석 안 함).
    diagnostics는 성공 시에도 모든 시도를 담습니다.
    """

    succeeded_endpoint: str
    normalized_payload: Any
    diagnostics: tuple[EndpointAttempt, ...] = ()
