"""EndpointFallbackResolver.

CatalogResolver 포트의 httpx 구현체입니다.

업스트림의 올바른 카탈로그 엔드포인트를 정적으로 알 수 없으므로
후보를 순서대로 하나씩 시도하고, 첫 2xx 응답에서 멈춥니다.
모든 시도는 진단 기록에 남아 후보 추가/순서 조정의 근거가 됩니다.
"""

from __future__ import annotations

import logging
from typing import Sequence

import httpx

from apps.basalam_gateway.application.catalog.candidates import DEFAULT_CATALOG_CANDIDATES
from apps.basalam_gateway.application.catalog.dto import (
    CandidateEndpoint,
    CatalogQuery,
    CatalogResult,
    EndpointAttempt,
)
from apps.basalam_gateway.application.catalog.exceptions import AllEndpointsFailedError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://openapi.basalam.com"
DEFAULT_TIMEOUT_SECONDS = 8.0
MAX_ERROR_TEXT_LENGTH = 500


def _truncate(text: str) -> str:
    if len(text) <= MAX_ERROR_TEXT_LENGTH:
        return text
    return text[:MAX_ERROR_TEXT_LENGTH] + "..."


class EndpointFallbackResolver:
    """후보 엔드포인트 순차 시도 리졸버.

    - vendor_id가 필요한 후보는 vendor_id가 없으면 시도하지 않습니다 (진단에도 없음).
    - 시도는 엄격히 순차적이며 각 요청은 timeout으로 제한됩니다.
    - 전송 오류(타임아웃 포함)는 기록 후 다음 후보로 넘어갑니다.
    - 응답 본문의 형태(배열/래핑 객체)는 해석하지 않습니다.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        candidates: Sequence[CandidateEndpoint] = DEFAULT_CATALOG_CANDIDATES,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._candidates = tuple(candidates)
        self._timeout = timeout_seconds
        self._transport = transport

    @property
    def candidates(self) -> tuple[CandidateEndpoint, ...]:
        return self._candidates

    def build_endpoints(self, vendor_id: str | None) -> list[str]:
        """시도할 엔드포인트 URL 목록 (후보 순서 유지)."""
        endpoints = []
        for candidate in self._candidates:
            path = candidate.render(vendor_id)
            if path is None:
                logger.debug(f"Skipping {candidate.name}: vendor_id required")
                continue
            endpoints.append(f"{self._base_url}{path}")
        return endpoints

    async def resolve_catalog(self, query: CatalogQuery) -> CatalogResult:
        """카탈로그를 조회합니다.

        Raises:
            AllEndpointsFailedError: 시도한 후보가 모두 실패 (진단 기록 포함)
        """
        endpoints = self.build_endpoints(query.vendor_id)
        headers = {
            "Authorization": f"Bearer {query.access_token}",
            "Accept": "application/json",
        }
        diagnostics: list[EndpointAttempt] = []

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            for endpoint in endpoints:
                attempt, payload = await self._attempt(client, endpoint, headers)
                diagnostics.append(attempt)
                if attempt.ok:
                    return CatalogResult(
                        succeeded_endpoint=endpoint,
                        normalized_payload=payload,
                        diagnostics=tuple(diagnostics),
                    )

        raise AllEndpointsFailedError(diagnostics)

    async def _attempt(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        headers: dict[str, str],
    ) -> tuple[EndpointAttempt, object]:
        try:
            response = await client.get(endpoint, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"Catalog endpoint {endpoint} failed: {type(e).__name__}")
            return EndpointAttempt(endpoint, None, type(e).__name__, str(e) or type(e).__name__), None

        logger.info(
            "Catalog endpoint responded",
            extra={"endpoint": endpoint, "status": response.status_code},
        )

        if not response.is_success:
            return (
                EndpointAttempt(
                    endpoint,
                    response.status_code,
                    response.reason_phrase,
                    _truncate(response.text),
                ),
                None,
            )

        try:
            payload = response.json()
        except ValueError:
            return (
                EndpointAttempt(
                    endpoint,
                    response.status_code,
                    response.reason_phrase,
                    "Response body is not valid JSON",
                ),
                None,
            )

        return EndpointAttempt(endpoint, response.status_code, response.reason_phrase), payload
