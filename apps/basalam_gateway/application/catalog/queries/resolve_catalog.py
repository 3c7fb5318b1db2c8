"""ResolveCatalog Query.

대시보드가 카탈로그 데이터를 필요로 할 때 호출되는 Query입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.basalam_gateway.application.catalog.exceptions import AllEndpointsFailedError

if TYPE_CHECKING:
    from apps.basalam_gateway.application.catalog.dto import CatalogQuery, CatalogResult
    from apps.basalam_gateway.application.catalog.ports import CatalogResolver

logger = logging.getLogger(__name__)


class ResolveCatalogQueryService:
    """카탈로그 조회 Query Service.

    조회 결과의 진단 기록을 성공/실패 모두 로그로 남깁니다.
    """

    def __init__(self, resolver: "CatalogResolver") -> None:
        self._resolver = resolver

    async def execute(self, query: "CatalogQuery") -> "CatalogResult":
        try:
            result = await self._resolver.resolve_catalog(query)
        except AllEndpointsFailedError as e:
            logger.error(
                "All catalog endpoints failed",
                extra={
                    "vendor_id": query.vendor_id,
                    "diagnostics": [attempt.to_dict() for attempt in e.diagnostics],
                },
            )
            raise

        logger.info(
            "Catalog resolved",
            extra={
                "vendor_id": query.vendor_id,
                "endpoint": result.succeeded_endpoint,
                "attempts": len(result.diagnostics),
            },
        )
        return result
