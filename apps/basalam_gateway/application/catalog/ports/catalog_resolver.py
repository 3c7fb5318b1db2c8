"""CatalogResolver Port."""

from typing import Protocol

from apps.basalam_gateway.application.catalog.dto import CatalogQuery, CatalogResult


class CatalogResolver(Protocol):
    """카탈로그 조회 인터페이스.

    구현체:
        - EndpointFallbackResolver (infrastructure/upstream/)
    """

    async def resolve_catalog(self, query: CatalogQuery) -> CatalogResult:
        """카탈로그 조회.

        Raises:
            AllEndpointsFailedError: 시도한 모든 후보 실패
        """
        ...
