"""Products Controller.

벤더 카탈로그 조회 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query

from apps.basalam_gateway.application.catalog.dto import CatalogQuery
from apps.basalam_gateway.application.catalog.queries import ResolveCatalogQueryService
from apps.basalam_gateway.presentation.http.auth import get_upstream_access_token
from apps.basalam_gateway.presentation.http.schemas import (
    CatalogResponse,
    EndpointAttemptSchema,
)
from apps.basalam_gateway.setup.dependencies import get_resolve_catalog_service

router = APIRouter()


@router.get(
    "/products",
    response_model=CatalogResponse,
    summary="벤더 상품 목록 조회",
)
async def list_products(
    vendor_id: str | None = Query(None, description="벤더 ID"),
    access_token: str = Depends(get_upstream_access_token),
    service: ResolveCatalogQueryService = Depends(get_resolve_catalog_service),
) -> CatalogResponse:
    """후보 엔드포인트를 순서대로 시도해 상품 목록을 조회합니다.

    모든 후보 실패 시 AllEndpointsFailedError → 502 (ALL_ENDPOINTS_FAILED, 진단 포함).
    """
    result = await service.execute(CatalogQuery(access_token=access_token, vendor_id=vendor_id))
    return CatalogResponse(
        endpoint=result.succeeded_endpoint,
        data=result.normalized_payload,
        diagnostics=[EndpointAttemptSchema.model_validate(a) for a in result.diagnostics],
    )
